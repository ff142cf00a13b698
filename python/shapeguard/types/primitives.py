"""Primitive guard factories."""

from ..core.cache import Guard
from ..core.values import illegal, is_number, type_of


def a_null() -> Guard:
    """A guard factory for None."""
    return lambda value: "" if value is None else illegal(value, "null")


def a_boolean() -> Guard:
    """A guard factory for booleans."""
    return lambda value: "" if isinstance(value, bool) else illegal(value, "boolean")


def a_number() -> Guard:
    """
    A guard factory for numbers.

    Both int and float are numbers; bool is not, even though it subclasses int.
    """
    return lambda value: "" if is_number(value) else illegal(value, "number")


def a_string() -> Guard:
    """A guard factory for strings."""
    return lambda value: "" if isinstance(value, str) else illegal(value, "string")


def a_function() -> Guard:
    """
    A guard factory for functions.

    Accepts any callable that is not a record or an array: plain functions,
    lambdas, coroutine functions, classes, and callable instances.
    """
    return lambda value: "" if type_of(value) == "function" else illegal(value, "function")


def an_unknown() -> Guard:
    """
    A guard factory accepting every value.

    Useful as a placeholder where a guard is required but nothing needs to
    be checked, or as the rest guard of an open an_object schema.
    """
    return lambda value: ""
