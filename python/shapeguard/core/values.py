"""Runtime type tags shared by every diagnostic producer."""

import math
from typing import Any, Union

from .frozen import FrozenArray, FrozenRecord

Constant = Union[None, bool, int, float, str]


class Missing:
    """Stand-in for a record property that is not there."""

    _instance = None

    def __new__(cls) -> "Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = Missing()


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return type(value) in (list, tuple, FrozenArray)


def is_record(value: Any) -> bool:
    """Check for a plain data record: a dict proper, not a subclass or class instance."""
    return type(value) in (dict, FrozenRecord)


def is_constant(value: Any) -> bool:
    return value is None or isinstance(value, (bool, int, float, str))


def type_of(value: Any) -> str:
    """
    Describe the runtime type of a value for diagnostics.

    Example:
        type_of(None)       # "null"
        type_of([1, 2])     # "array"
        type_of({"a": 1})   # "object"
        type_of(b"")        # "bytes"
    """
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "boolean"
    if is_number(value):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_array(value):
        return "array"
    if is_record(value):
        return "object"
    if callable(value):
        return "function"
    return type(value).__name__


def literal(value: Any) -> str:
    """Render a value the way constant mismatch diagnostics show it."""
    if value is None:
        return "null"
    if value is MISSING:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        # Integral floats print without a fraction: 1.0 is <1>
        return str(int(value)) if value.is_integer() else str(value)
    if is_number(value) or isinstance(value, str):
        return str(value)
    return type_of(value)


def same(expected: Constant, value: Any) -> bool:
    """Strict equality between a schema constant and a value: no bool/number crossover."""
    if expected is None:
        return value is None
    if isinstance(expected, bool):
        return isinstance(value, bool) and value == expected
    if isinstance(expected, str):
        return isinstance(value, str) and value == expected
    return is_number(value) and value == expected


def illegal(value: Any, expected: str) -> str:
    return f"illegal <{type_of(value)}> value, expected <{expected}>"
