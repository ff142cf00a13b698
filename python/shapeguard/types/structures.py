"""Array and object guard factories."""

from collections.abc import Mapping
from typing import Any, Optional, Union

from ..core.cache import Guard, Guarding, resolve
from ..core.values import Constant, MISSING, illegal, is_array, is_constant, is_record, literal, same


def an_array(element: Optional[Guarding] = None) -> Guard:
    """
    An array guard factory.

    Args:
        element: Optional guarding applied to every element, in index order

    Returns:
        A guard accepting lists and tuples; with an element guarding, the
        first failing element is reported as "[<index>]: <diagnostic>"

    Example:
        an_array()([1, "x"])                # ""
        an_array(a_number)([1, "x", 3])     # "[1]: illegal <string> value, expected <number>"
    """
    guard = resolve(element)

    def array(value: Any) -> str:
        if not is_array(value):
            return illegal(value, "array")

        if guard is None:
            return ""

        for index, item in enumerate(value):
            report = guard(item)
            if report:
                return f"[{index}]: {report}"

        return ""

    return array


def an_object(
    schema: Union[None, Guarding, Mapping[Any, Union[Constant, Guarding]]] = None,
    rest: Optional[Guarding] = None,
) -> Guard:
    """
    An object guard factory.

    The mode depends on the arguments:

    - an_object(): any plain record
    - an_object(key, value): every key must pass the key guarding and every
      value the value guarding
    - an_object(schema): a closed record; each schema entry is either a
      constant matched by strict equality or a guarding, and properties not
      in the schema are rejected
    - an_object(schema, rest): an open record; properties not in the schema
      are checked against rest

    Declared properties are always checked before undeclared ones, and the
    first failure is reported as "<key>: <diagnostic>".

    Raises:
        TypeError: If the arguments match none of the modes

    Example:
        shape = an_object({"kind": "circle", "radius": a_number})
        shape({"kind": "circle", "radius": 1})               # ""
        shape({"kind": "circle", "radius": 1, "x": 0})       # "x: unexpected property"
    """
    if schema is None:
        return record
    if callable(schema) and rest is not None:
        return entries(schema, rest)
    if isinstance(schema, Mapping):
        return properties(schema, rest)

    raise TypeError(f"illegal object schema {schema!r}, expected a mapping or a key and value guarding")


def record(value: Any) -> str:
    return "" if is_record(value) else illegal(value, "object")


def entries(key: Guarding, value: Guarding) -> Guard:
    key_guard = resolve(key)
    value_guard = resolve(value)

    def guard(target: Any) -> str:
        if not is_record(target):
            return illegal(target, "object")

        for name, item in target.items():
            report = key_guard(name) or value_guard(item)
            if report:
                return f"{name}: {report}"

        return ""

    return guard


def properties(schema: Mapping[Any, Union[Constant, Guarding]], rest: Optional[Guarding]) -> Guard:
    guards = {
        name: constant(entry) if is_constant(entry) else resolve(entry)
        for name, entry in schema.items()
    }
    extra = resolve(rest)

    def guard(target: Any) -> str:
        if not is_record(target):
            return illegal(target, "object")

        for name, check in guards.items():
            report = check(target.get(name, MISSING))
            if report:
                return f"{name}: {report}"

        for name, item in target.items():
            if name in guards:
                continue

            if extra is None:
                return f"{name}: unexpected property"

            report = extra(item)
            if report:
                return f"{name}: {report}"

        return ""

    return guard


def constant(expected: Constant) -> Guard:
    def guard(value: Any) -> str:
        if same(expected, value):
            return ""
        return f"unexpected <{literal(value)}> value, expected <{literal(expected)}>"

    return guard
