"""Type predicates built from guardings."""

from typing import Any, Callable

from ..core.cache import Guarding, resolve


def is_(guarding: Guarding) -> Callable[[Any], bool]:
    """
    Create a type predicate from a guarding.

    The predicate never mutates or remembers the values it checks: the same
    value is checked again on every call. Values containing reference cycles
    raise RecursionError.

    Example:
        is_point = is_(an_object({"x": a_number, "y": a_number}))
        is_point({"x": 1, "y": 2})  # True
        is_point({"x": 1})          # False
    """
    guard = resolve(guarding)

    if guard is None:
        raise TypeError("illegal guarding None, expected a guard or a guard factory")

    def predicate(value: Any) -> bool:
        return guard(value) == ""

    return predicate
