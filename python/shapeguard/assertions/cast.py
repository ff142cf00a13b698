"""Validating casts built from guardings."""

from typing import Any, Callable

from ..core.cache import Guarding, resolve
from ..core.frozen import branded, seal
from ..core.values import is_array, is_record


class TypeValidationError(TypeError):
    """Raised when a validating cast rejects a value."""
    pass


def as_(guarding: Guarding) -> Callable[[Any], Any]:
    """
    Create a validating cast from a guarding.

    Records and arrays that pass are returned deep-frozen, as FrozenRecord and
    FrozenArray, and branded with the guarding: casting a branded value again
    with the same guarding returns it at once without re-validation. Other
    values are returned unchanged and checked on every call.

    For branding to pay off the guarding must keep its identity: pass
    module-level factories or guards, not lambdas created on the spot.

    Args:
        guarding: The guarding to validate with

    Returns:
        A cast returning the validated (and, for records and arrays, frozen) value

    Raises:
        TypeValidationError: From the cast, with the guard diagnostic as message
        RecursionError: From the cast, if the value contains reference cycles

    Example:
        to_user = as_(an_object({"name": a_string}))
        user = to_user({"name": "Alice"})
        assert to_user(user) is user
        user["name"] = "Bob"  # TypeError: FrozenRecord is immutable
    """
    guard = resolve(guarding)

    if guard is None:
        raise TypeError("illegal guarding None, expected a guard or a guard factory")

    def cast(value: Any) -> Any:
        structural = is_record(value) or is_array(value)

        if structural and branded(value) is guarding:
            return value

        report = guard(value)

        if report:
            raise TypeValidationError(report)

        return seal(value, guarding) if structural else value

    return cast
