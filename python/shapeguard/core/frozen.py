"""Immutable containers for values that passed a validating cast."""

from typing import Any


class Frozen:
    """Mixin blocking attribute assignment and carrying the validation brand."""

    def __setattr__(self, name: str, value: Any) -> None:
        raise TypeError(f"cannot set attribute '{name}' on frozen {type(self).__name__}")

    def __delattr__(self, name: str) -> None:
        raise TypeError(f"cannot delete attribute '{name}' on frozen {type(self).__name__}")

    @property
    def guarding(self) -> Any:
        """The guarding that validated this value, or None if unbranded."""
        return self.__dict__.get("_guarding")


class FrozenRecord(Frozen, dict):
    """Read-only dict."""

    def _immutable(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(f"{type(self).__name__} is immutable")

    __setitem__ = _immutable
    __delitem__ = _immutable
    __ior__ = _immutable
    clear = _immutable
    pop = _immutable
    popitem = _immutable
    setdefault = _immutable
    update = _immutable

    def __repr__(self) -> str:
        return f"FrozenRecord({dict.__repr__(self)})"


class FrozenArray(Frozen, tuple):
    """Tuple able to carry a validation brand."""

    def __repr__(self) -> str:
        return f"FrozenArray({list(self)!r})"


def branded(value: Any) -> Any:
    """Return the guarding recorded on a frozen value, or None."""
    return value.guarding if isinstance(value, Frozen) else None


def freeze(value: Any) -> Any:
    """
    Deep-freeze plain records and arrays.

    Nested dicts become FrozenRecord, lists and tuples become FrozenArray;
    values already frozen are reused as they are.

    Raises:
        RecursionError: If the value contains reference cycles
    """
    if isinstance(value, Frozen):
        return value
    if type(value) is dict:
        return FrozenRecord((key, freeze(item)) for key, item in value.items())
    if type(value) in (list, tuple):
        return FrozenArray(freeze(item) for item in value)
    return value


def seal(value: Any, guarding: Any) -> Any:
    """
    Freeze a structural value and brand it with the guarding that validated it.

    A value already branded by another guarding is copied first, so existing
    brands are never replaced.
    """
    if branded(value) is not None:
        value = type(value)(value)
    sealed = freeze(value)
    object.__setattr__(sealed, "_guarding", guarding)
    return sealed
