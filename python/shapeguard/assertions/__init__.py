"""Assertions applying guards to values."""

from .predicate import is_
from .cast import as_, TypeValidationError

__all__ = ["is_", "as_", "TypeValidationError"]
