"""Shapeguard: runtime structural type validation with composable guards."""

import logging

from shapeguard.core import (
    # Resolution
    Guard, Factory, Guarding, Constant, CacheInfo,
    resolve, clear_cache, cache_info,
    # Values
    MISSING, FrozenRecord, FrozenArray, type_of,
)
from shapeguard.types import (
    # Primitive guards
    a_null, a_boolean, a_number, a_string, a_function, an_unknown,
    # Structural guards
    an_array, an_object,
    # Combinators
    all, any,
)
from shapeguard.assertions import is_, as_, TypeValidationError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Assertions
    "is_",
    "as_",
    "TypeValidationError",
    # Primitive guards
    "a_null",
    "a_boolean",
    "a_number",
    "a_string",
    "a_function",
    "an_unknown",
    # Structural guards
    "an_array",
    "an_object",
    # Combinators
    "all",
    "any",
    # Resolution
    "Guard",
    "Factory",
    "Guarding",
    "Constant",
    "CacheInfo",
    "resolve",
    "clear_cache",
    "cache_info",
    # Values
    "MISSING",
    "FrozenRecord",
    "FrozenArray",
    "type_of",
]
