"""Core resolution and value classification."""

from .cache import (
    Guard, Factory, Guarding, CacheInfo, Deferred,
    resolve, materialize, is_factory, clear_cache, cache_info,
)
from .frozen import FrozenRecord, FrozenArray, branded, freeze, seal
from .values import Constant, MISSING, type_of

__all__ = [
    "Guard", "Factory", "Guarding", "Constant",
    "CacheInfo", "Deferred",
    "resolve", "materialize", "is_factory", "clear_cache", "cache_info",
    "FrozenRecord", "FrozenArray", "branded", "freeze", "seal",
    "MISSING", "type_of",
]
