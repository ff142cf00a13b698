"""
Memoizing resolution of guardings, with support for recursive factories.

A guarding is either a guard, a callable taking the value to check, or a
factory, a callable declaring no required positional parameters that returns
a guard. an_array and an_object, whose parameters are all optional, are
factories. Factories are told apart from guards by their signature; they are
never called speculatively.

Factories are materialized once and memoized by identity. Before a factory
runs, a Deferred stand-in is cached under its key, so a factory that resolves
itself (or a peer that resolves it back) during construction gets the
stand-in instead of recursing forever. Once construction completes the entry
is overwritten with the real guard, which the stand-in records and forwards
to from then on.

The cache holds factories weakly: entries go away together with their
factory. Bound methods are fresh objects on every attribute access, so they
are resolved correctly but memoized only while the caller holds them; stand-ins
reference them through weakref.WeakMethod.
"""

import inspect
import logging
import threading
import weakref
from typing import Any, Callable, NamedTuple, Optional, Union

logger = logging.getLogger(__name__)

Guard = Callable[[Any], str]
Factory = Callable[[], Guard]
Guarding = Union[Guard, Factory]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

_cache: "weakref.WeakKeyDictionary[Factory, Guard]" = weakref.WeakKeyDictionary()
_lock = threading.RLock()


class CacheInfo(NamedTuple):
    size: int
    pending: int


class Deferred:
    """
    Stand-in guard for a factory still under construction.

    The factory is held weakly, so a finished guard containing its own
    stand-in never keeps its cache key alive. Once construction completes the
    stand-in records the finished guard and keeps forwarding to it even after
    the factory itself (or the instance of a bound method factory) is gone.
    """

    __slots__ = ("_factory", "_guard", "__weakref__")

    def __init__(self, factory: Factory):
        self._factory = weakref.WeakMethod(factory) if inspect.ismethod(factory) else weakref.ref(factory)
        self._guard: Optional[Guard] = None

    def __call__(self, value: Any) -> str:
        guard = self._guard

        if guard is None:
            factory = self._factory()
            # Waits for, or rebuilds after eviction, the entry of a live factory
            guard = materialize(factory) if factory is not None else None

        if guard is None or guard is self:
            # Factory never finished: treat the recursive reference as valid
            logger.debug("deferred guard for unfinished factory %r accepted value", self._factory())
            return ""

        return guard(value)

    def __repr__(self) -> str:
        return f"Deferred({self._factory()!r})"


def is_factory(source: Callable[..., Any]) -> bool:
    """
    Check whether a callable is a factory: it declares no required positional parameters.

    Optional and variadic positional parameters do not count, so an_array and
    an_object are factories.
    """
    try:
        parameters = inspect.signature(source).parameters.values()
    except (TypeError, ValueError):
        return False
    return not [p for p in parameters if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty]


def resolve(source: Optional[Guarding]) -> Optional[Guard]:
    """
    Resolve a guarding to a concrete guard.

    Args:
        source: A guard, a guard factory, or None

    Returns:
        None for None, guards unchanged, and the memoized guard for factories

    Raises:
        TypeError: If source is not callable, or is a factory that does not
            support weak references

    Example:
        def a_tree():
            return an_array(a_tree)

        guard = resolve(a_tree)
        assert resolve(a_tree) is guard
    """
    if source is None:
        return None
    if not callable(source):
        raise TypeError(f"illegal guarding {source!r}, expected a guard or a guard factory")
    if is_factory(source):
        return materialize(source)
    return source


def materialize(factory: Factory) -> Guard:
    """Construct the guard for a factory at most once, breaking construction cycles."""
    with _lock:
        cached = _cache.get(factory)

        if cached is not None:
            return cached

        deferred = Deferred(factory)
        _cache[factory] = deferred

        logger.debug("materializing guard factory %r", factory)

        try:
            guard = factory()
        except BaseException:
            if _cache.get(factory) is deferred:
                del _cache[factory]
                logger.debug("evicted guard factory %r after failed construction", factory)
            raise

        _cache[factory] = guard
        deferred._guard = guard

        logger.debug("materialized guard factory %r", factory)

        return guard


def clear_cache() -> None:
    """Drop every memoized guard; factories are materialized again on next use."""
    with _lock:
        _cache.clear()
    logger.debug("guard cache cleared")


def cache_info() -> CacheInfo:
    """Report the number of cached factories and how many are still under construction."""
    with _lock:
        guards = list(_cache.values())
    return CacheInfo(
        size=len(guards),
        pending=len([guard for guard in guards if isinstance(guard, Deferred)]),
    )
