"""Conjunction and disjunction of guards."""

import re
from collections.abc import Iterable, Mapping
from typing import Any

from ..core.cache import Guard, Guarding, resolve
from ..core.values import type_of

# Primitive factory names mapped to their type labels
TYPES = {name: name.lower() for name in ("Null", "Boolean", "Number", "String", "Function")}

ARTICLE = re.compile(r"^an?(?=[A-Z])|^an?_")


def all(sources: Iterable[Guarding]) -> Guard:
    """
    Combine guardings into a conjunctive guard.

    Every source is resolved when the guard is created. The guard checks
    them in the given order and returns the first diagnostic; with no
    sources it accepts everything.

    Example:
        named = an_object({"name": a_string}, an_unknown)
        dated = an_object({"date": a_string}, an_unknown)
        entry = all([named, dated])
    """
    guards = [resolve(source) for source in sources]

    def conjunction(value: Any) -> str:
        for guard in guards:
            report = guard(value)
            if report:
                return report
        return ""

    return conjunction


def any(sources: Mapping[str, Guarding]) -> Guard:
    """
    Combine named guardings into a disjunctive guard.

    Every source is resolved when the guard is created. The guard accepts a
    value as soon as one source accepts it; otherwise it reports the labels
    derived from the names, rather than each branch's diagnostic. With no
    sources it rejects everything.

    Args:
        sources: Mapping from names to guardings, in evaluation order

    Raises:
        TypeError: If sources is not a mapping

    Example:
        guard = any({"a_number": a_number, "a_string": a_string})
        guard(True)  # "unexpected <boolean> value, expected <number> or <string>"
    """
    if not isinstance(sources, Mapping):
        raise TypeError(f"illegal sources {sources!r}, expected a mapping from names to guardings")

    guards = [resolve(source) for source in sources.values()]

    if not guards:
        return lambda value: f"unexpected <{type_of(value)}> value"

    expected = listing([f"<{label(str(name))}>" for name in sources])

    def disjunction(value: Any) -> str:
        for guard in guards:
            if not guard(value):
                return ""
        return f"unexpected <{type_of(value)}> value, expected {expected}"

    return disjunction


def label(name: str) -> str:
    """Derive a type label from a guard name: "aNumber" and "a_number" become "number"."""
    stripped = ARTICLE.sub("", name, count=1)
    return TYPES.get(stripped, stripped)


def listing(names: list[str]) -> str:
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} or {names[-1]}"
