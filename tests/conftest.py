"""Global pytest configuration for the Shapeguard test suite.

Registers the markers used across the suite and makes sure every test starts
from an empty resolver cache.
"""

from typing import Any, Callable

import pytest

from shapeguard import Guard, clear_cache


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test")
    config.addinivalue_line("markers", "guards: tests primitive and array guards")
    config.addinivalue_line("markers", "objects: tests object guards")
    config.addinivalue_line("markers", "combinators: tests all/any combinators")
    config.addinivalue_line("markers", "assertions: tests is_/as_ assertions")
    config.addinivalue_line("markers", "cache: tests resolver caching")
    config.addinivalue_line("markers", "recursion: tests recursive guard definitions")


@pytest.fixture(autouse=True)
def fresh_cache():
    """Clear the resolver cache before and after each test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def lowercase() -> Callable[[], Guard]:
    """Factory for a custom guard accepting lowercase ASCII words."""
    def a_lowercase() -> Guard:
        def guard(value: Any) -> str:
            ok = isinstance(value, str) and value.isascii() and value.isalpha() and value.islower()
            return "" if ok else "expected lowercase"
        return guard
    return a_lowercase


# Values of every runtime type, keyed by type label
SAMPLES = {
    "null": None,
    "boolean": True,
    "number": 42,
    "string": "hello",
    "array": [1, 2],
    "object": {"a": 1},
    "function": len,
}
