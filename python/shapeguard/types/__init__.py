"""Guard factories and combinators."""

from .primitives import a_null, a_boolean, a_number, a_string, a_function, an_unknown
from .structures import an_array, an_object
from .combinators import all, any

__all__ = [
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
]
