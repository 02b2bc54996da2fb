"""Maybe monad and its combinators."""

from .maybe import (
    Maybe, Just, Nothing,
    is_just, is_nothing, unsafe_get_just,
    just, nothing, from_optional,
    just_with_default, throw_on_nothing,
)
from .composition import (
    lift_maybe, lift2_maybe, and_then_maybe, flatten_maybe,
    cat_maybes, sequence_maybes, first_just,
    identity, compose, pipe,
)

__all__ = [
    # Container
    'Maybe', 'Just', 'Nothing',
    'is_just', 'is_nothing', 'unsafe_get_just',
    # Construction
    'just', 'nothing', 'from_optional',
    # Extraction
    'just_with_default', 'throw_on_nothing',
    # Combinators
    'lift_maybe', 'lift2_maybe', 'and_then_maybe', 'flatten_maybe',
    'cat_maybes', 'sequence_maybes', 'first_just',
    'identity', 'compose', 'pipe',
]
