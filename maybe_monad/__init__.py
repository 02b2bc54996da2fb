"""
maybe-monad: an optional value container with functional combinators.

Provides ``Maybe`` (``Just`` / ``Nothing``), safe extraction helpers, functor
lifting, monadic bind and flattening.
"""

__version__ = "0.1.0"

from .monads import (
    Maybe, Just, Nothing,
    is_just, is_nothing, unsafe_get_just,
    just, nothing, from_optional,
    just_with_default, throw_on_nothing,
    lift_maybe, lift2_maybe, and_then_maybe, flatten_maybe,
    cat_maybes, sequence_maybes, first_just,
    identity, compose, pipe,
)
from .utils.config_manager import ConfigurationError
from .utils.error_manager import (
    MaybeError,
    ContractViolationError,
    CompositionError,
    ArityError,
    SignatureMismatchError,
)

__all__ = [
    'Maybe', 'Just', 'Nothing',
    'is_just', 'is_nothing', 'unsafe_get_just',
    'just', 'nothing', 'from_optional',
    'just_with_default', 'throw_on_nothing',
    'lift_maybe', 'lift2_maybe', 'and_then_maybe', 'flatten_maybe',
    'cat_maybes', 'sequence_maybes', 'first_just',
    'identity', 'compose', 'pipe',
    # Errors
    'MaybeError', 'ContractViolationError', 'CompositionError',
    'ArityError', 'SignatureMismatchError', 'ConfigurationError',
]
