"""Maybe monad for handling optional values functionally."""

from __future__ import annotations

import copy
import inspect
from typing import TypeVar, Generic, Callable, Optional, Any, Iterator, Type, Union

from maybe_monad.utils.config_manager import config
from maybe_monad.utils.error_manager import ContractViolationError
from maybe_monad.utils.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar('T')
U = TypeVar('U')


class Maybe(Generic[T]):
    """
    Maybe monad for handling optional values without null checks.
    Represents a value that might be present (Just) or absent (Nothing).

    ``Maybe(value)`` builds a Just and ``Maybe()`` a Nothing. The held value
    is owned by the container: it is deep-copied on the way in and whenever
    the container itself is copied, so two containers never share it.
    Containers are immutable; a new state means a new container.
    """

    __slots__ = ("_value",)

    def __new__(cls, *args):
        variant = cls
        if cls is Maybe:
            if len(args) > 1:
                raise TypeError(f"Maybe takes at most one value ({len(args)} given)")
            variant = Just if args else Nothing
        return object.__new__(variant)

    def is_just(self) -> bool:
        """Check if this contains a value."""
        raise NotImplementedError

    def is_nothing(self) -> bool:
        """Check if this is empty."""
        return not self.is_just()

    def unsafe_get_just(self) -> T:
        """
        Get the held value.

        The container must be a Just: calling this on Nothing is a programming
        error and raises ContractViolationError. The returned object is the
        container's own value and must not be mutated.
        """
        raise NotImplementedError

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        """Transform the value if present."""
        raise NotImplementedError

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Monadic bind for Maybe."""
        raise NotImplementedError

    def and_then(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Alias for flat_map for readability."""
        return self.flat_map(f)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Keep the value only if it satisfies ``predicate``."""
        raise NotImplementedError

    def get_or_else(self, default: T) -> T:
        """Get the value or a default."""
        return just_with_default(default, self)

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        """Return this or an alternative Maybe."""
        raise NotImplementedError

    def to_optional(self) -> Optional[T]:
        """Convert to Python Optional. A Just holding None is indistinguishable."""
        return self.unsafe_get_just() if self.is_just() else None

    def __iter__(self) -> Iterator[T]:
        """Allow use in for comprehensions."""
        if self.is_just():
            yield self.unsafe_get_just()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maybe):
            return NotImplemented
        if self.is_just() and other.is_just():
            return bool(self.unsafe_get_just() == other.unsafe_get_just())
        return self.is_just() == other.is_just()

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")


class Just(Maybe[T]):
    """Just variant containing a value."""

    __slots__ = ()

    def __init__(self, value: T):
        if config.maybe.deep_copy_values:
            value = copy.deepcopy(value)
        object.__setattr__(self, "_value", value)

    @classmethod
    def _adopt(cls, value: T) -> Just[T]:
        # Take ownership of an object that is already private to the caller
        instance = object.__new__(cls)
        object.__setattr__(instance, "_value", value)
        return instance

    def is_just(self) -> bool:
        return True

    def unsafe_get_just(self) -> T:
        return self._value

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Just(f(self._value))

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return require_maybe(f(self._value), "flat_map")

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return self if predicate(self._value) else Nothing()

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return self

    def __copy__(self) -> Just[T]:
        return Just._adopt(copy.deepcopy(self._value))

    def __deepcopy__(self, memo: dict) -> Just[T]:
        return Just._adopt(copy.deepcopy(self._value, memo))

    def __hash__(self) -> int:
        return hash((Just, self._value))

    def __repr__(self) -> str:
        return f"Just({self._value!r})"


class Nothing(Maybe[T]):
    """Nothing variant representing absence of value."""

    __slots__ = ()

    def __init__(self):
        pass

    def is_just(self) -> bool:
        return False

    def unsafe_get_just(self) -> T:
        raise ContractViolationError("unsafe_get_just called on Nothing")

    def map(self, f: Callable[[T], U]) -> Maybe[U]:
        return Nothing()

    def flat_map(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return Nothing()

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        return Nothing()

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return require_maybe(alternative, "or_else")

    def __copy__(self) -> Nothing[T]:
        return Nothing()

    def __deepcopy__(self, memo: dict) -> Nothing[T]:
        return Nothing()

    def __hash__(self) -> int:
        return hash(None)

    def __repr__(self) -> str:
        return "Nothing"


def require_maybe(value: Any, where: str) -> Maybe[Any]:
    """Return ``value`` unchanged, or raise TypeError if it is not a Maybe."""
    if not isinstance(value, Maybe):
        raise TypeError(f"{where} expected a Maybe, got {type(value).__name__}")
    return value


# Helper functions

def is_just(maybe: Maybe[T]) -> bool:
    """Is not nothing?"""
    return require_maybe(maybe, "is_just").is_just()


def is_nothing(maybe: Maybe[T]) -> bool:
    """Has no value?"""
    return not is_just(maybe)


def unsafe_get_just(maybe: Maybe[T]) -> T:
    """Get the held value; raises ContractViolationError on Nothing."""
    return require_maybe(maybe, "unsafe_get_just").unsafe_get_just()


def just(value: T) -> Maybe[T]:
    """Create a Just value."""
    return Just(value)


def nothing(value_type: Optional[Type[T]] = None) -> Maybe[T]:
    """Create a Nothing value.

    ``value_type`` only documents the intended type, e.g. ``nothing(int)``.
    """
    return Nothing()


def from_optional(opt: Optional[T]) -> Maybe[T]:
    """Convert Python Optional to Maybe."""
    return Just(opt) if opt is not None else Nothing()


def just_with_default(default: T, maybe: Maybe[T]) -> T:
    """Get the value from a maybe or the default in case it is nothing."""
    if require_maybe(maybe, "just_with_default").is_just():
        return maybe.unsafe_get_just()
    return default


def throw_on_nothing(
    error: Union[BaseException, Type[BaseException]], maybe: Maybe[T]
) -> T:
    """
    Return the held value, or raise ``error`` if the maybe is Nothing.

    This is the way to turn absence into an exception when absence is
    exceptional for the caller.

    Args:
        error: Exception instance or exception class to raise on Nothing
        maybe: The container to unwrap

    Raises:
        TypeError: If ``error`` is not an exception
        BaseException: ``error`` itself, when ``maybe`` is Nothing
    """
    is_exception_class = inspect.isclass(error) and issubclass(error, BaseException)
    if not (isinstance(error, BaseException) or is_exception_class):
        raise TypeError(
            f"throw_on_nothing needs an exception to raise, got {type(error).__name__}"
        )

    if require_maybe(maybe, "throw_on_nothing").is_nothing():
        logger.debug(f"Escalating Nothing to {error!r}")
        raise error
    return maybe.unsafe_get_just()
