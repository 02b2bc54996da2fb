"""Utilities for composing Maybe-returning and plain functions.

``lift_maybe`` maps a plain function over the container, ``and_then_maybe``
chains functions that may produce Nothing, and ``flatten_maybe`` removes one
level of nesting. Functions are validated once, when they are composed, not on
every call.
"""

import copy
import inspect
import typing
from functools import reduce
from typing import TypeVar, Callable, Any, Iterable, List

from maybe_monad.monads.maybe import Maybe, Just, Nothing, require_maybe
from maybe_monad.utils.config_manager import config
from maybe_monad.utils.error_manager import SignatureMismatchError
from maybe_monad.utils.function_traits import (
    EMPTY,
    FunctionTraits,
    callable_name,
    check_arity,
    is_convertible,
    is_union,
)
from maybe_monad.utils.logging_utils import get_logger

logger = get_logger(__name__)

T = TypeVar('T')
U = TypeVar('U')
V = TypeVar('V')


def _maybe_of(hint: Any) -> Any:
    """``Maybe[hint]`` for a known annotation, bare ``Maybe`` otherwise."""
    if hint is EMPTY:
        return Maybe
    try:
        return Maybe[hint]
    except TypeError:
        return Maybe


def _annotate(fn: Callable, name: str, params: dict, result: Any) -> Callable:
    annotations = {key: hint for key, hint in params.items() if hint is not EMPTY}
    if result is not EMPTY:
        annotations["return"] = result
    fn.__annotations__ = annotations
    fn.__name__ = fn.__qualname__ = name
    return fn


def _maybe_inner_type(hint: Any) -> Any:
    """The ``T`` of a ``Maybe[T]`` annotation, ``Any`` if unknown, None if not a Maybe."""
    if hint is EMPTY or hint is Any or isinstance(hint, TypeVar):
        return Any
    if is_union(hint):
        return Any

    origin = typing.get_origin(hint) or hint
    if inspect.isclass(origin) and issubclass(origin, Maybe):
        args = typing.get_args(hint)
        return args[0] if args else Any
    return None


def _check_bind_types(
    f: Callable, f_traits: FunctionTraits, g: Callable, g_traits: FunctionTraits
) -> None:
    inner = _maybe_inner_type(f_traits.result_type)
    if inner is None:
        raise SignatureMismatchError(
            f"{callable_name(f)} is declared to return {f_traits.result_type!r}, "
            "which is not a Maybe",
            function=callable_name(f),
        )
    if not is_convertible(inner, g_traits.arg_type):
        raise SignatureMismatchError(
            f"{callable_name(f)} yields {inner!r} but {callable_name(g)} "
            f"expects {g_traits.arg_type!r}",
            first=callable_name(f),
            second=callable_name(g),
        )


def identity(x: T) -> T:
    return x


def lift_maybe(f: Callable[[T], U]) -> Callable[[Maybe[T]], Maybe[U]]:
    """
    Lift a function into the Maybe functor.

    A function converting an int into a str becomes one converting a
    Maybe[int] into a Maybe[str]. Nothing stays Nothing and ``f`` is not
    called for it.

    Raises:
        ArityError: If ``f`` cannot be called with exactly one argument
    """
    traits = check_arity(f, 1)

    def lifted(maybe):
        if require_maybe(maybe, "lift_maybe").is_just():
            return Just(f(maybe.unsafe_get_just()))
        return Nothing()

    logger.debug(f"Lifted {callable_name(f)} into Maybe")
    return _annotate(
        lifted,
        f"lift_maybe({callable_name(f)})",
        {"maybe": _maybe_of(traits.arg_type)},
        _maybe_of(traits.result_type),
    )


def lift2_maybe(f: Callable[[T, U], V]) -> Callable[[Maybe[T], Maybe[U]], Maybe[V]]:
    """Lift a binary function to work with Maybes."""
    check_arity(f, 2)

    def lifted(ma, mb):
        if require_maybe(ma, "lift2_maybe").is_just() and require_maybe(
            mb, "lift2_maybe"
        ).is_just():
            return Just(f(ma.unsafe_get_just(), mb.unsafe_get_just()))
        return Nothing()

    lifted.__name__ = lifted.__qualname__ = f"lift2_maybe({callable_name(f)})"
    return lifted


def _bind(f: Callable[[T], Maybe[U]], g: Callable[[U], Maybe[V]]) -> Callable[[T], Maybe[V]]:
    f_traits = check_arity(f, 1)
    g_traits = check_arity(g, 1)
    if config.maybe.strict_signatures:
        _check_bind_types(f, f_traits, g, g_traits)

    f_name, g_name = callable_name(f), callable_name(g)

    def bound(x):
        intermediate = require_maybe(f(x), f_name)
        if intermediate.is_nothing():
            return Nothing()
        return require_maybe(g(intermediate.unsafe_get_just()), g_name)

    logger.debug(f"Bound {f_name} to {g_name}")
    return _annotate(
        bound,
        f"and_then_maybe({f_name}, {g_name})",
        {"x": f_traits.arg_type},
        g_traits.result_type,
    )


def and_then_maybe(*functions: Callable[[Any], Maybe[Any]]) -> Callable[[Any], Maybe[Any]]:
    """
    Monadic bind: compose functions that take a value and return a Maybe.

    The value of a Just produced by one function is passed to the next; a
    Nothing ends the chain and the remaining functions are never called.
    More than two functions associate to the left:
    ``and_then_maybe(f, g, h) == and_then_maybe(and_then_maybe(f, g), h)``.

    Raises:
        TypeError: If fewer than two functions are given
        ArityError: If a function cannot take exactly one argument
        SignatureMismatchError: If declared result and argument types clash
    """
    if len(functions) < 2:
        raise TypeError(
            f"and_then_maybe needs at least two functions ({len(functions)} given)"
        )
    return reduce(_bind, functions)


def flatten_maybe(maybe_maybe: Maybe[Maybe[T]]) -> Maybe[T]:
    """Collapse one level of nesting (also known as join)."""
    if require_maybe(maybe_maybe, "flatten_maybe").is_nothing():
        return Nothing()
    inner = require_maybe(maybe_maybe.unsafe_get_just(), "flatten_maybe (inner value)")
    return copy.copy(inner)


# Collection helpers

def cat_maybes(maybes: Iterable[Maybe[T]]) -> List[T]:
    """Extract all Just values from a list of Maybes."""
    return [m.unsafe_get_just() for m in maybes if m.is_just()]


def sequence_maybes(maybes: Iterable[Maybe[T]]) -> Maybe[List[T]]:
    """Convert a list of Maybes into a Maybe of list.

    Returns Nothing if any Maybe is Nothing.
    """
    values = []
    for maybe in maybes:
        if maybe.is_nothing():
            return Nothing()
        values.append(maybe.unsafe_get_just())
    return Just(values)


def first_just(maybes: Iterable[Maybe[T]]) -> Maybe[T]:
    """Return the first Just value, or Nothing if all are Nothing."""
    for maybe in maybes:
        if maybe.is_just():
            return maybe
    return Nothing()


# General combinators

def compose(*functions: Callable) -> Callable:
    """Compose functions from right to left.

    compose(f, g, h)(x) = f(g(h(x)))
    """
    def composed(x):
        return reduce(lambda acc, f: f(acc), reversed(functions), x)
    return composed


def pipe(*functions: Callable) -> Callable:
    """Compose functions from left to right.

    pipe(f, g, h)(x) = h(g(f(x)))
    """
    def piped(x):
        return reduce(lambda acc, f: f(acc), functions, x)
    return piped
