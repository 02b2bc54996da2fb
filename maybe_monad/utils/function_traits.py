"""
Callable introspection.

Reports how many positional arguments a callable takes and which argument and
result types it declares. The combinators use this to reject functions that
cannot be lifted or chained before any value flows through them.
"""

import inspect
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional

from maybe_monad.utils.error_manager import ArityError
from maybe_monad.utils.logging_utils import get_logger

logger = get_logger(__name__)

# Marker for "no annotation available"
EMPTY = inspect.Parameter.empty

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)

# Implicit numeric promotions accepted by type checkers
_NUMERIC_PROMOTIONS = {
    bool: (float, complex),
    int: (float, complex),
    float: (complex,),
}


@dataclass(frozen=True)
class FunctionTraits:
    """What introspection could find out about a callable.

    ``arity`` and ``required`` are None when the signature is unreadable,
    which is the case for a number of builtins.
    """

    arity: Optional[int] = None
    required: Optional[int] = None
    variadic: bool = False
    required_keywords: int = 0
    arg_type: Any = EMPTY
    result_type: Any = EMPTY

    @property
    def known(self) -> bool:
        return self.arity is not None

    def accepts(self, count: int) -> bool:
        """Whether the callable can be invoked with ``count`` positional arguments."""
        if not self.known:
            return True
        if self.required_keywords:
            return False
        return self.required <= count and (count <= self.arity or self.variadic)


def callable_name(f: Callable) -> str:
    return getattr(f, "__qualname__", None) or getattr(f, "__name__", None) or repr(f)


def _type_hints(f: Callable) -> dict:
    if inspect.isclass(f):
        target = f.__init__
    elif inspect.isroutine(f):
        target = f
    else:
        target = getattr(type(f), "__call__", f)

    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError, AttributeError) as e:
        logger.debug(f"Annotations of {callable_name(f)} could not be resolved: {e}")
        return {}


def function_traits(f: Callable) -> FunctionTraits:
    """
    Introspect a callable.

    Args:
        f: Any callable (function, lambda, bound method, class, callable object)

    Returns:
        FunctionTraits: arity and declared single-argument and result types

    Raises:
        TypeError: If ``f`` is not callable
    """
    if not callable(f):
        raise TypeError(f"Expected a callable, got {type(f).__name__}")

    try:
        signature = inspect.signature(f)
    except (TypeError, ValueError):
        logger.debug(f"No signature available for {callable_name(f)}")
        return FunctionTraits()

    positional = [p for p in signature.parameters.values() if p.kind in _POSITIONAL]
    variadic = any(
        p.kind == inspect.Parameter.VAR_POSITIONAL
        for p in signature.parameters.values()
    )
    required_keywords = sum(
        1
        for p in signature.parameters.values()
        if p.kind == inspect.Parameter.KEYWORD_ONLY and p.default is EMPTY
    )

    hints = _type_hints(f)
    arg_type = hints.get(positional[0].name, EMPTY) if positional else EMPTY
    result_type = hints.get("return", EMPTY)
    if inspect.isclass(f):
        result_type = f

    return FunctionTraits(
        arity=len(positional),
        required=sum(1 for p in positional if p.default is EMPTY),
        variadic=variadic,
        required_keywords=required_keywords,
        arg_type=arg_type,
        result_type=result_type,
    )


def check_arity(f: Callable, expected: int = 1) -> FunctionTraits:
    """
    Ensure ``f`` can be called with exactly ``expected`` positional arguments.

    Returns:
        FunctionTraits: the traits that were checked

    Raises:
        ArityError: If the callable's signature rules the call out
    """
    traits = function_traits(f)
    if not traits.accepts(expected):
        raise ArityError(
            f"{callable_name(f)} must take exactly {expected} positional "
            f"argument(s), signature allows {traits.required}..{traits.arity}"
            + (" (+ required keyword-only)" if traits.required_keywords else ""),
            function=callable_name(f),
        )
    return traits


def is_union(hint: Any) -> bool:
    return typing.get_origin(hint) in (typing.Union, types.UnionType)


def is_convertible(source: Any, target: Any) -> bool:
    """
    Whether a value declared as ``source`` may be passed where ``target`` is declared.

    Unknown, ``Any`` and type-variable annotations are always convertible, as
    are annotations too exotic to compare (Literal, Protocol, strings).
    """
    if source is EMPTY or target is EMPTY:
        return True
    if source is Any or target is Any:
        return True
    if isinstance(source, typing.TypeVar) or isinstance(target, typing.TypeVar):
        return True

    if is_union(target):
        return any(is_convertible(source, t) for t in typing.get_args(target))
    if is_union(source):
        return all(is_convertible(s, target) for s in typing.get_args(source))

    source_cls = typing.get_origin(source) or source
    target_cls = typing.get_origin(target) or target
    if not (inspect.isclass(source_cls) and inspect.isclass(target_cls)):
        return True

    try:
        if issubclass(source_cls, target_cls):
            return True
    except TypeError:
        # Non-runtime protocols refuse issubclass
        return True

    return target_cls in _NUMERIC_PROMOTIONS.get(source_cls, ())
