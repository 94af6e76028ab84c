"""Applicative functions over producers: pure, apply, lifting, cross products.

Every n-ary combinator here iterates like nested loops with the left-most
producer as the outermost loop:

    lift_a(f)(p1, p2)  ==> for x in p1:
                             for y in p2:
                               yield f(x, y)
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from plumb.kernel.errors import ArityError
from plumb.kernel.producer import Producer, fmap, punit

A = TypeVar("A")
B = TypeVar("B")

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def ppure(value: A) -> Producer[A]:
    """Alias of punit."""
    return punit(value)


def papply(functions: Producer[Callable[[A], B]], values: Producer[A]) -> Producer[B]:
    """Apply every function to every value; functions vary slowest."""
    return functions.bind(lambda fn: fmap(fn, values))


def lift_a(fn: Callable[..., B]) -> Callable[..., Producer[B]]:
    """Lift an n-ary function into a function over n producers.

    Args:
        fn: Function of any fixed (or variadic) positional arity

    Returns:
        A function taking producers, one per argument of fn, and returning
        the producer of fn applied to every combination of their values.
        Passing the wrong number of producers raises ArityError.
    """
    def lifted(*producers: Producer[Any]) -> Producer[B]:
        _check_arity(fn, len(producers))
        if not producers:
            return punit(fn())

        result: Producer[Any] = fmap(_curry(fn, len(producers)), producers[0])
        for producer in producers[1:]:
            result = papply(result, producer)
        return result

    return lifted


def pcross(*producers: Producer[Any]) -> Producer[tuple[Any, ...]]:
    """Cross product of producers, as tuples in lexicographic order.

    pcross() yields exactly one empty tuple.
    """
    return lift_a(_as_tuple)(*producers)


def _as_tuple(*values: Any) -> tuple[Any, ...]:
    return values


def _curry(fn: Callable[..., B], arity: int, bound: tuple[Any, ...] = ()) -> Callable[[Any], Any]:
    def take(value: Any) -> Any:
        args = bound + (value,)
        if len(args) == arity:
            return fn(*args)
        return _curry(fn, arity, args)

    return take


def _check_arity(fn: Callable[..., Any], count: int) -> None:
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # Some builtins expose no signature; let the call itself decide.
        return

    try:
        signature.bind(*range(count))
    except TypeError as exc:
        expected = sum(
            1
            for param in signature.parameters.values()
            if param.kind in _POSITIONAL and param.default is inspect.Parameter.empty
        )
        name = getattr(fn, "__name__", repr(fn))
        raise ArityError(
            f"Cannot lift '{name}' over {count} producers: {exc}",
            expected=expected,
            actual=count,
        ) from exc
