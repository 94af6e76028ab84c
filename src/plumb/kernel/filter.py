"""Filters - the pipeline stage abstraction.

A filter takes an A and from it produces Bs. Filters combine in three ways:

    chains:          f.into(g)      (read: "f into g")
    tees:            f + g          (read: "f and g")
    cross products:  fcross(f, g)   (read: "f cross g")

In generator terms:

    f.into(g)(x)         ==> for r in f(x):
                               for s in g(r):
                                 yield s
    (f + g)(x)           ==> for r in f(x): yield r
                             for r in g(x): yield r
    fcross(f, g)((x, y)) ==> for r in f(x):
                               for s in g(y):
                                 yield (r, s)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from plumb.kernel.producer import Producer, punit, pzero

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")

FilterFn = Callable[[A], Producer[B]]


@dataclass(frozen=True)
class Filter(Generic[A, B]):
    """A pure function from one value to a producer of derived values."""

    _fn: Callable[[A], Producer[B]]

    def __call__(self, value: A) -> Producer[B]:
        return self._fn(value)

    def into(self, other: FilterFn[B, C]) -> Filter[A, C]:
        """Chain this filter into other (Kleisli composition)."""
        return kleisli(self, other)

    def plus(self, other: FilterFn[A, B]) -> Filter[A, B]:
        """Run both filters on the same input; this filter's results come first."""
        def run(value: A) -> Producer[B]:
            return self._fn(value).concat(other(value))

        return Filter(run)

    def __add__(self, other: object) -> Filter[A, B]:
        if not isinstance(other, Filter):
            return NotImplemented
        return self.plus(other)

    @staticmethod
    def unit() -> Filter[Any, Any]:
        """The identity of into: every value passes through unchanged."""
        return _UNIT

    @staticmethod
    def zero() -> Filter[Any, Any]:
        """The identity of plus: every input yields nothing."""
        return _ZERO

    @staticmethod
    def lift(fn: Callable[[A], B]) -> Filter[A, B]:
        """A one-to-one filter yielding fn(x) for each x."""
        return Filter(lambda value: punit(fn(value)))

    @staticmethod
    def where(predicate: Callable[[A], bool]) -> Filter[A, A]:
        """A filter that passes x through only when predicate(x) holds."""
        return Filter(lambda value: punit(value) if predicate(value) else pzero())


_UNIT: Filter[Any, Any] = Filter(punit)
_ZERO: Filter[Any, Any] = Filter(lambda _value: pzero())


def kleisli(first: FilterFn[A, B], second: FilterFn[B, C]) -> Filter[A, C]:
    """Kleisli composition: kleisli(f, g)(x) === f(x).bind(g).

    Associative by the monad associativity law.
    """
    return Filter(lambda value: first(value).bind(second))
