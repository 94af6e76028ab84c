"""Combinator laws and helpers for checking them."""

# Producers, consumers and filters satisfy the following algebraic laws,
# where == means "feeds the same values, in the same order, to every consumer":
#
# 1. Producer monoid: pzero() + p == p == p + pzero()
#    and (p1 + p2) + p3 == p1 + (p2 + p3)
#
# 2. Consumer monoid: p(czero() + c) == p(c) == p(c + czero())
#    and p((c1 + c2) + c3) == p(c1 + (c2 + c3))
#
# 3. Monad left identity: punit(a).bind(f) == f(a)
#
# 4. Monad right identity: p.bind(punit) == p
#
# 5. Monad associativity: p.bind(f).bind(g) == p.bind(f.into(g))
#    Chaining filters is associative
#
# 6. Right distributivity: (f + g).into(h) == f.into(h) + g.into(h)
#
# 7. Left distributivity holds only up to order:
#    f.into(g + h) ~ f.into(g) + f.into(h)
#    The left side interleaves g and h per value of f; the right side runs
#    all of f.into(g) first. They coincide when f yields at most one value.
#
# 8. Applicative ordering: lift_a(fn)(p1, ..., pn) varies p1 slowest


from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any

from plumb.kernel.producer import Consumer, Producer, fuse


class FlightRecorder:
    """Reifies effects as the list of (value, tag) events they caused.

    Consumers made by the recorder log every value they see together with
    their tag, so two effects can be compared by what they did.
    """

    def __init__(self) -> None:
        self._events: list[tuple[Any, Hashable]] = []

    def consumer(self, *tags: Hashable) -> Consumer[Any]:
        """A consumer logging each value once per tag, in tag order."""
        def record(value: Any) -> None:
            for tag in tags:
                self._events.append((value, tag))

        return Consumer(record)

    def fusing(self, producer: Producer[Any], consumer: Callable[[Any], None]) -> list[tuple[Any, Hashable]]:
        """Run producer into consumer and return the events it caused."""
        self._events.clear()
        fuse(producer, consumer)()
        return list(self._events)

    @property
    def events(self) -> list[tuple[Any, Hashable]]:
        return list(self._events)


def same_sequence(left: Producer[Any], right: Producer[Any]) -> bool:
    """True if both producers yield equal values in the same order."""
    return left.collect() == right.collect()


def same_multiset(left: Producer[Any], right: Producer[Any]) -> bool:
    """True if both producers yield the same values, ignoring order."""
    return _multiset_equal(left.collect(), right.collect())


def _multiset_equal(left: Iterable[Any], right: Iterable[Any]) -> bool:
    # Values need not be hashable, so match them off one at a time.
    remaining = list(right)
    for value in left:
        try:
            remaining.remove(value)
        except ValueError:
            return False
    return not remaining
