"""Producers and consumers - the push-based core of every pipeline.

A consumer is a value sink. A producer is a value source: called with a
consumer, it passes its values to the consumer one at a time, in order,
before returning. (A producer is isomorphic to a consumer of consumers.)

Producers form a monoid under sequential sum and consumers form a monoid
under parallel sum:

    pzero()(c)              === nothing happens
    (p1 + p2)(c)            === p1(c); p2(c)
    p(czero())              === nothing is consumed
    p(c1 + c2)              === each value goes to c1, then c2

Producers are also functors and monads; see fmap, punit, pjoin and pbind.
"""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from plumb.kernel.config import RunConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")

Sink = Callable[[T], None]


@dataclass(frozen=True)
class Consumer(Generic[T]):
    """A value sink. Calling it on a value consumes that value.

    Any one-argument callable can stand in for a Consumer wherever a
    producer expects one; wrapping it buys the monoid operations.
    """

    _fn: Callable[[T], None]

    def __call__(self, value: T) -> None:
        self._fn(value)

    def also(self, other: Sink[T]) -> Consumer[T]:
        """Parallel sum: each value goes to this consumer, then to other."""
        def both(value: T) -> None:
            self._fn(value)
            other(value)

        return Consumer(both)

    def __add__(self, other: object) -> Consumer[T]:
        if not isinstance(other, Consumer):
            return NotImplemented
        return self.also(other)

    def contramap(self, fn: Callable[[B], T]) -> Consumer[B]:
        return cofmap(fn, self)

    @staticmethod
    def unpacked(fn: Callable[..., None]) -> Consumer[tuple[Any, ...]]:
        """Build a tuple consumer from a function taking the tuple's elements.

        Example:
            Consumer.unpacked(lambda manager, member: ...)
        """
        return Consumer(lambda values: fn(*values))


@dataclass(frozen=True)
class Producer(Generic[T]):
    """A value source. Calling it with a consumer feeds it every value."""

    _run: Callable[[Sink[T]], None]

    def __call__(self, consumer: Sink[T]) -> None:
        self._run(consumer)

    def concat(self, other: Producer[T]) -> Producer[T]:
        """Sequential sum: all of this producer's values, then all of other's."""
        def run(consumer: Sink[T]) -> None:
            self._run(consumer)
            other(consumer)

        return Producer(run)

    def __add__(self, other: object) -> Producer[T]:
        if not isinstance(other, Producer):
            return NotImplemented
        return self.concat(other)

    def map(self, fn: Callable[[T], B]) -> Producer[B]:
        return fmap(fn, self)

    def bind(self, fn: Callable[[T], Producer[B]]) -> Producer[B]:
        """Run fn on every value and splice in everything it produces."""
        return pbind(self, fn)

    def fuse(self, consumer: Sink[T]) -> Effect[T]:
        return fuse(self, consumer)

    def collect(self) -> list[T]:
        """Run the producer and return its values as a list."""
        values: list[T] = []
        self._run(values.append)
        return values


@dataclass(frozen=True)
class Effect(Generic[T]):
    """A producer fused to a consumer. Calling it runs the traversal."""

    producer: Producer[T]
    consumer: Sink[T]

    def __call__(self) -> None:
        self.run()

    def run(self, config: RunConfig | None = None) -> None:
        """Feed every value of the producer to the consumer.

        Args:
            config: Optional run configuration (trace, recursion limit)

        Note: Exceptions raised by the consumer or by record primitives
        propagate unchanged after being recorded in the trace.
        """
        config = config or RunConfig()
        trace = config.trace
        tracing = trace is not None and trace.enabled

        previous_limit: int | None = None
        if config.recursion_limit is not None and config.recursion_limit > sys.getrecursionlimit():
            previous_limit = sys.getrecursionlimit()
            sys.setrecursionlimit(config.recursion_limit)

        effect_id: int | None = None
        delivered = 0
        consumer = self.consumer
        if tracing:
            def counting(value: T) -> None:
                nonlocal delivered
                delivered += 1
                self.consumer(value)

            consumer = counting

        try:
            if tracing:
                effect_id = trace.record("effect_begin")
                if effect_id is not None:
                    trace.push(effect_id)

            start_time = time.perf_counter()
            try:
                self.producer(consumer)
            except Exception as exc:
                if tracing:
                    trace.record(
                        "effect_error",
                        info={"error": str(exc), "delivered": delivered},
                        parent_id=effect_id,
                    )
                logger.debug("Effect failed after %d values: %s", delivered, exc)
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000

            if tracing:
                trace.record(
                    "effect_end",
                    info={"delivered": delivered},
                    parent_id=effect_id,
                    duration_ms=duration_ms,
                )
                logger.debug("Effect delivered %d values in %.3f ms", delivered, duration_ms)
        finally:
            if tracing and effect_id is not None:
                trace.pop()
            if previous_limit is not None:
                sys.setrecursionlimit(previous_limit)


def fuse(producer: Producer[T], consumer: Sink[T]) -> Effect[T]:
    """Fuse a producer to a consumer. Nothing runs until the effect is called."""
    return Effect(producer, consumer)


def _produce_nothing(_consumer: Sink[Any]) -> None:
    return None


def _consume_nothing(_value: Any) -> None:
    return None


_PZERO: Producer[Any] = Producer(_produce_nothing)
_CZERO: Consumer[Any] = Consumer(_consume_nothing)


def pzero() -> Producer[Any]:
    """The empty producer; identity of producer sum."""
    return _PZERO


def czero() -> Consumer[Any]:
    """The consumer that ignores everything; identity of consumer sum."""
    return _CZERO


def psum(*producers: Producer[T]) -> Producer[T]:
    """Sequential sum of any number of producers (pzero() for none)."""
    result: Producer[T] = pzero()
    for producer in producers:
        result = result.concat(producer)
    return result


def csum(*consumers: Consumer[T]) -> Consumer[T]:
    """Parallel sum of any number of consumers (czero() for none)."""
    result: Consumer[T] = czero()
    for consumer in consumers:
        result = result.also(consumer)
    return result


def produce(values: Iterable[T]) -> Producer[T]:
    """Producer of the given values, in iteration order.

    The collection is read each time the producer runs, so a producer over
    a list sees the list's current contents. One-shot iterators are
    materialised up front so the producer can be run more than once.
    """
    if isinstance(values, Iterator):
        values = tuple(values)

    def run(consumer: Sink[T]) -> None:
        for value in values:
            consumer(value)

    return Producer(run)


def fmap(fn: Callable[[A], B], producer: Producer[A]) -> Producer[B]:
    """Apply fn to every value producer yields, preserving order."""
    def run(consumer: Sink[B]) -> None:
        producer(lambda value: consumer(fn(value)))

    return Producer(run)


def cofmap(fn: Callable[[B], A], consumer: Sink[A]) -> Consumer[B]:
    """Contravariant map: feeding b to the result feeds fn(b) to consumer."""
    return Consumer(lambda value: consumer(fn(value)))


def punit(value: A) -> Producer[A]:
    """The producer of exactly one value."""
    def run(consumer: Sink[A]) -> None:
        consumer(value)

    return Producer(run)


def pjoin(producers: Producer[Producer[A]]) -> Producer[A]:
    """Flatten a producer of producers.

    Each inner producer is drained completely before the outer producer
    moves on to the next one.
    """
    def run(consumer: Sink[A]) -> None:
        producers(lambda inner: inner(consumer))

    return Producer(run)


def pbind(producer: Producer[A], fn: Callable[[A], Producer[B]]) -> Producer[B]:
    """Monadic bind: pjoin(fmap(fn, producer))."""
    return pjoin(fmap(fn, producer))
