"""Projections from read-write filters to read-only and mutable filters.

One RWFilter describes how to reach some field F from a record P. The same
definition then serves two purposes:

    read_only(rwf)   : Filter[P, F]                  (borrows, never writes)
    read_write(rwf)  : Filter[Pointer[P], Pointer[F]] (hands out mutable slots)

The tuple variants do the same for filters built with ffork/fcross whose
outputs are tuples of views.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from plumb.kernel.filter import Filter
from plumb.kernel.producer import Producer, punit, pzero
from plumb.rw.views import RW, Borrowed, Mutable, Pointer, RootPointer

logger = logging.getLogger(__name__)

P = TypeVar("P")
F = TypeVar("F")

RWFilter = Filter[RW[P], RW[F]]


def read_only(rwf: RWFilter[P, F]) -> Filter[P, F]:
    """Run rwf without write access and expose only the read references."""
    def run(record: P) -> Producer[F]:
        return rwf(Borrowed(record)).map(_ro)

    return Filter(run)


def read_write(rwf: RWFilter[P, F]) -> Filter[Pointer[P] | P | None, Pointer[F]]:
    """Run rwf with write access and expose the mutable handles.

    The input is a pointer to the record. None, or a pointer whose slot holds
    None, yields nothing without touching rwf. Results whose mutable handle is
    absent are skipped.

    A bare record is wrapped in a fresh root pointer. Writes through the
    handed-out field pointers reach the record, but setting that root pointer
    itself only replaces the temporary cell; to replace a whole record, pass
    the pointer to its real slot (or keep the one made with Pointer.root).
    """
    def run(target: Pointer[P] | P | None) -> Producer[Pointer[F]]:
        pointer = _as_pointer(target)
        record = None if pointer is None else pointer.get()
        if record is None:
            logger.debug("read_write has no target record; producing nothing")
            return pzero()
        return rwf(Mutable(record, pointer)).bind(_rw_present)

    return Filter(run)


def read_only_tuple(rwf: Filter[RW[P], tuple[RW[Any], ...]]) -> Filter[P, tuple[Any, ...]]:
    """read_only for filters yielding tuples of views."""
    def run(record: P) -> Producer[tuple[Any, ...]]:
        return rwf(Borrowed(record)).map(tuple_ro)

    return Filter(run)


def read_write_tuple(
    rwf: Filter[RW[P], tuple[RW[Any], ...]],
) -> Filter[Pointer[P] | P | None, tuple[Pointer[Any] | None, ...]]:
    """read_write for filters yielding tuples of views.

    Tuple positions are preserved, so an element without write access
    appears as None rather than dropping the whole tuple.
    """
    def run(target: Pointer[P] | P | None) -> Producer[tuple[Pointer[Any] | None, ...]]:
        pointer = _as_pointer(target)
        record = None if pointer is None else pointer.get()
        if record is None:
            logger.debug("read_write_tuple has no target record; producing nothing")
            return pzero()
        return rwf(Mutable(record, pointer)).map(tuple_rw)

    return Filter(run)


def tuple_ro(views: tuple[RW[Any], ...]) -> tuple[Any, ...]:
    """Project a tuple of views onto their read references."""
    return tuple(v.ro for v in views)


def tuple_rw(views: tuple[RW[Any], ...]) -> tuple[Pointer[Any] | None, ...]:
    """Project a tuple of views onto their mutable handles."""
    return tuple(v.rw for v in views)


def _ro(rw_value: RW[F]) -> F:
    return rw_value.ro


def _rw_present(rw_value: RW[F]) -> Producer[Pointer[F]]:
    if rw_value.rw is None:
        return pzero()
    return punit(rw_value.rw)


def _as_pointer(target: Pointer[P] | P | None) -> Pointer[P] | None:
    if target is None or isinstance(target, Pointer):
        return target
    return RootPointer(target)
