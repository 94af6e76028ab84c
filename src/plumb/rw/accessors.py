"""Field accessors: read-write filters built from a record's raw field operations.

Each field of a record type P holding values of type F is described by up to
three primitives:

    read(record)   -> F                  immutable access
    write(pointer) -> Pointer[F] | None  mutable access through the record's pointer
    has(record)    -> bool               presence test (optional fields only)

From these, required_obj, optional_obj and repeated_obj build RW filters.
Optional and repeated fields reduce to the producer primitives: "optional"
is a conditional punit/pzero, "repeated" is a scan over a collection and
"required" is an unconditional punit.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from plumb.kernel.filter import Filter
from plumb.kernel.producer import Producer, Sink, punit, pzero
from plumb.rw.filters import RWFilter
from plumb.rw.views import RW, AttrPointer, ItemPointer, Pointer, view

P = TypeVar("P")
F = TypeVar("F")

ReadFn = Callable[[P], F]
WriteFn = Callable[[Pointer[P]], Pointer[F] | None]
HasFn = Callable[[P], bool]


def access(pointer: Pointer[P] | None, write: WriteFn[P, F]) -> Pointer[F] | None:
    """Apply write through pointer, or return None when there is no pointer.

    Pointed-to records are only ever reached through this function, so a
    missing handle is never dereferenced: a field of an absent record is
    itself absent.
    """
    if pointer is None:
        return None
    return write(pointer)


def required_obj(read: ReadFn[P, F], write: WriteFn[P, F]) -> RWFilter[P, F]:
    """Filter yielding exactly one view of a field that is always set."""
    def run(record: RW[P]) -> Producer[RW[F]]:
        return punit(view(read(record.ro), access(record.rw, write)))

    return Filter(run)


def optional_obj(has: HasFn[P], read: ReadFn[P, F], write: WriteFn[P, F]) -> RWFilter[P, F]:
    """Filter yielding one view of a field if it is present, else nothing."""
    def run(record: RW[P]) -> Producer[RW[F]]:
        if not has(record.ro):
            return pzero()
        return punit(view(read(record.ro), access(record.rw, write)))

    return Filter(run)


def repeated_obj(
    read: ReadFn[P, Sequence[F]],
    write: WriteFn[P, Sequence[F]],
) -> RWFilter[P, F]:
    """Filter yielding one view per element of a repeated field, in order.

    For access to the collection itself, use required_obj with the same
    primitives and chain further filters onto it; this function is exactly
    that chain with scan_items().
    """
    return required_obj(read, write).into(scan_items())


def _scan(collection: RW[Sequence[F]]) -> Producer[RW[F]]:
    def run(consumer: Sink[RW[F]]) -> None:
        mutable = collection.rw.get() if collection.rw is not None else None
        # The mutable collection is indexed by the read position; both are
        # the same list unless the caller resizes it mid-traversal.
        for index, item in enumerate(collection.ro):
            pointer = ItemPointer(mutable, index) if mutable is not None else None
            consumer(view(item, pointer))

    return Producer(run)


_SCAN_ITEMS: Filter[Any, Any] = Filter(_scan)


def scan_items() -> RWFilter[Sequence[F], F]:
    """Filter traversing the elements of a collection view."""
    return _SCAN_ITEMS


@dataclass(frozen=True)
class FieldOps(Generic[P, F]):
    """The raw primitives of one record field."""

    read: ReadFn[P, F]
    write: WriteFn[P, F]
    has: HasFn[P]

    def required(self) -> RWFilter[P, F]:
        return required_obj(self.read, self.write)

    def optional(self) -> RWFilter[P, F]:
        return optional_obj(self.has, self.read, self.write)

    def repeated(self) -> RWFilter[P, Any]:
        return repeated_obj(self.read, self.write)  # type: ignore[arg-type]


def attr_field(name: str) -> FieldOps[Any, Any]:
    """Primitives for a field stored as an attribute.

    Works for pydantic models, dataclasses and plain objects. A field is
    present when its attribute is set and not None.
    """
    def read(record: Any) -> Any:
        return getattr(record, name)

    def write(pointer: Pointer[Any]) -> Pointer[Any]:
        return AttrPointer(pointer.get(), name)

    def has(record: Any) -> bool:
        return getattr(record, name, None) is not None

    return FieldOps(read=read, write=write, has=has)
