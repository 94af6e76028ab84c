"""Read-write views: an immutable reference plus an optional mutable handle.

Python hands out references to objects, not to the slots that hold them, so
a mutable handle is a Pointer: something that can get and set the value in
one slot (an attribute of an owner, an index of a list, or a root cell).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import MutableSequence
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class Pointer(ABC, Generic[T]):
    """Mutable handle to the slot holding a value."""

    @abstractmethod
    def get(self) -> T:
        """Read the value currently in the slot."""
        pass

    @abstractmethod
    def set(self, value: T) -> None:
        """Replace the value in the slot."""
        pass

    @property
    def value(self) -> T:
        return self.get()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    @staticmethod
    def root(value: T) -> RootPointer[T]:
        """Create a pointer to a fresh cell holding value."""
        return RootPointer(value)


@dataclass(eq=False)
class AttrPointer(Pointer[T]):
    """Pointer to an attribute of an owner object."""

    owner: Any
    name: str

    def get(self) -> T:
        return getattr(self.owner, self.name)

    def set(self, value: T) -> None:
        setattr(self.owner, self.name, value)


@dataclass(eq=False)
class ItemPointer(Pointer[T]):
    """Pointer to one position of a mutable sequence."""

    container: MutableSequence[T]
    index: int

    def get(self) -> T:
        return self.container[self.index]

    def set(self, value: T) -> None:
        self.container[self.index] = value


@dataclass(eq=False)
class RootPointer(Pointer[T]):
    """Pointer to a standalone cell; used for the top of a traversal."""

    _value: T

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        self._value = value


@dataclass(frozen=True)
class Borrowed(Generic[T]):
    """A read-only view. There is no mutable handle."""

    ro: T

    @property
    def rw(self) -> None:
        return None


@dataclass(frozen=True)
class Mutable(Generic[T]):
    """A read-write view.

    Attributes:
        ro: The value, for reading.
        rw: Pointer to the slot holding that same value (never a copy).
    """

    ro: T
    rw: Pointer[T]


RW = Borrowed[T] | Mutable[T]


def view(ro: T, rw: Pointer[T] | None = None) -> RW[T]:
    """Build the view for ro: Mutable when a pointer is given, else Borrowed."""
    if rw is None:
        return Borrowed(ro)
    return Mutable(ro, rw)
