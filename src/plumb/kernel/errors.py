"""Error types for pipeline construction and accessor lookup."""

from __future__ import annotations


class CombinatorError(Exception):
    """Base class for errors raised while building pipelines."""


class ArityError(CombinatorError, TypeError):
    """Error raised when combinator participants disagree on arity.

    This error preserves both counts so callers can report which side
    of a fork, cross or lift was mis-sized.
    """

    def __init__(self, message: str, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(message)

    def __repr__(self) -> str:
        return f"ArityError({super().__repr__()}, expected={self.expected!r}, actual={self.actual!r})"


class RegistryError(CombinatorError, KeyError):
    """Error raised when no accessor table is registered for a record type."""

    def __init__(self, record_type: type) -> None:
        self.record_type = record_type
        super().__init__(f"No accessors registered for '{record_type.__name__}'")

    def __str__(self) -> str:
        return str(self.args[0])
