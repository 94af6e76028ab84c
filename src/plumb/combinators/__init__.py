"""Combinators - applicative lifting and filter products."""

from plumb.combinators.applicative import lift_a, papply, pcross, ppure
from plumb.combinators.laws import FlightRecorder, same_multiset, same_sequence
from plumb.combinators.ops import fcross, ffork

__all__ = [
    "ppure",
    "papply",
    "lift_a",
    "pcross",
    "ffork",
    "fcross",
    "FlightRecorder",
    "same_sequence",
    "same_multiset",
]
