"""Kernel layer - producers, consumers, filters and effects."""

from plumb.kernel.config import RunConfig
from plumb.kernel.errors import ArityError, CombinatorError, RegistryError
from plumb.kernel.filter import Filter, kleisli
from plumb.kernel.producer import (
    Consumer,
    Effect,
    Producer,
    cofmap,
    csum,
    czero,
    fmap,
    fuse,
    pbind,
    pjoin,
    produce,
    psum,
    punit,
    pzero,
)
from plumb.kernel.trace import Evidence, Trace

__all__ = [
    "Consumer",
    "Producer",
    "Filter",
    "Effect",
    # Monoid
    "pzero",
    "czero",
    "psum",
    "csum",
    # Functor & monad
    "fmap",
    "cofmap",
    "punit",
    "pjoin",
    "pbind",
    "kleisli",
    "fuse",
    "produce",
    # Runtime
    "RunConfig",
    "Trace",
    "Evidence",
    # Errors
    "CombinatorError",
    "ArityError",
    "RegistryError",
]
