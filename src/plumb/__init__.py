from .combinators import fcross, ffork, lift_a, papply, pcross, ppure
from .kernel import (
    ArityError,
    CombinatorError,
    Consumer,
    Effect,
    Evidence,
    Filter,
    Producer,
    RegistryError,
    RunConfig,
    Trace,
    cofmap,
    csum,
    czero,
    fmap,
    fuse,
    kleisli,
    pbind,
    pjoin,
    produce,
    psum,
    punit,
    pzero,
)
from .rw import (
    RW,
    Borrowed,
    Mutable,
    Pointer,
    RWFilter,
    optional_obj,
    read_only,
    read_only_tuple,
    read_write,
    read_write_tuple,
    repeated_obj,
    required_obj,
)

__all__ = [
    # Core
    "Consumer",
    "Producer",
    "Filter",
    "Effect",
    "fuse",
    "produce",
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
    # Applicative & products
    "ppure",
    "papply",
    "lift_a",
    "pcross",
    "ffork",
    "fcross",
    # Read-write
    "RW",
    "Borrowed",
    "Mutable",
    "Pointer",
    "RWFilter",
    "read_only",
    "read_write",
    "read_only_tuple",
    "read_write_tuple",
    "required_obj",
    "optional_obj",
    "repeated_obj",
    # Runtime
    "RunConfig",
    "Trace",
    "Evidence",
    # Errors
    "CombinatorError",
    "ArityError",
    "RegistryError",
]
