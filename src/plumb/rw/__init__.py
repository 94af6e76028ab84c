"""Read-write duality - one filter definition for reading and mutating."""

from plumb.rw.accessors import (
    FieldOps,
    access,
    attr_field,
    optional_obj,
    repeated_obj,
    required_obj,
    scan_items,
)
from plumb.rw.filters import (
    RWFilter,
    read_only,
    read_only_tuple,
    read_write,
    read_write_tuple,
    tuple_ro,
    tuple_rw,
)
from plumb.rw.views import (
    RW,
    AttrPointer,
    Borrowed,
    ItemPointer,
    Mutable,
    Pointer,
    RootPointer,
    view,
)

__all__ = [
    # Views
    "RW",
    "Borrowed",
    "Mutable",
    "view",
    "Pointer",
    "AttrPointer",
    "ItemPointer",
    "RootPointer",
    # Projections
    "RWFilter",
    "read_only",
    "read_write",
    "read_only_tuple",
    "read_write_tuple",
    "tuple_ro",
    "tuple_rw",
    # Accessors
    "FieldOps",
    "access",
    "attr_field",
    "required_obj",
    "optional_obj",
    "repeated_obj",
    "scan_items",
]
