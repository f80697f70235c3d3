"""Classification of compared values"""

from __future__ import annotations

from array import array
from collections.abc import Mapping, Sequence, Set, ValuesView
from datetime import date, datetime, time, timedelta
from enum import Enum
from inspect import isclass, isroutine
from numbers import Number
from re import Pattern
from time import struct_time
from typing import Any
from weakref import WeakKeyDictionary, WeakSet, WeakValueDictionary

try:
    from typing import TypeGuard
except ImportError:  # Python < 3.10
    from typing_extensions import TypeGuard

from ..pyutils import Symbol, UndefinedType

__all__ = [
    "Kind",
    "buffer_species",
    "classify",
    "composite_kinds",
    "is_buffer",
    "is_opaque_key",
    "is_weak_collection",
    "temporal_family",
]


class Kind(Enum):
    """The comparison shape of a value"""

    PRIMITIVE = "primitive"
    RECORD = "record"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    MEMBERSHIP = "set"
    TEMPORAL = "temporal value"
    PATTERN = "pattern"
    BUFFER = "buffer"
    ERROR = "error"
    FUNCTION = "function"
    OPAQUE_KEY = "opaque key"
    WEAK = "weak collection"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}.{self.name}>"


# kinds with children that can be part of a reference cycle
composite_kinds = frozenset(
    (Kind.RECORD, Kind.SEQUENCE, Kind.MAPPING, Kind.MEMBERSHIP, Kind.ERROR)
)

primitive_types: Any = (
    type(None),
    UndefinedType,
    bool,
    Number,
    str,
    Symbol,
    Enum,
    timedelta,
    range,
)
weak_collection_types: Any = (WeakSet, WeakKeyDictionary, WeakValueDictionary)
buffer_types: Any = (bytes, bytearray, memoryview, array)
try:
    from collections.abc import Buffer  # Python >= 3.12
except ImportError:  # Python < 3.12
    pass
else:
    buffer_types = (Buffer, *buffer_types)
temporal_types: Any = (date, time, struct_time)
sequence_types: Any = (Sequence, ValuesView)

# the attributes of hash and keyed hash objects as described in PEP 247
opaque_key_attributes = ("name", "digest_size", "digest", "copy", "update")


def classify(value: Any) -> Kind:
    """Get the kind of the given value.

    The classification only looks at the structure of the value, i.e. its builtin
    type or the abstract protocols it implements, and never at the identity of the
    class that created it. Therefore equivalent values created by different, but
    identical class definitions (e.g. from modules that have been loaded twice)
    always have the same kind.

    The order of the checks matters, since some shapes overlap: weak collections
    are also mappings or sets, buffers are also sequences, and everything that is
    not recognized otherwise is compared as a record of attributes.
    """
    if isinstance(value, primitive_types):
        return Kind.PRIMITIVE
    if is_weak_collection(value):
        return Kind.WEAK
    if is_opaque_key(value):
        return Kind.OPAQUE_KEY
    if is_buffer(value):
        return Kind.BUFFER
    if isinstance(value, Pattern):
        return Kind.PATTERN
    if isinstance(value, temporal_types):
        return Kind.TEMPORAL
    if isinstance(value, BaseException):
        return Kind.ERROR
    if isroutine(value) or isclass(value):
        return Kind.FUNCTION
    if isinstance(value, Mapping):
        return Kind.MAPPING
    if isinstance(value, Set):
        return Kind.MEMBERSHIP
    if isinstance(value, sequence_types):
        return Kind.SEQUENCE
    return Kind.RECORD


def is_weak_collection(value: Any) -> TypeGuard[WeakSet | WeakKeyDictionary]:
    """Check whether the value is a collection that only holds weak references."""
    return isinstance(value, weak_collection_types)


def is_opaque_key(value: Any) -> bool:
    """Check whether the value is an opaque (keyed) hash object.

    Such handles do not expose the key material they have been created with, only
    the name of their algorithm and the digests that can be computed from it.
    """
    if isclass(value):
        return False
    cls = type(value)
    return all(hasattr(cls, name) for name in opaque_key_attributes)


def is_buffer(value: Any) -> bool:
    """Check whether the value exposes its content as a binary buffer."""
    return isinstance(value, buffer_types)


def buffer_species(value: Any) -> tuple[str, int, tuple[int, ...] | None]:
    """Get the format, item size and shape of a binary buffer.

    This information is taken from the buffer protocol, and not from attributes
    like ``typecode`` that could be overridden in a subclass.
    """
    with memoryview(value) as view:
        return view.format, view.itemsize, view.shape


def temporal_family(value: Any) -> type:
    """Get the type of temporal values that the value can be compared with."""
    if isinstance(value, datetime):
        return datetime
    if isinstance(value, date):
        return date
    if isinstance(value, time):
        return time
    return struct_time
