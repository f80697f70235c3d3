"""Partial Deep Equality Comparison

The :mod:`partial_deep_equal.comparison` package is responsible for classifying
values, comparing them and describing where they diverge.
"""

from .kind import (
    Kind,
    buffer_species,
    classify,
    composite_kinds,
    is_buffer,
    is_opaque_key,
    is_weak_collection,
    temporal_family,
)

from .ledger import VisitationLedger

from .mismatch import Mismatch, mismatch_error, print_mismatch, print_path

from .record_keys import RecordKeys, get_record_keys, is_hidden_key

from .compare import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_NODES,
    PartialComparator,
    assert_partial_deep_equal,
    find_mismatch,
    is_partial_deep_equal,
    is_same_primitive,
    partial_deep_equal,
)

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_NODES",
    "Kind",
    "Mismatch",
    "PartialComparator",
    "RecordKeys",
    "VisitationLedger",
    "assert_partial_deep_equal",
    "buffer_species",
    "classify",
    "composite_kinds",
    "find_mismatch",
    "get_record_keys",
    "is_buffer",
    "is_hidden_key",
    "is_opaque_key",
    "is_partial_deep_equal",
    "is_same_primitive",
    "is_weak_collection",
    "mismatch_error",
    "partial_deep_equal",
    "print_mismatch",
    "print_path",
    "temporal_family",
]
