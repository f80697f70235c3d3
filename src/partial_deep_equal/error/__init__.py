"""Partial Deep Equality Errors

The :mod:`partial_deep_equal.error` package contains the errors raised when an
actual value does not contain an expected value.
"""

from .mismatch_reason import MismatchReason

from .partial_deep_equal_error import (
    ArityError,
    CountMismatch,
    DepthExceeded,
    KindMismatch,
    MissingKey,
    NodeLimitExceeded,
    PartialDeepEqualError,
    ValueMismatch,
    error_class_for_reason,
    format_error,
)

__all__ = [
    "ArityError",
    "CountMismatch",
    "DepthExceeded",
    "KindMismatch",
    "MismatchReason",
    "MissingKey",
    "NodeLimitExceeded",
    "PartialDeepEqualError",
    "ValueMismatch",
    "error_class_for_reason",
    "format_error",
]
