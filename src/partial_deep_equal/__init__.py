"""Partial deep equality for Python

Checks whether an actual value structurally contains an expected value: every
attribute, element, entry or member of the expected value must have a matching
counterpart in the actual value, recursively, while the actual value may contain
additional data. This is useful for asserting on parts of large results in tests.

The primary entry point is :func:`assert_partial_deep_equal`, which raises a
:class:`PartialDeepEqualError` describing the place where the values diverge.
:func:`is_partial_deep_equal` and :func:`find_mismatch` perform the same check
without raising an error.

The package is organized in the following sub-packages:

  - :mod:`partial_deep_equal.comparison`: classification and comparison of values
  - :mod:`partial_deep_equal.error`: the errors raised when values diverge
  - :mod:`partial_deep_equal.pyutils`: utility functions used by the package

All important functions and classes can be imported directly from the top level.
"""

# The version of this package

from .version import version as __version__, version_info as __version_info__

# Values with a special meaning

from .pyutils import Symbol, Undefined, UndefinedType, inspect

# Errors

from .error import (
    ArityError,
    CountMismatch,
    DepthExceeded,
    KindMismatch,
    MismatchReason,
    MissingKey,
    NodeLimitExceeded,
    PartialDeepEqualError,
    ValueMismatch,
    format_error,
)

# Comparison

from .comparison import (
    DEFAULT_MAX_DEPTH,
    DEFAULT_MAX_NODES,
    Kind,
    Mismatch,
    PartialComparator,
    VisitationLedger,
    assert_partial_deep_equal,
    classify,
    find_mismatch,
    is_partial_deep_equal,
    partial_deep_equal,
    print_mismatch,
)

__all__ = [
    "__version__",
    "__version_info__",
    "ArityError",
    "CountMismatch",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_NODES",
    "DepthExceeded",
    "Kind",
    "KindMismatch",
    "Mismatch",
    "MismatchReason",
    "MissingKey",
    "NodeLimitExceeded",
    "PartialComparator",
    "PartialDeepEqualError",
    "Symbol",
    "Undefined",
    "UndefinedType",
    "ValueMismatch",
    "VisitationLedger",
    "assert_partial_deep_equal",
    "classify",
    "find_mismatch",
    "format_error",
    "inspect",
    "is_partial_deep_equal",
    "partial_deep_equal",
    "print_mismatch",
]
