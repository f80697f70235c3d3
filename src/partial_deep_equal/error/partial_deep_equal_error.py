from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Collection

from ..pyutils import Undefined
from .mismatch_reason import MismatchReason

if TYPE_CHECKING:
    from ..comparison.mismatch import Mismatch  # noqa: F401

__all__ = [
    "ArityError",
    "CountMismatch",
    "DepthExceeded",
    "KindMismatch",
    "MissingKey",
    "NodeLimitExceeded",
    "PartialDeepEqualError",
    "ValueMismatch",
    "error_class_for_reason",
    "format_error",
]


class PartialDeepEqualError(AssertionError):
    """Partial deep equality error

    A PartialDeepEqualError describes why an actual value does not contain an
    expected value. It is an AssertionError, so that test runners report it as a
    failed assertion. Besides the message, it includes the path from the compared
    values to the place where they diverge, the diverging values themselves and the
    reason of the divergence.
    """

    message: str
    """A message describing the divergence for debugging purposes"""

    reason: MismatchReason | None
    """The nature of the divergence"""

    path: list[Any] | None
    """Attribute names, indices, keys and set members leading to the divergence

    The path is None if the divergence was found at the top level.
    """

    actual: Any
    """The diverging actual value (Undefined if not applicable)"""

    expected: Any
    """The diverging expected value (Undefined if not applicable)"""

    mismatch: Mismatch | None
    """The mismatch record this error has been created from"""

    default_reason: ClassVar[MismatchReason | None] = None

    __slots__ = ("message", "reason", "path", "actual", "expected", "mismatch")

    __hash__ = Exception.__hash__

    def __init__(
        self,
        message: str,
        reason: MismatchReason | None = None,
        path: Collection[Any] | None = None,
        actual: Any = Undefined,
        expected: Any = Undefined,
        mismatch: Mismatch | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.reason = reason or self.default_reason
        if path is not None and not isinstance(path, list):
            path = list(path)
        self.path = path or None
        self.actual = actual
        self.expected = expected
        self.mismatch = mismatch

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        args = [repr(self.message)]
        if self.reason and self.reason is not self.default_reason:
            args.append(f"reason={self.reason!r}")
        if self.path:
            args.append(f"path={self.path!r}")
        return f"{self.__class__.__name__}({', '.join(args)})"

    @property
    def formatted(self) -> dict[str, Any]:
        """Get error formatted as a dictionary of plain values."""
        return format_error(self)


class ArityError(PartialDeepEqualError):
    """Not both the actual and the expected value have been supplied."""

    default_reason = MismatchReason.ARITY


class KindMismatch(PartialDeepEqualError):
    """The actual and the expected value are different kinds of values."""

    default_reason = MismatchReason.KIND_MISMATCH


class MissingKey(PartialDeepEqualError):
    """An expected key or entry is absent from the actual value."""

    default_reason = MismatchReason.MISSING_KEY


class ValueMismatch(PartialDeepEqualError):
    """The actual value differs from the expected value."""

    default_reason = MismatchReason.VALUE_MISMATCH


class CountMismatch(PartialDeepEqualError):
    """The actual value provides fewer elements than expected."""

    default_reason = MismatchReason.COUNT_MISMATCH


class DepthExceeded(PartialDeepEqualError):
    """The compared values are nested too deeply."""

    default_reason = MismatchReason.DEPTH_EXCEEDED


class NodeLimitExceeded(DepthExceeded):
    """The comparison had to look at too many values."""

    default_reason = MismatchReason.NODE_LIMIT_EXCEEDED


_error_classes: dict[MismatchReason, type[PartialDeepEqualError]] = {
    MismatchReason.ARITY: ArityError,
    MismatchReason.KIND_MISMATCH: KindMismatch,
    MismatchReason.MISSING_KEY: MissingKey,
    MismatchReason.VALUE_MISMATCH: ValueMismatch,
    MismatchReason.COUNT_MISMATCH: CountMismatch,
    MismatchReason.WEAK_COLLECTION: ValueMismatch,
    MismatchReason.DEPTH_EXCEEDED: DepthExceeded,
    MismatchReason.NODE_LIMIT_EXCEEDED: NodeLimitExceeded,
}


def error_class_for_reason(reason: MismatchReason) -> type[PartialDeepEqualError]:
    """Get the error class that is raised for the given mismatch reason."""
    return _error_classes[reason]


def format_error(error: PartialDeepEqualError) -> dict[str, Any]:
    """Format a partial deep equality error.

    The result only contains plain values and can be serialized as JSON as long as
    the keys in the path are plain values as well.
    """
    if not isinstance(error, PartialDeepEqualError):
        raise TypeError("Expected a PartialDeepEqualError.")
    formatted: dict[str, Any] = {
        "message": error.message or "The values are not partially deep-equal.",
        "reason": error.reason.value if error.reason else None,
        "path": error.path,
    }
    return formatted
