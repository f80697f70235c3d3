"""Reporting of mismatches"""

from __future__ import annotations

from typing import Any, NamedTuple

from ..error import MismatchReason, PartialDeepEqualError, error_class_for_reason
from ..pyutils import Path, Undefined, inspect

__all__ = ["Mismatch", "mismatch_error", "print_mismatch", "print_path"]

MESSAGE_PREFIX = "Expected values to be partially deep-equal"


class Mismatch(NamedTuple):
    """The first place where an actual value does not contain the expected one"""

    reason: MismatchReason
    """the nature of the divergence"""
    path: Path | None
    """path from the compared values to the divergence (None at the top level)"""
    actual: Any = Undefined
    """the diverging actual value"""
    expected: Any = Undefined
    """the diverging expected value"""
    detail: str | None = None
    """human readable description of the divergence"""

    def __str__(self) -> str:
        return print_mismatch(self)


def print_path(path: Path | None, root: str = "actual") -> str:
    """Build a string describing the path, starting with the given root name."""
    if path is None:
        return root
    parts = [root]
    append = parts.append
    for key, kind in path.as_segments():
        if kind == "attribute" and isinstance(key, str) and key.isidentifier():
            append(f".{key}")
        elif kind == "index" and isinstance(key, int):
            append(f"[{key}]")
        elif kind == "member":
            append(f"{{{inspect(key)}}}")
        else:
            append(f"[{inspect(key)}]")
    return "".join(parts)


def print_mismatch(mismatch: Mismatch, root: str = "actual") -> str:
    """Print a mismatch to a string.

    The message names the place of the divergence and describes its nature.
    """
    detail = mismatch.detail or mismatch.reason.value
    return f"{MESSAGE_PREFIX} at {print_path(mismatch.path, root)}: {detail}."


def mismatch_error(
    mismatch: Mismatch, message: str | None = None
) -> PartialDeepEqualError:
    """Create the error that shall be raised for the given mismatch.

    A custom message replaces the message that would be printed for the mismatch.
    """
    error_class = error_class_for_reason(mismatch.reason)
    return error_class(
        message or print_mismatch(mismatch),
        reason=mismatch.reason,
        path=mismatch.path.as_list() if mismatch.path else None,
        actual=mismatch.actual,
        expected=mismatch.expected,
        mismatch=mismatch,
    )
