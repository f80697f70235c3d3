"""Path of keys"""

from __future__ import annotations

from typing import Any, NamedTuple, Optional

__all__ = ["Path"]


class Path(NamedTuple):
    """A linked path of attribute names, indices, keys or set members"""

    prev: Optional[Path]
    """path with the previous keys"""
    key: Any
    """current key in the path"""
    kind: str
    """how the key selects the child: attribute, index, key or member"""

    def as_list(self) -> list[Any]:
        """Return a list of the path keys."""
        flattened: list[Any] = []
        append = flattened.append
        curr: Path | None = self
        while curr:
            append(curr.key)
            curr = curr.prev
        return flattened[::-1]

    def as_segments(self) -> list[tuple[Any, str]]:
        """Return a list of the path keys together with their kinds."""
        segments: list[tuple[Any, str]] = []
        curr: Path | None = self
        while curr:
            segments.append((curr.key, curr.kind))
            curr = curr.prev
        segments.reverse()
        return segments
