"""A set of objects distinguished by identity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from contextlib import suppress
from typing import Any, TypeVar

from .ref_map import RefMap

__all__ = ["RefSet"]


T = TypeVar("T")


class RefSet(MutableSet[T]):
    """A set like object that uses the identity of its elements.

    Elements can be unhashable objects, and equal but distinct objects are counted
    as different elements. This class keeps the insertion order unlike a normal set.
    """

    _map: RefMap[T, None]

    def __init__(self, values: Iterable[T] | None = None) -> None:
        super().__init__()
        self._map = RefMap()
        if values:
            self.update(values)

    def __contains__(self, value: Any) -> bool:
        return value in self._map

    def __iter__(self) -> Iterator[T]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self)!r})"

    def add(self, value: T) -> None:
        """Add the given object to the set."""
        self._map[value] = None

    def remove(self, value: T) -> None:
        """Remove the given object from the set."""
        del self._map[value]

    def discard(self, value: T) -> None:
        """Remove the given object from the set if it is contained."""
        with suppress(KeyError):
            self.remove(value)

    def update(self, values: Iterable[T]) -> None:
        """Add all of the given objects to the set."""
        for value in values:
            self.add(value)
