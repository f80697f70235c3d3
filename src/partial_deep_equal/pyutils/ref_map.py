"""A mapping keyed by object identity."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableMapping
from typing import Any, TypeVar

__all__ = ["RefMap"]

K = TypeVar("K")
V = TypeVar("V")


class RefMap(MutableMapping[K, V]):
    """A dictionary like object that uses the identity of its keys.

    Keys can be arbitrary objects, also unhashable ones like lists or dicts, and two
    keys are only considered the same if they are the same object. The keys are kept
    alive by the map, so their ids cannot be reused while they are stored.

    This class keeps the insertion order like a normal dictionary.
    """

    _map: dict[int, tuple[K, V]]

    def __init__(self, items: Iterable[tuple[K, V]] | None = None) -> None:
        super().__init__()
        self._map = {}
        if items:
            self.update(items)

    def __setitem__(self, key: K, value: V) -> None:
        self._map[id(key)] = (key, value)

    def __getitem__(self, key: K) -> V:
        return self._map[id(key)][1]

    def __delitem__(self, key: K) -> None:
        del self._map[id(key)]

    def __contains__(self, key: Any) -> bool:
        return id(key) in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _value in self._map.values())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self.items())!r})"

    def get(self, key: Any, default: Any = None) -> Any:
        """Get the mapped value for the given key."""
        item = self._map.get(id(key))
        return default if item is None else item[1]

    def setdefault(self, key: K, default: V) -> V:  # type: ignore
        """Get the mapped value for the given key, adding the default if missing."""
        item = self._map.get(id(key))
        if item is None:
            self._map[id(key)] = (key, default)
            return default
        return item[1]
