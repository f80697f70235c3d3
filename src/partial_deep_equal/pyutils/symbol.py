"""Unique symbols"""

from __future__ import annotations

from typing import Any

__all__ = ["Symbol"]


class Symbol:
    """A unique token that can be used as a key, like a Symbol in JavaScript.

    Every symbol is different from all other symbols, even from symbols with the same
    description. Symbols are hashable and can therefore be used as keys of dicts and
    as members of sets. Copying a symbol returns the symbol itself.
    """

    __slots__ = ("description",)

    description: str | None

    def __init__(self, description: str | None = None) -> None:
        if description is not None and not isinstance(description, str):
            raise TypeError("The description of a symbol must be a string.")
        self.description = description

    def __repr__(self) -> str:
        return f"Symbol({self.description or ''})"

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __ne__(self, other: Any) -> bool:
        return self is not other

    def __hash__(self) -> int:
        return id(self)

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, _memo: Any) -> Symbol:
        return self

    def __reduce__(self) -> Any:
        raise TypeError("Symbols cannot be pickled.")
