"""The Undefined singleton"""

from __future__ import annotations

import warnings
from typing import Any

__all__ = ["Undefined", "UndefinedType"]


class UndefinedType:
    """Auxiliary class for creating the Undefined singleton."""

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        else:
            warnings.warn("Redefinition of 'Undefined'", RuntimeWarning, stacklevel=2)
        return cls._instance

    def __reduce__(self) -> str:
        return "Undefined"

    def __repr__(self) -> str:
        return "Undefined"

    __str__ = __repr__

    def __hash__(self) -> int:
        return hash(UndefinedType)

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: Any) -> bool:
        return other is Undefined

    def __ne__(self, other: Any) -> bool:
        return not self == other

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, _memo: Any) -> UndefinedType:
        return self


# Used like "undefined" in JavaScript, and internally for absent keys:
Undefined = UndefinedType()

Undefined.__doc__ = """Symbol for undefined values

This singleton object is used to describe undefined values. Unlike ``None``, which
is an ordinary value that can be compared, it is also used to mark attributes and
keys that are not present at all on a compared value.
"""
