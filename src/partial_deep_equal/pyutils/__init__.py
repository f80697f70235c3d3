"""Python Utils

This package contains dependency-free Python utility functions used throughout the
codebase.

Each utility should belong in its own file and be the default export.

These functions are not part of the module interface and are subject to change.
"""

from .format_list import and_list, or_list
from .inspect import inspect
from .path import Path
from .ref_map import RefMap
from .ref_set import RefSet
from .symbol import Symbol
from .undefined import Undefined, UndefinedType

__all__ = [
    "and_list",
    "inspect",
    "or_list",
    "Path",
    "RefMap",
    "RefSet",
    "Symbol",
    "Undefined",
    "UndefinedType",
]
