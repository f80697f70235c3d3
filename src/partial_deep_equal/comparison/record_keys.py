"""Keys of records and how to read them"""

from __future__ import annotations

from functools import partial
from operator import getitem
from typing import Any, Callable, Dict

from ..pyutils import Symbol

__all__ = ["RecordKeys", "get_record_keys", "is_hidden_key"]

# the readers of the keys of a record (a reader returns the value of its key)
RecordKeys = Dict[Any, Callable[[], Any]]

# slots that are used by Python itself and never hold values to compare
special_slots = frozenset(("__dict__", "__weakref__"))


def is_hidden_key(key: Any) -> bool:
    """Check whether the key is not public by Python naming conventions."""
    return isinstance(key, str) and key.startswith("_")


def get_record_keys(
    value: Any, include_non_enumerable: bool = False, include_symbol_keys: bool = True
) -> RecordKeys:
    """Get the keys of a record together with readers for their values.

    The keys are the attributes in the instance dictionary, the attributes stored
    in slots, and the properties defined by the class of the value. Keys starting
    with an underscore are only included if ``include_non_enumerable`` is set.
    Symbols can only be stored as keys in the instance dictionary.

    The readers are not called here. Reading a property runs its getter, which is
    code provided by the owner of the value. The comparison calls each reader at
    most once, so getters with side effects behave deterministically.
    """
    keys: RecordKeys = {}
    try:
        instance_dict = vars(value)
    except TypeError:  # no instance dictionary
        instance_dict = None
    if instance_dict:
        for key in instance_dict:
            if isinstance(key, Symbol):
                if not include_symbol_keys:
                    continue
            elif not include_non_enumerable and is_hidden_key(key):
                continue
            keys[key] = partial(getitem, instance_dict, key)
    cls = type(value)
    shadowed: set[str] = set()  # names defined by more derived classes
    for base in cls.__mro__[:-1]:  # object never has keys
        slots = base.__dict__.get("__slots__")
        if slots:
            if isinstance(slots, str):
                slots = (slots,)
            for name in slots:
                if name in special_slots or name in keys:
                    continue
                if not include_non_enumerable and is_hidden_key(name):
                    continue
                if name.startswith("__") and not name.endswith("__"):
                    name = f"_{base.__name__.lstrip('_')}{name}"  # name mangling
                descriptor = base.__dict__.get(name)
                if descriptor is None:
                    continue
                try:
                    descriptor.__get__(value, cls)
                except AttributeError:  # slot is not set
                    continue
                keys[name] = partial(descriptor.__get__, value, cls)
        for name, attribute in base.__dict__.items():
            if (
                isinstance(attribute, property)
                and attribute.fget is not None
                and name not in keys
                and name not in shadowed
                and (include_non_enumerable or not is_hidden_key(name))
            ):
                keys[name] = partial(attribute.fget, value)
        shadowed.update(base.__dict__)
    return keys
