"""List formatting"""

from __future__ import annotations

from typing import Sequence

__all__ = ["and_list", "or_list", "format_list"]

MAX_ITEMS = 10


def or_list(items: Sequence[str], max_items: int | None = MAX_ITEMS) -> str:
    """Given [ A, B, C ] return 'A, B, or C'."""
    return format_list("or", items, max_items)


def and_list(items: Sequence[str], max_items: int | None = MAX_ITEMS) -> str:
    """Given [ A, B, C ] return 'A, B, and C'."""
    return format_list("and", items, max_items)


def format_list(
    conjunction: str, items: Sequence[str], max_items: int | None = MAX_ITEMS
) -> str:
    """Given [ A, B, C ] return 'A, B, (conjunction) C'

    If there are more than ``max_items`` items, only the first of them are listed,
    followed by the number of the remaining items, e.g. 'A, B, and 3 more'.
    """
    if not items:
        msg = "Missing list items to be formatted."
        raise ValueError(msg)

    n = len(items)
    if max_items and n > max_items:
        return f"{', '.join(items[:max_items])}, {conjunction} {n - max_items} more"
    if n == 1:
        return items[0]
    if n == 2:
        return f"{items[0]} {conjunction} {items[1]}"

    *all_but_last, last_item = items
    return f"{', '.join(all_but_last)}, {conjunction} {last_item}"
