"""Cycle detection for the comparison of object graphs"""

from __future__ import annotations

from typing import Any

from ..pyutils import RefMap, RefSet

__all__ = ["VisitationLedger"]


class VisitationLedger:
    """Ledger of the pairs of values that are being or have been compared.

    Pairs are recorded by the identity of both of their values. When a pair is
    entered a second time, it is either still being compared further up in the
    recursion (a reference cycle) or it has already been compared successfully
    (shared substructure). In both cases the comparison can assume a match and
    stop descending.

    Pairs entered during a sub-comparison that turned out to fail can be discarded
    with :meth:`rollback`, so that a pair that only matched under a failed
    assumption is never taken for a match later on.

    A ledger must only be used for a single top-level comparison.
    """

    _pairs: RefMap[Any, RefSet[Any]]
    _log: list[tuple[Any, Any]]

    def __init__(self) -> None:
        self._pairs = RefMap()
        self._log = []

    def __len__(self) -> int:
        return len(self._log)

    def __contains__(self, pair: Any) -> bool:
        actual, expected = pair
        expected_values = self._pairs.get(actual)
        return expected_values is not None and expected in expected_values

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} with {len(self._log)} pairs>"

    def enter(self, actual: Any, expected: Any) -> bool:
        """Record the given pair.

        Returns True if the pair is new, and False if it has been recorded already.
        """
        expected_values = self._pairs.setdefault(actual, RefSet())
        if expected in expected_values:
            return False
        expected_values.add(expected)
        self._log.append((actual, expected))
        return True

    def mark(self) -> int:
        """Get a mark that can be used to roll back the ledger later."""
        return len(self._log)

    def rollback(self, mark: int) -> None:
        """Discard all pairs that have been entered after the given mark."""
        log = self._log
        pairs = self._pairs
        while len(log) > mark:
            actual, expected = log.pop()
            expected_values = pairs[actual]
            expected_values.discard(expected)
            if not expected_values:
                del pairs[actual]
