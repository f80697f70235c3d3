"""Partial deep equality of values"""

from __future__ import annotations

from collections import Counter
from enum import Enum
from hmac import compare_digest
from inspect import ismethod
from numbers import Number
from typing import Any, Callable

from ..error import ArityError, MismatchReason, PartialDeepEqualError
from ..pyutils import Path, Symbol, Undefined, and_list, inspect
from .kind import Kind, buffer_species, classify, composite_kinds, temporal_family
from .ledger import VisitationLedger
from .mismatch import Mismatch, mismatch_error
from .record_keys import RecordKeys, get_record_keys

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_MAX_NODES",
    "PartialComparator",
    "assert_partial_deep_equal",
    "find_mismatch",
    "is_partial_deep_equal",
    "is_same_primitive",
    "partial_deep_equal",
]

DEFAULT_MAX_DEPTH = 200
"""Default maximum nesting depth of the compared values"""

DEFAULT_MAX_NODES = 1_000_000
"""Default maximum number of value pairs that are compared in one comparison"""


class NotGivenType:
    """Auxiliary class for marking arguments that have not been passed."""

    def __repr__(self) -> str:
        return "<not given>"


NotGiven = NotGivenType()


class LimitExceeded(Exception):
    """Internal exception for aborting a comparison that exhausts its resources."""

    def __init__(self, mismatch: Mismatch) -> None:
        super().__init__(mismatch.detail)
        self.mismatch = mismatch


class PartialComparator:
    """Comparator checking whether an actual value contains an expected value.

    The comparator holds the options and the state of a comparison, namely the
    visitation ledger and the number of compared values. Both are reset whenever
    :meth:`compare_roots` starts a new top-level comparison, so they never carry
    over from one comparison to the next.

    Every kind of value has its own rule how the actual value must contain the
    expected value. The rules call :meth:`compare` to descend into child values and
    return a :class:`Mismatch` if the actual value does not contain the expected
    value, or None if it does.
    """

    include_non_enumerable: bool
    include_symbol_keys: bool
    max_depth: int
    max_nodes: int
    ledger: VisitationLedger
    node_count: int

    def __init__(
        self,
        include_non_enumerable: bool = False,
        include_symbol_keys: bool = True,
        max_depth: int = DEFAULT_MAX_DEPTH,
        max_nodes: int = DEFAULT_MAX_NODES,
    ) -> None:
        if not isinstance(include_non_enumerable, bool):
            raise TypeError(
                "The include_non_enumerable option must be a boolean,"
                f" got {inspect(include_non_enumerable)}."
            )
        if not isinstance(include_symbol_keys, bool):
            raise TypeError(
                "The include_symbol_keys option must be a boolean,"
                f" got {inspect(include_symbol_keys)}."
            )
        for name, limit in ("max_depth", max_depth), ("max_nodes", max_nodes):
            if not isinstance(limit, int) or isinstance(limit, bool):
                raise TypeError(f"The {name} option must be an int, got {inspect(limit)}.")
            if limit < 1:
                raise ValueError(f"The {name} option must be positive, got {limit}.")
        self.include_non_enumerable = include_non_enumerable
        self.include_symbol_keys = include_symbol_keys
        self.max_depth = max_depth
        self.max_nodes = max_nodes
        self.ledger = VisitationLedger()
        self.node_count = 0

    def compare_roots(self, actual: Any, expected: Any) -> Mismatch | None:
        """Compare the given top-level values with a fresh ledger."""
        self.ledger = VisitationLedger()
        self.node_count = 0
        try:
            return self.compare(actual, expected, None, 0)
        except LimitExceeded as error:
            return error.mismatch
        except RecursionError:
            return Mismatch(
                MismatchReason.DEPTH_EXCEEDED,
                None,
                actual,
                expected,
                "the values are nested too deeply for the interpreter",
            )
        finally:
            self.ledger = VisitationLedger()

    def compare(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Check whether the actual value contains the expected value."""
        expected_kind = classify(expected)
        if actual is expected and expected_kind is not Kind.WEAK:
            return None
        actual_kind = classify(actual)
        if actual_kind is not expected_kind:
            return Mismatch(
                MismatchReason.KIND_MISMATCH,
                path,
                actual,
                expected,
                f"got {actual_kind.value} {inspect(actual)}"
                f" where {expected_kind.value} {inspect(expected)} was expected",
            )
        self.node_count += 1
        if self.node_count > self.max_nodes:
            raise LimitExceeded(
                Mismatch(
                    MismatchReason.NODE_LIMIT_EXCEEDED,
                    path,
                    actual,
                    expected,
                    f"more than {self.max_nodes} values would need to be compared",
                )
            )
        if depth > self.max_depth:
            raise LimitExceeded(
                Mismatch(
                    MismatchReason.DEPTH_EXCEEDED,
                    path,
                    actual,
                    expected,
                    f"the values are nested deeper than {self.max_depth} levels",
                )
            )
        compare_kind = _compare_kind_functions[expected_kind]
        if expected_kind not in composite_kinds:
            return compare_kind(self, actual, expected, path, depth)
        ledger = self.ledger
        mark = ledger.mark()
        if not ledger.enter(actual, expected):
            return None  # being compared further up or already matched
        mismatch = compare_kind(self, actual, expected, path, depth)
        if mismatch is not None:
            ledger.rollback(mark)
        return mismatch

    def value_mismatch(
        self, actual: Any, expected: Any, path: Path | None, detail: str = ""
    ) -> Mismatch:
        """Create a mismatch for values that differ."""
        return Mismatch(
            MismatchReason.VALUE_MISMATCH,
            path,
            actual,
            expected,
            detail or f"{inspect(actual)} does not match {inspect(expected)}",
        )

    def record_keys(self, value: Any) -> RecordKeys:
        """Get the keys of a record that shall be compared."""
        return get_record_keys(
            value, self.include_non_enumerable, self.include_symbol_keys
        )

    def compare_primitives(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        if is_same_primitive(actual, expected):
            return None
        return self.value_mismatch(actual, expected, path)

    def compare_records(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Compare all keys of the expected record with those of the actual one.

        Keys that exist only in the actual record are ignored. The values of the
        keys are read exactly once for each side.
        """
        expected_keys = self.record_keys(expected)
        if not expected_keys:
            return None
        actual_keys = self.record_keys(actual)
        missing = [key for key in expected_keys if key not in actual_keys]
        if missing:
            return missing_keys_mismatch(actual, expected, path, missing)
        depth += 1
        for key, read_expected in expected_keys.items():
            actual_value = actual_keys[key]()
            expected_value = read_expected()
            mismatch = self.compare(
                actual_value, expected_value, Path(path, key, "attribute"), depth
            )
            if mismatch is not None:
                return mismatch
        return None

    def compare_sequences(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Check that every expected element has its own matching actual element.

        The position of the elements does not matter, but an element that appears
        several times in the expected sequence must appear at least as many times
        in the actual sequence. Sequences of the same length are first compared
        element by element, which is the common case and much faster.
        """
        expected_items = list(expected)
        actual_items = list(actual)
        expected_length, actual_length = len(expected_items), len(actual_items)
        if expected_length > actual_length:
            return Mismatch(
                MismatchReason.COUNT_MISMATCH,
                path,
                actual,
                expected,
                f"expected at least {expected_length} elements,"
                f" but found only {actual_length}",
            )
        if not expected_length:
            return None
        aligned_mismatch: Mismatch | None = None
        aligned_index = -1
        if expected_length == actual_length:
            for index, (actual_item, expected_item) in enumerate(
                zip(actual_items, expected_items)
            ):
                aligned_mismatch = self.compare(
                    actual_item, expected_item, Path(path, index, "index"), depth + 1
                )
                if aligned_mismatch is not None:
                    aligned_index = index
                    break
            else:
                return None
        index = self.match_elements(actual_items, expected_items, path, depth)
        if index is None:
            return None
        mismatch, available = self.count_mismatch(
            actual, expected, actual_items, expected_items, index, path, depth, "index"
        )
        if aligned_mismatch is not None and index == aligned_index and not available:
            # nothing else could match, so the element-wise result is more precise
            return aligned_mismatch
        return mismatch

    def compare_mappings(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Compare all entries of the expected mapping with the actual ones.

        Keys are matched by value, not by identity. Primitive keys are looked up
        directly, other keys are searched among all actual keys.
        """
        lookup = key_lookup(actual)
        found: list[tuple] = []
        missing: list[Any] = []
        skip_symbols = not self.include_symbol_keys
        for key in expected:
            if skip_symbols and isinstance(key, Symbol):
                continue
            candidates = self.find_keys(actual, lookup, key, path, depth)
            if candidates:
                found.append((key, candidates))
            else:
                missing.append(key)
        if missing:
            return missing_keys_mismatch(actual, expected, path, missing)
        depth += 1
        for key, candidates in found:
            expected_value = expected[key]
            key_path = Path(path, key, "key")
            first_mismatch: Mismatch | None = None
            for actual_key in candidates:
                mismatch = self.compare(
                    actual[actual_key], expected_value, key_path, depth
                )
                if mismatch is None:
                    break
                if first_mismatch is None:
                    first_mismatch = mismatch
            else:
                return first_mismatch
        return None

    def find_keys(
        self,
        actual: Any,
        lookup: dict[Any, Any] | None,
        key: Any,
        path: Path | None,
        depth: int,
    ) -> list[Any]:
        """Find the keys of the actual mapping that match the expected key."""
        key_path = Path(path, key, "key")
        if lookup is not None:
            try:
                candidate = lookup.get(key, NotGiven)
            except TypeError:  # unhashable key
                candidate = NotGiven
            if candidate is not NotGiven:
                if self.compare(candidate, key, key_path, depth + 1) is None:
                    return [candidate]
            if primitive_key(key) not in (NotGiven, ("nan",)):
                return []  # equal primitives have equal hashes, except NaN
        return [
            actual_key
            for actual_key in actual
            if self.compare(actual_key, key, key_path, depth + 1) is None
        ]

    def compare_sets(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Check that every expected member has its own matching actual member.

        Members that are contained in the actual set as they are (by hash and
        equality) are matched directly, the others need to be searched.
        """
        expected_length, actual_length = len(expected), len(actual)
        if expected_length > actual_length:
            return Mismatch(
                MismatchReason.COUNT_MISMATCH,
                path,
                actual,
                expected,
                f"expected at least {expected_length} members,"
                f" but found only {actual_length}",
            )
        if not expected_length:
            return None
        lookup = key_lookup(actual)
        expected_items = list(expected)
        remaining: list[Any] = expected_items
        used: list[Any] = []
        if lookup is not None:
            remaining = []
            for member in expected_items:
                try:
                    candidate = lookup.get(member, NotGiven)
                except TypeError:  # unhashable member
                    candidate = NotGiven
                if candidate is not NotGiven and (
                    self.compare(
                        candidate, member, Path(path, member, "member"), depth + 1
                    )
                    is None
                ):
                    used.append(candidate)
                else:
                    remaining.append(member)
            if not remaining:
                return None
        actual_items = list(actual)
        if used:
            unused = [item for item in actual_items if not any(item is u for u in used)]
            if self.match_members(unused, remaining, path, depth, "member") is None:
                return None
        index = self.match_members(actual_items, expected_items, path, depth, "member")
        if index is None:
            return None
        mismatch, _available = self.count_mismatch(
            actual, expected, actual_items, expected_items, index, path, depth, "member"
        )
        return mismatch

    def match_elements(
        self,
        actual_items: list[Any],
        expected_items: list[Any],
        path: Path | None,
        depth: int,
    ) -> int | None:
        """Assign a different matching actual element to every expected element.

        Primitive elements can only match primitive elements that are the same, so
        they are simply counted. Only the other elements need to be assigned with
        :meth:`match_members`. Returns the index of the first expected element that
        cannot be assigned, or None if all can be assigned.
        """
        available: Counter = Counter()
        others: list[Any] = []
        for item in actual_items:
            key = primitive_key(item)
            if key is NotGiven:
                others.append(item)
            else:
                available[key] += 1
        unmatched: int | None = None
        other_indices: list[int] = []
        for index, item in enumerate(expected_items):
            key = primitive_key(item)
            if key is NotGiven:
                other_indices.append(index)
            elif available[key]:
                available[key] -= 1
            elif unmatched is None:
                unmatched = index
        if other_indices:
            other_index = self.match_members(
                others,
                [expected_items[index] for index in other_indices],
                path,
                depth,
                "index",
            )
            if other_index is not None:
                index = other_indices[other_index]
                if unmatched is None or index < unmatched:
                    unmatched = index
        return unmatched

    def match_members(
        self,
        actual_items: list[Any],
        expected_items: list[Any],
        path: Path | None,
        depth: int,
        kind: str,
    ) -> int | None:
        """Assign a different matching actual item to every expected item.

        This is a maximum bipartite matching using augmenting paths, so the result
        does not depend on the order of the items. Returns the index of the first
        expected item that cannot be assigned, or None if all can be assigned.
        """
        depth += 1
        results: dict[tuple, bool] = {}
        owners: dict[int, int] = {}  # index of actual item -> index of expected item
        actual_range = range(len(actual_items))

        def is_match(actual_index: int, expected_index: int) -> bool:
            pair = actual_index, expected_index
            result = results.get(pair)
            if result is None:
                expected_item = expected_items[expected_index]
                key = expected_index if kind == "index" else expected_item
                result = results[pair] = (
                    self.compare(
                        actual_items[actual_index],
                        expected_item,
                        Path(path, key, kind),
                        depth,
                    )
                    is None
                )
            return result

        def assign(expected_index: int, visited: set) -> bool:
            for actual_index in actual_range:
                if (
                    actual_index not in owners
                    and actual_index not in visited
                    and is_match(actual_index, expected_index)
                ):
                    owners[actual_index] = expected_index
                    return True
            for actual_index in actual_range:
                if (
                    actual_index in owners
                    and actual_index not in visited
                    and is_match(actual_index, expected_index)
                ):
                    visited.add(actual_index)
                    if assign(owners[actual_index], visited):
                        owners[actual_index] = expected_index
                        return True
            return False

        for expected_index in range(len(expected_items)):
            if not assign(expected_index, set()):
                return expected_index
        return None

    def count_mismatch(
        self,
        actual: Any,
        expected: Any,
        actual_items: list[Any],
        expected_items: list[Any],
        index: int,
        path: Path | None,
        depth: int,
        kind: str,
    ) -> tuple[Mismatch, int]:
        """Describe an expected item for which no actual item is left.

        Returns the mismatch and the number of actual items matching the item.
        """
        item = expected_items[index]
        item_path = Path(path, index if kind == "index" else item, kind)
        depth += 1
        compare = self.compare
        wanted = sum(
            1
            for other in expected_items
            if other is item
            or (
                compare(other, item, item_path, depth) is None
                and compare(item, other, item_path, depth) is None
            )
        )
        available = sum(
            1
            for candidate in actual_items
            if compare(candidate, item, item_path, depth) is None
        )
        noun = "elements" if kind == "index" else "members"
        return (
            Mismatch(
                MismatchReason.COUNT_MISMATCH,
                path,
                actual,
                expected,
                f"found {available} of {wanted} expected {noun}"
                f" matching {inspect(item)}",
            ),
            available,
        )

    def compare_temporals(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        if temporal_family(actual) is temporal_family(expected) and actual == expected:
            return None
        return self.value_mismatch(actual, expected, path)

    def compare_patterns(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        if actual.pattern == expected.pattern and actual.flags == expected.flags:
            return None
        return self.value_mismatch(actual, expected, path)

    def compare_buffers(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        """Compare binary buffers by their format, shape and content."""
        actual_format, actual_size, actual_shape = buffer_species(actual)
        expected_format, expected_size, expected_shape = buffer_species(expected)
        if actual_format != expected_format or actual_size != expected_size:
            return Mismatch(
                MismatchReason.KIND_MISMATCH,
                path,
                actual,
                expected,
                f"got buffer of format {actual_format!r}"
                f" where format {expected_format!r} was expected",
            )
        with memoryview(actual) as actual_view, memoryview(expected) as expected_view:
            if actual_shape != expected_shape:
                return self.value_mismatch(
                    actual,
                    expected,
                    path,
                    f"buffer of shape {actual_shape} and {actual_view.nbytes} bytes"
                    f" does not match shape {expected_shape}"
                    f" and {expected_view.nbytes} bytes",
                )
            if actual_view.tobytes() != expected_view.tobytes():
                return self.value_mismatch(actual, expected, path)
        return None

    def compare_errors(
        self, actual: Any, expected: Any, path: Path | None, depth: int
    ) -> Mismatch | None:
        """Compare errors by category, message and public attributes."""
        actual_category = type(actual).__name__
        expected_category = type(expected).__name__
        if actual_category != expected_category:
            return self.value_mismatch(
                actual,
                expected,
                path,
                f"error category {actual_category}"
                f" does not match {expected_category}",
            )
        actual_message, expected_message = str(actual), str(expected)
        if actual_message != expected_message:
            return self.value_mismatch(
                actual,
                expected,
                path,
                f"error message {inspect(actual_message)}"
                f" does not match {inspect(expected_message)}",
            )
        return self.compare_records(actual, expected, path, depth)

    def compare_functions(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        """Compare functions, which only match if they are the same function."""
        if ismethod(actual) and ismethod(expected) and actual == expected:
            return None  # the same method bound to the same object
        return self.value_mismatch(
            actual,
            expected,
            path,
            f"{inspect(actual)} is not the same as {inspect(expected)}",
        )

    def compare_opaque_keys(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        """Compare keyed hash objects by their algorithm and their key material.

        Since the key material cannot be accessed, the digests of copies of the
        current states are compared instead.
        """
        if actual.name == expected.name and compare_digest(
            key_fingerprint(actual), key_fingerprint(expected)
        ):
            return None
        return self.value_mismatch(
            actual,
            expected,
            path,
            f"{actual.name} key handle does not match {expected.name} key handle",
        )

    def compare_weak_collections(
        self, actual: Any, expected: Any, path: Path | None, _depth: int
    ) -> Mismatch | None:
        return Mismatch(
            MismatchReason.WEAK_COLLECTION,
            path,
            actual,
            expected,
            "the content of weak collections cannot be compared",
        )


_compare_kind_functions: dict[
    Kind, Callable[[PartialComparator, Any, Any, Path | None, int], Mismatch | None]
] = {
    Kind.PRIMITIVE: PartialComparator.compare_primitives,
    Kind.RECORD: PartialComparator.compare_records,
    Kind.SEQUENCE: PartialComparator.compare_sequences,
    Kind.MAPPING: PartialComparator.compare_mappings,
    Kind.MEMBERSHIP: PartialComparator.compare_sets,
    Kind.TEMPORAL: PartialComparator.compare_temporals,
    Kind.PATTERN: PartialComparator.compare_patterns,
    Kind.BUFFER: PartialComparator.compare_buffers,
    Kind.ERROR: PartialComparator.compare_errors,
    Kind.FUNCTION: PartialComparator.compare_functions,
    Kind.OPAQUE_KEY: PartialComparator.compare_opaque_keys,
    Kind.WEAK: PartialComparator.compare_weak_collections,
}


def is_same_primitive(actual: Any, expected: Any) -> bool:
    """Check whether two primitive values are the same.

    Booleans are not numbers here, numbers are compared by value regardless of
    their type, NaN is the same as NaN, and None, Undefined and symbols are only the
    same as themselves. Enum members are compared by the name of their enum class,
    their name and their value.
    """
    if isinstance(expected, Enum) or isinstance(actual, Enum):
        return (
            isinstance(actual, Enum)
            and isinstance(expected, Enum)
            and type(actual).__qualname__ == type(expected).__qualname__
            and actual.name == expected.name
            and is_same_primitive(actual.value, expected.value)
        )
    if isinstance(expected, bool) or isinstance(actual, bool):
        return (
            isinstance(actual, bool)
            and isinstance(expected, bool)
            and actual == expected
        )
    if isinstance(expected, Number):
        if not isinstance(actual, Number):
            return False
        # noinspection PyComparisonWithSelf
        return actual == expected or (
            actual != actual and expected != expected  # noqa: PLR0124 (NaN)
        )
    if isinstance(expected, str):
        return isinstance(actual, str) and actual == expected
    if expected is None or expected is Undefined or isinstance(expected, Symbol):
        return actual is expected
    return type(actual) is type(expected) and actual == expected


def primitive_key(value: Any) -> Any:
    """Get a hashable key that is equal for primitive values that are the same.

    Returns NotGiven for values that must be compared one by one, i.e. for enum
    members, unhashable primitives and values that are not primitive.
    """
    if classify(value) is not Kind.PRIMITIVE or isinstance(value, Enum):
        return NotGiven
    if isinstance(value, bool):
        key: Any = ("bool", value)
    elif isinstance(value, Number):
        # noinspection PyComparisonWithSelf
        key = ("nan",) if value != value else ("number", value)  # noqa: PLR0124
    elif isinstance(value, str):
        key = ("str", value)
    elif value is None or value is Undefined or isinstance(value, Symbol):
        key = ("identity", id(value))
    else:
        key = (type(value), value)
    try:
        hash(key)
    except TypeError:  # unhashable primitive
        return NotGiven
    return key


def key_lookup(collection: Any) -> dict[Any, Any] | None:
    """Map the keys or members of a collection to themselves.

    This allows finding the stored key that is equal to a given key. Returns None
    if the collection contains unhashable items.
    """
    try:
        return {item: item for item in collection}
    except TypeError:
        return None


def key_fingerprint(handle: Any) -> bytes:
    """Get a digest of a hash object without changing its state."""
    duplicate = handle.copy()
    if handle.digest_size:
        return duplicate.digest()
    return duplicate.digest(64)  # extendable output functions need a length


def missing_keys_mismatch(
    actual: Any, expected: Any, path: Path | None, missing: list[Any]
) -> Mismatch:
    keys = and_list([inspect(key) for key in missing])
    noun = "key" if len(missing) == 1 else "keys"
    return Mismatch(
        MismatchReason.MISSING_KEY, path, actual, expected, f"missing {noun} {keys}"
    )


def find_mismatch(
    actual: Any = NotGiven,
    expected: Any = NotGiven,
    *,
    include_non_enumerable: bool = False,
    include_symbol_keys: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> Mismatch | None:
    """Find the place where the actual value does not contain the expected value.

    Returns None if the actual value contains the expected value. Raises an
    ArityError if not both values have been passed.
    """
    if actual is NotGiven or expected is NotGiven:
        raise ArityError(
            "The 'actual' and 'expected' arguments must be specified.",
            actual=Undefined if actual is NotGiven else actual,
            expected=Undefined if expected is NotGiven else expected,
        )
    comparator = PartialComparator(
        include_non_enumerable=include_non_enumerable,
        include_symbol_keys=include_symbol_keys,
        max_depth=max_depth,
        max_nodes=max_nodes,
    )
    return comparator.compare_roots(actual, expected)


def is_partial_deep_equal(
    actual: Any = NotGiven, expected: Any = NotGiven, **options: Any
) -> bool:
    """Check whether the actual value contains the expected value.

    Takes the same options as :func:`assert_partial_deep_equal`.
    """
    return find_mismatch(actual, expected, **options) is None


def assert_partial_deep_equal(
    actual: Any = NotGiven,
    expected: Any = NotGiven,
    message: Any | None = None,
    *,
    include_non_enumerable: bool = False,
    include_symbol_keys: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_nodes: int = DEFAULT_MAX_NODES,
) -> None:
    """Assert that the actual value contains the expected value.

    Every attribute, element, entry or member of the expected value must have a
    matching counterpart in the actual value, recursively, while the actual value
    may contain additional data. Raises a subclass of PartialDeepEqualError
    describing the first divergence that has been found otherwise.

    If a message is given, it replaces the generated message of the error. If an
    exception is given as message, that exception is raised instead.

    The options control which attributes of records are compared
    (``include_non_enumerable``, ``include_symbol_keys``) and limit the nesting
    depth and the number of compared values (``max_depth``, ``max_nodes``).

    Note that comparing records calls the getters of their properties.

    Values that are the same object always match without being compared further,
    unless they are weak collections themselves. Hence a list containing a weak
    collection matches itself, while the weak collection never matches itself.
    """
    mismatch = find_mismatch(
        actual,
        expected,
        include_non_enumerable=include_non_enumerable,
        include_symbol_keys=include_symbol_keys,
        max_depth=max_depth,
        max_nodes=max_nodes,
    )
    if mismatch is None:
        return
    if isinstance(message, BaseException):
        raise message
    if message is not None and not isinstance(message, str):
        raise TypeError(f"The message must be a string, got {inspect(message)}.")
    error: PartialDeepEqualError = mismatch_error(mismatch, message)
    raise error


partial_deep_equal = assert_partial_deep_equal
