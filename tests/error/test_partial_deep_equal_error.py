from pytest import raises

from partial_deep_equal.error import (
    ArityError,
    CountMismatch,
    DepthExceeded,
    KindMismatch,
    MismatchReason,
    MissingKey,
    NodeLimitExceeded,
    PartialDeepEqualError,
    ValueMismatch,
    error_class_for_reason,
    format_error,
)
from partial_deep_equal.pyutils import Undefined


def describe_partial_deep_equal_error():
    def is_a_class_and_is_a_subclass_of_assertion_error():
        assert isinstance(PartialDeepEqualError, type)
        assert issubclass(PartialDeepEqualError, AssertionError)
        assert isinstance(PartialDeepEqualError("str"), AssertionError)

    def has_a_message_and_no_path_by_default():
        e = PartialDeepEqualError("msg")
        assert e.message == "msg"
        assert str(e) == "msg"
        assert e.args == ("msg",)
        assert e.reason is None
        assert e.path is None
        assert e.actual is Undefined
        assert e.expected is Undefined
        assert e.mismatch is None

    def converts_path_to_a_list():
        e = PartialDeepEqualError("msg", path=("a", 0, "b"))
        assert e.path == ["a", 0, "b"]
        e = PartialDeepEqualError("msg", path=[])
        assert e.path is None

    def keeps_the_diverging_values():
        actual, expected = [1], [2]
        e = ValueMismatch("msg", path=[0], actual=actual, expected=expected)
        assert e.actual is actual
        assert e.expected is expected

    def has_a_repr():
        e = PartialDeepEqualError("msg", MismatchReason.VALUE_MISMATCH, ["a", 1])
        assert repr(e) == (
            "PartialDeepEqualError('msg',"
            " reason=<MismatchReason.VALUE_MISMATCH>, path=['a', 1])"
        )

    def does_not_repeat_the_default_reason_in_repr():
        assert repr(MissingKey("msg", path=["a"])) == "MissingKey('msg', path=['a'])"
        assert repr(CountMismatch("msg")) == "CountMismatch('msg')"

    def is_hashable():
        hash(PartialDeepEqualError("msg"))

    def can_be_raised_and_caught_as_assertion_error():
        with raises(AssertionError) as exc_info:
            raise KindMismatch("kinds differ")
        assert isinstance(exc_info.value, PartialDeepEqualError)
        assert str(exc_info.value) == "kinds differ"


def describe_error_subclasses():
    def have_their_reason_as_default():
        assert ArityError("msg").reason is MismatchReason.ARITY
        assert KindMismatch("msg").reason is MismatchReason.KIND_MISMATCH
        assert MissingKey("msg").reason is MismatchReason.MISSING_KEY
        assert ValueMismatch("msg").reason is MismatchReason.VALUE_MISMATCH
        assert CountMismatch("msg").reason is MismatchReason.COUNT_MISMATCH
        assert DepthExceeded("msg").reason is MismatchReason.DEPTH_EXCEEDED
        assert NodeLimitExceeded("msg").reason is MismatchReason.NODE_LIMIT_EXCEEDED

    def can_override_the_default_reason():
        e = ValueMismatch("msg", MismatchReason.WEAK_COLLECTION)
        assert e.reason is MismatchReason.WEAK_COLLECTION

    def node_limit_is_a_kind_of_depth_exceeded():
        assert issubclass(NodeLimitExceeded, DepthExceeded)
        assert not issubclass(DepthExceeded, NodeLimitExceeded)

    def are_looked_up_by_reason():
        assert error_class_for_reason(MismatchReason.ARITY) is ArityError
        assert error_class_for_reason(MismatchReason.MISSING_KEY) is MissingKey
        assert error_class_for_reason(MismatchReason.WEAK_COLLECTION) is ValueMismatch
        assert (
            error_class_for_reason(MismatchReason.NODE_LIMIT_EXCEEDED)
            is NodeLimitExceeded
        )
        for reason in MismatchReason:
            assert issubclass(error_class_for_reason(reason), PartialDeepEqualError)


def describe_mismatch_reason():
    def has_readable_values():
        assert MismatchReason.MISSING_KEY.value == "missing key"
        assert MismatchReason.COUNT_MISMATCH.value == "count mismatch"

    def has_a_repr():
        assert repr(MismatchReason.ARITY) == "<MismatchReason.ARITY>"


def describe_format_error():
    def formats_partial_deep_equal_error():
        e = MissingKey("missing key 'a'", path=["b", 0])
        assert format_error(e) == {
            "message": "missing key 'a'",
            "reason": "missing key",
            "path": ["b", 0],
        }
        assert e.formatted == format_error(e)

    def uses_default_message():
        e = PartialDeepEqualError("")
        assert format_error(e) == {
            "message": "The values are not partially deep-equal.",
            "reason": None,
            "path": None,
        }

    def rejects_other_errors():
        with raises(TypeError) as exc_info:
            format_error(AssertionError("msg"))  # type: ignore
        assert str(exc_info.value) == "Expected a PartialDeepEqualError."
