from partial_deep_equal.comparison import VisitationLedger


def describe_visitation_ledger():
    def starts_empty():
        ledger = VisitationLedger()
        assert len(ledger) == 0
        assert ([], []) not in ledger
        assert repr(ledger) == "<VisitationLedger with 0 pairs>"

    def records_new_pairs():
        actual, expected = {"a": 1}, {"a": 1}
        ledger = VisitationLedger()
        assert ledger.enter(actual, expected) is True
        assert (actual, expected) in ledger
        assert len(ledger) == 1
        assert repr(ledger) == "<VisitationLedger with 1 pairs>"

    def recognizes_pairs_that_have_been_entered_before():
        actual, expected = [1], [1]
        ledger = VisitationLedger()
        ledger.enter(actual, expected)
        assert ledger.enter(actual, expected) is False
        assert len(ledger) == 1

    def distinguishes_pairs_by_identity():
        actual, expected = [1], [1]
        ledger = VisitationLedger()
        ledger.enter(actual, expected)
        assert (expected, actual) not in ledger
        assert (actual, [1]) not in ledger
        assert ([1], expected) not in ledger
        assert ledger.enter(actual, [1]) is True
        assert ledger.enter(expected, actual) is True
        assert len(ledger) == 3

    def can_record_a_value_paired_with_itself():
        value: list = []
        ledger = VisitationLedger()
        assert ledger.enter(value, value) is True
        assert (value, value) in ledger

    def can_roll_back_to_a_mark():
        a1, a2, a3 = [1], [2], [3]
        e1, e2, e3 = [1], [2], [3]
        ledger = VisitationLedger()
        ledger.enter(a1, e1)
        mark = ledger.mark()
        assert mark == 1
        ledger.enter(a2, e2)
        ledger.enter(a3, e3)
        ledger.enter(a1, e2)
        assert len(ledger) == 4
        ledger.rollback(mark)
        assert len(ledger) == 1
        assert (a1, e1) in ledger
        assert (a2, e2) not in ledger
        assert (a3, e3) not in ledger
        assert (a1, e2) not in ledger
        assert ledger.enter(a2, e2) is True

    def rolling_back_to_the_current_mark_changes_nothing():
        actual, expected = {}, {}
        ledger = VisitationLedger()
        ledger.enter(actual, expected)
        ledger.rollback(ledger.mark())
        assert (actual, expected) in ledger

    def supports_nested_marks():
        values = [[n] for n in range(6)]
        ledger = VisitationLedger()
        outer = ledger.mark()
        ledger.enter(values[0], values[1])
        inner = ledger.mark()
        ledger.enter(values[2], values[3])
        ledger.rollback(inner)
        ledger.enter(values[4], values[5])
        assert len(ledger) == 2
        ledger.rollback(outer)
        assert len(ledger) == 0
