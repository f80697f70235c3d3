from pytest import raises

from partial_deep_equal.pyutils import and_list, or_list


def describe_and_list():
    def does_not_accept_an_empty_list():
        with raises(ValueError):
            and_list([])

    def handles_single_item():
        assert and_list(["A"]) == "A"

    def handles_two_items():
        assert and_list(["A", "B"]) == "A and B"

    def handles_three_items():
        assert and_list(["A", "B", "C"]) == "A, B, and C"

    def handles_more_than_five_items():
        assert and_list(["A", "B", "C", "D", "E", "F"]) == "A, B, C, D, E, and F"

    def cuts_off_overly_many_items():
        items = [str(n) for n in range(15)]
        assert and_list(items) == "0, 1, 2, 3, 4, 5, 6, 7, 8, 9, and 5 more"
        assert and_list(items, 3) == "0, 1, 2, and 12 more"
        assert and_list(items, None) == ", ".join(items[:-1]) + ", and 14"


def describe_or_list():
    def does_not_accept_an_empty_list():
        with raises(ValueError):
            or_list([])

    def handles_single_item():
        assert or_list(["A"]) == "A"

    def handles_two_items():
        assert or_list(["A", "B"]) == "A or B"

    def handles_three_items():
        assert or_list(["A", "B", "C"]) == "A, B, or C"

    def handles_more_than_five_items():
        assert or_list(["A", "B", "C", "D", "E", "F"]) == "A, B, C, D, E, or F"

    def cuts_off_overly_many_items():
        items = [chr(65 + n) for n in range(12)]
        assert or_list(items) == "A, B, C, D, E, F, G, H, I, J, or 2 more"
