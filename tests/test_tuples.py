import pytest

from utilbox.tuples import Order, as_string, from_strings, sort_by, to_string


def test_order_inversion_changes_sort_direction():
    assert ~Order.UP is Order.DOWN
    assert ~Order.DOWN is Order.UP
    rows = [(1, "a"), (3, "c"), (2, "b")]
    sort_by(~Order.UP, 0, rows)
    assert rows == [(3, "c"), (2, "b"), (1, "a")]
    sort_by(~Order.DOWN, 0, rows)
    assert rows == [(1, "a"), (2, "b"), (3, "c")]


@pytest.mark.parametrize(
    "lhs, rhs, expected",
    [
        (Order.UP, Order.UP, Order.UP),
        (Order.DOWN, Order.DOWN, Order.UP),
        (Order.DOWN, Order.UP, Order.DOWN),
        (Order.UP, Order.DOWN, Order.DOWN),
    ],
)
def test_order_subtraction(lhs, rhs, expected):
    assert lhs - rhs is expected


def test_sort_up_by_first_column():
    rows = [(3, "c"), (1, "a"), (2, "b")]
    sort_by(Order.UP, 0, rows)
    assert rows == [(1, "a"), (2, "b"), (3, "c")]


def test_sort_down_by_second_column():
    rows = [(1, "a"), (3, "c"), (2, "b")]
    sort_by(Order.DOWN, 1, rows)
    assert rows == [(3, "c"), (2, "b"), (1, "a")]


def test_sort_up_is_stable():
    rows = [(1, "x"), (0, "y"), (1, "z")]
    sort_by(Order.UP, 0, rows)
    assert rows == [(0, "y"), (1, "x"), (1, "z")]


def test_sort_down_keeps_order_of_equal_rows():
    rows = [(1, "x"), (2, "y"), (1, "z")]
    sort_by(Order.DOWN, 0, rows)
    assert rows == [(2, "y"), (1, "x"), (1, "z")]


@pytest.mark.parametrize("index", [2, 7, -1])
def test_sort_with_index_out_of_range_is_noop(index):
    rows = [(3, "c"), (1, "a"), (2, "b")]
    before = list(rows)
    sort_by(Order.UP, index, rows)
    assert rows == before


def test_sort_empty_rows():
    rows = []
    sort_by(Order.DOWN, 0, rows)
    assert rows == []


def test_as_string_columns():
    row = (1, "abc", 2.5)
    assert as_string(0, row) == "1"
    assert as_string(1, row) == "abc"
    assert as_string(2, row) == "2.5"


def test_as_string_out_of_range_is_empty():
    assert as_string(5, (1, 2)) == ""
    assert as_string(-1, (1, 2)) == ""


def test_to_string_joins_with_commas():
    assert to_string((1, "a", 2.5)) == "1,a,2.5"


def test_from_strings_converts_columns():
    assert from_strings((int, float, str), ["1", "2.5", "x"]) == (1, 2.5, "x")


def test_round_trip_through_text():
    row = (42, 0.5, "word")
    types = (int, float, str)
    assert from_strings(types, to_string(row).split(",")) == row


def test_from_strings_ignores_extra_values():
    assert from_strings((int,), ["7", "8"]) == (7,)


def test_from_strings_needs_enough_values():
    with pytest.raises(ValueError):
        from_strings((int, int), ["1"])