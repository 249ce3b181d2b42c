from utilbox.vectors import max_element, min_element, slice_of


def test_max_element():
    assert max_element([3, 7, 5]) == 7


def test_min_element():
    assert min_element([3, 7, 5]) == 3


def test_key_is_used():
    words = ["aa", "b", "cccc"]
    assert max_element(words, key=len) == "cccc"
    assert min_element(words, key=len) == "b"


def test_first_of_equal_elements_wins():
    pairs = [(1, "a"), (1, "b")]
    assert max_element(pairs, key=lambda p: p[0]) == (1, "a")
    assert min_element(pairs, key=lambda p: p[0]) == (1, "a")


def test_empty_gives_default():
    assert max_element([], default=0) == 0
    assert min_element([], default="") == ""


def test_slice_range():
    assert slice_of([10, 20, 30, 40], 1, 3) == [20, 30]


def test_slice_to_end():
    assert slice_of([10, 20, 30, 40], 2) == [30, 40]


def test_slice_whole_is_copy():
    values = [1, 2, 3]
    result = slice_of(values)
    assert result == values
    result.append(4)
    assert values == [1, 2, 3]