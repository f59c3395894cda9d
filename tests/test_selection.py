import pytest

from dsakit.selection import (
    common_chars,
    digit_indices,
    majority_element,
    second_largest,
)


def test_digit_indices_source_example():
    assert digit_indices([1, 2, 3, 4, 5, 6, 7, 8, 9, 10], 15) == [0, 4]


def test_digit_indices_repeats():
    assert digit_indices([1, 2, 1], 12) == [0, 2, 1]


def test_digit_indices_none_found():
    assert digit_indices([7, 8, 9], 12) == []


def test_digit_indices_zero_target():
    assert digit_indices([0, 1], 0) == []


def test_digit_indices_negative():
    with pytest.raises(ValueError):
        digit_indices([1], -5)


def test_second_largest_basic():
    assert second_largest([12, 35, 1, 10, 34, 1]) == 34


def test_second_largest_duplicates_of_max():
    assert second_largest([10, 5, 10]) == 5


def test_second_largest_negative_values():
    assert second_largest([-3, -1, -2]) == -2


def test_second_largest_all_equal():
    assert second_largest([10, 10, 10]) is None


def test_second_largest_empty():
    assert second_largest([]) is None


def test_majority_element_found():
    assert majority_element([3, 1, 3, 3, 2]) == 3


def test_majority_element_exactly_half_is_not_enough():
    assert majority_element([1, 1, 2, 2]) is None


def test_majority_element_single():
    assert majority_element([7]) == 7


def test_majority_element_empty():
    assert majority_element([]) is None


def test_common_chars_source_examples():
    assert common_chars(["bella", "label", "roller"]) == ["e", "l", "l"]
    assert common_chars(["cool", "lock", "cook"]) == ["c", "o"]


def test_common_chars_single_word():
    assert common_chars(["abca"]) == ["a", "a", "b", "c"]


def test_common_chars_nothing_shared():
    assert common_chars(["abc", "def"]) == []


def test_common_chars_no_words():
    assert common_chars([]) == []