import pytest

from drillbox.strings import (
    add_binary,
    find_first_occurrence,
    find_the_difference,
    has_repeated_substring_pattern,
    is_anagram,
    length_of_last_word,
    merge_alternately,
    multiply,
    roman_to_int,
    to_lower_case,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", 5),
        ("   fly me   to   the moon  ", 4),
        ("luffy is still joyboy", 6),
    ],
)
def test_length_of_last_word(text, expected):
    assert length_of_last_word(text) == expected


def test_length_of_last_word_without_words():
    assert length_of_last_word("     ") == 0


@pytest.mark.parametrize(
    "word1, word2",
    [("abc", "pqr"), ("ab", "pqrs"), ("abcd", "pq"), ("", "xyz")],
)
def test_merge_alternately_interleaves(word1, word2):
    merged = merge_alternately(word1, word2)
    assert len(merged) == len(word1) + len(word2)
    common = min(len(word1), len(word2))
    assert merged[: 2 * common : 2] == word1[:common]
    assert merged[1 : 2 * common : 2] == word2[:common]
    longer = word1 if len(word1) > len(word2) else word2
    assert merged[2 * common :] == longer[common:]


@pytest.mark.parametrize(
    "a, b, expected",
    [("11", "1", "100"), ("1010", "1011", "10101"), ("111", "111", "1110")],
)
def test_add_binary(a, b, expected):
    assert add_binary(a, b) == expected


@pytest.mark.parametrize("x, y", [(0, 0), (1, 0), (5, 9), (255, 1), (1023, 77)])
def test_add_binary_matches_integer_sum(x, y):
    assert int(add_binary(format(x, "b"), format(y, "b")), 2) == x + y


def test_add_binary_rejects_non_binary():
    with pytest.raises(ValueError):
        add_binary("12", "1")


@pytest.mark.parametrize(
    "haystack, needle",
    [("sadbutsad", "sad"), ("hello", "ll"), ("abcabd", "abd")],
)
def test_find_first_occurrence_points_at_first_match(haystack, needle):
    index = find_first_occurrence(haystack, needle)
    assert haystack[index : index + len(needle)] == needle
    assert needle not in haystack[: index + len(needle) - 1]


def test_find_first_occurrence_missing():
    assert find_first_occurrence("leetcode", "leeto") == -1


def test_find_first_occurrence_empty_needle():
    assert find_first_occurrence("anything", "") == 0


@pytest.mark.parametrize("s, t, extra", [("", "y", "y"), ("abcd", "abcde", "e")])
def test_find_the_difference(s, t, extra):
    assert find_the_difference(s, t) == extra


def test_find_the_difference_with_shuffled_input():
    assert find_the_difference("abcd", "dxcba") == "x"


@pytest.mark.parametrize(
    "num1, num2, expected", [("2", "3", "6"), ("4", "5", "20"), ("0", "1", "0")]
)
def test_multiply(num1, num2, expected):
    assert multiply(num1, num2) == expected


@pytest.mark.parametrize("x, y", [(123, 456), (99, 99), (1, 100000), (987654321, 0)])
def test_multiply_matches_integer_product(x, y):
    assert multiply(str(x), str(y)) == str(x * y)


def test_multiply_rejects_non_digits():
    with pytest.raises(ValueError):
        multiply("1a", "2")


@pytest.mark.parametrize(
    "text, expected",
    [("abab", True), ("aba", False), ("abcabcabcabc", True), ("a", False)],
)
def test_has_repeated_substring_pattern(text, expected):
    assert has_repeated_substring_pattern(text) is expected


@pytest.mark.parametrize(
    "text, expected",
    [("Hello", "hello"), ("LOVELY", "lovely"), ("al&phaBET", "al&phabet")],
)
def test_to_lower_case(text, expected):
    assert to_lower_case(text) == expected


def test_to_lower_case_leaves_non_ascii():
    assert to_lower_case("É") == "É"


@pytest.mark.parametrize(
    "s, t, expected",
    [
        ("anagram", "nagaram", True),
        ("rat", "car", False),
        ("hello", "olleh", True),
        ("ab", "abc", False),
    ],
)
def test_is_anagram(s, t, expected):
    assert is_anagram(s, t) is expected


@pytest.mark.parametrize(
    "numeral, expected", [("III", 3), ("LVIII", 58), ("MCMXCIV", 1994)]
)
def test_roman_to_int(numeral, expected):
    assert roman_to_int(numeral) == expected


def test_roman_to_int_empty():
    assert roman_to_int("") == 0