"""Small string utilities: words, binary and decimal arithmetic, patterns."""

import string
from collections import Counter
from itertools import zip_longest

_ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def length_of_last_word(s: str) -> int:
    """Return the length of the last space-separated word in ``s``."""
    return len(s.rstrip(" ").rsplit(" ", 1)[-1])


def merge_alternately(word1: str, word2: str) -> str:
    """Interleave the characters of two words, appending the leftover tail."""
    return "".join(a + b for a, b in zip_longest(word1, word2, fillvalue=""))


def _bit(char: str) -> int:
    if char not in "01":
        raise ValueError(f"{char!r} is not a binary digit")
    return int(char)


def add_binary(a: str, b: str) -> str:
    """Add two binary numbers given as strings of 0 and 1."""
    carry = 0
    digits = []
    for left, right in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        total = _bit(left) + _bit(right) + carry
        digits.append(str(total % 2))
        carry = total // 2
    if carry:
        digits.append("1")
    return "".join(reversed(digits))


def find_first_occurrence(haystack: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    if not needle:
        return 0
    return haystack.find(needle)


def find_the_difference(s: str, t: str) -> str:
    """Return the one character that ``t`` holds beyond the characters of ``s``."""
    code = sum(map(ord, t)) - sum(map(ord, s))
    if code < 0:
        raise ValueError("t does not hold an extra character over s")
    return chr(code)


def _digit(char: str) -> int:
    if char not in string.digits:
        raise ValueError(f"{char!r} is not a decimal digit")
    return int(char)


def multiply(num1: str, num2: str) -> str:
    """Multiply two non-negative decimal numbers given as strings."""
    if num1 == "0" or num2 == "0":
        return "0"
    left = [_digit(c) for c in num1]
    right = [_digit(c) for c in num2]
    result = [0] * (len(left) + len(right))
    for i in reversed(range(len(left))):
        for j in reversed(range(len(right))):
            total = left[i] * right[j] + result[i + j + 1]
            result[i + j + 1] = total % 10
            result[i + j] += total // 10
    product = "".join(map(str, result)).lstrip("0")
    return product or "0"


def has_repeated_substring_pattern(s: str) -> bool:
    """Return True if ``s`` is a shorter substring repeated several times."""
    n = len(s)
    return any(
        n % size == 0 and s[:size] * (n // size) == s
        for size in range(1, n // 2 + 1)
    )


def to_lower_case(s: str) -> str:
    """Lower-case the ASCII capital letters of ``s``, leaving the rest alone."""
    return s.translate(_ASCII_LOWER)


def is_anagram(s: str, t: str) -> bool:
    """Return True if ``t`` is a rearrangement of the characters of ``s``."""
    return len(s) == len(t) and Counter(s) == Counter(t)


def roman_to_int(s: str) -> int:
    """Convert a Roman numeral to an integer; unknown characters count as 0."""
    result = 0
    previous = 0
    for char in reversed(s):
        value = _ROMAN_VALUES.get(char, 0)
        if value < previous:
            result -= value
        else:
            result += value
        previous = value
    return result