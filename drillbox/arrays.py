"""Checks and transformations on flat sequences of integers."""

from collections.abc import MutableSequence, Sequence
from itertools import pairwise


def count_even_digit_numbers(nums: Sequence[int]) -> int:
    """Count the numbers whose decimal form has an even number of digits."""
    return sum(1 for n in nums if len(str(abs(n))) % 2 == 0)


def _is_triangle(a: int, b: int, c: int) -> bool:
    return a + b > c and a + c > b and b + c > a


def triangle_type(nums: Sequence[int]) -> str:
    """Classify three side lengths as equilateral, isosceles, scalene or none."""
    if len(nums) != 3:
        return "none"
    a, b, c = nums
    if a == b == c:
        return "equilateral"
    if not _is_triangle(a, b, c):
        return "none"
    if a == b or a == c or b == c:
        return "isosceles"
    return "scalene"


def average_excluding_extremes(salary: Sequence[int]) -> float:
    """Average the salaries after dropping one minimum and one maximum."""
    if len(salary) < 3:
        raise ValueError("at least three salaries are needed")
    middle = sorted(salary)[1:-1]
    return sum(middle) / len(middle)


def can_make_arithmetic_progression(arr: Sequence[int]) -> bool:
    """Return True if the values can be reordered into an arithmetic progression."""
    if len(arr) <= 2:
        return True
    ordered = sorted(arr)
    step = ordered[1] - ordered[0]
    return all(right - left == step for left, right in pairwise(ordered))


def largest_perimeter(nums: Sequence[int]) -> int:
    """Return the largest perimeter of a triangle built from three of the lengths.

    Returns 0 when no three lengths form a triangle with non-zero area.
    """
    ordered = sorted(nums, reverse=True)
    for a, b, c in zip(ordered, ordered[1:], ordered[2:]):
        if b + c > a:
            return a + b + c
    return 0


def lemonade_change(bills: Sequence[int]) -> bool:
    """Return True if every customer buying a 5 lemonade can get correct change.

    Bills other than 5 and 10 are treated as 20.
    """
    fives = tens = 0
    for bill in bills:
        if bill == 5:
            fives += 1
        elif bill == 10:
            if not fives:
                return False
            fives -= 1
            tens += 1
        elif tens and fives:
            tens -= 1
            fives -= 1
        elif fives >= 3:
            fives -= 3
        else:
            return False
    return True


def is_monotonic(nums: Sequence[int]) -> bool:
    """Return True if the values never decrease or never increase."""
    increasing = decreasing = True
    for previous, current in pairwise(nums):
        if current > previous:
            decreasing = False
        if current < previous:
            increasing = False
    return increasing or decreasing


def move_zeroes(nums: MutableSequence[int]) -> None:
    """Move every zero to the end in place, keeping the order of the others."""
    non_zero = [n for n in nums if n != 0]
    nums[:] = non_zero + [0] * (len(nums) - len(non_zero))


def plus_one(digits: Sequence[int]) -> list[int]:
    """Add one to a number given as a list of decimal digits, most significant first."""
    result = list(digits)
    for index in reversed(range(len(result))):
        if result[index] < 9:
            result[index] += 1
            return result
        result[index] = 0
    return [1, *result]


def array_sign(nums: Sequence[int]) -> int:
    """Return 1, -1 or 0: the sign of the product of the values."""
    sign = 1
    for n in nums:
        if n == 0:
            return 0
        if n < 0:
            sign = -sign
    return sign


def count_odds(low: int, high: int) -> int:
    """Count the odd integers between ``low`` and ``high`` inclusive."""
    if low > high:
        return 0
    return (high + 1) // 2 - low // 2