# drillbox

Small pure-Python functions for classic programming exercises on strings,
integer sequences, matrices, graphs and simple games. It needs nothing beyond
the standard library.

## Installation

```
pip install .
```

With the test tools:

```
pip install ".[test]"
```

## Modules

### `drillbox.strings`

- `length_of_last_word(s)`: length of the last space-separated word.
- `merge_alternately(word1, word2)`: interleaves two words, then appends the
  rest of the longer one.
- `add_binary(a, b)`: adds two binary strings; raises `ValueError` on a
  character other than `0` or `1`.
- `find_first_occurrence(haystack, needle)`: index of the first occurrence,
  `-1` if absent, `0` for an empty needle.
- `find_the_difference(s, t)`: the extra character `t` holds over `s`, found
  from the difference of character codes; raises `ValueError` if that
  difference is negative.
- `multiply(num1, num2)`: multiplies two non-negative decimal strings; raises
  `ValueError` on a non-digit.
- `has_repeated_substring_pattern(s)`: whether `s` is a shorter substring
  repeated.
- `to_lower_case(s)`: lower-cases ASCII capitals only.
- `is_anagram(s, t)`: whether `t` is a rearrangement of `s`.
- `roman_to_int(s)`: converts a Roman numeral; unknown characters count as 0.

### `drillbox.arrays`

- `count_even_digit_numbers(nums)`: how many numbers have an even digit count.
- `triangle_type(nums)`: `"equilateral"`, `"isosceles"`, `"scalene"` or
  `"none"` for three side lengths (`"none"` for any other count).
- `average_excluding_extremes(salary)`: mean after dropping one minimum and one
  maximum; raises `ValueError` for fewer than three values.
- `can_make_arithmetic_progression(arr)`: whether a reordering is an
  arithmetic progression.
- `largest_perimeter(nums)`: largest perimeter of a non-degenerate triangle
  from three of the lengths, or `0`.
- `lemonade_change(bills)`: whether change can be given to every customer;
  bills other than 5 and 10 count as 20.
- `is_monotonic(nums)`: whether the values never rise or never fall.
- `move_zeroes(nums)`: moves zeros to the end **in place**, keeping the order
  of the rest.
- `plus_one(digits)`: returns a new digit list with one added.
- `array_sign(nums)`: `1`, `-1` or `0`, the sign of the product.
- `count_odds(low, high)`: number of odd integers in the inclusive range.

### `drillbox.matrices`

- `diagonal_sum(mat)`: sum of both diagonals of a square matrix, centre once.
- `maximum_wealth(accounts)`: largest row sum, `0` when there are no rows.
- `set_zeroes(matrix)`: zeros **in place** every row and column holding a zero.
- `spiral_order(matrix)`: values read clockwise from the top-left; `[]` for an
  empty matrix.
- `is_straight_line(coordinates)`: whether all points are collinear.

### `drillbox.graphs`

- `can_visit_all_rooms(rooms)`: whether every room is reachable from room 0
  using the keys found; raises `ValueError` for no rooms or a key with no room.
- `count_provinces(is_connected)`: number of connected groups in an adjacency
  matrix.

### `drillbox.games`

- `baseball_points(operations)`: totals a score record of integers, `"C"`,
  `"D"` and `"+"`; raises `ValueError` on anything else.
- `tictactoe_winner(moves)`: `"A"`, `"B"`, `"Draw"` or `"Pending"` for
  alternating moves on a 3×3 board.
- `is_robot_bounded(instructions)`: whether repeating `G`/`L`/`R` instructions
  keeps the robot within a circle.
- `returns_to_origin(moves)`: whether the moves end at the start; `L`, `R`,
  `D` move left, right, down and any other character moves up.

## Examples

```python
from drillbox.strings import add_binary, roman_to_int
from drillbox.arrays import plus_one
from drillbox.matrices import spiral_order
from drillbox.graphs import count_provinces
from drillbox.games import tictactoe_winner

add_binary("1010", "1011")          # "10101"
roman_to_int("MCMXCIV")             # 1994
plus_one([9, 9, 9])                 # [1, 0, 0, 0]
spiral_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
                                    # [1, 2, 3, 6, 9, 8, 7, 4, 5]
count_provinces([[1, 1, 0], [1, 1, 0], [0, 0, 1]])   # 2
tictactoe_winner([[0, 0], [2, 0], [1, 1], [2, 1], [2, 2]])  # "A"
```

## What it does not do

drillbox is a library only: it has no command-line program. It has no
function for finding the eventually safe nodes of a directed graph.

## Running the tests

```
pytest
```