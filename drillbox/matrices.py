"""Operations on rectangular integer matrices and point sets."""

from collections.abc import MutableSequence, Sequence


def diagonal_sum(mat: Sequence[Sequence[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre cell once."""
    size = len(mat)
    primary = sum(mat[i][i] for i in range(size))
    secondary = sum(
        mat[i][size - 1 - i] for i in range(size) if i != size - 1 - i
    )
    return primary + secondary


def maximum_wealth(accounts: Sequence[Sequence[int]]) -> int:
    """Return the largest row sum, or 0 when no row sums to more than 0."""
    return max((sum(row) for row in accounts), default=0, key=int) if accounts else 0


def set_zeroes(matrix: MutableSequence[MutableSequence[int]]) -> None:
    """Zero in place every row and column that holds a zero."""
    zero_rows = set()
    zero_cols = set()
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value == 0:
                zero_rows.add(i)
                zero_cols.add(j)
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def spiral_order(matrix: Sequence[Sequence[int]]) -> list[int]:
    """Return the values of the matrix read clockwise from the top-left corner."""
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result: list[int] = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result


def is_straight_line(coordinates: Sequence[Sequence[int]]) -> bool:
    """Return True if all the points lie on one straight line."""
    if len(coordinates) <= 2:
        return True
    (x1, y1), (x2, y2) = coordinates[0], coordinates[1]
    return all(
        (y2 - y1) * (x - x1) == (y - y1) * (x2 - x1)
        for x, y in coordinates[2:]
    )