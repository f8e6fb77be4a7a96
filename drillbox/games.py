"""Scorekeeping and move simulation for a few simple games."""

from collections.abc import Iterable, Sequence

_WIN_LINES = (
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

# North, east, south, west.
_DIRECTIONS = ((0, 1), (1, 0), (0, -1), (-1, 0))


def baseball_points(operations: Iterable[str]) -> int:
    """Total a baseball score record.

    An integer records a score, "C" cancels the last one, "D" doubles it and
    "+" adds the last two. Anything else raises ValueError.
    """
    record: list[int] = []
    for op in operations:
        if op == "C":
            if record:
                record.pop()
        elif op == "D":
            if record:
                record.append(2 * record[-1])
        elif op == "+":
            if len(record) >= 2:
                record.append(record[-1] + record[-2])
        else:
            try:
                record.append(int(op))
            except ValueError:
                raise ValueError(f"{op!r} is not a valid score") from None
    return sum(record)


def _has_line(cells: set[tuple[int, int]]) -> bool:
    return any(all(cell in cells for cell in line) for line in _WIN_LINES)


def tictactoe_winner(moves: Sequence[Sequence[int]]) -> str:
    """Return "A", "B", "Draw" or "Pending" for a list of alternating moves."""
    player_a = {(row, col) for row, col in moves[0::2]}
    player_b = {(row, col) for row, col in moves[1::2]}
    if _has_line(player_a):
        return "A"
    if _has_line(player_b):
        return "B"
    return "Draw" if len(moves) == 9 else "Pending"


def is_robot_bounded(instructions: str) -> bool:
    """Return True if repeating the instructions keeps the robot in a circle."""
    x = y = 0
    direction = 0
    for command in instructions:
        if command == "G":
            dx, dy = _DIRECTIONS[direction]
            x += dx
            y += dy
        elif command == "L":
            direction = (direction + 3) % 4
        elif command == "R":
            direction = (direction + 1) % 4
    return (x, y) == (0, 0) or direction != 0


def returns_to_origin(moves: str) -> bool:
    """Return True if the moves bring the robot back to where it started.

    "L", "R" and "D" move left, right and down; any other move goes up.
    """
    left = moves.count("L")
    right = moves.count("R")
    down = moves.count("D")
    up = len(moves) - left - right - down
    return left == right and up == down