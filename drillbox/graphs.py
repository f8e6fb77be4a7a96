"""Reachability and connected-component checks on small graphs."""

from collections import deque
from collections.abc import Sequence


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """Return True if every room can be reached starting from room 0.

    ``rooms[i]`` lists the keys found in room ``i``; a key opens the room with
    that index.
    """
    if not rooms:
        raise ValueError("there must be at least one room")
    count = len(rooms)
    visited = {0}
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for key in rooms[room]:
            if not 0 <= key < count:
                raise ValueError(f"key {key} does not open any room")
            if key not in visited:
                visited.add(key)
                queue.append(key)
    return len(visited) == count


def count_provinces(is_connected: Sequence[Sequence[int]]) -> int:
    """Count the connected groups of cities in an adjacency matrix.

    ``is_connected[i][j] == 1`` means cities ``i`` and ``j`` are directly
    connected.
    """
    visited: set[int] = set()
    provinces = 0
    for start in range(len(is_connected)):
        if start in visited:
            continue
        provinces += 1
        visited.add(start)
        stack = [start]
        while stack:
            current = stack.pop()
            for neighbour, linked in enumerate(is_connected[current]):
                if linked == 1 and neighbour not in visited:
                    visited.add(neighbour)
                    stack.append(neighbour)
    return provinces