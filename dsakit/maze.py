"""Enumerate every path a rat can take through a square maze."""

from collections.abc import Sequence

_MOVES = (("D", 1, 0), ("U", -1, 0), ("R", 0, 1), ("L", 0, -1))


def find_paths(grid: Sequence[Sequence[int]]) -> list[str]:
    """Return all simple paths from the top-left to the bottom-right cell.

    Cells holding 0 are walls. The destination must hold 1. Paths are strings
    of the moves D, U, R and L, in the order the search tries them.
    """
    size = len(grid)
    if any(len(row) != size for row in grid):
        raise ValueError("grid must be square")

    paths: list[str] = []
    visited: set[tuple[int, int]] = set()
    steps: list[str] = []
    last = size - 1

    def walk(row: int, col: int) -> None:
        if row == last and col == last and grid[row][col] == 1:
            paths.append("".join(steps))
            return
        if not (0 <= row < size and 0 <= col < size):
            return
        if (row, col) in visited or grid[row][col] == 0:
            return
        visited.add((row, col))
        for step, d_row, d_col in _MOVES:
            steps.append(step)
            walk(row + d_row, col + d_col)
            steps.pop()
        visited.discard((row, col))

    walk(0, 0)
    return paths