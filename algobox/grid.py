"""Grid algorithms: eight-way flood fill and connected regions on a map."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import Any

_EIGHT_WAYS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]
_FOUR_WAYS = [(-1, 0), (1, 0), (0, -1), (0, 1)]


def flood_fill(grid: Sequence[Sequence[Any]], row: int, col: int, replacement: Any) -> list[list[Any]]:
    """Recolour the eight-way connected region containing (row, col).

    Returns a new grid; the input is left unchanged.
    """
    result = [list(line) for line in grid]
    if not (0 <= row < len(result) and 0 <= col < len(result[row])):
        raise IndexError(f"({row}, {col}) is outside the grid")
    target = result[row][col]
    if target == replacement:
        return result
    result[row][col] = replacement
    queue = deque([(row, col)])
    while queue:
        x, y = queue.popleft()
        for dx, dy in _EIGHT_WAYS:
            nx, ny = x + dx, y + dy
            if 0 <= nx < len(result) and 0 <= ny < len(result[nx]) and result[nx][ny] == target:
                result[nx][ny] = replacement
                queue.append((nx, ny))
    return result


class GridMap:
    """A rows x cols map with 1-based coordinates; non-zero cells are open."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError("grid dimensions must not be negative")
        self.rows = rows
        self.cols = cols
        self._cells = [[0] * cols for _ in range(rows)]

    def _check(self, row: int, col: int) -> None:
        if not (1 <= row <= self.rows and 1 <= col <= self.cols):
            raise IndexError(f"({row}, {col}) is outside the map")

    def set(self, row: int, col: int, value: int) -> None:
        """Store value at (row, col)."""
        self._check(row, col)
        self._cells[row - 1][col - 1] = value

    def get(self, row: int, col: int) -> int:
        """Value stored at (row, col); cells start at 0."""
        self._check(row, col)
        return self._cells[row - 1][col - 1]

    def components(self) -> list[set[tuple[int, int]]]:
        """Four-way connected regions of non-zero cells, in scan order."""
        seen: set[tuple[int, int]] = set()
        regions = []
        for r in range(1, self.rows + 1):
            for c in range(1, self.cols + 1):
                if (r, c) in seen or not self.get(r, c):
                    continue
                region = set()
                stack = [(r, c)]
                seen.add((r, c))
                while stack:
                    cr, cc = stack.pop()
                    region.add((cr, cc))
                    for dr, dc in _FOUR_WAYS:
                        nr, nc = cr + dr, cc + dc
                        if (
                            1 <= nr <= self.rows
                            and 1 <= nc <= self.cols
                            and (nr, nc) not in seen
                            and self.get(nr, nc)
                        ):
                            seen.add((nr, nc))
                            stack.append((nr, nc))
                regions.append(region)
        return regions