"""Enumerate all placements of n non-attacking queens on an n x n board."""

from __future__ import annotations

Placement = tuple[tuple[int, int], ...]


def solve_n_queens(n: int) -> list[Placement]:
    """All solutions, each a tuple of (row, col) positions, one per row.

    Solutions come in lexicographic order of their cells read row by row.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    solutions: list[Placement] = []
    placed: list[tuple[int, int]] = []
    columns: set[int] = set()
    diagonals: set[int] = set()
    anti_diagonals: set[int] = set()

    def place(row: int) -> None:
        if row == n:
            solutions.append(tuple(placed))
            return
        for col in range(n):
            if col in columns or row - col in diagonals or row + col in anti_diagonals:
                continue
            columns.add(col)
            diagonals.add(row - col)
            anti_diagonals.add(row + col)
            placed.append((row, col))
            place(row + 1)
            placed.pop()
            columns.discard(col)
            diagonals.discard(row - col)
            anti_diagonals.discard(row + col)

    place(0)
    return solutions