"""Core Lights Out rules: grid creation, the flip rule and the win check.

Grids are immutable tuples of tuples of ``bool`` (``True`` == lit). Every
transition returns a new grid, so callers can keep old snapshots around.
"""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Tuple

Grid = Tuple[Tuple[bool, ...], ...]

# Up, down, left, right.
ORTHOGONAL_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass(frozen=True, slots=True)
class Coord:
    row: int
    col: int


def create_grid(rows: int, cols: int, p: float, rng: random.Random | None = None) -> Grid:
    """Build a ``rows x cols`` grid where each cell is lit with probability ``p``."""
    source = rng or random.Random()
    return tuple(
        tuple(source.random() < p for _ in range(cols))
        for _ in range(rows)
    )


def grid_shape(grid: Grid) -> Tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def in_bounds(rows: int, cols: int, row: int, col: int) -> bool:
    return 0 <= row < rows and 0 <= col < cols


def neighbor_coords(rows: int, cols: int, row: int, col: int) -> List[Coord]:
    """Orthogonal neighbours of (row, col) that fall inside the grid."""
    return [
        Coord(row + dr, col + dc)
        for dr, dc in ORTHOGONAL_OFFSETS
        if in_bounds(rows, cols, row + dr, col + dc)
    ]


def flip_targets(rows: int, cols: int, row: int, col: int) -> List[Coord]:
    return [Coord(row, col), *neighbor_coords(rows, cols, row, col)]


def flip_around(grid: Grid, row: int, col: int) -> Grid:
    """Return a copy of ``grid`` with (row, col) and its neighbours inverted.

    The target must be in bounds; neighbours off the edge are skipped.
    """
    rows, cols = grid_shape(grid)
    targets = set(flip_targets(rows, cols, row, col))
    return tuple(
        tuple(
            (not lit) if Coord(r, c) in targets else lit
            for c, lit in enumerate(grid_row)
        )
        for r, grid_row in enumerate(grid)
    )


def has_won(grid: Grid) -> bool:
    return not any(any(grid_row) for grid_row in grid)


def lit_coords(grid: Grid) -> List[Coord]:
    return [
        Coord(r, c)
        for r, grid_row in enumerate(grid)
        for c, lit in enumerate(grid_row)
        if lit
    ]


def count_lit(grid: Grid) -> int:
    return sum(sum(1 for lit in grid_row if lit) for grid_row in grid)


def format_grid(grid: Grid) -> str:
    return "\n".join("".join("1" if lit else "0" for lit in grid_row) for grid_row in grid)
