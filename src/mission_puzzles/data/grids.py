"""
Grid primitives shared by the generators and the validator.

Implements the geometric transformations (rotations, flips, diagonal
reflections) on plain nested lists so that generated grids serialize
directly to JSON.
"""

import random
from typing import Any, List, Optional

from .models import Grid

MIN_CELL_VALUE = 0
MAX_CELL_VALUE = 9


def is_cell_value(value: Any) -> bool:
    """True for an integer in [0, 9]. Booleans are not cell values."""
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and MIN_CELL_VALUE <= value <= MAX_CELL_VALUE
    )


def is_integer_grid(grid: Any) -> bool:
    """True if ``grid`` is a non-empty rectangular list of integer rows."""
    if not isinstance(grid, list) or not grid:
        return False
    if not all(isinstance(row, list) and row for row in grid):
        return False
    width = len(grid[0])
    for row in grid:
        if len(row) != width:
            return False
        for value in row:
            if not isinstance(value, int) or isinstance(value, bool):
                return False
    return True


def is_square_grid(grid: Any, size: Optional[int] = None) -> bool:
    """True if ``grid`` is an N x N integer grid (and N == size, if given)."""
    if not is_integer_grid(grid):
        return False
    if len(grid) != len(grid[0]):
        return False
    return size is None or len(grid) == size


def copy_grid(grid: Grid) -> Grid:
    return [list(row) for row in grid]


def random_grid(
    size: int,
    rng: Optional[random.Random] = None,
    max_value: int = MAX_CELL_VALUE
) -> Grid:
    """
    Create a size x size grid filled with random values.

    Args:
        size: Side length
        rng: Random source (module-level random if None)
        max_value: Largest value drawn, inclusive

    Returns:
        New grid
    """
    rng = rng or random
    return [[rng.randint(MIN_CELL_VALUE, max_value) for _ in range(size)] for _ in range(size)]


def reflect_horizontal(grid: Grid) -> Grid:
    """
    Flip a grid horizontally (mirror left-right).

    output[i][j] = input[i][N-1-j]
    """
    return [list(reversed(row)) for row in grid]


def reflect_vertical(grid: Grid) -> Grid:
    """
    Flip a grid vertically (mirror top-bottom).

    output[i][j] = input[N-1-i][j]
    """
    return [list(row) for row in reversed(grid)]


def transpose(grid: Grid) -> Grid:
    """
    Reflect across the primary diagonal (top-left to bottom-right).

    output[i][j] = input[j][i]
    """
    return [list(row) for row in zip(*grid)]


def anti_transpose(grid: Grid) -> Grid:
    """
    Reflect across the secondary diagonal (top-right to bottom-left).

    output[i][j] = input[N-1-j][N-1-i]
    """
    n = len(grid)
    return [[grid[n - 1 - j][n - 1 - i] for j in range(n)] for i in range(n)]


def rotate_grid(grid: Grid, degrees: int) -> Grid:
    """
    Rotate a grid clockwise by 90 or 270 degrees.

    Args:
        grid: 2D grid to rotate
        degrees: Rotation angle (90 or 270)

    Returns:
        Rotated grid
    """
    if not grid or not grid[0]:
        return copy_grid(grid)

    if degrees == 90:
        # Rotate 90 clockwise: transpose then reverse each row
        return [list(reversed(row)) for row in zip(*grid)]

    elif degrees == 270:
        # Rotate 270 clockwise (= 90 counter-clockwise)
        reversed_rows = [list(reversed(row)) for row in grid]
        return [list(row) for row in zip(*reversed_rows)]

    else:
        raise ValueError(f"Invalid rotation angle: {degrees}")


def column(grid: Grid, index: int) -> List[int]:
    return [row[index] for row in grid]


def is_arithmetic_progression(values: List[int]) -> bool:
    """
    Check whether a sequence has a constant difference.

    Sequences of length <= 2 and all-equal sequences both qualify.
    """
    if len(values) <= 2:
        return True
    diff = values[1] - values[0]
    return all(values[k] - values[k - 1] == diff for k in range(2, len(values)))
