"""
Pattern completion generator.

The output is a fully populated grid whose rows and columns are arithmetic
progressions; the input is the same grid with about a third of the cells
blanked out.

A blank is written as ``MISSING_CELL`` (0) because task grids are integer
only. That makes a genuine zero in the input indistinguishable from a
blank; ``missing_cells`` reports every zero as a candidate blank and the
validator only pins down nonzero input cells.
"""

import math
from typing import Any, List, Tuple

from ..data.grids import column, copy_grid, is_arithmetic_progression, is_square_grid
from ..data.models import ExamplePair, Grid, TransformationKind
from .base import GridGenerator

MISSING_CELL = 0


def completed_field(size: int) -> Grid:
    """The fully populated pattern: output[i][j] = (i + j) mod 10."""
    return [[(i + j) % 10 for j in range(size)] for i in range(size)]


def missing_cells(grid: Grid) -> List[Tuple[int, int]]:
    """Positions of cells holding ``MISSING_CELL``, row-major."""
    return [
        (i, j)
        for i, row in enumerate(grid)
        for j, value in enumerate(row)
        if value == MISSING_CELL
    ]


class PatternCompletionGenerator(GridGenerator):
    """Output completes the linear pattern partially shown in the input."""

    kind = TransformationKind.PATTERN_COMPLETION

    def generate_test_case(self, size: int) -> ExamplePair:
        self._check_size(size)
        output_grid = completed_field(size)
        input_grid = copy_grid(output_grid)

        filled = [
            (i, j)
            for i in range(size)
            for j in range(size)
            if output_grid[i][j] != MISSING_CELL
        ]
        num_to_remove = min(math.ceil(size * size / 3), len(filled))
        for i, j in self.rng.sample(filled, num_to_remove):
            input_grid[i][j] = MISSING_CELL

        return ExamplePair(input_grid=input_grid, output_grid=output_grid)

    def apply(self, grid: Grid) -> Grid:
        # The completion depends only on the grid size, not on which cells are blank
        return completed_field(len(grid))

    def validate_transformation(self, input_grid: Any, output_grid: Any) -> bool:
        if not is_square_grid(input_grid):
            return False
        size = len(input_grid)
        if not is_square_grid(output_grid, size):
            return False

        # Given (nonzero) cells must survive unchanged
        for i in range(size):
            for j in range(size):
                given = input_grid[i][j]
                if given != MISSING_CELL and given != output_grid[i][j]:
                    return False

        for i in range(size):
            if not is_arithmetic_progression(output_grid[i]):
                return False
        for j in range(size):
            if not is_arithmetic_progression(column(output_grid, j)):
                return False

        return True
