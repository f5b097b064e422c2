"""
Object counting generator.

The output is a histogram of the digits in the input, reshaped to a small
grid whose layout depends on the input size:

    size 2 -> 1x2: counts of 0-1
    size 3 -> 2x2: counts of 0-3
    size 4 -> 2x5: counts of 0-4 over counts of 5-9

This is the only transformation whose output shape differs from its input.
"""

from typing import Any, Dict, List, Tuple

import numpy as np

from ..data.grids import is_cell_value, is_integer_grid, is_square_grid, random_grid
from ..data.models import Grid, TransformationKind
from .base import GridGenerator

# size -> (rows, cols) of the histogram grid
COUNT_LAYOUTS: Dict[int, Tuple[int, int]] = {
    2: (1, 2),
    3: (2, 2),
    4: (2, 5),
}


def count_values(grid: Grid) -> List[int]:
    """Ten-bin histogram of the digits 0-9 in ``grid``."""
    return np.bincount(np.asarray(grid, dtype=np.int64).ravel(), minlength=10).tolist()


class ObjectCountingGenerator(GridGenerator):
    """Output tallies how often each digit appears in the input."""

    kind = TransformationKind.OBJECT_COUNTING

    def create_input_grid(self, size: int) -> Grid:
        # Only draw digits the output layout can show, so the bins add up to size**2
        rows, cols = COUNT_LAYOUTS[size]
        return random_grid(size, self.rng, max_value=rows * cols - 1)

    def apply(self, grid: Grid) -> Grid:
        size = len(grid)
        if size not in COUNT_LAYOUTS:
            raise ValueError(f"Object counting supports grid sizes {sorted(COUNT_LAYOUTS)}, got {size}")
        rows, cols = COUNT_LAYOUTS[size]
        counts = count_values(grid)
        return [counts[r * cols:(r + 1) * cols] for r in range(rows)]

    def validate_transformation(self, input_grid: Any, output_grid: Any) -> bool:
        if not is_square_grid(input_grid) or len(input_grid) not in COUNT_LAYOUTS:
            return False
        if not all(is_cell_value(value) for row in input_grid for value in row):
            return False
        if not is_integer_grid(output_grid):
            return False
        return self.apply(input_grid) == output_grid

    def _check_size(self, size: int) -> None:
        super()._check_size(size)
        if size not in COUNT_LAYOUTS:
            raise ValueError(f"Object counting supports grid sizes {sorted(COUNT_LAYOUTS)}, got {size}")
