"""
XOR-style operation generator.

Each cell of the output combines a cell with its right-hand neighbour:
equal neighbours give 0, different neighbours give their sum capped at 9.
The last column is carried through unchanged.
"""

from ..data.grids import MAX_CELL_VALUE, random_grid
from ..data.models import Grid, TransformationKind
from .base import GridGenerator

# Small inputs keep sums readable for players
XOR_INPUT_MAX_VALUE = 4


def simple_xor(a: int, b: int) -> int:
    if a == b:
        return 0
    return min(a + b, MAX_CELL_VALUE)


class XorOperationGenerator(GridGenerator):
    """Output applies ``simple_xor`` to adjacent cells of each input row."""

    kind = TransformationKind.XOR_OPERATION

    def create_input_grid(self, size: int) -> Grid:
        return random_grid(size, self.rng, max_value=XOR_INPUT_MAX_VALUE)

    def apply(self, grid: Grid) -> Grid:
        result = []
        for row in grid:
            last = len(row) - 1
            combined = [simple_xor(row[j], row[j + 1]) for j in range(last)]
            combined.append(row[last])
            result.append(combined)
        return result
