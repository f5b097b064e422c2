"""
Rotation generators.
"""

from ..data.grids import rotate_grid
from ..data.models import Grid, TransformationKind
from .base import GridGenerator


class Rotation90DegGenerator(GridGenerator):
    """
    Output is the input turned a quarter turn clockwise.

    output[i][j] = input[N-1-j][i]; the top row becomes the rightmost column.
    """

    kind = TransformationKind.ROTATION_90DEG

    def apply(self, grid: Grid) -> Grid:
        return rotate_grid(grid, 90)


class Rotation270DegGenerator(GridGenerator):
    """
    Output is the input turned three quarter turns clockwise.

    output[i][j] = input[j][N-1-i]; the leftmost column becomes the top row.
    """

    kind = TransformationKind.ROTATION_270DEG

    def apply(self, grid: Grid) -> Grid:
        return rotate_grid(grid, 270)
