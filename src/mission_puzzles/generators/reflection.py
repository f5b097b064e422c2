"""
Reflection generators: mirror the grid across one of four axes.
"""

from ..data.grids import anti_transpose, reflect_horizontal, reflect_vertical, transpose
from ..data.models import Grid, TransformationKind
from .base import GridGenerator


class HorizontalReflectionGenerator(GridGenerator):
    """Output is the left-to-right mirror of the input."""

    kind = TransformationKind.HORIZONTAL_REFLECTION

    def apply(self, grid: Grid) -> Grid:
        return reflect_horizontal(grid)


class VerticalReflectionGenerator(GridGenerator):
    """Output is the top-to-bottom mirror of the input."""

    kind = TransformationKind.VERTICAL_REFLECTION

    def apply(self, grid: Grid) -> Grid:
        return reflect_vertical(grid)


class PrimaryDiagonalReflectionGenerator(GridGenerator):
    """Output is the input flipped over the top-left/bottom-right diagonal."""

    kind = TransformationKind.PRIMARY_DIAGONAL_REFLECTION

    def apply(self, grid: Grid) -> Grid:
        return transpose(grid)


class SecondaryDiagonalReflectionGenerator(GridGenerator):
    """Output is the input flipped over the top-right/bottom-left diagonal."""

    kind = TransformationKind.SECONDARY_DIAGONAL_REFLECTION

    def apply(self, grid: Grid) -> Grid:
        return anti_transpose(grid)
