"""
Base grid generator.

Each transformation kind has one concrete generator that can produce
example pairs and audit externally authored ones.
"""

import random
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from ..data.grids import is_integer_grid, is_square_grid, random_grid
from ..data.models import ExamplePair, Grid, TransformationKind


class GridGenerator(ABC):
    """
    Abstract base class for all grid generators.

    Subclasses implement ``apply``; the default generation and validation
    paths are built on it. Generators whose output is not a pure function of
    the input (pattern completion) override those paths instead.
    """

    kind: TransformationKind = None

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            rng: Random source for grid contents. Pass a seeded
                ``random.Random`` for reproducible output.
        """
        self.rng = rng or random.Random()

    def generate_examples(self, size: int, count: int) -> List[ExamplePair]:
        """
        Generate example pairs for the transformation.

        Args:
            size: Grid size (2-4)
            count: Number of examples to generate

        Returns:
            List of input/output pairs
        """
        return [self.generate_test_case(size) for _ in range(count)]

    def generate_test_case(self, size: int) -> ExamplePair:
        """
        Generate a single input/output pair.

        Args:
            size: Grid size (2-4)

        Returns:
            Input/output pair that passes ``validate_transformation``
        """
        self._check_size(size)
        input_grid = self.create_input_grid(size)
        return ExamplePair(input_grid=input_grid, output_grid=self.apply(input_grid))

    def validate_transformation(self, input_grid: Any, output_grid: Any) -> bool:
        """
        Check that ``output_grid`` is this transformation of ``input_grid``.

        Never raises: structurally broken grids simply fail.
        """
        if not is_square_grid(input_grid) or not is_integer_grid(output_grid):
            return False
        return self.apply(input_grid) == output_grid

    @abstractmethod
    def apply(self, grid: Grid) -> Grid:
        """Return the transformed copy of a square grid."""

    def create_input_grid(self, size: int) -> Grid:
        return random_grid(size, self.rng)

    def _check_size(self, size: int) -> None:
        if not isinstance(size, int) or isinstance(size, bool) or size < 1:
            raise ValueError(f"Grid size must be a positive integer, got {size!r}")

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
