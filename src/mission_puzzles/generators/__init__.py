"""
Grid generators, one per transformation kind.
"""

from .base import GridGenerator
from .counting import COUNT_LAYOUTS, ObjectCountingGenerator, count_values
from .pattern import MISSING_CELL, PatternCompletionGenerator, completed_field, missing_cells
from .reflection import (
    HorizontalReflectionGenerator,
    PrimaryDiagonalReflectionGenerator,
    SecondaryDiagonalReflectionGenerator,
    VerticalReflectionGenerator,
)
from .registry import GENERATOR_CLASSES, create_generator, get_generator, resolve_kind
from .rotation import Rotation90DegGenerator, Rotation270DegGenerator
from .xor import XorOperationGenerator, simple_xor

__all__ = [
    "GridGenerator",
    "HorizontalReflectionGenerator",
    "VerticalReflectionGenerator",
    "PrimaryDiagonalReflectionGenerator",
    "SecondaryDiagonalReflectionGenerator",
    "Rotation90DegGenerator",
    "Rotation270DegGenerator",
    "PatternCompletionGenerator",
    "XorOperationGenerator",
    "ObjectCountingGenerator",
    "GENERATOR_CLASSES",
    "create_generator",
    "get_generator",
    "resolve_kind",
    "COUNT_LAYOUTS",
    "count_values",
    "MISSING_CELL",
    "completed_field",
    "missing_cells",
    "simple_xor",
]
