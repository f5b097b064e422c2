"""
Mission Puzzles - grid puzzle generation and validation for Mission Control.

Pairs a category (theme, points, emoji palette) with a transformation
(a deterministic grid rule) to build puzzle tasks, and validates that any
task record is well formed and that its examples obey its rule.
"""

from .data import ExamplePair, TaskDefinition, TaskStore, TransformationKind
from .factory import StoryWrapper, TaskFactory
from .generators import GridGenerator, get_generator
from .templates import CATEGORY_TEMPLATES, TRANSFORMATION_TEMPLATES, TaskIdAllocator
from .validation import TaskValidator, TestRunner, TestRunnerOptions, ValidationResult

__version__ = "0.1.0"

__all__ = [
    "ExamplePair",
    "TaskDefinition",
    "TaskStore",
    "TransformationKind",
    "StoryWrapper",
    "TaskFactory",
    "GridGenerator",
    "get_generator",
    "CATEGORY_TEMPLATES",
    "TRANSFORMATION_TEMPLATES",
    "TaskIdAllocator",
    "TaskValidator",
    "TestRunner",
    "TestRunnerOptions",
    "ValidationResult",
]
