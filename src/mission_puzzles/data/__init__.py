"""
Data model and task-file handling for mission puzzles.
"""

from .models import (
    DIFFICULTIES,
    GRID_SIZE_FOR_DIFFICULTY,
    SUPPORTED_GRID_SIZES,
    ExamplePair,
    Grid,
    TaskDefinition,
    TransformationKind,
)
from .task_store import TaskStore, read_task, write_task

__all__ = [
    "DIFFICULTIES",
    "GRID_SIZE_FOR_DIFFICULTY",
    "SUPPORTED_GRID_SIZES",
    "ExamplePair",
    "Grid",
    "TaskDefinition",
    "TransformationKind",
    "TaskStore",
    "read_task",
    "write_task",
]
