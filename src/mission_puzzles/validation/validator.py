"""
Validation of task definitions.

Runs two independent passes over a task record:

* the schema pass checks required fields and their allowed values;
* the logic pass checks every grid's values and shape and re-verifies each
  example and the test case against the transformation's own generator.

Both passes collect every error they find. Malformed content never raises;
it is reported through ``ValidationResult.errors``.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from ..data.grids import is_cell_value
from ..data.models import (
    DIFFICULTIES,
    MIN_EXAMPLE_COUNT,
    REQUIRED_HINT_COUNT,
    SUPPORTED_GRID_SIZES,
    TaskDefinition,
    TransformationKind,
)
from ..generators import get_generator
from ..templates.emoji_sets import default_emoji_sets
from ..templates.transformations import get_transformation
from .resolution import resolve_transformation_type

logger = logging.getLogger(__name__)

TASK_ID_PATTERN = re.compile(r"^[A-Z]{2,3}-\d{3}$")

# Object counting tasks written before transformation tags existed used this prefix
LEGACY_COUNTING_PREFIX = "OBJ-"


@dataclass
class ValidationResult:
    """Result of a task validation."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)


class TaskValidator:
    """Validates task definitions before they are used in the game."""

    def __init__(self, emoji_sets: Optional[Mapping[str, Any]] = None):
        """
        Initialize the validator.

        Args:
            emoji_sets: Palette registry used to check ``emojiSet``.
                Defaults to the bundled palettes.
        """
        self.emoji_sets = emoji_sets if emoji_sets is not None else default_emoji_sets()

    def validate_task(self, task: Union[TaskDefinition, Mapping[str, Any]]) -> ValidationResult:
        """
        Validate a complete task definition.

        Args:
            task: Task definition, or its parsed JSON

        Returns:
            Validation result with status and every error message
        """
        if not isinstance(task, TaskDefinition):
            task = TaskDefinition.from_dict(task)

        errors = self.get_schema_errors(task) + self.get_logic_errors(task)
        if errors:
            logger.debug("Task %s failed validation with %d error(s)", task.id, len(errors))

        return ValidationResult(is_valid=not errors, errors=errors)

    def validate_schema(self, task: TaskDefinition) -> bool:
        return not self.get_schema_errors(task)

    def validate_logic(self, task: TaskDefinition) -> bool:
        return not self.get_logic_errors(task)

    # ------------------------------------------------------------------------
    # Schema pass
    # ------------------------------------------------------------------------

    def get_schema_errors(self, task: TaskDefinition) -> List[str]:
        """
        Get all schema-related errors for a task.

        Args:
            task: Task to validate

        Returns:
            List of error messages
        """
        errors: List[str] = []

        if not task.id:
            errors.append("Task ID is required")
        if not task.title:
            errors.append("Title is required")
        if not task.description:
            errors.append("Description is required")
        if not task.category:
            errors.append("Category is required")
        if not task.difficulty:
            errors.append("Difficulty is required")
        if task.grid_size is None:
            errors.append("Grid size is required")
        if task.base_points is None:
            errors.append("Base points are required")
        if task.required_rank_level is None:
            errors.append("Required rank level is required")
        if not task.emoji_set:
            errors.append("Emoji set is required")
        if task.examples is None:
            errors.append("Examples are required")
        if task.test_input is None:
            errors.append("Test input is required")
        if task.test_output is None:
            errors.append("Test output is required")
        if task.hints is None:
            errors.append("Hints are required")

        if task.id and not (isinstance(task.id, str) and TASK_ID_PATTERN.match(task.id)):
            errors.append(f'Task ID format invalid: {task.id} (should be like "COM-123")')

        if task.difficulty and task.difficulty not in DIFFICULTIES:
            errors.append(f"Invalid difficulty: {task.difficulty}")

        if task.grid_size is not None and not self._is_supported_size(task.grid_size):
            errors.append(f"Invalid grid size: {task.grid_size} (should be 2-4)")

        if task.emoji_set and not self.is_valid_emoji_set(task.emoji_set):
            errors.append(f"Invalid emoji set: {task.emoji_set}")

        if task.examples is not None and len(task.examples) < MIN_EXAMPLE_COUNT:
            errors.append(f"Not enough examples: {len(task.examples)} (minimum {MIN_EXAMPLE_COUNT})")

        if task.hints is not None:
            if not isinstance(task.hints, list):
                errors.append("Hints must be a list of strings")
            else:
                if len(task.hints) != REQUIRED_HINT_COUNT:
                    errors.append(
                        f"Invalid number of hints: {len(task.hints)} (should be {REQUIRED_HINT_COUNT})"
                    )
                for i, hint in enumerate(task.hints):
                    if not isinstance(hint, str) or not hint.strip():
                        errors.append(f"Hint {i+1} must be a non-empty string")

        return errors

    # ------------------------------------------------------------------------
    # Logic pass
    # ------------------------------------------------------------------------

    def get_logic_errors(self, task: TaskDefinition) -> List[str]:
        """
        Get all logic-related errors for a task.

        Args:
            task: Task to validate

        Returns:
            List of error messages
        """
        errors: List[str] = []
        examples = task.examples or []

        self.validate_grid_values(task.test_input, "Test input", errors)
        self.validate_grid_values(task.test_output, "Test output", errors)
        for i, example in enumerate(examples):
            self.validate_grid_values(example.input_grid, f"Example {i+1} input", errors)
            self.validate_grid_values(example.output_grid, f"Example {i+1} output", errors)

        transformation_type = resolve_transformation_type(task)

        if self._is_supported_size(task.grid_size):
            check_outputs = not self._has_counting_outputs(task, transformation_type)

            self.validate_grid_size(task.test_input, task.grid_size, "Test input", errors)
            if check_outputs:
                self.validate_grid_size(task.test_output, task.grid_size, "Test output", errors)

            for i, example in enumerate(examples):
                self.validate_grid_size(example.input_grid, task.grid_size, f"Example {i+1} input", errors)
                if check_outputs:
                    self.validate_grid_size(example.output_grid, task.grid_size, f"Example {i+1} output", errors)

        self.validate_transformation_logic(task, transformation_type, errors)

        return errors

    def validate_grid_values(self, grid: Any, label: str, errors: List[str]) -> None:
        """
        Check that every cell of a grid is an integer in [0, 9].

        Args:
            grid: Grid to validate (None is skipped; the schema pass reports it)
            label: Label for error messages
            errors: List to add error messages to
        """
        if grid is None:
            return
        if not isinstance(grid, list):
            errors.append(f"{label} must be a list of rows")
            return

        for i, row in enumerate(grid):
            if not isinstance(row, list):
                errors.append(f"{label} row {i} must be a list")
                continue
            for j, value in enumerate(row):
                if not is_cell_value(value):
                    errors.append(f"{label} contains invalid value at [{i},{j}]: {value} (should be integer 0-9)")

    def validate_grid_size(self, grid: Any, expected_size: int, label: str, errors: List[str]) -> None:
        """
        Check that a grid is ``expected_size`` x ``expected_size``.

        Args:
            grid: Grid to validate (None and non-lists are skipped)
            expected_size: Expected side length
            label: Label for error messages
            errors: List to add error messages to
        """
        if not isinstance(grid, list):
            return

        if len(grid) != expected_size:
            errors.append(f"{label} has wrong number of rows: {len(grid)} (expected {expected_size})")
            return

        for i, row in enumerate(grid):
            if isinstance(row, list) and len(row) != expected_size:
                errors.append(f"{label} row {i} has wrong length: {len(row)} (expected {expected_size})")

    def validate_transformation_logic(
        self,
        task: TaskDefinition,
        transformation_type: Optional[str],
        errors: List[str]
    ) -> None:
        """
        Re-verify the test case and every example with the task's generator.

        Args:
            task: Task to validate
            transformation_type: Resolved transformation type (may be None)
            errors: List to add error messages to
        """
        if not transformation_type:
            errors.append(f"Could not infer transformation type from task ID: {task.id}")
            return

        transformation = get_transformation(transformation_type)
        if transformation is None:
            errors.append(f"Unknown transformation type: {transformation_type}")
            return

        generator = get_generator(transformation.generator)
        if generator is None:
            errors.append(f"Grid generator not found for transformation: {transformation.generator}")
            return

        if not generator.validate_transformation(task.test_input, task.test_output):
            errors.append(f"Test case does not follow the {transformation_type} transformation pattern")

        for i, example in enumerate(task.examples or []):
            if not generator.validate_transformation(example.input_grid, example.output_grid):
                errors.append(f"Example {i+1} does not follow the {transformation_type} transformation pattern")

    def is_valid_emoji_set(self, emoji_set: Any) -> bool:
        return isinstance(emoji_set, str) and emoji_set in self.emoji_sets

    @staticmethod
    def _is_supported_size(grid_size: Any) -> bool:
        return (
            isinstance(grid_size, int)
            and not isinstance(grid_size, bool)
            and grid_size in SUPPORTED_GRID_SIZES
        )

    @staticmethod
    def _has_counting_outputs(task: TaskDefinition, transformation_type: Optional[str]) -> bool:
        if transformation_type == TransformationKind.OBJECT_COUNTING.value:
            return True
        return isinstance(task.id, str) and task.id.startswith(LEGACY_COUNTING_PREFIX)
