"""
Data models for mission puzzle tasks.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

Grid = List[List[int]]

DIFFICULTIES = ("Basic", "Intermediate", "Advanced")

GRID_SIZE_FOR_DIFFICULTY = {
    "Basic": 2,
    "Intermediate": 3,
    "Advanced": 4,
}

SUPPORTED_GRID_SIZES = (2, 3, 4)

REQUIRED_HINT_COUNT = 3
MIN_EXAMPLE_COUNT = 2


class TransformationKind(str, Enum):
    """Closed set of transformation rules the engine knows how to generate."""

    HORIZONTAL_REFLECTION = "horizontal_reflection"
    VERTICAL_REFLECTION = "vertical_reflection"
    PRIMARY_DIAGONAL_REFLECTION = "primary_diagonal_reflection"
    SECONDARY_DIAGONAL_REFLECTION = "secondary_diagonal_reflection"
    ROTATION_90DEG = "rotation_90deg"
    ROTATION_270DEG = "rotation_270deg"
    PATTERN_COMPLETION = "pattern_completion"
    XOR_OPERATION = "xor_operation"
    OBJECT_COUNTING = "object_counting"

    @classmethod
    def from_value(cls, value: Any) -> Optional["TransformationKind"]:
        """Return the kind named by ``value``, or None if it names no kind."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


@dataclass
class ExamplePair:
    """Represents a single input-output demonstration of a transformation."""
    input_grid: Grid
    output_grid: Grid

    def to_dict(self) -> Dict[str, Grid]:
        return {"input": self.input_grid, "output": self.output_grid}

    @classmethod
    def from_dict(cls, data: Any) -> "ExamplePair":
        if not isinstance(data, Mapping):
            return cls(input_grid=None, output_grid=None)
        return cls(input_grid=data.get("input"), output_grid=data.get("output"))


@dataclass
class TaskDefinition:
    """
    A complete puzzle record.

    Field names are snake_case in Python and camelCase on the wire, matching
    the task JSON files consumed by the game client. Any field may be None
    when the record was read from an incomplete file; the validator reports
    those rather than the loader.
    """
    id: Optional[str]
    title: Optional[str]
    description: Optional[str]
    category: Optional[str]
    difficulty: Optional[str]
    grid_size: Optional[int]
    base_points: Optional[int]
    required_rank_level: Optional[int]
    emoji_set: Optional[str]
    examples: Optional[List[ExamplePair]]
    test_input: Optional[Grid]
    test_output: Optional[Grid]
    hints: Optional[List[str]]
    transformation_type: Optional[str] = None
    time_limit: Optional[int] = None
    generated: bool = False
    extra: Dict[str, Any] = field(default_factory=dict)

    _WIRE_KEYS = {
        "id": "id",
        "title": "title",
        "description": "description",
        "category": "category",
        "difficulty": "difficulty",
        "grid_size": "gridSize",
        "time_limit": "timeLimit",
        "base_points": "basePoints",
        "required_rank_level": "requiredRankLevel",
        "emoji_set": "emojiSet",
        "test_input": "testInput",
        "test_output": "testOutput",
        "hints": "hints",
        "transformation_type": "transformationType",
        "generated": "generated",
    }

    @property
    def test_case(self) -> ExamplePair:
        return ExamplePair(self.test_input, self.test_output)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the camelCase JSON layout."""
        data = {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "difficulty": self.difficulty,
            "gridSize": self.grid_size,
            "timeLimit": self.time_limit,
            "basePoints": self.base_points,
            "requiredRankLevel": self.required_rank_level,
            "emojiSet": self.emoji_set,
            "examples": (
                [example.to_dict() for example in self.examples]
                if self.examples is not None else None
            ),
            "testInput": self.test_input,
            "testOutput": self.test_output,
            "hints": self.hints,
        }
        if self.transformation_type is not None:
            data["transformationType"] = self.transformation_type
        if self.generated:
            data["generated"] = True
        data.update(self.extra)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskDefinition":
        """
        Build a task from a JSON mapping without raising.

        Missing keys become None; unrecognised keys are kept in ``extra`` so
        that a load/save cycle does not drop them.

        Args:
            data: Parsed task JSON

        Returns:
            TaskDefinition
        """
        raw_examples = data.get("examples")
        if isinstance(raw_examples, list):
            examples = [ExamplePair.from_dict(ex) for ex in raw_examples]
        else:
            examples = None

        known = set(cls._WIRE_KEYS.values()) | {"examples"}
        extra = {key: value for key, value in data.items() if key not in known}

        return cls(
            id=data.get("id"),
            title=data.get("title"),
            description=data.get("description"),
            category=data.get("category"),
            difficulty=data.get("difficulty"),
            grid_size=data.get("gridSize"),
            base_points=data.get("basePoints"),
            required_rank_level=data.get("requiredRankLevel"),
            emoji_set=data.get("emojiSet"),
            examples=examples,
            test_input=data.get("testInput"),
            test_output=data.get("testOutput"),
            hints=data.get("hints"),
            transformation_type=data.get("transformationType"),
            time_limit=data.get("timeLimit"),
            generated=bool(data.get("generated", False)),
            extra=extra,
        )
