"""
Exceptions raised by the configuration, task-file and ID allocation layers.

The generation and validation engine never raises for malformed puzzle
content; those problems are reported through validation error lists.
"""


class MissionPuzzleError(Exception):
    """Base class for all mission_puzzles errors."""


class ConfigError(MissionPuzzleError):
    """Raised when a configuration file is missing or malformed."""


class TaskIdExhaustedError(MissionPuzzleError):
    """Raised when a category has no three-digit task numbers left."""

    def __init__(self, category_code: str):
        self.category_code = category_code
        super().__init__(f"No task IDs left for category {category_code} (last is {category_code}-999)")


class TaskFileError(MissionPuzzleError):
    """Raised when a task file cannot be parsed into a task record."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")
