"""
Task store for reading and writing task JSON files.
"""

import json
import logging
from pathlib import Path
from typing import List, Union

from ..exceptions import TaskFileError
from .models import TaskDefinition

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TaskStore:
    """Reads and writes ``<ID>.json`` task files in a directory."""

    def __init__(self, task_dir: PathLike = "generated-tasks"):
        """
        Initialize the task store.

        Args:
            task_dir: Directory containing task JSON files. It does not need
                to exist yet; ``save`` creates it.
        """
        self.task_dir = Path(task_dir)

    def task_path(self, task_id: str) -> Path:
        return self.task_dir / f"{task_id}.json"

    def save(self, task: TaskDefinition) -> Path:
        """
        Write a task to ``<task_dir>/<id>.json``.

        Raises:
            OSError: If the directory or file cannot be written
        """
        self.task_dir.mkdir(parents=True, exist_ok=True)
        path = self.task_path(task.id)
        write_task(task, path)
        return path

    def load_task(self, task_id: str) -> TaskDefinition:
        """
        Load a single task by ID.

        Raises:
            FileNotFoundError: If the task file doesn't exist
            TaskFileError: If the file is not a JSON object
        """
        path = self.task_path(task_id)
        if not path.exists():
            raise FileNotFoundError(f"Task file not found: {path}")
        return read_task(path)

    def find_task_files(self, recursive: bool = False) -> List[Path]:
        """
        List the JSON files in the store directory.

        Args:
            recursive: Whether to descend into subdirectories

        Returns:
            Sorted list of paths
        """
        pattern = "**/*.json" if recursive else "*.json"
        return sorted(p for p in self.task_dir.glob(pattern) if p.is_file())

    def persisted_filenames(self) -> List[str]:
        """Names of files already in the store; empty if it doesn't exist yet."""
        if not self.task_dir.exists():
            return []
        return sorted(p.name for p in self.task_dir.iterdir() if p.is_file())


def read_task(path: PathLike) -> TaskDefinition:
    """
    Parse one task file.

    Raises:
        OSError: If the file can't be read
        json.JSONDecodeError: If the file isn't valid JSON
        TaskFileError: If the JSON isn't an object
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise TaskFileError(path, f"expected a JSON object, got {type(data).__name__}")

    return TaskDefinition.from_dict(data)


def write_task(task: TaskDefinition, path: PathLike) -> None:
    """Write a task as indented UTF-8 JSON, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(task.to_dict(), f, indent=2, ensure_ascii=False)
    logger.debug("Wrote task %s to %s", task.id, path)
