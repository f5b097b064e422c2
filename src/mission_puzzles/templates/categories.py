"""
Category templates and sequential task ID allocation.

A category supplies the display metadata of a task (name, emoji palette,
point value); it is independent of the transformation the task uses.
"""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..data.task_store import TaskStore
from ..exceptions import TaskIdExhaustedError

logger = logging.getLogger(__name__)

# Generated tasks are numbered from 100; 001-099 are hand-authored reference tasks
FIRST_GENERATED_TASK_NUMBER = 100

# IDs carry exactly three digits
MAX_TASK_NUMBER = 999


@dataclass(frozen=True)
class CategoryTemplate:
    """Task properties driven by the category."""
    category_code: str
    category_name: str
    emoji_set: str
    base_points: int
    required_rank_level: int = 1


CATEGORY_TEMPLATES: Dict[str, CategoryTemplate] = {
    "OS": CategoryTemplate(
        category_code="OS",
        category_name="🛡️ O₂ Sensor Check",
        emoji_set="status_main",
        base_points=350,
    ),
    "PL": CategoryTemplate(
        category_code="PL",
        category_name="🚀 Pre-Launch Ops",
        emoji_set="celestial_set1",
        base_points=300,
    ),
    "FS": CategoryTemplate(
        category_code="FS",
        category_name="⚡ Fuel Systems",
        emoji_set="tech_set1",
        base_points=325,
    ),
    "NAV": CategoryTemplate(
        category_code="NAV",
        category_name="🧭 Navigation",
        emoji_set="nav_alerts",
        base_points=350,
    ),
    "COM": CategoryTemplate(
        category_code="COM",
        category_name="📡 Communications",
        emoji_set="tech_set2",
        base_points=400,
    ),
    "PWR": CategoryTemplate(
        category_code="PWR",
        category_name="⚡ Power Systems",
        emoji_set="tech_set1",
        base_points=375,
    ),
    "SEC": CategoryTemplate(
        category_code="SEC",
        category_name="🔒 Security",
        emoji_set="status_alerts",
        base_points=425,
    ),
}

# Phrases substituted into transformation title/description patterns
DOMAIN_CONTEXTS: Dict[str, List[str]] = {
    "COM": ["signal strength", "transmission data", "broadcast patterns", "frequency allocation"],
    "NAV": ["course plotting", "trajectory calculation", "orbital paths", "stellar mapping"],
    "PWR": ["energy distribution", "power grid", "resource allocation", "system efficiency"],
    "SEC": ["access protocols", "threat analysis", "defense matrix", "perimeter sensors"],
    "OS": ["atmospheric readings", "environmental data", "system diagnostics", "oxygen levels"],
    "FS": ["propellant mixture", "combustion analysis", "fuel efficiency", "flow regulation"],
    "PL": ["countdown sequence", "ignition timing", "thrust calculation", "system readiness"],
}


def get_category(category_code: str) -> Optional[CategoryTemplate]:
    return CATEGORY_TEMPLATES.get(category_code)


def get_domain_contexts(category_code: str) -> List[str]:
    """Context phrases for a category; communications phrases for unknown codes."""
    return DOMAIN_CONTEXTS.get(category_code, DOMAIN_CONTEXTS["COM"])


def max_task_number(category_code: str, filenames: Iterable[str]) -> Optional[int]:
    """
    Highest numeric suffix among ``<CODE>-NNN.json`` names.

    Args:
        category_code: Category code, e.g. "COM"
        filenames: File names (not paths) to scan

    Returns:
        The maximum suffix, or None if no name matches
    """
    pattern = re.compile(rf"^{re.escape(category_code)}-(\d{{3}})\.json$")
    numbers = [int(m.group(1)) for m in (pattern.match(name) for name in filenames) if m]
    return max(numbers) if numbers else None


class TaskIdAllocator:
    """
    Hands out sequential ``<CODE>-NNN`` task IDs.

    The allocator is owned by the caller. The first request for a category
    seeds its counter from the files already in ``task_dir`` (if one was
    given); later requests increment in memory. Two processes writing to the
    same directory can allocate the same ID.
    """

    def __init__(
        self,
        task_dir: Optional[Union[str, Path]] = None,
        start: int = FIRST_GENERATED_TASK_NUMBER
    ):
        """
        Initialize the allocator.

        Args:
            task_dir: Directory of persisted task files to seed from
            start: Lowest number handed out for a category
        """
        self.task_dir = Path(task_dir) if task_dir is not None else None
        self.start = start
        self._next_numbers: Dict[str, int] = {}

    def seed(self, category_code: str, filenames: Iterable[str]) -> int:
        """
        Set the category's counter to resume after the highest persisted ID.

        Returns:
            The next number that will be allocated
        """
        highest = max_task_number(category_code, filenames)
        next_number = self.start if highest is None else max(self.start, highest + 1)
        self._next_numbers[category_code] = next_number
        logger.debug("Seeded %s task IDs at %03d", category_code, next_number)
        return next_number

    def seed_from_directory(self, category_code: str, directory: Optional[Union[str, Path]] = None) -> int:
        """
        Seed the category's counter from a directory listing.

        A directory that doesn't exist yet counts as empty; any other read
        failure propagates.
        """
        directory = directory if directory is not None else self.task_dir
        filenames: List[str] = []
        if directory is not None:
            filenames = TaskStore(directory).persisted_filenames()
        return self.seed(category_code, filenames)

    def is_seeded(self, category_code: str) -> bool:
        return category_code in self._next_numbers

    def next_id(self, category_code: str) -> str:
        """
        Allocate the next ID for a category, e.g. ``"COM-100"``.

        Raises:
            TaskIdExhaustedError: If the category has already used ``-999``
        """
        if category_code not in self._next_numbers:
            self.seed_from_directory(category_code)
        number = self._next_numbers[category_code]
        if number > MAX_TASK_NUMBER:
            raise TaskIdExhaustedError(category_code)
        self._next_numbers[category_code] = number + 1
        return f"{category_code}-{number:03d}"
