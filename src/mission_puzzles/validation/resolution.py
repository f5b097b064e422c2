"""
Transformation type resolution for task records.

Newer records carry an explicit ``transformationType`` tag. Older records
don't; for those the type is inferred from the category prefix of the task
ID. Prefix inference is deprecated and only kept so that legacy task files
still validate.
"""

import logging
import re
from typing import Any, Optional

from ..data.models import TaskDefinition, TransformationKind
from ..templates.categories import FIRST_GENERATED_TASK_NUMBER

logger = logging.getLogger(__name__)

_TASK_ID_PARTS = re.compile(r"^([A-Z]{2,3})-(\d+)$")

LEGACY_PREFIX_TRANSFORMATIONS = {
    "COM": TransformationKind.HORIZONTAL_REFLECTION,
    "NAV": TransformationKind.ROTATION_90DEG,
    "SEC": TransformationKind.XOR_OPERATION,
    "PL": TransformationKind.PATTERN_COMPLETION,
    "OS": TransformationKind.XOR_OPERATION,
    "FS": TransformationKind.ROTATION_90DEG,
    "PWR": TransformationKind.PATTERN_COMPLETION,
    "OBJ": TransformationKind.OBJECT_COUNTING,
}

# Hand-authored reference tasks (numbered below 100) used different defaults
LEGACY_REFERENCE_TRANSFORMATIONS = {
    "OS": TransformationKind.OBJECT_COUNTING,
}


def infer_transformation_type(task_id: Any) -> Optional[str]:
    """
    Infer a transformation type from a legacy task ID such as ``"NAV-012"``.

    Returns:
        Transformation type, or None if the ID has no known prefix
    """
    if not isinstance(task_id, str):
        return None
    match = _TASK_ID_PARTS.match(task_id)
    if not match:
        return None

    prefix, number = match.group(1), int(match.group(2))
    if number < FIRST_GENERATED_TASK_NUMBER and prefix in LEGACY_REFERENCE_TRANSFORMATIONS:
        return LEGACY_REFERENCE_TRANSFORMATIONS[prefix].value

    kind = LEGACY_PREFIX_TRANSFORMATIONS.get(prefix)
    return kind.value if kind is not None else None


def resolve_transformation_type(task: TaskDefinition) -> Optional[str]:
    """
    The transformation type a task should be checked against.

    Prefers the explicit tag; falls back to prefix inference for untagged
    legacy records.
    """
    if task.transformation_type:
        if isinstance(task.transformation_type, TransformationKind):
            return task.transformation_type.value
        return task.transformation_type

    inferred = infer_transformation_type(task.id)
    if inferred is not None:
        logger.warning(
            "Task %s has no transformationType; inferred %s from its ID prefix",
            task.id, inferred
        )
    return inferred
