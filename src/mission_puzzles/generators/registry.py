"""
Generator lookup.

Every ``TransformationKind`` maps to exactly one generator class; the table
is checked for completeness at import time. String lookups go through
``get_generator``, which returns None for a name it does not recognise so
batch callers can skip that task and carry on.
"""

import logging
import random
from typing import Any, Dict, Optional, Type

from ..data.models import TransformationKind
from .base import GridGenerator
from .counting import ObjectCountingGenerator
from .pattern import PatternCompletionGenerator
from .reflection import (
    HorizontalReflectionGenerator,
    PrimaryDiagonalReflectionGenerator,
    SecondaryDiagonalReflectionGenerator,
    VerticalReflectionGenerator,
)
from .rotation import Rotation90DegGenerator, Rotation270DegGenerator
from .xor import XorOperationGenerator

logger = logging.getLogger(__name__)

GENERATOR_CLASSES: Dict[TransformationKind, Type[GridGenerator]] = {
    TransformationKind.HORIZONTAL_REFLECTION: HorizontalReflectionGenerator,
    TransformationKind.VERTICAL_REFLECTION: VerticalReflectionGenerator,
    TransformationKind.PRIMARY_DIAGONAL_REFLECTION: PrimaryDiagonalReflectionGenerator,
    TransformationKind.SECONDARY_DIAGONAL_REFLECTION: SecondaryDiagonalReflectionGenerator,
    TransformationKind.ROTATION_90DEG: Rotation90DegGenerator,
    TransformationKind.ROTATION_270DEG: Rotation270DegGenerator,
    TransformationKind.PATTERN_COMPLETION: PatternCompletionGenerator,
    TransformationKind.XOR_OPERATION: XorOperationGenerator,
    TransformationKind.OBJECT_COUNTING: ObjectCountingGenerator,
}

_unmapped = [kind.value for kind in TransformationKind if kind not in GENERATOR_CLASSES]
if _unmapped:
    raise RuntimeError(f"No generator registered for: {', '.join(_unmapped)}")

for _kind, _cls in GENERATOR_CLASSES.items():
    if _cls.kind is not _kind:
        raise RuntimeError(f"{_cls.__name__} is registered for {_kind.value} but declares {_cls.kind}")

# Task files written by older tooling name the generator class instead of the kind
_KINDS_BY_CLASS_NAME = {cls.__name__: kind for kind, cls in GENERATOR_CLASSES.items()}


def resolve_kind(name: Any) -> Optional[TransformationKind]:
    """
    Map a kind, a transformation type string or a generator class name to
    a ``TransformationKind``.

    Returns:
        The kind, or None if ``name`` is not recognised
    """
    kind = TransformationKind.from_value(name)
    if kind is not None:
        return kind
    if isinstance(name, str):
        return _KINDS_BY_CLASS_NAME.get(name)
    return None


def create_generator(kind: TransformationKind, rng: Optional[random.Random] = None) -> GridGenerator:
    """Instantiate the generator for a known kind."""
    return GENERATOR_CLASSES[kind](rng=rng)


def get_generator(name: Any, rng: Optional[random.Random] = None) -> Optional[GridGenerator]:
    """
    Get a generator by transformation type or generator class name.

    Args:
        name: e.g. ``"rotation_90deg"``, ``TransformationKind.ROTATION_90DEG``
            or ``"Rotation90DegGenerator"``
        rng: Optional random source handed to the generator

    Returns:
        Generator instance, or None if the name is unknown
    """
    kind = resolve_kind(name)
    if kind is None:
        logger.debug("No grid generator registered for %r", name)
        return None
    return create_generator(kind, rng=rng)
