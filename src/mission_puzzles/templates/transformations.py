"""
Transformation templates.

Each template binds a transformation type to its generator, default
difficulty and the text patterns used to title, describe and hint a task.
Title patterns take a ``{context}`` placeholder and description patterns a
``{domain}`` placeholder.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..data.models import TransformationKind


@dataclass(frozen=True)
class TransformationTemplate:
    """Properties of a transformation that apply across all categories."""
    type: str
    name: str
    family: str
    title_pattern: str
    description_pattern: str
    generator: TransformationKind
    hint_patterns: Tuple[str, ...]
    difficulty: str
    context_variations: Tuple[str, ...] = ()

    def render_title(self, context: str) -> str:
        return self.title_pattern.replace("{context}", context)

    def render_description(self, domain: str) -> str:
        return self.description_pattern.replace("{domain}", domain)


TRANSFORMATION_TEMPLATES: List[TransformationTemplate] = [
    TransformationTemplate(
        type="horizontal_reflection",
        name="Horizontal Reflection",
        family="geometric",
        title_pattern="{context} Mirror Analysis",
        description_pattern="Analyze the {domain} by reflecting the input grid horizontally (left-to-right mirror).",
        generator=TransformationKind.HORIZONTAL_REFLECTION,
        hint_patterns=(
            "Think of the grid as being reflected in a mirror placed to the right side.",
            "The first column becomes the last column, the second becomes the second-to-last, and so on.",
            "The black square (⬛) reflects just like any other cell value.",
        ),
        difficulty="Basic",
    ),
    TransformationTemplate(
        type="rotation_90deg",
        name="90° Rotation",
        family="geometric",
        title_pattern="{context} Rotation Analysis",
        description_pattern="Analyze the {domain} by rotating the input grid 90 degrees clockwise.",
        generator=TransformationKind.ROTATION_90DEG,
        hint_patterns=(
            "Rotate the entire grid 90 degrees clockwise 🔃 (¼ turn to the right).",
            "The top row becomes the rightmost column, reading from top to bottom.",
            "Each column in the original becomes a row in the result, with order reversed.",
        ),
        difficulty="Intermediate",
    ),
    TransformationTemplate(
        type="pattern_completion",
        name="Pattern Completion",
        family="pattern",
        title_pattern="{context} Pattern Analysis",
        description_pattern=(
            "Complete the pattern in the {domain} by identifying the logical sequence "
            "and filling in the missing values."
        ),
        generator=TransformationKind.PATTERN_COMPLETION,
        hint_patterns=(
            "Look for repeating sequences or progressions in the grid.",
            "Analyze both rows and columns for patterns that might reveal missing values.",
            "Simple mathematical operations (addition, subtraction) often reveal the pattern.",
        ),
        difficulty="Intermediate",
    ),
    TransformationTemplate(
        type="vertical_reflection",
        name="Vertical Reflection",
        family="geometric",
        title_pattern="{context} Vertical Analysis",
        description_pattern="Analyze the {domain} by flipping the input grid vertically (top-to-bottom).",
        generator=TransformationKind.VERTICAL_REFLECTION,
        hint_patterns=(
            "Flip the entire grid vertically (top ↔ bottom) 🔼🔽.",
            "The top row becomes the bottom row, the second row from the top becomes "
            "the second row from the bottom, and so on.",
            "Each row maintains its order from left to right, but rows swap positions vertically.",
        ),
        difficulty="Intermediate",
    ),
    TransformationTemplate(
        type="rotation_270deg",
        name="270° Rotation",
        family="geometric",
        title_pattern="{context} Rotation Analysis",
        description_pattern=(
            "Analyze the {domain} by rotating the input grid 270 degrees clockwise "
            "(or 90 degrees counter-clockwise)."
        ),
        generator=TransformationKind.ROTATION_270DEG,
        hint_patterns=(
            "Rotate the entire grid 270 degrees clockwise (¾ turn to the right).",
            "The leftmost column becomes the top row, reading from left to right.",
            "Each row in the original becomes a column in the result, with order shifted accordingly.",
        ),
        difficulty="Intermediate",
    ),
    TransformationTemplate(
        type="primary_diagonal_reflection",
        name="Primary Diagonal Reflection",
        family="geometric",
        title_pattern="{context} Diagonal Analysis",
        description_pattern=(
            "Analyze the {domain} by reflecting the input grid across the primary diagonal "
            "(top-left to bottom-right)."
        ),
        generator=TransformationKind.PRIMARY_DIAGONAL_REFLECTION,
        hint_patterns=(
            "Imagine a line going from the top-left corner to the bottom-right corner of the grid ↘️. "
            "Flip the grid over this line.",
            "This is like swapping rows and columns - the first row becomes the first column, "
            "the second row becomes the second column, and so on.",
            "The number in the top-right corner will move to the bottom-left corner, "
            "like looking at the grid in a mirror along the diagonal.",
        ),
        difficulty="Intermediate",
    ),
    TransformationTemplate(
        type="secondary_diagonal_reflection",
        name="Secondary Diagonal Reflection",
        family="geometric",
        title_pattern="{context} Diagonal Mirror Analysis",
        description_pattern=(
            "Analyze the {domain} by reflecting the input grid across the secondary diagonal "
            "(top-right to bottom-left)."
        ),
        generator=TransformationKind.SECONDARY_DIAGONAL_REFLECTION,
        hint_patterns=(
            "Imagine a line going from the top-right corner to the bottom-left corner of the grid ↙️. "
            "Flip the grid over this line.",
            "The top-left corner will swap with the bottom-right corner, like a different kind of mirror.",
            "Think of this as 'flipping the grid upside down' and then 'flipping it left to right' all at once.",
        ),
        difficulty="Advanced",
    ),
    TransformationTemplate(
        type="xor_operation",
        name="XOR Operation",
        family="logical",
        title_pattern="{context} Signal Comparison",
        description_pattern=(
            "Compare neighbouring readings in the {domain}: matching neighbours cancel out, "
            "different neighbours combine."
        ),
        generator=TransformationKind.XOR_OPERATION,
        hint_patterns=(
            "Compare each cell with the cell immediately to its right.",
            "If the two cells match, the result is ⬛ (0); otherwise add them together (never above 9).",
            "The last column has no right-hand neighbour, so it is copied across unchanged.",
        ),
        difficulty="Advanced",
        context_variations=("Relay Parity", "Sensor Cross-Check", "Channel Interference"),
    ),
    TransformationTemplate(
        type="object_counting",
        name="Object Counting",
        family="counting",
        title_pattern="{context} Inventory Count",
        description_pattern="Count how often each symbol appears in the {domain} and report the tallies.",
        generator=TransformationKind.OBJECT_COUNTING,
        hint_patterns=(
            "Count how many times each symbol appears anywhere in the input grid.",
            "The output lists the counts in symbol order, starting with ⬛ (0).",
            "The output grid is smaller than the input: it holds counts, not a picture.",
        ),
        difficulty="Intermediate",
    ),
]

_TEMPLATES_BY_TYPE = {template.type: template for template in TRANSFORMATION_TEMPLATES}


def get_transformation(transformation_type: str) -> Optional[TransformationTemplate]:
    """Look up a transformation template by type; None if unknown."""
    if isinstance(transformation_type, TransformationKind):
        transformation_type = transformation_type.value
    if not isinstance(transformation_type, str):
        return None
    return _TEMPLATES_BY_TYPE.get(transformation_type)


def transformation_types() -> List[str]:
    return [template.type for template in TRANSFORMATION_TEMPLATES]
