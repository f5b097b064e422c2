"""
Task factory: combines a category and a transformation into a task.
"""

import logging
import random
from typing import Dict, List, Optional, Sequence

from ..data.models import (
    DIFFICULTIES,
    GRID_SIZE_FOR_DIFFICULTY,
    MIN_EXAMPLE_COUNT,
    REQUIRED_HINT_COUNT,
    SUPPORTED_GRID_SIZES,
    TaskDefinition,
)
from ..exceptions import TaskIdExhaustedError
from ..generators import get_generator
from ..templates.categories import (
    CATEGORY_TEMPLATES,
    CategoryTemplate,
    TaskIdAllocator,
    get_domain_contexts,
)
from ..templates.transformations import TRANSFORMATION_TEMPLATES, TransformationTemplate
from .story_wrapper import StoryWrapper

logger = logging.getLogger(__name__)

class TaskFactory:
    """
    Main engine for generating tasks.

    Looks up the category and transformation templates, asks the
    transformation's generator for example and test grids, fills in hints and
    text, and allocates a sequential task ID. Lookup failures are logged and
    reported as a None result.
    """

    def __init__(
        self,
        category_templates: Optional[Dict[str, CategoryTemplate]] = None,
        transformation_templates: Optional[Sequence[TransformationTemplate]] = None,
        id_allocator: Optional[TaskIdAllocator] = None,
        story_wrapper: Optional[StoryWrapper] = None,
        rng: Optional[random.Random] = None,
        examples_per_task: int = MIN_EXAMPLE_COUNT
    ):
        """
        Initialize the task factory.

        Args:
            category_templates: Category code -> template (defaults to all categories)
            transformation_templates: Available transformations (defaults to all)
            id_allocator: Caller-owned ID allocator; a fresh one starting at
                100 with no persisted files if None
            story_wrapper: Narrative collaborator applied to every task, or
                None to keep the template-rendered title and description
            rng: Random source for grids and text choices
            examples_per_task: Number of example pairs per task (at least 2)
        """
        if examples_per_task < MIN_EXAMPLE_COUNT:
            raise ValueError(f"examples_per_task must be at least {MIN_EXAMPLE_COUNT}, got {examples_per_task}")

        self.category_templates = category_templates if category_templates is not None else CATEGORY_TEMPLATES
        templates = transformation_templates if transformation_templates is not None else TRANSFORMATION_TEMPLATES
        self.transformation_templates = {template.type: template for template in templates}
        self.id_allocator = id_allocator if id_allocator is not None else TaskIdAllocator()
        self.story_wrapper = story_wrapper
        self.rng = rng or random.Random()
        self.examples_per_task = examples_per_task

    @property
    def transformation_types(self) -> List[str]:
        return list(self.transformation_templates)

    def generate_task(
        self,
        category_code: str,
        transformation_type: str,
        difficulty: Optional[str] = None,
        grid_size: Optional[int] = None,
        custom_hints: Optional[Sequence[str]] = None,
        domain_context: Optional[str] = None
    ) -> Optional[TaskDefinition]:
        """
        Generate a complete task definition.

        Args:
            category_code: Category code (e.g. "COM", "NAV")
            transformation_type: Transformation type (e.g. "horizontal_reflection")
            difficulty: Override the transformation's difficulty
            grid_size: Override the difficulty's grid size
            custom_hints: Hints to use instead of the transformation's
            domain_context: Phrase for the title/description placeholders

        Returns:
            Task definition, or None if generation failed
        """
        category = self.category_templates.get(category_code)
        if category is None:
            logger.error("Category %s not found", category_code)
            return None

        transformation = self.transformation_templates.get(transformation_type)
        if transformation is None:
            logger.error("Transformation %s not found", transformation_type)
            return None

        generator = get_generator(transformation.generator, rng=self.rng)
        if generator is None:
            logger.error("Grid generator %s not found", transformation.generator)
            return None

        difficulty = difficulty or transformation.difficulty
        if difficulty not in DIFFICULTIES:
            logger.error("Invalid difficulty %s", difficulty)
            return None
        if grid_size is None:
            grid_size = self.grid_size_for_difficulty(difficulty)
        elif grid_size not in SUPPORTED_GRID_SIZES:
            logger.error("Invalid grid size %s (supported: %s)", grid_size, list(SUPPORTED_GRID_SIZES))
            return None

        try:
            examples = generator.generate_examples(grid_size, self.examples_per_task)
            test_case = generator.generate_test_case(grid_size)
        except ValueError as e:
            logger.error("Cannot generate %s grids of size %s: %s", transformation_type, grid_size, e)
            return None

        hints = self.build_hints(transformation, category, custom_hints)

        if domain_context is None:
            domain_context = self.rng.choice(get_domain_contexts(category_code))
        if transformation.context_variations:
            title_context = self.rng.choice(transformation.context_variations)
        else:
            title_context = domain_context

        try:
            task_id = self.id_allocator.next_id(category_code)
        except TaskIdExhaustedError as e:
            logger.error("%s", e)
            return None

        task = TaskDefinition(
            id=task_id,
            title=transformation.render_title(title_context),
            description=transformation.render_description(domain_context),
            category=category.category_name,
            difficulty=difficulty,
            grid_size=grid_size,
            base_points=category.base_points,
            required_rank_level=category.required_rank_level,
            emoji_set=category.emoji_set,
            examples=examples,
            test_input=test_case.input_grid,
            test_output=test_case.output_grid,
            hints=hints,
            transformation_type=transformation.type,
            time_limit=None,
            generated=True,
        )
        logger.info("Generated %s (%s x %s, size %d)", task.id, category_code, transformation_type, grid_size)

        if self.story_wrapper is not None:
            task = self.story_wrapper.apply(task)

        return task

    def build_hints(
        self,
        transformation: TransformationTemplate,
        category: CategoryTemplate,
        custom_hints: Optional[Sequence[str]] = None
    ) -> List[str]:
        """
        Exactly three hints: custom or canned hints, topped up with generic ones.

        The caller's list is copied, never modified.
        """
        hints = list(custom_hints) if custom_hints is not None else list(transformation.hint_patterns)

        fillers = [
            f"Apply the {transformation.name.lower()} transformation to solve the puzzle.",
            f"Look for how each cell changes according to the {transformation.family} pattern "
            f"used in {category.category_name}.",
            "⬛ cells follow the same transformation rules as any other cells.",
        ]
        while len(hints) < REQUIRED_HINT_COUNT:
            hints.append(fillers[len(hints)])

        return hints[:REQUIRED_HINT_COUNT]

    @staticmethod
    def grid_size_for_difficulty(difficulty: str) -> int:
        return GRID_SIZE_FOR_DIFFICULTY[difficulty]
