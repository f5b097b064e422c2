"""
Story wrapper: narrative text for generated tasks.

Replaces a task's title and description with a short Mission Control story
for its transformation. Everything else in the record is left alone, and
the input task is never modified.
"""

import dataclasses
import logging
import random
import re
from typing import Dict, List, Optional, Sequence

from ..data.models import TaskDefinition, TransformationKind
from ..templates.stories import ANTAGONISTS, COMPONENTS, StoryTemplate, get_story_templates

logger = logging.getLogger(__name__)

_PLACEHOLDER = re.compile(r"{{\s*(\w+)\s*}}")
_SECOND_ANTAGONIST = re.compile(r"{{\s*antagonist2\s*}}", re.IGNORECASE)


class StoryWrapper:
    """Fills narrative templates for a task's transformation."""

    def __init__(
        self,
        antagonists: Sequence[str] = ANTAGONISTS,
        components: Sequence[str] = COMPONENTS,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the story wrapper.

        Args:
            antagonists: Names substituted for ``{{antagonist}}``
            components: Ship parts substituted for ``{{component}}``
            rng: Random source for template and name choice
        """
        self.antagonists = list(antagonists)
        self.components = list(components)
        self.rng = rng or random.Random()

    def apply(
        self,
        task: TaskDefinition,
        antagonist: Optional[str] = None,
        component: Optional[str] = None,
        template_id: Optional[str] = None
    ) -> TaskDefinition:
        """
        Return a copy of ``task`` with narrative title and description.

        Args:
            task: The task to enrich
            antagonist: Force a particular antagonist name
            component: Force a particular ship component
            template_id: Force a particular template by id

        Returns:
            New task, or ``task`` itself if its transformation has no stories
        """
        kind = TransformationKind.from_value(task.transformation_type)
        templates = get_story_templates(kind) if kind is not None else []
        if not templates:
            return task

        chosen = self._choose_template(templates, template_id)
        placeholders = self._placeholders(chosen, antagonist, component)

        return dataclasses.replace(
            task,
            title=self.substitute(chosen.title, placeholders),
            description=self.substitute(chosen.description, placeholders),
        )

    @staticmethod
    def substitute(text: str, placeholders: Dict[str, str]) -> str:
        """Fill ``{{name}}`` placeholders; unknown names become empty strings."""
        return _PLACEHOLDER.sub(lambda m: placeholders.get(m.group(1), ""), text)

    def _choose_template(self, templates: List[StoryTemplate], template_id: Optional[str]) -> StoryTemplate:
        if template_id is not None:
            for template in templates:
                if template.id == template_id:
                    return template
            logger.warning("Story template %r not found; choosing at random", template_id)
        return self.rng.choice(templates)

    def _placeholders(
        self,
        template: StoryTemplate,
        antagonist: Optional[str],
        component: Optional[str]
    ) -> Dict[str, str]:
        first = antagonist if antagonist is not None else self.rng.choice(self.antagonists)
        part = component if component is not None else self.rng.choice(self.components)

        second = first
        if _SECOND_ANTAGONIST.search(template.title + template.description):
            others = [name for name in self.antagonists if name != first]
            if others:
                second = self.rng.choice(others)

        return {
            "antagonist": first,
            "antagonist1": first,
            "antagonist2": second,
            "component": part,
        }
