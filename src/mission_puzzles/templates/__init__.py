"""
Static registries: categories, transformations, emoji palettes and stories.
"""

from .categories import (
    CATEGORY_TEMPLATES,
    DOMAIN_CONTEXTS,
    CategoryTemplate,
    TaskIdAllocator,
    get_category,
    get_domain_contexts,
    max_task_number,
)
from .emoji_sets import default_emoji_sets, is_valid_emoji_set, load_emoji_sets
from .stories import ANTAGONISTS, COMPONENTS, STORY_TEMPLATES, StoryTemplate, get_story_templates
from .transformations import (
    TRANSFORMATION_TEMPLATES,
    TransformationTemplate,
    get_transformation,
    transformation_types,
)

__all__ = [
    "CATEGORY_TEMPLATES",
    "DOMAIN_CONTEXTS",
    "CategoryTemplate",
    "TaskIdAllocator",
    "get_category",
    "get_domain_contexts",
    "max_task_number",
    "default_emoji_sets",
    "is_valid_emoji_set",
    "load_emoji_sets",
    "ANTAGONISTS",
    "COMPONENTS",
    "STORY_TEMPLATES",
    "StoryTemplate",
    "get_story_templates",
    "TRANSFORMATION_TEMPLATES",
    "TransformationTemplate",
    "get_transformation",
    "transformation_types",
]
