"""
Task generation: the factory and its narrative collaborator.
"""

from .story_wrapper import StoryWrapper
from .task_factory import TaskFactory

__all__ = [
    "StoryWrapper",
    "TaskFactory",
]
