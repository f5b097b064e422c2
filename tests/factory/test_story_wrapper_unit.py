"""
Unit tests for the story wrapper.
"""

import random

import pytest

from mission_puzzles.factory import StoryWrapper, TaskFactory


@pytest.fixture
def task():
    return TaskFactory(rng=random.Random(5)).generate_task("COM", "secondary_diagonal_reflection")


@pytest.mark.unit
class TestStoryWrapper:
    """Tests for narrative substitution."""

    def test_substitute(self):
        text = "{{antagonist}} broke the {{ component }} {{unknown}}!"
        result = StoryWrapper.substitute(text, {"antagonist": "Zed", "component": "gyro"})
        assert result == "Zed broke the gyro !"

    def test_apply_returns_copy(self, task):
        wrapped = StoryWrapper(rng=random.Random(1)).apply(task, antagonist="Zed", component="gyro")

        assert wrapped is not task
        assert wrapped.title == "Counter-Flip the gyro!"
        assert wrapped.description.startswith("⚠️ Calibration chaos! Zed and ")
        assert wrapped.examples == task.examples
        assert wrapped.hints == task.hints
        assert task.title != wrapped.title

    def test_second_antagonist_differs(self, task):
        wrapper = StoryWrapper(antagonists=["Ann", "Bob"], rng=random.Random(2))
        wrapped = wrapper.apply(task, antagonist="Ann")
        assert "Ann and Bob argued" in wrapped.description

    def test_single_antagonist_reused(self, task):
        wrapper = StoryWrapper(antagonists=["Ann"], rng=random.Random(2))
        assert "Ann and Ann argued" in wrapper.apply(task).description

    def test_template_id(self, task):
        wrapped = StoryWrapper().apply(task, template_id="anti_diagonal_swap")
        assert wrapped.title.startswith("Counter-Flip the ")

    def test_no_story_for_transformation(self):
        task = TaskFactory().generate_task("COM", "object_counting")
        assert StoryWrapper().apply(task) is task

    def test_untagged_task_unchanged(self, task):
        task.transformation_type = None
        assert StoryWrapper().apply(task) is task
