"""
Property-based tests for task validation.

Feature: mission-puzzles
"""

import random

import pytest
from hypothesis import HealthCheck, given, settings, strategies as st

from mission_puzzles.data.models import DIFFICULTIES, TaskDefinition, TransformationKind
from mission_puzzles.factory import TaskFactory
from mission_puzzles.templates import CATEGORY_TEMPLATES
from mission_puzzles.validation import TaskValidator, TestRunner


seeds = st.integers(min_value=0, max_value=2**32 - 1)


# Feature: mission-puzzles, Property: Generated tasks validate
@pytest.mark.property
@settings(max_examples=100, deadline=None)
@given(
    category=st.sampled_from(sorted(CATEGORY_TEMPLATES)),
    kind=st.sampled_from(list(TransformationKind)),
    difficulty=st.sampled_from(DIFFICULTIES),
    seed=seeds,
)
def test_generated_tasks_are_valid(category, kind, difficulty, seed):
    """Every category x transformation x difficulty yields a valid task."""
    task = TaskFactory(rng=random.Random(seed)).generate_task(category, kind.value, difficulty=difficulty)

    assert task is not None
    assert len(task.hints) == 3
    result = TaskValidator().validate_task(task)
    assert result.is_valid, result.errors


# Feature: mission-puzzles, Property: Generated tasks survive the JSON layout
@pytest.mark.property
@settings(max_examples=50, deadline=None)
@given(kind=st.sampled_from(list(TransformationKind)), seed=seeds)
def test_generated_tasks_pass_runner_after_serialization(kind, seed):
    """A generated task read back from its JSON form still passes the test runner."""
    task = TaskFactory(rng=random.Random(seed)).generate_task("COM", kind.value)
    restored = TaskDefinition.from_dict(task.to_dict())

    result = TestRunner(rng=random.Random(seed)).test_task(restored)
    assert result.passed, result.error_messages


# Feature: mission-puzzles, Property: Corrupting a cell is detected
@pytest.mark.property
@settings(max_examples=100, deadline=None)
@given(
    kind=st.sampled_from([
        "horizontal_reflection",
        "vertical_reflection",
        "primary_diagonal_reflection",
        "secondary_diagonal_reflection",
        "rotation_90deg",
        "rotation_270deg",
        "xor_operation",
        "object_counting",
    ]),
    seed=seeds,
    data=st.data(),
)
def test_corrupted_test_output_is_rejected(kind, seed, data):
    """Changing any single output cell breaks a deterministic transformation."""
    task = TaskFactory(rng=random.Random(seed)).generate_task("NAV", kind)

    i = data.draw(st.integers(min_value=0, max_value=len(task.test_output) - 1))
    j = data.draw(st.integers(min_value=0, max_value=len(task.test_output[0]) - 1))
    delta = data.draw(st.integers(min_value=1, max_value=9))
    task.test_output[i][j] = (task.test_output[i][j] + delta) % 10

    result = TaskValidator().validate_task(task)
    assert not result.is_valid


# Feature: mission-puzzles, Property: Validation never raises
@pytest.mark.property
@settings(max_examples=200, deadline=None, suppress_health_check=[HealthCheck.too_slow])
@given(data=st.dictionaries(
    keys=st.sampled_from([
        "id", "title", "description", "category", "difficulty", "gridSize", "basePoints",
        "requiredRankLevel", "emojiSet", "examples", "testInput", "testOutput", "hints",
        "transformationType",
    ]),
    values=st.recursive(
        st.none() | st.booleans() | st.integers(min_value=-5, max_value=15) | st.text(max_size=8),
        lambda children: st.lists(children, max_size=3) | st.dictionaries(st.text(max_size=4), children, max_size=2),
        max_leaves=6,
    ),
))
def test_validation_never_raises(data):
    """Arbitrary JSON-shaped records produce a result, never an exception."""
    result = TaskValidator().validate_task(data)
    assert isinstance(result.is_valid, bool)
    assert result.is_valid == (not result.errors)
