"""
Shared pytest configuration and fixtures.
"""

import random

import pytest

from mission_puzzles.data.models import ExamplePair, TaskDefinition


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast example-based tests")
    config.addinivalue_line("markers", "property: hypothesis property-based tests")


@pytest.fixture
def rng():
    """Seeded random source so generated grids are reproducible."""
    return random.Random(1234)


@pytest.fixture
def valid_task():
    """A hand-written, fully valid horizontal reflection task."""
    return TaskDefinition(
        id="COM-101",
        title="Signal Strength Mirror Analysis",
        description="Analyze the signal strength by reflecting the input grid horizontally.",
        category="📡 Communications",
        difficulty="Basic",
        grid_size=2,
        base_points=400,
        required_rank_level=1,
        emoji_set="tech_set2",
        examples=[
            ExamplePair(input_grid=[[1, 2], [3, 4]], output_grid=[[2, 1], [4, 3]]),
            ExamplePair(input_grid=[[5, 0], [0, 7]], output_grid=[[0, 5], [7, 0]]),
        ],
        test_input=[[8, 9], [1, 0]],
        test_output=[[9, 8], [0, 1]],
        hints=[
            "Think of the grid as being reflected in a mirror.",
            "The first column becomes the last column.",
            "The black square reflects like any other cell.",
        ],
        transformation_type="horizontal_reflection",
    )


@pytest.fixture
def valid_task_dict(valid_task):
    return valid_task.to_dict()
