"""
Unit tests for the task test runner.
"""

import random
import tracemalloc

import pytest

from mission_puzzles.data.models import ExamplePair
from mission_puzzles.validation import TestRunner, TestRunnerOptions


@pytest.mark.unit
class TestTaskRunner:
    """Tests for TestRunner.test_task."""

    def test_valid_task_passes(self, valid_task):
        result = TestRunner().test_task(valid_task)

        assert result.passed
        assert result.task_id == "COM-101"
        assert result.validation_result.is_valid
        assert result.examples_verified
        assert result.test_cases_verified
        assert result.error_messages == []
        assert result.performance_metrics is None

    def test_invalid_task_reports_validation_errors(self, valid_task):
        valid_task.hints = ["only one"]
        result = TestRunner().test_task(valid_task)

        assert not result.passed
        assert not result.validation_result.is_valid
        assert not result.examples_verified
        assert any("number of hints" in error for error in result.error_messages)

    def test_additional_test_cases(self, valid_task):
        options = TestRunnerOptions(generate_additional_test_cases=True, additional_test_cases_count=5)
        result = TestRunner(options, rng=random.Random(9)).test_task(valid_task)
        assert result.passed

    def test_performance_metrics(self, valid_task):
        options = TestRunnerOptions(collect_performance_metrics=True)
        result = TestRunner(options).test_task(valid_task)

        assert result.passed
        assert result.performance_metrics["execution_time_ms"] >= 0
        assert result.performance_metrics["peak_memory_bytes"] >= 0
        assert not tracemalloc.is_tracing()

    def test_performance_metrics_keep_existing_trace(self, valid_task):
        options = TestRunnerOptions(collect_performance_metrics=True)
        tracemalloc.start()
        try:
            result = TestRunner(options).test_task(valid_task)
            assert tracemalloc.is_tracing()
        finally:
            tracemalloc.stop()

        assert result.passed
        assert result.performance_metrics["peak_memory_bytes"] >= 0

    def test_tracing_stopped_when_checks_raise(self, valid_task, monkeypatch):
        def explode(task):
            raise RuntimeError("boom")

        runner = TestRunner(TestRunnerOptions(collect_performance_metrics=True))
        monkeypatch.setattr(runner.validator, "validate_task", explode)

        with pytest.raises(RuntimeError):
            runner.test_task(valid_task)
        assert not tracemalloc.is_tracing()

    def test_legacy_task_without_tag(self, valid_task):
        valid_task.transformation_type = None
        assert TestRunner().test_task(valid_task).passed


@pytest.mark.unit
class TestVerification:
    """Tests for the individual verification steps."""

    def test_verify_examples_collects_every_failure(self, valid_task):
        runner = TestRunner()
        generator = runner._resolve_generator(valid_task, [])
        valid_task.examples = [
            ExamplePair(input_grid=[[1, 2], [3, 4]], output_grid=[[1, 2], [3, 4]]),
            ExamplePair(input_grid=[[5, 6], [7, 8]], output_grid=[[5, 6], [7, 8]]),
        ]

        errors = []
        assert not runner.verify_examples(valid_task, generator, errors)
        assert errors == [
            "Example 1 failed validation for horizontal_reflection transformation",
            "Example 2 failed validation for horizontal_reflection transformation",
        ]

    def test_verify_examples_fail_fast(self, valid_task):
        runner = TestRunner(TestRunnerOptions(fail_fast=True))
        generator = runner._resolve_generator(valid_task, [])
        valid_task.examples = [
            ExamplePair(input_grid=[[1, 2], [3, 4]], output_grid=[[1, 2], [3, 4]]),
            ExamplePair(input_grid=[[5, 6], [7, 8]], output_grid=[[5, 6], [7, 8]]),
        ]

        errors = []
        assert not runner.verify_examples(valid_task, generator, errors)
        assert len(errors) == 1

    def test_verify_examples_empty(self, valid_task):
        runner = TestRunner()
        generator = runner._resolve_generator(valid_task, [])
        valid_task.examples = []

        errors = []
        assert not runner.verify_examples(valid_task, generator, errors)
        assert errors == ["No examples to verify"]

    def test_verify_test_case_missing(self, valid_task):
        runner = TestRunner()
        generator = runner._resolve_generator(valid_task, [])
        valid_task.test_output = None

        errors = []
        assert not runner.verify_test_case(valid_task, generator, errors)
        assert errors == ["Test case input or output is missing"]

    def test_unresolvable_generator(self, valid_task):
        valid_task.transformation_type = "spiral_rotation"
        errors = []
        assert TestRunner()._resolve_generator(valid_task, errors) is None
        assert errors == ["Transformation not found: spiral_rotation"]
