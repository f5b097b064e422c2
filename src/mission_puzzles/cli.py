"""
Command Line Interface
======================

Generate and test mission puzzle tasks.

Usage:
    mission-puzzles generate single --category COM --transformation rotation_90deg
    mission-puzzles generate category --category NAV --output generated-tasks
    mission-puzzles generate all --difficulty Advanced
    mission-puzzles generate list
    mission-puzzles test file --file generated-tasks/COM-100.json --additional-tests
    mission-puzzles test directory --directory generated-tasks --recursive
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .data.models import DIFFICULTIES, SUPPORTED_GRID_SIZES, TaskDefinition
from .data.task_store import TaskStore, read_task, write_task
from .exceptions import ConfigError, TaskFileError
from .factory import StoryWrapper, TaskFactory
from .templates.categories import CATEGORY_TEMPLATES, TaskIdAllocator
from .templates.transformations import TRANSFORMATION_TEMPLATES, get_transformation
from .utils.config import EngineConfig, load_config
from .utils.log import setup_logging
from .validation import TaskValidator, TestResult, TestRunner, TestRunnerOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mission-puzzles",
        description="Generate and test Mission Control grid puzzles"
    )
    parser.add_argument(
        "--config", type=str, default=None,
        help="Path to a YAML config file"
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate commands
    generate_parser = subparsers.add_parser("generate", help="Generate tasks")
    generate_sub = generate_parser.add_subparsers(dest="action", help="What to generate")

    single_parser = generate_sub.add_parser("single", help="Generate a single task")
    single_parser.add_argument(
        "-c", "--category", type=str, required=True,
        help="Category code (e.g. COM, NAV)"
    )
    single_parser.add_argument(
        "-t", "--transformation", type=str, required=True,
        help="Transformation type (e.g. rotation_90deg)"
    )
    single_parser.add_argument(
        "-d", "--difficulty", type=str, default=None, choices=DIFFICULTIES,
        help="Difficulty level"
    )
    single_parser.add_argument(
        "-s", "--size", type=int, default=None, choices=SUPPORTED_GRID_SIZES,
        help="Grid size"
    )
    single_parser.add_argument(
        "-o", "--output", type=str, default=None,
        help="Output file path (default: stdout)"
    )

    category_parser = generate_sub.add_parser("category", help="Generate all tasks for a category")
    category_parser.add_argument(
        "-c", "--category", type=str, required=True,
        help="Category code (e.g. COM, NAV)"
    )
    category_parser.add_argument(
        "-d", "--difficulty", type=str, default=None, choices=DIFFICULTIES,
        help="Difficulty level"
    )
    category_parser.add_argument(
        "-o", "--output", type=str, default=None,
        help="Output directory"
    )

    all_parser = generate_sub.add_parser("all", help="Generate every category x transformation")
    all_parser.add_argument(
        "-d", "--difficulty", type=str, default=None, choices=DIFFICULTIES,
        help="Difficulty level"
    )
    all_parser.add_argument(
        "-o", "--output", type=str, default=None,
        help="Output directory"
    )

    generate_sub.add_parser("list", help="List available categories and transformations")

    # Test commands
    test_parser = subparsers.add_parser("test", help="Validate and test task files")
    test_sub = test_parser.add_subparsers(dest="action", help="What to test")

    file_parser = test_sub.add_parser("file", help="Test a single task file")
    file_parser.add_argument(
        "-f", "--file", type=str, required=True,
        help="Path to the task JSON file"
    )
    _add_test_flags(file_parser)

    directory_parser = test_sub.add_parser("directory", help="Test all task files in a directory")
    directory_parser.add_argument(
        "-d", "--directory", type=str, required=True,
        help="Directory containing task JSON files"
    )
    directory_parser.add_argument(
        "--recursive", action="store_true",
        help="Recursively search subdirectories"
    )
    _add_test_flags(directory_parser)

    return parser


def _add_test_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--additional-tests", action="store_true",
        help="Generate additional test cases"
    )
    parser.add_argument(
        "--fail-fast", action="store_true",
        help="Stop on first error"
    )
    parser.add_argument(
        "--performance", action="store_true",
        help="Collect performance metrics"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command or not getattr(args, "action", None):
        parser.print_help()
        return 1

    try:
        config = load_config(args.config) if args.config else EngineConfig()
    except ConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        setup_logging(config.logging, level=args.log_level)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.command == "generate":
        handlers = {
            "single": generate_single,
            "category": generate_category,
            "all": generate_all,
            "list": list_available,
        }
    else:
        handlers = {
            "file": test_file,
            "directory": test_directory,
        }
    return handlers[args.action](args, config)


# ----------------------------------------------------------------------------
# Generation
# ----------------------------------------------------------------------------

def build_factory(config: EngineConfig, task_dir: Optional[Path]) -> TaskFactory:
    """Factory whose IDs resume after the tasks already in ``task_dir``."""
    generation = config.generation
    rng = random.Random(generation.seed)
    allocator = TaskIdAllocator(task_dir, start=generation.first_task_number)
    story_wrapper = StoryWrapper(rng=rng) if generation.apply_story else None
    return TaskFactory(
        id_allocator=allocator,
        story_wrapper=story_wrapper,
        rng=rng,
        examples_per_task=generation.examples_per_task,
    )


def _print_errors(errors: List[str]) -> None:
    for error in errors:
        print(f"  - {error}", file=sys.stderr)


def generate_single(args, config: EngineConfig) -> int:
    if args.category not in CATEGORY_TEMPLATES:
        print(f"Error: Category '{args.category}' not found", file=sys.stderr)
        return 1
    if get_transformation(args.transformation) is None:
        print(f"Error: Transformation '{args.transformation}' not found", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else None
    task_dir = output.parent if output else Path(config.generation.output_dir)
    factory = build_factory(config, task_dir)

    task = factory.generate_task(
        args.category,
        args.transformation,
        difficulty=args.difficulty or config.generation.default_difficulty,
        grid_size=args.size,
    )
    if task is None:
        print("Error: Failed to generate task", file=sys.stderr)
        return 1

    result = TaskValidator().validate_task(task)
    if not result.is_valid:
        print("Error: Generated task is invalid:", file=sys.stderr)
        _print_errors(result.errors)
        return 1

    if output is None:
        print(json.dumps(task.to_dict(), indent=2, ensure_ascii=False))
        return 0

    try:
        write_task(task, output)
    except OSError as e:
        print(f"Error writing to file: {e}", file=sys.stderr)
        return 1
    print(f"Task generated and saved to {output}")
    return 0


def _generate_batch(
    factory: TaskFactory,
    store: TaskStore,
    pairs: List[Tuple[str, str]],
    difficulty: Optional[str]
) -> int:
    validator = TaskValidator()
    succeeded = 0
    failed = 0

    for category_code, transformation_type in pairs:
        print(f"Generating {category_code} × {transformation_type}...")
        task = factory.generate_task(category_code, transformation_type, difficulty=difficulty)
        if task is None:
            print(f"Error: Failed to generate task for {category_code} × {transformation_type}", file=sys.stderr)
            failed += 1
            continue

        result = validator.validate_task(task)
        if not result.is_valid:
            print(f"Error: Generated task {task.id} is invalid:", file=sys.stderr)
            _print_errors(result.errors)
            failed += 1
            continue

        try:
            path = store.save(task)
        except OSError as e:
            print(f"  ✗ Error writing {task.id}: {e}", file=sys.stderr)
            failed += 1
            continue
        print(f"  ✓ Saved to {path.name}")
        succeeded += 1

    print("\nGeneration summary:")
    print(f"  Total: {succeeded + failed}")
    print(f"  Success: {succeeded}")
    print(f"  Failed: {failed}")
    print(f"\nTasks saved to {store.task_dir}")
    return 0 if failed == 0 else 1


def generate_category(args, config: EngineConfig) -> int:
    if args.category not in CATEGORY_TEMPLATES:
        print(f"Error: Category '{args.category}' not found", file=sys.stderr)
        return 1

    store = TaskStore(args.output or config.generation.output_dir)
    factory = build_factory(config, store.task_dir)
    pairs = [(args.category, template.type) for template in TRANSFORMATION_TEMPLATES]
    return _generate_batch(factory, store, pairs, args.difficulty or config.generation.default_difficulty)


def generate_all(args, config: EngineConfig) -> int:
    store = TaskStore(args.output or config.generation.output_dir)
    factory = build_factory(config, store.task_dir)
    pairs = [
        (category_code, template.type)
        for category_code in CATEGORY_TEMPLATES
        for template in TRANSFORMATION_TEMPLATES
    ]
    return _generate_batch(factory, store, pairs, args.difficulty or config.generation.default_difficulty)


def list_available(args, config: EngineConfig) -> int:
    print("Available categories:")
    for code, category in CATEGORY_TEMPLATES.items():
        print(f"  {code}: {category.category_name} ({category.emoji_set})")

    print("\nAvailable transformations:")
    for template in TRANSFORMATION_TEMPLATES:
        print(f"  {template.type}: {template.name} ({template.difficulty})")
    return 0


# ----------------------------------------------------------------------------
# Testing
# ----------------------------------------------------------------------------

def _runner_options(args, config: EngineConfig) -> TestRunnerOptions:
    testing = config.testing
    return TestRunnerOptions(
        generate_additional_test_cases=args.additional_tests,
        additional_test_cases_count=testing.additional_test_cases,
        collect_performance_metrics=args.performance or testing.performance,
        fail_fast=args.fail_fast or testing.fail_fast,
    )


def _load_for_test(path: Path) -> Optional[TaskDefinition]:
    try:
        return read_task(path)
    except (OSError, json.JSONDecodeError, TaskFileError) as e:
        print(f"Error processing file {path}: {e}", file=sys.stderr)
        return None


def _report(result: TestResult) -> None:
    if result.passed:
        print(f"✓ Task {result.task_id} passed all tests")
    else:
        print(f"✗ Task {result.task_id} failed tests:", file=sys.stderr)
        _print_errors(result.error_messages)

    if result.performance_metrics:
        print("  Performance metrics:")
        print(f"    Execution time: {result.performance_metrics['execution_time_ms']:.2f}ms")
        print(f"    Peak memory: {result.performance_metrics['peak_memory_bytes'] / 1024:.2f}KB")


def test_file(args, config: EngineConfig) -> int:
    path = Path(args.file)
    if not path.is_file():
        print(f"Error: File not found: {path}", file=sys.stderr)
        return 1

    task = _load_for_test(path)
    if task is None:
        return 1

    print(f"Testing task {task.id} ({path})...")
    result = TestRunner(_runner_options(args, config)).test_task(task)
    _report(result)
    return 0 if result.passed else 1


def test_directory(args, config: EngineConfig) -> int:
    directory = Path(args.directory)
    if not directory.is_dir():
        print(f"Error: Directory not found: {directory}", file=sys.stderr)
        return 1

    files = TaskStore(directory).find_task_files(recursive=args.recursive)
    if not files:
        print(f"No JSON files found in {directory}", file=sys.stderr)
        return 1

    print(f"Found {len(files)} task files to test")
    runner = TestRunner(_runner_options(args, config))
    passed = failed = errored = 0

    for path in files:
        task = _load_for_test(path)
        if task is None:
            errored += 1
            if runner.options.fail_fast:
                break
            continue

        print(f"Testing task {task.id} ({path.relative_to(directory)})...")
        result = runner.test_task(task)
        _report(result)
        if result.passed:
            passed += 1
        else:
            failed += 1
            if runner.options.fail_fast:
                break

    print("\nTest summary:")
    print(f"  Total: {passed + failed + errored}")
    print(f"  Passed: {passed}")
    print(f"  Failed: {failed}")
    print(f"  Errors: {errored}")
    return 0 if failed == 0 and errored == 0 else 1
