"""
Task validation and testing.
"""

from .resolution import infer_transformation_type, resolve_transformation_type
from .test_runner import TestResult, TestRunner, TestRunnerOptions
from .validator import TaskValidator, ValidationResult

__all__ = [
    "infer_transformation_type",
    "resolve_transformation_type",
    "TestResult",
    "TestRunner",
    "TestRunnerOptions",
    "TaskValidator",
    "ValidationResult",
]
