"""Configuration and logging utilities."""

from .config import (
    EngineConfig,
    GenerationConfig,
    LoggingConfig,
    TestingConfig,
    config_from_dict,
    load_config,
    save_config,
)
from .log import setup_logging

__all__ = [
    "EngineConfig",
    "GenerationConfig",
    "LoggingConfig",
    "TestingConfig",
    "config_from_dict",
    "load_config",
    "save_config",
    "setup_logging",
]
