"""Logging setup for the command-line tools."""

import logging
from typing import Optional

from .config import LoggingConfig


def setup_logging(config: Optional[LoggingConfig] = None, level: Optional[str] = None) -> None:
    """
    Configure the root logger once from a LoggingConfig.

    Args:
        config: Logging configuration (defaults if None)
        level: Overrides ``config.level`` when given
    """
    config = config or LoggingConfig()
    level_name = (level or config.level).upper()
    numeric_level = getattr(logging, level_name, None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    handlers = [logging.StreamHandler()]
    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file, encoding="utf-8"))

    logging.basicConfig(level=numeric_level, format=config.format, handlers=handlers, force=True)
