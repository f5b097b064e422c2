"""Configuration management utilities."""

import dataclasses
import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

from ..data.models import MIN_EXAMPLE_COUNT
from ..exceptions import ConfigError


@dataclass
class GenerationConfig:
    """Task generation configuration."""
    output_dir: str = "generated-tasks"
    examples_per_task: int = 2
    default_difficulty: Optional[str] = None
    seed: Optional[int] = None
    apply_story: bool = True
    first_task_number: int = 100


@dataclass
class TestingConfig:
    """Task testing configuration."""
    additional_test_cases: int = 3
    fail_fast: bool = False
    performance: bool = False

    __test__ = False


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_file: Optional[str] = None


@dataclass
class EngineConfig:
    """Complete engine configuration."""
    generation: GenerationConfig = field(default_factory=GenerationConfig)
    testing: TestingConfig = field(default_factory=TestingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _build_section(section_cls, values: Any, name: str):
    if values is None:
        return section_cls()
    if not isinstance(values, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    try:
        return section_cls(**values)
    except TypeError as e:
        raise ConfigError(f"Invalid key in config section '{name}': {e}") from e


def config_from_dict(config_dict: Dict[str, Any]) -> EngineConfig:
    """Build an EngineConfig from a parsed YAML mapping."""
    if config_dict is None:
        config_dict = {}
    if not isinstance(config_dict, dict):
        raise ConfigError("Configuration must be a mapping")

    unknown = set(config_dict) - {"generation", "testing", "logging"}
    if unknown:
        raise ConfigError(f"Unknown config sections: {', '.join(sorted(unknown))}")

    config = EngineConfig(
        generation=_build_section(GenerationConfig, config_dict.get("generation"), "generation"),
        testing=_build_section(TestingConfig, config_dict.get("testing"), "testing"),
        logging=_build_section(LoggingConfig, config_dict.get("logging"), "logging"),
    )

    examples_per_task = config.generation.examples_per_task
    if not isinstance(examples_per_task, int) or examples_per_task < MIN_EXAMPLE_COUNT:
        raise ConfigError(
            f"generation.examples_per_task must be an integer of at least {MIN_EXAMPLE_COUNT}, "
            f"got {examples_per_task!r}"
        )
    return config


def load_config(config_path: str) -> EngineConfig:
    """Load configuration from YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        EngineConfig object

    Raises:
        ConfigError: If the file is missing or malformed
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    with open(path, 'r', encoding='utf-8') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Could not parse {config_path}: {e}") from e

    return config_from_dict(config_dict)


def save_config(config: EngineConfig, save_path: str) -> None:
    """Save configuration to YAML file.

    Args:
        config: EngineConfig object
        save_path: Path to save YAML file
    """
    config_dict = {
        'generation': dataclasses.asdict(config.generation),
        'testing': dataclasses.asdict(config.testing),
        'logging': dataclasses.asdict(config.logging),
    }

    Path(save_path).parent.mkdir(parents=True, exist_ok=True)
    with open(save_path, 'w', encoding='utf-8') as f:
        yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
