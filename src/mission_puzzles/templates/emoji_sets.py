"""
Emoji palette registry.

Palettes are only used here to check that a task's ``emojiSet`` names a
palette the client can render; transformation math never looks at them.
"""

from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Union

import yaml

from ..exceptions import ConfigError

EMOJI_SETS_PATH = Path(__file__).with_name("emoji_sets.yaml")
PALETTE_SIZE = 10


def load_emoji_sets(path: Optional[Union[str, Path]] = None) -> Dict[str, List[str]]:
    """
    Load emoji palettes from YAML.

    Args:
        path: YAML file mapping palette name to a list of ten symbols.
            Defaults to the bundled palettes.

    Returns:
        Dictionary of palette name to symbols

    Raises:
        ConfigError: If the file is not a mapping of ten-symbol lists
    """
    path = Path(path) if path is not None else EMOJI_SETS_PATH
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ConfigError(f"Emoji set file {path} must contain a mapping")

    for name, symbols in data.items():
        if not isinstance(symbols, list) or len(symbols) != PALETTE_SIZE:
            raise ConfigError(f"Emoji set '{name}' must list exactly {PALETTE_SIZE} symbols")

    return data


@lru_cache(maxsize=1)
def default_emoji_sets() -> Dict[str, List[str]]:
    return load_emoji_sets()


def is_valid_emoji_set(name: str) -> bool:
    return isinstance(name, str) and name in default_emoji_sets()
