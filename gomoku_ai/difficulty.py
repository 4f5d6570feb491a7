"""
Difficulty presets for the Gomoku engine.
Maps a difficulty name to the depth, time budget and move cap the
search runs with, optionally overridden from a YAML file.
"""

from dataclasses import dataclass, replace
from typing import Dict, Optional

import yaml

from .config import CANDIDATE_CAP, SEARCH_RADIUS, ConfigError

DifficultyId = str  # "easy" | "medium" | "hard"

DEFAULT_DIFFICULTY = "medium"

# Depth-4 searches keep fewer candidates per node to answer in seconds on 19x19
MEDIUM_CANDIDATE_CAP = 10


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class SearchConfig:
    """
    Search settings for one difficulty. Setting time_budget_ms switches the
    engine to iterative deepening.
    """
    difficulty: DifficultyId
    max_depth: int
    time_budget_ms: Optional[int] = None  # set => iterative deepening
    candidate_cap: int = CANDIDATE_CAP
    search_radius: int = SEARCH_RADIUS

    def __post_init__(self):
        for name in ("max_depth", "candidate_cap", "search_radius"):
            value = getattr(self, name)
            if not _is_int(value):
                raise ConfigError(f"{self.difficulty}: {name} must be an integer, got {value!r}")
            if value < 1:
                raise ConfigError(f"{self.difficulty}: {name} must be >= 1, got {value}")
        if self.time_budget_ms is not None:
            if not _is_int(self.time_budget_ms):
                raise ConfigError(f"{self.difficulty}: time_budget_ms must be an integer, "
                                  f"got {self.time_budget_ms!r}")
            if self.time_budget_ms < 0:
                raise ConfigError(f"{self.difficulty}: time_budget_ms must be >= 0, got {self.time_budget_ms}")

    @property
    def iterative(self) -> bool:
        return self.time_budget_ms is not None


DIFFICULTY_MAP: Dict[DifficultyId, SearchConfig] = {
    "easy": SearchConfig("easy", max_depth=2),
    "medium": SearchConfig("medium", max_depth=4, candidate_cap=MEDIUM_CANDIDATE_CAP),
    "hard": SearchConfig("hard", max_depth=5, time_budget_ms=3000),
}

_PRESET_KEYS = {"max_depth", "time_budget_ms", "candidate_cap", "search_radius"}


def get_search_config(difficulty: Optional[str] = None,
                      configs: Optional[Dict[DifficultyId, SearchConfig]] = None) -> SearchConfig:
    """Preset for `difficulty`, case-insensitive; unknown or empty names get medium."""
    configs = configs or DIFFICULTY_MAP
    if not difficulty:
        return configs[DEFAULT_DIFFICULTY]
    return configs.get(difficulty.lower(), configs[DEFAULT_DIFFICULTY])


def load_search_configs(path) -> Dict[DifficultyId, SearchConfig]:
    """
    Load difficulty presets from a YAML file.

    The document maps difficulty names to any of max_depth, time_budget_ms,
    candidate_cap and search_radius; unspecified difficulties and fields
    keep their defaults.
    """
    try:
        with open(path, 'r') as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid preset file {path}: {e}") from e

    if document is None:
        return dict(DIFFICULTY_MAP)
    if not isinstance(document, dict):
        raise ConfigError(f"Preset file {path} must contain a mapping")

    configs = dict(DIFFICULTY_MAP)
    for name, fields in document.items():
        name = str(name).lower()
        if name not in DIFFICULTY_MAP:
            raise ConfigError(f"Unknown difficulty '{name}' in {path}")
        if not isinstance(fields, dict):
            raise ConfigError(f"Preset '{name}' in {path} must be a mapping")
        unknown = set(fields) - _PRESET_KEYS
        if unknown:
            raise ConfigError(f"Unknown keys for '{name}' in {path}: {sorted(unknown)}")
        try:
            configs[name] = replace(configs[name], **fields)
        except TypeError as e:
            raise ConfigError(f"Invalid value for '{name}' in {path}: {e}") from e
    return configs
