"""Game configuration: board dimensions and data service settings."""

import json
from collections.abc import Mapping
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

from .errors import ConfigError
from .service import DEFAULT_BASE_URL


ENV_PREFIX = "JEOPARDY_"


@dataclass(frozen=True)
class GameConfig:
    """Configuration for building and serving a board."""
    base_url: str = DEFAULT_BASE_URL
    num_categories: int = 6
    clues_per_category: int = 5
    category_pool_size: int = 100  # How many categories to ask the service for
    timeout_s: float = 10.0
    tile_label: str = "100"  # Shown on unrevealed tiles without a value
    seed: Optional[int] = None

    def __post_init__(self):
        _require(self.num_categories > 0, "num_categories must be positive")
        _require(self.clues_per_category > 0, "clues_per_category must be positive")
        _require(
            self.category_pool_size >= self.num_categories,
            f"category_pool_size ({self.category_pool_size}) must be at least "
            f"num_categories ({self.num_categories})",
        )
        _require(self.timeout_s > 0, "timeout_s must be positive")
        _require(bool(self.base_url), "base_url must not be empty")

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping) -> "GameConfig":
        """Load config from a dictionary (e.g., from JSON); unknown keys are rejected."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        _require(not unknown, f"Unknown config keys: {', '.join(sorted(unknown))}")

        kwargs = {}
        for f in fields(cls):
            if f.name in data:
                kwargs[f.name] = _coerce(f.name, data[f.name])
        return cls(**kwargs)

    @classmethod
    def load_from_file(cls, filepath: str | Path) -> "GameConfig":
        """Load config from a JSON file."""
        try:
            with open(Path(filepath)) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Could not read config {filepath}: {e}") from e
        _require(isinstance(data, dict), f"Config {filepath} must be a JSON object")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls, env: Mapping[str, str], base: Optional["GameConfig"] = None) -> "GameConfig":
        """
        Overlay JEOPARDY_* environment variables on a base config.

        JEOPARDY_API_URL maps to base_url; every other field maps to
        JEOPARDY_<FIELD_NAME> (e.g. JEOPARDY_NUM_CATEGORIES).
        """
        data = (base or cls()).to_dict()
        for f in fields(cls):
            name = "API_URL" if f.name == "base_url" else f.name.upper()
            raw = env.get(ENV_PREFIX + name)
            if raw is not None and raw != "":
                data[f.name] = raw
        return cls.from_dict(data)

    def replace(self, **overrides) -> "GameConfig":
        """Return a copy with non-None overrides applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return GameConfig.from_dict(data)


_INT_FIELDS = {"num_categories", "clues_per_category", "category_pool_size", "seed"}
_FLOAT_FIELDS = {"timeout_s"}


def _coerce(name: str, value):
    if value is None:
        return None
    try:
        if name in _INT_FIELDS:
            if isinstance(value, bool):
                raise ValueError("booleans are not counts")
            if isinstance(value, float) and not value.is_integer():
                raise ValueError("not a whole number")
            return int(value)
        if name in _FLOAT_FIELDS:
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from e
    return str(value)


def _require(cond: bool, msg: str) -> None:
    if not cond:
        raise ConfigError(msg)
