"""Configuration management for dirdiff."""

import json
import os
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, ValidationError

from . import ENV_HASH_ALGORITHM, ENV_WORKERS
from .errors import ConfigError

HashAlgorithm = Literal["md5", "sha1", "sha256"]
HASH_ALGORITHMS: tuple[str, ...] = ("md5", "sha1", "sha256")


class DirDiffConfig(BaseModel):
    """Configuration for a comparison run."""

    hash_algorithm: HashAlgorithm = "md5"
    workers: int | None = Field(default=None, ge=1)  # None = os.cpu_count()
    exclude_patterns: list[str] = Field(default_factory=list)

    def worker_count(self) -> int:
        """Size of the per-scan fingerprinting pool."""
        return self.workers or os.cpu_count() or 1


def load_config(config_path: Path | None = None) -> DirDiffConfig:
    """Load configuration from a JSON file.

    Falls back to defaults if no path is given or the file doesn't exist.
    Environment variables can override config values.
    """
    data: dict = {}
    if config_path is not None and config_path.exists():
        try:
            with open(config_path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {config_path} must contain a JSON object")

    data = _apply_env_overrides(data)

    try:
        return DirDiffConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def _apply_env_overrides(data: dict) -> dict:
    """Apply environment variable overrides to raw config data."""
    data = dict(data)

    # DIRDIFF_HASH_ALGORITHM
    if algorithm := os.environ.get(ENV_HASH_ALGORITHM):
        data["hash_algorithm"] = algorithm.lower()

    # DIRDIFF_WORKERS
    if workers := os.environ.get(ENV_WORKERS):
        data["workers"] = workers

    return data
