"""
Configuration for the polars store: where active and archived polars live.
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from polar_utils.conf import DEFAULT_ARCHIVED_DIR, DEFAULT_POLARS_DIR


class ConfigError(Exception):
    """The config file exists but cannot be used."""


class PolarsConfig(BaseModel):
    """Stored as ``polarsDir`` / ``archivedDir`` in a YAML file."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    polars_dir: str = Field(default=str(DEFAULT_POLARS_DIR))
    archived_dir: str = Field(default=str(DEFAULT_ARCHIVED_DIR))


def load_config(path: str | Path) -> PolarsConfig:
    """Load the config file, writing a default one first if it is missing."""
    p = Path(path)
    if not p.exists():
        config = PolarsConfig()
        save_config(config, p)
        return config
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        return PolarsConfig.model_validate(data)
    except (OSError, yaml.YAMLError, ValidationError) as e:
        raise ConfigError(f"Invalid config file {p}: {e}") from e


def save_config(config: PolarsConfig, path: str | Path) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(
        yaml.safe_dump(config.model_dump(by_alias=True), sort_keys=False),
        encoding="utf-8",
    )
    return p
