"""
Demo configuration.

Everything has a default so the demos run without a config file.  A YAML file
can override any field::

    diary_path: out/diary.txt
    log_level: DEBUG
    demo: solid
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, validator

LOG = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Raised when a config file cannot be parsed or validated."""


class DemoConfig(BaseModel):
    diary_path: Path = Field(default=Path("diary.txt"))
    log_level: str = "WARNING"
    demo: Literal["factory", "solid", "all"] = "all"

    model_config = ConfigDict(extra="forbid")

    @validator("log_level", pre=True)
    def _normalise_log_level(cls, value: object) -> str:
        result = str(value or "").strip().upper()
        if result not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return result


def load_config(path: str | Path | None = None) -> DemoConfig:
    if path is None:
        return DemoConfig()

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(path)

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping at the top level")

    try:
        config = DemoConfig(**data)
    except ValidationError as exc:
        raise ConfigError(f"{path}: {exc}") from exc
    LOG.debug("Loaded config from %s", path)
    return config
