"""drips.core.config

Two config surfaces only:
1) `config/default.yaml`
2) Environment variables (`DRIPS_` prefix, `__` for nesting)

Protocol constants are not configuration; see :mod:`drips.core.constants`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings

from drips.core.exceptions import ConfigError


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = False

    @field_validator("level")
    @classmethod
    def level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"unknown log level: {v}")
        return level


class StreamsConfig(BaseModel):
    """Defaults used when converting human rates."""

    token_decimals: int = 18
    time_unit: Literal["second", "minute", "hour", "day", "week", "month", "year"] = "month"

    @field_validator("token_decimals")
    @classmethod
    def token_decimals_in_range(cls, v: int) -> int:
        if v < 0 or v > 77:
            raise ValueError("token_decimals must be in [0, 77]")
        return v


class Config(BaseSettings):
    """Root configuration. Single source of truth."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    streams: StreamsConfig = Field(default_factory=StreamsConfig)

    model_config = {"env_prefix": "DRIPS_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", path=str(path))

        try:
            raw = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {path}", path=str(path)) from e

        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}", path=str(path))

        return cls(**raw)

    @classmethod
    def from_repo_defaults(cls, repo_root: Path | None = None) -> Config:
        root = repo_root or Path.cwd()
        return cls.from_yaml(root / "config" / "default.yaml")
