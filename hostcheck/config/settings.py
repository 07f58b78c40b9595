"""YAML config loader with environment variable expansion."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, ValidationError

from hostcheck.host.models import ConfigError


def _expand_env_vars(value: str) -> str:
    """Replace ${VAR_NAME} with environment variable values."""
    pattern = re.compile(r"\$\{([^}]+)\}")
    def replacer(match: re.Match) -> str:
        var = match.group(1)
        return os.environ.get(var, match.group(0))
    return pattern.sub(replacer, value)


def _walk_and_expand(obj: object) -> object:
    """Recursively expand environment variables in strings."""
    if isinstance(obj, str):
        return _expand_env_vars(obj)
    if isinstance(obj, dict):
        return {k: _walk_and_expand(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_walk_and_expand(item) for item in obj]
    return obj


class OutputConfig(BaseModel):
    directory: str = "~/"
    format: Literal["html", "json"] = "html"

    @property
    def directory_path(self) -> Path:
        return Path(self.directory).expanduser()


class PowerShellConfig(BaseModel):
    executable: str = "powershell"
    timeout: int = Field(default=30, gt=0)   # seconds per command


class LoggingConfig(BaseModel):
    level: str = "WARNING"
    file: str | None = None


class Settings(BaseModel):
    output: OutputConfig = Field(default_factory=OutputConfig)
    powershell: PowerShellConfig = Field(default_factory=PowerShellConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> Settings:
    """Load configuration from a YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path("hostcheck.yaml"),
            Path("hostcheck.yml"),
            Path.home() / ".hostcheck" / "config.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                path = candidate
                break

    if path is None:
        return Settings()

    path = Path(path)
    try:
        with open(path) as f:
            raw = yaml.safe_load(f) or {}
    except OSError as exc:
        raise ConfigError(f"Cannot read config {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    raw = _walk_and_expand(raw)

    try:
        return Settings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc
