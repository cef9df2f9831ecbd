"""Configuration models and helpers for tzpocket settings."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

# -------------------- Settings Schema --------------------


class _Section(BaseModel):
    # A misspelled key is an error, not a silent default.
    model_config = ConfigDict(extra="forbid")


class ResolverCfg(_Section):
    """Fuzzy matching used when a zone id is misspelled."""

    similarity_threshold: float = 0.5

    @field_validator("similarity_threshold", mode="before")
    @classmethod
    def _cap_threshold(cls, value: float) -> float:
        numeric = float(value)
        return max(0.0, min(2.0, numeric))


class CacheCfg(_Section):
    """Upper bounds for the per-instance memo caches."""

    offsets: int = 256
    dst: int = 4096
    nth_weekday: int = 512
    offset_matches: int = 128

    @field_validator("offsets", "dst", "nth_weekday", "offset_matches", mode="before")
    @classmethod
    def _cap_sizes(cls, value: int) -> int:
        return max(1, min(1_000_000, int(value)))


class GeoCfg(_Section):
    """Nearest-zone lookup precision."""

    scale: int = 10000

    @field_validator("scale", mode="before")
    @classmethod
    def _cap_scale(cls, value: int) -> int:
        return max(1, min(10_000_000, int(value)))


class LoggingCfg(_Section):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.strip().upper() if isinstance(value, str) else value


class Settings(_Section):
    """Top-level settings model persisted on disk."""

    default_hint: Optional[str] = Field(
        default=None,
        description="Hint used when no timezone is given; empty means the host offset.",
    )
    resolver: ResolverCfg = Field(default_factory=ResolverCfg)
    cache: CacheCfg = Field(default_factory=CacheCfg)
    geo: GeoCfg = Field(default_factory=GeoCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)

    @field_validator("default_hint", mode="before")
    @classmethod
    def _blank_hint(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the tzpocket settings directory.

    ``TZPOCKET_HOME`` wins, then ``$XDG_CONFIG_HOME/tzpocket``, then
    ``~/.config/tzpocket``. Nothing is created.
    """

    explicit = os.environ.get("TZPOCKET_HOME")
    if explicit:
        return Path(explicit).expanduser()
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg).expanduser() if xdg else Path.home() / ".config"
    return base / "tzpocket"


def config_path() -> Path:
    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML and return the path written."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(settings.model_dump(), handle, sort_keys=False, allow_unicode=True)
    return target_path


def load_settings(path: Optional[Path] = None) -> Settings:
    """Read settings from ``path`` (default :func:`config_path`).

    A missing file means defaults; nothing is written. An empty file is the
    same as an empty mapping.

    Raises
    ------
    ValueError
        If the document is not a mapping or fails validation.
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        return default_settings()
    with source_path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"{source_path}: expected a mapping, got {type(raw).__name__}")
    return Settings.model_validate(raw)
