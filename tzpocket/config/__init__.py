"""Configuration helpers exposed at :mod:`tzpocket.config`."""

from __future__ import annotations

from .settings import (
    CacheCfg,
    GeoCfg,
    LoggingCfg,
    ResolverCfg,
    Settings,
    config_path,
    default_settings,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "Settings",
    "CacheCfg",
    "GeoCfg",
    "LoggingCfg",
    "ResolverCfg",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
]
