"""Runtime configuration loaded from environment variables and .env files."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, PrivateAttr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tzpocket.config.settings import CONFIG_FILENAME, Settings, get_config_home, load_settings


class RuntimeSettings(BaseSettings):
    """Where the CLI finds its settings file and which log level it starts at."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    tzpocket_home: Path = Field(default_factory=get_config_home, alias="TZPOCKET_HOME")
    log_level: str | None = Field(default=None, alias="TZPOCKET_LOG_LEVEL")
    settings_file: Path | None = Field(default=None, alias="TZPOCKET_SETTINGS_FILE")

    _persisted: Settings | None = PrivateAttr(default=None)

    @field_validator("tzpocket_home", mode="before")
    @classmethod
    def _validate_home(cls, value: Path | str | None) -> Path:
        if value is None or value == "":
            return get_config_home()
        return Path(value).expanduser()

    @field_validator("settings_file", mode="before")
    @classmethod
    def _expand_optional_path(cls, value: Path | str | None) -> Path | None:
        if value in {None, ""}:
            return None
        return Path(value).expanduser()

    def config_file_path(self) -> Path:
        """``TZPOCKET_SETTINGS_FILE`` if set, else ``config.yaml`` in the home."""

        if self.settings_file is not None:
            return self.settings_file
        return self.tzpocket_home / CONFIG_FILENAME

    def persisted(self) -> Settings:
        """Load :meth:`config_file_path` once; later calls get a deep copy."""

        if self._persisted is None:
            self._persisted = load_settings(self.config_file_path())
        return self._persisted.model_copy(deep=True)


__all__ = ["RuntimeSettings"]
