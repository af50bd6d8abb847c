
import logging
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from .errors import ConfigError
from . import messages

class Settings(BaseSettings):
    DB_URL: str = "sqlite:///notes.db"
    TIMEZONE: str = "Asia/Novosibirsk"
    TIME_FORMAT: str = "%d.%m.%Y %H:%M"
    LOG_LEVEL: str = "WARNING"
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @field_validator("TIMEZONE")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"unknown time zone {v!r}") from None
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        if not isinstance(logging.getLevelName(v.upper()), int):
            raise ValueError(f"unknown log level {v!r}")
        return v.upper()

_settings: Settings | None = None

def get_settings() -> Settings:
    global _settings
    if _settings is None:
        try:
            _settings = Settings()
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ConfigError(f"{messages.CONFIG_INVALID} {fields}") from e
    return _settings
