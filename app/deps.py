from functools import lru_cache
from pathlib import Path

import tomli
from pydantic_settings import BaseSettings, SettingsConfigDict

CONFIG_PATH = Path("config/appsettings.toml")


class Settings(BaseSettings):
    """Application configuration loaded from file and environment."""
    confidence_threshold: float = 0.65
    min_match_confidence: float = 0.5
    history_limit: int = 200
    log_level: str = "INFO"

    model_config = SettingsConfigDict(extra="ignore")

    @classmethod
    def settings_customise_sources(
            cls, settings_cls, init_settings, env_settings, dotenv_settings, file_secret_settings
    ):
        return (
            init_settings,
            env_settings,
            cls._toml_config_settings_source,
            file_secret_settings,
        )

    @classmethod
    def _toml_config_settings_source(cls):
        if not CONFIG_PATH.exists():
            return {}
        try:
            data = tomli.loads(CONFIG_PATH.read_text(encoding="utf-8"))
        except (tomli.TOMLDecodeError, OSError):
            return {}
        values = {
            "confidence_threshold": data.get("assistant", {}).get("confidence_threshold"),
            "min_match_confidence": data.get("assistant", {}).get("min_match_confidence"),
            "history_limit": data.get("history", {}).get("limit"),
            "log_level": data.get("logging", {}).get("level"),
        }
        return {key: value for key, value in values.items() if value is not None}


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""

    return Settings()
