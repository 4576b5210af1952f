"""Configuration management - config-driven architecture."""

from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BUNDLED_RULES_DIR = Path(__file__).parent / "data"
RULES_FILE = "rules.yaml"


class Settings(BaseSettings):
    """Application settings from environment and .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, description="Bind port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Rule data
    rules_dir: Path | None = Field(
        default=None,
        description="Directory holding rules.yaml; bundled tables are used when unset",
    )

    # Engine tuning
    level_threshold: int = Field(default=100, gt=0, description="Points per level")
    upcoming_window: int = Field(default=3, gt=0, description="Items shown in upcoming lists")
    reminder_alert_window_seconds: int = Field(
        default=300,
        ge=0,
        description="How long after its due time a reminder is still alerted",
    )
    appointment_reminder_hours: int = Field(
        default=24,
        ge=0,
        description="Reminder lead time before a doctor appointment",
    )
    routine_score_days: int = Field(default=7, gt=0, description="Routine success score window")


def load_yaml_config(config_path: Path) -> dict[str, Any]:
    """Load YAML config file."""
    if not config_path.exists():
        return {}
    with config_path.open() as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()


@lru_cache
def get_rule_data(config_dir_str: str = "") -> dict[str, Any]:
    """Load raw rule tables. Static, read-only reference data."""
    if not config_dir_str:
        settings = get_settings()
        config_dir = settings.rules_dir or BUNDLED_RULES_DIR
    else:
        config_dir = Path(config_dir_str)
    return load_yaml_config(Path(config_dir) / RULES_FILE)
