"""
Configuration management for secure-random.
Supports secure_random.json with environment variable overrides.
All paths are resolved relative to the project root.
"""

import functools
import json
import os
from pathlib import Path
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

from secure_random.core.logger import init_logging

# Project root directory (parent of the 'secure_random' folder)
PROJECT_ROOT = Path(__file__).parent.parent


def get_env(key: str, default: str = None) -> Optional[str]:
    """Get environment variable with optional default."""
    return os.environ.get(key, default)


def get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(key)
    if val is None:
        return default
    return val.lower() in ("true", "1", "yes", "on")


# ==================== Configuration Models ====================

class LoggingConfig(BaseModel):
    level: str = "INFO"
    log_to_file: bool = False
    formatter: str = "color"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @field_validator("formatter")
    @classmethod
    def _known_formatter(cls, value: str) -> str:
        if value not in ("color", "plain", "json"):
            raise ValueError(f"Unknown formatter: {value}")
        return value


class PathsConfig(BaseModel):
    """All paths are relative to PROJECT_ROOT."""
    config_file: str = "secure_random.json"
    log_file: str = "logs/secure_random.log"

    def get_config_path(self) -> Path:
        return PROJECT_ROOT / self.config_file

    def get_log_path(self) -> Path:
        return PROJECT_ROOT / self.log_file


class AppConfig(BaseModel):
    """Main library configuration."""
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)


# ==================== Configuration Loading ====================

def load_config(config_path: Optional[Path] = None, use_dotenv: bool = True) -> AppConfig:
    """
    Load configuration from secure_random.json with environment variable overrides.
    Environment variables take precedence over file values.

    With `use_dotenv`, a .env file found from the current directory is loaded into
    the environment first; nothing touches os.environ until this is called.
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))
    if config_path is None:
        config_path = PROJECT_ROOT / PathsConfig().config_file

    data = {}
    if config_path.exists():
        with open(config_path, "r") as f:
            data = json.load(f)

    if get_env("SECURE_RANDOM_LOG_LEVEL"):
        data.setdefault("logging", {})["level"] = get_env("SECURE_RANDOM_LOG_LEVEL")
    if get_env("SECURE_RANDOM_LOG_TO_FILE"):
        data.setdefault("logging", {})["log_to_file"] = get_env_bool("SECURE_RANDOM_LOG_TO_FILE")
    if get_env("SECURE_RANDOM_LOG_FORMATTER"):
        data.setdefault("logging", {})["formatter"] = get_env("SECURE_RANDOM_LOG_FORMATTER")

    return AppConfig(**data)


def configure_logging(config: AppConfig = None):
    """Apply the logging section of a configuration."""
    config = config or get_settings()
    return init_logging(
        level=config.logging.level,
        log_to_file=config.logging.log_to_file,
        formatter=config.logging.formatter,
        log_file_path=config.paths.get_log_path(),
    )


@functools.lru_cache(maxsize=None)
def get_settings() -> AppConfig:
    """Configuration loaded on first use and cached for the process."""
    return load_config()
