"""User configuration for Script Picker."""

import logging
from pathlib import Path

import click
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "script-picker"
CONFIG_FILE_NAME = "config.yaml"


def default_config_path() -> Path:
    """Per-user config file location (honors XDG_CONFIG_HOME on Linux)."""
    return Path(click.get_app_dir(APP_NAME)) / CONFIG_FILE_NAME


class Settings(BaseModel):
    """
    Settings read once per invocation and never mutated afterwards.

    Values accepted for package_manager are "auto" (detect from lock files),
    "pnpm", "bun" and "npm". Anything else is kept as-is and resolved to npm
    by the detector.
    """

    package_manager: str = Field(
        "auto", description="Package manager override, or 'auto' to detect"
    )

    @field_validator("package_manager", mode="before")
    @classmethod
    def normalize_package_manager(cls, v):
        """Strip and lower-case the configured value; empty means auto."""
        if v is None:
            return "auto"
        v = str(v).strip().lower()
        return v or "auto"


def load_settings(path: Path | None = None) -> Settings:
    """
    Load settings from a YAML file.

    A missing file at the default location yields default settings; an
    explicitly given path must exist.

    Args:
        path: Config file path (defaults to default_config_path())

    Returns:
        Parsed Settings

    Raises:
        ConfigError: If an explicit path does not exist, or the file is not
            a YAML mapping or fails validation
    """
    if path is None:
        config_file = default_config_path()
        if not config_file.is_file():
            logger.debug(f"No config file at {config_file}, using defaults")
            return Settings()
    else:
        config_file = Path(path).expanduser()
        if not config_file.is_file():
            raise ConfigError(f"Config file {config_file} does not exist")

    try:
        with open(config_file, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_file} must contain a mapping")

    try:
        settings = Settings(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {config_file}: {e}") from e

    logger.info(f"Loaded config from {config_file}")
    return settings
