"""Settings loading for Gradle Task Explorer."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = ".taskexplorer.yaml"
SECTION = "taskExplorer"
DEFAULT_EXCLUDES = ["**/node_modules/**"]


class ExplorerSettings(BaseModel):
    """
    User settings for task discovery.

    Keys may be given in camelCase (as stored by editors) or snake_case.
    """

    model_config = ConfigDict(populate_by_name=True)

    path_to_gradle: Optional[str] = Field(
        None,
        alias="pathToGradle",
        description="Executable used for Gradle tasks instead of the platform default",
    )
    exclude: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDES),
        description="Glob patterns for build files to skip",
    )

    def get(self, key: str) -> Optional[str]:
        """
        Look up a configuration value by its editor key.

        Args:
            key: Configuration key (e.g. "pathToGradle")

        Returns:
            The value as a string, or None when unset or empty
        """
        for name, field in type(self).model_fields.items():
            if key in (name, field.alias):
                value = getattr(self, name)
                if isinstance(value, str):
                    return value or None
                return None
        return None


def load_settings(config_path: Optional[Path] = None) -> ExplorerSettings:
    """
    Load settings from a YAML file.

    When no path is given, `.taskexplorer.yaml` in the current directory is
    used if present, otherwise defaults apply. Settings may sit at the top
    level or under a `taskExplorer:` section.

    Args:
        config_path: Explicit settings file

    Returns:
        Parsed settings

    Raises:
        ConfigError: If the file cannot be read or contains invalid settings
    """
    if config_path is None:
        default = Path.cwd() / DEFAULT_CONFIG_FILE
        if not default.is_file():
            return ExplorerSettings()
        config_path = default

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Failed to load settings from {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings in {config_path} must be a mapping")

    section = data.get(SECTION, data)
    if not isinstance(section, dict):
        raise ConfigError(f"'{SECTION}' in {config_path} must be a mapping")

    try:
        settings = ExplorerSettings(**section)
    except ValidationError as e:
        raise ConfigError(f"Invalid settings in {config_path}: {e}") from e

    logger.info(f"Loaded settings from {config_path}")
    return settings
