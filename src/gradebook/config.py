"""Configuration loading for Gradebook.

Configuration is optional. Without a ``gradebook.yaml`` the application uses
the classic layout: ``StudentRecords``, ``Marksheets`` and ``Transcripts``
directories next to the working directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_FILE_NAME = "gradebook.yaml"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class DirectoriesConfig:
    """Storage directory names, relative to the data directory."""

    records: str = "StudentRecords"
    marksheets: str = "Marksheets"
    transcripts: str = "Transcripts"


@dataclass
class LoggingConfig:
    """Log file settings."""

    dir: str = "logs"
    level: str = "INFO"


@dataclass
class GradebookConfig:
    """Gradebook application configuration."""

    data_dir: str = "."
    directories: DirectoriesConfig = field(default_factory=DirectoriesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    root_path: Path = field(default_factory=Path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> GradebookConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Directory that relative paths are resolved against.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a section has the wrong shape.
        """
        dirs_data = _section(data, "directories")
        defaults = DirectoriesConfig()
        directories = DirectoriesConfig(
            records=str(dirs_data.get("records", defaults.records)),
            marksheets=str(dirs_data.get("marksheets", defaults.marksheets)),
            transcripts=str(dirs_data.get("transcripts", defaults.transcripts)),
        )

        log_data = _section(data, "logging")
        logging_config = LoggingConfig(
            dir=str(log_data.get("dir", "logs")),
            level=str(log_data.get("level", "INFO")),
        )

        return cls(
            data_dir=str(data.get("data_dir", ".")),
            directories=directories,
            logging=logging_config,
            root_path=root_path,
        )

    @property
    def data_path(self) -> Path:
        """Absolute data directory."""
        return (self.root_path / self.data_dir).resolve()

    @property
    def records_path(self) -> Path:
        return self.data_path / self.directories.records

    @property
    def marksheets_path(self) -> Path:
        return self.data_path / self.directories.marksheets

    @property
    def transcripts_path(self) -> Path:
        return self.data_path / self.directories.transcripts

    @property
    def log_path(self) -> Path:
        """Absolute log directory."""
        return (self.root_path / self.logging.dir).resolve()


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' must be a mapping, got {type(section).__name__}")
    return section


def load_config(config_path: Path | str) -> GradebookConfig:
    """Load Gradebook configuration from a YAML file.

    Args:
        config_path: Path to gradebook.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return GradebookConfig.from_dict(data, config_path.parent.resolve())


def find_config(start_path: Path | str | None = None) -> Path | None:
    """Find gradebook.yaml by walking up the directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to gradebook.yaml, or None if there is none.
    """
    current = Path.cwd() if start_path is None else Path(start_path)
    current = current.resolve()

    for directory in (current, *current.parents):
        config_path = directory / CONFIG_FILE_NAME
        if config_path.exists():
            return config_path
    return None


def resolve_config(config_path: Path | str | None = None) -> GradebookConfig:
    """Load the explicit config, the nearest gradebook.yaml, or the defaults.

    Args:
        config_path: Explicit config file path (optional).

    Returns:
        Configuration for this run.

    Raises:
        ConfigError: If a config file exists but is invalid.
    """
    if config_path is None:
        config_path = find_config()
    if config_path is None:
        return GradebookConfig(root_path=Path.cwd())
    return load_config(config_path)
