"""
Configuration management.

This module loads migrast settings from pyproject.toml (or migrast.toml) and
environment variables, with environment variables taking precedence.
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from migrast.shared.constants import (
    CONFIG_FILES,
    DEFAULT_DIALECT,
    DEFAULT_TERMINATOR,
    SUPPORTED_OUTPUT_FORMATS,
)
from migrast.shared.text import to_bool


@dataclass
class MigrastConfig:
    """Settings for rendering and exporting statement batches."""

    dialect: str = DEFAULT_DIALECT  # Dialect used to validate rendered SQL
    validate: bool = False  # Validate every rendered statement with sqlglot
    output_format: str = "json"  # Edge document format: json or yaml
    terminator: str = DEFAULT_TERMINATOR


class ConfigManager:
    """Loads configuration from TOML files and environment variables."""

    def __init__(self, project_root: str | None = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self) -> MigrastConfig:
        """
        Load configuration.

        Returns:
            MigrastConfig with TOML settings overridden by environment variables

        Raises:
            ValueError: If a configured value is invalid
        """
        toml_config = self._load_toml_config()
        env_config = self._load_env_config()

        merged = toml_config.copy()
        merged.update(env_config)

        return self._create_config(merged)

    def _load_toml_config(self) -> dict[str, Any]:
        """Load the [tool.migrast] table from the first config file found."""
        for file_name in CONFIG_FILES:
            toml_file = self.project_root / file_name
            if not toml_file.exists():
                continue

            try:
                with open(toml_file, "rb") as f:
                    data = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                self.logger.warning(f"Could not read {toml_file}: {e}")
                continue

            config = data.get("tool", {}).get("migrast")
            if config is None and file_name == "migrast.toml":
                # migrast.toml may hold the settings at top level
                config = data
            if config:
                self.logger.debug(f"Using configuration from {toml_file}")
                return dict(config)

        self.logger.debug("No migrast configuration found")
        return {}

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_mappings = {
            "MIGRAST_DIALECT": "dialect",
            "MIGRAST_VALIDATE": "validate",
            "MIGRAST_FORMAT": "output_format",
            "MIGRAST_TERMINATOR": "terminator",
        }

        env_config = {}
        for env_var, config_key in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                env_config[config_key] = value
        return env_config

    def _create_config(self, config_dict: dict[str, Any]) -> MigrastConfig:
        """Create MigrastConfig from a merged dictionary."""
        output_format = str(config_dict.get("output_format", "json")).lower()
        if output_format not in SUPPORTED_OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format '{output_format}'. Must be one of: {', '.join(SUPPORTED_OUTPUT_FORMATS)}"
            )

        return MigrastConfig(
            dialect=str(config_dict.get("dialect") or DEFAULT_DIALECT),
            validate=to_bool(config_dict.get("validate", False)),
            output_format=output_format,
            terminator=str(config_dict.get("terminator", DEFAULT_TERMINATOR)),
        )


def load_config(project_root: str | None = None) -> MigrastConfig:
    """
    Convenience function to load configuration.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        MigrastConfig object
    """
    return ConfigManager(project_root).load_config()
