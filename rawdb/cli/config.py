"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

from rawdb.core.models import StoreConfig

ENV_OVERRIDES = {
    "RAWDB_DATA_DIR": "base_dir",
    "RAWDB_FILE_EXTENSION": "file_extension",
    "RAWDB_LARGE_FILE_LIMIT": "large_file_size_limit",
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}") from e
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        return [
            xdg_config_home / "rawdb" / "config.yaml",
            Path(".rawdb.yaml"),
            Path("rawdb.yaml"),
        ]

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge flat configuration dictionaries; later values win."""
        result: dict[str, Any] = {}
        for config in configs:
            result.update(config)
        return result


def env_overrides() -> dict[str, Any]:
    """Collect configuration values set through environment variables."""
    return {
        field: value
        for name, field in ENV_OVERRIDES.items()
        if (value := os.environ.get(name))
    }


def load_config(path: Path | None = None) -> dict[str, Any]:
    """Load configuration from files and environment variables.

    An explicit ``path`` replaces the default search locations. Environment
    variables override file values.
    """
    config: dict[str, Any] = {}

    if path is not None:
        config = Config.from_file(path)
    else:
        # Last one wins for conflicting keys
        for candidate in Config.get_config_paths():
            if candidate.exists():
                config = Config.merge_configs(config, Config.from_file(candidate))

    return Config.merge_configs(config, env_overrides())


def build_store_config(
    data: dict[str, Any], data_dir: Path | None = None
) -> StoreConfig:
    """Validate a configuration mapping into a StoreConfig.

    Raises:
        ValueError: If a value has the wrong type or is out of range.
    """
    if data_dir is not None:
        data = {**data, "base_dir": str(data_dir)}
    return StoreConfig.from_dict(data)

