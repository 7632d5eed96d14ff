"""Configuration management for bitcoinwell-koinly."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from bitcoinwell_koinly.exceptions import ConfigurationError
from bitcoinwell_koinly.koinly import DEFAULT_OUTPUT_FILENAME
from bitcoinwell_koinly.logger import DEFAULT_LOG_LEVEL

# Default config filename
CONFIG_FILENAME = "config.json"

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def get_config_dir() -> Path:
    """Get the config directory path (XDG compliant)."""
    xdg_config_home = os.getenv("XDG_CONFIG_HOME", str(Path.home() / ".config"))
    return Path(xdg_config_home) / "bitcoinwell-koinly"


def get_config_path() -> Path:
    """Get the default config file path."""
    return get_config_dir() / CONFIG_FILENAME


def find_config_file() -> Path | None:
    """Find the config file in standard locations.

    Searches for config in the following order:
    1. config.json in current directory
    2. XDG config: ~/.config/bitcoinwell-koinly/config.json
    """
    config_paths = [
        Path(CONFIG_FILENAME),
        get_config_path(),
    ]

    for path in config_paths:
        if path.exists():
            return path

    return None


def load_json_config(config_path: Path) -> dict[str, Any]:
    """Load configuration from a JSON file.

    Raises:
        ConfigurationError: If the file is not a JSON object
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            config = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationError(
            f"Invalid JSON in {config_path}: {e}", details={"path": str(config_path)}
        ) from e

    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config {config_path} must contain a JSON object",
            details={"path": str(config_path)},
        )
    return config


def save_json_config(config: dict[str, Any], config_path: Path | None = None) -> Path:
    """Save configuration to a JSON file.

    Args:
        config: Configuration dictionary to save
        config_path: Path to save to (defaults to XDG config location)

    Returns:
        Path where config was saved
    """
    if config_path is None:
        config_path = get_config_path()

    # Ensure directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)
        f.write("\n")

    return config_path


def load_config(config_path: Path | None = None) -> dict[str, Any] | None:
    """Load configuration from config file.

    Args:
        config_path: Explicit path to config.json file

    Returns:
        Loaded config dict or None if not found
    """
    if config_path:
        if not config_path.exists():
            raise ConfigurationError(
                f"Config file not found: {config_path}", details={"path": str(config_path)}
            )
        return load_json_config(config_path)

    config_file = find_config_file()
    if config_file:
        return load_json_config(config_file)

    return None


def config_exists() -> bool:
    """Check if any config file exists."""
    return find_config_file() is not None


def get_output_filename(
    config: dict[str, Any] | None = None,
    override: str | None = None,
) -> str:
    """Get the output CSV filename.

    Args:
        config: Loaded JSON config
        override: Optional filename to use instead of config

    Returns:
        Output filename, koinly_export.csv when not configured
    """
    if override:
        return override

    if config:
        if (filename := config.get("output_filename")) is not None:
            if not isinstance(filename, str) or not filename.strip():
                raise ConfigurationError(
                    "output_filename must be a non-empty string",
                    details={"output_filename": filename},
                )
            return filename

    return DEFAULT_OUTPUT_FILENAME


def get_log_level(
    config: dict[str, Any] | None = None,
    verbose: bool = False,
) -> str:
    """Get the log level name.

    Args:
        config: Loaded JSON config
        verbose: Force DEBUG (the -v flag)

    Returns:
        Upper-cased standard log level name
    """
    if verbose:
        return logging.getLevelName(logging.DEBUG)

    level = (config or {}).get("log_level") or os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL)
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        raise ConfigurationError(
            f"Log level must be one of: {VALID_LOG_LEVELS}", details={"log_level": level}
        )
    return level.upper()


def create_default_config() -> dict[str, Any]:
    """Create a default configuration."""
    return {
        "output_filename": DEFAULT_OUTPUT_FILENAME,
        "log_level": DEFAULT_LOG_LEVEL,
    }
