"""
Configuration loader for VeinMiner.

Loads configuration from YAML files with support for
environment variable interpolation.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml

from .models import AlgorithmConfig, AppConfig, LoggingConfig
from .tool import CategoryRegistry, create_registry

logger = logging.getLogger(__name__)

# Default config shipped inside the package
DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# Vein sizes above this make a single break touch an unreasonable number of blocks
RECOMMENDED_MAX_VEIN_SIZE = 1024

# Regex for environment variable interpolation: ${VAR} or ${VAR:-default}
ENV_VAR_PATTERN = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?\}")

# Singleton cache for app config
_app_config: Optional[AppConfig] = None


def resolve_env_vars(value: str) -> str:
    """
    Resolve environment variable references in a string.

    Supports ${VAR} and ${VAR:-default} syntax.

    Args:
        value: String potentially containing env var references

    Returns:
        String with env vars resolved
    """

    def replace_match(match: re.Match) -> str:
        var_name = match.group(1)
        default_value = match.group(2) if match.group(2) is not None else ""
        return os.environ.get(var_name, default_value)

    return ENV_VAR_PATTERN.sub(replace_match, value)


def _substitute_env_vars_recursive(data: Any) -> Any:
    """
    Recursively substitute environment variables in a data structure.

    Args:
        data: Any data structure (dict, list, str, etc.)

    Returns:
        Data structure with env vars resolved
    """
    if isinstance(data, dict):
        return {k: _substitute_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_substitute_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    return data


def _parse_logging_config(data: dict) -> LoggingConfig:
    """Parse logging configuration from dict."""
    return LoggingConfig(
        level=str(data.get("level", "INFO")),
    )


def _parse_algorithm_config(data: dict) -> AlgorithmConfig:
    """Parse the global algorithm configuration from dict."""
    return AlgorithmConfig().read_from(data)


def _section(raw_config: dict, name: str) -> dict:
    """Get a top-level section, treating a missing or null section as empty."""
    data = raw_config.get(name)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config section '{name}' must be a mapping")
    return data


def validate_algorithm_config(config: AlgorithmConfig) -> list[str]:
    """
    Validate an algorithm configuration.

    Args:
        config: Configuration to validate

    Returns:
        List of validation warning messages (empty if valid)
    """
    errors = []

    if config.max_vein_size > RECOMMENDED_MAX_VEIN_SIZE:
        errors.append(
            f"max_vein_size {config.max_vein_size} exceeds the recommended "
            f"maximum of {RECOMMENDED_MAX_VEIN_SIZE}"
        )
    for world in sorted(config.disabled_worlds):
        if not world.strip():
            errors.append("disabled_worlds contains a blank world name")

    return errors


def load_app_config(path: Optional[str] = None, reload: bool = False) -> AppConfig:
    """
    Load application configuration from a YAML file.

    Uses a singleton pattern - subsequent calls return the cached config
    unless reload=True is specified.

    Args:
        path: Path to the YAML configuration file. If None, uses
              VEINMINER_CONFIG_PATH env var or the config.yaml bundled with the package.
        reload: If True, force reload from disk instead of using cache.

    Returns:
        AppConfig with all configuration loaded

    Raises:
        FileNotFoundError: If the config file doesn't exist
        ValueError: If the config is invalid
    """
    global _app_config

    # Return cached config if available and not reloading
    if _app_config is not None and not reload:
        return _app_config

    # Determine config path
    if path is None:
        path = os.environ.get("VEINMINER_CONFIG_PATH") or str(DEFAULT_CONFIG_PATH)

    config_path = Path(path)

    if not config_path.exists():
        raise FileNotFoundError(
            f"Configuration file not found at {config_path}. "
            f"Copy the bundled {DEFAULT_CONFIG_PATH.name} or set VEINMINER_CONFIG_PATH env var."
        )

    logger.info(f"Loading configuration from {config_path}")

    with open(config_path, "r") as f:
        raw_config = yaml.safe_load(f)

    if raw_config is None:
        raise ValueError(f"Configuration file {config_path} is empty")
    if not isinstance(raw_config, dict):
        raise ValueError(f"Configuration file {config_path} must contain a mapping")

    # Substitute environment variables throughout the config
    raw_config = _substitute_env_vars_recursive(raw_config)

    version = str(raw_config.get("version", "1.0"))

    try:
        app_config = AppConfig(
            version=version,
            logging=_parse_logging_config(_section(raw_config, "logging")),
            algorithm=_parse_algorithm_config(_section(raw_config, "algorithm")),
        )
    except ValueError as e:
        logger.error(f"Failed to parse configuration {config_path}: {e}")
        raise ValueError(f"Invalid configuration in {config_path}: {e}") from e

    for error in validate_algorithm_config(app_config.algorithm):
        logger.warning(f"Config validation warning: {error}")

    # Cache the config
    _app_config = app_config

    logger.debug(
        f"Configuration loaded: version={version}, "
        f"max_vein_size={app_config.algorithm.max_vein_size}"
    )

    return app_config


def build_registry(app_config: Optional[AppConfig] = None) -> CategoryRegistry:
    """
    Create a category registry seeded from the global algorithm config.

    Args:
        app_config: Loaded configuration. If None, loads from default.

    Returns:
        A registry holding only the hand category
    """
    if app_config is None:
        app_config = load_app_config()

    return create_registry(app_config.algorithm)


def reset_config_cache() -> None:
    """Reset the configuration cache, forcing a reload on next access."""
    global _app_config
    _app_config = None
    logger.debug("Configuration cache reset")
