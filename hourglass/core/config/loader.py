"""
Configuration Loading and Saving.

Reads and writes hourglass.yaml. String values may reference environment
variables with ${VAR_NAME} or ${VAR_NAME:default} syntax.

Configuration precedence: 1. Explicit path, 2. HOURGLASS_CONFIG, 3. ./hourglass.yaml.
A missing file yields the default configuration.
"""

import os
import re
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from hourglass.core.config.models import HourglassConfig
from hourglass.core.exceptions import ConfigurationError, ConfigValidationError
from hourglass.core.logging import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "HOURGLASS_CONFIG"
DEFAULT_CONFIG_FILE = "hourglass.yaml"

_ENV_PATTERN = re.compile(r"\$\{([^}:]+)(?::([^}]*))?\}")


def expand_env_vars(value: Any) -> Any:
    """Recursively expand environment variables in config values.

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with all environment variables expanded
    """
    if isinstance(value, str):

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return _ENV_PATTERN.sub(replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    # Return primitives (int, float, bool, None) unchanged
    return value


def resolve_config_path(config_path: Optional[Path] = None) -> Path:
    """Return the config file path to use."""
    if config_path is not None:
        return config_path
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.cwd() / DEFAULT_CONFIG_FILE


def load_config(config_path: Optional[Path] = None) -> HourglassConfig:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file. See resolve_config_path().

    Returns:
        Validated HourglassConfig.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
        ConfigValidationError: If the file content is invalid
    """
    path = resolve_config_path(config_path)
    if not path.exists():
        logger.debug("No config file found, using defaults", path=path)
        return HourglassConfig()

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Cannot load config from {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            f"Config file {path} must contain a mapping", path=str(path)
        )

    try:
        config = HourglassConfig.model_validate(expand_env_vars(data))
    except ValidationError as e:
        raise ConfigValidationError(
            f"Invalid config in {path}: {e}", path=str(path)
        ) from e

    logger.info("Loaded configuration", path=path)
    return config


def save_config(config: HourglassConfig, config_path: Optional[Path] = None) -> Path:
    """Save configuration to a YAML file.

    Returns:
        The path written to

    Raises:
        ConfigurationError: If the file cannot be written
    """
    path = resolve_config_path(config_path)
    config_dict = config.model_dump(mode="json")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise ConfigurationError(f"Cannot save config to {path}: {e}") from e

    logger.debug("Saved configuration", path=path)
    return path
