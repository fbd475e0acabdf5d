"""Configuration loader module.

This module provides functions for loading configuration from a YAML file and
the environment, and turning it into a validated EntityScopeConfig object.
"""

from typing import Any, Dict, Optional
import logging
import os
import re

import yaml
from pydantic import ValidationError

from .exceptions import ConfigError
from .schema import EntityScopeConfig

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "entityscope.yaml"

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")


def merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries.

    Args:
        base: Base dictionary
        override: Dictionary with values that override the base

    Returns:
        Merged dictionary where override values take precedence
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result


def _substitute(value: str) -> str:
    return _ENV_VAR_PATTERN.sub(lambda match: os.environ.get(match.group(1), ""), value)


def resolve_env_vars(config: Any) -> Any:
    """Replace ${VAR} patterns in string values with environment variables.

    Unset variables resolve to an empty string.

    Args:
        config: Configuration value (mapping, list or scalar)

    Returns:
        The value with environment variables resolved
    """
    if isinstance(config, dict):
        return {key: resolve_env_vars(value) for key, value in config.items()}
    if isinstance(config, list):
        return [resolve_env_vars(item) for item in config]
    if isinstance(config, str) and "${" in config:
        return _substitute(config)
    return config


def load_yaml_file(path: str) -> Dict[str, Any]:
    """Load configuration from YAML file.

    Args:
        path: Path to YAML file

    Returns:
        Dictionary containing configuration from YAML, empty if the file is missing

    Raises:
        ConfigError: If file cannot be read or parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Error reading {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration in {path} must be a mapping")
    return data


def load_from_env(prefix: str = "ENTITYSCOPE") -> Dict[str, Any]:
    """Load configuration from environment variables with given prefix.

    ``ENTITYSCOPE_EXPORT_DEFAULT_FILENAME=out.json`` maps to
    ``{"export": {"default_filename": "out.json"}}``: the first segment after
    the prefix names the section and the remainder names the key. Variables
    whose section is not an EntityScopeConfig field are ignored. Values are
    left as strings and coerced during validation.

    Args:
        prefix: Prefix for environment variables to consider

    Returns:
        Dictionary containing configuration from environment
    """
    result: Dict[str, Any] = {}
    prefix_upper = f"{prefix.upper()}_"

    for key, value in os.environ.items():
        if not key.startswith(prefix_upper):
            continue
        section, _, name = key[len(prefix_upper):].lower().partition("_")
        # Single-segment variables such as ENTITYSCOPE_CONFIG are not settings.
        if not section or not name:
            continue
        if section not in EntityScopeConfig.model_fields:
            continue
        result.setdefault(section, {})[name] = value

    return result


def load_config(
    file_path: Optional[str] = None,
    env_prefix: str = "ENTITYSCOPE",
) -> EntityScopeConfig:
    """Load EntityScopeConfig from file and environment.

    Args:
        file_path: Path to config file (defaults to ENTITYSCOPE_CONFIG from env
            or "entityscope.yaml")
        env_prefix: Prefix for environment variables

    Returns:
        Validated EntityScopeConfig instance

    Raises:
        ConfigError: On loading or validation failure
    """
    path = file_path or os.environ.get(f"{env_prefix}_CONFIG", DEFAULT_CONFIG_FILE)

    config_data: Dict[str, Any] = {}
    if os.path.exists(path):
        logger.debug("Loading configuration from %s", path)
        config_data = merge_dicts(config_data, load_yaml_file(path))
    elif file_path:
        raise ConfigError(f"Configuration file not found: {file_path}")

    env_config = load_from_env(env_prefix)
    if env_config:
        config_data = merge_dicts(config_data, env_config)

    config_data = resolve_env_vars(config_data)

    try:
        return EntityScopeConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e
