"""Configuration loading and merging logic."""

import json
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from webxml_params.config.defaults import ENV_FORMAT, ENV_STRICT, config_search_paths
from webxml_params.config.models import WebXmlParamsConfig
from webxml_params.exceptions import ConfigError
from webxml_params.utils.file_utils import is_yaml_file
from webxml_params.utils.logging import get_logger

logger = get_logger("config")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


def find_config_file(explicit_path: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file.

    Args:
        explicit_path: Explicitly specified config file path (from CLI).

    Returns:
        Path to config file if found, None otherwise.

    Raises:
        ConfigError: If an explicit path was given and does not exist.
    """
    if explicit_path is not None:
        if explicit_path.exists():
            return explicit_path
        raise ConfigError(f"Config file not found: {explicit_path}", source=str(explicit_path))

    for search_path in config_search_paths():
        if search_path.exists():
            return search_path

    return None


def load_config_file(path: Path) -> dict[str, Any]:
    """Load configuration from a JSON or YAML file.

    Args:
        path: Path to the configuration file.

    Returns:
        Parsed configuration dictionary.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            if is_yaml_file(path):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}", source=str(path)) from e
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid config file {path}: {e}", source=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Config file {path} must contain a mapping, got {type(data).__name__}",
            source=str(path),
        )
    return data


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def environment_overrides() -> dict[str, Any]:
    """Configuration values taken from environment variables.

    Returns:
        Nested dictionary shaped like the config file, holding only the
        variables that are set.

    Raises:
        ConfigError: If a variable has an invalid value.
    """
    output: dict[str, Any] = {}
    if output_format := os.environ.get(ENV_FORMAT):
        output["format"] = output_format
    if (strict := os.environ.get(ENV_STRICT)) is not None:
        output["strict"] = _parse_bool(ENV_STRICT, strict)
    return {"output": output} if output else {}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, recursing into nested mappings."""
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_cli_overrides(
    config: WebXmlParamsConfig,
    output_format: Optional[str] = None,
    strict: Optional[bool] = None,
    verbose: Optional[int] = None,
    log_file: Optional[Path] = None,
    pattern: Optional[str] = None,
    concurrency: Optional[int] = None,
) -> WebXmlParamsConfig:
    """Merge CLI overrides into the configuration.

    CLI arguments take precedence over config file values.

    Args:
        config: Base configuration from file.
        output_format: Output format override ("table" or "json").
        strict: Strict mode override.
        verbose: Verbosity level override.
        log_file: Log file override.
        pattern: Descriptor glob override for scanning.
        concurrency: Maximum concurrent descriptor reads override.

    Returns:
        Configuration with CLI overrides applied.
    """
    # Create a copy to avoid mutating the original
    data = config.model_dump()

    if output_format is not None:
        data["output"]["format"] = output_format
    if strict is not None:
        data["output"]["strict"] = strict
    if verbose is not None:
        data["output"]["verbosity"] = verbose
    if log_file is not None:
        data["output"]["log_file"] = log_file

    if pattern is not None:
        data["scan"]["include_pattern"] = pattern
    if concurrency is not None:
        data["scan"]["max_concurrency"] = concurrency

    try:
        return WebXmlParamsConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}") from e


def load_config(
    config_path: Optional[Path] = None,
    **cli_overrides: Any,
) -> WebXmlParamsConfig:
    """Load configuration with CLI overrides.

    Configuration is loaded from the following sources (in order of priority):
    1. CLI arguments (highest priority)
    2. Config file (if found)
    3. Environment variables
    4. Default values (lowest priority)

    Args:
        config_path: Explicit config file path (from --config CLI option).
        **cli_overrides: CLI argument overrides.

    Returns:
        Merged configuration object.

    Raises:
        ConfigError: If the config file or an override is invalid.
    """
    data = environment_overrides()

    found_config = find_config_file(config_path)
    if found_config is not None:
        logger.debug(f"Loading configuration from {found_config}")
        data = _deep_merge(data, load_config_file(found_config))
        try:
            config = WebXmlParamsConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(
                f"Invalid config file {found_config}: {e}", source=str(found_config)
            ) from e
    else:
        try:
            config = WebXmlParamsConfig.model_validate(data)
        except ValidationError as e:
            raise ConfigError(f"Invalid environment configuration: {e}") from e

    return merge_cli_overrides(config, **cli_overrides)
