"""
Configuration management for the SparkPost client.

Holds the default request options and the merge rules applied by
:meth:`SparkPost.set_options`, and loads options from a YAML file.
Supports environment variable substitution using ${ENV_VAR} syntax.
"""

import os
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from sparkpost.exceptions import ConfigurationError, InvalidConfigurationError
from sparkpost.logging_config import get_logger

logger = get_logger(__name__)


DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType({
    "host": "api.sparkpost.com",
    "protocol": "https",
    "port": 443,
    "key": "",
    "version": "v1",
    "async": True,
})

# A bare string is shorthand for {"key": <string>}
OptionsInput = Union[str, Mapping[str, Any]]


def normalize_options(options: OptionsInput) -> Dict[str, Any]:
    """
    Resolve the string-or-mapping options input into a plain dict.

    Args:
        options: An API key string or a mapping of option names to values

    Returns:
        Dict of the caller-supplied options (not yet filtered or merged)

    Raises:
        TypeError: If options is neither a string nor a mapping
    """
    if isinstance(options, str):
        return {"key": options}
    if isinstance(options, Mapping):
        return dict(options)
    raise TypeError(
        f"options must be an API key string or a mapping, got {type(options).__name__}"
    )


def _is_usable_key(key: Any) -> bool:
    return isinstance(key, str) and bool(re.search(r"\S", key))


def merge_options(
    current: Optional[Mapping[str, Any]],
    options: OptionsInput,
) -> Dict[str, Any]:
    """
    Merge caller options into the current options.

    The first merge (``current`` is None) starts from DEFAULT_OPTIONS and
    requires a usable API key. Later merges start from ``current`` so that
    partial updates never reset earlier customizations. Keys that are not
    recognized options are dropped.

    Args:
        current: Options held so far, or None if never configured
        options: An API key string or a mapping of option names to values

    Returns:
        New merged options dict

    Raises:
        ConfigurationError: If this is the first merge and no usable key is given
    """
    supplied = normalize_options(options)

    if current is None and not _is_usable_key(supplied.get("key")):
        raise ConfigurationError("You must provide an API key")

    merged = dict(DEFAULT_OPTIONS if current is None else current)
    for option, value in supplied.items():
        if option in merged:
            merged[option] = value
        else:
            logger.debug(f"Ignoring unrecognized option '{option}'")
    return merged


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${SPARKPOST_API_KEY}" -> value of SPARKPOST_API_KEY env var
        "${SPARKPOST_HOST:api.sparkpost.com}" -> env value or "api.sparkpost.com"
    """
    if isinstance(value, str):
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True


@dataclass
class SparkPostConfig:
    """Options and ambient settings loaded from a configuration file."""

    options: Dict[str, Any] = field(default_factory=lambda: dict(DEFAULT_OPTIONS))
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.sparkpost/config.yaml")


def get_default_config() -> SparkPostConfig:
    """
    Get default configuration.

    Returns:
        SparkPostConfig: Default options (without an API key) and logging settings
    """
    return SparkPostConfig()


def load_config(config_path: Optional[str] = None) -> SparkPostConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises InvalidConfigurationError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        SparkPostConfig: Loaded and validated configuration

    Raises:
        InvalidConfigurationError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    config_path = os.path.expanduser(config_path)

    if not os.path.exists(config_path):
        logger.info(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.error(f"Failed to read configuration file '{config_path}': {e}", exc_info=True)
        raise InvalidConfigurationError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.info(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise InvalidConfigurationError(
            f"Configuration file '{config_path}' must contain a mapping at the top level"
        )

    config_data = _expand_env_vars(config_data)

    config = _build_config_from_dict(config_data)
    _validate_config(config)
    logger.info(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _build_config_from_dict(config_data: Dict[str, Any]) -> SparkPostConfig:
    """
    Build SparkPostConfig from dictionary loaded from YAML.

    Merges file options over DEFAULT_OPTIONS. No key validation happens here:
    the client enforces it when the options are applied.

    Args:
        config_data: Dictionary loaded from YAML file

    Returns:
        SparkPostConfig: Configuration object
    """
    options = dict(DEFAULT_OPTIONS)
    options_data = config_data.get("sparkpost") or {}
    if not isinstance(options_data, dict):
        raise InvalidConfigurationError("'sparkpost' section must be a mapping")
    for option, value in options_data.items():
        if option in options:
            options[option] = value
        else:
            logger.warning(f"Ignoring unrecognized option '{option}' in configuration file")

    # Values substituted from the environment arrive as strings
    if isinstance(options["port"], str) and options["port"].strip().isdigit():
        options["port"] = int(options["port"])
    if isinstance(options["async"], str) and options["async"].strip().lower() in ("true", "false"):
        options["async"] = options["async"].strip().lower() == "true"

    logging_data = config_data.get("logging") or {}
    if not isinstance(logging_data, dict):
        raise InvalidConfigurationError("'logging' section must be a mapping")
    defaults = LoggingConfig()
    logging_config = LoggingConfig(
        level=logging_data.get("level", defaults.level),
        file=logging_data.get("file", defaults.file),
        json_format=logging_data.get("json_format", defaults.json_format),
    )

    return SparkPostConfig(options=options, logging=logging_config)


def _validate_config(config: SparkPostConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    options = config.options

    valid_protocols = ["http", "https"]
    if options["protocol"] not in valid_protocols:
        raise InvalidConfigurationError(
            f"protocol must be one of {valid_protocols}, got '{options['protocol']}'"
        )

    if not options["host"] or not isinstance(options["host"], str):
        raise InvalidConfigurationError("host cannot be empty")

    port = options["port"]
    if port and (isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536):
        raise InvalidConfigurationError(
            f"port must be an integer between 1 and 65535 or empty, got {port!r}"
        )

    if not isinstance(options["async"], bool):
        raise InvalidConfigurationError(
            f"async must be true or false, got {options['async']!r}"
        )

    # ${VAR} expansion leaves a missing key as "", which the client rejects
    if options["key"] is not None and not isinstance(options["key"], str):
        raise InvalidConfigurationError("key must be a string")

    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if str(config.logging.level).upper() not in valid_log_levels:
        raise InvalidConfigurationError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )

    if not isinstance(config.logging.json_format, bool):
        raise InvalidConfigurationError(
            f"logging json_format must be true or false, got {config.logging.json_format!r}"
        )
