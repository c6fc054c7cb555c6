"""
Configuration management for the SparkPost client.

Handles option defaults and merging, and loading of configuration files.
"""

from sparkpost.config.settings import (
    DEFAULT_OPTIONS,
    LoggingConfig,
    SparkPostConfig,
    get_default_config,
    get_default_config_path,
    load_config,
    merge_options,
    normalize_options,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "LoggingConfig",
    "SparkPostConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
    "merge_options",
    "normalize_options",
]
