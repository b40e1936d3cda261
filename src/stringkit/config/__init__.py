"""Configuration management for stringkit.

This module provides configuration loading with precedence handling:
1. CLI flags (highest priority)
2. Environment variables (STRINGKIT_*)
3. Config file (~/.stringkit/config.toml)
4. Default values (lowest priority)
"""

from stringkit.config.env import EnvReader, parse_byte_size
from stringkit.config.loader import (
    TomlParseError,
    clear_config_cache,
    get_config,
    get_default_config_path,
    load_config_file,
    load_toml_file,
)
from stringkit.config.models import (
    LoggingConfig,
    RenderConfig,
    StringKitConfig,
)

__all__ = [
    # Models
    "LoggingConfig",
    "RenderConfig",
    "StringKitConfig",
    # Loader
    "EnvReader",
    "TomlParseError",
    "clear_config_cache",
    "get_config",
    "get_default_config_path",
    "load_config_file",
    "load_toml_file",
    "parse_byte_size",
]
