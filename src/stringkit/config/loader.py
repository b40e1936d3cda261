"""Configuration loader with precedence handling.

Configuration is loaded with the following precedence (highest to lowest):
1. CLI arguments (passed directly to get_config)
2. Environment variables (STRINGKIT_*)
3. Config file (~/.stringkit/config.toml)
4. Default values

Environment variables:
- STRINGKIT_CONFIG_PATH: Path to config file (overrides default location)
- STRINGKIT_INITIAL_BUFFER_SIZE: First render buffer allocation (512, 4K, 1M)
- STRINGKIT_MAX_BUFFER_SIZE: Upper bound for render buffer allocations
- STRINGKIT_ENCODING: Encoding used to measure rendered text
- STRINGKIT_LOG_LEVEL: Log level (debug, info, warning, error)
- STRINGKIT_LOG_FILE: Log file path
- STRINGKIT_LOG_FORMAT: Log format (text, json)
"""

from __future__ import annotations

import logging
import threading
import tomllib
from pathlib import Path
from typing import Any

from stringkit.config.env import EnvReader, parse_byte_size
from stringkit.config.models import LoggingConfig, RenderConfig, StringKitConfig

logger = logging.getLogger(__name__)

# Default config location
DEFAULT_CONFIG_DIR = Path.home() / ".stringkit"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.toml"

# Cache for loaded config files (path -> (parsed dict, mtime))
_config_cache: dict[Path, tuple[dict, float]] = {}
_config_cache_lock = threading.Lock()


class TomlParseError(Exception):
    """Raised when a config file exists but is not valid TOML."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Invalid TOML in {path}: {reason}")


def get_default_config_path(env_reader: EnvReader | None = None) -> Path:
    """Get the default config file path.

    Can be overridden by STRINGKIT_CONFIG_PATH environment variable.

    Returns:
        Path to config file.
    """
    env = env_reader or EnvReader()
    return env.get_path("CONFIG_PATH") or DEFAULT_CONFIG_FILE


def load_toml_file(path: Path, *, strict: bool = False) -> dict[str, Any]:
    """Read and parse a TOML file.

    Args:
        path: File to read.
        strict: If True, raise TomlParseError on parse failures.
                If False (default), log a warning and return empty dict.

    Returns:
        Parsed dict. Empty dict if the file doesn't exist.
    """
    if not path.exists():
        logger.debug("Config file not found: %s", path)
        return {}

    try:
        with path.open("rb") as f:
            config = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        if strict:
            raise TomlParseError(path, str(e)) from e
        logger.warning("Failed to parse config file %s: %s", path, e)
        return {}
    except OSError as e:
        if strict:
            raise TomlParseError(path, str(e)) from e
        logger.warning("Failed to read config file %s: %s", path, e)
        return {}

    logger.debug("Loaded config from %s", path)
    return config


def load_config_file(path: Path | None = None, *, strict: bool = False) -> dict:
    """Load configuration from TOML file.

    Results are cached with mtime-based invalidation. The cache automatically
    reloads the file if it has been modified since the last read.
    Use clear_config_cache() to force a reload regardless of mtime.

    Args:
        path: Path to config file. If None, uses default location.
        strict: If True, raise TomlParseError on parse failures.

    Returns:
        Parsed configuration dict. Empty dict if file doesn't exist.
    """
    if path is None:
        path = get_default_config_path()

    try:
        current_mtime = path.stat().st_mtime
    except FileNotFoundError:
        current_mtime = 0.0

    with _config_cache_lock:
        if path in _config_cache:
            cached_config, cached_mtime = _config_cache[path]
            if current_mtime == cached_mtime:
                return cached_config

        result = load_toml_file(path, strict=strict)
        _config_cache[path] = (result, current_mtime)
        return result


def clear_config_cache() -> None:
    """Clear the config file cache.

    Primarily useful for testing.
    """
    with _config_cache_lock:
        _config_cache.clear()


def _first_set(*values: Any) -> Any:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def _section(file_config: dict[str, Any], name: str) -> dict[str, Any]:
    """Return a top-level table of the config file, empty if absent.

    Raises:
        ValueError: If the key is present but is not a table.
    """
    section = file_config.get(name, {})
    if not isinstance(section, dict):
        raise ValueError(
            f"config section [{name}] must be a table, "
            f"got {type(section).__name__}"
        )
    return section


def _file_size(section: dict[str, Any], key: str) -> int | None:
    value = section.get(key)
    if value is None:
        return None
    if not isinstance(value, (int, str)):
        raise ValueError(f"{key} must be a byte size, got {value!r}")
    return parse_byte_size(value)


def get_config(
    config_path: Path | None = None,
    # CLI overrides (highest precedence)
    initial_buffer_size: int | None = None,
    max_buffer_size: int | None = None,
    encoding: str | None = None,
    # Optional dependency injection for testing
    env_reader: EnvReader | None = None,
    *,
    strict: bool = False,
) -> StringKitConfig:
    """Get stringkit configuration with full precedence handling.

    Args:
        config_path: Path to config file (overrides STRINGKIT_CONFIG_PATH).
        initial_buffer_size: CLI override for the first render allocation.
        max_buffer_size: CLI override for the render allocation limit.
        encoding: CLI override for the render encoding.
        env_reader: Environment reader (defaults to os.environ).
        strict: If True, raise TomlParseError for an unparseable file.

    Returns:
        StringKitConfig with merged configuration.

    Raises:
        ValueError: If the merged values fail validation.
        TomlParseError: When strict=True and the file cannot be parsed.
    """
    env = env_reader or EnvReader()
    file_config = load_config_file(
        config_path or get_default_config_path(env), strict=strict
    )

    render_file = _section(file_config, "render")
    render = RenderConfig(
        initial_buffer_size=_first_set(
            initial_buffer_size,
            env.get_byte_size("INITIAL_BUFFER_SIZE"),
            _file_size(render_file, "initial_buffer_size"),
            RenderConfig.initial_buffer_size,
        ),
        max_buffer_size=_first_set(
            max_buffer_size,
            env.get_byte_size("MAX_BUFFER_SIZE"),
            _file_size(render_file, "max_buffer_size"),
        ),
        encoding=_first_set(
            encoding,
            env.get_str("ENCODING"),
            render_file.get("encoding"),
            RenderConfig.encoding,
        ),
    )

    logging_file = _section(file_config, "logging")
    file_log_path = logging_file.get("file")
    logging_config = LoggingConfig(
        level=_first_set(
            env.get_str("LOG_LEVEL"),
            logging_file.get("level"),
            LoggingConfig.level,
        ),
        file=_first_set(
            env.get_path("LOG_FILE"),
            Path(file_log_path).expanduser() if file_log_path else None,
        ),
        format=_first_set(
            env.get_str("LOG_FORMAT"),
            logging_file.get("format"),
            LoggingConfig.format,
        ),
        include_stderr=logging_file.get(
            "include_stderr", LoggingConfig.include_stderr
        ),
        max_bytes=logging_file.get("max_bytes", LoggingConfig.max_bytes),
        backup_count=logging_file.get("backup_count", LoggingConfig.backup_count),
    )

    return StringKitConfig(render=render, logging=logging_config)
