"""Configuration data models.

This module defines dataclasses for stringkit configuration options.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field, replace
from pathlib import Path

from stringkit.core.formatting import DEFAULT_ENCODING, DEFAULT_INITIAL_BUFFER_SIZE


@dataclass
class RenderConfig:
    """Configuration for formatted-string rendering."""

    # Size of the first render buffer allocation in bytes
    initial_buffer_size: int = DEFAULT_INITIAL_BUFFER_SIZE

    # Upper bound for any render buffer allocation (None = unbounded)
    max_buffer_size: int | None = None

    # Encoding used to measure rendered text
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.initial_buffer_size < 1:
            raise ValueError(
                f"initial_buffer_size must be at least 1, "
                f"got {self.initial_buffer_size}"
            )
        if (
            self.max_buffer_size is not None
            and self.max_buffer_size < self.initial_buffer_size
        ):
            raise ValueError(
                f"max_buffer_size ({self.max_buffer_size}) must not be smaller "
                f"than initial_buffer_size ({self.initial_buffer_size})"
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {self.encoding}") from e


@dataclass
class LoggingConfig:
    """Configuration for structured logging."""

    # Log level: debug, info, warning, error
    level: str = "warning"

    # Log file path (None = stderr only)
    file: Path | None = None

    # Log format: text or json
    format: str = "text"

    # Also log to stderr when file is set
    include_stderr: bool = False

    # Rotation threshold in bytes (default 10MB)
    max_bytes: int = 10_485_760

    # Number of rotated files to keep
    backup_count: int = 5

    def __post_init__(self) -> None:
        """Validate configuration."""
        valid_levels = {"debug", "info", "warning", "error"}
        if self.level.lower() not in valid_levels:
            raise ValueError(f"level must be one of {valid_levels}, got {self.level}")
        valid_formats = {"text", "json"}
        if self.format.lower() not in valid_formats:
            raise ValueError(
                f"format must be one of {valid_formats}, got {self.format}"
            )

    def with_overrides(self, **overrides: object) -> LoggingConfig:
        """Return a copy with every override that is not None applied.

        Used for the CLI's --log-* flags, where an unset flag is None.

        Raises:
            ValueError: If an override fails validation.
        """
        changes = {
            key: value for key, value in overrides.items() if value is not None
        }
        return replace(self, **changes)


@dataclass
class StringKitConfig:
    """Top-level stringkit configuration."""

    render: RenderConfig = field(default_factory=RenderConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
