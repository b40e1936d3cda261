"""Reading stringkit settings from the environment.

All stringkit variables share the ``STRINGKIT_`` prefix, so call sites use
the short setting name (``INITIAL_BUFFER_SIZE``). Buffer sizes accept a
``K`` or ``M`` suffix, as in ``STRINGKIT_MAX_BUFFER_SIZE=4M``.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from pathlib import Path

logger = logging.getLogger(__name__)

ENV_PREFIX = "STRINGKIT_"

_BYTE_SIZE_RE = re.compile(r"^\s*(\d+)\s*([kKmM]?)[bB]?\s*$")
_BYTE_UNITS = {"": 1, "k": 1024, "m": 1024 * 1024}


def parse_byte_size(value: str | int) -> int:
    """Parse a buffer size such as ``512``, ``"64K"`` or ``"4MB"``.

    Args:
        value: Integer byte count, or a string with an optional K/M suffix
            (binary multiples, case-insensitive, trailing ``B`` allowed).

    Returns:
        Size in bytes.

    Raises:
        ValueError: If the value is not a non-negative size.

    Example:
        >>> parse_byte_size("64K")
        65536
    """
    if isinstance(value, bool):
        raise ValueError(f"invalid byte size: {value!r}")
    if isinstance(value, int):
        if value < 0:
            raise ValueError(f"invalid byte size: {value!r}")
        return value
    match = _BYTE_SIZE_RE.match(value)
    if match is None:
        raise ValueError(f"invalid byte size: {value!r}")
    number, unit = match.groups()
    return int(number) * _BYTE_UNITS[unit.lower()]


class EnvReader:
    """Typed access to ``STRINGKIT_*`` environment variables.

    Accepts an optional env mapping so tests never touch os.environ.
    Names passed to the getters may be short (``"ENCODING"``) or already
    prefixed (``"STRINGKIT_ENCODING"``).

    Example:
        reader = EnvReader(env={"STRINGKIT_MAX_BUFFER_SIZE": "64K"})
        reader.get_byte_size("MAX_BUFFER_SIZE")  # 65536
    """

    def __init__(
        self, env: Mapping[str, str] | None = None, prefix: str = ENV_PREFIX
    ) -> None:
        self._env: Mapping[str, str] = env if env is not None else os.environ
        self.prefix = prefix

    def var_name(self, name: str) -> str:
        """Return the full environment variable name for a setting."""
        if name.startswith(self.prefix):
            return name
        return f"{self.prefix}{name}"

    def get_str(self, name: str, default: str | None = None) -> str | None:
        value = self._env.get(self.var_name(name))
        if value is None:
            return default
        return value

    def get_int(self, name: str, default: int | None = None) -> int | None:
        """Get an integer setting.

        Returns:
            Parsed integer, or default if unset or invalid. An invalid
            value is logged as a warning.
        """
        var = self.var_name(name)
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning("Invalid integer value for %s: %s", var, value)
            return default

    def get_byte_size(self, name: str, default: int | None = None) -> int | None:
        """Get a buffer size setting, accepting K/M suffixes.

        Returns:
            Size in bytes, or default if unset or invalid. An invalid value
            is logged as a warning.
        """
        var = self.var_name(name)
        value = self._env.get(var)
        if value is None:
            return default
        try:
            return parse_byte_size(value)
        except ValueError:
            logger.warning("Invalid byte size for %s: %s", var, value)
            return default

    def get_path(self, name: str, default: Path | None = None) -> Path | None:
        """Get a path setting with ``~`` expanded.

        An empty value counts as unset.
        """
        value = self._env.get(self.var_name(name))
        if not value:
            return default
        return Path(value).expanduser()
