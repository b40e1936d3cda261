"""Formatted-string construction.

This module renders printf-style templates (``"%s has %d items"``) into a
byte buffer sized up front, growing it once when the first guess turns out
to be too small. The buffer is in one of two states:

- SIZED_FOR_GUESS: the initial allocation of ``initial_size`` bytes.
- SIZED_FOR_EXACT: regrown to exactly the rendered length plus a NUL
  terminator, after which a second render always fits.

The only transition is guess -> exact, so a single render call allocates
at most twice.

Example:
    >>> render("%s=%d", "answer", 42)
    'answer=42'
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from stringkit.core.exceptions import AllocationError, FormatError, RenderError

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_BUFFER_SIZE = 512
DEFAULT_ENCODING = "utf-8"


class BufferState(Enum):
    """Sizing state of a render buffer."""

    SIZED_FOR_GUESS = "sized_for_guess"
    SIZED_FOR_EXACT = "sized_for_exact"


@dataclass(frozen=True)
class RenderResult:
    """Outcome of a single render call.

    Attributes:
        text: The fully rendered string.
        length: Rendered length in encoded bytes, excluding the terminator.
        capacity: Final capacity of the render buffer in bytes.
        grown: True if the buffer was regrown for a second pass.
    """

    text: str
    length: int
    capacity: int
    grown: bool


class RenderBuffer:
    """Byte buffer owned by one render call."""

    def __init__(self, size: int, max_size: int | None = None) -> None:
        self._max_size = max_size
        self._data: bytearray | None = _allocate(size, max_size)
        self.state = BufferState.SIZED_FOR_GUESS

    @property
    def data(self) -> bytearray:
        if self._data is None:
            raise RuntimeError("render buffer has been released")
        return self._data

    @property
    def capacity(self) -> int:
        return len(self._data) if self._data is not None else 0

    def grow_to_exact(self, size: int) -> None:
        """Regrow the buffer to exactly ``size`` bytes.

        Raises:
            RuntimeError: If the buffer has already been grown once.
            AllocationError: If the new buffer cannot be allocated. The
                original buffer is released before the error propagates.
        """
        if self.state is BufferState.SIZED_FOR_EXACT:
            raise RuntimeError("render buffer can only be grown once")
        try:
            grown = _allocate(size, self._max_size)
        except AllocationError:
            self.release()
            raise
        logger.debug("Render buffer grown from %d to %d bytes", self.capacity, size)
        self._data = grown
        self.state = BufferState.SIZED_FOR_EXACT

    def text(self, length: int, encoding: str) -> str:
        return bytes(self.data[:length]).decode(encoding)

    def release(self) -> None:
        self._data = None


def _allocate(size: int, max_size: int | None) -> bytearray:
    if max_size is not None and size > max_size:
        raise AllocationError(size, max_size)
    try:
        return bytearray(size)
    except MemoryError as e:
        raise AllocationError(size) from e


def _print_into(
    buffer: bytearray, template: str, args: tuple[Any, ...], encoding: str
) -> int:
    """Render template into buffer with snprintf semantics.

    Writes at most ``len(buffer) - 1`` bytes followed by a NUL terminator.
    The full text is produced before it is measured, so this step is not
    bounded by the builder's ``max_size``.

    Returns:
        Length in bytes of the complete rendered text, independent of
        truncation, or -1 if the template cannot be rendered.

    Raises:
        AllocationError: If producing the rendered text runs out of memory.
    """
    try:
        encoded = (template % args).encode(encoding)
    except (TypeError, ValueError, KeyError) as e:
        # UnicodeEncodeError is a ValueError
        logger.debug("Failed to render template %r: %s", template, e)
        return -1
    except MemoryError as e:
        raise AllocationError(None) from e

    capacity = len(buffer)
    if capacity:
        written = min(len(encoded), capacity - 1)
        buffer[:written] = encoded[:written]
        buffer[written] = 0
    return len(encoded)


class FormattedStringBuilder:
    """Render printf-style templates through a size-guessing buffer.

    Args:
        initial_size: Size in bytes of the first buffer allocation.
        max_size: Upper bound for any render buffer allocation, or None.
            It limits the buffer only, not the intermediate rendered text.
        encoding: Encoding used to measure and store rendered text.
    """

    def __init__(
        self,
        initial_size: int = DEFAULT_INITIAL_BUFFER_SIZE,
        max_size: int | None = None,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        if initial_size < 1:
            raise ValueError(f"initial_size must be at least 1, got {initial_size}")
        if max_size is not None and max_size < initial_size:
            raise ValueError(
                f"max_size ({max_size}) must not be smaller than "
                f"initial_size ({initial_size})"
            )
        self.initial_size = initial_size
        self.max_size = max_size
        self.encoding = encoding

    def build(self, template: str, *args: Any) -> RenderResult:
        """Render a template and report how the buffer was sized.

        Both passes read the same argument tuple, so arguments are never
        consumed twice.

        Args:
            template: printf-style template.
            *args: Positional values for the template's directives.

        Returns:
            RenderResult with the rendered text and buffer details.

        Raises:
            AllocationError: If a buffer cannot be allocated.
            FormatError: If the template cannot be rendered.
        """
        arguments = tuple(args)
        buffer = RenderBuffer(self.initial_size, self.max_size)

        length = self._fill(buffer, template, arguments)
        if length < 0:
            buffer.release()
            raise FormatError(template, "invalid template or arguments")

        if length >= buffer.capacity:
            buffer.grow_to_exact(length + 1)
            length = self._fill(buffer, template, arguments)
            if length < 0:
                buffer.release()
                raise FormatError(template, "render failed after buffer growth")

        result = RenderResult(
            text=buffer.text(length, self.encoding),
            length=length,
            capacity=buffer.capacity,
            grown=buffer.state is BufferState.SIZED_FOR_EXACT,
        )
        logger.debug(
            "Rendered template",
            extra={
                "template": template,
                "length": result.length,
                "capacity": result.capacity,
                "grown": result.grown,
            },
        )
        return result

    def _fill(
        self, buffer: RenderBuffer, template: str, arguments: tuple[Any, ...]
    ) -> int:
        try:
            return _print_into(buffer.data, template, arguments, self.encoding)
        except AllocationError:
            buffer.release()
            raise

    def render(self, template: str, *args: Any) -> str:
        """Render a template and return the resulting string.

        Raises:
            AllocationError: If a buffer cannot be allocated.
            FormatError: If the template cannot be rendered.
        """
        return self.build(template, *args).text

    def render_into(self, out: io.StringIO, template: str, *args: Any) -> int:
        """Overwrite ``out`` with the rendered template.

        Args:
            out: Text buffer to overwrite.
            template: printf-style template.
            *args: Positional values for the template's directives.

        Returns:
            Rendered length in bytes.

        Raises:
            AllocationError: If a buffer cannot be allocated. ``out`` is
                left empty.
            FormatError: If the template cannot be rendered. ``out`` is
                left empty.
        """
        out.seek(0)
        out.truncate(0)
        result = self.build(template, *args)
        out.write(result.text)
        return result.length


_default_builder = FormattedStringBuilder()


def render(template: str, *args: Any) -> str:
    """Render a template with the default builder.

    Raises:
        AllocationError: If a buffer cannot be allocated.
        FormatError: If the template cannot be rendered.
    """
    return _default_builder.render(template, *args)


def render_into(out: io.StringIO, template: str, *args: Any) -> int:
    """Overwrite ``out`` with a template rendered by the default builder."""
    return _default_builder.render_into(out, template, *args)


def format_string(template: str, *args: Any) -> str:
    """Render a template, returning an empty string on failure.

    Failures are logged at ERROR level instead of raised.

    Example:
        >>> format_string("%05.1f", 3.14159)
        '003.1'
        >>> format_string("%d", "not a number")
        ''
    """
    try:
        return _default_builder.render(template, *args)
    except RenderError as e:
        logger.error("Error while formatting string: %s", e)
        return ""
