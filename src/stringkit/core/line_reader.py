"""Line reading from text streams.

Reads newline-terminated chunks into a reusable text buffer, reporting
end of stream with a sentinel so that blank lines (length 0) stay
distinguishable from exhaustion.
"""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from collections.abc import Iterator

# Returned by read_line once the stream is exhausted.
END_OF_STREAM = -1


def read_line(stream: TextIO, current_line: io.StringIO) -> int:
    """Read one line from a stream into a reusable buffer.

    The trailing newline is consumed but not stored.

    Args:
        stream: Text stream to read from.
        current_line: Buffer that receives the line, replacing its contents.

    Returns:
        Length of the line without its newline (0 for a blank line), or
        END_OF_STREAM if no input remains.

    Example:
        >>> stream = io.StringIO("first\\n\\nlast")
        >>> buf = io.StringIO()
        >>> [read_line(stream, buf) for _ in range(4)]
        [5, 0, 4, -1]
    """
    chunk = stream.readline()
    if not chunk:
        return END_OF_STREAM

    if chunk.endswith("\n"):
        chunk = chunk[:-1]

    current_line.seek(0)
    current_line.truncate(0)
    current_line.write(chunk)
    return len(chunk)


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield each line of a stream without its newline.

    Args:
        stream: Text stream to read from.

    Yields:
        Lines in order, including blank lines.
    """
    current_line = io.StringIO()
    while read_line(stream, current_line) != END_OF_STREAM:
        yield current_line.getvalue()
