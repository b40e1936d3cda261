"""Core utilities package.

This package contains pure utility functions with no external dependencies:
whitespace trimming, case conversion, splitting, prefix/suffix checks,
formatted-string construction and line reading.
"""

from stringkit.core.exceptions import (
    AllocationError,
    FormatError,
    RenderError,
)
from stringkit.core.formatting import (
    DEFAULT_INITIAL_BUFFER_SIZE,
    BufferState,
    FormattedStringBuilder,
    RenderResult,
    format_string,
    render,
    render_into,
)
from stringkit.core.line_reader import (
    END_OF_STREAM,
    iter_lines,
    read_line,
)
from stringkit.core.string_utils import (
    TRIM_CHARS,
    str_ends_with,
    str_split,
    str_starts_with,
    str_to_lower,
    str_to_upper,
    trim,
    trim_left,
    trim_right,
)

__all__ = [
    # exceptions
    "RenderError",
    "AllocationError",
    "FormatError",
    # formatting
    "DEFAULT_INITIAL_BUFFER_SIZE",
    "BufferState",
    "FormattedStringBuilder",
    "RenderResult",
    "render",
    "render_into",
    "format_string",
    # line_reader
    "END_OF_STREAM",
    "read_line",
    "iter_lines",
    # string_utils
    "TRIM_CHARS",
    "trim",
    "trim_left",
    "trim_right",
    "str_to_lower",
    "str_to_upper",
    "str_split",
    "str_starts_with",
    "str_ends_with",
]
