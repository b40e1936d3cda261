"""String manipulation utilities.

This module provides the small single-byte string operations used across
the codebase: whitespace trimming, ASCII case conversion, splitting on a
set of delimiter characters, and prefix/suffix checks. None of these
operations can fail.
"""

from __future__ import annotations

import string

# Characters removed by the trim family.
TRIM_CHARS = " \t\n"

_LOWER_TABLE = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_UPPER_TABLE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def trim(s: str) -> str:
    """Remove leading and trailing spaces, tabs and newlines.

    Args:
        s: String to trim.

    Returns:
        Trimmed string. Empty if s is empty or only whitespace.

    Example:
        >>> trim(" \\t\\nhello\\n\\t ")
        'hello'
        >>> trim("   ")
        ''
    """
    return s.strip(TRIM_CHARS)


def trim_left(s: str) -> str:
    """Remove leading spaces, tabs and newlines.

    Args:
        s: String to trim.

    Returns:
        String with the leading whitespace removed.
    """
    return s.lstrip(TRIM_CHARS)


def trim_right(s: str) -> str:
    """Remove trailing spaces, tabs and newlines.

    Args:
        s: String to trim.

    Returns:
        String with the trailing whitespace removed.
    """
    return s.rstrip(TRIM_CHARS)


def str_to_lower(s: str) -> str:
    """Convert ASCII letters to lowercase.

    Only A-Z are mapped; every other character, including non-ASCII
    letters, passes through unchanged.

    Example:
        >>> str_to_lower("Hello, WORLD")
        'hello, world'
        >>> str_to_lower("ÄBC")
        'Äbc'
    """
    return s.translate(_LOWER_TABLE)


def str_to_upper(s: str) -> str:
    """Convert ASCII letters to uppercase.

    Only a-z are mapped; every other character passes through unchanged.
    """
    return s.translate(_UPPER_TABLE)


def str_split(s: str, delimiters: str) -> list[str]:
    """Split a string at every occurrence of any delimiter character.

    Unlike str.split(), every delimiter produces a split point: consecutive
    delimiters yield empty segments and a trailing delimiter yields a
    trailing empty segment.

    Args:
        s: String to split.
        delimiters: Set of single-character delimiters, given as a string.

    Returns:
        List of segments in original order. Never empty: a string without
        delimiters (including the empty string) yields a one-element list.

    Example:
        >>> str_split("a,b,,c", ",")
        ['a', 'b', '', 'c']
        >>> str_split("a:b;c", ":;")
        ['a', 'b', 'c']
        >>> str_split("", ",")
        ['']
    """
    tokens: list[str] = []
    start = 0
    for index, char in enumerate(s):
        if char in delimiters:
            tokens.append(s[start:index])
            start = index + 1
    tokens.append(s[start:])
    return tokens


def str_starts_with(s: str, prefix: str) -> bool:
    """Check whether a string begins with the given prefix.

    Args:
        s: String to check.
        prefix: Expected leading characters.

    Returns:
        True if prefix fits within s and matches exactly. A prefix longer
        than s returns False.
    """
    if len(s) < len(prefix):
        return False
    return s[: len(prefix)] == prefix


def str_ends_with(s: str, suffix: str) -> bool:
    """Check whether a string ends with the given suffix.

    Args:
        s: String to check.
        suffix: Expected trailing characters.

    Returns:
        True if suffix fits within s and matches exactly. A suffix longer
        than s returns False.
    """
    if len(s) < len(suffix):
        return False
    return s[len(s) - len(suffix) :] == suffix
