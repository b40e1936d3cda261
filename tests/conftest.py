"""Shared test fixtures for stringkit."""

import io

import pytest


@pytest.fixture
def line_buffer() -> io.StringIO:
    """Return an empty reusable line buffer."""
    return io.StringIO()


@pytest.fixture
def sample_stream() -> io.StringIO:
    """Return a stream with content lines, a blank line and no final newline."""
    return io.StringIO("alpha\n\nbeta\ngamma")
