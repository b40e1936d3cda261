"""Tests for core line reading utilities."""

import io

import pytest

from stringkit.core.line_reader import END_OF_STREAM, iter_lines, read_line


def _read_all(text: str) -> list[int]:
    stream = io.StringIO(text)
    buf = io.StringIO()
    results = []
    while True:
        length = read_line(stream, buf)
        results.append(length)
        if length == END_OF_STREAM:
            return results


class TestReadLine:
    """Tests for read_line function."""

    def test_reads_line_without_newline(self):
        """read_line stores the line without its newline."""
        stream = io.StringIO("hello\nworld\n")
        buf = io.StringIO()
        assert read_line(stream, buf) == 5
        assert buf.getvalue() == "hello"

    def test_replaces_previous_buffer_contents(self):
        """Each call overwrites the buffer rather than appending."""
        stream = io.StringIO("a much longer line\nshort\n")
        buf = io.StringIO()
        read_line(stream, buf)
        read_line(stream, buf)
        assert buf.getvalue() == "short"

    def test_blank_line_returns_zero(self):
        """A blank line returns 0, not the sentinel."""
        stream = io.StringIO("\nafter\n")
        buf = io.StringIO("stale")
        assert read_line(stream, buf) == 0
        assert buf.getvalue() == ""
        assert read_line(stream, buf) == 5

    def test_sentinel_immediately_after_last_line(self):
        """The sentinel comes on the call right after the final line."""
        assert _read_all("one\ntwo\n") == [3, 3, END_OF_STREAM]

    def test_final_line_without_newline(self):
        """An unterminated final line is still returned."""
        assert _read_all("one\ntwo") == [3, 3, END_OF_STREAM]

    def test_empty_stream(self):
        """An empty stream returns the sentinel straight away."""
        assert _read_all("") == [END_OF_STREAM]

    def test_sentinel_returned_exactly_once(self):
        """Only the last result is the sentinel."""
        results = _read_all("x\n\n\ny\n")
        assert results == [1, 0, 0, 1, END_OF_STREAM]
        assert results.count(END_OF_STREAM) == 1

    def test_sentinel_is_repeatable_after_exhaustion(self):
        """Further reads after exhaustion keep returning the sentinel."""
        stream = io.StringIO("")
        buf = io.StringIO()
        assert read_line(stream, buf) == END_OF_STREAM
        assert read_line(stream, buf) == END_OF_STREAM

    def test_reads_from_file(self, tmp_path):
        """read_line works on real file objects."""
        path = tmp_path / "input.txt"
        path.write_text("first\n\nthird\n")
        buf = io.StringIO()
        with path.open() as f:
            assert read_line(f, buf) == 5
            assert read_line(f, buf) == 0
            assert read_line(f, buf) == 5
            assert buf.getvalue() == "third"
            assert read_line(f, buf) == END_OF_STREAM

    @pytest.mark.parametrize("line", ["  padded  ", "\ttab", "trailing\r"])
    def test_preserves_other_whitespace(self, line):
        """Only the newline is removed from the stored line."""
        stream = io.StringIO(line + "\n")
        buf = io.StringIO()
        read_line(stream, buf)
        assert buf.getvalue() == line


class TestIterLines:
    """Tests for iter_lines function."""

    def test_yields_all_lines(self):
        """iter_lines yields each line, including blank ones."""
        stream = io.StringIO("a\n\nb\n")
        assert list(iter_lines(stream)) == ["a", "", "b"]

    def test_empty_stream(self):
        """iter_lines yields nothing for an empty stream."""
        assert list(iter_lines(io.StringIO(""))) == []


class TestSharedFixtures:
    """Tests using the shared stream fixtures."""

    def test_sample_stream_lengths(self, sample_stream, line_buffer):
        """Lengths are reported in order, then the sentinel."""
        lengths = [read_line(sample_stream, line_buffer) for _ in range(5)]
        assert lengths == [5, 0, 4, 5, END_OF_STREAM]
        assert line_buffer.getvalue() == "gamma"
