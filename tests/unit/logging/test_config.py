"""Unit tests for logging configuration."""

import json
import logging
from collections.abc import Iterator
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from stringkit.config.models import LoggingConfig
from stringkit.core import FormattedStringBuilder
from stringkit.logging import JSONFormatter, RenderContextFilter, configure_logging


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_sets_root_level(self) -> None:
        """Root logger level follows the configured level."""
        configure_logging(LoggingConfig(level="debug"))
        assert logging.getLogger().level == logging.DEBUG

    def test_stderr_handler_by_default(self) -> None:
        """Without a file, a single stream handler is installed."""
        configure_logging(LoggingConfig())
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)

    def test_json_format_uses_json_formatter(self) -> None:
        """format=json selects JSONFormatter."""
        configure_logging(LoggingConfig(format="json"))
        assert isinstance(logging.getLogger().handlers[0].formatter, JSONFormatter)

    def test_file_handler(self, tmp_path: Path) -> None:
        """A configured file gets a rotating file handler and no stderr."""
        log_file = tmp_path / "logs" / "stringkit.log"
        configure_logging(LoggingConfig(level="info", file=log_file))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)

        logging.getLogger("stringkit.test").info("written to file")
        handlers[0].flush()
        assert "written to file" in log_file.read_text()

    def test_file_and_stderr(self, tmp_path: Path) -> None:
        """include_stderr adds a stream handler next to the file."""
        configure_logging(
            LoggingConfig(file=tmp_path / "sk.log", include_stderr=True)
        )
        assert len(logging.getLogger().handlers) == 2

    def test_reconfiguring_replaces_handlers(self) -> None:
        """Calling configure_logging twice does not duplicate handlers."""
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1

    def test_handlers_carry_render_filter(self) -> None:
        """Every installed handler adds the render tag."""
        configure_logging(LoggingConfig())
        for handler in logging.getLogger().handlers:
            assert any(
                isinstance(f, RenderContextFilter) for f in handler.filters
            )

    def test_text_log_includes_render_tag(self, tmp_path: Path) -> None:
        """Text output appends render details to render log lines."""
        log_file = tmp_path / "sk.log"
        configure_logging(LoggingConfig(level="debug", file=log_file))

        FormattedStringBuilder(initial_size=4).build("%s", "abcdefgh")
        logging.getLogger("stringkit.test").debug("plain message")
        logging.getLogger().handlers[0].flush()

        lines = log_file.read_text().splitlines()
        rendered = [line for line in lines if "Rendered template" in line]
        assert rendered
        assert rendered[0].endswith("Rendered template [len=8 cap=9 grown]")
        plain = [line for line in lines if "plain message" in line]
        assert plain and plain[0].endswith("plain message")

    def test_json_log_includes_render_object(self, tmp_path: Path) -> None:
        """JSON output nests render details under render."""
        log_file = tmp_path / "sk.jsonl"
        configure_logging(
            LoggingConfig(level="debug", file=log_file, format="json")
        )

        FormattedStringBuilder(initial_size=4).build("%s", "abcdefgh")
        logging.getLogger().handlers[0].flush()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        rendered = [e for e in entries if e["message"] == "Rendered template"]
        assert rendered[0]["render"] == {
            "template": "%s",
            "length": 8,
            "capacity": 9,
            "grown": True,
        }
        assert rendered[0]["logger"] == "stringkit.core.formatting"

    def test_unwritable_log_file_falls_back_to_stderr(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A log file that cannot be opened leaves a stderr handler."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        configure_logging(LoggingConfig(file=blocker / "sk.log"))

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], RotatingFileHandler)
        assert "Could not open log file" in capsys.readouterr().err
