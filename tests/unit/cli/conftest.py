"""Shared fixtures for CLI tests."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner

from stringkit.config import clear_config_cache


@pytest.fixture
def runner() -> CliRunner:
    """Return a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> Iterator[Path]:
    """Point stringkit at a config path inside tmp_path and clear STRINGKIT_*."""
    for var in (
        "STRINGKIT_INITIAL_BUFFER_SIZE",
        "STRINGKIT_MAX_BUFFER_SIZE",
        "STRINGKIT_ENCODING",
        "STRINGKIT_LOG_LEVEL",
        "STRINGKIT_LOG_FILE",
        "STRINGKIT_LOG_FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    config_path = tmp_path / "config.toml"
    monkeypatch.setenv("STRINGKIT_CONFIG_PATH", str(config_path))
    clear_config_cache()
    yield config_path
    clear_config_cache()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
