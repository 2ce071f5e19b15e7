"""Unit tests for movabletype.logging_config module."""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from movabletype.logging_config import setup_logging


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_explicit_level(self, restore_root_logger: None) -> None:
        """The given level is applied to the root logger."""
        root = setup_logging(logging.DEBUG)
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1

    def test_level_from_env(
        self, restore_root_logger: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """MOVABLETYPE_LOG_LEVEL is used when no level is given."""
        monkeypatch.setenv("MOVABLETYPE_LOG_LEVEL", "warning")
        assert setup_logging().level == logging.WARNING

    def test_default_level(
        self, restore_root_logger: None, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """INFO is the fallback level."""
        monkeypatch.delenv("MOVABLETYPE_LOG_LEVEL", raising=False)
        assert setup_logging().level == logging.INFO

    def test_log_file(self, restore_root_logger: None, tmp_path: Path) -> None:
        """A file handler is added and its directory created."""
        log_file = tmp_path / "logs" / "parse.log"
        root = setup_logging(logging.INFO, log_file=str(log_file))

        logging.getLogger("movabletype.parser").info("Parsed 2 entries")
        for handler in root.handlers:
            handler.flush()

        assert len(root.handlers) == 2
        assert "Parsed 2 entries" in log_file.read_text()

    def test_log_file_as_path(self, restore_root_logger: None, tmp_path: Path) -> None:
        """log_file may be a Path and log_level a level name."""
        log_file = tmp_path / "nested" / "run.log"
        root = setup_logging("DEBUG", log_file=log_file)

        assert root.level == logging.DEBUG
        assert isinstance(root, logging.Logger)
        assert log_file.parent.is_dir()
