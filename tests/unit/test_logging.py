"""Unit tests for Gradebook logging configuration."""

import logging
from pathlib import Path

import pytest

from gradebook.logging import get_logger, setup_console_logging, setup_logging


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("GRADEBOOK_LOG_DIR", raising=False)
    monkeypatch.delenv("GRADEBOOK_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _reset_handlers():
    yield
    logger = logging.getLogger("gradebook")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging function."""

    def test_creates_log_directory(self, tmp_path: Path) -> None:
        """Log directory is created if it doesn't exist."""
        log_dir = tmp_path / "nested" / "logs"
        setup_logging(log_dir=log_dir)

        assert log_dir.exists()

    def test_writes_to_log_file(self, tmp_path: Path) -> None:
        """Log messages are written to the file."""
        logger = setup_logging(log_dir=tmp_path)
        logger.info("test message 123")

        content = (tmp_path / "gradebook.log").read_text(encoding="utf-8")
        assert "test message 123" in content

    def test_log_format(self, tmp_path: Path) -> None:
        """Log entries carry level and component name."""
        setup_logging(log_dir=tmp_path)
        logging.getLogger("gradebook.records.store").info("component test")

        content = (tmp_path / "gradebook.log").read_text(encoding="utf-8")
        # Format: 2026-01-28 16:30:45 | INFO     | gradebook.records.store | message
        assert " | INFO" in content
        assert " | gradebook.records.store | component test" in content

    def test_level_filters_messages(self, tmp_path: Path) -> None:
        logger = setup_logging(log_dir=tmp_path, level="WARNING")
        logger.info("hidden")
        logger.warning("shown")

        content = (tmp_path / "gradebook.log").read_text(encoding="utf-8")
        assert "hidden" not in content
        assert "shown" in content

    def test_env_overrides(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_dir = tmp_path / "from-env"
        monkeypatch.setenv("GRADEBOOK_LOG_DIR", str(env_dir))
        monkeypatch.setenv("GRADEBOOK_LOG_LEVEL", "DEBUG")

        logger = setup_logging(log_dir=tmp_path / "ignored", level="ERROR")

        assert logger.level == logging.DEBUG
        assert (env_dir / "gradebook.log").exists()

    def test_no_duplicate_handlers(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path)
        logger = setup_logging(log_dir=tmp_path, console=True)

        assert len(logger.handlers) == 2


@pytest.mark.unit
class TestGetLogger:
    """Tests for get_logger."""

    def test_prefixes_name(self) -> None:
        assert get_logger("console").name == "gradebook.console"

    def test_keeps_prefixed_name(self) -> None:
        assert get_logger("gradebook.records").name == "gradebook.records"
        assert get_logger("gradebook").name == "gradebook"


@pytest.mark.unit
class TestSetupConsoleLogging:
    """Tests for the file-less fallback."""

    def test_failed_setup_keeps_previous_handlers(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path)
        blocker = tmp_path / "blocked"
        blocker.write_text("", encoding="utf-8")

        with pytest.raises(OSError):
            setup_logging(log_dir=blocker)

        handlers = logging.getLogger("gradebook").handlers
        assert len(handlers) == 1
        assert Path(handlers[0].baseFilename) == tmp_path / "gradebook.log"

    def test_discards_records_without_console(self, tmp_path: Path) -> None:
        setup_logging(log_dir=tmp_path)
        logger = setup_console_logging(level="WARNING")

        assert logger.level == logging.WARNING
        assert [type(h) for h in logger.handlers] == [logging.NullHandler]

    def test_console_writes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        logger = setup_console_logging(level="DEBUG", console=True)
        get_logger("records.store").debug("fallback message")

        assert logger.level == logging.DEBUG
        assert " | gradebook.records.store | fallback message" in capsys.readouterr().err

    def test_env_level_applies(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GRADEBOOK_LOG_LEVEL", "ERROR")

        assert setup_console_logging(level="DEBUG").level == logging.ERROR
