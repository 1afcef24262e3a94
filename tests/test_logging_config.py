# Area: Shared Tests
"""Tests for logging setup and structured error output."""

import json
import logging

import pytest

from dond_game._shared.logging_config import (
    JSONFormatter,
    TerminalFormatter,
    log_error,
    resolve_level,
    setup_logging,
)
from dond_game.errors import ConfigurationError


@pytest.fixture(autouse=True)
def restore_package_logger():
    pkg_logger = logging.getLogger("dond_game")
    handlers = list(pkg_logger.handlers)
    level, propagate = pkg_logger.level, pkg_logger.propagate
    yield
    for handler in pkg_logger.handlers:
        handler.close()
    pkg_logger.handlers[:] = handlers
    pkg_logger.setLevel(level)
    pkg_logger.propagate = propagate


def make_record(level=logging.INFO, msg="hello"):
    return logging.LogRecord("dond_game.test", level, __file__, 1, msg, None, None)


class TestResolveLevel:
    """Tests for resolve_level()."""

    def test_names(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level("WARNING") == logging.WARNING

    def test_ints_pass_through(self):
        assert resolve_level(logging.ERROR) == logging.ERROR

    def test_unknown(self):
        with pytest.raises(ValueError):
            resolve_level("chatty")


class TestFormatters:
    """Tests for the terminal and JSON formatters."""

    def test_json_formatter(self):
        data = json.loads(JSONFormatter().format(make_record()))
        assert data["level"] == "INFO"
        assert data["logger"] == "dond_game.test"
        assert data["message"] == "hello"

    def test_terminal_formatter_colors_level(self):
        record = make_record(logging.WARNING)
        text = TerminalFormatter("%(levelname)s %(message)s").format(record)
        assert "\033[33m" in text
        assert record.levelname == "WARNING"


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_terminal_and_file_handlers(self, tmp_path):
        log_file = tmp_path / "logs" / "game.log"
        setup_logging(str(log_file), "DEBUG")
        pkg_logger = logging.getLogger("dond_game")
        assert pkg_logger.level == logging.DEBUG
        assert pkg_logger.propagate is False
        assert len(pkg_logger.handlers) == 2

        logging.getLogger("dond_game.board").info("board ready")
        for handler in pkg_logger.handlers:
            handler.flush()
        line = log_file.read_text().strip().splitlines()[-1]
        assert json.loads(line)["message"] == "board ready"

    def test_empty_path_disables_file(self):
        setup_logging("", logging.INFO)
        handlers = logging.getLogger("dond_game").handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0], logging.FileHandler)

    def test_repeated_setup_replaces_handlers(self, tmp_path):
        setup_logging(str(tmp_path / "a.log"))
        setup_logging(str(tmp_path / "b.log"))
        assert len(logging.getLogger("dond_game").handlers) == 2


class TestLogError:
    """Tests for log_error()."""

    def test_prints_error_block(self, capsys):
        log_error(ConfigurationError("Bad table", details={"size": 3}))
        err = capsys.readouterr().err
        assert "CONFIGURATION_ERROR" in err
        assert "Bad table" in err
        assert '"size": 3' in err
