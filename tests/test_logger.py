"""Test the shared logger and class LoggerSettings."""
import logging
from pathlib import Path
import subprocess
import sys

from pydantic import ValidationError
import pytest

from expression_evaluator.common.logger import (
    LOG_LEVEL_ENV_VAR,
    LOGGER_NAME,
    LoggerSettings,
    configure_logger,
    logger,
)


@pytest.fixture(autouse=True)
def restore_logger_level():
    """Put the shared logger back to its original level after each test."""
    level = logger.level
    yield
    logger.setLevel(level)


def test_default_level(monkeypatch) -> None:
    """Without the environment variable the level defaults to WARNING."""
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    assert LoggerSettings.from_env().level == "WARNING"


@pytest.mark.parametrize("value,expected", [
    ("debug", "DEBUG"),
    (" Info ", "INFO"),
    ("ERROR", "ERROR"),
])
def test_level_from_env(monkeypatch, value, expected) -> None:
    """The environment variable is read case-insensitively."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert LoggerSettings.from_env().level == expected


def test_invalid_level(monkeypatch) -> None:
    """An unknown level name raises a ValidationError."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "chatty")
    with pytest.raises(ValidationError):
        LoggerSettings.from_env()


def test_configure_logger_sets_level() -> None:
    """configure_logger applies the requested level to the shared logger."""
    log = configure_logger(LoggerSettings(level="DEBUG"))
    assert log is logger
    assert log.name == LOGGER_NAME
    assert log.level == logging.DEBUG


def test_configure_logger_does_not_duplicate_handlers() -> None:
    """Configuring twice keeps a single handler."""
    configure_logger(LoggerSettings())
    configure_logger(LoggerSettings())
    assert len([h for h in logger.handlers if h.get_name() == LOGGER_NAME]) == 1


def test_import_ignores_bad_env_and_stays_silent(monkeypatch) -> None:
    """A bad level in the environment neither breaks importing nor writes to stderr."""
    src_dir = Path(__file__).resolve().parents[1] / "src"
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "verbose")
    monkeypatch.setenv("PYTHONPATH", str(src_dir))
    code = (
        "from expression_evaluator.evaluator.evaluator import evaluate\n"
        "print(evaluate('1 / 0').error.kind.value)\n"
    )
    completed = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, check=False
    )
    assert completed.returncode == 0, completed.stderr
    assert completed.stdout.strip() == "division_by_zero"
    assert completed.stderr == ""
