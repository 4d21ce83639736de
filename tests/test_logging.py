"""Tests for the structlog setup of the library loggers."""
import json
import logging

import pytest
import structlog

from shapecheck import ValidationError, check, configure_logging, ensure, predicate, string
from shapecheck.logging import LoggerRegistry, validation_logger


def _events(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.strip()]


def test_configure_attaches_one_handler(restore_library_logger):
    configure_logging("DEBUG", json_logs=True)
    configure_logging("INFO", json_logs=False)
    lib_logger = restore_library_logger
    assert lib_logger.level == logging.INFO
    assert lib_logger.propagate is False
    assert len(lib_logger.handlers) == 1
    assert isinstance(lib_logger.handlers[0].formatter, structlog.stdlib.ProcessorFormatter)


def test_unknown_level_falls_back_to_warning(restore_library_logger):
    configure_logging("LOUD", json_logs=True)
    assert restore_library_logger.level == logging.WARNING


def test_predicate_errors_are_logged(restore_library_logger, capsys):
    configure_logging("WARNING", json_logs=True)

    def explode(value):
        raise RuntimeError("boom")

    assert not predicate(explode)(1)
    events = _events(capsys.readouterr().out)
    assert len(events) == 1
    event = events[0]
    assert event["event"] == "predicate_raised"
    assert event["level"] == "warning"
    assert event["predicate"] == "explode"
    assert "boom" in event["error"]
    assert event["service"] == "shapecheck"
    assert event["logger"] == "shapecheck.validation"


def test_debug_events_follow_the_level(restore_library_logger, capsys):
    configure_logging("WARNING", json_logs=True)
    check(string, 1)
    with pytest.raises(ValidationError):
        ensure(string, 1)
    assert capsys.readouterr().out == ""

    configure_logging("DEBUG", json_logs=True)
    check(string, 1)
    with pytest.raises(ValidationError):
        ensure(string, 1)
    names = [e["event"] for e in _events(capsys.readouterr().out)]
    assert names == ["check_completed", "check_completed", "ensure_failed"]


def test_registry_reuses_loggers():
    assert validation_logger() is validation_logger()
    assert LoggerRegistry.get("validation") is validation_logger()
