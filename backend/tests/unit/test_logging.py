"""Unit tests for logging setup and the sync logger."""

import logging

import pytest

from hr_admin.config import Settings
from hr_admin.infrastructure.logging.log_config import category_levels, parse_level, setup_logging
from hr_admin.infrastructure.logging.sync_logger import SyncLogger, SyncStage


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARNING ") == logging.WARNING
    assert parse_level("loud") == logging.INFO


def test_category_levels_follow_settings():
    settings = Settings(_env_file=None, log_level_http="ERROR", log_level_sync="DEBUG")
    levels = category_levels(settings)
    assert levels["httpx"] == logging.ERROR
    assert levels["httpcore"] == logging.ERROR
    assert levels["EntityListEditor"] == logging.DEBUG
    assert levels["hr_admin.infrastructure.backend"] == logging.DEBUG


def test_setup_logging_applies_levels():
    setup_logging(Settings(_env_file=None, log_level_http="CRITICAL"))
    assert logging.getLogger("httpx").level == logging.CRITICAL


def test_timed_step_logs_start_and_completion(caplog):
    slog = SyncLogger("tests.sync")
    with caplog.at_level(logging.INFO, logger="tests.sync"):
        with slog.timed_step(SyncStage.LOAD, "Loading salaries", path="/api/salaries"):
            pass

    assert len(caplog.records) == 2
    assert "[LOAD]" in caplog.records[0].getMessage()
    assert "path=/api/salaries" in caplog.records[0].getMessage()
    assert "✓ Loading salaries" in caplog.records[1].getMessage()


def test_timed_step_logs_failure_and_reraises(caplog):
    slog = SyncLogger("tests.sync")
    with caplog.at_level(logging.INFO, logger="tests.sync"):
        with pytest.raises(RuntimeError):
            with slog.timed_step(SyncStage.DELETE, "Deleting Employee"):
                raise RuntimeError("backend down")

    failure = caplog.records[-1]
    assert failure.levelno == logging.WARNING
    assert "RuntimeError: backend down" in failure.getMessage()
