"""
Tests for ops events: structured league and source events reach the ops logger.
"""

from __future__ import annotations

import logging

import pytest

from league_tables.ops.ops_events import (
    OPS_LOGGER_NAME,
    log_league_end,
    log_league_start,
    log_source_failure,
    log_store_write,
)


def test_league_start_returns_float_and_emits(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=OPS_LOGGER_NAME)
    t = log_league_start("epl-2024", 380)
    assert isinstance(t, float)
    assert caplog.records[-1].getMessage() == "ops_event=league_start fixtures_count=380 league='epl-2024'"
    assert caplog.records[-1].ops_event_type == "league_start"


def test_league_end_with_error_logs_error(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=OPS_LOGGER_NAME)
    log_league_end("epl-2024", 0.123456, error="boom")
    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "duration_seconds=0.1235" in record.getMessage()
    assert "error='boom'" in record.getMessage()


def test_league_end_ok_logs_info(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=OPS_LOGGER_NAME)
    log_league_end("epl-2024", 1.0, teams_home=20, teams_away=20)
    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.ops_event == {"league": "epl-2024", "duration_seconds": 1.0, "teams_home": 20, "teams_away": 20}


def test_source_failure_and_store_write(caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger=OPS_LOGGER_NAME)
    log_source_failure("web", "https://example.test/feed/epl-2024", "ERROR status(500)")
    log_store_write("epl-2024", "homeStanding", "/tmp/x.json", 20)
    types = [r.ops_event_type for r in caplog.records if r.name == OPS_LOGGER_NAME]
    assert types[-2:] == ["source_failure", "store_write"]
    assert caplog.records[-2].levelno == logging.ERROR
