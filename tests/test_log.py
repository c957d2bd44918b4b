"""Tests for the custom TRACE logging level."""

from __future__ import annotations

import logging

import retyper.log
from retyper.log import TRACE


def test_trace_level_registered():
    assert TRACE == 5
    assert logging.getLevelName(TRACE) == "TRACE"


def test_logger_trace_emits_when_enabled(caplog):
    caplog.set_level(TRACE, logger="retyper.test_log")
    logging.getLogger("retyper.test_log").trace("noisy %s", "detail")
    records = [r for r in caplog.records if r.name == "retyper.test_log"]
    assert len(records) == 1
    assert records[0].levelname == "TRACE"
    assert records[0].getMessage() == "noisy detail"


def test_logger_trace_silent_at_debug(caplog):
    caplog.set_level(logging.DEBUG, logger="retyper.test_log")
    logging.getLogger("retyper.test_log").trace("hidden")
    assert not [r for r in caplog.records if r.name == "retyper.test_log"]
