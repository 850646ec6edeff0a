# topmark:header:start
#
#   project      : Packscope
#   file         : test_logging.py
#   file_relpath : tests/unit/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for the TRACE-aware logging helpers."""

from __future__ import annotations

import logging

import pytest

from packscope.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    PackscopeLogger,
    get_logger,
    level_from_name,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("name", "level"),
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("chatty", None),
    ],
)
def test_level_from_name(name: str, level: int | None) -> None:
    assert level_from_name(name) == level


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    assert resolve_env_log_level() is None

    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "TRACE")
    assert resolve_env_log_level() == TRACE_LEVEL


def test_trace_records_are_emitted(caplog: pytest.LogCaptureFixture) -> None:
    """``trace()`` logs below DEBUG under the TRACE level name."""
    logger = get_logger("packscope.tests.trace")
    assert isinstance(logger, PackscopeLogger)

    with caplog.at_level(TRACE_LEVEL, logger="packscope.tests.trace"):
        logger.trace("candidate %s", "entity")

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
        ("TRACE", "candidate entity")
    ]


def test_chalk_formatter_keeps_the_message() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "careful %s", ("now",), None)
    assert "careful now" in ChalkFormatter("%(message)s").format(record)
