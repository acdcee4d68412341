"""Tests for loguru setup and standard logging interception."""

import logging
import sys

import pytest
from loguru import logger

from conditional_demo.logging import InterceptHandler, setup_logging


@pytest.fixture
def records():
    """Configure logging, then capture what reaches loguru."""
    setup_logging("DEBUG")
    captured: list[dict] = []
    sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
    yield captured
    logger.remove(sink_id)
    logger.remove()
    logger.add(sys.stderr)


def test_uvicorn_records_reach_loguru(records: list[dict]):
    logging.getLogger("uvicorn.error").warning("Address already in use")
    logging.getLogger("uvicorn.error").debug("Waiting for connections")

    levels = {r["message"]: r["level"].name for r in records}
    assert levels["Address already in use"] == "WARNING"
    assert levels["Waiting for connections"] == "DEBUG"


def test_uvicorn_loggers_use_intercept_handler(records: list[dict]):
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi"):
        stdlib_logger = logging.getLogger(name)
        assert [type(h) for h in stdlib_logger.handlers] == [InterceptHandler]
        assert stdlib_logger.propagate is False
        assert stdlib_logger.level == logging.DEBUG


def test_custom_stdlib_level_is_forwarded(records: list[dict]):
    logging.getLogger("uvicorn").log(25, "between info and warning")

    record = next(r for r in records if r["message"] == "between info and warning")
    assert record["level"].no == 25


def test_below_level_is_filtered():
    setup_logging("WARNING")
    captured: list[str] = []
    sink_id = logger.add(lambda message: captured.append(message.record["message"]), level="TRACE")
    try:
        logging.getLogger("uvicorn.error").info("Started server process")
    finally:
        logger.remove(sink_id)
        logger.remove()
        logger.add(sys.stderr)

    assert "Started server process" not in captured


def test_trace_level_maps_to_stdlib_debug():
    try:
        setup_logging("trace")
        assert logging.getLogger("uvicorn").level == logging.DEBUG
    finally:
        logger.remove()
        logger.add(sys.stderr)
