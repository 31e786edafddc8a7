"""
Test suite for correlation ID propagation and logging configuration.
"""

import logging

import pytest

from coursehub.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from coursehub.observability.logger import CorrelationIdFilter, configure_logging


@pytest.fixture(autouse=True)
def _reset_correlation_id():
    yield
    clear_correlation_id()


def _record() -> logging.LogRecord:
    return logging.LogRecord("coursehub.test", logging.INFO, __file__, 1, "hello", None, None)


def test_set_correlation_id_should_generate_when_missing() -> None:
    generated = set_correlation_id()

    assert generated
    assert get_correlation_id() == generated


def test_filter_should_stamp_current_correlation_id() -> None:
    set_correlation_id("req-42")
    record = _record()

    assert CorrelationIdFilter().filter(record) is True
    assert record.correlation_id == "req-42"


def test_filter_outside_request_should_use_placeholder() -> None:
    record = _record()

    CorrelationIdFilter().filter(record)

    assert record.correlation_id == "-"


def test_configure_logging_should_install_single_handler() -> None:
    configure_logging("debug")
    configure_logging("warning")

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert len(root.handlers) == 1
    assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)
