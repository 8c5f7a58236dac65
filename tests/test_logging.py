"""Tests for the logging helpers."""

import json
import logging
import sys

import pytest

from upstash_kafka.utils.logging import (
    LogContext,
    RequestTrackingFilter,
    StructuredFormatter,
    clear_request_context,
    get_request_context,
    log_http_call,
    set_request_context,
    setup_logging,
)


def make_record(message="hello", **extra):
    record = logging.LogRecord(
        name="upstash_kafka.client",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.fixture
def request_scope():
    clear_request_context()
    yield
    clear_request_context()


@pytest.fixture
def root_logger():
    """Restore the root logger after setup_logging rewires it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


@pytest.mark.unit
class TestStructuredFormatter:
    """JSON log lines."""

    def test_basic_fields(self, request_scope):
        entry = json.loads(StructuredFormatter().format(make_record()))

        assert entry["level"] == "INFO"
        assert entry["logger"] == "upstash_kafka.client"
        assert entry["message"] == "hello"
        assert entry["timestamp"].endswith("Z")
        assert "request_context" not in entry

    def test_extras_are_included(self, request_scope):
        entry = json.loads(StructuredFormatter().format(make_record(path="/v2/kafka/clusters", status_code=200)))

        assert entry["path"] == "/v2/kafka/clusters"
        assert entry["status_code"] == 200

    def test_request_context_is_included(self, request_scope):
        set_request_context(request_id="abc")

        entry = json.loads(StructuredFormatter().format(make_record()))

        assert entry["request_context"] == {"request_id": "abc"}

    def test_exception_is_included(self, request_scope):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = make_record()
            record.exc_info = sys.exc_info()

        entry = json.loads(StructuredFormatter().format(record))

        assert entry["exception"]["type"] == "RuntimeError"
        assert entry["exception"]["message"] == "boom"
        assert "Traceback" in entry["exception"]["traceback"]


@pytest.mark.unit
class TestRequestContext:
    """Correlation values attached to records."""

    def test_set_merges(self, request_scope):
        set_request_context(request_id="abc")
        set_request_context(operation="produce")

        assert get_request_context() == {"request_id": "abc", "operation": "produce"}

    def test_clear(self, request_scope):
        set_request_context(request_id="abc")
        clear_request_context()

        assert get_request_context() == {}

    def test_filter_copies_context(self, request_scope):
        set_request_context(request_id="abc")
        record = make_record()

        assert RequestTrackingFilter().filter(record) is True
        assert record.request_id == "abc"

    def test_filter_keeps_existing_attributes(self, request_scope):
        set_request_context(request_id="abc")
        record = make_record(request_id="own")

        RequestTrackingFilter().filter(record)

        assert record.request_id == "own"


@pytest.mark.unit
class TestLogHttpCall:
    """One DEBUG record per exchange, whatever the status code."""

    @pytest.mark.parametrize("status_code", [200, 404, 503])
    def test_logged_at_debug(self, caplog, status_code):
        logger = logging.getLogger("upstash_kafka.test")
        caplog.set_level(logging.DEBUG, logger="upstash_kafka.test")

        log_http_call(logger, "GET", "/v2/kafka/clusters", status_code, 12.345)

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.getMessage() == f"HTTP GET /v2/kafka/clusters -> {status_code}"
        assert record.duration_ms == 12.35
        assert record.path == "/v2/kafka/clusters"


@pytest.mark.unit
class TestLogContext:
    """Timed operations."""

    def test_success(self, caplog):
        logger = logging.getLogger("upstash_kafka.test")
        caplog.set_level(logging.DEBUG, logger="upstash_kafka.test")

        with LogContext("list_clusters", logger=logger, request_id="r1") as ctx:
            pass

        record = caplog.records[-1]
        assert record.levelno == logging.DEBUG
        assert record.status == "success"
        assert record.request_id == "r1"
        assert ctx.duration_ms >= 0

    def test_failure_is_logged_and_propagates(self, caplog):
        logger = logging.getLogger("upstash_kafka.test")
        caplog.set_level(logging.DEBUG, logger="upstash_kafka.test")

        with pytest.raises(ValueError):
            with LogContext("create_topic", logger=logger, topic="one"):
                raise ValueError("bad partitions")

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.error_type == "ValueError"
        assert record.topic == "one"


@pytest.mark.unit
class TestSetupLogging:
    """Root logger configuration."""

    def test_plain(self, root_logger):
        setup_logging(log_level="DEBUG", structured=False)

        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) == 1
        assert not isinstance(root_logger.handlers[0].formatter, StructuredFormatter)
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_structured(self, root_logger):
        setup_logging(log_level="warning", structured=True, enable_request_tracking=False)

        handler = root_logger.handlers[0]
        assert root_logger.level == logging.WARNING
        assert isinstance(handler.formatter, StructuredFormatter)
        assert handler.filters == []
