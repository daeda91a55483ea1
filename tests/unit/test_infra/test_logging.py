"""Unit tests for the logging helpers."""

from __future__ import annotations

import json
import logging

import pytest

from traveller_service.infra.logging import (
    ContextInjectingFilter,
    JSONFormatter,
    clear_log_context,
    get_lazy_logger,
    get_log_context,
    set_log_context,
)


@pytest.fixture(autouse=True)
def clean_context():
    """Start and finish every test with an empty log context."""
    clear_log_context()
    yield
    clear_log_context()


def make_record(message: str = "Resolving node", **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="traveller_service.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.unit
class TestLogContext:
    """Test suite for the contextvars log context."""

    def test_set_merges(self):
        """Test that successive calls add fields."""
        set_log_context(request_id="abc")
        set_log_context(tenant_id=3)

        assert get_log_context() == {"request_id": "abc", "tenant_id": 3}

    def test_get_returns_copy(self):
        """Test that callers cannot mutate the stored context."""
        set_log_context(request_id="abc")
        get_log_context()["request_id"] = "changed"

        assert get_log_context() == {"request_id": "abc"}

    def test_filter_injects_without_overwriting(self):
        """Test that context fields are added but explicit extras win."""
        set_log_context(request_id="abc", tenant_id=3)
        record = make_record(tenant_id=9)

        assert ContextInjectingFilter().filter(record) is True
        assert record.request_id == "abc"
        assert record.tenant_id == 9


@pytest.mark.unit
class TestJSONFormatter:
    """Test suite for JSONFormatter."""

    def test_one_json_object_per_record(self):
        """Test the base fields of a formatted record."""
        output = JSONFormatter(static={"service": "traveller-service"}).format(make_record())
        data = json.loads(output)

        assert data["level"] == "INFO"
        assert data["logger"] == "traveller_service.test"
        assert data["message"] == "Resolving node"
        assert data["service"] == "traveller-service"
        assert data["timestamp"].endswith("Z")
        assert "\n" not in output

    def test_extra_fields_copied(self):
        """Test that extra attributes appear in the output."""
        data = json.loads(JSONFormatter().format(make_record(tenant_id=3, type_tag="World")))

        assert data["tenant_id"] == 3
        assert data["type_tag"] == "World"


@pytest.mark.unit
class TestLazyLogger:
    """Test suite for the lazy logger adapter."""

    def test_callable_not_evaluated_when_disabled(self):
        """Test that disabled levels skip message construction."""
        calls: list[int] = []
        logger = get_lazy_logger("traveller_service.test.lazy")
        logger.logger.setLevel(logging.WARNING)

        logger.debug(lambda: calls.append(1) or "expensive")

        assert calls == []

    def test_callable_evaluated_when_enabled(self, caplog):
        """Test that enabled levels render callable messages."""
        logger = get_lazy_logger("traveller_service.test.lazy_enabled")

        with caplog.at_level(logging.DEBUG, logger="traveller_service.test.lazy_enabled"):
            logger.debug(lambda: "sliced 3 items")

        assert "sliced 3 items" in caplog.text
