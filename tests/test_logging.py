"""Tests for the structured logging system (inventory_kernel/logging_config.py)."""

import json
import logging
from datetime import date
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest

from inventory_kernel.domain.items import AbcCategory
from inventory_kernel.exceptions import ItemNotFoundError
from inventory_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "inventory_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        get_logger("test").info("scan_applied", extra={"quantity": 6, "item_created": False})

        record = _parse_log(stream)
        assert record["quantity"] == 6
        assert record["item_created"] is False

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        LogContext.set(correlation_id="abc-123", scan_id="scan-1")
        get_logger("test").info("test_msg")

        record = _parse_log(stream)
        assert record["correlation_id"] == "abc-123"
        assert record["scan_id"] == "scan-1"

    def test_domain_values_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        uid = uuid4()
        get_logger("test").info("values", extra={
            "entry_id": uid,
            "total": Decimal("12.50"),
            "as_of": date(2024, 6, 15),
            "category": AbcCategory.B,
        })

        record = _parse_log(stream)
        assert record["entry_id"] == str(uid)
        assert record["total"] == "12.50"
        assert record["as_of"] == "2024-06-15"
        assert record["category"] == "B"

    def test_kernel_exception_fields_extracted(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        try:
            raise ItemNotFoundError("QR404")
        except ItemNotFoundError:
            get_logger("test").error("lookup_failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "ItemNotFoundError"
        assert record["exc_code"] == "ITEM_NOT_FOUND"
        assert record["exc_item_id"] == "QR404"
        assert "traceback" in record

    def test_debug_filtered_at_info(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.debug("hidden")
        logger.warning("second")

        assert [r["message"] for r in _parse_all_logs(stream)] == ["first", "second"]


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:
    """Tests for context propagation."""

    def test_set_and_get(self):
        LogContext.set(correlation_id="x", item_id="y")
        assert LogContext.get_all() == {"correlation_id": "x", "item_id": "y"}

    def test_clear(self):
        LogContext.set(correlation_id="x")
        LogContext.clear()
        assert LogContext.get_all() == {}

    def test_bind_restores_previous(self):
        LogContext.set(scan_id="outer")
        with LogContext.bind(scan_id="inner"):
            assert LogContext.get_all()["scan_id"] == "inner"
        assert LogContext.get_all()["scan_id"] == "outer"

    def test_bind_restores_none(self):
        with LogContext.bind(trace_id="temp"):
            assert LogContext.get_all()["trace_id"] == "temp"
        assert "trace_id" not in LogContext.get_all()

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            LogContext.set(event_id="nope")


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    def test_idempotent(self):
        handler, _ = _make_handler()
        configure_logging(handler=handler)
        configure_logging(handler=handler)
        assert len(logging.getLogger("inventory_kernel").handlers) == 1

    def test_reset_allows_reconfigure(self):
        first, _ = _make_handler()
        configure_logging(handler=first)
        reset_logging()
        second, stream = _make_handler()
        configure_logging(handler=second)
        get_logger("test").info("again")
        assert _parse_log(stream)["message"] == "again"
