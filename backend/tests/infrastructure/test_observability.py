"""Structured Logging — tests for the JSON formatter and handler setup."""

import json
import logging
from uuid import UUID

from invoicing.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "invoicing.services.invoice_actions", logging.ERROR, __file__, 1,
        "Database Error in create_invoice", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "ERROR"
    assert payload["logger"] == "invoicing.services.invoice_actions"
    assert payload["message"] == "Database Error in create_invoice"
    assert "timestamp" in payload


def test_json_formatter_surfaces_action_extras():
    payload = json.loads(JSONFormatter().format(
        _record(action="create_invoice", error_code="DATABASE_ERROR", invoice_id=None),
    ))
    assert payload["action"] == "create_invoice"
    assert payload["error_code"] == "DATABASE_ERROR"
    assert "invoice_id" not in payload


def test_json_formatter_uses_record_time_and_serializes_ids():
    record = _record(invoice_id=UUID(int=1))
    record.created = 0.0
    payload = json.loads(JSONFormatter().format(record))
    assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"
    assert payload["invoice_id"] == "00000000-0000-0000-0000-000000000001"


def test_setup_logging_does_not_stack_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert root.level == logging.WARNING
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)
        root.setLevel(level)
