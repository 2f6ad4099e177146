"""Structured Logging - JSON formatter output and setup idempotence."""

import json
import logging

from peaks.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "peaks.test", logging.INFO, __file__, 1, "Peak added", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "INFO"
    assert payload["logger"] == "peaks.test"
    assert payload["message"] == "Peak added"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(
        JSONFormatter().format(_record(peak_id=3, error_code="X", other="y")),
    )
    assert payload["peak_id"] == 3
    assert payload["error_code"] == "X"
    assert "other" not in payload


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    after_first = len(logging.root.handlers)
    setup_logging("WARNING", "text")
    assert len(logging.root.handlers) == after_first
    assert logging.root.level == logging.WARNING
