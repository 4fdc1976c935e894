"""Structured logging — JSON formatter fields and idempotent setup."""

import json
import logging

from museum_api.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "museum_api.test", logging.ERROR, __file__, 1, "store failed", None, None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_known_extras():
    line = JSONFormatter().format(
        _record(error_code="DOCUMENT_STORE_ERROR", collection="obra", unknown="x"),
    )
    payload = json.loads(line)
    assert payload["level"] == "ERROR"
    assert payload["message"] == "store failed"
    assert payload["error_code"] == "DOCUMENT_STORE_ERROR"
    assert payload["collection"] == "obra"
    assert "unknown" not in payload


def test_setup_logging_does_not_stack_handlers():
    before = list(logging.root.handlers)
    level = logging.root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("WARNING", "text")
        added = [h for h in logging.root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert logging.root.level == logging.WARNING
    finally:
        for handler in list(logging.root.handlers):
            if handler not in before:
                logging.root.removeHandler(handler)
        logging.root.setLevel(level)
