"""Structured logging — JSON records carry dev-dispatch context fields."""

import json
import logging

from devgate.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "devgate.test", logging.INFO, __file__, 1, "Dev action %s", ("purge",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_includes_context_fields():
    out = json.loads(JSONFormatter().format(
        _record(action="purge", account="cucumber", error_code=None),
    ))
    assert out["message"] == "Dev action purge"
    assert out["action"] == "purge"
    assert out["account"] == "cucumber"
    assert "error_code" not in out


def test_setup_logging_does_not_stack_handlers():
    before = len(logging.root.handlers)
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json")
    named = [h for h in logging.root.handlers if h.get_name() == "devgate"]
    assert len(named) == 1
    assert len(logging.root.handlers) <= before + 1
    logging.root.removeHandler(named[0])
