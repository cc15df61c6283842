"""Tests for structured JSON logging."""

from __future__ import annotations

import io
import json
import logging
from datetime import date
from decimal import Decimal

from greenroom.core.logging_config import configure_logging, reset_logging


def _configured_stream() -> io.StringIO:
    stream = io.StringIO()
    configure_logging(level=logging.DEBUG, stream=stream)
    return stream


def test_emits_one_json_line_per_record():
    stream = _configured_stream()
    logging.getLogger("greenroom.test").info("Saved %s", "bank_setup")
    line = stream.getvalue().strip()
    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["logger"] == "greenroom.test"
    assert payload["message"] == "Saved bank_setup"


def test_extras_are_serialized():
    stream = _configured_stream()
    logging.getLogger("greenroom.test").info(
        "Run", extra={"total": Decimal("12.50"), "pay_date": date(2026, 1, 5)},
    )
    payload = json.loads(stream.getvalue())
    assert payload["total"] == "12.50"
    assert payload["pay_date"] == "2026-01-05"


def test_exception_info_included():
    stream = _configured_stream()
    try:
        raise ValueError("boom")
    except ValueError:
        logging.getLogger("greenroom.test").exception("Failed")
    payload = json.loads(stream.getvalue())
    assert payload["exc_type"] == "ValueError"
    assert payload["exc_message"] == "boom"


def test_configure_is_idempotent():
    _configured_stream()
    configure_logging(level=logging.DEBUG)
    assert len(logging.getLogger("greenroom").handlers) == 1


def test_reset_clears_handlers():
    _configured_stream()
    reset_logging()
    assert logging.getLogger("greenroom").handlers == []
