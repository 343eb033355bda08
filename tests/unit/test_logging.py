from __future__ import annotations

import json
import logging

from burnout_dashboard.utils.logging import _json_formatter, configure_logging

EXPECTED_ROWS = 20
EXPECTED_PEOPLE = 100


def _record() -> logging.LogRecord:
    return logging.LogRecord(
        name="test.logger",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )


def test_json_formatter_promotes_standard_extra_fields() -> None:
    record = _record()
    record.rows = EXPECTED_ROWS
    record.plot_type = "Burnout by Ethnicity"

    payload = json.loads(_json_formatter(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "test.logger"
    assert payload["message"] == "hello"
    assert payload["rows"] == EXPECTED_ROWS
    assert payload["plot_type"] == "Burnout by Ethnicity"
    assert "pathname" not in payload


def test_json_formatter_supports_legacy_nested_extra_field() -> None:
    record = _record()
    record.extra = {"people": EXPECTED_PEOPLE}

    payload = json.loads(_json_formatter(record))

    assert payload["people"] == EXPECTED_PEOPLE


def test_configure_logging_sets_root_level() -> None:
    configure_logging(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
    configure_logging(level="INFO")
    assert logging.getLogger().level == logging.INFO


def test_configure_logging_without_force_keeps_existing_setup() -> None:
    configure_logging(level="INFO")
    configure_logging(level="ERROR", force=False)
    assert logging.getLogger().level == logging.INFO
