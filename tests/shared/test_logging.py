"""Tests for structured logging helpers."""

import json
import logging

from dto_partials.shared.utils import logging as data_logging
from dto_partials.shared.utils.logging import (
    JSONFormatter,
    StructuredLogger,
    get_logger,
    log_context,
    request_id_var,
)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord("dto_partials.test", logging.INFO, __file__, 1, "Resolved", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_get_logger_is_cached():
    logger = get_logger("dto_partials.test")

    assert isinstance(logger, StructuredLogger)
    assert get_logger("dto_partials.test") is logger


def test_log_context_binds_request_id():
    with log_context("abc") as request_id:
        assert request_id == "abc"
        assert request_id_var.get() == "abc"
    assert request_id_var.get() == ""

    with log_context() as generated:
        assert generated


def test_json_formatter_output():
    formatter = JSONFormatter()

    with log_context("req-1"):
        output = json.loads(formatter.format(make_record(data_class="SongData")))

    assert output["message"] == "Resolved"
    assert output["level"] == "INFO"
    assert output["logger"] == "dto_partials.test"
    assert output["service"] == "dto-partials"
    assert output["request_id"] == "req-1"
    assert output["data_class"] == "SongData"
    assert "timestamp" in output


def test_structured_logger_passes_extra_fields(caplog):
    logger = get_logger("dto_partials.test")

    with caplog.at_level(logging.DEBUG, logger="dto_partials.test"):
        logger.debug("Resolved", extra={"data_class": "SongData"}, depth=2)
        assert logger.is_enabled_for(logging.DEBUG)

    record = caplog.records[-1]
    assert record.data_class == "SongData"
    assert record.depth == 2


def test_setup_logging_text_format(monkeypatch, tmp_path):
    monkeypatch.setattr(data_logging, "_logging_configured", False)
    root_logger = logging.getLogger()
    handlers, level = root_logger.handlers[:], root_logger.level

    try:
        log_file = tmp_path / "logs" / "partials.log"
        data_logging.setup_logging("warning", "text", str(log_file), enable_console=False)

        assert root_logger.level == logging.WARNING
        assert log_file.parent.exists()
        assert any(isinstance(handler, logging.FileHandler) for handler in root_logger.handlers)
    finally:
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        for handler in handlers:
            root_logger.addHandler(handler)
        root_logger.setLevel(level)
