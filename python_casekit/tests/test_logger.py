import json
import logging
import os
import sys

# ensure project root on path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from utils.logger import JsonFormatter, setup_logging
from utils.string_case import to_camel_case


def _record(msg: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord("casekit.test", logging.WARNING, __file__, 1, msg, None, None)
    record.__dict__.update(extra)
    return record


def test_json_formatter_fields():
    formatter = JsonFormatter(service="casekit-test")
    entry = json.loads(formatter.format(_record("converted", data={"style": "camelCase"})))
    assert entry["level"] == "WARNING"
    assert entry["logger"] == "casekit.test"
    assert entry["message"] == "converted"
    assert entry["service"] == "casekit-test"
    assert entry["data"] == {"style": "camelCase"}
    assert "timestamp" in entry


def test_json_formatter_includes_exception():
    formatter = JsonFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "casekit.test", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )
    entry = json.loads(formatter.format(record))
    assert "ValueError: boom" in entry["exception"]


def test_setup_logging_json_from_settings(restore_root_logger, override_settings):
    settings = override_settings()
    handler = setup_logging(format_type="json")
    assert isinstance(handler.formatter, JsonFormatter)
    assert handler.formatter.service == settings.name
    assert restore_root_logger.handlers == [handler]


def test_setup_logging_text(restore_root_logger):
    handler = setup_logging(level="debug", format_type="text")
    assert not isinstance(handler.formatter, JsonFormatter)
    assert restore_root_logger.level == logging.DEBUG


def test_conversions_log_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="utils.string_case"):
        to_camel_case("hello world")
    assert "helloWorld" in caplog.text
