import json
import sys
import logging

from wabinary.infra.logger import JsonFormatter, get_logger


def test_json_formatter_includes_encoder_fields() -> None:
    record = logging.LogRecord("wabinary.test", logging.DEBUG, __file__, 1, "encoded %s", ("node",), None)
    record.tag = "iq"
    record.size = 20

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "DEBUG"
    assert payload["logger"] == "wabinary.test"
    assert payload["message"] == "encoded node"
    assert payload["tag"] == "iq"
    assert payload["size"] == 20
    assert "declared" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord("wabinary.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info())

    payload = json.loads(JsonFormatter().format(record))
    assert "RuntimeError: boom" in payload["exception"]


def test_get_logger_attaches_single_handler() -> None:
    logger = get_logger("wabinary.test.single", level=logging.DEBUG)
    get_logger("wabinary.test.single", level=logging.DEBUG)

    json_handlers = [h for h in logger.handlers if isinstance(h.formatter, JsonFormatter)]
    assert len(json_handlers) == 1
    assert logger.level == logging.DEBUG
