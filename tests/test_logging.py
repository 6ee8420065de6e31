import json
import logging
import sys

from app.logging import JsonFormatter, configure_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "app.services.link_service", logging.INFO, __file__, 10, "Share link %s", ("made",), None
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_renders_message_and_extras() -> None:
    line = JsonFormatter().format(_record(share_link="https://viewer.example/v?data=e30%3D"))

    payload = json.loads(line)
    assert payload["level"] == "INFO"
    assert payload["message"] == "Share link made"
    assert payload["logger"] == "app.services.link_service"
    assert payload["share_link"] == "https://viewer.example/v?data=e30%3D"
    assert "pathname" not in payload
    assert "args" not in payload


def test_json_formatter_includes_exception() -> None:
    try:
        raise RuntimeError("upstream down")
    except RuntimeError:
        record = _record()
        record.exc_info = sys.exc_info()

    payload = json.loads(JsonFormatter().format(record))

    assert "RuntimeError: upstream down" in payload["exc_info"]


def test_configure_logging_sets_level_and_handler() -> None:
    configure_logging("warning")

    root_logger = logging.getLogger()
    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == 1
    assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)
