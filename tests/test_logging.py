import json
import logging

from avsim.infra.logging_utils import JsonFormatter, configure_logging


def test_json_formatter_merges_extra_data() -> None:
    record = logging.LogRecord("avsim", logging.INFO, __file__, 1, "Loaded file", None, None)
    record.extra_data = {"file": "a.exe", "size": 3}
    payload = json.loads(JsonFormatter().format(record))
    assert payload["message"] == "Loaded file"
    assert payload["level"] == "INFO"
    assert payload["file"] == "a.exe"
    assert payload["timestamp"].endswith("Z")


def test_configure_logging_is_idempotent() -> None:
    logger = configure_logging("debug")
    handlers = list(logger.handlers)
    assert configure_logging(logging.WARNING) is logger
    assert logger.handlers == handlers
    assert logger.level == logging.WARNING
