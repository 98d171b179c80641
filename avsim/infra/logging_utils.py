import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Union


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        if hasattr(record, "extra_data"):
            payload.update(getattr(record, "extra_data"))
        return json.dumps(payload)


def configure_logging(level: Union[int, str] = logging.WARNING) -> logging.Logger:
    logger = logging.getLogger("avsim")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    if not logger.handlers:
        # stdout belongs to the console session
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(JsonFormatter())
        logger.addHandler(handler)
    return logger


LOGGER = configure_logging()
