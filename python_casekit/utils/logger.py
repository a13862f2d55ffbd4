import logging
import json
import sys
from typing import Any, Dict, Optional
from datetime import datetime, timezone

from common.config import get_settings

class JsonFormatter(logging.Formatter):
    """
    Formatter that outputs one JSON object per LogRecord.
    """

    def __init__(self, service: str = "casekit", **kwargs):
        super().__init__(**kwargs)
        self.service = service

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service,
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.__dict__.get("data"):
            log_entry["data"] = record.__dict__["data"]

        return json.dumps(log_entry, default=str)

def setup_logging(
    level: Optional[str] = None,
    format_type: Optional[str] = None,
    service: Optional[str] = None,
):
    """
    Configures the root logger. Arguments left as None come from settings.
    """
    settings = get_settings()
    level = level or settings.logging.level
    format_type = format_type or settings.logging.format
    service = service or settings.name

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if format_type.lower() == "json":
        formatter = JsonFormatter(service=service)
        handler.setFormatter(formatter)
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )
        handler.setFormatter(formatter)

    root_logger.addHandler(handler)
    return handler
