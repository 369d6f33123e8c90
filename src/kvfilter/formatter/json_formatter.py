"""
JSON formatter for key/value structured records
"""

import json
import logging
from typing import Any, Dict, Optional

from ..attributes import iter_record_fields
from ..config import LoggerConfig, get_default_config
from ..context import get_context_attributes
from ..performance import fast_timestamp


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: level, logger, message and attributes"""

    def __init__(self, config: Optional[LoggerConfig] = None):
        super().__init__()
        self.config = config or get_default_config()

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if self.config.include_timestamp:
            log_entry["timestamp"] = fast_timestamp()

        # Context first so the record's own fields win on key clashes
        for key, value in get_context_attributes():
            log_entry.setdefault(key, value)
        for key, value in iter_record_fields(record):
            if key not in ("level", "logger", "message", "timestamp"):
                log_entry[key] = value

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, separators=(",", ":"), default=str)
