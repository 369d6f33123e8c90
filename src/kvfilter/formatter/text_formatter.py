"""
Plain text formatter for key/value structured records
"""

import logging
from typing import Optional

from ..attributes import iter_record_fields
from ..config import LoggerConfig, get_default_config
from ..context import get_context_attributes
from ..performance import fast_timestamp


class PlainTextFormatter(logging.Formatter):
    """``[timestamp] LEVEL logger message (key=value, ...)``"""

    def __init__(self, config: Optional[LoggerConfig] = None, max_value_length: int = 100):
        super().__init__()
        self.config = config or get_default_config()
        self.max_value_length = max_value_length

    def format(self, record: logging.LogRecord) -> str:
        parts = []

        if self.config.include_timestamp:
            parts.append(f"[{fast_timestamp()}]")

        parts.extend([record.levelname, record.name, record.getMessage()])

        context_items = []
        for key, value in (*iter_record_fields(record), *get_context_attributes()):
            value_str = str(value)
            # Truncate very long values for readability
            if len(value_str) > self.max_value_length:
                value_str = value_str[: self.max_value_length - 3] + "..."
            context_items.append(f"{key}={value_str}")

        if context_items:
            parts.append(f"({', '.join(context_items)})")

        if record.exc_info:
            parts.append("\n" + self.formatException(record.exc_info))

        return " ".join(parts)
