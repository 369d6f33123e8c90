"""
Key/value filtering as a standard logging.Filter
"""

import logging
from typing import Union

from ..attributes import RecordAttributes
from .config import KVFilterConfig
from .evaluator import Evaluator


class KVLogFilter(logging.Filter):
    """Attach the key/value decision to any logger or handler via addFilter"""

    def __init__(
        self,
        config: Union[KVFilterConfig, Evaluator, None] = None,
        include_context: bool = True,
    ):
        super().__init__()
        if isinstance(config, Evaluator):
            self.evaluator = config
        else:
            self.evaluator = Evaluator.from_config(config or KVFilterConfig())
        self.include_context = include_context

    def filter(self, record: logging.LogRecord) -> bool:
        return bool(
            self.evaluator.decide(
                record.levelno, RecordAttributes(record, self.include_context)
            )
        )
