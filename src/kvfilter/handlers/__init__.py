"""
Handlers that place key/value filtering in front of other handlers
"""

from .filter_handler import KVFilterHandler, Sink
from .utils import create_filtered_logger, wrap_handlers

__all__ = [
    "KVFilterHandler",
    "Sink",
    "create_filtered_logger",
    "wrap_handlers",
]
