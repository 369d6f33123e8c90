"""
Formatters rendering records together with their attributes
"""

from .json_formatter import StructuredFormatter
from .text_formatter import PlainTextFormatter

__all__ = [
    "StructuredFormatter",
    "PlainTextFormatter",
]
