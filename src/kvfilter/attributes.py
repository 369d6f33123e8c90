"""
Attribute sources: anything that can present a record's key/value pairs
"""

import logging
from collections.abc import Mapping
from typing import (
    Any,
    Iterable,
    Iterator,
    Protocol,
    Tuple,
    Union,
    runtime_checkable,
)

from .context import get_context_attributes

Attribute = Tuple[str, str]

CONTEXT_PREFIX = "ctx_"

# Attributes every LogRecord carries; anything else was supplied via ``extra``
_RESERVED_RECORD_FIELDS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}


@runtime_checkable
class AttributeSource(Protocol):
    """Any object able to list its (key, value) attributes in order"""

    def iter_attributes(self) -> Iterable[Tuple[str, Any]]:
        ...


Attributes = Union[AttributeSource, Mapping, Iterable[Tuple[str, Any]]]


def as_pairs(attributes: Attributes) -> Tuple[Attribute, ...]:
    """Materialise attributes as a tuple of string pairs"""
    if attributes is None:
        return ()
    if isinstance(attributes, AttributeSource):
        items: Iterable[Tuple[str, Any]] = attributes.iter_attributes()
    elif isinstance(attributes, Mapping):
        items = attributes.items()
    else:
        items = attributes
    return tuple(
        (key if isinstance(key, str) else str(key),
         value if isinstance(value, str) else str(value))
        for key, value in items
    )


def iter_record_fields(record: logging.LogRecord) -> Iterator[Tuple[str, Any]]:
    """Structured fields attached to the record itself"""
    for key, value in record.__dict__.items():
        if key.startswith(CONTEXT_PREFIX):
            yield key[len(CONTEXT_PREFIX):], value
        elif key not in _RESERVED_RECORD_FIELDS and not key.startswith("_"):
            yield key, value


def record_attributes(
    record: logging.LogRecord, include_context: bool = True
) -> Tuple[Attribute, ...]:
    """The record's own fields followed by those inherited from the context"""
    fields = tuple(iter_record_fields(record))
    if include_context:
        fields += get_context_attributes()
    return as_pairs(fields)


class RecordAttributes:
    """AttributeSource view over a LogRecord"""

    def __init__(self, record: logging.LogRecord, include_context: bool = True):
        self.record = record
        self.include_context = include_context

    def iter_attributes(self) -> Iterable[Tuple[str, Any]]:
        return record_attributes(self.record, self.include_context)
