"""
kvfilter

Severity threshold plus key/value allow and deny rules for Python logging.
Records more severe than the threshold always pass; below it, a record
matching any deny rule is dropped and otherwise must match every allow rule.
"""

__version__ = "0.1.0"

from .attributes import AttributeSource, RecordAttributes, as_pairs, record_attributes
from .config import (
    FormatterType,
    LoggerConfig,
    OutputType,
    get_default_config,
    set_default_config,
)
from .context import (
    bind_attributes,
    get_bound_attributes,
    get_context_attributes,
    get_request_id,
    request_context,
    set_bound_attributes,
    set_request_id,
)
from .filtering import (
    AttributeMatcher,
    Decision,
    Evaluator,
    FilterResult,
    KVFilterConfig,
    KVLogFilter,
    MatchPolicy,
    RuleSet,
    RuleSetError,
)
from .formatter import PlainTextFormatter, StructuredFormatter
from .handlers import KVFilterHandler, Sink, create_filtered_logger, wrap_handlers
from .levels import TRACE, Severity
from .logger import (
    get_filter_metrics,
    get_logger,
    log_with_context,
    reset_filter_metrics,
)

__all__ = [
    # Levels
    "Severity",
    "TRACE",
    # Attributes and context
    "AttributeSource",
    "RecordAttributes",
    "as_pairs",
    "record_attributes",
    "bind_attributes",
    "get_bound_attributes",
    "get_context_attributes",
    "get_request_id",
    "request_context",
    "set_bound_attributes",
    "set_request_id",
    # Filtering
    "AttributeMatcher",
    "Decision",
    "Evaluator",
    "FilterResult",
    "KVFilterConfig",
    "KVLogFilter",
    "MatchPolicy",
    "RuleSet",
    "RuleSetError",
    # Handlers
    "KVFilterHandler",
    "Sink",
    "create_filtered_logger",
    "wrap_handlers",
    # Configuration
    "FormatterType",
    "LoggerConfig",
    "OutputType",
    "get_default_config",
    "set_default_config",
    # Formatters
    "PlainTextFormatter",
    "StructuredFormatter",
    # Logger
    "get_logger",
    "log_with_context",
    "get_filter_metrics",
    "reset_filter_metrics",
]
