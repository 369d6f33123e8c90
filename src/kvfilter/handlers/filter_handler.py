"""
Handler that forwards or drops records using key/value rules
"""

import logging
import threading
from collections import defaultdict
from typing import Any, Dict, Optional, Protocol, Union

from ..attributes import RecordAttributes
from ..filtering import Evaluator, KVFilterConfig
from ..filtering.rules import RuleSource
from ..levels import LevelLike, Severity


class Sink(Protocol):
    """Anything records can be handed to: a logging.Handler or look-alike"""

    def handle(self, record: logging.LogRecord) -> Any:
        ...


class KVFilterHandler(logging.Handler):
    """
    Wrap a downstream handler and forward only the records the rules accept

    Records strictly more severe than ``threshold`` are always forwarded.
    Below that, a record matching any deny rule is dropped, and otherwise it
    must match every allow rule. Dropped records are reported as handled;
    errors raised by the sink propagate unchanged. Rule matching sees the
    record's own fields together with the attributes bound to the logging
    context at the call site.

    Calls into the sink are not serialised by this handler.
    """

    def __init__(
        self,
        sink: Union[logging.Handler, Sink],
        threshold: LevelLike = Severity.INFO,
        allow_rules: Optional[RuleSource] = None,
        deny_rules: Optional[RuleSource] = None,
        include_context: bool = True,
        collect_metrics: bool = True,
        enabled: bool = True,
    ):
        super().__init__()
        self.sink = sink
        self.evaluator = Evaluator(threshold, allow_rules, deny_rules)
        self.include_context = include_context
        self.collect_metrics = collect_metrics
        self.enabled = enabled

        self._metrics_lock = threading.Lock()
        self.metrics: Dict[str, int] = defaultdict(int)
        self._outcomes: Dict[str, int] = defaultdict(int)

    @classmethod
    def from_config(
        cls,
        sink: Union[logging.Handler, Sink],
        config: KVFilterConfig,
        include_context: bool = True,
    ) -> "KVFilterHandler":
        return cls(
            sink,
            threshold=config.threshold,
            allow_rules=config.allow_rules,
            deny_rules=config.deny_rules,
            include_context=include_context,
            collect_metrics=config.collect_metrics,
            enabled=config.enabled,
        )

    @property
    def threshold(self) -> Severity:
        return self.evaluator.threshold

    def _derive(self, **changes: Any) -> "KVFilterHandler":
        settings = dict(
            threshold=self.evaluator.threshold,
            allow_rules=self.evaluator.allow_rules,
            deny_rules=self.evaluator.deny_rules,
            include_context=self.include_context,
            collect_metrics=self.collect_metrics,
            enabled=self.enabled,
        )
        settings.update(changes)
        derived = type(self)(self.sink, **settings)
        derived.setLevel(self.level)
        derived.formatter = self.formatter
        for log_filter in self.filters:
            derived.addFilter(log_filter)
        return derived

    def with_allow_rules(self, rules: Optional[RuleSource]) -> "KVFilterHandler":
        """New handler over the same sink with ``rules`` as the allow rules"""
        return self._derive(allow_rules=rules)

    def with_deny_rules(self, rules: Optional[RuleSource]) -> "KVFilterHandler":
        """New handler over the same sink with ``rules`` as the deny rules"""
        return self._derive(deny_rules=rules)

    def handle(self, record: logging.LogRecord) -> Any:
        rv = self.filter(record)
        if not rv:
            return rv
        if isinstance(rv, logging.LogRecord):
            record = rv

        if self.enabled and not self._should_forward(record):
            return True
        return self._forward(record)

    def emit(self, record: logging.LogRecord) -> None:
        self._forward(record)

    def _should_forward(self, record: logging.LogRecord) -> bool:
        attributes = RecordAttributes(record, self.include_context)
        if not self.collect_metrics:
            return bool(self.evaluator.decide(record.levelno, attributes))

        result = self.evaluator.evaluate(record.levelno, attributes)
        with self._metrics_lock:
            self.metrics["total_evaluated"] += 1
            self.metrics["passed_through" if result.should_log else "filtered_out"] += 1
            self._outcomes[result.metadata["outcome"]] += 1
        return result.should_log

    def _forward(self, record: logging.LogRecord) -> Any:
        # Mirror Logger.callHandlers: the sink's own level still applies
        if record.levelno < getattr(self.sink, "level", logging.NOTSET):
            return False
        return self.sink.handle(record)

    def setFormatter(self, fmt: Optional[logging.Formatter]) -> None:
        super().setFormatter(fmt)
        if isinstance(self.sink, logging.Handler):
            self.sink.setFormatter(fmt)

    def flush(self) -> None:
        flush = getattr(self.sink, "flush", None)
        if flush is not None:
            flush()

    def close(self) -> None:
        try:
            close = getattr(self.sink, "close", None)
            if close is not None:
                close()
        finally:
            super().close()

    def get_metrics(self) -> Dict[str, Any]:
        """Get filtering metrics"""
        with self._metrics_lock:
            total_evaluated = self.metrics.get("total_evaluated", 0)
            passed_through = self.metrics.get("passed_through", 0)
            filtered_out = self.metrics.get("filtered_out", 0)
            outcomes = dict(self._outcomes)

        return {
            "summary": {
                "total_evaluated": total_evaluated,
                "passed_through": passed_through,
                "filtered_out": filtered_out,
            },
            "outcomes": outcomes,
            "pass_rate": passed_through / max(1, total_evaluated),
        }

    def reset_metrics(self):
        """Reset all metrics"""
        with self._metrics_lock:
            self.metrics.clear()
            self._outcomes.clear()

    def __repr__(self) -> str:
        level = logging.getLevelName(self.level)
        return f"<{self.__class__.__name__} {self.sink!r} threshold={self.threshold.name} ({level})>"
