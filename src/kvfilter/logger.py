import logging
import sys
from collections import defaultdict
from typing import Any, Dict, List, Optional

from .config import LoggerConfig, get_default_config
from .formatter import PlainTextFormatter, StructuredFormatter
from .handlers import KVFilterHandler
from .levels import LevelLike, Severity

_CONTEXT_PREFIX = "ctx_"


def _create_formatter(config: LoggerConfig) -> logging.Formatter:
    if config.formatter_type == "plain":
        return PlainTextFormatter(config)
    return StructuredFormatter(config)


def _create_sinks(config: LoggerConfig) -> List[logging.Handler]:
    """Output handlers requested by the configuration"""
    sinks: List[logging.Handler] = []
    if config.output_type in ("console", "both"):
        sinks.append(logging.StreamHandler(sys.stdout))
    if config.output_type in ("file", "both"):
        sinks.append(logging.FileHandler(config.filename, encoding="utf-8"))
    return sinks


def get_logger(name: str, config: Optional[LoggerConfig] = None) -> logging.Logger:
    """
    Create a logger with the given name

    When the configuration carries an enabled key/value filter, every output
    handler is placed behind a KVFilterHandler.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        config = config or get_default_config()
        logger.setLevel(Severity.coerce(config.log_level).value)

        formatter = _create_formatter(config)
        kv_filter = config.kv_filter

        for sink in _create_sinks(config):
            sink.setFormatter(formatter)
            if kv_filter is not None and kv_filter.enabled:
                logger.addHandler(KVFilterHandler.from_config(sink, kv_filter))
            else:
                logger.addHandler(sink)

        logger.propagate = True

    return logger


def log_with_context(
    logger: logging.Logger,
    level: LevelLike,
    message: str,
    **extra: Any,
) -> None:
    """Log ``message`` with ``extra`` attached as record attributes"""
    levelno = int(level) if isinstance(level, int) else Severity.coerce(level).value
    ctx_extra = {
        f"{_CONTEXT_PREFIX}{key}": value
        for key, value in extra.items()
        if value is not None
    }
    logger.log(levelno, message, extra=ctx_extra)


def _filter_stages(logger: logging.Logger) -> List[KVFilterHandler]:
    return [h for h in logger.handlers if isinstance(h, KVFilterHandler)]


def get_filter_metrics(logger: logging.Logger) -> Optional[Dict[str, Any]]:
    """Combined metrics of the filter stages attached to ``logger``"""
    stages = _filter_stages(logger)
    if not stages:
        return None

    summary: Dict[str, int] = defaultdict(int)
    outcomes: Dict[str, int] = defaultdict(int)
    for stage in stages:
        metrics = stage.get_metrics()
        for key, value in metrics["summary"].items():
            summary[key] += value
        for key, value in metrics["outcomes"].items():
            outcomes[key] += value

    return {
        "summary": {
            "total_evaluated": summary["total_evaluated"],
            "passed_through": summary["passed_through"],
            "filtered_out": summary["filtered_out"],
        },
        "outcomes": dict(outcomes),
        "pass_rate": summary["passed_through"] / max(1, summary["total_evaluated"]),
    }


def reset_filter_metrics(logger: logging.Logger) -> None:
    """Reset metrics of the filter stages attached to ``logger``"""
    for stage in _filter_stages(logger):
        stage.reset_metrics()
