"""
Utility functions for key/value filtering handlers
"""

import logging
from typing import List, Optional

from ..filtering import KVFilterConfig
from ..levels import TRACE
from .filter_handler import KVFilterHandler


def wrap_handlers(
    logger: logging.Logger, config: KVFilterConfig
) -> List[KVFilterHandler]:
    """
    Put every handler of ``logger`` behind a KVFilterHandler

    Handlers that are already filter stages are left alone.

    Returns:
        The filter stages now attached to the logger
    """
    stages = []
    for handler in logger.handlers[:]:
        if isinstance(handler, KVFilterHandler):
            stages.append(handler)
            continue
        stage = KVFilterHandler.from_config(handler, config)
        logger.removeHandler(handler)
        logger.addHandler(stage)
        stages.append(stage)
    return stages


def create_filtered_logger(
    name: str,
    sink: logging.Handler,
    config: KVFilterConfig,
    formatter: Optional[logging.Formatter] = None,
) -> logging.Logger:
    """
    Create a logger whose only handler is ``sink`` behind a KVFilterHandler

    Args:
        name: Logger name
        sink: Downstream handler receiving accepted records
        config: Threshold and rule sets
        formatter: Optional formatter for the sink

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    if formatter:
        sink.setFormatter(formatter)
    elif sink.formatter is None:
        sink.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(KVFilterHandler.from_config(sink, config))
    logger.setLevel(TRACE)

    return logger
