"""
Performance utilities for filtered logging
"""

import time
from datetime import datetime
from typing import Callable, Dict


def create_timestamp_func(resolution: float = 0.001) -> Callable[[], str]:
    """
    Create a closure that reuses the last ISO timestamp within ``resolution`` seconds
    """
    last_time = 0.0
    last_timestamp = ""

    def timestamp() -> str:
        nonlocal last_time, last_timestamp

        current_time = time.perf_counter()
        if current_time - last_time < resolution:
            return last_timestamp

        last_time = current_time
        last_timestamp = datetime.now().isoformat() + "Z"
        return last_timestamp

    return timestamp


_timestamp = create_timestamp_func()


def fast_timestamp() -> str:
    """Cached ISO-8601 timestamp, refreshed at most once per millisecond"""
    return _timestamp()


def measure_function_performance(func: Callable, iterations: int = 1000) -> Dict[str, float]:
    """
    Measure function performance over multiple iterations

    Args:
        func: Function to measure
        iterations: Number of iterations per sample

    Returns:
        Dictionary with mean/min/max milliseconds per call and throughput
    """
    times = []

    for _ in range(5):
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        end = time.perf_counter()
        times.append((end - start) / iterations * 1000)

    mean = sum(times) / len(times)
    return {
        "mean_ms": mean,
        "min_ms": min(times),
        "max_ms": max(times),
        "throughput_per_sec": 1000 / mean if mean else float("inf"),
    }
