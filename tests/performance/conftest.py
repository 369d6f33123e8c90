"""
Configuration for performance tests
"""

import pytest


def pytest_collection_modifyitems(config, items):
    """Mark everything under performance/ as a performance test"""
    for item in items:
        if "performance" in str(item.fspath):
            item.add_marker(pytest.mark.performance)


@pytest.fixture(scope="session")
def performance_config():
    """Throughput floors for performance tests"""
    return {
        "min_decisions_per_sec": 50000,  # bare Evaluator.decide calls
        "min_filtered_logs_per_sec": 10000,  # records through a filtered logger
        "max_filter_overhead": 300,  # % overhead of filtering vs. plain logging
    }
