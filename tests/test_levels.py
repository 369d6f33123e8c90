import logging

import pytest

from kvfilter.levels import TRACE, Severity


def test_total_order():
    ordered = [
        Severity.TRACE,
        Severity.DEBUG,
        Severity.INFO,
        Severity.WARNING,
        Severity.ERROR,
        Severity.CRITICAL,
    ]
    assert sorted(Severity) == ordered
    assert Severity.CRITICAL.is_more_severe_than(Severity.ERROR)
    assert not Severity.INFO.is_more_severe_than(Severity.INFO)


def test_values_match_logging_module():
    assert Severity.TRACE == TRACE == 5
    assert Severity.DEBUG == logging.DEBUG
    assert Severity.INFO == logging.INFO
    assert Severity.CRITICAL == logging.CRITICAL


def test_coerce_names():
    assert Severity.coerce("info") is Severity.INFO
    assert Severity.coerce(" Trace ") is Severity.TRACE
    assert Severity.coerce("WARN") is Severity.WARNING
    assert Severity.coerce("fatal") is Severity.CRITICAL
    assert Severity.coerce(Severity.ERROR) is Severity.ERROR


def test_coerce_level_numbers():
    assert Severity.coerce(logging.WARNING) is Severity.WARNING
    assert Severity.coerce(25) is Severity.INFO
    assert Severity.coerce(1) is Severity.TRACE
    assert Severity.coerce(100) is Severity.CRITICAL


def test_coerce_rejects_unknown():
    with pytest.raises(ValueError):
        Severity.coerce("verbose")
    with pytest.raises(ValueError):
        Severity.coerce(None)


def test_trace_level_name_registered():
    assert logging.getLevelName(TRACE) == "TRACE"
    assert logging.getLevelName("TRACE") == TRACE


def test_exact_coerce_rejects_in_between_numbers():
    assert Severity.coerce(logging.INFO, exact=True) is Severity.INFO
    assert Severity.coerce("debug", exact=True) is Severity.DEBUG
    with pytest.raises(ValueError):
        Severity.coerce(25, exact=True)
