"""
Key/value log filtering: severity threshold plus allow and deny rule sets
"""

from .base import Decision, FilterResult
from .config import KVFilterConfig
from .evaluator import Evaluator
from .log_filter import KVLogFilter
from .matcher import AttributeMatcher, MatchPolicy
from .rules import RuleSet, RuleSetError

__all__ = [
    "Decision",
    "FilterResult",
    "RuleSet",
    "RuleSetError",
    "MatchPolicy",
    "AttributeMatcher",
    "Evaluator",
    "KVFilterConfig",
    "KVLogFilter",
]
