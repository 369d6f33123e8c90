"""
Configuration for key/value log filtering
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional

from ..levels import LevelLike, Severity
from .rules import RuleSet, RuleSource

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KVFilterConfig:
    """
    Threshold plus allow/deny rule sets

    Mappings given for the rule sets are validated and frozen into RuleSet
    instances. ``with_allow_rules`` / ``with_deny_rules`` return modified
    copies; passing None clears the corresponding rule set.
    """

    threshold: LevelLike = Severity.INFO
    allow_rules: Optional[RuleSource] = None
    deny_rules: Optional[RuleSource] = None
    enabled: bool = True
    collect_metrics: bool = True

    def __post_init__(self):
        object.__setattr__(
            self, "threshold", Severity.coerce(self.threshold, exact=True)
        )
        object.__setattr__(self, "allow_rules", RuleSet.coerce(self.allow_rules))
        object.__setattr__(self, "deny_rules", RuleSet.coerce(self.deny_rules))
        logger.debug(
            "kv filter configured: threshold=%s allow_keys=%s deny_keys=%s",
            self.threshold.name,
            sorted(self.allow_rules or ()),
            sorted(self.deny_rules or ()),
        )

    def with_allow_rules(self, rules: Optional[RuleSource]) -> "KVFilterConfig":
        return replace(self, allow_rules=rules)

    def with_deny_rules(self, rules: Optional[RuleSource]) -> "KVFilterConfig":
        return replace(self, deny_rules=rules)

    def with_threshold(self, threshold: LevelLike) -> "KVFilterConfig":
        return replace(self, threshold=threshold)
