"""
Matching of record attributes against a single rule set
"""

from enum import Enum
from typing import FrozenSet, Optional, Sequence

from ..attributes import Attribute
from .rules import RuleSet


class MatchPolicy(Enum):
    """How the keys of a rule set combine"""

    ALL_KEYS = "all_keys"  # every key must be matched (allow rules)
    ANY_KEY = "any_key"  # one matched key is enough (deny rules)


class AttributeMatcher:
    """
    Evaluate attributes against one rule set under a fixed policy

    Within a key, any acceptable value matches, and when a key repeats in
    the record any occurrence may supply the match. An absent or empty rule
    set always satisfies ALL_KEYS and never satisfies ANY_KEY.
    """

    def __init__(self, rules: Optional[RuleSet], policy: MatchPolicy):
        self.rules = rules
        self.policy = policy

    def __repr__(self) -> str:
        return f"AttributeMatcher({self.rules!r}, {self.policy.name})"

    def matches(self, attributes: Sequence[Attribute]) -> bool:
        if self.policy is MatchPolicy.ANY_KEY:
            return self.first_match(attributes) is not None
        return not self.unmatched_keys(attributes)

    def first_match(self, attributes: Sequence[Attribute]) -> Optional[Attribute]:
        """First attribute accepted by the rule set, if any"""
        if not self.rules:
            return None
        accepts = self.rules.accepts
        for key, value in attributes:
            if accepts(key, value):
                return key, value
        return None

    def unmatched_keys(self, attributes: Sequence[Attribute]) -> FrozenSet[str]:
        """Rule keys for which no attribute supplied an acceptable value"""
        if not self.rules:
            return frozenset()
        pending = set(self.rules)
        accepts = self.rules.accepts
        for key, value in attributes:
            if key in pending and accepts(key, value):
                pending.discard(key)
                if not pending:
                    break
        return frozenset(pending)
