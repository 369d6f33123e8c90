"""
Pass/drop decision for a single record
"""

from typing import TYPE_CHECKING, Optional

from ..attributes import Attributes, as_pairs
from ..levels import LevelLike, Severity
from .base import Decision, FilterResult
from .matcher import AttributeMatcher, MatchPolicy
from .rules import RuleSet, RuleSource

if TYPE_CHECKING:
    from .config import KVFilterConfig

SEVERITY_BYPASS = "severity_bypass"
DENIED = "denied"
ALLOWED = "allowed"
NO_ALLOW_RULES = "no_allow_rules"
MISSING_KEYS = "missing_keys"


def _level_value(level: LevelLike) -> int:
    if isinstance(level, int) and not isinstance(level, bool):
        return int(level)
    return Severity.coerce(level).value


class Evaluator:
    """
    Decide whether a record at a given level with given attributes is logged

    1. Levels strictly more severe than the threshold always pass.
    2. Otherwise a record matching any deny rule is dropped.
    3. Otherwise the record passes only if it satisfies every allow rule
       (or no allow rules are configured).

    Threshold and rule sets are fixed at construction, so one instance can
    be shared between threads.
    """

    __slots__ = ("_threshold", "_allow", "_deny")

    def __init__(
        self,
        threshold: LevelLike = Severity.INFO,
        allow_rules: Optional[RuleSource] = None,
        deny_rules: Optional[RuleSource] = None,
    ):
        self._threshold = Severity.coerce(threshold, exact=True)
        self._allow = AttributeMatcher(RuleSet.coerce(allow_rules), MatchPolicy.ALL_KEYS)
        self._deny = AttributeMatcher(RuleSet.coerce(deny_rules), MatchPolicy.ANY_KEY)

    @classmethod
    def from_config(cls, config: "KVFilterConfig") -> "Evaluator":
        return cls(config.threshold, config.allow_rules, config.deny_rules)

    @property
    def threshold(self) -> Severity:
        return self._threshold

    @property
    def allow_rules(self) -> Optional[RuleSet]:
        return self._allow.rules

    @property
    def deny_rules(self) -> Optional[RuleSet]:
        return self._deny.rules

    def __repr__(self) -> str:
        return (
            f"Evaluator(threshold={self._threshold.name}, "
            f"allow_rules={self.allow_rules!r}, deny_rules={self.deny_rules!r})"
        )

    def decide(self, level: LevelLike, attributes: Attributes) -> Decision:
        if _level_value(level) > self._threshold:
            return Decision.PASS

        pairs = as_pairs(attributes)
        if self._deny.matches(pairs):
            return Decision.DROP
        return Decision.of(self._allow.matches(pairs))

    def evaluate(self, level: LevelLike, attributes: Attributes) -> FilterResult:
        """Same decision as ``decide``, explained"""
        value = _level_value(level)
        if value > self._threshold:
            return FilterResult(
                should_log=True,
                reason=f"kv_filter: level {value} above threshold {self._threshold.name}",
                metadata={"outcome": SEVERITY_BYPASS},
            )

        pairs = as_pairs(attributes)
        denied = self._deny.first_match(pairs)
        if denied is not None:
            key, matched = denied
            return FilterResult(
                should_log=False,
                reason=f"kv_filter: denied by {key}={matched}",
                metadata={"outcome": DENIED, "key": key, "value": matched},
            )

        if not self.allow_rules:
            return FilterResult(
                should_log=True,
                reason="kv_filter: no allow rules",
                metadata={"outcome": NO_ALLOW_RULES},
            )

        missing = self._allow.unmatched_keys(pairs)
        if missing:
            return FilterResult(
                should_log=False,
                reason=f"kv_filter: missing required keys {sorted(missing)}",
                metadata={"outcome": MISSING_KEYS, "missing": sorted(missing)},
            )
        return FilterResult(
            should_log=True,
            reason="kv_filter: all allow rules matched",
            metadata={"outcome": ALLOWED},
        )
