"""
Rule sets: which values of which keys a filter is looking for
"""

from collections.abc import Mapping
from typing import Dict, FrozenSet, Iterable, Iterator, Optional, Tuple, Union

RuleSource = Union["RuleSet", Mapping, Iterable[Tuple[str, Iterable[str]]]]


class RuleSetError(ValueError):
    """Exception raised when a rule set is malformed"""

    pass


class RuleSet(Mapping):
    """
    Immutable mapping from attribute key to the set of acceptable values

    Accepts either a mapping or an iterable of ``(key, values)`` pairs.
    Registering the same key twice, an empty value set or non-string
    keys/values are rejected with RuleSetError.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Optional[RuleSource] = None):
        if isinstance(rules, RuleSet):
            self._rules: Dict[str, FrozenSet[str]] = rules._rules
            return

        items = rules.items() if isinstance(rules, Mapping) else (rules or ())
        built: Dict[str, FrozenSet[str]] = {}
        for entry in items:
            try:
                key, values = entry
            except (TypeError, ValueError):
                raise RuleSetError(
                    f"Rule entries must be (key, values) pairs, got {entry!r}"
                ) from None
            key = _check_key(key)
            if key in built:
                raise RuleSetError(f"Duplicate rule key: {key!r}")
            built[key] = _check_values(key, values)
        self._rules = built

    def __getitem__(self, key: str) -> FrozenSet[str]:
        return self._rules[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __hash__(self) -> int:
        return hash(frozenset(self._rules.items()))

    def __repr__(self) -> str:
        body = ", ".join(
            f"{key!r}: {sorted(values)!r}" for key, values in self._rules.items()
        )
        return f"RuleSet({{{body}}})"

    def accepts(self, key: str, value: str) -> bool:
        """True if ``key`` is governed by this set and ``value`` is acceptable"""
        values = self._rules.get(key)
        return values is not None and value in values

    @classmethod
    def coerce(cls, rules: Optional[RuleSource]) -> Optional["RuleSet"]:
        """None stays None (no rules configured); anything else becomes a RuleSet"""
        if rules is None or isinstance(rules, cls):
            return rules
        return cls(rules)

    @classmethod
    def parse(cls, text: str) -> "RuleSet":
        """
        Parse the compact rule syntax used in configuration

        ``"key=v1|v2;other=v3"`` gives ``{"key": {"v1", "v2"}, "other": {"v3"}}``.
        Whitespace around keys and values is ignored.
        """
        pairs = []
        for clause in text.split(";"):
            clause = clause.strip()
            if not clause:
                continue
            key, sep, raw_values = clause.partition("=")
            if not sep or not key.strip():
                raise RuleSetError(f"Malformed rule {clause!r}, expected key=value")
            values = [v.strip() for v in raw_values.split("|") if v.strip()]
            pairs.append((key.strip(), values))
        return cls(pairs)


def _check_key(key: object) -> str:
    if not isinstance(key, str) or not key:
        raise RuleSetError(f"Rule keys must be non-empty strings, got {key!r}")
    return key


def _check_values(key: str, values: object) -> FrozenSet[str]:
    if isinstance(values, (str, bytes)):
        raise RuleSetError(
            f"Values for {key!r} must be a collection of strings, not a single string"
        )
    try:
        frozen = frozenset(values)  # type: ignore[arg-type]
    except TypeError:
        raise RuleSetError(f"Values for {key!r} must be iterable, got {values!r}") from None
    if not frozen:
        raise RuleSetError(f"Empty value set for key {key!r}")
    for value in frozen:
        if not isinstance(value, str):
            raise RuleSetError(f"Values for {key!r} must be strings, got {value!r}")
    return frozen
