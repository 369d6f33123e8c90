"""
Base types for key/value log filtering
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class Decision(Enum):
    """Outcome of filtering a single record"""

    PASS = "pass"
    DROP = "drop"

    def __bool__(self) -> bool:
        return self is Decision.PASS

    @classmethod
    def of(cls, should_log: bool) -> "Decision":
        return cls.PASS if should_log else cls.DROP


@dataclass
class FilterResult:
    """Result of log filtering operation"""

    should_log: bool
    reason: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    @property
    def decision(self) -> Decision:
        return Decision.of(self.should_log)
