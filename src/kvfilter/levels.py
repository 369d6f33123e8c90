"""
Severity levels used by key/value filtering
"""

import logging
from enum import IntEnum
from typing import Union

TRACE = 5

logging.addLevelName(TRACE, "TRACE")

LevelLike = Union["Severity", str, int]


class Severity(IntEnum):
    """Fixed, totally ordered log severities (values match the logging module)"""

    TRACE = TRACE
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    def is_more_severe_than(self, other: "Severity") -> bool:
        return self.value > other.value

    @classmethod
    def from_levelno(cls, levelno: int) -> "Severity":
        """Map any logging level number onto the nearest member at or below it"""
        for member in sorted(cls, reverse=True):
            if levelno >= member.value:
                return member
        return cls.TRACE

    @classmethod
    def coerce(cls, level: LevelLike, exact: bool = False) -> "Severity":
        """
        Severity for a member, a level name or a level number

        With ``exact`` a level number must be one of the members' values
        instead of being rounded down to the nearest one.
        """
        if isinstance(level, cls):
            return level
        if isinstance(level, str):
            name = level.strip().upper()
            name = _ALIASES.get(name, name)
            try:
                return cls[name]
            except KeyError:
                raise ValueError(f"Unknown severity level: {level!r}") from None
        if isinstance(level, int) and not isinstance(level, bool):
            if exact and level not in cls._value2member_map_:
                raise ValueError(f"Not a severity level: {level!r}")
            return cls.from_levelno(level)
        raise ValueError(f"Unknown severity level: {level!r}")


_ALIASES = {"WARN": "WARNING", "FATAL": "CRITICAL"}
