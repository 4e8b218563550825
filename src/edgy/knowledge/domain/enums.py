"""
Knowledge base enums.

Severity values match the plugin's TypeScript union:
    severity: 'critical' | 'warning' | 'info'
"""

from enum import Enum


class EdgeCaseSeverity(str, Enum):
    """
    Severity of a missing edge case.

    - CRITICAL: users get stuck or lose data without this state
    - WARNING: users get confused without this state
    - INFO: polish, nice to have
    """

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @classmethod
    def parse(cls, value: "str | EdgeCaseSeverity") -> "EdgeCaseSeverity":
        """Coerce a raw severity string, rejecting anything outside the three levels."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = tuple(s.value for s in cls)
            raise ValueError(f"Invalid severity: {value}. Must be one of {valid}") from None
