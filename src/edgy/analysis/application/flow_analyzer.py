"""
Flow analyzer.

Looks at prototype connections across the whole batch of screens:
- dead end: a screen without outgoing connections
- orphan: a screen no connection in the batch points to

A screen can be both (an isolated start screen); it is then listed twice,
once in each list.
"""

from typing import List, Sequence

from edgy.analysis.domain.models import FlowIssues, Screen


class FlowAnalyzer:
    """Finds dead ends and orphans in a complete screen batch."""

    def analyze(self, screens: Sequence[Screen]) -> FlowIssues:
        return FlowIssues(
            dead_ends=self.find_dead_ends(screens),
            orphan_screens=self.find_orphans(screens),
        )

    @staticmethod
    def find_dead_ends(screens: Sequence[Screen]) -> List[str]:
        return [s.name for s in screens if not s.connections]

    @staticmethod
    def find_orphans(screens: Sequence[Screen]) -> List[str]:
        targeted = {c.target_frame_id for s in screens for c in s.outgoing}
        return [s.name for s in screens if s.id not in targeted]
