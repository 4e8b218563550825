"""
Edge case checker.

Decides, per detected pattern, which required edge cases a screen is
missing. An edge case counts as present when the flattened text contains:

1. its id with dashes replaced by spaces ("form-loading" -> "form loading")
2. any of its suggested component names, lowercased
3. any common indicator word ("error", "loading", "empty", ...)

Rule 3 is screen-wide: one indicator word anywhere on the screen marks
every edge case of every detected pattern as present.
"""

from typing import Any, Iterable, List, Optional, Sequence

from edgy.analysis.domain.models import Issue
from edgy.knowledge.domain.models import EdgeCase, Pattern
from edgy.shared.infrastructure.config import settings


class EdgeCaseChecker:
    """Emits an Issue for every required edge case without an indicator."""

    def __init__(self, common_indicators: Optional[Sequence[str]] = None):
        indicators = common_indicators if common_indicators is not None else settings.common_indicators
        self.common_indicators = [i.lower() for i in indicators]

    def has_common_indicator(self, text: str) -> bool:
        return any(indicator in text for indicator in self.common_indicators)

    @staticmethod
    def edge_case_indicators(edge_case: EdgeCase) -> List[str]:
        return [edge_case.search_phrase.lower()] + [c.lower() for c in edge_case.suggested_components]

    def is_present(self, edge_case: EdgeCase, text: str) -> bool:
        if any(indicator in text for indicator in self.edge_case_indicators(edge_case)):
            return True
        return self.has_common_indicator(text)

    def check(self, screen: Any, text: str, patterns: Iterable[Pattern]) -> List[Issue]:
        """
        Build the issues for one screen.

        Args:
            screen: Screen the text was flattened from (id and name are copied into issues)
            text: Lowercase flattened screen text
            patterns: Patterns detected on the screen

        Returns:
            Issues in pattern order, then edge case order
        """
        issues: List[Issue] = []
        for pattern in patterns:
            for edge_case in pattern.required_edge_cases:
                if self.is_present(edge_case, text):
                    continue
                issues.append(self._build_issue(screen, pattern, edge_case))
        return issues

    @staticmethod
    def _build_issue(screen: Any, pattern: Pattern, edge_case: EdgeCase) -> Issue:
        return Issue(
            id=f"{edge_case.id}-{screen.id}",
            pattern_id=pattern.id,
            edge_case_id=edge_case.id,
            name=edge_case.name,
            description=edge_case.description or f"Missing {edge_case.name}",
            severity=edge_case.severity,
            suggested_components=list(edge_case.suggested_components),
            screen_id=screen.id,
            screen_name=screen.name,
        )
