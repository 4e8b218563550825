"""
Component library lookup.

Resolves the free-form component names suggested by edge cases
("Button (loading)", "Alert (error)") to shadcn/ui library entries, and
attaches the resulting links to analysis results for the report renderer.

Suggested names without a library entry degrade to a bare name; they never
abort enrichment.
"""

from typing import Any, Dict, List, Optional

from edgy.analysis.domain.models import AnalysisResult, Issue, ScreenAnalysis
from edgy.knowledge.domain.models import ComponentInfo, KnowledgeBase
from edgy.library.models import (
    ComponentLink,
    ComponentSuggestion,
    EnrichedIssue,
    EnrichedScreen,
    LibraryMatch,
)
from edgy.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


class ComponentLibrary:
    """Lookup over the knowledge base's component table."""

    def __init__(self, knowledge_base: KnowledgeBase):
        self.components: List[ComponentInfo] = list(knowledge_base.components)

    def find_component_info(self, suggested_name: str) -> Optional[ComponentInfo]:
        """
        Find the library entry for a suggested component name.

        An entry matches when its name equals the lowercased input, or when
        one of its aliases occurs inside the lowercased input. The first
        matching entry in table order wins.
        """
        normalized = suggested_name.lower()
        for component in self.components:
            if component.name.lower() == normalized:
                return component
            if any(alias in normalized for alias in component.aliases):
                return component
        return None

    def find_component_link(self, suggested_name: str) -> Optional[ComponentLink]:
        info = self.find_component_info(suggested_name)
        if info is None:
            return None
        return ComponentLink(name=info.name, url=info.url)

    def status(self) -> Dict[str, Any]:
        """Library summary shown when the plugin loads."""
        return {
            "available": len(self.components),
            "components": [c.name for c in self.components],
        }

    def match(self, suggested_name: str) -> LibraryMatch:
        link = self.find_component_link(suggested_name)
        if link is None:
            logger.debug("component_not_in_library", suggested_name=suggested_name)
            return LibraryMatch(name=suggested_name)
        return LibraryMatch(name=suggested_name, library_url=link.url, library_name=link.name)

    def enrich_issue(self, issue: Issue) -> EnrichedIssue:
        return EnrichedIssue(
            id=issue.id,
            pattern_id=issue.pattern_id,
            edge_case_id=issue.edge_case_id,
            name=issue.name,
            description=issue.description,
            severity=issue.severity,
            suggested_components=list(issue.suggested_components),
            screen_id=issue.screen_id,
            screen_name=issue.screen_name,
            library_matches=[self.match(c) for c in issue.suggested_components],
        )

    def enrich_screen(self, screen: ScreenAnalysis) -> EnrichedScreen:
        return EnrichedScreen(
            screen_id=screen.screen_id,
            screen_name=screen.screen_name,
            detected_patterns=list(screen.detected_patterns),
            issues=[self.enrich_issue(i) for i in screen.issues],
            missing_states=list(screen.missing_states),
        )

    def enrich_result(self, result: AnalysisResult) -> List[EnrichedScreen]:
        """Enrich every screen of a finished analysis; the result itself is not modified."""
        return [self.enrich_screen(screen) for screen in result.screens]

    def components_needed(self, result: AnalysisResult) -> List[ComponentSuggestion]:
        """Distinct library entries suggested anywhere in a result, in first-seen order."""
        needed: Dict[str, ComponentSuggestion] = {}
        for issue in result.all_issues:
            for suggested in issue.suggested_components:
                info = self.find_component_info(suggested)
                if info is None:
                    continue
                if info.name not in needed:
                    needed[info.name] = ComponentSuggestion(component=info)
                needed[info.name].issues.append(issue.name)
        return list(needed.values())
