"""
Edge case analyzer.

Single entry point for detection: flattens each screen, detects patterns,
checks required edge cases, folds the issues into severity totals and
merges the flow analysis of the whole batch.

The knowledge base is injected; the analyzer holds no state between runs
and returns the result as a value.
"""

from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Sequence

from edgy.analysis.application.edge_case_checker import EdgeCaseChecker
from edgy.analysis.application.flattener import ScreenFlattener
from edgy.analysis.application.flow_analyzer import FlowAnalyzer
from edgy.analysis.application.pattern_detector import PatternDetector
from edgy.analysis.domain.models import AnalysisResult, Issue, Screen, ScreenAnalysis
from edgy.knowledge.domain.enums import EdgeCaseSeverity
from edgy.knowledge.domain.models import KnowledgeBase
from edgy.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO 8601 UTC timestamp with millisecond precision and a Z suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class EdgeCaseAnalyzer:
    """
    Runs the detection pipeline over a batch of screens.

    Attributes:
        knowledge_base: Patterns to detect and their required edge cases
        flattener: Screen -> lowercase text
        detector: Text -> detected patterns
        checker: Detected patterns -> issues
        flow_analyzer: Batch -> dead ends and orphans
    """

    def __init__(
        self,
        knowledge_base: KnowledgeBase,
        flattener: Optional[ScreenFlattener] = None,
        checker: Optional[EdgeCaseChecker] = None,
        flow_analyzer: Optional[FlowAnalyzer] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.knowledge_base = knowledge_base
        self.flattener = flattener or ScreenFlattener()
        self.detector = PatternDetector(knowledge_base)
        self.checker = checker or EdgeCaseChecker()
        self.flow_analyzer = flow_analyzer or FlowAnalyzer()
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def analyze_screen(self, screen: Screen) -> ScreenAnalysis:
        """
        Analyze one screen in isolation.

        Raises:
            MalformedTreeError: If the screen's node tree is cyclic or too deep
        """
        text = self.flattener.flatten(screen)
        patterns = self.detector.detect(text)
        issues = self.checker.check(screen, text, patterns)

        logger.debug(
            "screen_analyzed",
            screen_id=screen.id,
            screen_name=screen.name,
            detected_patterns=[p.id for p in patterns],
            issue_count=len(issues),
        )

        return ScreenAnalysis(
            screen_id=screen.id,
            screen_name=screen.name,
            detected_patterns=[p.id for p in patterns],
            issues=issues,
            missing_states=[issue.name for issue in issues],
        )

    def analyze(self, screens: Sequence[Screen]) -> AnalysisResult:
        """
        Analyze a complete batch of screens.

        An empty batch is valid and produces a result with zero counts.
        """
        screens = list(screens)
        analyses = [self.analyze_screen(screen) for screen in screens]
        all_issues = [issue for analysis in analyses for issue in analysis.issues]
        flow_issues = self.flow_analyzer.analyze(screens)

        result = AnalysisResult(
            timestamp=utc_timestamp(self._clock()),
            total_screens=len(screens),
            total_issues=len(all_issues),
            critical_count=self._count(all_issues, EdgeCaseSeverity.CRITICAL),
            warning_count=self._count(all_issues, EdgeCaseSeverity.WARNING),
            info_count=self._count(all_issues, EdgeCaseSeverity.INFO),
            screens=analyses,
            flow_issues=flow_issues,
        )

        logger.info(
            "analysis_completed",
            total_screens=result.total_screens,
            total_issues=result.total_issues,
            critical=result.critical_count,
            warning=result.warning_count,
            info=result.info_count,
            dead_ends=len(flow_issues.dead_ends),
            orphans=len(flow_issues.orphan_screens),
        )
        return result

    @staticmethod
    def _count(issues: Iterable[Issue], severity: EdgeCaseSeverity) -> int:
        return sum(1 for issue in issues if issue.severity == severity)


def analyze_screens(screens: Sequence[Screen], knowledge_base: KnowledgeBase) -> AnalysisResult:
    """Analyze screens with default collaborators."""
    return EdgeCaseAnalyzer(knowledge_base).analyze(screens)
