"""
Analysis Domain Models.

Screens as exported by the design tool, and the detection output built from them.
"""

from edgy.analysis.domain.models import (
    AnalysisResult,
    Connection,
    DesignNode,
    FlowIssues,
    Issue,
    Screen,
    ScreenAnalysis,
)

__all__ = [
    "AnalysisResult",
    "Connection",
    "DesignNode",
    "FlowIssues",
    "Issue",
    "Screen",
    "ScreenAnalysis",
]
