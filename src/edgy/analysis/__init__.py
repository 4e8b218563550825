"""
Edge case analysis.

Typical use:
    >>> from edgy.analysis import EdgeCaseAnalyzer
    >>> from edgy.knowledge.infrastructure.loader import load_knowledge_base
    >>> result = EdgeCaseAnalyzer(load_knowledge_base()).analyze(screens)
"""

from edgy.analysis.application.analyzer import EdgeCaseAnalyzer, analyze_screens

__all__ = ["EdgeCaseAnalyzer", "analyze_screens"]
