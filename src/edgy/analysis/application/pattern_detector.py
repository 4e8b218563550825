"""
Pattern detector.

Plain substring search of detection keywords in flattened screen text.
There is no word-boundary check: "cartoon" matches a "car" keyword.
"""

from typing import List

from edgy.knowledge.domain.models import KnowledgeBase, Pattern


class PatternDetector:
    """Finds the knowledge base patterns present in a screen's text."""

    def __init__(self, knowledge_base: KnowledgeBase):
        self.knowledge_base = knowledge_base

    def detect(self, text: str) -> List[Pattern]:
        """
        Return patterns with at least one keyword contained in `text`.

        Args:
            text: Lowercase flattened screen text

        Returns:
            Matching patterns in knowledge base order (may be empty)
        """
        return [pattern for pattern in self.knowledge_base.patterns if self.matches(pattern, text)]

    @staticmethod
    def matches(pattern: Pattern, text: str) -> bool:
        return any(keyword.lower() in text for keyword in pattern.detection_keywords)
