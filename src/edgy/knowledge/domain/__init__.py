"""
Knowledge Base Domain Models.

Patterns, edge cases and library components the analyzer is configured with.
"""

from edgy.knowledge.domain.enums import EdgeCaseSeverity
from edgy.knowledge.domain.models import (
    DEFAULT_LIBRARY_FILE_BASE,
    ComponentInfo,
    EdgeCase,
    KnowledgeBase,
    Pattern,
)

__all__ = [
    "DEFAULT_LIBRARY_FILE_BASE",
    "ComponentInfo",
    "EdgeCase",
    "EdgeCaseSeverity",
    "KnowledgeBase",
    "Pattern",
]
