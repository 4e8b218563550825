"""Domain models for the edge case knowledge base.

The knowledge base is two static tables:
- patterns: UI scenarios with detection keywords and the edge cases they require
- components: shadcn/ui library entries suggested as fixes

All models are plugin-compatible with JSON serialization (camelCase).
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from edgy.knowledge.domain.enums import EdgeCaseSeverity
from edgy.shared.domain.base_model import BaseDomainModel

# Public shadcn/ui design system file on Figma; component links append a node id.
DEFAULT_LIBRARY_FILE_BASE = (
    "https://www.figma.com/design/lmUgIGwdG2ZaVfvZzFuU2H/"
    "-shadcn-ui---Design-System--Community-?node-id="
)


@dataclass
class EdgeCase(BaseDomainModel):
    """UI state expected to accompany a pattern.

    Attributes:
        id: Dash-separated identifier, e.g. "form-validation-error"
        name: Human-readable name, e.g. "Validation Error State"
        severity: critical, warning or info
        suggested_components: Library component names that implement the state
        description: What the state should communicate (may be empty)
    """

    id: str
    name: str
    severity: EdgeCaseSeverity
    suggested_components: List[str] = field(default_factory=list)
    description: str = ""

    def __post_init__(self) -> None:
        """Validate severity."""
        self.severity = EdgeCaseSeverity.parse(self.severity)

    @property
    def search_phrase(self) -> str:
        """Edge case id as it would appear in layer names ("form-loading" -> "form loading")."""
        return self.id.replace("-", " ")


@dataclass
class Pattern(BaseDomainModel):
    """Recognizable UI scenario.

    A pattern is detected on a screen when any of its detection keywords
    appears in the screen's flattened layer names.
    """

    id: str
    detection_keywords: List[str]
    required_edge_cases: List[EdgeCase]
    name: Optional[str] = None
    description: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Pattern":
        """Parse plugin JSON (camelCase) to Python model."""
        return cls(
            id=data["id"],
            detection_keywords=list(data["detectionKeywords"]),
            required_edge_cases=[EdgeCase.from_json(ec) for ec in data.get("requiredEdgeCases", [])],
            name=data.get("name"),
            description=data.get("description"),
        )


@dataclass
class ComponentInfo(BaseDomainModel):
    """Entry of the shadcn/ui component library.

    Attributes:
        name: Component name as suggested by edge cases ("AlertDialog")
        node_id: Figma node id inside the library file
        description: What the component is used for
        icon: Emoji shown next to the component in reports
        aliases: Lowercase fragments that identify the component in free-form names
        file_base: Library file URL prefix; url = file_base + node_id
    """

    name: str
    node_id: str
    description: str = ""
    icon: str = ""
    aliases: List[str] = field(default_factory=list)
    file_base: str = DEFAULT_LIBRARY_FILE_BASE

    @property
    def url(self) -> str:
        return self.file_base + self.node_id


@dataclass
class KnowledgeBase:
    """Loaded knowledge base, injected into the analyzer and component library.

    Pattern order is the table order and drives the order of detected
    patterns and issues.
    """

    patterns: List[Pattern]
    components: List[ComponentInfo] = field(default_factory=list)
    library_file_base: str = DEFAULT_LIBRARY_FILE_BASE

    def get_pattern(self, pattern_id: str) -> Optional[Pattern]:
        for pattern in self.patterns:
            if pattern.id == pattern_id:
                return pattern
        return None

    @property
    def pattern_ids(self) -> List[str]:
        return [p.id for p in self.patterns]
