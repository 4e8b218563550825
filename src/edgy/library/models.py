"""Component library match models.

Plugin TypeScript equivalent:
```typescript
interface LibraryMatch {
  name: string
  libraryUrl?: string
  libraryName?: string
}
interface EnrichedIssue extends EdgeCaseIssue {
  libraryMatches?: LibraryMatch[]
}
```
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from edgy.analysis.domain.models import Issue, ScreenAnalysis
from edgy.knowledge.domain.models import ComponentInfo
from edgy.shared.domain.base_model import BaseDomainModel


@dataclass
class ComponentLink(BaseDomainModel):
    """Resolved library component and its Figma URL."""

    name: str
    url: str


@dataclass
class LibraryMatch(BaseDomainModel):
    """Suggested component name, with its library entry when one was found."""

    name: str
    library_url: Optional[str] = None
    library_name: Optional[str] = None

    @property
    def resolved(self) -> bool:
        return self.library_url is not None

    def to_json(self) -> Dict[str, Any]:
        # Unresolved matches carry only the name, like the plugin's payload.
        payload: Dict[str, Any] = {"name": self.name}
        if self.resolved:
            payload["libraryUrl"] = self.library_url
            payload["libraryName"] = self.library_name
        return payload


@dataclass
class EnrichedIssue(Issue):
    """Issue plus one LibraryMatch per suggested component."""

    library_matches: List[LibraryMatch] = field(default_factory=list)


@dataclass
class EnrichedScreen(ScreenAnalysis):
    """ScreenAnalysis whose issues carry library matches."""

    issues: List[EnrichedIssue] = field(default_factory=list)


@dataclass
class ComponentSuggestion:
    """Library component needed by a result, with the names of the issues asking for it."""

    component: ComponentInfo
    issues: List[str] = field(default_factory=list)
