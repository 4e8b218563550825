"""
Analysis domain models.

Figma plugin TypeScript equivalent:
    export interface ScreenData {
        id: string; name: string; width: number; height: number;
        children: NodeData[]; connections: ConnectionData[];
    }
    export interface EdgeCaseIssue {
        id: string; patternId: string; edgeCaseId: string; name: string;
        description: string; severity: 'critical' | 'warning' | 'info';
        suggestedComponents: string[]; screenId: string; screenName: string;
    }
    export interface AnalysisResult {
        timestamp: string; totalScreens: number; totalIssues: number;
        criticalCount: number; warningCount: number; infoCount: number;
        screens: ScreenAnalysis[];
        flowIssues: { deadEnds: string[]; orphanScreens: string[] };
    }

Ids are kept exactly as exported (Figma ids are strings such as "12:34");
they are compared, never coerced.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from edgy.knowledge.domain.enums import EdgeCaseSeverity
from edgy.shared.domain.base_model import BaseDomainModel

ID_TYPES = (str, int, float)


def _read_id(data: Dict[str, Any], key: str) -> Any:
    """Return an id field, rejecting values that cannot be compared as ids."""
    value = data.get(key)
    if value is not None and not isinstance(value, ID_TYPES):
        raise ValueError(f"'{key}' must be a string or number, got {type(value).__name__}")
    return value


def _read_name(data: Dict[str, Any], key: str = "name") -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class DesignNode(BaseDomainModel):
    """Layer inside a screen, snapshotted at export time."""

    id: Any
    name: str
    type: str = ""
    visible: bool = True
    children: List[DesignNode] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> DesignNode:
        return cls(
            id=_read_id(data, "id"),
            name=_read_name(data),
            type=data.get("type", ""),
            visible=data.get("visible", True),
            children=[cls.from_json(child) for child in data.get("children") or []],
        )


@dataclass
class Connection(BaseDomainModel):
    """Prototype link from a node inside one screen to another screen."""

    target_frame_id: Any
    trigger_node_id: Optional[Any] = None
    trigger_node_name: Optional[str] = None
    target_frame_name: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Connection:
        return cls(
            target_frame_id=_read_id(data, "targetFrameId"),
            trigger_node_id=_read_id(data, "triggerNodeId"),
            trigger_node_name=data.get("triggerNodeName"),
            target_frame_name=data.get("targetFrameName"),
        )


@dataclass
class Screen(BaseDomainModel):
    """Top-level frame selected for analysis.

    `connections` is None when the export carried no connections field;
    both None and [] make the screen a dead end.
    """

    id: Any
    name: str
    width: float = 0
    height: float = 0
    children: List[DesignNode] = field(default_factory=list)
    connections: Optional[List[Connection]] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> Screen:
        connections = data.get("connections")
        return cls(
            id=_read_id(data, "id"),
            name=_read_name(data),
            width=data.get("width", 0),
            height=data.get("height", 0),
            children=[DesignNode.from_json(child) for child in data.get("children") or []],
            connections=None if connections is None else [Connection.from_json(c) for c in connections],
        )

    @property
    def outgoing(self) -> List[Connection]:
        return self.connections or []


@dataclass
class Issue(BaseDomainModel):
    """
    Missing edge case on one screen.

    Created once per (screen, edge case) pair and never mutated.
    """

    id: str
    pattern_id: str
    edge_case_id: str
    name: str
    description: str
    severity: EdgeCaseSeverity
    suggested_components: List[str]
    screen_id: Any
    screen_name: str

    def __post_init__(self) -> None:
        """Validate severity."""
        self.severity = EdgeCaseSeverity.parse(self.severity)


@dataclass
class ScreenAnalysis(BaseDomainModel):
    """Per-screen detection output."""

    screen_id: Any
    screen_name: str
    detected_patterns: List[str] = field(default_factory=list)
    issues: List[Issue] = field(default_factory=list)
    missing_states: List[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> ScreenAnalysis:
        return cls(
            screen_id=data["screenId"],
            screen_name=data["screenName"],
            detected_patterns=list(data.get("detectedPatterns", [])),
            issues=[Issue.from_json(i) for i in data.get("issues", [])],
            missing_states=list(data.get("missingStates", [])),
        )


@dataclass
class FlowIssues(BaseDomainModel):
    """Navigation problems across the analyzed batch (screen names)."""

    dead_ends: List[str] = field(default_factory=list)
    orphan_screens: List[str] = field(default_factory=list)


@dataclass
class AnalysisResult(BaseDomainModel):
    """
    Top-level output of one analysis run.

    Invariants:
    - total_issues == sum(len(s.issues) for s in screens)
    - critical_count + warning_count + info_count == total_issues
    """

    timestamp: str
    total_screens: int
    total_issues: int
    critical_count: int
    warning_count: int
    info_count: int
    screens: List[ScreenAnalysis] = field(default_factory=list)
    flow_issues: FlowIssues = field(default_factory=FlowIssues)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> AnalysisResult:
        return cls(
            timestamp=data["timestamp"],
            total_screens=data["totalScreens"],
            total_issues=data["totalIssues"],
            critical_count=data["criticalCount"],
            warning_count=data["warningCount"],
            info_count=data["infoCount"],
            screens=[ScreenAnalysis.from_json(s) for s in data.get("screens", [])],
            flow_issues=FlowIssues.from_json(data.get("flowIssues", {})),
        )

    @property
    def all_issues(self) -> List[Issue]:
        return [issue for screen in self.screens for issue in screen.issues]

    @property
    def issues_by_severity(self) -> Dict[str, int]:
        return {
            EdgeCaseSeverity.CRITICAL.value: self.critical_count,
            EdgeCaseSeverity.WARNING.value: self.warning_count,
            EdgeCaseSeverity.INFO.value: self.info_count,
        }

    def comparable(self) -> Dict[str, Any]:
        """JSON payload without the timestamp, for comparing two runs."""
        payload = self.to_json()
        payload.pop("timestamp", None)
        return payload
