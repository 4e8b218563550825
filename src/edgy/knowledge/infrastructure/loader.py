"""Knowledge base loader.

Reads the pattern and component tables from JSON (or YAML) files. Editing
these files changes detection behavior without code changes.
"""

import functools
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from edgy.knowledge.domain.models import (
    DEFAULT_LIBRARY_FILE_BASE,
    ComponentInfo,
    KnowledgeBase,
    Pattern,
)
from edgy.shared.domain.exceptions import ConfigurationError, KnowledgeBaseError
from edgy.shared.infrastructure.logging import get_logger

logger = get_logger(__name__)

DEFAULTS_DIR = Path(__file__).resolve().parent.parent / "defaults"

PATTERNS_TABLE = "edge-case-patterns"
COMPONENTS_TABLE = "shadcn-components"

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")


class KnowledgeBaseLoader:
    """Loads the pattern and component tables from a directory."""

    def __init__(self, knowledge_dir: Optional[Path | str] = None):
        """
        Initialize the loader.

        Args:
            knowledge_dir: Directory holding the tables; packaged defaults if None

        Raises:
            ConfigurationError: If knowledge_dir is given but is not a directory
        """
        self.knowledge_dir = Path(knowledge_dir) if knowledge_dir else DEFAULTS_DIR
        if not self.knowledge_dir.is_dir():
            raise ConfigurationError(
                f"Knowledge base directory not found: {self.knowledge_dir}",
                context={"knowledge_dir": str(self.knowledge_dir)},
            )

    def load(self) -> KnowledgeBase:
        """
        Load both tables.

        Returns:
            KnowledgeBase with patterns in table order

        Raises:
            KnowledgeBaseError: If a table is missing or cannot be parsed
        """
        patterns_data = self._read_table(PATTERNS_TABLE)
        components_data = self._read_table(COMPONENTS_TABLE)

        file_base = components_data.get("fileBase") or DEFAULT_LIBRARY_FILE_BASE
        patterns = self.parse_patterns(patterns_data)
        components = self.parse_components(components_data, file_base)

        logger.debug(
            "knowledge_base_loaded",
            knowledge_dir=str(self.knowledge_dir),
            pattern_count=len(patterns),
            component_count=len(components),
        )
        return KnowledgeBase(patterns=patterns, components=components, library_file_base=file_base)

    @staticmethod
    def parse_patterns(data: Dict[str, Any]) -> List[Pattern]:
        """
        Parse the patterns table.

        Accepts either a mapping keyed by pattern id or a list of pattern
        objects carrying their own "id".
        """
        raw = data.get("patterns", {})
        try:
            if isinstance(raw, dict):
                return [Pattern.from_json({**body, "id": pattern_id}) for pattern_id, body in raw.items()]
            return [Pattern.from_json(body) for body in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise KnowledgeBaseError(f"Invalid pattern table: {e}") from e

    @staticmethod
    def parse_components(data: Dict[str, Any], file_base: str = DEFAULT_LIBRARY_FILE_BASE) -> List[ComponentInfo]:
        """Parse the components table (mapping keyed by component name, or a list)."""
        raw = data.get("components", {})
        entries = [{**body, "name": name} for name, body in raw.items()] if isinstance(raw, dict) else list(raw)

        components: List[ComponentInfo] = []
        for entry in entries:
            try:
                components.append(
                    ComponentInfo(
                        name=entry["name"],
                        node_id=str(entry["nodeId"]),
                        description=entry.get("description", ""),
                        icon=entry.get("icon", ""),
                        aliases=[a.lower() for a in entry.get("aliases", [])],
                        file_base=file_base,
                    )
                )
            except (KeyError, TypeError) as e:
                raise KnowledgeBaseError(f"Invalid component entry {entry!r}: {e}") from e
        return components

    def _read_table(self, stem: str) -> Dict[str, Any]:
        path = self._find_table(stem)
        try:
            with open(path, encoding="utf-8") as f:
                if path.suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise KnowledgeBaseError(f"Cannot read knowledge base table {path}: {e}", context={"path": str(path)}) from e

        if not isinstance(data, dict):
            raise KnowledgeBaseError(f"Knowledge base table {path} must be an object", context={"path": str(path)})
        return data

    def _find_table(self, stem: str) -> Path:
        for suffix in SUPPORTED_SUFFIXES:
            candidate = self.knowledge_dir / f"{stem}{suffix}"
            if candidate.exists():
                return candidate
        raise KnowledgeBaseError(
            f"Knowledge base table '{stem}' not found in {self.knowledge_dir}",
            context={"knowledge_dir": str(self.knowledge_dir), "table": stem},
        )


@functools.lru_cache(maxsize=None)
def load_knowledge_base(knowledge_dir: Optional[str] = None) -> KnowledgeBase:
    """Load (once per directory) and return the knowledge base."""
    return KnowledgeBaseLoader(knowledge_dir).load()
