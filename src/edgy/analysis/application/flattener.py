"""
Screen flattener.

Turns a screen (or any node tree) into the lowercase text blob that
pattern and edge case matching search in.
"""

from typing import Any, List, Optional

from edgy.shared.domain.exceptions import MalformedTreeError
from edgy.shared.infrastructure.config import settings


class ScreenFlattener:
    """
    Depth-first pre-order concatenation of node names.

    The root's own name comes first, then each child subtree in order;
    names are lowercased and joined with single spaces. Nesting deeper
    than `max_depth`, or a node that is its own ancestor, raises
    MalformedTreeError instead of recursing forever.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth if max_depth is not None else settings.max_tree_depth

    def flatten(self, root: Any) -> str:
        """
        Flatten a Screen or DesignNode tree.

        Args:
            root: Object with `name` and `children` attributes

        Returns:
            Lowercase space-joined names

        Raises:
            MalformedTreeError: On a cycle or excessive depth
        """
        names: List[str] = []
        self._collect(root, names, depth=0, path=set())
        return " ".join(names)

    def _collect(self, node: Any, names: List[str], depth: int, path: set) -> None:
        if node is None:
            return

        if depth > self.max_depth:
            raise MalformedTreeError(
                f"Node tree deeper than {self.max_depth} levels",
                context={"node_id": getattr(node, "id", None), "depth": depth},
            )

        marker = id(node)
        if marker in path:
            raise MalformedTreeError(
                "Cycle detected in node tree",
                context={"node_id": getattr(node, "id", None), "node_name": getattr(node, "name", None)},
            )

        names.append((node.name or "").lower())

        path.add(marker)
        for child in node.children or []:
            self._collect(child, names, depth + 1, path)
        path.discard(marker)


def flatten_screen(root: Any, max_depth: Optional[int] = None) -> str:
    """Convenience wrapper around ScreenFlattener.flatten."""
    return ScreenFlattener(max_depth).flatten(root)
