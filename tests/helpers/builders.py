"""Builders for design node trees and screens used across tests."""

from datetime import datetime, timezone

from edgy.analysis.domain.models import Connection, DesignNode, Screen

FIXED_NOW = datetime(2025, 3, 14, 9, 26, 53, 589000, tzinfo=timezone.utc)


def make_node(name, children=None, node_id=None, node_type="FRAME"):
    """Build a DesignNode with sensible defaults."""
    return DesignNode(
        id=node_id or f"node:{name}",
        name=name,
        type=node_type,
        visible=True,
        children=list(children or []),
    )


def make_screen(screen_id, name, child_names=(), targets=None):
    """Build a Screen whose children are flat nodes named `child_names`.

    `targets` lists the screen ids this screen links to; None leaves the
    connections field absent.
    """
    connections = None
    if targets is not None:
        connections = [
            Connection(
                target_frame_id=target,
                trigger_node_id=f"trigger:{target}",
                trigger_node_name="Button",
                target_frame_name=f"Screen {target}",
            )
            for target in targets
        ]
    return Screen(
        id=screen_id,
        name=name,
        width=375,
        height=812,
        children=[make_node(child) for child in child_names],
        connections=connections,
    )
