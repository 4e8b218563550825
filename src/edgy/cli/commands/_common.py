"""Helpers shared by CLI commands."""

from typing import Optional

import typer
from rich.console import Console

from edgy.knowledge.domain.models import KnowledgeBase
from edgy.knowledge.infrastructure.loader import load_knowledge_base
from edgy.shared.domain.exceptions import EdgyError
from edgy.shared.infrastructure.config import settings

console = Console()
err_console = Console(stderr=True)

SEVERITY_STYLES = {
    "critical": "red",
    "warning": "yellow",
    "info": "blue",
}


def get_knowledge_base(knowledge_dir: Optional[str] = None) -> KnowledgeBase:
    """Load the knowledge base or exit with a readable error."""
    try:
        return load_knowledge_base(knowledge_dir or settings.knowledge_dir)
    except EdgyError as e:
        err_console.print(f"[red]Knowledge Base Error:[/red] {e}")
        raise typer.Exit(code=1)


def severity_label(severity: str) -> str:
    color = SEVERITY_STYLES.get(severity, "white")
    return f"[{color}]{severity}[/{color}]"
