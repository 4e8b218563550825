"""
Patterns Command - Show the patterns and edge cases Edgy checks for
"""

from typing import Optional

import typer
from rich import box
from rich.table import Table

from edgy.cli.commands._common import console, get_knowledge_base, severity_label


def patterns(
    knowledge_dir: Optional[str] = typer.Option(None, "--knowledge-dir", "-k", help="Directory with custom knowledge base tables"),
):
    """
    Show detectable patterns and their required edge cases

    Example:
        edgy patterns
        edgy patterns -k ./my-knowledge
    """
    knowledge_base = get_knowledge_base(knowledge_dir)

    table = Table(title="Edge Case Patterns", box=box.ROUNDED, show_lines=True)
    table.add_column("Pattern", style="cyan bold")
    table.add_column("Keywords", style="dim")
    table.add_column("Required Edge Cases")

    for pattern in knowledge_base.patterns:
        edge_cases = "\n".join(
            f"{severity_label(ec.severity.value)} {ec.name}" for ec in pattern.required_edge_cases
        )
        table.add_row(pattern.id, ", ".join(pattern.detection_keywords), edge_cases)

    console.print(table)
