"""
Batch Command - Analyze every screen export in a directory
"""

from typing import Optional

import typer
from rich import box
from rich.markup import escape
from rich.table import Table

from edgy.analysis.application.analyzer import EdgeCaseAnalyzer
from edgy.batch.runner import BatchRunner
from edgy.cli.commands._common import console, get_knowledge_base
from edgy.shared.infrastructure.config import settings


def batch(
    input_dir: Optional[str] = typer.Option(None, "--input", "-i", help="Directory with screen exports (default: EDGY_SCREENS_DIR)"),
    output_dir: Optional[str] = typer.Option(None, "--output", "-o", help="Directory for *-results.json files (default: EDGY_RESULTS_DIR)"),
    knowledge_dir: Optional[str] = typer.Option(None, "--knowledge-dir", "-k", help="Directory with custom knowledge base tables"),
):
    """
    Analyze all screen exports in a directory

    Every <name>.json produces <name>-results.json in the output directory.

    Example:
        edgy batch
        edgy batch --input screens --output results
    """
    knowledge_base = get_knowledge_base(knowledge_dir)
    runner = BatchRunner(
        EdgeCaseAnalyzer(knowledge_base),
        input_dir or settings.screens_dir,
        output_dir or settings.results_dir,
    )

    console.print("[bold cyan]🔍 Edgy Analyzer Starting...[/bold cyan]\n")

    if not runner.input_dir.is_dir():
        runner.ensure_input_dir()
        console.print(f"[yellow]No screens directory found. Created placeholder at {runner.input_dir}[/yellow]")
        return

    outcomes = runner.run()
    if not outcomes:
        console.print("[yellow]No screen files found to analyze.[/yellow]")
        return

    table = Table(title="Batch Results", box=box.ROUNDED)
    table.add_column("File", style="cyan")
    table.add_column("Screens", justify="right")
    table.add_column("Issues", justify="right")
    table.add_column("Critical", justify="right", style="red")
    table.add_column("Output")

    for outcome in outcomes:
        if outcome.succeeded:
            result = outcome.result
            table.add_row(
                outcome.source.name,
                str(result.total_screens),
                str(result.total_issues),
                str(result.critical_count),
                str(outcome.output),
            )
        else:
            table.add_row(outcome.source.name, "-", "-", "-", f"[red]✗ {escape(outcome.error)}[/red]")

    console.print(table)

    failed = [o for o in outcomes if not o.succeeded]
    if failed:
        console.print(f"\n[red]{len(failed)} of {len(outcomes)} files failed.[/red]")
        raise typer.Exit(code=1)

    console.print("\n[green]🎉 Analysis complete![/green]")
