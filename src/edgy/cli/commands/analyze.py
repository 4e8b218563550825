"""
Analyze Command - Find missing edge cases in one screen export
"""

import json
from pathlib import Path
from typing import Optional

import typer
from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from edgy.analysis.application.analyzer import EdgeCaseAnalyzer
from edgy.analysis.domain.models import AnalysisResult
from edgy.analysis.infrastructure.screen_loader import load_screens_file
from edgy.cli.commands._common import console, err_console, get_knowledge_base, severity_label
from edgy.library.component_library import ComponentLibrary
from edgy.reports.github_annotations import GitHubAnnotations
from edgy.shared.domain.exceptions import EdgyError
from edgy.shared.utils.json_io import write_json_atomic


def analyze(
    screens_file: Path = typer.Argument(..., help="Screen export (JSON) to analyze"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the AnalysisResult JSON to this file"),
    as_json: bool = typer.Option(False, "--json", help="Print the AnalysisResult JSON instead of tables"),
    annotations: bool = typer.Option(False, "--annotations", help="Print GitHub Actions annotations and set total-issues/critical-count step outputs"),
    grouped: bool = typer.Option(False, "--grouped", help="Group annotations by screen"),
    fail_on_critical: bool = typer.Option(False, "--fail-on-critical", help="Exit with code 1 when critical issues are found"),
    knowledge_dir: Optional[str] = typer.Option(None, "--knowledge-dir", "-k", help="Directory with custom knowledge base tables"),
):
    """
    Analyze a screen export for missing edge cases

    Example:
        edgy analyze screens/checkout.json
        edgy analyze screens/checkout.json -o results/checkout-results.json
        edgy analyze screens/checkout.json --annotations --fail-on-critical
    """
    knowledge_base = get_knowledge_base(knowledge_dir)

    try:
        screens = load_screens_file(screens_file)
        result = EdgeCaseAnalyzer(knowledge_base).analyze(screens)
    except EdgyError as e:
        err_console.print(f"[red]Analysis Error:[/red] {e}")
        raise typer.Exit(code=1)

    if output:
        try:
            write_json_atomic(output, result.to_json())
        except OSError as e:
            err_console.print(f"[red]Write Error:[/red] {e}")
            raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(result.to_json(), indent=2, ensure_ascii=False))
    elif annotations:
        GitHubAnnotations.print_annotations(result, source_file=str(screens_file), grouped=grouped)
        GitHubAnnotations.set_output("total-issues", str(result.total_issues))
        GitHubAnnotations.set_output("critical-count", str(result.critical_count))
    else:
        render_result(result, ComponentLibrary(knowledge_base))
        if output:
            console.print(f"\n[dim]📁 Results saved to:[/dim] {output}")

    if fail_on_critical and result.critical_count > 0:
        raise typer.Exit(code=1)


def render_result(result: AnalysisResult, library: ComponentLibrary) -> None:
    """Print summary, per-screen issues, flow issues and suggested components."""
    console.print(Panel.fit(
        f"[bold]{result.total_issues}[/bold] issues in [bold]{result.total_screens}[/bold] screens\n"
        f"[red]Critical:[/red] {result.critical_count}   "
        f"[yellow]Warning:[/yellow] {result.warning_count}   "
        f"[blue]Info:[/blue] {result.info_count}",
        title="Analysis Results",
        border_style="cyan",
    ))

    for screen in library.enrich_result(result):
        patterns = ", ".join(screen.detected_patterns) or "none"
        screen_name = escape(screen.screen_name)
        if not screen.issues:
            console.print(f"\n[green]✓[/green] [bold]{screen_name}[/bold] [dim](patterns: {patterns})[/dim]")
            continue

        table = Table(
            title=f"{screen_name} [dim](patterns: {patterns})[/dim]",
            box=box.ROUNDED,
            title_justify="left",
        )
        table.add_column("Severity", width=10)
        table.add_column("Missing State", style="bold")
        table.add_column("Description")
        table.add_column("Components", style="cyan")

        for issue in screen.issues:
            components = ", ".join(
                f"[link={m.library_url}]{escape(m.name)}[/link]" if m.resolved else escape(m.name)
                for m in issue.library_matches
            )
            table.add_row(severity_label(issue.severity.value), escape(issue.name), escape(issue.description), components)

        console.print()
        console.print(table)

    flow = result.flow_issues
    if flow.dead_ends or flow.orphan_screens:
        console.print("\n[bold]Flow Issues[/bold]")
        for name in flow.dead_ends:
            console.print(f"  [yellow]⛔ Dead end:[/yellow] {escape(name)}")
        for name in flow.orphan_screens:
            console.print(f"  [yellow]🏝  Orphan:[/yellow] {escape(name)}")

    needed = library.components_needed(result)
    if needed:
        console.print(f"\n[bold]Suggested Components[/bold] [dim]({len(needed)} from shadcn/ui)[/dim]")
        for suggestion in needed:
            info = suggestion.component
            console.print(
                f"  {info.icon} [link={info.url}]{info.name}[/link] "
                f"[dim]- {info.description} (for {len(suggestion.issues)} issues)[/dim]"
            )
