"""
Edgy CLI - Missing edge case detector
Main entry point for the command-line interface

Usage:
    edgy analyze <file>          # Analyze one screen export
    edgy batch                   # Analyze every export in the screens directory
    edgy patterns                # Show patterns and required edge cases
    edgy components list         # List library components
    edgy components find <name>  # Resolve a suggested component
"""

import typer
from rich.console import Console
from rich.panel import Panel

from edgy import __version__
from edgy.cli.commands import analyze, batch, components, patterns
from edgy.shared.infrastructure.logging import configure_logging

app = typer.Typer(
    name="edgy",
    help="Edgy - Find missing edge cases (error, loading, empty, confirmation) in your design flows",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

# Register commands
app.command(name="analyze", help="Analyze a screen export for missing edge cases")(analyze.analyze)
app.command(name="batch", help="Analyze all screen exports in a directory")(batch.batch)
app.command(name="patterns", help="Show detectable patterns and required edge cases")(patterns.patterns)
app.add_typer(components.app, name="components", help="Browse the shadcn/ui component library")


@app.callback()
def main_callback():
    """Configure logging before any command runs."""
    configure_logging()


@app.command()
def version():
    """Show Edgy version information"""
    console.print(Panel.fit(
        "[bold cyan]Edgy[/bold cyan]\n"
        f"[dim]Version:[/dim] {__version__}\n"
        "[dim]Edge case detection for Figma flows[/dim]\n",
        title="About Edgy",
        border_style="cyan",
    ))


def main():
    """Main entry point"""
    app()


if __name__ == "__main__":
    main()
