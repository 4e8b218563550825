"""
Components Command - Browse the shadcn/ui component library
"""

from typing import Optional

import typer
from rich import box
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from edgy.cli.commands._common import console, get_knowledge_base
from edgy.library.component_library import ComponentLibrary

app = typer.Typer()


@app.command("list")
def list_components(
    knowledge_dir: Optional[str] = typer.Option(None, "--knowledge-dir", "-k", help="Directory with custom knowledge base tables"),
):
    """
    List library components available as suggestions

    Example:
        edgy components list
    """
    library = ComponentLibrary(get_knowledge_base(knowledge_dir))

    table = Table(title=f"Component Library ({library.status()['available']} components)", box=box.ROUNDED)
    table.add_column("", width=3)
    table.add_column("Component", style="cyan bold")
    table.add_column("Description")
    table.add_column("Aliases", style="dim")

    for component in library.components:
        table.add_row(
            component.icon,
            f"[link={component.url}]{component.name}[/link]",
            component.description,
            ", ".join(component.aliases),
        )

    console.print(table)


@app.command()
def find(
    name: str = typer.Argument(..., help="Suggested component name, e.g. 'Button (loading)'"),
    knowledge_dir: Optional[str] = typer.Option(None, "--knowledge-dir", "-k", help="Directory with custom knowledge base tables"),
):
    """
    Resolve a suggested component name to its library link

    Example:
        edgy components find "Alert (error)"
    """
    library = ComponentLibrary(get_knowledge_base(knowledge_dir))
    link = library.find_component_link(name)

    if link is None:
        console.print(f"[yellow]No library component matches '{escape(name)}'[/yellow]")
        raise typer.Exit(code=1)

    console.print(Panel.fit(
        f"[bold cyan]{link.name}[/bold cyan]\n"
        f"[dim]Requested:[/dim] {escape(name)}\n"
        f"[dim]URL:[/dim] {link.url}",
        title="Component Found",
        border_style="green",
    ))
