"""Inspect command for the styledtext CLI."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from styledtext.exceptions import StyledTextException
from styledtext.models import load_document

console = Console()


def inspect_document(
    path: Path = typer.Argument(..., help="JSON styled text document"),
):
    """List the runs of a built document."""
    try:
        styled = load_document(path).build()
    except StyledTextException as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if not styled.runs:
        console.print("No runs found")
        return

    table = Table("#", "Range", "Text", "Attributes")
    start = 0
    for idx, run in enumerate(styled.runs):
        end = start + len(run.text)
        table.add_row(
            str(idx),
            f"{start}..{end}",
            escape(repr(run.text)),
            ", ".join(key.value for key in run.attributes) or "-",
        )
        start = end

    console.print(table)
    console.print(f"{len(styled.runs)} runs, {len(styled)} characters")
