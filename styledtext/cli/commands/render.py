"""Render command for the styledtext CLI."""

import io
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from styledtext.exceptions import StyledTextException
from styledtext.models import load_document
from styledtext.rendering import (
    ConsoleRenderer,
    HtmlRenderer,
    RenderConfig,
    to_rich_text,
)

console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    console = "console"
    html = "html"
    page = "page"
    text = "text"


def setup_logging(debug: bool) -> None:
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
        )


def render_document(
    path: Path = typer.Argument(..., help="JSON styled text document"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.console, "--format", "-f", help="Output format"
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write to a file instead of stdout"
    ),
    merge: bool = typer.Option(
        True, "--merge/--no-merge", help="Merge adjacent runs with equal attributes"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Build a styled text document and render it."""
    setup_logging(debug)

    try:
        doc = load_document(path)
        styled = doc.build()

        if fmt is OutputFormat.console:
            if output is None:
                ConsoleRenderer(console).print(styled)
                return
            buffer = io.StringIO()
            Console(file=buffer, force_terminal=True, width=console.width).print(
                to_rich_text(styled)
            )
            rendered = buffer.getvalue()
        elif fmt is OutputFormat.text:
            rendered = styled.string
        else:
            renderer = HtmlRenderer(RenderConfig(merge_runs=merge))
            rendered = renderer.render(styled)
            if fmt is OutputFormat.page:
                rendered = renderer.render_full_page(doc.title, rendered)

        if output is None:
            console.out(rendered, highlight=False)
        else:
            output.write_text(rendered, encoding="utf-8")
            console.print(f"Wrote [bold]{output}[/bold]")
    except (StyledTextException, OSError) as e:
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)
