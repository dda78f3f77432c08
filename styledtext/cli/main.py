#!/usr/bin/env python
"""Command line interface for styledtext."""

import typer

from styledtext.cli.commands import inspect, render

app = typer.Typer(help="Build and render styled text documents")

app.command("render")(render.render_document)
app.command("inspect")(inspect.inspect_document)


@app.callback()
def callback():
    """Build styled text from JSON documents and render it."""
    pass


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
