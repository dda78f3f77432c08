"""Command modules for the styledtext CLI."""

from styledtext.cli.commands import inspect, render

__all__ = ["inspect", "render"]
