"""Command line interface for styledtext."""
