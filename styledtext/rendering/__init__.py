"""Rendering support for styled text.

Contains:
- options: RenderConfig behavior flags
- renderer: pure HTML renderer (fragment + page)
- console: rich Text conversion for terminal output
"""

from .console import ConsoleRenderer, to_rich_text
from .options import RenderConfig
from .renderer import HtmlRenderer, render_fragment, render_page

__all__ = [
    "ConsoleRenderer",
    "HtmlRenderer",
    "RenderConfig",
    "render_fragment",
    "render_page",
    "to_rich_text",
]
