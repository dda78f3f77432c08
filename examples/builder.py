"""Example of building styled text and rendering it to the terminal and HTML."""

import argparse
import logging

from rich.console import Console
from rich.traceback import install

from styledtext import (
    BackgroundColor,
    Builder,
    Font,
    FontRef,
    Link,
    StrokeColor,
    StrokeWidth,
    TextColor,
    Underline,
    UnderlineColor,
    UnderlineStyle,
)
from styledtext.rendering import ConsoleRenderer, HtmlRenderer
from styledtext.values import BLACK, RED, YELLOW, Color

install(show_locals=True)

console = Console()


def build_banner():
    heading = FontRef("Helvetica Neue", 24, bold=True)
    return (
        Builder()
        .text("styledtext", [Font(heading), TextColor(Color.from_hex("#1E88E5"))])
        .spaces(2)
        .text("outlined", [StrokeWidth(3), StrokeColor(BLACK)])
        .space()
        .text("filled", [StrokeWidth(3, fill=True), StrokeColor(RED)])
        .space()
        .text("marked", [BackgroundColor(YELLOW)])
        .space()
        .text(
            "docs",
            [
                Link("https://example.com/docs"),
                UnderlineStyle(Underline.SINGLE | Underline.PATTERN_DOT),
                UnderlineColor(RED),
            ],
        )
        .build(finalize=True)
    )


def main():
    parser = argparse.ArgumentParser(description="Styled text builder example")
    parser.add_argument("--html", help="Write an HTML page to this path")
    parser.add_argument("--debug", action="store_true", help="Enable debug logs")
    args = parser.parse_args()

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)

    styled = build_banner()
    ConsoleRenderer(console).print(styled)

    if args.html:
        renderer = HtmlRenderer()
        page = renderer.render_full_page("styledtext", renderer.render(styled))
        with open(args.html, "w", encoding="utf-8") as f:
            f.write(page)
        console.print(f"Wrote [bold]{args.html}[/bold]")


if __name__ == "__main__":
    main()
