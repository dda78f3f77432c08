"""
HTML renderer for styled text.

Converts a ``StyledText`` into a minimal HTML fragment: one ``<span>`` per
(merged) run carrying inline CSS, wrapped in ``<a>`` for links. No I/O.
"""

from __future__ import annotations

import html
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

from ..attributes import AttributeKey, AttributeSet, Underline
from ..text import StyledText
from ..values import Color, FontRef
from .options import RenderConfig

LOGGER = logging.getLogger(__name__)


_FONT_STACKS = {
    "HelveticaNeue": ['"Helvetica Neue"', "Helvetica", "Arial", "sans-serif"],
    "Helvetica Neue": ['"Helvetica Neue"', "Helvetica", "Arial", "sans-serif"],
    "Helvetica": ["Helvetica", "Arial", "sans-serif"],
    "ArialMT": ["Arial", "Helvetica", "sans-serif"],
    "Arial": ["Arial", "Helvetica", "sans-serif"],
    "TimesNewRomanPSMT": ['"Times New Roman"', "Times", "serif"],
    "Times New Roman": ['"Times New Roman"', "Times", "serif"],
    "CourierNewPSMT": ['"Courier New"', "Courier", "monospace"],
    "Courier New": ['"Courier New"', "Courier", "monospace"],
    "Menlo": ["Menlo", "Monaco", "Consolas", "monospace"],
    "ComicSansMS": ['"Comic Sans MS"', '"Comic Sans"', '"Comic Neue"', "cursive"],
    "Comic Sans MS": ['"Comic Sans MS"', '"Comic Sans"', '"Comic Neue"', "cursive"],
}


def _css_font_stack(name: str) -> str:
    stack = _FONT_STACKS.get(name)
    if stack:
        return ", ".join(stack)
    safe = name.replace('"', "'")
    lower = name.lower()
    generic = "sans-serif"
    if "mono" in lower or "courier" in lower or "code" in lower:
        generic = "monospace"
    elif "serif" in lower or "times" in lower or "georgia" in lower:
        generic = "serif"
    elif "comic" in lower or "chalk" in lower or "hand" in lower:
        generic = "cursive"
    return f'"{safe}", {generic}'


def _css_color(value: Any) -> Optional[str]:
    if isinstance(value, Color):
        return value.hex
    if isinstance(value, str) and value:
        return value
    if value is not None:
        LOGGER.debug("render.html.color_skipped type=%s", type(value).__name__)
    return None


def _underline_css(raw: Any, color: Optional[str]) -> List[str]:
    try:
        style = int(raw)
    except (TypeError, ValueError):
        return []
    if not style & 0xFF:
        return []
    out = ["text-decoration-line:underline"]
    pattern = style & 0x0700
    if (style & 0x0F) == Underline.DOUBLE:
        out.append("text-decoration-style:double")
    elif pattern == Underline.PATTERN_DOT:
        out.append("text-decoration-style:dotted")
    elif pattern:
        out.append("text-decoration-style:dashed")
    if style & Underline.THICK:
        out.append("text-decoration-thickness:2px")
    if color:
        out.append(f"text-decoration-color:{color}")
    return out


@dataclass
class MergedRun:
    text: str
    attributes: AttributeSet


def _merge_runs(styled: StyledText, merge: bool = True) -> List[MergedRun]:
    out: List[MergedRun] = []
    for run in styled.runs:
        if not run.text:
            continue
        if merge and out and out[-1].attributes == run.attributes:
            out[-1].text += run.text
        else:
            out.append(MergedRun(text=run.text, attributes=run.attributes))
    return out


def _preserve_leading_ws(text: str) -> str:
    # Convert leading spaces/tabs on each line into &nbsp; so indentation is visible
    # while keeping normal whitespace collapsing for the rest of the line.
    out: List[str] = []
    for n, line in enumerate(text.split("\n")):
        if n:
            out.append("<br>")
        esc = html.escape(line)
        k = 0
        prefix: List[str] = []
        for ch in line:
            if ch == " ":
                prefix.append("&nbsp;")
            elif ch == "\t":
                prefix.append("&nbsp;" * 4)
            else:
                break
            k += 1
        if prefix:
            esc = "".join(prefix) + esc[k:]
        out.append(esc)
    return "".join(out)


def inline_styles(attributes: AttributeSet, config: RenderConfig) -> List[str]:
    """CSS declarations for one run's attribute set."""
    styles: List[str] = []
    font = attributes.get(AttributeKey.FONT)
    point_size = config.default_point_size
    if isinstance(font, FontRef):
        styles.append(f"font-family:{_css_font_stack(font.name)}")
        if font.size:
            point_size = float(font.size)
            styles.append(f"font-size:{point_size:g}pt")
        if font.bold:
            styles.append("font-weight:bold")
        if font.italic:
            styles.append("font-style:italic")
    elif isinstance(font, str) and font:
        styles.append(f"font-family:{_css_font_stack(font)}")

    fg = _css_color(attributes.get(AttributeKey.FOREGROUND_COLOR))
    if fg:
        styles.append(f"color:{fg}")
    bg = _css_color(attributes.get(AttributeKey.BACKGROUND_COLOR))
    if bg:
        styles.append(f"background-color:{bg}")

    stroke = attributes.get(AttributeKey.STROKE_WIDTH)
    if stroke:
        width = abs(float(stroke)) / 100.0 * point_size
        stroke_color = (
            _css_color(attributes.get(AttributeKey.STROKE_COLOR)) or "currentColor"
        )
        styles.append(f"-webkit-text-stroke:{width:.2f}pt {stroke_color}")
        # Positive width: outline only, glyph interior stays unpainted.
        if float(stroke) > 0:
            styles.append("-webkit-text-fill-color:transparent")

    styles.extend(
        _underline_css(
            attributes.get(AttributeKey.UNDERLINE_STYLE),
            _css_color(attributes.get(AttributeKey.UNDERLINE_COLOR)),
        )
    )
    return styles


def _style_attr(styles: List[str]) -> str:
    # Emitted inside a single-quoted attribute: no payload may close it.
    return html.escape("; ".join(styles), quote=False).replace("'", "&#x27;")


def render_fragment(styled: StyledText, config: Optional[RenderConfig] = None) -> str:
    config = config or RenderConfig()
    fragments: List[str] = []
    merged = _merge_runs(styled, merge=config.merge_runs)
    for mr in merged:
        if config.preserve_leading_whitespace:
            safe = _preserve_leading_ws(mr.text)
        else:
            safe = html.escape(mr.text).replace("\n", "<br>")
        styles = inline_styles(mr.attributes, config)
        if styles:
            piece = f"<span style='{_style_attr(styles)}'>{safe}</span>"
        else:
            piece = safe
        link = mr.attributes.get(AttributeKey.LINK)
        if link:
            attrs = [f'href="{html.escape(str(link))}"']
            if config.link_target_blank:
                attrs.append('target="_blank"')
            if config.link_rel:
                attrs.append(f'rel="{html.escape(config.link_rel)}"')
            if config.referrer_policy:
                attrs.append(f'referrerpolicy="{html.escape(config.referrer_policy)}"')
            piece = f"<a {' '.join(attrs)}>{piece}</a>"
        fragments.append(piece)
    LOGGER.debug("render.html runs=%d merged=%d", len(styled.runs), len(merged))
    return "".join(fragments)


def render_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.4;background:#fff;color:#000}"
        "a{text-decoration:underline}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "a{color:#8ab4f8}"
        "}"
        f'{extra_css}</style><div class="styled-text">{html_fragment}</div>'
    )


class HtmlRenderer:
    """Class-based interface for HTML rendering."""

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(self, styled: StyledText) -> str:
        """Render styled text to an HTML fragment string."""
        return render_fragment(styled, config=self.config)

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_page(title, html_fragment)
