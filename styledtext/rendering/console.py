"""Terminal rendering of styled text through rich."""

from __future__ import annotations

import logging
from typing import Any, Optional

from rich.color import Color as RichColor
from rich.color import ColorParseError
from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..attributes import AttributeKey, AttributeSet, Underline
from ..text import StyledText
from ..values import Color, FontRef

LOGGER = logging.getLogger(__name__)


def _rich_color(value: Any) -> Optional[RichColor]:
    if isinstance(value, Color):
        return RichColor.from_rgb(*value.rgb8)
    if isinstance(value, str) and value:
        try:
            return RichColor.parse(value)
        except ColorParseError:
            LOGGER.debug("render.console.color_unparsed value=%r", value)
            return None
    return None


def run_style(attributes: AttributeSet) -> Style:
    """Translate one attribute set into a rich ``Style``.

    Stroke and underline color have no terminal equivalent and are dropped.
    """
    if not attributes:
        return Style.null()
    bold = italic = None
    font = attributes.get(AttributeKey.FONT)
    if isinstance(font, FontRef):
        bold = font.bold or None
        italic = font.italic or None

    underline = underline2 = None
    raw = attributes.get(AttributeKey.UNDERLINE_STYLE)
    if raw is not None and int(raw) & 0xFF:
        if (int(raw) & 0x0F) == Underline.DOUBLE:
            underline2 = True
        else:
            underline = True

    link = attributes.get(AttributeKey.LINK)
    return Style(
        color=_rich_color(attributes.get(AttributeKey.FOREGROUND_COLOR)),
        bgcolor=_rich_color(attributes.get(AttributeKey.BACKGROUND_COLOR)),
        bold=bold,
        italic=italic,
        underline=underline,
        underline2=underline2,
        link=str(link) if link else None,
    )


def to_rich_text(styled: StyledText) -> Text:
    """Convert styled text into a rich ``Text``, one span per run."""
    text = Text()
    for run in styled.runs:
        if run.text:
            text.append(run.text, style=run_style(run.attributes))
    return text


class ConsoleRenderer:
    """Prints styled text to a rich console."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, styled: StyledText) -> Text:
        return to_rich_text(styled)

    def print(self, styled: StyledText) -> None:
        self.console.print(to_rich_text(styled))
