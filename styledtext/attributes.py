"""
Attribute vocabulary for styled text runs.

Each attribute variant is a small frozen dataclass that maps to exactly one
``AttributeKey``. ``attribute_item`` turns a variant into its ``(key, value)``
pair and ``attributes_dict`` folds a list of variants into the attribute set
stored on a run (last write wins for a repeated key).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntFlag
from types import MappingProxyType
from typing import Any, ClassVar, Dict, Iterable, Mapping, Tuple, Union


class AttributeKey(str, Enum):
    FONT = "font"
    FOREGROUND_COLOR = "foreground_color"
    BACKGROUND_COLOR = "background_color"
    STROKE_WIDTH = "stroke_width"
    STROKE_COLOR = "stroke_color"
    LINK = "link"
    UNDERLINE_STYLE = "underline_style"
    UNDERLINE_COLOR = "underline_color"


class Underline(IntFlag):
    """Underline line styles and patterns (raw values follow the platform)."""

    NONE = 0x00
    SINGLE = 0x01
    THICK = 0x02
    DOUBLE = 0x09
    PATTERN_DOT = 0x0100
    PATTERN_DASH = 0x0200
    PATTERN_DASH_DOT = 0x0300
    PATTERN_DASH_DOT_DOT = 0x0400
    BY_WORD = 0x8000


@dataclass(frozen=True)
class Font:
    key: ClassVar[AttributeKey] = AttributeKey.FONT

    font: Any

    def native_value(self) -> Any:
        return self.font


@dataclass(frozen=True)
class TextColor:
    key: ClassVar[AttributeKey] = AttributeKey.FOREGROUND_COLOR

    color: Any

    def native_value(self) -> Any:
        return self.color


@dataclass(frozen=True)
class BackgroundColor:
    key: ClassVar[AttributeKey] = AttributeKey.BACKGROUND_COLOR

    color: Any

    def native_value(self) -> Any:
        return self.color


@dataclass(frozen=True)
class StrokeWidth:
    """Outline stroke width, as a percentage of the font point size.

    A filled stroke (glyph filled and outlined) is stored as a negative
    number, a stroke-only outline as a positive one. The sign of ``width``
    itself is ignored.
    """

    key: ClassVar[AttributeKey] = AttributeKey.STROKE_WIDTH

    width: float
    fill: bool = False

    def native_value(self) -> float:
        magnitude = abs(float(self.width))
        return -magnitude if self.fill else magnitude


@dataclass(frozen=True)
class StrokeColor:
    key: ClassVar[AttributeKey] = AttributeKey.STROKE_COLOR

    color: Any

    def native_value(self) -> Any:
        return self.color


@dataclass(frozen=True)
class Link:
    key: ClassVar[AttributeKey] = AttributeKey.LINK

    url: str

    def native_value(self) -> str:
        return self.url


@dataclass(frozen=True)
class UnderlineStyle:
    key: ClassVar[AttributeKey] = AttributeKey.UNDERLINE_STYLE

    style: Underline

    def native_value(self) -> int:
        return int(self.style)


@dataclass(frozen=True)
class UnderlineColor:
    key: ClassVar[AttributeKey] = AttributeKey.UNDERLINE_COLOR

    color: Any

    def native_value(self) -> Any:
        return self.color


Attribute = Union[
    Font,
    TextColor,
    BackgroundColor,
    StrokeWidth,
    StrokeColor,
    Link,
    UnderlineStyle,
    UnderlineColor,
]

_VARIANTS = (
    Font,
    TextColor,
    BackgroundColor,
    StrokeWidth,
    StrokeColor,
    Link,
    UnderlineStyle,
    UnderlineColor,
)

AttributeSet = Mapping[AttributeKey, Any]

EMPTY_ATTRIBUTES: AttributeSet = MappingProxyType({})


def attribute_item(attribute: Attribute) -> Tuple[AttributeKey, Any]:
    """Return the ``(key, value)`` pair stored for ``attribute``."""
    if not isinstance(attribute, _VARIANTS):
        raise TypeError(
            f"Expected a styled text attribute, got {type(attribute).__name__}"
        )
    return attribute.key, attribute.native_value()


def attributes_dict(attributes: Iterable[Attribute]) -> AttributeSet:
    """Fold ``attributes`` into a read-only attribute set, last write wins."""
    out: Dict[AttributeKey, Any] = {}
    for attribute in attributes:
        key, value = attribute_item(attribute)
        out[key] = value
    if not out:
        return EMPTY_ATTRIBUTES
    return MappingProxyType(out)
