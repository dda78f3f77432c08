"""Fluent builder for styled text runs."""

from .attributes import (
    Attribute,
    AttributeKey,
    AttributeSet,
    BackgroundColor,
    Font,
    Link,
    StrokeColor,
    StrokeWidth,
    TextColor,
    Underline,
    UnderlineColor,
    UnderlineStyle,
)
from .builder import Builder, SpaceCount
from .exceptions import BuilderFinalizedError, DocumentError, StyledTextException
from .text import Run, StyledText
from .values import Color, FontRef

__all__ = [
    "Attribute",
    "AttributeKey",
    "AttributeSet",
    "BackgroundColor",
    "Builder",
    "BuilderFinalizedError",
    "Color",
    "DocumentError",
    "Font",
    "FontRef",
    "Link",
    "Run",
    "SpaceCount",
    "StrokeColor",
    "StrokeWidth",
    "StyledText",
    "StyledTextException",
    "TextColor",
    "Underline",
    "UnderlineColor",
    "UnderlineStyle",
]
