"""JSON document describing a sequence of builder calls."""

from __future__ import annotations

import logging
import os
from functools import reduce
from pathlib import Path
from typing import List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from ..attributes import (
    Attribute,
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
from ..builder import Builder, SpaceCount
from ..exceptions import DocumentError
from ..text import StyledText
from ..values import Color, FontRef

LOGGER = logging.getLogger(__name__)


def _extra_mode(default: str = "forbid") -> str:
    """Extra-field policy from STYLEDTEXT_EXTRA: allow|forbid|ignore."""
    raw = (os.getenv("STYLEDTEXT_EXTRA") or default).strip().lower()
    return raw if raw in {"allow", "forbid", "ignore"} else default


class DocModel(BaseModel):
    """Base for document models; unknown keys are rejected unless
    STYLEDTEXT_EXTRA says otherwise at import time."""

    model_config = ConfigDict(extra=_extra_mode(), frozen=True)


class ColorModel(DocModel):
    """A color given either as ``"#RRGGBB[AA]"`` or as float channels."""

    hex: Optional[str] = None
    red: float = Field(0.0, ge=0.0, le=1.0)
    green: float = Field(0.0, ge=0.0, le=1.0)
    blue: float = Field(0.0, ge=0.0, le=1.0)
    alpha: float = Field(1.0, ge=0.0, le=1.0)

    @model_validator(mode="before")
    @classmethod
    def _accept_hex_string(cls, data):
        if isinstance(data, str):
            return {"hex": data}
        return data

    @field_validator("hex")
    @classmethod
    def _check_hex(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            Color.from_hex(value)
        return value

    def to_color(self) -> Color:
        if self.hex is not None:
            return Color.from_hex(self.hex)
        return Color(self.red, self.green, self.blue, self.alpha)


class FontModel(DocModel):
    name: str
    size: Optional[float] = Field(None, gt=0)
    bold: bool = False
    italic: bool = False

    def to_font(self) -> FontRef:
        return FontRef(self.name, self.size, self.bold, self.italic)


class StrokeModel(DocModel):
    width: float
    fill: bool = False


class AttributesModel(DocModel):
    font: Optional[FontModel] = None
    text_color: Optional[ColorModel] = None
    background_color: Optional[ColorModel] = None
    stroke: Optional[StrokeModel] = None
    stroke_color: Optional[ColorModel] = None
    link: Optional[str] = None
    underline: List[str] = Field(default_factory=list)
    underline_color: Optional[ColorModel] = None

    @field_validator("underline", mode="before")
    @classmethod
    def _single_name(cls, value):
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("underline")
    @classmethod
    def _known_styles(cls, value: List[str]) -> List[str]:
        for name in value:
            if name.upper() not in Underline.__members__:
                raise ValueError(f"unknown underline style {name!r}")
        return value

    def underline_style(self) -> Optional[Underline]:
        if not self.underline:
            return None
        return reduce(
            lambda acc, name: acc | Underline[name.upper()],
            self.underline,
            Underline.NONE,
        )

    def to_attributes(self) -> List[Attribute]:
        out: List[Attribute] = []
        if self.font is not None:
            out.append(Font(self.font.to_font()))
        if self.text_color is not None:
            out.append(TextColor(self.text_color.to_color()))
        if self.background_color is not None:
            out.append(BackgroundColor(self.background_color.to_color()))
        if self.stroke is not None:
            out.append(StrokeWidth(self.stroke.width, fill=self.stroke.fill))
        if self.stroke_color is not None:
            out.append(StrokeColor(self.stroke_color.to_color()))
        if self.link is not None:
            out.append(Link(self.link))
        style = self.underline_style()
        if style is not None:
            out.append(UnderlineStyle(style))
        if self.underline_color is not None:
            out.append(UnderlineColor(self.underline_color.to_color()))
        return out


class SegmentModel(DocModel):
    kind: Literal["text", "space", "spaces"] = "text"
    text: str = ""
    count: SpaceCount = 1
    attributes: AttributesModel = Field(default_factory=AttributesModel)

    @model_validator(mode="before")
    @classmethod
    def _accept_plain_string(cls, data):
        if isinstance(data, str):
            return {"kind": "text", "text": data}
        return data

    def apply(self, builder: Builder) -> Builder:
        attributes = self.attributes.to_attributes()
        if self.kind == "space":
            return builder.space(attributes)
        if self.kind == "spaces":
            return builder.spaces(self.count, attributes)
        return builder.text(self.text, attributes)


class DocumentModel(DocModel):
    title: str = "Untitled"
    segments: List[SegmentModel] = Field(default_factory=list)

    def apply(self, builder: Builder) -> Builder:
        for segment in self.segments:
            segment.apply(builder)
        return builder

    def build(self) -> StyledText:
        return self.apply(Builder()).build(finalize=True)


def load_document(path: Union[str, Path]) -> DocumentModel:
    """Read and validate a JSON styled text document."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentError(path, e.strerror or str(e)) from e
    try:
        doc = DocumentModel.model_validate_json(raw)
    except ValidationError as e:
        raise DocumentError(
            path, f"invalid document ({e.error_count()} errors)\n{e}"
        ) from e
    LOGGER.debug("document.loaded path=%s segments=%d", path, len(doc.segments))
    return doc
