"""Public exports for styled text document models."""

from __future__ import annotations

from .document import (
    AttributesModel,
    ColorModel,
    DocumentModel,
    FontModel,
    SegmentModel,
    StrokeModel,
    load_document,
)

__all__ = [
    "AttributesModel",
    "ColorModel",
    "DocumentModel",
    "FontModel",
    "SegmentModel",
    "StrokeModel",
    "load_document",
]
