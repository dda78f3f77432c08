"""Immutable payload types for fonts and colors.

The builder treats attribute payloads as opaque, so any object may be used.
These two frozen dataclasses are what the renderers know how to read; being
frozen, they can be shared between runs without one caller's change leaking
into text that was already built.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


def _channel(value: float) -> int:
    return max(0, min(255, round(value * 255)))


@dataclass(frozen=True)
class Color:
    """RGBA color with float channels in ``0.0..1.0``."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        """Parse ``#RRGGBB`` or ``#RRGGBBAA`` (leading ``#`` optional)."""
        raw = value.strip().lstrip("#")
        if len(raw) not in (6, 8):
            raise ValueError(f"Invalid hex color: {value!r}")
        try:
            parts = [int(raw[i : i + 2], 16) for i in range(0, len(raw), 2)]
        except ValueError as e:
            raise ValueError(f"Invalid hex color: {value!r}") from e
        alpha = parts[3] / 255 if len(parts) == 4 else 1.0
        return cls(parts[0] / 255, parts[1] / 255, parts[2] / 255, alpha)

    @property
    def rgb8(self) -> tuple:
        return (_channel(self.red), _channel(self.green), _channel(self.blue))

    @property
    def hex(self) -> str:
        r8, g8, b8 = self.rgb8
        if self.alpha < 1.0:
            return f"#{r8:02X}{g8:02X}{b8:02X}{_channel(self.alpha):02X}"
        return f"#{r8:02X}{g8:02X}{b8:02X}"


@dataclass(frozen=True)
class FontRef:
    """Font reference by family/PostScript name."""

    name: str
    size: Optional[float] = None
    bold: bool = False
    italic: bool = False


# A handful of named colors for convenience in application code and tests.
BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)
RED = Color(1.0, 0.0, 0.0)
GREEN = Color(0.0, 1.0, 0.0)
BLUE = Color(0.0, 0.0, 1.0)
YELLOW = Color(1.0, 1.0, 0.0)
