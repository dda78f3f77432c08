"""
Render configuration for styled text output.

Centralizes behavior flags so callers can tune defaults without touching
core logic.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RenderConfig:
    # Collapse adjacent runs with identical attributes into one span.
    merge_runs: bool = True

    # Keep leading spaces/tabs visible by emitting &nbsp; at line starts.
    preserve_leading_whitespace: bool = True

    # Stroke width is a percentage of the font size; runs without a sized
    # font use this point size to compute the CSS stroke.
    default_point_size: float = 12.0

    # Link behavior
    link_target_blank: bool = True
    link_rel: str = "noopener noreferrer"
    referrer_policy: str = "no-referrer"
