"""Status-bar renderer module."""

from .renderer import (
    FOCUSED_STYLE,
    UNFOCUSED_STYLE,
    SegmentStyle,
    fit_title,
    render_line,
    segment_width,
)

__all__ = [
    "FOCUSED_STYLE",
    "UNFOCUSED_STYLE",
    "SegmentStyle",
    "fit_title",
    "render_line",
    "segment_width",
]
