"""Polybar markup renderer for the window list."""

from collections.abc import Sequence
from dataclasses import dataclass

from .. import config
from ..models import Window


@dataclass(frozen=True)
class SegmentStyle:
    """Foreground/background colors of one segment."""

    foreground: str
    background: str

    def wrap(self, content: str) -> str:
        return f"%{{F{self.foreground}}}%{{B{self.background}}} {content} %{{F-}}%{{B-}}"


FOCUSED_STYLE = SegmentStyle(config.FOCUSED_FOREGROUND, config.FOCUSED_BACKGROUND)
UNFOCUSED_STYLE = SegmentStyle(config.UNFOCUSED_FOREGROUND, config.UNFOCUSED_BACKGROUND)


def segment_width(width: int, window_count: int) -> int:
    """Characters available for one title: floor(width / count) - padding."""
    if window_count == 0:
        return 0
    return max(width // window_count - config.SEGMENT_PADDING, 0)


def fit_title(title: str, char_limit: int) -> str:
    """Space-fill the title up to char_limit, then cut it to char_limit."""
    return title.ljust(char_limit)[:char_limit]


def render_line(
    windows: Sequence[Window],
    width: int,
    focused_style: SegmentStyle = FOCUSED_STYLE,
    unfocused_style: SegmentStyle = UNFOCUSED_STYLE,
) -> str:
    """Render windows as one fixed-width polybar line.

    Args:
        windows: windows to show, in display order
        width: total character budget of the bar

    Returns:
        One segment per window, or "" for no windows.
    """
    if not windows:
        return ""

    char_limit = segment_width(width, len(windows))
    segments = []
    for window in windows:
        style = focused_style if window.is_focused else unfocused_style
        segments.append(style.wrap(fit_title(window.title, char_limit)))
    return "".join(segments)
