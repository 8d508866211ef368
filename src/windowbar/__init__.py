"""windowbar - window list of the current virtual desktop for status bars."""

from .errors import WindowBarError
from .models import Desktop, Window, WindowDesktop, WindowId
from .render import render_line
from .selection import DesktopState, select_visible_windows

__all__ = [
    "Desktop",
    "DesktopState",
    "Window",
    "WindowBarError",
    "WindowDesktop",
    "WindowId",
    "render_line",
    "select_visible_windows",
]
