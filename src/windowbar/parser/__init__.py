"""Line parsers for wmctrl and xprop output."""

from .desktop import DesktopToken, parse_desktop_line
from .window import WindowToken, parse_window_line
from .xprop import parse_xprop_line

__all__ = [
    "DesktopToken",
    "WindowToken",
    "parse_desktop_line",
    "parse_window_line",
    "parse_xprop_line",
]
