"""Parser for the `_NET_ACTIVE_WINDOW` property line printed by xprop."""

import re

from ..errors import LineSyntaxError

ACTIVE_WINDOW_PROPERTY = "_NET_ACTIVE_WINDOW(WINDOW):"

_XPROP_LINE_RE = re.compile(
    re.escape(ACTIVE_WINDOW_PROPERTY)
    + r"[ \t]+window[ \t]+id[ \t]+#[ \t]+(?P<window_id>.*)",
    re.DOTALL,
)


def parse_xprop_line(line: str) -> str:
    """Extract the window id text from an active-window line.

    Args:
        line: e.g. "_NET_ACTIVE_WINDOW(WINDOW): window id # 0x1e00003"

    Returns:
        The remainder after "#", verbatim (e.g. "0x1e00003").

    Raises:
        LineSyntaxError: wrong property name, reordered or missing literals.
    """
    match = _XPROP_LINE_RE.fullmatch(line)
    if match is None:
        raise LineSyntaxError("xprop", line)
    return match["window_id"]
