"""Parser for one line of `wmctrl -d` output. See `man wmctrl` for details."""

import re
from dataclasses import dataclass

from ..errors import LineSyntaxError

_WS = r"[ \t]+"

# <number> <marker> DG: <v> VP: <v> WA: <v> <name>
_DESKTOP_LINE_RE = re.compile(
    r"(?P<number>[^ ]+)" + _WS
    + r"(?P<marker>[*-]+)" + _WS
    + r"DG:" + _WS + r"(?P<desktop_geometry>[^ ]+)" + _WS
    + r"VP:" + _WS + r"(?P<viewport_position>[^ ]+)" + _WS
    + r"WA:" + _WS + r"(?P<workarea>[^ ]+)" + _WS
    + r"(?P<name>.*)",
    re.DOTALL,
)


@dataclass(frozen=True)
class DesktopToken:
    """Raw fields of a desktop line, before validation."""

    number: str
    # `*` for current, `-` for everything else
    marker: str
    # DG - Desktop Geometry
    desktop_geometry: str
    # VP - Viewport Position
    viewport_position: str
    # WA - Workarea geometry
    workarea: str
    name: str


def parse_desktop_line(line: str) -> DesktopToken:
    """Parse a desktop-list line.

    The DG:, VP: and WA: labels must appear in that order, each followed by
    exactly one value token. The name is the verbatim remainder.

    Raises:
        LineSyntaxError: a label or field is missing or out of order.
    """
    match = _DESKTOP_LINE_RE.fullmatch(line)
    if match is None:
        raise LineSyntaxError("desktop", line)

    return DesktopToken(**match.groupdict())
