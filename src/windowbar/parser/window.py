"""Parser for one line of `wmctrl -l` output."""

import re
from dataclasses import dataclass

from ..errors import LineSyntaxError

# <id> <ws><digits> <ws><machine-name> <ws><title>
# Title is the verbatim remainder of the line and may be empty.
_WINDOW_LINE_RE = re.compile(
    r"(?P<identity>[^ ]+)[ \t]+"
    r"(?P<desktop>[0-9]+)[ \t]+"
    r"(?P<machine_name>[^ ]+)[ \t]+"
    r"(?P<title>.*)",
    re.DOTALL,
)


@dataclass(frozen=True)
class WindowToken:
    """Raw fields of a window line, before validation."""

    identity: str
    desktop: str
    machine_name: str
    title: str


def parse_window_line(line: str) -> WindowToken:
    """Parse a window-list line.

    Args:
        line: e.g. "0x010000ba  1 host  Some Title — Firefox"

    Returns:
        WindowToken with the four fields verbatim.

    Raises:
        LineSyntaxError: the line does not have all four fields.
    """
    match = _WINDOW_LINE_RE.fullmatch(line)
    if match is None:
        raise LineSyntaxError("window", line)

    return WindowToken(
        identity=match["identity"],
        desktop=match["desktop"],
        machine_name=match["machine_name"],
        title=match["title"],
    )
