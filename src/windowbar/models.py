"""Domain model built from wmctrl/xprop tokens.

All records are immutable and rebuilt from scratch on every refresh cycle.
"""

import re
from dataclasses import dataclass, replace
from enum import Enum

from .errors import (
    DesktopNumberError,
    InvalidDesktopIdError,
    WindowIdError,
)
from .parser import (
    DesktopToken,
    WindowToken,
    parse_desktop_line,
    parse_window_line,
    parse_xprop_line,
)

_HEX_RE = re.compile(r"[0-9a-fA-F]+")
_SIGNED_RE = re.compile(r"-?[0-9]+")
_UNSIGNED_RE = re.compile(r"[0-9]+")

_MAX_WINDOW_ID = 2**64 - 1

# wmctrl reports -1 for windows shown on every desktop
STICKY_DESKTOP_VALUE = -1


@dataclass(frozen=True, order=True)
class WindowId:
    """Opaque 64-bit X window identifier."""

    value: int

    @classmethod
    def from_hex(cls, text: str) -> "WindowId":
        """Parse "0x010000ba" or "010000ba".

        Raises:
            WindowIdError: not a hex number, or wider than 64 bits.
        """
        digits = text.removeprefix("0x")
        if not _HEX_RE.fullmatch(digits):
            raise WindowIdError(f"not a hexadecimal window id: {text!r}")

        value = int(digits, 16)
        if value > _MAX_WINDOW_ID:
            raise WindowIdError(f"window id out of 64-bit range: {text!r}")
        return cls(value)

    @classmethod
    def from_xprop_string(cls, line: str) -> "WindowId":
        """Parse a full `_NET_ACTIVE_WINDOW(WINDOW): window id # 0x...` line."""
        return cls.from_hex(parse_xprop_line(line))

    def __str__(self) -> str:
        return f"0x{self.value:08x}"


class DesktopKind(Enum):
    """Variant tag of WindowDesktop."""

    ID = "id"
    STICKY = "sticky"


@dataclass(frozen=True)
class WindowDesktop:
    """Desktop a window lives on: a numbered desktop, or sticky (all desktops).

    Closed model: only -1 maps to sticky; other negatives are rejected.
    """

    kind: DesktopKind
    number: int | None = None

    @classmethod
    def id(cls, number: int) -> "WindowDesktop":
        if number < 0:
            raise InvalidDesktopIdError(number)
        return cls(DesktopKind.ID, number)

    @classmethod
    def sticky(cls) -> "WindowDesktop":
        return cls(DesktopKind.STICKY)

    @classmethod
    def from_value(cls, value: int) -> "WindowDesktop":
        """Map a wmctrl desktop value: 0.. -> id, -1 -> sticky.

        Raises:
            InvalidDesktopIdError: any other negative value.
        """
        if value >= 0:
            return cls.id(value)
        if value == STICKY_DESKTOP_VALUE:
            return cls.sticky()
        raise InvalidDesktopIdError(value)

    @property
    def is_sticky(self) -> bool:
        return self.kind is DesktopKind.STICKY

    def __str__(self) -> str:
        return "sticky" if self.is_sticky else str(self.number)


@dataclass(frozen=True)
class Window:
    """Window entry from `wmctrl -l`.

    Attributes:
        identity: X window id
        desktop: desktop the window is on
        machine_name: client machine
        title: window title, verbatim
        is_focused: derived after parsing from the active window id
    """

    identity: WindowId
    desktop: WindowDesktop
    machine_name: str
    title: str
    is_focused: bool = False

    @classmethod
    def from_string(cls, line: str) -> "Window":
        return cls.from_token(parse_window_line(line))

    @classmethod
    def from_token(cls, token: WindowToken) -> "Window":
        """Validate a WindowToken.

        Raises:
            DesktopNumberError: desktop field is not an integer.
            InvalidDesktopIdError: desktop is negative but not -1.
            WindowIdError: identity is not hex.
        """
        if not _SIGNED_RE.fullmatch(token.desktop):
            raise DesktopNumberError(f"invalid desktop number: {token.desktop!r}")
        desktop = WindowDesktop.from_value(int(token.desktop))

        return cls(
            identity=WindowId.from_hex(token.identity),
            desktop=desktop,
            machine_name=token.machine_name,
            title=token.title,
        )

    def with_focus(self, active_id: WindowId | None) -> "Window":
        """Copy with is_focused derived from the active window id."""
        return replace(self, is_focused=self.identity == active_id)


@dataclass(frozen=True)
class Desktop:
    """Desktop entry from `wmctrl -d`."""

    number: int
    is_current: bool
    name: str

    @classmethod
    def from_string(cls, line: str) -> "Desktop":
        return cls.from_token(parse_desktop_line(line))

    @classmethod
    def from_token(cls, token: DesktopToken) -> "Desktop":
        """Validate a DesktopToken.

        Only the exact marker "*" marks the current desktop.

        Raises:
            DesktopNumberError: number is not an unsigned integer.
        """
        if not _UNSIGNED_RE.fullmatch(token.number):
            raise DesktopNumberError(f"invalid desktop number: {token.number!r}")

        return cls(
            number=int(token.number),
            is_current=token.marker == "*",
            name=token.name,
        )
