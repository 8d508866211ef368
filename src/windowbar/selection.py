"""Selection of the windows shown for the current desktop."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from .errors import NoCurrentDesktopError
from .models import Desktop, Window, WindowDesktop, WindowId
from .telemetry import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DesktopState:
    """Snapshot of one refresh: every window, plus the per-desktop split.

    Attributes:
        current_desktop: desktop marked current by wmctrl
        active_window: id of the focused window
        all_windows: every window, in wmctrl order
        this_desktop_windows: windows on current_desktop, focus marked
        sticky_windows: windows shown on all desktops (never rendered)
    """

    current_desktop: Desktop
    active_window: WindowId
    all_windows: list[Window] = field(default_factory=list)
    this_desktop_windows: list[Window] = field(default_factory=list)
    sticky_windows: list[Window] = field(default_factory=list)

    @property
    def focused_window(self) -> Window | None:
        for window in self.this_desktop_windows:
            if window.is_focused:
                return window
        return None


def find_current_desktop(desktops: Iterable[Desktop]) -> Desktop:
    """Return the first desktop marked current.

    If several claim to be current, the first in iteration order wins.

    Raises:
        NoCurrentDesktopError: no desktop is current.
    """
    for desktop in desktops:
        if desktop.is_current:
            return desktop
    raise NoCurrentDesktopError("No current desktop found")


def windows_on_desktop(
    windows: Iterable[Window],
    desktop_number: int,
    active_id: WindowId | None,
) -> list[Window]:
    """Windows on a numbered desktop with focus marked, in input order.

    Sticky windows are not included.
    """
    target = WindowDesktop.id(desktop_number)
    return [w.with_focus(active_id) for w in windows if w.desktop == target]


def select_visible_windows(
    windows: Iterable[Window],
    desktops: Iterable[Desktop],
    active_id: WindowId | None,
) -> list[Window]:
    """Windows to display: those on the current desktop, focus marked."""
    current = find_current_desktop(desktops)
    return windows_on_desktop(windows, current.number, active_id)


def build_desktop_state(
    windows: Iterable[Window],
    desktops: Iterable[Desktop],
    active_id: WindowId,
) -> DesktopState:
    """Build the full DesktopState for one refresh."""
    all_windows = list(windows)
    current = find_current_desktop(desktops)
    this_desktop = windows_on_desktop(all_windows, current.number, active_id)
    sticky = [w for w in all_windows if w.desktop.is_sticky]

    logger.debug(
        f"[Selection] desktop={current.number} windows={len(this_desktop)}/"
        f"{len(all_windows)} sticky={len(sticky)} active={active_id}"
    )

    return DesktopState(
        current_desktop=current,
        active_window=active_id,
        all_windows=all_windows,
        this_desktop_windows=this_desktop,
        sticky_windows=sticky,
    )
