"""JSON views of a DesktopState."""

from pydantic import BaseModel

from .models import Window
from .selection import DesktopState


class WindowView(BaseModel):
    """One window as printed by `windows-on-this-desktop --json`"""

    id: str
    desktop: str
    machine_name: str
    title: str
    is_focused: bool = False

    @classmethod
    def from_window(cls, window: Window) -> "WindowView":
        return cls(
            id=str(window.identity),
            desktop=str(window.desktop),
            machine_name=window.machine_name,
            title=window.title,
            is_focused=window.is_focused,
        )


class DesktopView(BaseModel):
    """Current desktop with its windows"""

    number: int
    name: str
    active_window: str
    windows: list[WindowView] = []
    sticky_windows: list[WindowView] = []

    @classmethod
    def from_state(cls, state: DesktopState) -> "DesktopView":
        return cls(
            number=state.current_desktop.number,
            name=state.current_desktop.name,
            active_window=str(state.active_window),
            windows=[WindowView.from_window(w) for w in state.this_desktop_windows],
            sticky_windows=[WindowView.from_window(w) for w in state.sticky_windows],
        )
