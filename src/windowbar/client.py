"""Client for the wmctrl/xprop introspection commands."""

import asyncio

from . import config
from .errors import CommandError, OutputDecodeError
from .models import Desktop, Window, WindowId
from .selection import DesktopState, build_desktop_state
from .telemetry import get_logger, metrics

logger = get_logger(__name__)


def _output_lines(output: str) -> list[str]:
    """Non-empty lines of command output, each kept verbatim."""
    return [line for line in output.splitlines() if line.strip()]


class WmClient:
    """Client for querying window manager state via subprocess commands.

    Provides async methods for:
    - Listing windows (`wmctrl -l`)
    - Listing desktops (`wmctrl -d`)
    - Reading the active window (`xprop -root _NET_ACTIVE_WINDOW`)

    Every failure raises; nothing is retried.
    """

    def __init__(
        self,
        wmctrl: str = config.WMCTRL_COMMAND,
        xprop: str = config.XPROP_COMMAND,
    ):
        """Initialize WmClient.

        Args:
            wmctrl: wmctrl executable name or path.
            xprop: xprop executable name or path.
        """
        self._wmctrl = wmctrl
        self._xprop = xprop

    async def run(self, *cmd: str) -> str:
        """Execute a command and return its stdout.

        Args:
            *cmd: Program and arguments (e.g., "wmctrl", "-l")

        Returns:
            Decoded stdout.

        Raises:
            CommandError: the command could not be spawned or exited non-zero.
            OutputDecodeError: stdout is not valid UTF-8.
        """
        command_line = " ".join(cmd)
        if config.METRICS_ENABLED:
            metrics.inc("command.runs", {"command": cmd[0]})

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as e:
            if config.METRICS_ENABLED:
                metrics.inc("command.errors", {"command": cmd[0]})
            raise CommandError(command_line, str(e)) from e

        if proc.returncode != 0:
            if config.METRICS_ENABLED:
                metrics.inc("command.errors", {"command": cmd[0]})
            reason = stderr.decode(errors="replace").strip() or f"exit status {proc.returncode}"
            raise CommandError(command_line, reason)

        try:
            return stdout.decode("utf-8")
        except UnicodeDecodeError as e:
            raise OutputDecodeError(f"{command_line}: {e}") from e

    async def list_windows(self) -> list[Window]:
        """List all managed windows in wmctrl order."""
        output = await self.run(self._wmctrl, *config.WMCTRL_LIST_WINDOWS_ARGS)
        return [Window.from_string(line) for line in _output_lines(output)]

    async def list_desktops(self) -> list[Desktop]:
        """List all desktops in wmctrl order."""
        output = await self.run(self._wmctrl, *config.WMCTRL_LIST_DESKTOPS_ARGS)
        return [Desktop.from_string(line) for line in _output_lines(output)]

    async def active_window(self) -> WindowId:
        """Get the id of the focused window."""
        output = await self.run(self._xprop, *config.XPROP_ACTIVE_WINDOW_ARGS)
        return WindowId.from_xprop_string(output.strip())

    async def snapshot(self) -> DesktopState:
        """Query all three commands and build a DesktopState."""
        active_id = await self.active_window()
        desktops = await self.list_desktops()
        windows = await self.list_windows()
        return build_desktop_state(windows, desktops, active_id)
