"""windowbar 命令行入口

- windowbar-polybar WIDTH: 持续输出当前桌面的窗口列表（polybar 格式）
- windows-on-this-desktop: 打印一次当前桌面的窗口
"""

import argparse
import asyncio
import sys

from rich.console import Console
from rich.table import Table

from .client import WmClient
from .errors import WindowBarError
from .runtime import bootstrap
from .schemas import DesktopView
from .selection import DesktopState
from .telemetry import get_logger, setup_logging

logger = get_logger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _non_negative_int(value: str) -> int:
    try:
        width = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}") from None
    if width < 0:
        raise argparse.ArgumentTypeError(f"width must be >= 0: {width}")
    return width


def build_polybar_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windowbar-polybar",
        description="Print the windows of the current desktop as a polybar line, "
        "refreshing on every focus/property change.",
    )
    parser.add_argument("width", type=_non_negative_int, help="total bar width in characters")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="override WINDOWBAR_LOG_LEVEL",
    )
    return parser


def build_list_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="windows-on-this-desktop",
        description="List the windows of the current desktop.",
    )
    parser.add_argument("--json", action="store_true", help="print JSON instead of a table")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="override WINDOWBAR_LOG_LEVEL",
    )
    return parser


async def run_polybar(width: int) -> None:
    components = bootstrap(width)
    await components.run()


def render_table(state: DesktopState) -> Table:
    """Rich table of the current desktop's windows."""
    desktop = state.current_desktop
    table = Table(title=f"Windows on desktop {desktop.number} ({desktop.name})")
    table.add_column("", width=1)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Machine", style="magenta")
    table.add_column("Title")

    for window in state.this_desktop_windows:
        marker = "*" if window.is_focused else ""
        style = "bold" if window.is_focused else None
        table.add_row(marker, str(window.identity), window.machine_name, window.title, style=style)

    focused = state.focused_window
    table.caption = f"focused: {focused.title}" if focused else "no focused window"
    return table


def polybar_main(argv: list[str] | None = None) -> int:
    """入口：windowbar-polybar"""
    args = build_polybar_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        asyncio.run(run_polybar(args.width))
    except WindowBarError as e:
        logger.error(f"[windowbar] {e}")
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


def list_main(argv: list[str] | None = None) -> int:
    """入口：windows-on-this-desktop"""
    args = build_list_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        state = asyncio.run(WmClient().snapshot())
    except WindowBarError as e:
        logger.error(f"[windowbar] {e}")
        return 1

    console = Console()
    if args.json:
        console.print_json(DesktopView.from_state(state).model_dump_json())
    else:
        console.print(render_table(state))
    return 0


if __name__ == "__main__":
    sys.exit(polybar_main())
