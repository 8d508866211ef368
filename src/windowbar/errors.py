"""Exception hierarchy for windowbar.

Every error here is fatal: it aborts the current refresh cycle and, since
cycles are not isolated, the process.
"""


class WindowBarError(Exception):
    """Base exception for all windowbar errors."""


class CommandError(WindowBarError):
    """An external command could not be run or exited non-zero."""

    def __init__(self, command: str, reason: str):
        self.command = command
        self.reason = reason
        super().__init__(f"command failed: {command}: {reason}")


class OutputDecodeError(WindowBarError):
    """Captured command output is not valid UTF-8."""


class LineSyntaxError(WindowBarError):
    """A line did not match the expected shape of its grammar."""

    def __init__(self, grammar: str, line: str):
        self.grammar = grammar
        self.line = line
        super().__init__(f"{grammar} line did not match the expected shape: {line!r}")


class DesktopNumberError(WindowBarError):
    """A desktop number field is not a valid integer."""


class InvalidDesktopIdError(WindowBarError):
    """A desktop id outside {-1} and [0, inf)."""

    def __init__(self, value: int):
        self.value = value
        super().__init__(f"invalid desktop id: {value}")


class WindowIdError(WindowBarError):
    """A window id is not a 64-bit hexadecimal value."""


class NoCurrentDesktopError(WindowBarError):
    """No desktop in the desktop list is marked current."""


class TriggerSourceError(WindowBarError):
    """The change-notification process could not be started or read."""
