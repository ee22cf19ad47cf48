"""Levelled console logging with ANSI colours and command-line setup."""

from __future__ import annotations

import enum
import inspect
import sys
from dataclasses import dataclass, fields
from typing import Any, Iterable, TextIO

from arborlib.strings import format_string

__all__ = [
    "LogLevel",
    "TerminalColors",
    "Logger",
    "log_level_from_string",
    "log_level_to_string",
    "valid_log_level_options",
]

NEWLINE = "\n"


class LogLevel(enum.IntEnum):
    UNDEFINED = 0
    VERBOSE = 1
    DEBUG = 2
    INFO = 3
    ERROR = 4
    SHUSH = 5


_LEVEL_NAMES = {
    LogLevel.UNDEFINED: "LogLevel_Undefined",
    LogLevel.VERBOSE: "LogLevel_Verbose",
    LogLevel.DEBUG: "LogLevel_Debug",
    LogLevel.INFO: "LogLevel_Info",
    LogLevel.ERROR: "LogLevel_Error",
    LogLevel.SHUSH: "LogLevel_Shush",
}
_LEVELS_BY_NAME = {name: level for level, name in _LEVEL_NAMES.items()}


def log_level_to_string(level: LogLevel) -> str:
    """The canonical name of ``level``, e.g. ``LogLevel_Info``."""
    return _LEVEL_NAMES.get(LogLevel(level), "")


def log_level_from_string(text: str) -> LogLevel:
    """Parse a canonical level name; unknown names give ``UNDEFINED``."""
    return _LEVELS_BY_NAME.get(text, LogLevel.UNDEFINED)


def valid_log_level_options() -> list[str]:
    """Names of every level that may be selected on the command line."""
    return [_LEVEL_NAMES[level] for level in LogLevel if level > LogLevel.UNDEFINED]


@dataclass
class TerminalColors:
    """ANSI escape sequences used to colour log prefixes."""

    red: str = "\x1b[31m"
    bright_red: str = "\x1b[91m"
    dark_red: str = "\x1b[38;5;88m"
    blue: str = "\x1b[34m"
    bright_blue: str = "\x1b[94m"
    purple: str = "\x1b[35m"
    bright_purple: str = "\x1b[95m"
    green: str = "\x1b[32m"
    bright_green: str = "\x1b[92m"
    yellow: str = "\x1b[33m"
    bright_yellow: str = "\x1b[93m"
    white: str = "\x1b[37m"
    grey: str = "\x1b[38;5;242m"

    def turn_off(self) -> None:
        """Blank every colour so output carries no escape sequences."""
        for field in fields(self):
            setattr(self, field.name, "")


class Logger:
    """Writes levelled, prefixed messages to a text stream.

    ``do_runtime_break`` controls what an error does after logging: when true
    it raises RuntimeError, otherwise it notes that the break was skipped.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        level: LogLevel = LogLevel.UNDEFINED,
        colors: TerminalColors | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.level = LogLevel(level)
        self.colors = colors if colors is not None else TerminalColors()
        self.do_runtime_break = False

    def log_direct(self, fmt: str, *args: Any) -> None:
        """Format and write unconditionally."""
        self.stream.write(format_string(fmt, *args))

    def _enabled(self, threshold: LogLevel) -> bool:
        return self.level <= threshold

    def _prefixed(self, threshold: LogLevel, color: str, label: str, fmt: str, args: tuple) -> None:
        if self._enabled(threshold):
            self.log_direct("%S" + label + "%S- ", color, self.colors.white)
            self.log_direct(fmt, *args)
            self.log_direct(NEWLINE)

    def debug_chars(self, fmt: str, *args: Any) -> None:
        if self._enabled(LogLevel.DEBUG):
            self.log_direct(fmt, *args)

    def debug_line(self, fmt: str, *args: Any) -> None:
        if self._enabled(LogLevel.DEBUG):
            self.log_direct(fmt, *args)
            self.log_direct(NEWLINE)

    def debug(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.DEBUG, self.colors.blue, "   Debug   ", fmt, args)

    def info(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.INFO, self.colors.blue, "   Info    ", fmt, args)

    def soft_error(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.ERROR, self.colors.red, " ! Error   ", fmt, args)

    def error(self, fmt: str, *args: Any) -> None:
        if self._enabled(LogLevel.ERROR):
            self.soft_error(fmt, *args)
            self._runtime_break()

    def leak(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.ERROR, self.colors.red, " * LEAKING ", fmt, args)

    def bug(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.ERROR, self.colors.red, " * BUG     ", fmt, args)

    def perf(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.INFO, self.colors.yellow, "   Perf    ", fmt, args)

    def warn(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.INFO, self.colors.yellow, " * Warning ", fmt, args)

    def success(self, fmt: str, *args: Any) -> None:
        self._prefixed(LogLevel.INFO, self.colors.green, "   Success ", fmt, args)

    def _runtime_break(self) -> None:
        if self.do_runtime_break:
            self.log_direct(NEWLINE)
            self.log_direct("%S", self.colors.red)
            self.log_direct(" # Runtime Break # " + NEWLINE + NEWLINE)
            self.log_direct("%S", self.colors.white)
            raise RuntimeError("runtime break")
        self.debug_line("   Break   - Skipped")

    def check(self, condition: Any, description: str) -> bool:
        """Report a failed assertion with its caller's location; return the outcome."""
        if condition:
            return True
        frame = inspect.currentframe()
        caller = frame.f_back if frame is not None else None
        function = caller.f_code.co_name if caller is not None else "?"
        filename = caller.f_code.co_filename if caller is not None else "?"
        line = caller.f_lineno if caller is not None else 0
        del frame, caller
        self.log_direct(
            "%S ! FAILED%S  - `Assert(%s)` during %s() %s:%u:0" + NEWLINE,
            self.colors.red,
            self.colors.white,
            description,
            function,
            filename,
            line,
        )
        self._runtime_break()
        return False

    def _dump_valid_log_level_options(self) -> None:
        self.debug_chars("[")
        options = valid_log_level_options()
        for position, name in enumerate(options):
            self.debug_chars(" %S", name)
            if position < len(options) - 1:
                self.debug_chars(",")
        self.debug_chars(" ]\n")

    def setup(self, argv: Iterable[str]) -> None:
        """Apply ``-c0``/``--colors-off`` and ``--log-level`` from ``argv``.

        ``argv[0]`` is the program name and is skipped.  Colours are also
        turned off when the stream is not a terminal.  An unset level ends
        up as ``ERROR``.
        """
        isatty = getattr(self.stream, "isatty", None)
        if isatty is None or not isatty():
            self.colors.turn_off()

        args = iter(list(argv)[1:])
        for arg in args:
            if arg in ("-c0", "--colors-off"):
                self.colors.turn_off()
            elif arg == "--log-level":
                level_string = next(args, None)
                if level_string is None:
                    self.warn("Log Level required when using the --log-level switch.")
                    self.debug_chars("           - Valid values are ")
                    self._dump_valid_log_level_options()
                    continue
                level = log_level_from_string(level_string)
                if level > LogLevel.UNDEFINED:
                    self.level = level
                    self.info("Setting Global_LogLevel to %S", level_string)
                else:
                    self.warn("Invalid --log-level switch value (%S)", level_string)
                    self.debug_chars("           - Valid values are ")
                    self._dump_valid_log_level_options()

        if self.level == LogLevel.UNDEFINED:
            self.level = LogLevel.ERROR