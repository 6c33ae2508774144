"""Error and warning log producing compiler-style diagnostics."""

from __future__ import annotations

import enum
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TextIO

from .term import (
    TERM_BOLD,
    TERM_FG_CYAN,
    TERM_FG_RED,
    TERM_FG_WHITE,
    TERM_FG_YELLOW,
    TERM_RESET,
    term1,
    term2,
)

LineReader = Callable[[str, int], "str | None"]


class MsgTag(enum.Enum):
    """Kind of log message."""

    ERROR = "error"
    WARN = "warning"
    NOTE = "note"


_MSG_STYLES = {
    MsgTag.ERROR: term2(TERM_FG_RED, TERM_BOLD),
    MsgTag.WARN: term2(TERM_FG_YELLOW, TERM_BOLD),
    MsgTag.NOTE: term2(TERM_FG_CYAN, TERM_BOLD),
}


@dataclass(frozen=True)
class SourcePos:
    """Position in a source file (1-based row and column)."""

    row: int
    col: int


@dataclass(frozen=True)
class FileLoc:
    """Range within a source file."""

    file_name: str
    begin: SourcePos
    end: SourcePos


@dataclass(frozen=True)
class _Styles:
    msg: str
    range: str
    reset: str


class Log:
    """User-facing log of errors, warnings and notes."""

    def __init__(
        self,
        file: TextIO | None = None,
        disable_colors: bool = False,
        warns_as_errors: bool = False,
        max_errors: int = sys.maxsize,
        max_warns: int = sys.maxsize,
        line_reader: LineReader | None = None,
    ) -> None:
        self.file = file
        self.disable_colors = disable_colors
        self.warns_as_errors = warns_as_errors
        self.max_errors = max_errors
        self.max_warns = max_warns
        self.line_reader = line_reader
        self.error_count = 0
        self.warn_count = 0

    def msg(self, tag: MsgTag, loc: FileLoc | None, fmt: str, *args: Any) -> None:
        """Record a message, printing it unless a limit has been reached."""
        if self.warns_as_errors and tag is MsgTag.WARN:
            tag = MsgTag.ERROR

        if tag is MsgTag.ERROR:
            self.error_count += 1
        elif tag is MsgTag.WARN:
            self.warn_count += 1

        if self.error_count > self.max_errors or self.warn_count > self.max_warns:
            return
        if self.file is None:
            return

        out = self.file
        if tag is not MsgTag.NOTE and self.error_count + self.warn_count > 1:
            out.write("\n")

        if self.disable_colors:
            styles = _Styles("", "", "")
        else:
            styles = _Styles(
                _MSG_STYLES[tag], term2(TERM_FG_WHITE, TERM_BOLD), term1(TERM_RESET)
            )

        text = fmt % args if args else fmt
        out.write(f"{styles.msg}{tag.value}{styles.reset}: {text}\n")

        if loc is not None:
            out.write(
                f"  in {styles.range}{loc.file_name}"
                f"({loc.begin.row}:{loc.begin.col} - {loc.end.row}:{loc.end.col})"
                f"{styles.reset}\n"
            )
            if self.line_reader is not None:
                self._print_diagnostic(loc, styles)

    def error(self, loc: FileLoc | None, fmt: str, *args: Any) -> None:
        """Record an error."""
        self.msg(MsgTag.ERROR, loc, fmt, *args)

    def warn(self, loc: FileLoc | None, fmt: str, *args: Any) -> None:
        """Record a warning."""
        self.msg(MsgTag.WARN, loc, fmt, *args)

    def note(self, loc: FileLoc | None, fmt: str, *args: Any) -> None:
        """Record a note attached to the previous message."""
        self.msg(MsgTag.NOTE, loc, fmt, *args)

    def _print_diagnostic(self, loc: FileLoc, styles: _Styles) -> None:
        out = self.file
        indent = len(str(loc.end.row))
        gutter = f" {styles.range}{' ' * indent}{styles.reset} {styles.msg}|{styles.reset}"

        line = self.line_reader(loc.file_name, loc.begin.row) or ""
        row = str(loc.begin.row).rjust(indent)

        out.write(f"{gutter}\n")
        out.write(f" {styles.range}{row}{styles.reset} {styles.msg}|{styles.reset}{line}\n")

        if loc.begin.row == loc.end.row:
            marker = "^" * max(loc.end.col - loc.begin.col, 0)
        else:
            marker = "^" + "." * max(len(line) - loc.begin.col, 0)
        padding = " " * max(loc.begin.col - 1, 0)
        out.write(f"{gutter}{padding}{styles.msg}{marker}{styles.reset}\n")