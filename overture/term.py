"""ANSI terminal escape sequences and terminal detection."""

from __future__ import annotations

from typing import Any

TERM_RESET = "0"

TERM_BOLD = "1"
TERM_ITALIC = "3"
TERM_UNDERLINE = "4"

TERM_FG_BLACK = "30"
TERM_FG_RED = "31"
TERM_FG_GREEN = "32"
TERM_FG_YELLOW = "33"
TERM_FG_BLUE = "34"
TERM_FG_MAGENTA = "35"
TERM_FG_CYAN = "36"
TERM_FG_WHITE = "37"

TERM_BG_BLACK = "40"
TERM_BG_RED = "41"
TERM_BG_GREEN = "42"
TERM_BG_YELLOW = "43"
TERM_BG_BLUE = "44"
TERM_BG_MAGENTA = "45"
TERM_BG_CYAN = "46"
TERM_BG_WHITE = "47"

_ESC = "\x1b["


def term1(x: str) -> str:
    """Return an escape sequence with one element."""
    return f"{_ESC}{x}m"


def term2(x: str, y: str) -> str:
    """Return an escape sequence with two elements."""
    return f"{_ESC}{x};{y}m"


def term3(x: str, y: str, z: str) -> str:
    """Return an escape sequence with three elements."""
    return f"{_ESC}{x};{y};{z}m"


def is_term(file: Any) -> bool:
    """Return whether the given stream is attached to a terminal."""
    try:
        return bool(file.isatty())
    except (AttributeError, ValueError):
        return False