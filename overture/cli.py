"""Declarative command-line option parser."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable, MutableSequence, Sequence
from dataclasses import dataclass
from typing import Any

_UINTMAX = (1 << 64) - 1
_NUMBER = re.compile(r"\s*([+-]?)([0-9]+)")


class CliState(enum.Enum):
    """Outcome of matching an option against an argument."""

    ACCEPTED = enum.auto()
    REJECTED = enum.auto()
    ERROR = enum.auto()


ParseFunc = Callable[["CliOption", "str | None"], CliState]


def _set_flag(option: CliOption, arg: str | None) -> CliState:
    option.value = True
    return CliState.ACCEPTED


def _strtou(arg: str, bits: int) -> int:
    match = _NUMBER.match(arg)
    if not match:
        return 0
    value = int(match.group(2))
    if value > _UINTMAX:
        value = _UINTMAX
    elif match.group(1) == "-":
        value = -value & _UINTMAX
    return value & ((1 << bits) - 1)


def _set_uint32(option: CliOption, arg: str | None) -> CliState:
    option.value = _strtou(arg or "", 32)
    return CliState.ACCEPTED


def _set_uint64(option: CliOption, arg: str | None) -> CliState:
    option.value = _strtou(arg or "", 64)
    return CliState.ACCEPTED


def _set_string(option: CliOption, arg: str | None) -> CliState:
    option.value = arg
    return CliState.ACCEPTED


@dataclass
class CliOption:
    """Command-line option; `parse(option, arg)` stores the result in `value`."""

    short_name: str | None = None
    long_name: str | None = None
    has_value: bool = False
    parse: ParseFunc = _set_flag
    value: Any = None


def cli_flag(short_name: str | None = None, long_name: str | None = None) -> CliOption:
    """Return a boolean flag taking no argument."""
    return CliOption(short_name, long_name, parse=_set_flag, value=False)


def cli_option_uint32(short_name: str | None = None, long_name: str | None = None) -> CliOption:
    """Return an option taking a 32-bit unsigned integer."""
    return CliOption(short_name, long_name, has_value=True, parse=_set_uint32, value=0)


def cli_option_uint64(short_name: str | None = None, long_name: str | None = None) -> CliOption:
    """Return an option taking a 64-bit unsigned integer."""
    return CliOption(short_name, long_name, has_value=True, parse=_set_uint64, value=0)


def cli_option_string(short_name: str | None = None, long_name: str | None = None) -> CliOption:
    """Return an option taking a string."""
    return CliOption(short_name, long_name, has_value=True, parse=_set_string, value=None)


def _take(argv: MutableSequence[str | None], i: int) -> str | None:
    arg = argv[i]
    argv[i] = None
    return arg


def _take_value(
    argv: MutableSequence[str | None], i: int, option: CliOption
) -> tuple[CliState, int]:
    if i + 1 >= len(argv):
        raise ValueError(f"missing argument for '{argv[i]}'")
    argv[i] = None
    i += 1
    return option.parse(option, _take(argv, i)), i


def accept_option(
    argv: MutableSequence[str | None], i: int, option: CliOption
) -> tuple[CliState, int]:
    """Match `argv[i]` against `option`.

    Consumed arguments are replaced by None in `argv`. Returns the state and
    the index of the last argument consumed. Raises ValueError when the
    option's value is missing.
    """
    arg = argv[i]
    if option.short_name and arg == option.short_name:
        if not option.has_value:
            argv[i] = None
            return option.parse(option, None), i
        return _take_value(argv, i, option)

    if option.long_name:
        name = option.long_name
        if not arg.startswith(name):
            return CliState.REJECTED, i
        rest = arg[len(name):]
        if not option.has_value:
            if rest:
                return CliState.REJECTED, i
            argv[i] = None
            return option.parse(option, None), i
        if rest.startswith("="):
            argv[i] = None
            return option.parse(option, rest[1:]), i
        if not rest:
            return _take_value(argv, i, option)
    return CliState.REJECTED, i


def parse_options(argv: MutableSequence[str | None], options: Sequence[CliOption]) -> None:
    """Parse `argv` (program name first) against `options`.

    Arguments not starting with '-' are left in place. Raises ValueError on an
    unknown option, a missing value, or an option whose parser reports an error.
    """
    i = 1
    while i < len(argv):
        arg = argv[i]
        if arg is None or not arg.startswith("-"):
            i += 1
            continue
        for option in options:
            state, i = accept_option(argv, i, option)
            if state is CliState.ACCEPTED:
                break
            if state is CliState.ERROR:
                raise ValueError(f"error while parsing option '{arg}'")
        else:
            raise ValueError(f"invalid option '{arg}'")
        i += 1