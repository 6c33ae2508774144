"""Small test harness: register named cases, filter them by prefix, run and summarise."""

from __future__ import annotations

import enum
import inspect
import os
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Any, TextIO

from .cli import CliOption, CliState, cli_flag, parse_options
from .term import TERM_BOLD, TERM_FG_GREEN, TERM_FG_RED, TERM_RESET, is_term, term1, term2


class RequirementFailed(AssertionError):
    """Raised by Context.require when a condition does not hold."""

    def __init__(self, test_name: str, msg: str, file: str, line: int) -> None:
        super().__init__(f"[{test_name}] Assertion '{msg}' failed ({file}:{line})")
        self.test_name = test_name
        self.msg = msg
        self.file = file
        self.line = line


@dataclass
class Context:
    """State passed to a running test case."""

    name: str
    passed_asserts: int = 0

    def require(self, condition: Any, msg: str = "requirement") -> None:
        """Count a passed requirement, or fail the test if `condition` is false."""
        if not condition:
            frame = inspect.currentframe()
            caller = frame.f_back if frame is not None else None
            if caller is not None:
                file, line = caller.f_code.co_filename, caller.f_lineno
            else:
                file, line = "<unknown>", 0
            raise RequirementFailed(self.name, msg, file, line)
        self.passed_asserts += 1


TestFunc = Callable[[Context], Any]


class _Status(enum.Enum):
    NOT_RUN = "[UNKNOWN]"
    PASSED = "[PASSED]"
    FAILED = "[FAILED]"


@dataclass
class _Case:
    name: str
    func: TestFunc
    enabled: bool = False
    status: _Status = _Status.NOT_RUN
    passed_asserts: int = 0


def _color(success: bool) -> str:
    return term2(TERM_FG_GREEN, TERM_BOLD) if success else term2(TERM_FG_RED, TERM_BOLD)


class Harness:
    """Collection of named test cases."""

    def __init__(self) -> None:
        self._cases: list[_Case] = []

    def register(self, name: str, func: TestFunc) -> None:
        """Add a test case; it is disabled until `filter` enables it."""
        self._cases.append(_Case(name, func))

    def case(self, name: str | None = None) -> Callable[[TestFunc], TestFunc]:
        """Decorator registering a function as a test case."""

        def decorator(func: TestFunc) -> TestFunc:
            self.register(name or func.__name__, func)
            return func

        return decorator

    def filter(self, prefixes: Iterable[str | None]) -> None:
        """Enable cases whose name starts with one of `prefixes`; all if there are none."""
        active = [p for p in prefixes if p is not None]
        for case in self._cases:
            case.enabled = not active or any(case.name.startswith(p) for p in active)

    def print_tests(self, file: TextIO | None = None) -> None:
        """Write every case name, one per line."""
        out = file if file is not None else sys.stdout
        for case in self._cases:
            out.write(f"{case.name}\n")

    def _run_case(self, case: _Case) -> None:
        context = Context(case.name)
        try:
            case.func(context)
            case.status = _Status.PASSED
        except RequirementFailed as exc:
            print(exc, file=sys.stderr)
            case.status = _Status.FAILED
        except Exception as exc:  # noqa: BLE001 - any error fails the case
            print(f"[{case.name}] {type(exc).__name__}: {exc}", file=sys.stderr)
            case.status = _Status.FAILED
        case.passed_asserts = context.passed_asserts

    def run(self, disable_colors: bool = False) -> bool:
        """Run the enabled cases and print a summary; return whether all passed."""
        enabled = [case for case in self._cases if case.enabled]
        if not enabled:
            print("no tests are enabled", file=sys.stderr)
            return False

        out = sys.stdout
        out.write(f"running {len(enabled)} test(s):\n\n")
        out.flush()
        for case in enabled:
            self._run_case(case)

        width = max(len(case.name) for case in enabled)
        reset = "" if disable_colors else term1(TERM_RESET)
        passed_tests = 0
        passed_asserts = 0
        for case in enabled:
            passed = case.status is _Status.PASSED
            color = "" if disable_colors else _color(passed)
            out.write(
                f" {case.name.rjust(width)} .............................. "
                f"{color}{case.status.value}{reset}\n"
            )
            passed_asserts += case.passed_asserts
            passed_tests += passed

        success = passed_tests == len(enabled)
        color = "" if disable_colors else _color(success)
        out.write(
            f"\n{color}{passed_tests}/{len(enabled)} test(s) passed, "
            f"{passed_asserts} assertion(s) passed{reset}\n"
        )
        return success


DEFAULT_HARNESS = Harness()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the cases of DEFAULT_HARNESS selected by command-line filters."""
    if argv is None:
        prog = os.path.basename(sys.argv[0]) or "unit_tests"
        argv = sys.argv[1:]
    else:
        prog = "unit_tests"
    args: list[str | None] = [prog, *argv]
    handled = False

    def usage(option: CliOption, arg: str | None) -> CliState:
        nonlocal handled
        handled = True
        sys.stdout.write(
            f"usage: {prog} [options] filters ...\n"
            "options:\n"
            "   -h    --help       Shows this message.\n"
            "         --no-color   Turns off the use of color in the output.\n"
            "         --list       Lists all tests and exit.\n"
        )
        return CliState.ERROR

    def list_tests(option: CliOption, arg: str | None) -> CliState:
        nonlocal handled
        handled = True
        DEFAULT_HARNESS.print_tests(sys.stdout)
        return CliState.ERROR

    no_color = cli_flag(None, "--no-color")
    options = [
        CliOption(short_name="-h", long_name="--help", parse=usage),
        CliOption(long_name="--list", parse=list_tests),
        no_color,
    ]
    try:
        parse_options(args, options)
    except ValueError as exc:
        if not handled:
            print(exc, file=sys.stderr)
        return 1

    disable_colors = bool(no_color.value) or not is_term(sys.stdout)
    DEFAULT_HARNESS.filter(args[1:])
    return 0 if DEFAULT_HARNESS.run(disable_colors) else 1