"""A small registry of named checks that runs them and reports the outcome."""

from __future__ import annotations

import inspect
import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from types import FrameType
from typing import Any, TextIO

RED = "\x1b[31m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

DEFAULT_MAX_TESTS = 32


class CheckFailed(Exception):
    """Raised by a failed check; carries where the check was made."""

    def __init__(self, description: str, filename: str = "", lineno: int = 0) -> None:
        super().__init__(description)
        self.description = description
        self.filename = filename
        self.lineno = lineno

    def report(self) -> str:
        return f"{RED}FAILED{RESET} [{self.filename}, {self.lineno}] - {self.description}"


def _fail(description: str, frame: FrameType | None) -> CheckFailed:
    if frame is None:
        return CheckFailed(description)
    return CheckFailed(description, frame.f_code.co_filename, frame.f_lineno)


def check(condition: Any, description: str) -> None:
    """Raise CheckFailed with the caller's location unless the condition holds."""
    if not condition:
        frame = inspect.currentframe()
        raise _fail(description, frame.f_back if frame else None)


def check_equal(actual: Any, expected: Any) -> None:
    """Raise CheckFailed with the caller's location unless both values are equal."""
    if not actual == expected:
        frame = inspect.currentframe()
        raise _fail(f"{actual!r} == {expected!r}", frame.f_back if frame else None)


@dataclass(frozen=True)
class Summary:
    """Outcome of one run."""

    total: int
    failures: list[str] = field(default_factory=list)

    @property
    def failed(self) -> int:
        return len(self.failures)

    @property
    def passed(self) -> int:
        return self.total - self.failed


TestFunc = Callable[[], Any]


class TestSuite:
    """An ordered, bounded collection of named test callables."""

    __test__ = False

    def __init__(self, max_tests: int = DEFAULT_MAX_TESTS) -> None:
        self.max_tests = max_tests
        self._tests: list[tuple[str, TestFunc]] = []

    def __len__(self) -> int:
        return len(self._tests)

    def register(self, name: str, test: TestFunc) -> TestFunc:
        """Add a test under a name; fails once the suite is full."""
        if len(self._tests) >= self.max_tests:
            raise ValueError("Max number of tests reached")
        self._tests.append((name, test))
        return test

    def run(self, out: TextIO | None = None) -> Summary:
        """Run every test in registration order and print a report.

        A test fails when it raises CheckFailed or returns False.
        """
        out = sys.stdout if out is None else out
        print(f"Total tests: {len(self._tests)}\n", file=out)
        failures: list[str] = []
        for name, test in self._tests:
            try:
                ok = test() is not False
            except CheckFailed as exc:
                print(exc.report(), file=out)
                ok = False
            if ok:
                print(f"{GREEN}SUCCESS: {name}{RESET}", file=out)
            else:
                print(f"{RED}    - IN TEST:{RESET} {name}", file=out)
                failures.append(name)
        summary = Summary(len(self._tests), failures)
        print(
            f"\nFINISHED {GREEN}{summary.passed} sucessfull {RESET}"
            f"and {RED}{summary.failed} failed{RESET}",
            file=out,
        )
        return summary