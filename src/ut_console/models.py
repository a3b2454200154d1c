"""Core data models for ut-console.

This module defines the state a Reporter carries through one run:
- RunState: test, outcome and section counters
- DisplayLayout: terminal geometry and the derived label column
- ProgressCursor: how much inline text the next write must erase
- CheckResult: the verdict of a single comparison
- RunSummary: the snapshot handed back by `summary()`
"""

from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import NoTestsError, ResultCountMismatchError


class Outcome(str, Enum):
    """Outcome words written in the status column."""

    OK = "ok"
    SKIPPED = "skipped"
    FAILED = "FAILED"


class RunState(BaseModel):
    """Counters for a single test run.

    Attributes:
        tests: Number of tests announced with `testing()`.
        succeeded: Number of successful tests.
        failed: Number of failed tests.
        skipped: Number of skipped tests.
        sections: Number of sections opened.
    """

    tests: int = Field(default=0, ge=0)
    succeeded: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    skipped: int = Field(default=0, ge=0)
    sections: int = Field(default=0, ge=0)

    @property
    def results(self) -> int:
        """Number of recorded outcomes."""
        return self.succeeded + self.failed + self.skipped

    def record(self, outcome: Outcome) -> None:
        """Count one outcome."""
        if outcome is Outcome.OK:
            self.succeeded += 1
        elif outcome is Outcome.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1

    def check(self) -> None:
        """Verify every announced test has exactly one outcome.

        Raises:
            NoTestsError: If no test was announced.
            ResultCountMismatchError: If tests and outcomes disagree.
        """
        if self.tests == 0:
            raise NoTestsError()
        if self.results != self.tests:
            raise ResultCountMismatchError(self.tests, self.results)


class DisplayLayout(BaseModel):
    """Terminal geometry, fixed once a run has started.

    Attributes:
        columns: Terminal width in characters.
        rows: Terminal height in lines.
        label_width: Width of the test label column.
        status_width: Width left for ok/FAILED/skipped/percentages.
    """

    model_config = ConfigDict(frozen=True)

    columns: int = Field(ge=1)
    rows: int = Field(ge=1)
    label_width: int = Field(ge=0)
    status_width: int = Field(ge=0)

    @classmethod
    def from_size(cls, columns: int, rows: int, label_ratio: float = 0.60) -> DisplayLayout:
        """Derive the label and status columns from a terminal size."""
        label_width = math.floor(columns * label_ratio)
        return cls(
            columns=columns,
            rows=rows,
            label_width=label_width,
            status_width=columns - label_width,
        )


class ProgressCursor(BaseModel):
    """Length of the inline text printed by the last `progress()` call."""

    erase_count: int = Field(default=0, ge=0)

    def take(self) -> int:
        """Return the pending erase count and reset it."""
        count = self.erase_count
        self.erase_count = 0
        return count


class CheckResult(BaseModel):
    """The outcome of comparing a result against its expected value.

    Attributes:
        passed: Whether the values match.
        message: Failure message (empty when passed).
    """

    passed: bool
    message: str = ""

    @classmethod
    def ok(cls) -> CheckResult:
        return cls(passed=True)

    @classmethod
    def fail(cls, message: str) -> CheckResult:
        return cls(passed=False, message=message)


class RunSummary(BaseModel):
    """Totals of a finished run.

    Attributes:
        tests: Number of tests run.
        succeeded: Number of successful tests.
        failed: Number of failed tests.
        skipped: Number of skipped tests.
        sections: Number of sections opened.
    """

    tests: int
    succeeded: int
    failed: int = 0
    skipped: int = 0
    sections: int = 0

    @property
    def exit_status(self) -> int:
        """Process exit status for the run: the number of failed tests."""
        return self.failed

    @classmethod
    def from_state(cls, state: RunState) -> RunSummary:
        """Snapshot the counters of a run."""
        return cls(
            tests=state.tests,
            succeeded=state.succeeded,
            failed=state.failed,
            skipped=state.skipped,
            sections=state.sections,
        )
