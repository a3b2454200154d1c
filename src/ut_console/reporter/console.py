"""Console reporter for self-test programs.

Prints one line per test: a right-aligned index, a label padded to a fixed
column, and the outcome (ok / skipped / FAILED <message>) in the status
column. Counters are kept alongside so the run can be validated and
summarised at the end.
"""

from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

from ..checks import compare_buffer, compare_double, compare_int, compare_string
from ..checks.compare import Buffer
from ..config import ReporterConfig
from ..exceptions import HarnessError, UsageError
from ..models import CheckResult, DisplayLayout, Outcome, ProgressCursor, RunState, RunSummary
from ..terminal import detect_layout

logger = logging.getLogger(__name__)

INDEX_WIDTH = 3
ERASE = "\b \b"


def _render(message: str, args: tuple[Any, ...]) -> str:
    """Apply %-style arguments the way `logging` does."""
    return message % args if args else message


class Reporter:
    """Tracks and prints the outcome of a self-test run.

    Calls must follow the order
    init -> [section -> testing -> (progress* / validate_*) -> outcome]* -> summary,
    from a single thread. Every announcement flushes the stream so the test in
    flight stays visible if the program hangs or crashes.

    Example:
        ```python
        ut = Reporter()
        ut.init("mylib")
        ut.section("parsing")
        ut.testing("parse_int(%r)", "42")
        ut.validate_int(parse_int("42"), 42)
        ut.summary()
        sys.exit(ut.exit_status)
        ```
    """

    def __init__(self, stream: TextIO | None = None, config: ReporterConfig | None = None):
        """Create a reporter.

        Args:
            stream: Output stream. Defaults to the current `sys.stdout`
                at each write.
            config: Reporter configuration.
        """
        self._stream = stream
        self.config = config or ReporterConfig()
        self.state = RunState()
        self.cursor = ProgressCursor()
        self._layout: DisplayLayout | None = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def layout(self) -> DisplayLayout:
        """The display layout fixed by `init()`."""
        return self._require_layout("layout")

    @property
    def exit_status(self) -> int:
        """Exit status a test program should return: the failed count."""
        return self.state.failed

    def _require_layout(self, operation: str) -> DisplayLayout:
        if self._layout is None:
            raise UsageError("init() has not been called", operation=operation)
        return self._layout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _erase(self) -> str:
        return ERASE * self.cursor.take()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def init(self, program_name: str, layout: DisplayLayout | None = None) -> DisplayLayout:
        """Fix the display layout and print the banner.

        Args:
            program_name: Name announced in the banner.
            layout: Explicit layout; detected from the terminal if omitted.

        Returns:
            The layout used for the rest of the run.

        Raises:
            UsageError: If the reporter was already initialised.
        """
        if self._layout is not None:
            raise UsageError("reporter is already initialised", operation="init")

        self._layout = layout or detect_layout(self.stream, self.config)
        logger.debug(
            f"Reporter layout {self._layout.columns}x{self._layout.rows}, "
            f"label width {self._layout.label_width}"
        )
        self._write(f"==> Testing {program_name}\n")
        return self._layout

    def section(self, title: str) -> None:
        """Open a numbered section, separated from the previous one."""
        self._require_layout("section")

        separator = "\n" if self.state.sections > 0 else ""
        self.state.sections += 1
        self._write(f"{separator}==> Section {self.state.sections}: {title}\n")

    def summary(self) -> RunSummary:
        """Validate the counters and print the summary line.

        Returns:
            Totals of the run.

        Raises:
            SystemExit: With `config.fatal_exit_status` (99) if no test was
                run or the number of outcomes differs from the number of tests.
        """
        try:
            self.state.check()
        except HarnessError as e:
            logger.error(f"Aborting test run: {e}")
            self.failure(str(e))
            sys.exit(self.config.fatal_exit_status)

        state = self.state
        line = f"==> Summary: {state.tests} tests, {state.succeeded} succeeded"
        if state.failed:
            line += f", {state.failed} failed"
        if state.skipped:
            line += f", {state.skipped} skipped"
        self._write(line + ".\n")

        return RunSummary.from_state(state)

    # ------------------------------------------------------------------
    # Announcements
    # ------------------------------------------------------------------

    def testing(self, message: str, *args: Any) -> None:
        """Announce the next test and pad up to the status column.

        Args:
            message: Test label, %-style format string if args are given.
            *args: Format arguments for `message`.
        """
        label_width = self._require_layout("testing").label_width

        self.state.tests += 1
        text = _render(message, args)
        padding = label_width - INDEX_WIDTH - len(text)
        self._write(f"{self.state.tests:{INDEX_WIDTH}d} {text}" + " " * max(padding, 0))

    def progress(self, percentage: int) -> None:
        """Overwrite the inline progress of the current test."""
        text = f"{percentage}%"
        self._write(self._erase() + text)
        self.cursor.erase_count = len(text)

    def success(self) -> bool:
        """Announce a successful test.

        Returns:
            True.
        """
        self._write(f"{self._erase()}{Outcome.OK.value}\n")
        self.state.record(Outcome.OK)
        return True

    def skip(self) -> bool:
        """Announce a skipped test.

        Returns:
            True.
        """
        self._write(f"{self._erase()}{Outcome.SKIPPED.value}\n")
        self.state.record(Outcome.SKIPPED)
        return True

    def failure(self, message: str, *args: Any) -> bool:
        """Announce a failed test with a message.

        Args:
            message: Failure message, %-style format string if args are given.
            *args: Format arguments for `message`.

        Returns:
            False.
        """
        self._write(f"{self._erase()}{Outcome.FAILED.value} {_render(message, args)}\n")
        self.state.record(Outcome.FAILED)
        return False

    def result(self, ok: bool, message: str, *args: Any) -> bool:
        """Announce success if `ok`, otherwise failure with the message.

        Returns:
            `ok`, unchanged.
        """
        if ok:
            self.success()
        else:
            self.failure(message, *args)
        return ok

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def _announce(self, check: CheckResult) -> bool:
        if check.passed:
            return self.success()
        return self.failure(check.message)

    def validate_int(self, result: int, expected: int) -> bool:
        """Compare two integers and announce the outcome."""
        return self._announce(compare_int(result, expected))

    def validate_double(self, result: float, expected: float) -> bool:
        """Compare two floats within the configured tolerances."""
        return self._announce(
            compare_double(
                result,
                expected,
                rel_tol=self.config.double_rel_tol,
                abs_tol=self.config.double_abs_tol,
            )
        )

    def validate_string(self, result: str | None, expected: str | None) -> bool:
        """Compare two strings, either of which may be None."""
        return self._announce(compare_string(result, expected))

    def validate_buffer(
        self,
        result: Buffer | None,
        result_len: int,
        expected: Buffer | None,
        expected_len: int,
    ) -> bool:
        """Compare two byte buffers with explicit lengths.

        See `ut_console.checks.compare_buffer` for the order in which NULL,
        length and content differences are reported.
        """
        return self._announce(compare_buffer(result, result_len, expected, expected_len))


_default_reporter: Reporter | None = None


def get_reporter() -> Reporter:
    """Return the process-wide reporter, creating it on first use.

    Example:
        ```python
        from ut_console import get_reporter

        ut = get_reporter()
        ut.init("mylib")
        ```
    """
    global _default_reporter
    if _default_reporter is None:
        _default_reporter = Reporter()
    return _default_reporter


def reset_reporter() -> None:
    """Discard the process-wide reporter so the next run starts from zero."""
    global _default_reporter
    _default_reporter = None
