"""Tests for the reporter module."""

import io

import pytest

from ut_console import (
    DisplayLayout,
    Reporter,
    ReporterConfig,
    RunSummary,
    UsageError,
    get_reporter,
    reset_reporter,
)


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def stream() -> io.StringIO:
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture
def reporter(stream: io.StringIO) -> Reporter:
    """Reporter initialised on a 100x40 layout (label width 60)."""
    ut = Reporter(stream=stream)
    ut.init("prog", layout=DisplayLayout.from_size(100, 40))
    stream.seek(0)
    stream.truncate()
    return ut


class TestLifecycle:
    """Tests for init(), section() and summary()."""

    def test_banner(self, stream: io.StringIO) -> None:
        """Test init() prints the program banner."""
        ut = Reporter(stream=stream)
        layout = ut.init("mylib", layout=DisplayLayout.from_size(80, 25))

        assert stream.getvalue() == "==> Testing mylib\n"
        assert layout.label_width == 48
        assert ut.layout is layout

    def test_init_detects_layout(self, stream: io.StringIO, monkeypatch) -> None:
        """Test init() falls back to the environment for a non-tty stream."""
        monkeypatch.setenv("COLUMNS", "120")
        monkeypatch.setenv("LINES", "50")

        ut = Reporter(stream=stream)
        layout = ut.init("mylib")

        assert layout.columns == 120
        assert layout.label_width == 72

    def test_double_init(self, reporter: Reporter) -> None:
        """Test init() can only run once."""
        with pytest.raises(UsageError, match="already initialised"):
            reporter.init("again")

    def test_testing_before_init(self, stream: io.StringIO) -> None:
        """Test announcing a test before init() is a usage error."""
        ut = Reporter(stream=stream)
        with pytest.raises(UsageError, match="testing"):
            ut.testing("too early")
        assert ut.state.tests == 0

    def test_section_before_init(self, stream: io.StringIO) -> None:
        """Test opening a section before init() is a usage error."""
        ut = Reporter(stream=stream)
        with pytest.raises(UsageError, match="section"):
            ut.section("too early")

    def test_sections_are_numbered_and_separated(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test a blank line precedes every section but the first."""
        reporter.section("Parsing")
        reporter.section("Encoding")

        assert stream.getvalue() == (
            "==> Section 1: Parsing\n"
            "\n"
            "==> Section 2: Encoding\n"
        )
        assert reporter.state.sections == 2

    def test_summary_all_passed(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test the summary omits zero failed and skipped counts."""
        reporter.testing("one")
        reporter.success()
        reporter.testing("two")
        reporter.success()

        summary = reporter.summary()

        assert stream.getvalue().endswith("==> Summary: 2 tests, 2 succeeded.\n")
        assert isinstance(summary, RunSummary)
        assert summary.tests == 2
        assert summary.exit_status == 0

    def test_summary_with_failed_and_skipped(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test the summary lists failed and skipped counts when non-zero."""
        reporter.testing("one")
        reporter.success()
        reporter.testing("two")
        reporter.failure("broken")
        reporter.testing("three")
        reporter.skip()

        summary = reporter.summary()

        assert stream.getvalue().endswith(
            "==> Summary: 3 tests, 1 succeeded, 1 failed, 1 skipped.\n"
        )
        assert summary.exit_status == 1
        assert reporter.exit_status == 1

    def test_summary_without_tests_exits(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test summary() aborts with status 99 when no test ran."""
        with pytest.raises(SystemExit) as exc_info:
            reporter.summary()

        assert exc_info.value.code == 99
        assert stream.getvalue() == "FAILED no tests\n"

    def test_summary_with_missing_result_exits(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test summary() aborts when a test has no outcome."""
        reporter.testing("one")
        reporter.success()
        reporter.testing("two")

        with pytest.raises(SystemExit) as exc_info:
            reporter.summary()

        assert exc_info.value.code == 99
        assert (
            "FAILED number of tests (2) does not match number of results (1)\n"
            in stream.getvalue()
        )

    def test_summary_custom_exit_status(self, stream: io.StringIO) -> None:
        """Test the fatal exit status comes from the configuration."""
        ut = Reporter(stream=stream, config=ReporterConfig(fatal_exit_status=42))
        ut.init("prog", layout=DisplayLayout.from_size(80, 25))

        with pytest.raises(SystemExit) as exc_info:
            ut.summary()

        assert exc_info.value.code == 42


class TestAnnouncements:
    """Tests for testing(), progress() and the outcome calls."""

    def test_testing_pads_to_label_width(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test the label is padded so the status lands in one column."""
        reporter.testing("hello")

        assert stream.getvalue() == "  1 hello" + " " * 52
        assert reporter.state.tests == 1

    def test_testing_formats_arguments(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test %-style arguments are applied to the label."""
        reporter.testing("parse(%r) -> %d", "x", 3)

        assert stream.getvalue().startswith("  1 parse('x') -> 3 ")

    def test_testing_long_label_is_not_truncated(self, stream: io.StringIO) -> None:
        """Test a label wider than the column is printed as is."""
        ut = Reporter(stream=stream)
        ut.init("prog", layout=DisplayLayout.from_size(10, 5))
        stream.seek(0)
        stream.truncate()

        ut.testing("a rather long test label")

        assert stream.getvalue() == "  1 a rather long test label"

    def test_index_grows(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test the index counts tests from 1."""
        for _ in range(12):
            reporter.testing("t")
            reporter.success()

        lines = stream.getvalue().splitlines()
        assert lines[0].startswith("  1 t")
        assert lines[11].startswith(" 12 t")

    def test_outcome_lines(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test the exact outcome words."""
        assert reporter.success() is True
        assert reporter.skip() is True
        assert reporter.failure("expected %d got %d", 1, 2) is False

        assert stream.getvalue() == "ok\nskipped\nFAILED expected 1 got 2\n"
        assert reporter.state.succeeded == 1
        assert reporter.state.skipped == 1
        assert reporter.state.failed == 1

    def test_failure_message_without_args_is_verbatim(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test a message containing % is not formatted without args."""
        reporter.failure("100% wrong")

        assert stream.getvalue() == "FAILED 100% wrong\n"

    def test_result_dispatch(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test result() announces success or failure and returns its flag."""
        assert reporter.result(True, "unused") is True
        assert reporter.result(False, "bad value %s", "x") is False

        assert stream.getvalue() == "ok\nFAILED bad value x\n"

    def test_progress_overwrites_itself(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test each progress value erases the previous one."""
        reporter.progress(5)
        reporter.progress(10)
        reporter.success()

        assert stream.getvalue() == "5%" + "\b \b" * 2 + "10%" + "\b \b" * 3 + "ok\n"
        assert reporter.cursor.erase_count == 0

    def test_progress_erased_before_failure(
        self, reporter: Reporter, stream: io.StringIO
    ) -> None:
        """Test pending progress is erased before a failure message."""
        reporter.progress(99)
        reporter.failure("timeout")

        assert stream.getvalue() == "99%" + "\b \b" * 3 + "FAILED timeout\n"

    def test_default_stream_is_stdout(self, capsys) -> None:
        """Test the reporter writes to sys.stdout by default."""
        ut = Reporter()
        ut.init("prog", layout=DisplayLayout.from_size(80, 25))
        ut.testing("x")
        ut.success()

        captured = capsys.readouterr()
        assert captured.out.startswith("==> Testing prog\n  1 x")
        assert captured.out.endswith("ok\n")


class TestValidation:
    """Tests for the validate_* calls."""

    def test_validate_int(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test integer comparison."""
        assert reporter.validate_int(5, 5) is True
        assert reporter.validate_int(5, 6) is False

        assert stream.getvalue() == "ok\nFAILED 5 should be 6\n"

    def test_validate_double(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test float comparison within tolerance."""
        assert reporter.validate_double(0.99, 0.99) is True
        assert reporter.validate_double(0.1 + 0.2, 0.3) is True
        assert reporter.validate_double(1.0, 1.001) is False

        assert stream.getvalue().endswith("FAILED 1.000000 should be 1.001000\n")

    def test_validate_double_configured_tolerance(self, stream: io.StringIO) -> None:
        """Test the tolerance comes from the configuration."""
        ut = Reporter(stream=stream, config=ReporterConfig(double_abs_tol=0.01))
        assert ut.validate_double(1.0, 1.001) is True

    def test_validate_string(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test string comparison including NULL rules."""
        assert reporter.validate_string("CIAO", "CIAO") is True
        assert reporter.validate_string(None, None) is True
        assert reporter.validate_string(None, "x") is False
        assert reporter.validate_string("x", None) is False
        assert reporter.validate_string("ciao", "CIAO") is False

        assert stream.getvalue() == (
            "ok\n"
            "ok\n"
            "FAILED should not be NULL\n"
            "FAILED should be NULL\n"
            "FAILED 'ciao' should be 'CIAO'\n"
        )

    def test_validate_buffer(self, reporter: Reporter, stream: io.StringIO) -> None:
        """Test buffer comparison messages."""
        assert reporter.validate_buffer(None, 0, None, 0) is True
        assert reporter.validate_buffer(None, 3, None, 0) is False
        assert reporter.validate_buffer(b"\x01\xab", 2, None, 0) is False
        assert reporter.validate_buffer(b"\x00\x01", 2, b"\x00\x02", 2) is False
        assert reporter.validate_buffer(b"abc", 3, b"abc", 3) is True

        assert stream.getvalue() == (
            "ok\n"
            "FAILED NULL but len is not 0\n"
            "FAILED '0x01ab' should be NULL\n"
            "FAILED '0x0001' should be '0x0002'\n"
            "ok\n"
        )

    def test_full_run_counts(self, reporter: Reporter) -> None:
        """Test a balanced run passes the summary check."""
        reporter.section("mixed")
        reporter.testing("int")
        reporter.validate_int(1, 1)
        reporter.testing("str")
        reporter.validate_string("a", "b")
        reporter.testing("skip")
        reporter.skip()

        summary = reporter.summary()

        assert summary.tests == 3
        assert summary.succeeded == 1
        assert summary.failed == 1
        assert summary.skipped == 1
        assert summary.sections == 1


class TestDefaultReporter:
    """Tests for the process-wide reporter."""

    def test_singleton(self) -> None:
        """Test get_reporter() returns the same instance until reset."""
        reset_reporter()
        try:
            first = get_reporter()
            assert get_reporter() is first

            reset_reporter()
            assert get_reporter() is not first
        finally:
            reset_reporter()
