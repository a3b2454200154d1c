"""ut-console - console test reporting for self-test programs.

Counts passed, failed and skipped tests, prints one aligned line per test
and compares results against expected integers, floats, strings and byte
buffers.

Example:
    ```python
    import sys

    from ut_console import get_reporter

    ut = get_reporter()
    ut.init("mylib")
    ut.section("arithmetic")

    ut.testing("add(2, 3)")
    ut.validate_int(add(2, 3), 5)

    ut.summary()
    sys.exit(ut.exit_status)
    ```
"""

from .checks import compare_buffer, compare_double, compare_int, compare_string, hex_escape
from .config import ReporterConfig
from .exceptions import (
    ConfigError,
    HarnessError,
    NoTestsError,
    ResultCountMismatchError,
    UsageError,
    UtConsoleError,
)
from .models import (
    CheckResult,
    DisplayLayout,
    Outcome,
    ProgressCursor,
    RunState,
    RunSummary,
)
from .reporter import Reporter, get_reporter, reset_reporter
from .terminal import detect_layout

__version__ = "0.1.0"

__all__ = [
    # Main entry point
    "Reporter",
    "get_reporter",
    "reset_reporter",
    # Configuration
    "ReporterConfig",
    "detect_layout",
    # Models
    "RunState",
    "DisplayLayout",
    "ProgressCursor",
    "RunSummary",
    "CheckResult",
    "Outcome",
    # Checks
    "compare_int",
    "compare_double",
    "compare_string",
    "compare_buffer",
    "hex_escape",
    # Exceptions
    "UtConsoleError",
    "UsageError",
    "HarnessError",
    "NoTestsError",
    "ResultCountMismatchError",
    "ConfigError",
]
