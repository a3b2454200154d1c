"""Custom exceptions for ut-console.

Assertion failures are not exceptions: they are counted and printed by the
reporter. The classes here cover the two ways a run itself can go wrong,
a broken call order and a broken harness.
"""

from __future__ import annotations


class UtConsoleError(Exception):
    """Base exception for all ut-console errors."""

    pass


class UsageError(UtConsoleError):
    """The reporter was called out of order.

    Raised when `init()` runs twice or an announcement needs the display
    layout before `init()` has run.
    """

    def __init__(self, message: str, operation: str | None = None):
        self.operation = operation
        full_message = message
        if operation:
            full_message = f"Invalid call to '{operation}': {message}"
        super().__init__(full_message)


class HarnessError(UtConsoleError):
    """The counters of a run do not add up.

    This is never a failed check. It means a result was dropped or counted
    twice, so the whole run is unreliable and `summary()` aborts it.
    """

    pass


class NoTestsError(HarnessError):
    """A run reached its summary without announcing a single test."""

    def __init__(self) -> None:
        super().__init__("no tests")


class ResultCountMismatchError(HarnessError):
    """The number of announced tests differs from the number of results."""

    def __init__(self, tests: int, results: int):
        self.tests = tests
        self.results = results
        super().__init__(
            f"number of tests ({tests}) does not match number of results ({results})"
        )


class ConfigError(UtConsoleError):
    """Error in configuration.

    Raised when a configuration file is malformed or holds invalid values.
    """

    def __init__(self, message: str, field: str | None = None):
        self.field = field
        full_message = message
        if field:
            full_message = f"Configuration error in '{field}': {message}"
        super().__init__(full_message)
