"""Self-test of the reporter: `python -m ut_console [program-name]`.

Runs a short suite against the reporter's own comparisons and exits with
the number of failed tests.
"""

from __future__ import annotations

import sys

from .reporter import Reporter


def run(reporter: Reporter, program_name: str = "ut_console") -> int:
    """Run the built-in self-test and return the failed count."""
    reporter.init(program_name)

    reporter.section("Scalars")

    reporter.testing("Testing integer")
    reporter.validate_int(5, 5)

    reporter.testing("Testing doubles")
    reporter.validate_double(0.99, 0.99)

    reporter.section("Strings and buffers")

    reporter.testing("Testing strings")
    reporter.validate_string("CIAO", "CIAO")

    reporter.testing("Testing NULL strings")
    reporter.validate_string(None, None)

    reporter.testing("Testing buffers")
    reporter.validate_buffer(b"\x00\x01\xfe", 3, b"\x00\x01\xfe", 3)

    reporter.section("Progress")

    reporter.testing("Testing progress")
    for i in range(10000):
        reporter.progress(i // 100)
    reporter.success()

    reporter.summary()
    return reporter.exit_status


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    program_name = argv[0] if argv else "ut_console"
    return run(Reporter(), program_name)


if __name__ == "__main__":
    sys.exit(main())
