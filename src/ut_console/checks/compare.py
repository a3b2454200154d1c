"""Comparison rules for the reporter's `validate_*` calls.

Every function here is pure: it inspects the two values and returns a
CheckResult. Announcing the outcome is the reporter's job.

`None` plays the role of a NULL value. The failure messages keep the
wording of the classic `ut` reporter ("should be NULL" and friends) since
scripts scrape them.
"""

from __future__ import annotations

import math

from ..models import CheckResult
from .hexdump import hex_escape

Buffer = bytes | bytearray | memoryview

DEFAULT_REL_TOL = 1e-9
DEFAULT_ABS_TOL = 1e-12


def compare_int(result: int, expected: int) -> CheckResult:
    """Exact integer equality."""
    if result != expected:
        return CheckResult.fail(f"{result} should be {expected}")
    return CheckResult.ok()


def compare_double(
    result: float,
    expected: float,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL,
) -> CheckResult:
    """Floating point equality within a relative and an absolute tolerance.

    The relative tolerance covers large magnitudes, the absolute one covers
    values near zero. NaN never matches anything.

    Args:
        result: The computed value.
        expected: The expected value.
        rel_tol: Maximum difference relative to the larger magnitude.
        abs_tol: Maximum absolute difference.

    Returns:
        CheckResult with a `<result> should be <expected>` message on mismatch.
    """
    if not math.isclose(result, expected, rel_tol=rel_tol, abs_tol=abs_tol):
        return CheckResult.fail(f"{result:f} should be {expected:f}")
    return CheckResult.ok()


def compare_string(result: str | None, expected: str | None) -> CheckResult:
    """String equality with NULL handling.

    Args:
        result: The computed string, or None.
        expected: The expected string, or None.

    Returns:
        CheckResult; two None values match.
    """
    if expected is None and result is not None:
        return CheckResult.fail("should be NULL")
    if result is None and expected is not None:
        return CheckResult.fail("should not be NULL")
    if result is None and expected is None:
        return CheckResult.ok()
    if result != expected:
        return CheckResult.fail(f"'{result}' should be '{expected}'")
    return CheckResult.ok()


def compare_buffer(
    result: Buffer | None,
    result_len: int,
    expected: Buffer | None,
    expected_len: int,
) -> CheckResult:
    """Byte buffer equality with explicit lengths.

    The rules are checked in order, so NULL-ness and inconsistent input are
    reported before length and content differences:

    1. expected is None but result is not
    2. result is None but expected is not
    3. result is None but result_len is not 0
    4. either length is negative
    5. the lengths differ
    6. both are None (match)
    7. the first `expected_len` bytes differ
    8. otherwise (match)

    Args:
        result: The computed buffer, or None.
        result_len: Number of meaningful bytes in `result`.
        expected: The expected buffer, or None.
        expected_len: Number of meaningful bytes in `expected`.

    Returns:
        CheckResult, buffers rendered with `hex_escape` in messages.
    """
    if expected is None and result is not None:
        return CheckResult.fail(f"'{hex_escape(result, result_len)}' should be NULL")
    if result is None and expected is not None:
        return CheckResult.fail("should not be NULL")
    if result is None and result_len != 0:
        return CheckResult.fail("NULL but len is not 0")
    if result_len < 0:
        return CheckResult.fail(f"result len == {result_len} is negative")
    if expected_len < 0:
        return CheckResult.fail(f"expected len == {expected_len} is negative")
    if result_len != expected_len:
        return CheckResult.fail(f"result len == {result_len} but should be {expected_len}")
    if result is None or expected is None:
        # both None, and the NULL/len rules above already passed
        return CheckResult.ok()
    if bytes(result[:expected_len]) != bytes(expected[:expected_len]):
        return CheckResult.fail(
            f"'{hex_escape(result, result_len)}' should be '{hex_escape(expected, expected_len)}'"
        )
    return CheckResult.ok()
