"""Checks module.

Pure comparison rules used by the reporter's `validate_*` calls:
- compare_int, compare_double, compare_string, compare_buffer
- hex_escape: buffer rendering for failure messages
"""

from .compare import compare_buffer, compare_double, compare_int, compare_string
from .hexdump import hex_escape

__all__ = [
    "compare_int",
    "compare_double",
    "compare_string",
    "compare_buffer",
    "hex_escape",
]
