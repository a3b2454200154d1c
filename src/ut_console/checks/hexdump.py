"""Hex rendering of byte buffers for failure messages."""

from __future__ import annotations


def hex_escape(data: bytes | bytearray | memoryview, length: int | None = None) -> str:
    """Render a buffer as `0x` followed by two lowercase hex digits per byte.

    Args:
        data: The buffer to render.
        length: Number of leading bytes to render (defaults to all of them).

    Returns:
        A new string on every call.

    Example:
        ```python
        hex_escape(b"\\x00\\xff")       # "0x00ff"
        hex_escape(b"abc", length=2)  # "0x6162"
        ```
    """
    if length is None:
        length = len(data)
    return "0x" + bytes(data[:max(length, 0)]).hex()
