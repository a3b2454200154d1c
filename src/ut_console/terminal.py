"""Terminal geometry detection.

The size is read once per run: first from the output stream's terminal,
then from the environment, and finally from the configured defaults.
"""

from __future__ import annotations

import logging
import os
from typing import TextIO

from .config import ReporterConfig
from .models import DisplayLayout

logger = logging.getLogger(__name__)


def _parse_dimension(value: str | None) -> int:
    """Parse an integer literal with C base prefixes.

    `0x` selects hex and a leading `0` selects octal, as with
    `strtol(s, NULL, 0)`. Unlike `strtol`, trailing garbage makes the whole
    value invalid. Returns 0 for a missing or unparsable value.
    """
    if value is None:
        return 0
    text = value.strip()
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-")
    if digits[:2].lower() == "0x":
        base, digits = 16, digits[2:]
    elif len(digits) > 1 and digits.startswith("0"):
        base, digits = 8, digits[1:]
    else:
        base = 10
    try:
        return sign * int(digits, base)
    except ValueError:
        return 0


def _query_terminal(stream: TextIO) -> tuple[int, int] | None:
    """Ask the terminal behind `stream` for its size."""
    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, OSError, ValueError):
        # no fileno(), not a tty, or a closed/detached stream
        return None
    if size.columns <= 0 or size.lines <= 0:
        return None
    return size.columns, size.lines


def _size_from_env(config: ReporterConfig) -> tuple[int, int] | None:
    columns = _parse_dimension(os.environ.get(config.columns_env))
    rows = _parse_dimension(os.environ.get(config.rows_env))
    if columns <= 0 or rows <= 0:
        return None
    return columns, rows


def detect_layout(stream: TextIO, config: ReporterConfig | None = None) -> DisplayLayout:
    """Build the display layout for a run.

    Args:
        stream: The stream the reporter writes to.
        config: Reporter configuration (defaults are used if omitted).

    Returns:
        A frozen DisplayLayout.
    """
    config = config or ReporterConfig()

    size = _query_terminal(stream)
    if size is not None:
        logger.debug(f"Terminal size from device: {size[0]}x{size[1]}")
    else:
        size = _size_from_env(config)
        if size is not None:
            logger.debug(
                f"Terminal size from ${config.columns_env}/${config.rows_env}: {size[0]}x{size[1]}"
            )
        else:
            size = (config.default_columns, config.default_rows)
            logger.debug(f"Terminal size unknown, using {size[0]}x{size[1]}")

    return DisplayLayout.from_size(size[0], size[1], label_ratio=config.label_ratio)
