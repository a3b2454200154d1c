"""Reporter module.

Provides the console reporter for self-test runs:
- Reporter: counters, announcements and comparisons
- get_reporter / reset_reporter: the process-wide instance
"""

from .console import Reporter, get_reporter, reset_reporter

__all__ = [
    "Reporter",
    "get_reporter",
    "reset_reporter",
]
