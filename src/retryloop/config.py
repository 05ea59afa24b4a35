r"""Default pacing and budget values for the retry strategies."""

from __future__ import annotations

__all__ = ["DEFAULT_COUNT", "DEFAULT_TIMEOUT", "DEFAULT_WAIT"]

# Default time span in seconds for which an operation is retried
DEFAULT_TIMEOUT = 1.0

# Default time in seconds between two attempts
# Short enough for unit tests, long enough to not spin on the CPU
DEFAULT_WAIT = 0.025

# Default maximum number of attempts for a Counter
DEFAULT_COUNT = 3
