r"""Convenience constructors for retryers with the default configuration."""

from __future__ import annotations

__all__ = ["default_timer", "times"]

from retryloop.config import DEFAULT_TIMEOUT, DEFAULT_WAIT
from retryloop.counter import Counter
from retryloop.timer import Timer


def default_timer() -> Timer:
    """Return a ``Timer`` with the default configuration.

    Returns:
        A ``Timer`` that retries for ``DEFAULT_TIMEOUT`` seconds and waits
            ``DEFAULT_WAIT`` seconds between attempts.

    Example:
        ```pycon
        >>> from retryloop import default_timer
        >>> default_timer()
        Timer(timeout=1.0, wait=0.025)

        ```
    """
    return Timer(timeout=DEFAULT_TIMEOUT, wait=DEFAULT_WAIT)


def times(n: int) -> Counter:
    """Return a ``Counter`` that allows ``n`` attempts.

    Args:
        n: Maximum number of attempts. Must be >= 0.

    Returns:
        A ``Counter`` that waits ``DEFAULT_WAIT`` seconds between attempts.

    Raises:
        TypeError: If n is not an integer.
        ValueError: If n is negative.

    Example:
        ```pycon
        >>> from retryloop import times
        >>> times(5)
        Counter(count=5, wait=0.025)

        ```
    """
    return Counter(count=n, wait=DEFAULT_WAIT)
