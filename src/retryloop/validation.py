r"""Parameter validation utilities for the retry strategies.

This module provides validation functions for retry parameters to ensure
they meet the required constraints before a strategy is used.
"""

from __future__ import annotations

__all__ = ["validate_count", "validate_duration"]


def validate_count(count: int) -> None:
    """Validate the maximum number of attempts.

    Args:
        count: Maximum number of attempts. Must be an ``int`` >= 0.
            A value of 0 means the first call is already exhausted.

    Raises:
        TypeError: If count is not an integer.
        ValueError: If count is negative.

    Example:
        ```pycon
        >>> from retryloop.validation import validate_count
        >>> validate_count(3)
        >>> validate_count(0)
        >>> validate_count(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: count must be >= 0, got -1

        ```
    """
    if isinstance(count, bool) or not isinstance(count, int):
        msg = f"count must be an int, got {type(count).__name__}"
        raise TypeError(msg)
    if count < 0:
        msg = f"count must be >= 0, got {count}"
        raise ValueError(msg)


def validate_duration(name: str, value: float) -> None:
    """Validate a duration expressed in seconds.

    Args:
        name: The parameter name, used in the error message.
        value: The duration in seconds. Must be >= 0.

    Raises:
        ValueError: If value is negative.

    Example:
        ```pycon
        >>> from retryloop.validation import validate_duration
        >>> validate_duration("wait", 0.025)
        >>> validate_duration("timeout", 0)
        >>> validate_duration("wait", -1.0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: wait must be >= 0, got -1.0

        ```
    """
    if value < 0:
        msg = f"{name} must be >= 0, got {value}"
        raise ValueError(msg)
