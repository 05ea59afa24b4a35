r"""Exceptions raised by the ready-made failure signals."""

from __future__ import annotations

__all__ = ["RetryExhaustedError"]


class RetryExhaustedError(AssertionError):
    """Exception raised when a retry loop runs out of attempts or time.

    It subclasses ``AssertionError`` so test runners report it as a test
    failure rather than an error.

    Args:
        message: A descriptive error message.

    Attributes:
        message: The error message.

    Example:
        ```pycon
        >>> from retryloop.exceptions import RetryExhaustedError
        >>> raise RetryExhaustedError("service never became ready")
        Traceback (most recent call last):
            ...
        retryloop.exceptions.RetryExhaustedError: service never became ready

        ```
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
