r"""Ready-made failure signals.

A retryer calls ``fail_now`` on its failer when the retries are exhausted.
Any object with that method can be used; this module provides two common
implementations so test code does not need to write its own.
"""

from __future__ import annotations

__all__ = ["CallbackFailer", "RaisingFailer"]

import logging
from typing import TYPE_CHECKING

from retryloop.exceptions import RetryExhaustedError

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)


class RaisingFailer:
    """Failer that raises ``RetryExhaustedError``.

    Because ``RetryExhaustedError`` is an ``AssertionError``, pytest and
    unittest report the exhausted loop as a failed test.

    Args:
        message: The message of the raised exception.

    Example:
        ```pycon
        >>> from retryloop import Counter, RaisingFailer
        >>> retryer = Counter(count=1, wait=0.0)
        >>> failer = RaisingFailer("database never came up")
        >>> retryer.next(failer)
        True
        >>> retryer.next(failer)
        Traceback (most recent call last):
            ...
        retryloop.exceptions.RetryExhaustedError: database never came up

        ```
    """

    def __init__(self, message: str = "retries exhausted") -> None:
        self.message = message

    def fail_now(self) -> None:
        """Raise ``RetryExhaustedError`` with the configured message.

        Raises:
            RetryExhaustedError: Always.
        """
        raise RetryExhaustedError(self.message)


class CallbackFailer:
    """Failer that calls a zero-argument function.

    This adapts the failure method of a test framework, for example
    ``self.fail`` in a ``unittest.TestCase`` or ``pytest.fail`` bound with
    ``functools.partial``. Exceptions raised by the callback propagate.

    Args:
        callback: The function to call when the retries are exhausted.

    Attributes:
        calls: Number of times ``fail_now`` has been called.

    Example:
        ```pycon
        >>> from retryloop import CallbackFailer, Counter
        >>> messages = []
        >>> failer = CallbackFailer(lambda: messages.append("exhausted"))
        >>> retryer = Counter(count=0, wait=0.0)
        >>> retryer.next(failer)
        False
        >>> failer.calls, messages
        (1, ['exhausted'])

        ```
    """

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self.calls = 0

    def fail_now(self) -> None:
        """Call the callback."""
        self.calls += 1
        logger.debug(f"Calling failure callback (call {self.calls})")
        self._callback()
