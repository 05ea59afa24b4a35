r"""Retry strategy bounded by a number of attempts."""

from __future__ import annotations

__all__ = ["Counter"]

import logging
import time
from typing import TYPE_CHECKING

from retryloop.config import DEFAULT_COUNT, DEFAULT_WAIT
from retryloop.validation import validate_count, validate_duration

if TYPE_CHECKING:
    from retryloop.base import Failer

logger: logging.Logger = logging.getLogger(__name__)


class Counter:
    """Retryer that allows a fixed number of attempts.

    The first attempt is granted immediately. Every later attempt is granted
    after waiting ``wait`` seconds, so ``n`` attempts take ``(n - 1) * wait``
    seconds. Once ``count`` attempts have been granted, the next call to
    ``next`` signals the failure without waiting and returns ``False``.

    Args:
        count: Maximum number of attempts. Must be >= 0.
        wait: Time in seconds to wait between two attempts. Must be >= 0.

    Attributes:
        count: Maximum number of attempts.
        wait: Time in seconds to wait between two attempts.

    Raises:
        TypeError: If count is not an integer.
        ValueError: If count or wait are negative.

    Example:
        ```pycon
        >>> from unittest.mock import Mock
        >>> from retryloop import Counter
        >>> failer = Mock()
        >>> retryer = Counter(count=2, wait=0.0)
        >>> retryer.next(failer), retryer.next(failer), retryer.next(failer)
        (True, True, False)
        >>> failer.fail_now.call_count
        1

        ```
    """

    def __init__(self, count: int = DEFAULT_COUNT, wait: float = DEFAULT_WAIT) -> None:
        validate_count(count)
        validate_duration("wait", wait)

        self.count = count
        self.wait = wait

        self._attempts = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(count={self.count}, wait={self.wait})"

    @property
    def attempts(self) -> int:
        """The number of attempts granted since the last reset."""
        return self._attempts

    def next(self, failer: Failer) -> bool:
        """Grant an attempt as long as the attempt budget is not used up.

        The first call returns immediately. The following calls return
        after the wait period. The call after the last granted attempt
        calls ``failer.fail_now()`` and returns ``False`` without waiting.

        Args:
            failer: The failure signal to call on exhaustion.

        Returns:
            ``True`` if the caller should attempt the operation,
                otherwise ``False``.
        """
        if self._attempts == self.count:
            logger.debug(f"Retry budget exhausted after {self._attempts} attempts")
            failer.fail_now()
            return False
        if self._attempts > 0:
            logger.debug(
                f"Waiting {self.wait:.3f}s before attempt {self._attempts + 1}/{self.count}"
            )
            time.sleep(self.wait)
        self._attempts += 1
        return True

    def reset(self) -> None:
        """Configure the retryer for re-use."""
        logger.debug(f"Resetting {self!r} after {self._attempts} attempts")
        self._attempts = 0
