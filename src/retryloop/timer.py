r"""Retry strategy bounded by a time limit.

The deadline is computed once, on the first call to ``Timer.next``, from
``time.monotonic``. It is not recomputed on later calls, so waiting between
attempts never extends the overall time limit.
"""

from __future__ import annotations

__all__ = ["Timer"]

import logging
import time
from typing import TYPE_CHECKING

from retryloop.config import DEFAULT_TIMEOUT, DEFAULT_WAIT
from retryloop.validation import validate_duration

if TYPE_CHECKING:
    from retryloop.base import Failer

logger: logging.Logger = logging.getLogger(__name__)


class Timer:
    """Retryer that allows attempts until a time limit has elapsed.

    The first call sets the deadline to ``timeout`` seconds from now and
    returns immediately. Each later call first checks the deadline: if it
    has passed, the failure is signaled and ``False`` is returned.
    Otherwise the call waits ``wait`` seconds and returns ``True``.

    Only the polling boundary is checked against the deadline. An attempt
    granted just before the deadline may run past it.

    Args:
        timeout: Time in seconds, measured from the first call, after which
            no further attempt is granted. Must be >= 0.
        wait: Time in seconds to wait between two attempts. Must be >= 0.

    Attributes:
        timeout: Time limit in seconds.
        wait: Time in seconds to wait between two attempts.

    Raises:
        ValueError: If timeout or wait are negative.

    Example:
        ```pycon
        >>> from unittest.mock import Mock
        >>> from retryloop import Timer
        >>> failer = Mock()
        >>> retryer = Timer(timeout=0.05, wait=0.01)
        >>> retryer.next(failer)
        True
        >>> retryer.deadline is not None
        True
        >>> retryer.reset()
        >>> retryer.deadline is None
        True

        ```
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, wait: float = DEFAULT_WAIT) -> None:
        validate_duration("timeout", timeout)
        validate_duration("wait", wait)

        self.timeout = timeout
        self.wait = wait

        # Monotonic timestamp, set on the first call to next()
        self._deadline: float | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(timeout={self.timeout}, wait={self.wait})"

    @property
    def deadline(self) -> float | None:
        """The ``time.monotonic`` deadline, or ``None`` before the first
        call."""
        return self._deadline

    def next(self, failer: Failer) -> bool:
        """Grant an attempt as long as the time limit has not elapsed.

        Args:
            failer: The failure signal to call on exhaustion.

        Returns:
            ``True`` if the caller should attempt the operation,
                otherwise ``False``.
        """
        if self._deadline is None:
            self._deadline = time.monotonic() + self.timeout
            logger.debug(f"Retry deadline set to {self.timeout:.3f}s from now")
            return True
        now = time.monotonic()
        if now > self._deadline:
            logger.debug(
                f"Retry deadline exceeded by {now - self._deadline:.3f}s "
                f"(timeout={self.timeout:.3f}s)"
            )
            failer.fail_now()
            return False
        logger.debug(f"Waiting {self.wait:.3f}s before next attempt")
        time.sleep(self.wait)
        return True

    def reset(self) -> None:
        """Configure the retryer for re-use."""
        logger.debug(f"Resetting {self!r}")
        self._deadline = None
