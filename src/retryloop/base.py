r"""Protocols shared by the retry strategies.

``Counter`` and ``Timer`` do not inherit from a common base class. They
satisfy the ``Retryer`` protocol structurally, and report exhaustion to any
object that satisfies the ``Failer`` protocol.
"""

from __future__ import annotations

__all__ = ["Failer", "Retryer"]

from typing import Protocol, runtime_checkable


@runtime_checkable
class Failer(Protocol):
    """Object that is told when the retries are exhausted.

    ``fail_now`` is called by a retryer on the call to ``next`` that decides
    no further attempt is allowed. What it does (mark a test as failed, raise
    an exception, record the call) is up to the implementation.

    Example:
        ```pycon
        >>> from retryloop.base import Failer
        >>> class Recorder:
        ...     def __init__(self) -> None:
        ...         self.calls = 0
        ...     def fail_now(self) -> None:
        ...         self.calls += 1
        ...
        >>> isinstance(Recorder(), Failer)
        True

        ```
    """

    def fail_now(self) -> None:
        """Report that no further attempt is allowed."""


@runtime_checkable
class Retryer(Protocol):
    """Iteration policy for retrying an operation.

    A retryer is driven by a loop owned by the caller. It does not accept
    the retried operation as a callback, so the operation stays in the
    caller's frame and test tracebacks point at the test code.

    Example:
        ```pycon
        >>> from retryloop import Counter, RaisingFailer, Retryer
        >>> retryer = Counter(count=2, wait=0.0)
        >>> isinstance(retryer, Retryer)
        True
        >>> retryer.next(RaisingFailer())
        True

        ```
    """

    def next(self, failer: Failer) -> bool:
        """Indicate whether the operation can be attempted again.

        The first call after construction or ``reset`` returns ``True``
        immediately. Later calls may block for the configured wait. When
        the retries are exhausted, ``failer.fail_now()`` is called and
        ``False`` is returned.

        Args:
            failer: The failure signal to call on exhaustion.

        Returns:
            ``True`` if the caller should attempt the operation,
                otherwise ``False``.
        """

    def reset(self) -> None:
        """Restore the retryer to its state before the first call."""
