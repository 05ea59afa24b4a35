r"""Generator-based loop over the attempts granted by a retryer."""

from __future__ import annotations

__all__ = ["attempts"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from retryloop.base import Failer, Retryer


def attempts(retryer: Retryer, failer: Failer, *, reset: bool = True) -> Iterator[int]:
    """Yield the attempt number each time the retryer grants an attempt.

    This is a ``for`` loop version of the ``while retryer.next(failer)``
    loop. The loop body runs in the caller's frame.

    Args:
        retryer: The retryer that paces the attempts.
        failer: The failure signal passed to ``retryer.next``.
        reset: If ``True``, the retryer is reset before the first attempt
            so the same instance can drive several loops.

    Yields:
        The attempt number, starting at 1.

    Example:
        ```pycon
        >>> from retryloop import CallbackFailer, Counter, attempts
        >>> failer = CallbackFailer(lambda: None)
        >>> retryer = Counter(count=3, wait=0.0)
        >>> [attempt for attempt in attempts(retryer, failer)]
        [1, 2, 3]
        >>> failer.calls
        1
        >>> for attempt in attempts(retryer, failer):
        ...     if attempt == 2:
        ...         break
        ...
        >>> failer.calls
        1

        ```
    """
    if reset:
        retryer.reset()
    attempt = 0
    while retryer.next(failer):
        attempt += 1
        yield attempt
