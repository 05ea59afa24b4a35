r"""retryloop - Retry loops for test code.

This package provides small retry strategies that let a test repeatedly
attempt an operation until it succeeds, a retry budget is exhausted, or a
time limit elapses, without writing sleep/loop logic in every test.

Key Features:
    - Count-bounded retries with a fixed wait between attempts (``Counter``)
    - Time-bounded retries with a fixed wait between attempts (``Timer``)
    - The first attempt always runs immediately
    - Exhaustion is reported through an injected failure signal
    - Strategies can be reset and reused across test cases

Example:
    ```pycon
    >>> from retryloop import RaisingFailer, times
    >>> retryer = times(3)
    >>> results = iter([False, False, True])
    >>> while retryer.next(RaisingFailer()):
    ...     if next(results):
    ...         break
    ...
    >>> retryer.attempts
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_COUNT",
    "DEFAULT_TIMEOUT",
    "DEFAULT_WAIT",
    "CallbackFailer",
    "Counter",
    "Failer",
    "RaisingFailer",
    "RetryExhaustedError",
    "Retryer",
    "Timer",
    "__version__",
    "attempts",
    "default_timer",
    "times",
]

from importlib.metadata import PackageNotFoundError, version

from retryloop.base import Failer, Retryer
from retryloop.config import DEFAULT_COUNT, DEFAULT_TIMEOUT, DEFAULT_WAIT
from retryloop.counter import Counter
from retryloop.exceptions import RetryExhaustedError
from retryloop.factory import default_timer, times
from retryloop.failers import CallbackFailer, RaisingFailer
from retryloop.loop import attempts
from retryloop.timer import Timer

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
