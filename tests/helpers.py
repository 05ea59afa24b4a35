r"""Shared test helpers for the retry strategy tests."""

from __future__ import annotations

__all__ = ["FakeClock"]


class FakeClock:
    """Deterministic replacement for ``time.monotonic`` and
    ``time.sleep``.

    Args:
        start: The initial monotonic time in seconds.
        overshoot: Extra time in seconds added to every sleep, like a real
            scheduler that wakes up slightly late.
    """

    def __init__(self, start: float = 0.0, overshoot: float = 0.0) -> None:
        self.now = start
        self.overshoot = overshoot
        self.sleeps: list[float] = []

    def monotonic(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds + self.overshoot
