r"""Unit tests for the Timer retry strategy."""

from __future__ import annotations

from unittest.mock import Mock, patch

import pytest

from retryloop import Retryer, Timer
from retryloop.config import DEFAULT_TIMEOUT, DEFAULT_WAIT
from tests.helpers import FakeClock

###########################
#     Tests for Timer     #
###########################


def test_timer_default_values() -> None:
    """Test Timer with default values."""
    retryer = Timer()
    assert retryer.timeout == DEFAULT_TIMEOUT
    assert retryer.wait == DEFAULT_WAIT
    assert retryer.deadline is None


def test_timer_repr() -> None:
    """Test the Timer representation."""
    assert repr(Timer(timeout=2.0, wait=0.5)) == "Timer(timeout=2.0, wait=0.5)"


def test_timer_satisfies_retryer_protocol() -> None:
    """Test that Timer is a Retryer."""
    assert isinstance(Timer(), Retryer)


def test_timer_negative_timeout() -> None:
    """Test that negative timeout raises ValueError."""
    with pytest.raises(ValueError, match=r"timeout must be >= 0, got -1.0"):
        Timer(timeout=-1.0)


def test_timer_negative_wait() -> None:
    """Test that negative wait raises ValueError."""
    with pytest.raises(ValueError, match=r"wait must be >= 0, got -0.1"):
        Timer(timeout=1.0, wait=-0.1)


def test_timer_first_call_sets_deadline(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that the first call sets the deadline and returns
    immediately."""
    retryer = Timer(timeout=2.0, wait=0.5)
    assert retryer.next(failer)
    assert retryer.deadline == 102.0
    assert fake_clock.sleeps == []
    failer.fail_now.assert_not_called()


def test_timer_deadline_is_not_recomputed(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that later calls do not move the deadline."""
    retryer = Timer(timeout=2.0, wait=0.5)
    retryer.next(failer)
    retryer.next(failer)
    retryer.next(failer)
    assert retryer.deadline == 102.0


def test_timer_loop(failer: Mock, fake_clock: FakeClock) -> None:
    """Test the loop of a Timer with a wait shorter than the timeout."""
    retryer = Timer(timeout=0.02, wait=0.01)
    n = 0
    while retryer.next(failer):
        n += 1
    # order of events: (true, wait, true, wait, true, false)
    assert n == 3
    assert fake_clock.sleeps == [0.01, 0.01]
    failer.fail_now.assert_called_once_with()


def test_timer_grants_attempt_at_deadline(failer: Mock) -> None:
    """Test that a call made exactly at the deadline is still
    granted."""
    clock = FakeClock(start=0.0)
    retryer = Timer(timeout=1.0, wait=0.5)
    with (
        patch("time.monotonic", side_effect=clock.monotonic),
        patch("time.sleep", side_effect=clock.sleep),
    ):
        results = [retryer.next(failer) for _ in range(5)]
    assert results == [True, True, True, True, False]
    assert clock.sleeps == [0.5, 0.5, 0.5]


def test_timer_checks_deadline_before_waiting(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that an expired deadline fails without sleeping."""
    retryer = Timer(timeout=1.0, wait=0.5)
    assert retryer.next(failer)
    fake_clock.now += 5.0
    assert not retryer.next(failer)
    assert fake_clock.sleeps == []
    failer.fail_now.assert_called_once_with()


def test_timer_zero_timeout(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that a zero timeout makes the second call terminal."""
    retryer = Timer(timeout=0.0, wait=0.1)
    assert retryer.next(failer)
    fake_clock.now += 0.001
    assert not retryer.next(failer)
    failer.fail_now.assert_called_once_with()


def test_timer_wait_longer_than_timeout(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that a wait longer than the timeout allows one retry."""
    retryer = Timer(timeout=0.1, wait=1.0)
    n = 0
    while retryer.next(failer):
        n += 1
    assert n == 2
    assert fake_clock.sleeps == [1.0]


def test_timer_next_after_exhaustion_fails_again(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that every call after exhaustion signals the failure."""
    retryer = Timer(timeout=0.0, wait=0.0)
    retryer.next(failer)
    fake_clock.now += 1.0
    assert not retryer.next(failer)
    assert not retryer.next(failer)
    assert failer.fail_now.call_count == 2


def test_timer_reset_restores_first_call(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that reset after exhaustion restores first-call
    semantics."""
    retryer = Timer(timeout=1.0, wait=0.5)
    while retryer.next(failer):
        pass
    assert failer.fail_now.call_count == 1

    retryer.reset()
    assert retryer.deadline is None
    assert failer.fail_now.call_count == 1

    sleeps = len(fake_clock.sleeps)
    assert retryer.next(failer)
    assert len(fake_clock.sleeps) == sleeps
    assert retryer.deadline == pytest.approx(fake_clock.now + 1.0)


def test_timer_reset_fresh_instance(failer: Mock, fake_clock: FakeClock) -> None:
    """Test that reset on a fresh instance is a no-op."""
    retryer = Timer(timeout=1.0, wait=0.5)
    retryer.reset()
    assert retryer.deadline is None
    assert retryer.next(failer)
    assert retryer.deadline == 101.0
