from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from tests.helpers import FakeClock

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def fake_clock() -> Generator[FakeClock, None, None]:
    """Patch time.monotonic and time.sleep with a fake clock.

    The clock starts at 100.0 and every sleep overshoots by 0.5ms.
    """
    clock = FakeClock(start=100.0, overshoot=0.0005)
    with (
        patch("time.monotonic", side_effect=clock.monotonic),
        patch("time.sleep", side_effect=clock.sleep),
    ):
        yield clock


@pytest.fixture
def failer() -> Mock:
    """Create a mock failure signal.

    Returns:
        A Mock whose ``fail_now`` calls can be counted.
    """
    return Mock(spec=["fail_now"])
