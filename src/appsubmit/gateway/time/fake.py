"""Fake time implementation for testing."""

from datetime import UTC, datetime

from appsubmit.gateway.time.abc import Time

DEFAULT_FAKE_TIME = datetime(2024, 1, 15, 14, 30, 0, tzinfo=UTC)


class FakeTime(Time):
    """Clock frozen at a pre-configured instant.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, current_time: datetime | None = None) -> None:
        self._current_time = current_time if current_time is not None else DEFAULT_FAKE_TIME

    def now(self) -> datetime:
        return self._current_time
