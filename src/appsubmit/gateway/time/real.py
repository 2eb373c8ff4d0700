"""Production time implementation."""

from datetime import UTC, datetime

from appsubmit.gateway.time.abc import Time


class RealTime(Time):
    """Time backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)
