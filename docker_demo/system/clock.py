"""Wall-clock service implementation."""

from datetime import datetime

from .interfaces import ClockPort


class SystemClockService(ClockPort):
    """Clock service backed by the host's local time."""

    def system_now(self) -> datetime:
        """Read local wall-clock time.

        Returns:
            datetime: Naive local time of the host.
        """

        return datetime.now()
