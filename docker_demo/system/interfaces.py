"""Typed interfaces for host-level lookups.

All clock and network identity access must remain in the system package.
"""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Port definition for wall-clock reads."""

    def system_now(self) -> datetime:
        """Return the current local wall-clock time.

        Returns:
            datetime: Current local time.

        Raises:
            RuntimeError: Raised when the clock cannot be read.
        """


class HostnamePort(Protocol):
    """Port definition for local network identity lookups."""

    def system_hostname(self) -> str:
        """Return the local hostname or the `unknown` sentinel.

        Returns:
            str: Resolved hostname, never empty. Lookup failures yield the sentinel.
        """
