"""System layer package for host clock and network identity lookups."""

from .clock import SystemClockService
from .hostname import UNKNOWN_HOSTNAME, SocketHostnameService
from .interfaces import ClockPort, HostnamePort
from .snapshot import system_read_runtime_snapshot

__all__ = [
    "ClockPort",
    "HostnamePort",
    "SocketHostnameService",
    "SystemClockService",
    "UNKNOWN_HOSTNAME",
    "system_read_runtime_snapshot",
]
