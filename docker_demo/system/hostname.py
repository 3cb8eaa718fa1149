"""Hostname lookup service with sentinel fallback.

Inside a container the resolved hostname is the short container id, which is
what the demo pages display.
"""

from __future__ import annotations

import logging
import socket

from .interfaces import HostnamePort

UNKNOWN_HOSTNAME = "unknown"

logger = logging.getLogger(__name__)


class SocketHostnameService(HostnamePort):
    """Hostname service backed by the socket module's local identity lookup."""

    def system_hostname(self) -> str:
        """Resolve the local hostname on every call.

        The name is accepted only when it also resolves to a local address,
        matching a full local-host identity lookup.

        Returns:
            str: Local hostname, or `unknown` when resolution fails.
        """

        try:
            hostname = socket.gethostname()
            if not hostname:
                raise OSError("local hostname is empty")
            socket.gethostbyname(hostname)
        except OSError as error:
            logger.warning("Hostname resolution failed, using %r: %s", UNKNOWN_HOSTNAME, error)
            return UNKNOWN_HOSTNAME
        return hostname
