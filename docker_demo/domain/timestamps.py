"""Shared timestamp formatting helpers."""

from __future__ import annotations

from datetime import datetime

DISPLAY_TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"


def domain_format_timestamp(moment: datetime) -> str:
    """Format one wall-clock reading for display surfaces.

    Args:
        moment: Wall-clock reading.

    Returns:
        str: Timestamp rendered as `dd.MM.yyyy HH:mm:ss`.

    Raises:
        ValueError: Raised when moment is None.
    """

    if moment is None:
        raise ValueError("moment must not be None")
    return moment.strftime(DISPLAY_TIMESTAMP_FORMAT)
