"""Domain models used across application layer boundaries."""

from .models import AppMetadata, RuntimeSnapshot
from .timestamps import DISPLAY_TIMESTAMP_FORMAT, domain_format_timestamp

__all__ = ["AppMetadata", "DISPLAY_TIMESTAMP_FORMAT", "RuntimeSnapshot", "domain_format_timestamp"]
