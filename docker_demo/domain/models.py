"""Typed domain models shared across runtime layers.

Both contracts are immutable. `AppMetadata` is assembled once at startup,
`RuntimeSnapshot` is rebuilt for every request.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class AppMetadata:
    """Static application metadata for runtime identification.

    Attributes:
        application_name: Human-readable app name.
        application_version: Application version string.
        developer_name: Developer display name.
        runtime_version: Version of the executing Python interpreter.
    """

    application_name: str
    application_version: str
    developer_name: str
    runtime_version: str


@dataclass(frozen=True)
class RuntimeSnapshot:
    """Host values read at request time.

    Attributes:
        timestamp: Formatted local wall-clock time (`dd.MM.yyyy HH:mm:ss`).
        hostname: Local hostname or the `unknown` sentinel.
    """

    timestamp: str
    hostname: str
