"""Per-request runtime snapshot assembly."""

from docker_demo.domain import RuntimeSnapshot, domain_format_timestamp

from .interfaces import ClockPort, HostnamePort


def system_read_runtime_snapshot(clock: ClockPort, hostname_service: HostnamePort) -> RuntimeSnapshot:
    """Read fresh host values for one request.

    Args:
        clock: Wall-clock service.
        hostname_service: Hostname lookup service.

    Returns:
        RuntimeSnapshot: Formatted timestamp and hostname.
    """

    return RuntimeSnapshot(
        timestamp=domain_format_timestamp(clock.system_now()),
        hostname=hostname_service.system_hostname(),
    )
