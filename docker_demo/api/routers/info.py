"""Application info router composition."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from docker_demo.domain import AppMetadata
from docker_demo.system import ClockPort, HostnamePort, system_read_runtime_snapshot


def api_create_info_router(
    metadata: AppMetadata,
    clock: ClockPort,
    hostname_service: HostnamePort,
) -> APIRouter:
    """Create router exposing application identity as JSON.

    Args:
        metadata: Static application metadata.
        clock: Wall-clock service.
        hostname_service: Hostname lookup service.

    Returns:
        APIRouter: Router exposing `/info` endpoint.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if metadata is None or clock is None or hostname_service is None:
        raise ValueError("metadata, clock and hostname_service must not be None")

    router = APIRouter(tags=["info"])

    @router.get("/info")
    def api_info() -> JSONResponse:
        """Return application identity and fresh host values.

        Returns:
            JSONResponse: Payload with six string fields.
        """

        snapshot = system_read_runtime_snapshot(clock=clock, hostname_service=hostname_service)
        payload = {
            "application": metadata.application_name,
            "version": metadata.application_version,
            "developer": metadata.developer_name,
            "runtime_version": metadata.runtime_version,
            "hostname": snapshot.hostname,
            "timestamp": snapshot.timestamp,
        }
        return JSONResponse(content=payload, status_code=status.HTTP_200_OK)

    return router
