"""Landing page router composition."""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from docker_demo.domain import AppMetadata
from docker_demo.system import ClockPort, HostnamePort, system_read_runtime_snapshot

from ..rendering import api_render_landing_page


def api_create_pages_router(
    metadata: AppMetadata,
    clock: ClockPort,
    hostname_service: HostnamePort,
) -> APIRouter:
    """Create router serving the HTML landing page.

    Args:
        metadata: Static application metadata.
        clock: Wall-clock service.
        hostname_service: Hostname lookup service.

    Returns:
        APIRouter: Router exposing `/` endpoint.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if metadata is None or clock is None or hostname_service is None:
        raise ValueError("metadata, clock and hostname_service must not be None")

    router = APIRouter(tags=["pages"])

    @router.get("/", response_class=HTMLResponse)
    def api_landing_page() -> HTMLResponse:
        """Return the landing page with fresh host values."""

        snapshot = system_read_runtime_snapshot(clock=clock, hostname_service=hostname_service)
        return HTMLResponse(content=api_render_landing_page(metadata=metadata, snapshot=snapshot))

    return router
