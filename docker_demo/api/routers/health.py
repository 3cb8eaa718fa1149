"""Health endpoint router composition for liveness checks."""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse

from docker_demo.domain import domain_format_timestamp
from docker_demo.system import ClockPort


def api_create_health_router(clock: ClockPort) -> APIRouter:
    """Create health-check router.

    Args:
        clock: Wall-clock service used for the health message timestamp.

    Returns:
        APIRouter: Router exposing `/health` and `/actuator/health` endpoints.

    Raises:
        ValueError: Raised when clock is invalid.
    """

    if clock is None:
        raise ValueError("clock must not be None")

    router = APIRouter(tags=["health"])

    @router.get("/health", response_class=PlainTextResponse)
    def api_health_message() -> PlainTextResponse:
        """Return plaintext liveness message with the current server time.

        Returns:
            PlainTextResponse: `OK - Application is running. Time: <timestamp>`.
        """

        current_time = domain_format_timestamp(clock.system_now())
        return PlainTextResponse(
            content=f"OK - Application is running. Time: {current_time}",
            status_code=status.HTTP_200_OK,
        )

    @router.get("/actuator/health")
    def api_actuator_health() -> JSONResponse:
        """Return machine-readable liveness state for container probes.

        Returns:
            JSONResponse: Constant `UP` status payload.
        """

        return JSONResponse(content={"status": "UP"}, status_code=status.HTTP_200_OK)

    return router
