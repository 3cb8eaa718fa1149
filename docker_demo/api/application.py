"""FastAPI application factory for the demo web service.

This module defines API application composition used by the container runtime.
"""

import platform

from fastapi import FastAPI

from docker_demo.config import AppSettings
from docker_demo.domain import AppMetadata
from docker_demo.system import ClockPort, HostnamePort

from .routers import api_create_health_router, api_create_info_router, api_create_pages_router


def api_build_metadata(settings: AppSettings) -> AppMetadata:
    """Build static application metadata from settings and interpreter info.

    Args:
        settings: Validated application settings.

    Returns:
        AppMetadata: Metadata shared by all routes.
    """

    return AppMetadata(
        application_name=settings.application_name,
        application_version=settings.application_version,
        developer_name=settings.developer_name,
        runtime_version=platform.python_version(),
    )


def create_api_application(
    settings: AppSettings,
    clock: ClockPort,
    hostname_service: HostnamePort,
) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for runtime metadata.
        clock: Wall-clock service read on every request.
        hostname_service: Hostname lookup service read on every request.

    Returns:
        FastAPI: Framework application instance with all routes registered.

    Raises:
        ValueError: Raised when a dependency is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    metadata = api_build_metadata(settings)
    application = FastAPI(title=metadata.application_name, version=metadata.application_version)

    application.include_router(
        api_create_pages_router(metadata=metadata, clock=clock, hostname_service=hostname_service)
    )
    application.include_router(api_create_health_router(clock=clock))
    application.include_router(
        api_create_info_router(metadata=metadata, clock=clock, hostname_service=hostname_service)
    )

    return application
