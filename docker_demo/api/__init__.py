"""API layer package for FastAPI application and route composition."""

from .application import api_build_metadata, create_api_application

__all__ = ["api_build_metadata", "create_api_application"]
