"""Main module entrypoint for local and container runtime execution.

This module validates startup configuration and launches the FastAPI service.
"""

import argparse
import logging

import uvicorn

from docker_demo.bootstrap import bootstrap_create_application
from docker_demo.config import config_load_settings

logger = logging.getLogger(__name__)


def main_parse_port(value: str) -> int:
    """Parse a bind port command-line value.

    Args:
        value: Raw command-line value.

    Returns:
        int: Port in the 1..65535 range.

    Raises:
        argparse.ArgumentTypeError: Raised when value is not a valid port.
    """

    try:
        port = int(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(f"port must be an integer, got {value!r}") from error
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port must be between 1 and 65535, got {port}")
    return port


def main() -> None:
    """Start the web server with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
    """

    argument_parser = argparse.ArgumentParser(description="Docker Demo Application web server")
    argument_parser.add_argument(
        "--host",
        dest="host",
        type=str,
        help="Optional bind host override for APPLICATION_HOST",
    )
    argument_parser.add_argument(
        "--port",
        dest="port",
        type=main_parse_port,
        help="Optional bind port override for APPLICATION_PORT (1-65535)",
    )
    parsed_arguments = argument_parser.parse_args()

    settings = config_load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    host = parsed_arguments.host if parsed_arguments.host is not None else settings.application_host
    port = parsed_arguments.port if parsed_arguments.port is not None else settings.application_port

    application = bootstrap_create_application(settings=settings)
    logger.info(
        "Starting %s %s (%s) on %s:%d, health: http://%s:%d/actuator/health",
        settings.application_name,
        settings.application_version,
        settings.environment_name,
        host,
        port,
        host,
        port,
    )
    uvicorn.run(
        application,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
