"""Tests for the command-line entrypoint wiring."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from fastapi import FastAPI

from docker_demo import main as main_module

_SETTINGS_ENV_NAMES = (
    "ENVIRONMENT_NAME",
    "APPLICATION_HOST",
    "APPLICATION_PORT",
    "APPLICATION_NAME",
    "APPLICATION_VERSION",
    "DEVELOPER_NAME",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run each test without inherited settings variables or a local dotenv file."""

    for env_name in _SETTINGS_ENV_NAMES:
        monkeypatch.delenv(env_name, raising=False)
    monkeypatch.chdir(tmp_path)


def _run_main(arguments: list[str]):
    """Run the entrypoint with patched argv, logging setup and server start.

    Args:
        arguments: Command-line arguments after the program name.

    Returns:
        tuple: Mocks for `uvicorn.run` and `logging.basicConfig`.

    Raises:
        SystemExit: Raised by argparse on invalid arguments.
    """

    with patch("sys.argv", ["docker-demo", *arguments]), patch(
        "docker_demo.main.uvicorn.run"
    ) as run_mock, patch("docker_demo.main.logging.basicConfig") as basic_config_mock:
        main_module.main()
    return run_mock, basic_config_mock


def test_main_starts_server_with_settings_defaults() -> None:
    """Bind to the configured defaults and the configured log level."""

    run_mock, basic_config_mock = _run_main([])

    run_mock.assert_called_once()
    application = run_mock.call_args.args[0]
    assert isinstance(application, FastAPI)
    assert run_mock.call_args.kwargs == {"host": "0.0.0.0", "port": 8080, "log_level": "info"}
    assert basic_config_mock.call_args.kwargs["level"] == "INFO"


def test_main_uses_environment_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """Pass LOG_LEVEL to both logging setup and the server."""

    monkeypatch.setenv("LOG_LEVEL", "warning")

    run_mock, basic_config_mock = _run_main([])

    assert basic_config_mock.call_args.kwargs["level"] == "WARNING"
    assert run_mock.call_args.kwargs["log_level"] == "warning"


def test_main_applies_command_line_overrides() -> None:
    """Prefer --host and --port over settings values."""

    run_mock, _ = _run_main(["--host", "127.0.0.1", "--port", "9000"])

    assert run_mock.call_args.kwargs["host"] == "127.0.0.1"
    assert run_mock.call_args.kwargs["port"] == 9000


@pytest.mark.parametrize("port_value", ["0", "70000", "-1", "http"])
def test_main_rejects_invalid_port_override(port_value: str) -> None:
    """Exit with a usage error before the server starts."""

    with patch("sys.argv", ["docker-demo", "--port", port_value]), patch(
        "docker_demo.main.uvicorn.run"
    ) as run_mock:
        with pytest.raises(SystemExit) as exit_info:
            main_module.main()

    assert exit_info.value.code == 2
    run_mock.assert_not_called()


def test_main_logs_startup_banner_with_bound_address(caplog: pytest.LogCaptureFixture) -> None:
    """Log application identity and the actual bind address."""

    with caplog.at_level(logging.INFO, logger="docker_demo.main"):
        _run_main(["--host", "127.0.0.1", "--port", "9000"])

    assert "Starting Docker Demo Application 1.0.0 (development) on 127.0.0.1:9000" in caplog.text
    assert "http://127.0.0.1:9000/actuator/health" in caplog.text


@pytest.mark.parametrize(("value", "expected"), [("1", 1), ("8080", 8080), ("65535", 65535)])
def test_main_parse_port_accepts_valid_range(value: str, expected: int) -> None:
    """Accept every port in the 1..65535 range."""

    assert main_module.main_parse_port(value) == expected
