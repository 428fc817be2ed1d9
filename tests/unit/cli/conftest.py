"""
Shared fixtures and utilities for CLI tests.

Commands are run end to end through the root ``cli`` group with the HTTP
transport patched, so each test exercises option parsing, the request
executor and the renderer together.
"""

import json
from unittest.mock import MagicMock, patch

import pytest
import requests
import yaml
from click.testing import CliRunner

from vercel_cli.cli.main import cli


@pytest.fixture
def cli_runner():
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Settings file holding a token and a default team."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.dump({"api_key": "tok_test_1234567890", "team_id": "team_cfg"}))
    return path


@pytest.fixture
def empty_config_file(tmp_path):
    """Path to a settings file that does not exist yet."""
    return tmp_path / "missing" / "config.yaml"


@pytest.fixture
def mock_request():
    """Patch the HTTP transport used by the request executor."""
    with patch("vercel_cli.api.vercel_client.requests.request") as mocked:
        yield mocked


def _api_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    response.content = json.dumps(payload).encode()
    response.text = json.dumps(payload)
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.exceptions.HTTPError(
            f"{status_code} Error", response=response
        )
    else:
        response.raise_for_status.return_value = None
    return response


@pytest.fixture
def api_response():
    """Factory for fake ``requests.Response`` objects carrying a JSON payload."""
    return _api_response


@pytest.fixture
def text_response():
    """Factory for fake 200 responses whose body is not JSON."""

    def _text_response(body):
        response = MagicMock()
        response.status_code = 200
        response.json.side_effect = ValueError("Expecting value")
        response.content = body.encode()
        response.text = body
        response.raise_for_status.return_value = None
        return response

    return _text_response


@pytest.fixture
def run_cli(cli_runner, config_file):
    """Invoke the root command with the test settings file."""

    def _run(*args, config=None):
        return cli_runner.invoke(cli, ["--config", str(config or config_file), *args])

    return _run


class CLITestCase:
    """Base class for CLI test cases with common utilities."""

    def assert_cli_success(self, result, expected_exit_code=0):
        assert result.exit_code == expected_exit_code, (
            f"CLI Output: {result.output}\nException: {result.exception}"
        )

    def assert_cli_error(self, result, expected_message: str = None):
        assert result.exit_code != 0
        if expected_message:
            assert expected_message in result.output

    def sent_params(self, mock_request):
        _, kwargs = mock_request.call_args
        return kwargs["params"]

    def sent_url(self, mock_request):
        return mock_request.call_args[0][1]


@pytest.fixture
def cli_test_base():
    """Fixture providing CLI test utilities."""
    return CLITestCase()
