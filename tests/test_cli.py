"""CLI tests for ghmodels via Click's CliRunner.

Network access is replaced by patching the factory functions each command
imports, or by a mock httpx transport.
"""

from __future__ import annotations

import functools
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from ghmodels import ModelsSettings, ProbeResult, create_basic_client
from ghmodels.cli import cli
from tests.conftest import make_transport, success_response

ASK = "ghmodels.cli.commands.ask"


@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


def _basic_client_factory(handler):
    return functools.partial(
        create_basic_client,
        settings=ModelsSettings(token="abc123"),
        transport=make_transport(handler),
    )


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------

class TestAsk:

    def test_question_from_arguments(self, runner):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=success_response("working!"))

        with patch(f"{ASK}.validate_credential", return_value=True), \
             patch(f"{ASK}.create_basic_client", _basic_client_factory(handler)):
            result = runner.invoke(cli, ["--env-file", "", "ask", "Just", "say", "hi"])

        assert result.exit_code == 0, result.output
        assert "Question: Just say hi" in result.output
        assert "working!" in result.output
        assert "Rate limits" in result.output

    def test_prompted_question_defaults(self, runner):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["body"] = request.content.decode()
            return httpx.Response(200, json=success_response("working!"))

        with patch(f"{ASK}.validate_credential", return_value=True), \
             patch(f"{ASK}.create_basic_client", _basic_client_factory(handler)):
            result = runner.invoke(cli, ["--env-file", "", "ask"], input="\n")

        assert result.exit_code == 0, result.output
        assert "Question: Just say: working!" in result.output
        assert "Just say: working!" in captured["body"]

    def test_invalid_token_stops(self, runner):
        with patch(f"{ASK}.validate_credential", return_value=False), \
             patch(f"{ASK}.create_basic_client") as factory:
            result = runner.invoke(cli, ["--env-file", "", "ask", "hello"])

        assert result.exit_code == 1
        assert "Invalid token or connection problem" in result.output
        factory.assert_not_called()

    def test_request_error_reports_status(self, runner):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, text="model not enabled")

        with patch(f"{ASK}.validate_credential", return_value=True), \
             patch(f"{ASK}.create_basic_client", _basic_client_factory(handler)):
            result = runner.invoke(cli, ["--env-file", "", "ask", "hello"])

        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "Status:  404" in result.output
        assert "model not enabled" in result.output
        assert "preview access" in result.output
        assert "Traceback" not in result.output


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------

class TestValidate:

    def test_valid(self, runner):
        with patch(
            "ghmodels.cli.commands.validate.probe_credential",
            return_value=ProbeResult(ok=True, status_code=200),
        ):
            result = runner.invoke(cli, ["--env-file", "", "validate"])
        assert result.exit_code == 0
        assert "Token is valid" in result.output

    def test_invalid(self, runner):
        probe = ProbeResult(ok=False, status_code=401, detail="bad token", error="Authentication failed")
        with patch("ghmodels.cli.commands.validate.probe_credential", return_value=probe):
            result = runner.invoke(cli, ["--env-file", "", "validate"])
        assert result.exit_code == 1
        assert "Invalid token or connection problem" in result.output
        assert "Status:  401" in result.output
        assert "bad token" in result.output

    def test_missing_token_is_reported_not_raised(self, runner):
        result = runner.invoke(cli, ["--env-file", "", "validate"])
        assert result.exit_code == 1
        assert "GITHUB_MODELS_TOKEN" in result.output


# ---------------------------------------------------------------------------
# limits
# ---------------------------------------------------------------------------

def test_limits(runner):
    result = runner.invoke(cli, ["limits"])
    assert result.exit_code == 0
    assert "Requests per minute" in result.output
