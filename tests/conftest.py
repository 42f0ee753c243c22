"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from ipv6addr.cli import cli
from ipv6addr.context import BASE85_ENV_VAR, Capabilities


@pytest.fixture(autouse=True)
def clear_base85_env(monkeypatch):
    """Keep $IPV6ADDR_BASE85 from leaking into capability resolution.

    Tests that exercise the variable set it themselves.
    """
    monkeypatch.delenv(BASE85_ENV_VAR, raising=False)
    yield


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args.

    Usage:
        result = invoke(["check", "::1"])  # returns click.Result
        result = invoke(["--no-base85", "format", "-f", "base85", "::1"])
    """

    def _invoke(args, input_data=None):
        return cli_runner.invoke(cli, args, input=input_data)

    return _invoke


@pytest.fixture
def with_base85():
    """Capabilities with RFC1924 support (skips without netaddr)."""
    pytest.importorskip("netaddr")
    return Capabilities(base85=True)


@pytest.fixture
def without_base85():
    """Capabilities with RFC1924 support switched off."""
    return Capabilities(base85=False)
