"""CLI tests using click.testing.CliRunner. Network calls are mocked at the dispatcher seam."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from zns_lookup.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_cli_help(runner: CliRunner):
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("resolve", "chains"):
        assert cmd in result.output


def test_cli_version(runner: CliRunner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_chains_lists_registry(runner: CliRunner):
    result = runner.invoke(cli, ["chains"])
    assert result.exit_code == 0
    assert "eip155:137" in result.output
    assert ".poly" in result.output


def test_resolve_domain(runner: CliRunner, sample_address):
    with patch("zns_lookup.lookup.resolve_zns_name", new_callable=AsyncMock) as forward:
        forward.return_value = sample_address
        result = runner.invoke(cli, ["resolve", "--chain", "polygon", "--domain", "example.poly"])

    assert result.exit_code == 0, result.output
    payload = json.loads(result.output)
    assert payload["resolvedAddresses"][0]["resolvedAddress"] == sample_address
    forward.assert_awaited_once_with("example", 137)


def test_resolve_address(runner: CliRunner, sample_address):
    with patch("zns_lookup.lookup.reverse_resolve_address", new_callable=AsyncMock) as reverse:
        reverse.return_value = "example.poly"
        result = runner.invoke(cli, ["resolve", "--chain", "eip155:137", "--address", sample_address])

    assert result.exit_code == 0, result.output
    assert json.loads(result.output)["resolvedAddresses"][0]["domainName"] == "example.poly"


def test_resolve_no_result(runner: CliRunner):
    with patch("zns_lookup.lookup.resolve_zns_name", new_callable=AsyncMock) as forward:
        forward.return_value = None
        result = runner.invoke(cli, ["resolve", "--chain", "137", "--domain", "nobody.poly"])

    assert result.exit_code == 0
    assert "No result." in result.output


def test_resolve_requires_domain_or_address(runner: CliRunner):
    result = runner.invoke(cli, ["resolve", "--chain", "137"])
    assert result.exit_code != 0
    assert "--domain or --address" in result.output


def test_resolve_bad_chain(runner: CliRunner):
    result = runner.invoke(cli, ["resolve", "--chain", "eip155:abc", "--domain", "example.poly"])
    assert result.exit_code != 0
    assert "Invalid chain ID number" in result.output


def test_invalid_log_level_is_a_clean_error(runner: CliRunner, monkeypatch):
    monkeypatch.setenv("ZNS_LOG_LEVEL", "verbose")
    result = runner.invoke(cli, ["chains"])
    assert result.exit_code == 1
    assert "Invalid ZNS_* configuration" in result.output
    assert not isinstance(result.exception, ValueError)
