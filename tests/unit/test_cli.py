"""Tests for the blueprint-validate command."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner
from google.auth.exceptions import DefaultCredentialsError

from blueprint_validator import cli
from tests.fakes.fake_provider import FakePreconditionProvider

BLUEPRINT_YAML = """
blueprint_name: hpc-cluster-small
vars:
  project_id: my-proj
  region: us-central1
  zone: us-central1-a
resource_groups:
  - name: primary
    resources:
      - id: network1
        source: ./modules/network/vpc
        kind: terraform
        settings:
          network_name: hpc-net
        outputs: [network_name]
"""

CATALOG_YAML = """
modules:
  ./modules/network/vpc:
    kind: terraform
    inputs:
      - name: project_id
        required: true
      - name: network_name
    outputs: [network_name]
"""


@pytest.fixture(autouse=True)
def isolated_cli(monkeypatch: pytest.MonkeyPatch) -> None:
    # keep the test structlog configuration in place
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)
    monkeypatch.delenv("VALIDATION_LEVEL", raising=False)


@pytest.fixture
def files(tmp_path: Path) -> dict[str, str]:
    blueprint = tmp_path / "blueprint.yaml"
    blueprint.write_text(BLUEPRINT_YAML)
    catalog = tmp_path / "modules.yaml"
    catalog.write_text(CATALOG_YAML)
    return {"blueprint": str(blueprint), "catalog": str(catalog)}


@pytest.fixture
def provider(monkeypatch: pytest.MonkeyPatch, precondition_provider: FakePreconditionProvider):
    factory = MagicMock()
    factory.return_value.create_compute_client.return_value = precondition_provider
    monkeypatch.setattr(cli, "GCPClientFactory", factory)
    return precondition_provider


class TestValidateCommand:
    def test_passes(self, files, provider) -> None:
        result = CliRunner().invoke(cli.validate, [files["blueprint"], "-m", files["catalog"]])

        assert result.exit_code == 0, result.output
        assert "Blueprint validation passed" in result.output
        # default validators for project, region and zone
        assert len(provider.calls) == 4

    def test_ignore_skips_provider(self, files, monkeypatch: pytest.MonkeyPatch) -> None:
        factory = MagicMock()
        monkeypatch.setattr(cli, "GCPClientFactory", factory)

        result = CliRunner().invoke(
            cli.validate, [files["blueprint"], "-m", files["catalog"], "--validation-level", "ignore"])

        assert result.exit_code == 0, result.output
        factory.assert_not_called()

    def test_precondition_failure_exits_nonzero(self, files, provider) -> None:
        provider.projects.clear()

        result = CliRunner().invoke(cli.validate, [files["blueprint"], "-m", files["catalog"]])

        assert result.exit_code == 1
        assert "validation failed due to the issues listed above" in result.output

    def test_warning_level_passes(self, files, provider) -> None:
        provider.projects.clear()

        result = CliRunner().invoke(
            cli.validate, [files["blueprint"], "-m", files["catalog"], "-l", "WARNING"])

        assert result.exit_code == 0, result.output

    def test_missing_catalog_fails_settings(self, files, provider) -> None:
        result = CliRunner().invoke(cli.validate, [files["blueprint"]])

        assert result.exit_code == 1
        assert "failed to get info for module at ./modules/network/vpc" in result.output

    def test_verbose(self, files, provider) -> None:
        result = CliRunner().invoke(
            cli.validate, [files["blueprint"], "-m", files["catalog"], "--verbose"])

        assert "Validation level: ERROR" in result.output
        assert "Validators requested: 4" in result.output

    def test_level_from_environment(self, files, provider, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VALIDATION_LEVEL", "warning")
        provider.projects.clear()

        result = CliRunner().invoke(cli.validate, [files["blueprint"], "-m", files["catalog"]])

        assert result.exit_code == 0, result.output

    def test_provider_disconnected_after_run(self, files, provider) -> None:
        CliRunner().invoke(cli.validate, [files["blueprint"], "-m", files["catalog"]])

        assert provider.disconnected


class TestMissingCredentials:
    @pytest.fixture(autouse=True)
    def no_default_credentials(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.delenv("GCP_CREDENTIALS_FILE", raising=False)
        with patch("google.auth.default", side_effect=DefaultCredentialsError("no adc")) as default:
            yield default

    def test_warning_level_passes(self, files, no_default_credentials) -> None:
        result = CliRunner().invoke(
            cli.validate, [files["blueprint"], "-m", files["catalog"], "-l", "WARNING"])

        assert result.exit_code == 0, result.output
        assert "Blueprint validation passed" in result.output
        # one attempt per default validator
        assert no_default_credentials.call_count == 4

    def test_error_level_reports_every_validator(self, files) -> None:
        result = CliRunner().invoke(cli.validate, [files["blueprint"], "-m", files["catalog"]])

        assert result.exit_code == 1
        assert "validation failed due to the issues listed above" in result.output
