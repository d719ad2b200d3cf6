"""Unit tests for the farmbook CLI."""

from typer.testing import CliRunner

from farmbook.presentation.cli.app import app

runner = CliRunner()


def test_secrets_generate_prints_required_keys():
    result = runner.invoke(app, ["secrets", "generate"])

    assert result.exit_code == 0
    assert "JWT_SECRET" in result.output
    assert "POSTGRES_PASSWORD" in result.output


def test_check_fails_without_token_configuration():
    result = runner.invoke(app, ["check"])

    assert result.exit_code == 1
    assert "JWT_SECRET" in result.output


def test_check_passes_with_token_configuration(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "cli-secret")
    monkeypatch.setenv("JWT_EXPIRES_IN", "1h")

    result = runner.invoke(app, ["check"])

    assert result.exit_code == 0
    assert "3600s" in result.output
