"""Integration tests for the validate CLI command.

These tests verify the validate command works correctly end-to-end,
including:
- Valid configuration files pass validation
- Invalid configuration files produce errors
- Rejected components are reported as warnings
- Exit codes are correct
"""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from booths.cli.main import app

# Get path to test fixtures
FIXTURES_PATH = Path(__file__).parent.parent / "fixtures" / "configs"


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI runner for testing."""
    return CliRunner()


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid_config(self, runner: CliRunner) -> None:
        """A config where every component fits should exit 0."""
        result = runner.invoke(app, ["validate", str(FIXTURES_PATH / "full_booth.json")])

        assert result.exit_code == 0
        assert "Validation passed. 8 component(s) placed." in result.output

    def test_rejected_components_warn(self, runner: CliRunner) -> None:
        """Rejected components should be listed and exit with code 2."""
        config_path = FIXTURES_PATH / "rejected_components.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 2
        assert "Warnings:" in result.output
        assert "components[0] (counter)" in result.output
        assert "Validation passed with 1 warning(s)" in result.output

    def test_file_not_found(self, runner: CliRunner) -> None:
        """Non-existent file should fail with exit code 1."""
        config_path = FIXTURES_PATH / "nonexistent.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_invalid_json_syntax(self, runner: CliRunner) -> None:
        """Invalid JSON should fail with exit code 1."""
        config_path = FIXTURES_PATH / "invalid_json.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "Invalid JSON syntax" in result.output
        assert "Validation failed." in result.output

    def test_schema_error_shows_path(self, runner: CliRunner) -> None:
        """Schema errors should name the offending field and value."""
        config_path = FIXTURES_PATH / "invalid_carpet.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "carpet_index" in result.output
        assert "Value: 99" in result.output

    def test_unknown_field(self, runner: CliRunner) -> None:
        config_path = FIXTURES_PATH / "unknown_field.json"
        result = runner.invoke(app, ["validate", str(config_path)])

        assert result.exit_code == 1
        assert "colour" in result.output
