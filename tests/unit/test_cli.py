"""Unit tests for the click command-line interface."""

import pytest
from click.testing import CliRunner

from passmark import __version__
from passmark.cli.main import cli
from passmark.engines.detector import FIELD_NAME_CATALOG


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def no_default_config_path(mocker):
    settings = mocker.MagicMock(config_path=None)
    mocker.patch("passmark.cli.main.get_config", return_value=settings)


class TestValidateCommand:
    """Test `passmark validate`."""

    def test_valid_config(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("default_to_pass_on_missing: false\n")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 0
        assert "Config is valid" in result.output
        assert "Default to PASS: False" in result.output

    def test_invalid_config(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("grade_mapping:\n  A: MAYBE\n")

        result = runner.invoke(cli, ["validate", str(path)])

        assert result.exit_code == 1
        assert "Validation failed" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 2


@pytest.mark.usefixtures("no_default_config_path")
class TestClassifyCommand:
    """Test `passmark classify`."""

    def test_classify_grade(self, runner):
        result = runner.invoke(cli, ["classify", "Learner=Ada", "Grade=B+"])

        assert result.exit_code == 0
        assert "PASS (HIGH)" in result.output
        assert "Field: Grade" in result.output
        assert "GRADE_CONVERSION" in result.output

    def test_classify_missing_column(self, runner):
        result = runner.invoke(cli, ["classify", "Notes=great job"])

        assert result.exit_code == 0
        assert "PASS (NONE)" in result.output
        assert "Status was defaulted" in result.output
        assert "MISSING_COLUMN" in result.output

    def test_default_pending_flag(self, runner):
        result = runner.invoke(cli, ["classify", "--default-pending", "Status=Maybe"])

        assert result.exit_code == 0
        assert "PENDING (LOW)" in result.output

    def test_strict_columns_flag(self, runner):
        result = runner.invoke(cli, ["classify", "--strict-columns", "final grade x=A"])

        assert "Field: -" in result.output

    def test_config_file(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("custom_field_mappings: [Verdict]\n")

        result = runner.invoke(
            cli, ["classify", "--config", str(path), "Grade=A", "Verdict=Rejected"]
        )

        assert result.exit_code == 0
        assert "FAIL (HIGH)" in result.output
        assert "Field: Verdict" in result.output

    def test_invalid_config_file(self, runner, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("custom_field_mappings: Verdict\n")

        result = runner.invoke(cli, ["classify", "--config", str(path), "Grade=A"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_bad_pair(self, runner):
        result = runner.invoke(cli, ["classify", "Grade"])

        assert result.exit_code == 2
        assert "FIELD=VALUE" in result.output


class TestOtherCommands:
    """Test `passmark patterns` and `passmark version`."""

    def test_patterns(self, runner):
        result = runner.invoke(cli, ["patterns"])

        assert result.exit_code == 0
        assert f"1. {FIELD_NAME_CATALOG[0]}" in result.output
        assert len(result.output.strip().splitlines()) == len(FIELD_NAME_CATALOG)

    def test_version(self, runner):
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.output
