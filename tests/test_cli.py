"""Test CLI functionality."""

import pytest
from typer.testing import CliRunner

from commented_config.cli import app


@pytest.fixture
def runner():
    """Test runner for CLI commands."""
    return CliRunner()


class TestCLI:
    """Test CLI functionality."""

    @pytest.mark.integration
    def test_cli_help(self, runner):
        """Test CLI help command."""
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "commented-config" in result.stdout

    @pytest.mark.integration
    @pytest.mark.parametrize("command", ["reformat", "encode", "decode"])
    def test_command_help(self, runner, command):
        result = runner.invoke(app, [command, "--help"])
        assert result.exit_code == 0

    @pytest.mark.integration
    def test_reformat(self, runner, example_file, example_saved_text):
        """Test rewriting a file in place."""
        result = runner.invoke(app, ["reformat", str(example_file)])

        assert result.exit_code == 0, result.output
        assert "Saved" in result.stdout
        assert example_file.read_text() == example_saved_text

    @pytest.mark.integration
    def test_reformat_compact(self, runner, example_file, example_text):
        result = runner.invoke(app, ["reformat", str(example_file), "--compact"])

        assert result.exit_code == 0, result.output
        assert example_file.read_text() == example_text

    @pytest.mark.integration
    def test_reformat_creates_missing_file(self, runner, tmp_path):
        path = tmp_path / "new" / "settings.yml"
        result = runner.invoke(app, ["reformat", str(path)])

        assert result.exit_code == 0, result.output
        assert path.read_text() == ""

    @pytest.mark.integration
    def test_reformat_directory(self, runner, tmp_path):
        """Test that errors exit with a non-zero code."""
        result = runner.invoke(app, ["reformat", str(tmp_path)])
        assert result.exit_code == 1

    @pytest.mark.integration
    def test_encode(self, runner, example_file):
        result = runner.invoke(app, ["encode", str(example_file)])

        assert result.exit_code == 0, result.output
        assert "_COMMENT_0: ' Server settings'" in result.stdout
        assert "_COMMENT_2: ' It''s worth keeping backups'" in result.stdout

    @pytest.mark.integration
    def test_encode_nonexistent_file(self, runner, tmp_path):
        result = runner.invoke(app, ["encode", str(tmp_path / "nope.yml")])
        assert result.exit_code != 0

    @pytest.mark.integration
    def test_decode(self, runner, tmp_path):
        dumped = tmp_path / "dumped.yml"
        dumped.write_text("_COMMENT_0: ' Title'\nkey: 1\n_COMMENT_1: ' Sub'\nother: 2\n")

        result = runner.invoke(app, ["decode", str(dumped)])

        assert result.exit_code == 0, result.output
        assert result.stdout == "# Title\nkey: 1\n\n# Sub\nother: 2\n"

    @pytest.mark.integration
    def test_decode_compact(self, runner, tmp_path):
        dumped = tmp_path / "dumped.yml"
        dumped.write_text("_COMMENT_0: ' Title'\nkey: 1\n_COMMENT_1: ' Sub'\nother: 2\n")

        result = runner.invoke(app, ["decode", str(dumped), "--compact"])

        assert result.exit_code == 0, result.output
        assert result.stdout == "# Title\nkey: 1\n# Sub\nother: 2\n"
