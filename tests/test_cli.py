"""Smoke tests for the CLI entrypoint."""

from click.testing import CliRunner

from photoframe.cli import cli


def test_cli_help_displays_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "digital photo frame" in result.output
    for command in ("export", "sync", "config"):
        assert command in result.output


def test_export_help_lists_frame_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["export", "--help"])

    assert result.exit_code == 0
    for flag in ("--width", "--height", "--flatten", "--skip", "--format", "--naming"):
        assert flag in result.output
