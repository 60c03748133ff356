"""Tests for the root dicectl CLI."""

from click.testing import CliRunner

from dicectl import __version__
from dicectl.cli import cli


def test_cli_help(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "dicectl" in result.output
    assert "roll" in result.output
    assert "parse" in result.output


def test_cli_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_cli_no_args(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, [])
    assert result.exit_code == 0
    assert "Usage" in result.output


# --- Global flags ---


def test_json_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "--version"])
    assert result.exit_code == 0


def test_quiet_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "--version"])
    assert result.exit_code == 0


def test_verbose_flag_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-v", "--version"])
    assert result.exit_code == 0


def test_seed_option_accepted(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--seed", "3", "--version"])
    assert result.exit_code == 0


def test_seed_must_be_integer(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--seed", "abc", "roll", "d6"])
    assert result.exit_code == 2


def test_cli_examples(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--examples"])
    assert result.exit_code == 0
    assert "Examples for" in result.output
    assert "dicectl roll 2d6" in result.output
