from click.testing import CliRunner


def test_version_attribute() -> None:
    import brutus

    assert isinstance(brutus.__version__, str)
    assert brutus.__version__


def test_cli_reports_version() -> None:
    from brutus.cli import _package_version, cli

    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])

    assert result.exit_code == 0
    assert "Brutus" in result.output
    assert _package_version() in result.output

    command_result = runner.invoke(cli, ["version"])

    assert command_result.exit_code == 0
    assert "Brutus" in command_result.output
    assert _package_version() in command_result.output
