"""Smoke tests: imports work, CLI --help works."""

from click.testing import CliRunner

from ambush_graph.__main__ import main


def test_import():
    import ambush_graph

    assert ambush_graph is not None


def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    assert "Execution graph edge list" in result.output
