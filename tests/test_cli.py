"""Tests for rush_changelog.cli."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from rush_changelog.cli import cli


class TestGet:
    def test_prints_markdown(self, fixtures_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["get", "@advanced/example-1", "0.8.11", "-C", str(fixtures_dir)]
        )

        assert result.exit_code == 0, result.output
        assert "# @advanced/example-1 v0.8.11" in result.stdout
        assert "**BREAKING**: Breaking change - restructured API" in result.stdout

    def test_writes_output_file(self, fixtures_dir: Path, tmp_path: Path) -> None:
        out = tmp_path / "notes.md"
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["get", "@advanced/example-2", "1.2.0", "-C", str(fixtures_dir), "-o", str(out)],
        )

        assert result.exit_code == 0, result.output
        assert out.read_text().startswith("# @advanced/example-2 v1.2.0")
        assert "# @advanced" not in result.stdout

    def test_failure_exits_nonzero(self, fixtures_dir: Path) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["get", "@advanced/example-1", "999.999.999", "-C", str(fixtures_dir)]
        )

        assert result.exit_code == 1
        assert 'Failed to get changelog: Version "999.999.999" not found' in result.output


@patch("rush_changelog.cli.run_action")
def test_action_command_dispatches(mock_run_action: MagicMock) -> None:
    result = CliRunner().invoke(cli, ["action"])

    assert result.exit_code == 0
    mock_run_action.assert_called_once_with()
