"""Tests for ddlbind check command."""

from pathlib import Path

from click.testing import CliRunner

from ddlbind.cli.main import cli

runner = CliRunner()


class TestCheckCommand:
    """ddlbind check command tests."""

    def test_given_fresh_output_when_check_then_passes(self, project: Path) -> None:
        # Given
        runner.invoke(cli, ["generate", str(project)])

        # When
        result = runner.invoke(cli, ["check", str(project)])

        # Then
        assert result.exit_code == 0, result.output
        assert "✓" in result.output

    def test_given_no_output_when_check_then_reports_missing(self, project: Path) -> None:
        result = runner.invoke(cli, ["check", str(project)])

        assert result.exit_code == 1
        assert "user.py (missing)" in result.output
        assert "out of date" in result.output
        assert not (project / "src" / "db_entries").exists()

    def test_given_schema_change_when_check_then_reports_stale(self, project: Path) -> None:
        runner.invoke(cli, ["generate", str(project)])
        schema = project / "tables" / "users.sql"
        schema.write_text(
            schema.read_text().replace("display_name text", "display_name text NOT NULL")
        )

        result = runner.invoke(cli, ["check", str(project)])

        assert result.exit_code == 1
        assert "user.py (stale)" in result.output

    def test_given_leftover_file_when_check_then_reports_unexpected(
        self, project: Path
    ) -> None:
        runner.invoke(cli, ["generate", str(project)])
        (project / "src" / "db_entries" / "old.py").write_text("")

        result = runner.invoke(cli, ["check", str(project)])

        assert result.exit_code == 1
        assert "old.py (unexpected)" in result.output

    def test_given_binary_leftover_when_check_then_reports_unexpected(
        self, project: Path
    ) -> None:
        runner.invoke(cli, ["generate", str(project)])
        (project / "src" / "db_entries" / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n\xff")

        result = runner.invoke(cli, ["check", str(project)])

        assert result.exit_code == 1
        assert "logo.png (unexpected)" in result.output

    def test_given_check_when_out_of_date_then_never_writes(self, project: Path) -> None:
        runner.invoke(cli, ["generate", str(project)])
        stale = project / "src" / "db_entries" / "user.py"
        stale.write_text("# edited\n")

        runner.invoke(cli, ["check", str(project)])

        assert stale.read_text() == "# edited\n"
