"""Unit tests for the top-level CLI group."""

from click.testing import CliRunner

from repoviz.cli.main import main


class TestMain:
    def test_help_lists_commands(self):
        result = CliRunner().invoke(main, ["--help"])

        assert result.exit_code == 0
        for command in ("tree", "path", "deps", "stats", "export", "context"):
            assert command in result.output

    def test_verbose_flag(self, repo_dir):
        result = CliRunner().invoke(main, ["-v", "path", str(repo_dir), "src"])
        assert result.exit_code == 0
        assert "src → root" in result.output
