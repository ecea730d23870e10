"""
Unit tests for the 'path' command.
"""

import json

from click.testing import CliRunner

from repoviz.cli.commands.path import path


class TestPathCommand:
    def test_text_output(self, repo_dir):
        result = CliRunner().invoke(path, [str(repo_dir), "src/utils/math.js"])

        assert result.exit_code == 0
        assert result.output.strip() == "src/utils/math.js → src/utils → src → root"

    def test_json_output(self, repo_dir):
        result = CliRunner().invoke(path, [str(repo_dir), "src", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.output) == {"node": "src", "path": ["src", "root"]}

    def test_unknown_node(self, repo_dir):
        result = CliRunner().invoke(path, [str(repo_dir), "ghost.js"])
        assert result.exit_code == 1
        assert "Node not found: ghost.js" in result.output
