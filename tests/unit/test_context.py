"""Unit tests for collaborator context strings."""

import pytest

from repoviz.context import child_file_names, file_context, folder_context
from repoviz.core.exceptions import NodeNotFoundError


class TestFolderContext:
    def test_child_file_names(self, sample_graph):
        assert child_file_names(sample_graph, "src") == ["App.js"]
        assert child_file_names(sample_graph, "root") == []

    def test_format(self, sample_graph):
        text = folder_context(sample_graph, "src")
        assert text == (
            'FOLDER: "src" (Files: App.js)\n'
            "CONTEXT:\n"
            "src/App.js\nsrc/utils/math.js\nsrc/utils/math.css\n"
        )

    def test_folder_without_files(self, sample_graph):
        assert '(Files: (none))' in folder_context(sample_graph, "root")

    def test_path_limit(self, sample_graph):
        text = folder_context(sample_graph, "src", max_paths=1)
        assert text.endswith("CONTEXT:\nsrc/App.js\n")

    def test_unknown_folder(self, sample_graph):
        with pytest.raises(NodeNotFoundError):
            folder_context(sample_graph, "ghost")


class TestFileContext:
    def test_format(self):
        text = file_context("a.js", "let x = 1;", ["a.js", "b.js"])
        assert text == 'FILE: "a.js"\nCONTEXT:\na.js\nb.js\nCODE:\nlet x = 1;\n'

    def test_source_is_truncated(self):
        text = file_context("a.js", "x" * 50, ["a.js"], max_chars=10)
        assert "CODE:\n" + "x" * 10 + "...\n" in text

    def test_path_limit(self):
        paths = [f"f{i}.js" for i in range(5)]
        text = file_context("f0.js", "", paths, max_paths=2)
        assert "CONTEXT:\nf0.js\nf1.js\nCODE:" in text
