"""Unit tests for CLI utilities."""

from unittest.mock import patch

from repoviz.config import Settings
from repoviz.core.result import Err, Ok
from repoviz.core.types import FileDescriptor
from repoviz.cli.utils import load_repository, open_session


class TestLoadRepository:
    def test_directory(self, repo_dir):
        repository = load_repository(str(repo_dir), Settings())

        assert repository.label == "demo"
        assert "src/App.js" in {d.path for d in repository.descriptors}
        assert repository.read_file("src/utils/math.js").unwrap().startswith("export")

    def test_descriptor_file_has_no_contents(self, listing_file):
        repository = load_repository(str(listing_file), Settings())

        assert [d["path"] for d in repository.descriptors] == ["src/App.js", "src/utils/math.js"]
        assert repository.read_file("src/App.js").is_err()

    def test_broken_descriptor_file(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("[")
        assert load_repository(str(path), Settings()) is None
        assert "Could not load descriptors" in capsys.readouterr().err

    def test_missing_source(self, tmp_path, capsys):
        assert load_repository(str(tmp_path / "missing"), Settings()) is None
        assert "Source not found" in capsys.readouterr().err

    @patch("repoviz.cli.utils.GitHubClient")
    def test_github_url(self, mock_client_cls):
        client = mock_client_cls.from_settings.return_value
        client.fetch_tree.return_value = Ok([FileDescriptor(path="README.md")])
        client.fetch_file_content.return_value = Ok("# hi")

        repository = load_repository("https://github.com/owner/repo", Settings())

        assert repository.label == "owner/repo"
        client.fetch_tree.assert_called_once_with("owner", "repo")
        assert repository.read_file("README.md").unwrap() == "# hi"
        client.fetch_file_content.assert_called_once_with("owner", "repo", "README.md")

    @patch("repoviz.cli.utils.GitHubClient")
    def test_github_failure(self, mock_client_cls, capsys):
        mock_client_cls.from_settings.return_value.fetch_tree.return_value = Err("Not found: owner/repo")

        assert load_repository("https://github.com/owner/repo", Settings()) is None
        assert "Not found: owner/repo" in capsys.readouterr().err


class TestOpenSession:
    def test_open_session(self, repo_dir):
        repository, session = open_session(str(repo_dir))
        assert session.graph.has_node("src/utils/math.css")
        assert repository.label == "demo"

    def test_open_session_missing(self, tmp_path):
        assert open_session(str(tmp_path / "missing")) is None


class TestLocalPathsBeforeUrls:
    @patch("repoviz.cli.utils.GitHubClient")
    def test_checkout_under_github_style_path_is_scanned(self, mock_client_cls, tmp_path):
        checkout = tmp_path / "go" / "src" / "github.com" / "owner" / "repo"
        checkout.mkdir(parents=True)
        (checkout / "main.go").write_text("package main\n")

        repository = load_repository(str(checkout), Settings())

        assert not mock_client_cls.from_settings.called
        assert repository.label == "repo"
        assert [d.path for d in repository.descriptors] == ["main.go"]
