"""Unit tests for the render export."""

import json

from repoviz.core.session import ExplorerSession
from repoviz.graph.export import to_json, to_render_payload


class TestRenderPayload:
    def test_initial_payload(self, sample_descriptors):
        session = ExplorerSession.from_descriptors(sample_descriptors)
        payload = to_render_payload(session.visible(), session.state)

        assert [n["id"] for n in payload["nodes"]] == ["root", "src"]
        root, src = payload["nodes"]
        assert root["group"] == "root"
        assert root["collapsed"] is False
        assert src["collapsed"] is True
        assert src["childCount"] == 2
        assert payload["links"] == [
            {"source": "root", "target": "src", "kind": "structural", "highlighted": False}
        ]
        assert payload["highlight"] == []
        assert payload["truncated"] is False

    def test_highlight_marks_path(self, sample_descriptors):
        session = ExplorerSession.from_descriptors(sample_descriptors)
        session.expand_all()
        highlight = session.highlight("src/utils/math.css")

        payload = to_render_payload(session.visible(), session.state, highlight)

        marked = {n["id"] for n in payload["nodes"] if n["highlighted"]}
        assert marked == {"root", "src", "src/utils", "src/utils/math.css"}

        marked_links = {(l["source"], l["target"]) for l in payload["links"] if l["highlighted"]}
        assert marked_links == {
            ("root", "src"),
            ("src", "src/utils"),
            ("src/utils", "src/utils/math.css"),
        }
        assert payload["highlight"] == sorted(marked)

    def test_dependency_links_exported(self, sample_descriptors):
        session = ExplorerSession.from_descriptors(sample_descriptors)
        session.expand_all()
        payload = to_render_payload(session.visible(), session.state)

        kinds = {(l["source"], l["target"]): l["kind"] for l in payload["links"]}
        assert kinds[("src/utils/math.css", "src/utils/math.js")] == "dependency"

    def test_file_sizes(self, sample_descriptors):
        session = ExplorerSession.from_descriptors(sample_descriptors)
        session.expand_all()
        payload = to_render_payload(session.visible(), session.state)

        sizes = {n["id"]: n["size"] for n in payload["nodes"]}
        assert sizes["src/App.js"] == 120
        assert sizes["src"] is None

    def test_to_json(self, sample_descriptors):
        session = ExplorerSession.from_descriptors(sample_descriptors)
        payload = to_render_payload(session.visible(), session.state)
        assert json.loads(to_json(payload)) == payload
