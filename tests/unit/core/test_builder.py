"""Unit tests for the graph builder."""

import itertools
from collections import Counter

import pytest

from repoviz.core.builder import GraphBuilder, build_graph
from repoviz.core.types import FileDescriptor, Link, LinkKind, NodeGroup


def _node_set(graph):
    return {
        (n.id, n.name, n.group, n.collapsed, n.size, frozenset(n.child_links))
        for n in graph.iter_nodes()
    }


class TestGraphBuilder:
    def test_sample_nodes(self, sample_graph):
        assert set(sample_graph.nodes) == {
            "root", "src", "src/utils", "src/App.js", "src/utils/math.js", "src/utils/math.css",
        }

    def test_sample_stylesheet_link(self, sample_graph):
        assert Link(
            source="src/utils/math.css", target="src/utils/math.js", kind=LinkKind.DEPENDENCY
        ) in sample_graph.links

    def test_groups_and_initial_flags(self, sample_graph):
        root = sample_graph.get_node("root")
        assert root.group == NodeGroup.ROOT
        assert root.name == "Repository"
        assert root.collapsed is False

        assert sample_graph.get_node("src").group == NodeGroup.FOLDER
        assert sample_graph.get_node("src/utils").group == NodeGroup.FOLDER
        assert sample_graph.get_node("src/App.js").group == NodeGroup.FILE
        assert sample_graph.get_node("src/App.js").name == "App.js"

        for node in sample_graph.iter_nodes():
            if not node.is_root:
                assert node.collapsed is True

    def test_exactly_one_root(self, sample_graph):
        roots = [n for n in sample_graph.iter_nodes() if n.group == NodeGroup.ROOT]
        assert [n.id for n in roots] == ["root"]

    def test_one_structural_parent_per_node(self, sample_graph):
        incoming = Counter(link.target for link in sample_graph.structural_links())
        for node in sample_graph.iter_nodes():
            expected = 0 if node.is_root else 1
            assert incoming[node.id] == expected, node.id

    def test_child_links_match_structural_links(self, sample_graph):
        for node in sample_graph.iter_nodes():
            targets = {l.target for l in sample_graph.structural_links() if l.source == node.id}
            assert set(node.child_links) == targets

    def test_shared_prefix_is_memoized(self):
        graph = build_graph([{"path": "src/a.js"}, {"path": "src/b.js"}])
        assert list(graph.get_node("src").child_links) == ["src/a.js", "src/b.js"]
        root_links = [l for l in graph.links if l.source == "root"]
        assert root_links == [Link(source="root", target="src")]

    def test_sizes_kept_for_files_only(self):
        graph = build_graph([
            {"path": "lib", "type": "tree", "size": 999},
            {"path": "lib/a.py", "type": "blob", "size": 12},
        ])
        assert graph.get_node("lib").size is None
        assert graph.get_node("lib/a.py").size == 12

    def test_tree_descriptor_is_folder(self):
        graph = build_graph([{"path": "docs", "type": "tree"}])
        assert graph.get_node("docs").group == NodeGroup.FOLDER
        assert graph.get_node("docs").child_links == ()

    def test_accepts_models_and_dicts(self):
        graph = build_graph([FileDescriptor(path="a.md"), {"path": "b.md"}])
        assert graph.has_node("a.md")
        assert graph.has_node("b.md")


class TestBuildDeterminism:
    @pytest.mark.parametrize("order", list(itertools.permutations(range(3))))
    def test_order_does_not_change_sets(self, sample_descriptors, order):
        reference = build_graph(sample_descriptors)
        shuffled = build_graph([sample_descriptors[i] for i in order])

        assert _node_set(shuffled) == _node_set(reference)
        assert set(shuffled.links) == set(reference.links)

    def test_building_twice_is_set_equal(self, sample_descriptors):
        first = build_graph(sample_descriptors)
        second = build_graph(sample_descriptors)
        assert _node_set(first) == _node_set(second)
        assert set(first.links) == set(second.links)

    def test_blob_used_as_prefix_is_a_folder_in_any_order(self):
        forward = build_graph([{"path": "a.js"}, {"path": "a.js/b.txt"}])
        backward = build_graph([{"path": "a.js/b.txt"}, {"path": "a.js"}])
        assert forward.get_node("a.js").group == NodeGroup.FOLDER
        assert backward.get_node("a.js").group == NodeGroup.FOLDER


class TestMalformedInput:
    def test_empty_and_missing_paths_are_skipped(self):
        builder = GraphBuilder()
        builder.add_all([
            {"path": ""},
            {"path": None},
            {},
            {"path": "a//b.js"},
            {"path": "/abs.js"},
            {"path": "trailing/"},
            42,
        ])
        graph = builder.build()

        assert set(graph.nodes) == {"root"}
        assert graph.links == ()
        assert builder.skipped == 7

    def test_skipped_descriptor_leaves_no_partial_nodes(self):
        graph = build_graph([{"path": "src/ok.js"}, {"path": "src/deep//bad.js"}])
        assert set(graph.nodes) == {"root", "src", "src/ok.js"}

    def test_unknown_type_is_skipped(self):
        graph = build_graph([{"path": "vendor/lib", "type": "commit"}, {"path": "x.js"}])
        assert not graph.has_node("vendor")
        assert graph.has_node("x.js")

    def test_top_level_root_segment_is_skipped(self):
        graph = build_graph([{"path": "root/config.yaml"}, {"path": "app.py"}])
        assert not graph.has_node("root/config.yaml")
        assert graph.get_node("root").group == NodeGroup.ROOT
        assert graph.get_node("root").child_links == ("app.py",)

    def test_nested_root_segment_is_fine(self):
        graph = build_graph([{"path": "fs/root/mount.c"}])
        assert graph.has_node("fs/root")


class TestStylesheetHeuristic:
    def test_links_to_every_matching_script(self):
        graph = build_graph([
            {"path": "ui/Button.css"},
            {"path": "ui/Button.js"},
            {"path": "ui/Button.tsx"},
        ])
        deps = {(l.source, l.target) for l in graph.dependency_links()}
        assert deps == {("ui/Button.css", "ui/Button.js"), ("ui/Button.css", "ui/Button.tsx")}

    def test_stylesheet_listed_before_script_is_still_linked(self):
        graph = build_graph([{"path": "a/card.scss"}, {"path": "a/card.jsx"}])
        assert [(l.source, l.target) for l in graph.dependency_links()] == [("a/card.scss", "a/card.jsx")]

    def test_only_siblings_are_linked(self):
        graph = build_graph([{"path": "a/card.css"}, {"path": "b/card.js"}])
        assert graph.dependency_links() == []

    def test_folder_named_like_script_is_not_linked(self):
        graph = build_graph([{"path": "x.css"}, {"path": "x.js/index.js"}])
        assert graph.dependency_links() == []

    def test_dependency_links_are_not_structural(self, sample_graph):
        utils = sample_graph.get_node("src/utils")
        assert set(utils.child_links) == {"src/utils/math.js", "src/utils/math.css"}
        assert all(l.kind == LinkKind.DEPENDENCY for l in sample_graph.dependency_links())


class TestDescriptorSizes:
    def test_fractional_size_keeps_file(self):
        graph = build_graph([{"path": "docs/guide.md", "size": 12.5}])
        assert graph.get_node("docs/guide.md").group == NodeGroup.FILE
        assert graph.get_node("docs/guide.md").size == 12

    @pytest.mark.parametrize("size", ["big", -4, float("nan"), True, [1]])
    def test_unusable_size_is_dropped_not_the_path(self, size):
        graph = build_graph([{"path": "a.js", "size": size}])
        assert graph.has_node("a.js")
        assert graph.get_node("a.js").size is None

    def test_numeric_string_size(self):
        assert FileDescriptor.model_validate({"path": "a.js", "size": "40"}).size == 40
