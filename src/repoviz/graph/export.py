"""
Render export.

Serializes the visible subgraph for a rendering surface (3D force graph,
sidebar tree, IDE panel). This is the only place node payloads are joined
to links; inside the core, link endpoints stay plain ids.

Payload shape:
{
    "nodes": [{"id", "name", "group", "collapsed", "childCount", "size", "highlighted"}],
    "links": [{"source", "target", "kind", "highlighted"}],
    "highlight": ["root", ...],
    "truncated": false
}
"""

import json
from typing import Any, Collection, Dict, Mapping, Optional

from ..core.highlight import highlighted_links
from ..core.types import VisibleGraph


def to_render_payload(
    visible: VisibleGraph,
    state: Mapping[str, bool],
    highlight: Optional[Collection[str]] = None,
) -> Dict[str, Any]:
    """Build the JSON-ready payload for the visible subgraph."""
    focus = set(highlight or ())
    emphasised = set(highlighted_links(visible.links, focus))

    nodes = []
    for node in visible.nodes:
        nodes.append({
            "id": node.id,
            "name": node.name,
            "group": node.group.value,
            "collapsed": state.get(node.id, node.collapsed),
            "childCount": len(node.child_links),
            "size": node.size,
            "highlighted": node.id in focus,
        })

    links = []
    for link in visible.links:
        links.append({
            "source": link.source,
            "target": link.target,
            "kind": link.kind.value,
            "highlighted": link in emphasised,
        })

    return {
        "nodes": nodes,
        "links": links,
        "highlight": sorted(focus),
        "truncated": visible.truncated,
    }


def to_json(payload: Dict[str, Any], indent: Optional[int] = 2) -> str:
    return json.dumps(payload, indent=indent)
