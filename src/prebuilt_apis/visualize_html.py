from __future__ import annotations

from pathlib import Path

import networkx as nx
from pyvis.network import Network

from prebuilt_apis.graph import SOURCE_KIND


def export_pyvis(g: nx.DiGraph, out: Path, height: str = "800px") -> Path:
    net = Network(height=height, width="100%", directed=True, cdn_resources="remote")
    for node_id, data in g.nodes(data=True):
        kind = data.get("kind")
        label = data.get("path") if kind == SOURCE_KIND else str(node_id)
        net.add_node(str(node_id), label=label, title=kind, group=kind)
    for u, v in g.edges:
        net.add_edge(str(u), str(v))
    out.parent.mkdir(parents=True, exist_ok=True)
    net.write_html(str(out))
    return out
