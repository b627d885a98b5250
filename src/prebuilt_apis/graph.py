from __future__ import annotations

from collections.abc import Iterable

import networkx as nx

from prebuilt_apis.exceptions import DuplicateNameError
from prebuilt_apis.models import Declaration, ImportDeclaration


SOURCE_KIND = "source"


def _source_id(path: str) -> str:
    return f"src:{path}"


def add_declaration(g: nx.DiGraph, decl: Declaration) -> None:
    """Insert a declaration node, with an edge to every file it references.

    Raises:
        DuplicateNameError: If a declaration with the same name exists.
    """
    if g.has_node(decl.name) and g.nodes[decl.name].get("kind") != SOURCE_KIND:
        raise DuplicateNameError(f"module {decl.name!r} already defined")

    props = decl.model_dump(exclude={"name"})
    g.add_node(decl.name, **props)

    paths = decl.jars if isinstance(decl, ImportDeclaration) else decl.srcs
    for path in paths:
        src = _source_id(path)
        if not g.has_node(src):
            g.add_node(src, kind=SOURCE_KIND, path=path)
        g.add_edge(decl.name, src)


def build_graph(declarations: Iterable[Declaration]) -> nx.DiGraph:
    """Build a directed graph where decl -> src means decl references src."""
    g = nx.DiGraph()
    for decl in declarations:
        add_declaration(g, decl)
    return g


def declaration_names(g: nx.DiGraph) -> list[str]:
    """Return the sorted names of all declaration nodes."""
    return sorted(str(n) for n, data in g.nodes(data=True) if data.get("kind") != SOURCE_KIND)


def sources_of(g: nx.DiGraph, name: str) -> list[str]:
    """Return the paths referenced by a declaration (empty if unknown)."""
    if name not in g:
        return []
    return sorted(g.nodes[s]["path"] for s in g.successors(name))
