"""Build host collaborators: globbing and declaration registration."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

import networkx as nx

from prebuilt_apis.exceptions import GlobError
from prebuilt_apis.graph import add_declaration
from prebuilt_apis.models import Declaration
from prebuilt_apis.scanner import glob_files


logger = logging.getLogger(__name__)


class BuildHost(Protocol):
    """What the generator needs from the surrounding build system."""

    def glob(self, pattern: str) -> list[str]:
        """Return every path under the host root matching pattern.

        Raises:
            GlobError: If the directory cannot be scanned.
        """
        ...

    def register(self, declaration: Declaration) -> None:
        """Insert a declaration into the active build graph.

        Raises:
            DuplicateNameError: If the name is already taken.
        """
        ...


class GraphBuildHost:
    """A host backed by a directory on disk and an in-memory networkx graph."""

    def __init__(self, root: Path, graph: nx.DiGraph | None = None) -> None:
        self.root = Path(root)
        self.graph = graph if graph is not None else nx.DiGraph()

    def glob(self, pattern: str) -> list[str]:
        try:
            return glob_files(self.root, pattern)
        except OSError as exc:
            raise GlobError(f"failed to glob {pattern!r} under {str(self.root)!r}: {exc}") from exc

    def register(self, declaration: Declaration) -> None:
        add_declaration(self.graph, declaration)
        logger.debug("registered %s %s", declaration.kind, declaration.name)
