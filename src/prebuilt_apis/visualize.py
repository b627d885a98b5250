"""Rich rendering utilities for generated declarations."""

from __future__ import annotations

from rich.table import Table
from rich.tree import Tree

from prebuilt_apis.models import GenerationReport, ImportDeclaration


def build_declaration_tree(report: GenerationReport) -> Tree:
    """Build a Rich Tree of the declarations grouped by kind.

    Args:
        report: Result of a generation pass.

    Returns:
        A Rich Tree object for rendering.
    """
    root = Tree(f"[bold]{report.module}[/bold]")
    if not report.declarations:
        root.add("[dim]No declarations generated[/dim]")
        return root

    branches: dict[str, Tree] = {}
    for decl in report.declarations:
        branch = branches.get(decl.kind)
        if branch is None:
            branch = branches[decl.kind] = root.add(decl.kind)
        paths = decl.jars if isinstance(decl, ImportDeclaration) else decl.srcs
        branch.add(f"{decl.name} [dim]{', '.join(paths)}[/dim]")
    return root


def build_latest_table(report: GenerationReport) -> Table:
    table = Table(title=f"Latest API files ({report.module})")
    table.add_column("Filegroup")
    table.add_column("Path", style="dim")
    for name, path in sorted(report.latest().items()):
        table.add_row(name, path)
    return table
