"""Typer CLI entry point for prebuilt-apis."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from prebuilt_apis.config import PrebuiltApisConfig
from prebuilt_apis.exceptions import PrebuiltApisError
from prebuilt_apis.generator import generate
from prebuilt_apis.host import GraphBuildHost
from prebuilt_apis.models import GenerationReport
from prebuilt_apis.visualize import build_declaration_tree, build_latest_table
from prebuilt_apis.visualize_html import export_pyvis

app = typer.Typer(add_completion=False, help="Generate build declarations for prebuilt SDK stubs and API files.")
console = Console()

RootArg = Annotated[
    Optional[Path],
    typer.Argument(help="Host root directory (default: $PREBUILT_APIS_ROOT or '.')."),
]
DirOpt = Annotated[Optional[str], typer.Option("--dir", help="Module directory relative to ROOT.")]
NameOpt = Annotated[Optional[str], typer.Option("--name", help="Meta-module name.")]
VerboseOpt = Annotated[bool, typer.Option("--verbose", "-v", help="Log debug output.")]


def _load_config(root: Path | None, module_dir: str | None, name: str | None, verbose: bool) -> PrebuiltApisConfig:
    config = PrebuiltApisConfig.from_env()
    if root is not None:
        config.root = root.resolve()
    if module_dir is not None:
        config.dir = module_dir
    if name is not None:
        config.name = name
    if verbose:
        config.log_level = "DEBUG"
    config.validate()

    logging.basicConfig(
        level=config.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
    return config


def _run(config: PrebuiltApisConfig) -> tuple[GraphBuildHost, GenerationReport]:
    host = GraphBuildHost(config.root)
    report = generate(host, config.module())
    return host, report


def _print_diagnostics(report: GenerationReport) -> None:
    for diag in report.diagnostics:
        console.print(f"[bold red]Error:[/bold red] {diag.label()}")


@app.command("generate")
def generate_cmd(
    root: RootArg = None,
    module_dir: DirOpt = None,
    name: NameOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the report as JSON.")] = False,
    verbose: VerboseOpt = False,
) -> None:
    """Scan a prebuilt_apis directory and print the generated declarations."""
    try:
        config = _load_config(root, module_dir, name, verbose)
        _, report = _run(config)

        if as_json:
            console.print_json(report.model_dump_json())
        else:
            console.print(build_declaration_tree(report))
        _print_diagnostics(report)
        if report.diagnostics:
            raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except (PrebuiltApisError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command()
def latest(
    root: RootArg = None,
    module_dir: DirOpt = None,
    name: NameOpt = None,
    verbose: VerboseOpt = False,
) -> None:
    """Show which API file each `<module>.api.<scope>.latest` points at."""
    try:
        config = _load_config(root, module_dir, name, verbose)
        _, report = _run(config)
        console.print(build_latest_table(report))
        _print_diagnostics(report)
        if report.diagnostics:
            raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except (PrebuiltApisError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


@app.command()
def html(
    root: RootArg = None,
    module_dir: DirOpt = None,
    name: NameOpt = None,
    out: Annotated[Path, typer.Option("--out", help="Output HTML file path.")] = Path("prebuilt_apis.html"),
    verbose: VerboseOpt = False,
) -> None:
    """Export the generated build graph as interactive HTML (Pyvis)."""
    try:
        config = _load_config(root, module_dir, name, verbose)
        host, report = _run(config)
        _print_diagnostics(report)
        out_path = export_pyvis(host.graph, out)
        console.print(f"[green]Wrote[/green] {out_path}")
        if report.diagnostics:
            raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except (PrebuiltApisError, ValueError) as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        raise typer.Exit(code=1) from None


def main() -> None:
    """Console-script entry point."""
    app()
