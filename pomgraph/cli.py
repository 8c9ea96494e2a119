"""CLI entry point: pomgraph.

Usage:
    pomgraph path/to/project            # directory holding pom.xml
    pomgraph path/to/pom.xml --json     # graph as JSON
    pomgraph path/to/pom.xml --manifest # decoded manifest as JSON
"""

from __future__ import annotations

import sys

import click
import structlog

from pomgraph.core.logging import setup_logging
from pomgraph.exceptions import PomGraphError
from pomgraph.maven.graph import build_graph
from pomgraph.maven.loader import resolve_manifest_from_build_target
from pomgraph.schemas import GraphResponse, ManifestResponse

log = structlog.get_logger("pomgraph.cli")


@click.command()
@click.argument("target")
@click.option("--json", "as_json", is_flag=True, help="Print the graph as JSON")
@click.option("--manifest", "show_manifest", is_flag=True, help="Print the decoded manifest as JSON")
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(target: str, as_json: bool, show_manifest: bool, verbose: bool) -> None:
    """List the dependencies declared by the POM that TARGET points at.

    TARGET is a directory containing pom.xml or the path of a POM file.
    """
    setup_logging("DEBUG" if verbose else None)

    try:
        pom = resolve_manifest_from_build_target(target)
    except PomGraphError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if show_manifest:
        click.echo(ManifestResponse.from_manifest(pom).model_dump_json(indent=2))
        return

    deps = build_graph(pom)
    log.info("cli.graph_ready", target=target, direct=len(deps.direct))

    if as_json:
        click.echo(GraphResponse.from_deps(deps).model_dump_json(indent=2))
        return

    if not deps.direct:
        click.echo("No dependencies declared.")
        return

    for imp in deps.direct:
        version = imp.resolved.revision or "(no version)"
        click.echo(f"{imp.target} {version}")
    click.echo(f"\n{len(deps.direct)} declared, {len(deps.transitive)} unique")


if __name__ == "__main__":
    main()
