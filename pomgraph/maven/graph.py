"""Build a :class:`Deps` graph from a manifest's declared dependencies."""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from pomgraph.graph import Deps
from pomgraph.maven.loader import resolve_manifest_from_build_target
from pomgraph.maven.models import Dependency, Manifest
from pomgraph.pkg import Import, Package, PackageID, PackageType

log = structlog.get_logger("pomgraph.maven")


def package_id(dep: Dependency) -> PackageID:
    return PackageID(type=PackageType.MAVEN, name=dep.id, revision=dep.version)


def deps_to_imports(deps: Iterable[Dependency]) -> list[Import]:
    """One import per dependency, keeping order and duplicates."""
    return [Import(target=dep.id, resolved=package_id(dep)) for dep in deps]


def build_graph(manifest: Manifest) -> Deps:
    """Return every declared dependency as both direct and transitive.

    A lone POM does not say what depends on what, so ``transitive`` is the
    declared set keyed by package id.  Entries with the same
    ``groupId:artifactId`` and version collapse into one.
    """
    deps = Deps(direct=deps_to_imports(manifest.dependencies))
    for dep in manifest.dependencies:
        pack = Package(id=package_id(dep))
        deps.transitive[pack.id] = pack

    log.debug(
        "graph.built",
        project=manifest.id,
        direct=len(deps.direct),
        transitive=len(deps.transitive),
    )
    return deps


def graph_from_target(build_target: str) -> Deps:
    """Resolve, read and graph the manifest *build_target* points at."""
    return build_graph(resolve_manifest_from_build_target(build_target))
