"""Maven POM support: resolve a build target and graph its declared dependencies."""

from pomgraph.maven.graph import build_graph, graph_from_target
from pomgraph.maven.loader import read_manifest, resolve_manifest_from_build_target
from pomgraph.maven.models import Coordinate, Dependency, Manifest, Parent
from pomgraph.maven.resolver import MANIFEST_FILENAME, resolve_build_target

__all__ = [
    "MANIFEST_FILENAME",
    "Coordinate",
    "Dependency",
    "Manifest",
    "Parent",
    "build_graph",
    "graph_from_target",
    "read_manifest",
    "resolve_build_target",
    "resolve_manifest_from_build_target",
]
