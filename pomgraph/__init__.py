"""pomgraph: declared dependency graphs from Maven build targets."""

__version__ = "0.1.0"

from pomgraph.core.logging import configure_library_logging
from pomgraph.exceptions import (
    DecodeError,
    ManifestReadError,
    ModuleIdentifierUnsupportedError,
    PomGraphError,
    TargetUnresolvableError,
)
from pomgraph.graph import Deps
from pomgraph.maven import (
    Dependency,
    Manifest,
    build_graph,
    graph_from_target,
    resolve_build_target,
    resolve_manifest_from_build_target,
)
from pomgraph.pkg import Import, Package, PackageID, PackageType

__all__ = [
    "DecodeError",
    "Dependency",
    "Deps",
    "Import",
    "Manifest",
    "ManifestReadError",
    "ModuleIdentifierUnsupportedError",
    "Package",
    "PackageID",
    "PackageType",
    "PomGraphError",
    "TargetUnresolvableError",
    "build_graph",
    "graph_from_target",
    "resolve_build_target",
    "resolve_manifest_from_build_target",
]

configure_library_logging()
