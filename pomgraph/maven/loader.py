"""Read a resolved ``pom.xml`` into a :class:`Manifest`."""

from __future__ import annotations

from pathlib import Path

import structlog

from pomgraph.codec import Deserializer, XMLDeserializer
from pomgraph.exceptions import DecodeError, ManifestReadError
from pomgraph.maven.models import MANIFEST_FIELDS, Manifest
from pomgraph.maven.resolver import resolve_build_target

log = structlog.get_logger("pomgraph.maven")


def read_manifest(path: Path, deserializer: Deserializer | None = None) -> Manifest:
    """Decode the POM at *path*.

    Any read or decode failure is raised as :class:`ManifestReadError`
    carrying *path*; field values are not validated.
    """
    deserializer = deserializer or XMLDeserializer()
    try:
        data = path.read_bytes()
        manifest = deserializer.decode(data, MANIFEST_FIELDS)
    except (OSError, DecodeError) as exc:
        log.debug("loader.read_failed", path=str(path), error=str(exc))
        raise ManifestReadError(path, exc) from exc

    log.debug(
        "loader.manifest_read",
        path=str(path),
        project=manifest.id,
        dependencies=len(manifest.dependencies),
    )
    return manifest


def resolve_manifest_from_build_target(build_target: str) -> Manifest:
    """Resolve *build_target* to a POM file and read it."""
    return read_manifest(resolve_build_target(build_target))
