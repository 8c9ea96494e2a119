"""Turn a build target string into the path of its ``pom.xml``."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import structlog

from pomgraph.exceptions import ModuleIdentifierUnsupportedError, TargetUnresolvableError

log = structlog.get_logger("pomgraph.maven")

MANIFEST_FILENAME = "pom.xml"


def resolve_build_target(build_target: str) -> Path:
    """Return the manifest path *build_target* points at.

    A directory is assumed to hold a conventionally named ``pom.xml``; any
    other existing path is taken as the manifest itself.  Nothing is opened.

    Raises :class:`ModuleIdentifierUnsupportedError` when a missing target
    contains exactly one colon (it looks like ``groupId:artifactId``), and
    :class:`TargetUnresolvableError` for any other missing target.
    """
    try:
        st = os.stat(build_target)
    except (OSError, ValueError) as exc:
        # Known limitation: any missing string with one colon lands here,
        # including drive-letter paths such as "C:missing".
        if build_target.count(":") == 1:
            raise ModuleIdentifierUnsupportedError(build_target) from exc
        raise TargetUnresolvableError(build_target) from exc

    if stat.S_ISDIR(st.st_mode):
        pom_file = Path(build_target) / MANIFEST_FILENAME
        log.debug("resolver.directory_target", target=build_target, manifest=str(pom_file))
        return pom_file

    log.debug("resolver.file_target", target=build_target)
    return Path(build_target)
