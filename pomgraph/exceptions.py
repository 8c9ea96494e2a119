"""Custom exceptions for pomgraph."""

from __future__ import annotations

from pathlib import Path


class PomGraphError(Exception):
    """Base exception for all pomgraph errors."""


class TargetUnresolvableError(PomGraphError):
    """Raised when a build target is neither an existing path nor readable."""

    def __init__(self, build_target: str, message: str | None = None):
        self.build_target = build_target
        super().__init__(message or f"manifest file for {build_target!r} cannot be read")


class ModuleIdentifierUnsupportedError(TargetUnresolvableError):
    """Raised when a build target looks like ``groupId:artifactId``.

    There is no module-to-path index, so such a target can never be mapped
    to a POM file.
    """

    def __init__(self, build_target: str):
        super().__init__(
            build_target, f"cannot identify POM file for module {build_target!r}"
        )


class ManifestReadError(PomGraphError):
    """Raised when a resolved manifest cannot be opened or decoded."""

    def __init__(self, path: Path | str, cause: BaseException):
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"could not read manifest {self.path}: {cause}")


class DecodeError(PomGraphError):
    """Raised by a deserializer when input is not well-formed for its format."""
