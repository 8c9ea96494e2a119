"""Data models for a Maven POM manifest."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field

from pomgraph.codec import Nested, NestedList, Schema, Text, TextList


@dataclass(frozen=True)
class Coordinate:
    """A ``groupId:artifactId:version`` triple."""

    group_id: str = ""
    artifact_id: str = ""
    version: str = ""

    @property
    def id(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    def __str__(self) -> str:
        return f"{self.id}:{self.version}"


@dataclass(frozen=True)
class Parent(Coordinate):
    """The ``<parent>`` an inheriting POM points at (never resolved here)."""


_COORDINATE_FIELDS = frozenset({"group_id", "artifact_id", "version", "scope"})


@dataclass
class Dependency:
    """One ``<dependency>`` declared by a manifest.

    Only ``failed`` may be reassigned; the declared fields are fixed once
    set, so ``id`` stays stable for consumers that deduplicate on it.
    """

    group_id: str
    artifact_id: str
    version: str = ""  # may be empty or a ${property} placeholder; kept as-is
    scope: str = ""  # "compile" | "test" | "runtime" | "provided" | ...

    # Outcome of a later resolution stage. Always False when decoded.
    failed: bool = field(default=False, compare=False)

    def __setattr__(self, name: str, value: object) -> None:
        if name in _COORDINATE_FIELDS and name in self.__dict__:
            raise FrozenInstanceError(f"cannot assign to field {name!r}")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> None:
        if name in _COORDINATE_FIELDS:
            raise FrozenInstanceError(f"cannot delete field {name!r}")
        super().__delattr__(name)

    @property
    def id(self) -> str:
        """The dependency identity, ``groupId:artifactId``."""
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.group_id, self.artifact_id, self.version)


@dataclass(frozen=True)
class Manifest:
    """The declared content of one ``pom.xml``.

    ``dependencies`` keeps source order and duplicates. ``parent`` and
    ``modules`` are informational: neither is followed.
    """

    parent: Parent = field(default_factory=Parent)
    modules: tuple[str, ...] = ()
    artifact_id: str = ""
    group_id: str = ""
    version: str = ""
    description: str = ""
    name: str = ""
    url: str = ""
    dependencies: tuple[Dependency, ...] = ()

    @property
    def id(self) -> str:
        return f"{self.group_id}:{self.artifact_id}"

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.group_id, self.artifact_id, self.version)


# ── POM schema ───────────────────────────────────────────────────────────

PARENT_FIELDS: Schema[Parent] = Schema(
    Parent,
    {
        "artifact_id": Text("artifactId"),
        "group_id": Text("groupId"),
        "version": Text("version"),
    },
)

DEPENDENCY_FIELDS: Schema[Dependency] = Schema(
    Dependency,
    {
        "group_id": Text("groupId"),
        "artifact_id": Text("artifactId"),
        "version": Text("version"),
        "scope": Text("scope"),
    },
)

MANIFEST_FIELDS: Schema[Manifest] = Schema(
    Manifest,
    {
        "parent": Nested("parent", PARENT_FIELDS),
        "modules": TextList("modules/module"),
        "artifact_id": Text("artifactId"),
        "group_id": Text("groupId"),
        "version": Text("version"),
        "description": Text("description"),
        "name": Text("name"),
        "url": Text("url"),
        "dependencies": NestedList("dependencies/dependency", DEPENDENCY_FIELDS),
    },
)
