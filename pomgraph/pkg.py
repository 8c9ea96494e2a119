"""Package identifiers shared with the surrounding analysis tooling."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class PackageType(str, Enum):
    MAVEN = "mvn"


@dataclass(frozen=True)
class PackageID:
    """Identifies one package revision; hashable so it can key a graph."""

    type: PackageType
    name: str
    revision: str = ""

    def __str__(self) -> str:
        # Locator form, e.g. mvn+org.slf4j:slf4j-api$2.0.9
        return f"{self.type.value}+{self.name}${self.revision}"


@dataclass(frozen=True)
class Import:
    """A reference from the analysed project to a package."""

    target: str  # what the manifest asked for, e.g. "groupId:artifactId"
    resolved: PackageID


@dataclass
class Package:
    id: PackageID
    imports: list[Import] = field(default_factory=list)
