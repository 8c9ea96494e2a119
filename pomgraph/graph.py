"""The dependency graph record handed to downstream consumers."""

from __future__ import annotations

from dataclasses import dataclass, field

from pomgraph.pkg import Import, Package, PackageID


@dataclass
class Deps:
    """Direct imports plus a package mapping keyed by :class:`PackageID`.

    Builders that only see declarations (e.g. a single POM) cannot know what
    depends on what. They put every declared package in ``transitive`` as
    well, with empty ``imports``: the mapping then holds the full declared
    set and carries no depth information.
    """

    direct: list[Import] = field(default_factory=list)
    transitive: dict[PackageID, Package] = field(default_factory=dict)
