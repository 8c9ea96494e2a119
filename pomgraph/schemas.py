"""JSON output schemas for the CLI."""

from __future__ import annotations

from pydantic import BaseModel

from pomgraph.graph import Deps
from pomgraph.maven.models import Dependency, Manifest
from pomgraph.pkg import Import, Package, PackageID


class PackageIDSchema(BaseModel):
    type: str
    name: str
    revision: str
    locator: str

    @classmethod
    def from_id(cls, pid: PackageID) -> PackageIDSchema:
        return cls(type=pid.type.value, name=pid.name, revision=pid.revision, locator=str(pid))


class ImportSchema(BaseModel):
    target: str
    resolved: PackageIDSchema

    @classmethod
    def from_import(cls, imp: Import) -> ImportSchema:
        return cls(target=imp.target, resolved=PackageIDSchema.from_id(imp.resolved))


class PackageSchema(BaseModel):
    id: PackageIDSchema
    imports: list[ImportSchema]

    @classmethod
    def from_package(cls, pack: Package) -> PackageSchema:
        return cls(
            id=PackageIDSchema.from_id(pack.id),
            imports=[ImportSchema.from_import(i) for i in pack.imports],
        )


class GraphResponse(BaseModel):
    """``transitive`` is a list because JSON object keys must be strings."""

    direct: list[ImportSchema]
    transitive: list[PackageSchema]

    @classmethod
    def from_deps(cls, deps: Deps) -> GraphResponse:
        return cls(
            direct=[ImportSchema.from_import(i) for i in deps.direct],
            transitive=[PackageSchema.from_package(p) for p in deps.transitive.values()],
        )


class CoordinateSchema(BaseModel):
    group_id: str
    artifact_id: str
    version: str


class DependencySchema(CoordinateSchema):
    scope: str

    @classmethod
    def from_dependency(cls, dep: Dependency) -> DependencySchema:
        return cls(
            group_id=dep.group_id,
            artifact_id=dep.artifact_id,
            version=dep.version,
            scope=dep.scope,
        )


class ManifestResponse(CoordinateSchema):
    name: str
    description: str
    url: str
    parent: CoordinateSchema | None
    modules: list[str]
    dependencies: list[DependencySchema]

    @classmethod
    def from_manifest(cls, pom: Manifest) -> ManifestResponse:
        parent = None
        if pom.parent.group_id or pom.parent.artifact_id:
            parent = CoordinateSchema(
                group_id=pom.parent.group_id,
                artifact_id=pom.parent.artifact_id,
                version=pom.parent.version,
            )
        return cls(
            group_id=pom.group_id,
            artifact_id=pom.artifact_id,
            version=pom.version,
            name=pom.name,
            description=pom.description,
            url=pom.url,
            parent=parent,
            modules=list(pom.modules),
            dependencies=[DependencySchema.from_dependency(d) for d in pom.dependencies],
        )
