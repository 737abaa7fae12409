"""Domain models for hoist."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

Resource = dict[str, Any]


class ResourceKind(StrEnum):
    """Resource categories a chart may carry.

    Declaration order is deployment order: everything a later category
    refers to is created first.
    """

    NAMESPACE = "Namespace"
    SECRET = "Secret"
    PERSISTENT_VOLUME = "PersistentVolume"
    SERVICE = "Service"
    POD = "Pod"
    REPLICATION_CONTROLLER = "ReplicationController"


class Maintainer(BaseModel):
    """A chart maintainer entry."""

    model_config = ConfigDict(extra="allow")

    name: str
    email: str | None = None


class ChartMetadata(BaseModel):
    """Parsed Chart.yaml."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(description="Chart name.")
    version: str | None = Field(default=None, description="Chart version.")
    description: str | None = None
    keywords: list[str] = Field(default_factory=list)
    maintainers: list[Maintainer] = Field(default_factory=list)
    details: str | None = None


@dataclass
class Chart:
    """A chart loaded from disk, with its resources grouped by kind."""

    name: str
    path: Path
    metadata: ChartMetadata
    namespaces: list[Resource] = field(default_factory=list)
    secrets: list[Resource] = field(default_factory=list)
    persistent_volumes: list[Resource] = field(default_factory=list)
    services: list[Resource] = field(default_factory=list)
    pods: list[Resource] = field(default_factory=list)
    replication_controllers: list[Resource] = field(default_factory=list)

    def resources(self, kind: ResourceKind) -> list[Resource]:
        """Return the sequence that holds resources of ``kind``."""
        return {
            ResourceKind.NAMESPACE: self.namespaces,
            ResourceKind.SECRET: self.secrets,
            ResourceKind.PERSISTENT_VOLUME: self.persistent_volumes,
            ResourceKind.SERVICE: self.services,
            ResourceKind.POD: self.pods,
            ResourceKind.REPLICATION_CONTROLLER: self.replication_controllers,
        }[kind]

    def add(self, kind: ResourceKind, resource: Resource) -> None:
        self.resources(kind).append(resource)

    def in_order(self) -> Iterator[tuple[ResourceKind, Resource]]:
        """Yield every resource in deployment order."""
        for kind in ResourceKind:
            for resource in self.resources(kind):
                yield kind, resource

    def __len__(self) -> int:
        return sum(len(self.resources(kind)) for kind in ResourceKind)

    def __repr__(self) -> str:
        return f"Chart(name={self.name}, resources={len(self)})"


def describe_resource(kind: ResourceKind, resource: Resource) -> str:
    """Human-readable label such as ``Service/web``."""
    metadata = resource.get("metadata")
    name = metadata.get("name") if isinstance(metadata, dict) else None
    return f"{kind.value}/{name or '<unnamed>'}"
