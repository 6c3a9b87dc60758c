"""JSON:API resource types and response rendering.

``Resource`` is the serializable capability, independent of
``store.Document``: an entity exposes its links, its relationships and
the resources it sideloads, and :func:`render` turns it into a response
document.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class ResourceIdentifier:
    """Reference to a resource without embedding it."""

    id: str
    type: str

    def to_dict(self) -> dict[str, str]:
        return {"id": self.id, "type": self.type}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResourceIdentifier:
        return cls(id=data.get("id", ""), type=data.get("type", ""))


@dataclass(slots=True)
class LinksList:
    """Links of a resource or relationship."""

    self_link: str = ""
    related: str = ""

    def to_dict(self) -> dict[str, str]:
        out = {}
        if self.self_link:
            out["self"] = self.self_link
        if self.related:
            out["related"] = self.related
        return out


@dataclass(slots=True)
class Relationship:
    """A named link from a resource to one or many others."""

    data: list[ResourceIdentifier] = field(default_factory=list)
    links: LinksList | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"data": [d.to_dict() for d in self.data]}
        if self.links is not None:
            out["links"] = self.links.to_dict()
        return out


RelationshipMap = dict[str, Relationship]


@runtime_checkable
class Resource(Protocol):
    """An entity that can be rendered as a JSON:API resource object."""

    id: str
    rev: str

    @property
    def doc_type(self) -> str: ...

    def attributes(self) -> dict[str, Any]: ...

    def links(self) -> LinksList: ...

    def relationships(self) -> RelationshipMap: ...

    def included(self) -> list[Resource]: ...


def resource_object(obj: Resource) -> dict[str, Any]:
    """Render *obj* as a resource object (no sideloads)."""
    out: dict[str, Any] = {
        "type": obj.doc_type,
        "id": obj.id,
        "attributes": obj.attributes(),
        "meta": {"rev": obj.rev},
    }
    links = obj.links().to_dict()
    if links:
        out["links"] = links
    relationships = obj.relationships()
    if relationships:
        out["relationships"] = {name: rel.to_dict() for name, rel in relationships.items()}
    return out


def render(obj: Resource) -> dict[str, Any]:
    """Render *obj* as a full response document.

    ``included`` holds the sideloaded resources in order and is omitted
    when there are none.
    """
    doc: dict[str, Any] = {"data": resource_object(obj)}
    included = obj.included()
    if included:
        doc["included"] = [resource_object(r) for r in included]
    return doc
