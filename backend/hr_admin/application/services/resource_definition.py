"""Resource definition — everything that distinguishes one list-editor screen from another."""

from dataclasses import dataclass
from typing import Generic, TypeVar

from hr_admin.application.interfaces import ResourceEndpoint
from hr_admin.application.schemas.base import EntityCodec
from hr_admin.domain.entities import Facet, FieldSet

E = TypeVar("E")


@dataclass(frozen=True, eq=False)
class ResourceDefinition(Generic[E]):
    """Schema instance for one resource type.

    ``searchable`` lists entity attributes covered by free-text search.
    ``announce_success`` makes confirmed mutations emit a success toast.
    """

    name: str
    title: str
    entity_label: str
    endpoint: ResourceEndpoint
    fields: FieldSet
    codec: EntityCodec[E]
    searchable: tuple[str, ...] = ()
    facets: tuple[Facet, ...] = ()
    announce_success: bool = False
    delete_prompt: str = "Are you sure you want to delete this record?"

    @property
    def supports_update(self) -> bool:
        return self.endpoint.supports_update

    def facet(self, name: str) -> Facet | None:
        return next((f for f in self.facets if f.name == name), None)
