"""Pydantic DTOs for the screen endpoints: catalog, list view and modal state."""

import dataclasses
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from hr_admin.application.services.form_modal import FormModal, ModalMode
from hr_admin.application.services.resource_definition import ResourceDefinition
from hr_admin.application.services.resource_screen import ResourceScreen
from hr_admin.domain.entities import FieldKind


# ── Catalog ──────────────────────────────────────────────────────────


class FieldDescriptorSchema(BaseModel):
    name: str
    label: str
    kind: FieldKind
    required: bool
    options: list[str]
    default: str
    secret: bool


class FacetSchema(BaseModel):
    name: str
    label: str
    options: list[str]


class ScreenSummary(BaseModel):
    """One entry of ``GET /screens``."""

    name: str
    title: str
    entity_label: str
    supports_update: bool
    searchable: list[str]
    fields: list[FieldDescriptorSchema]
    facets: list[FacetSchema]

    @classmethod
    def from_definition(cls, definition: ResourceDefinition[Any]) -> "ScreenSummary":
        return cls(
            name=definition.name,
            title=definition.title,
            entity_label=definition.entity_label,
            supports_update=definition.supports_update,
            searchable=list(definition.searchable),
            fields=[
                FieldDescriptorSchema(
                    name=f.name,
                    label=f.label,
                    kind=f.kind,
                    required=f.required,
                    options=list(f.options),
                    default=f.default,
                    secret=f.secret,
                )
                for f in definition.fields
            ],
            facets=[
                FacetSchema(name=f.name, label=f.label, options=list(f.options))
                for f in definition.facets
            ],
        )


# ── List view ────────────────────────────────────────────────────────


def serialize_entity(entity: Any, screen: ResourceScreen[Any]) -> dict[str, Any]:
    """Entity as JSON-ready dict; server-relative ``*_url`` paths become absolute."""
    data = dataclasses.asdict(entity)
    for key, value in data.items():
        if isinstance(value, Enum):
            data[key] = value.value
        elif key.endswith("_url") and isinstance(value, str):
            data[key] = screen.attachment_url(value)
    return data


class ScreenStateResponse(BaseModel):
    """Filter/Search View over a screen's loaded list."""

    name: str
    title: str
    loaded: bool
    loading: bool
    error: str | None
    query: str
    facets: dict[str, str]
    facet_choices: dict[str, list[str]]
    total: int
    entities: list[dict[str, Any]]

    @classmethod
    def from_screen(cls, screen: ResourceScreen[Any]) -> "ScreenStateResponse":
        return cls(
            name=screen.name,
            title=screen.definition.title,
            loaded=screen.editor.loaded,
            loading=screen.loading,
            error=screen.error,
            query=screen.query,
            facets=dict(screen.facets),
            facet_choices=screen.facet_choices(),
            total=len(screen.editor.entities),
            entities=[serialize_entity(e, screen) for e in screen.visible()],
        )


# ── Modal ────────────────────────────────────────────────────────────


class OpenModalRequest(BaseModel):
    mode: ModalMode
    entity_id: str | None = None


class SetFieldsRequest(BaseModel):
    values: dict[str, Any] = Field(..., examples=[{"employee_name": "Alice"}])


class ModalStateResponse(BaseModel):
    open: bool
    mode: ModalMode | None
    title: str
    entity_id: str | None
    read_only: bool
    values: dict[str, Any]
    attachment: str | None
    error: str | None
    field_errors: dict[str, str]
    secret_revealed: bool

    @classmethod
    def from_modal(cls, modal: FormModal[Any]) -> "ModalStateResponse":
        return cls(
            open=modal.is_open,
            mode=modal.mode,
            title=modal.title,
            entity_id=None if modal.entity_id is None else str(modal.entity_id),
            read_only=modal.read_only,
            values=modal.display_values(),
            attachment=modal.attachment.filename if modal.attachment else None,
            error=modal.error,
            field_errors=dict(modal.field_errors),
            secret_revealed=modal.secret_revealed,
        )


class SubmitResponse(BaseModel):
    ok: bool
    modal: ModalStateResponse


class DeleteResponse(BaseModel):
    deleted: bool


class CategoryCountsResponse(BaseModel):
    counts: dict[str, int]
