"""Application service for one screen's entity list: the Loader and the Mutation Gateway.

The in-memory list only ever holds confirmed backend state. Every mutation
awaits the backend first and reconciles afterwards; nothing is applied in
anticipation of a reply, and a failed call leaves the list untouched.
"""

import logging
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from hr_admin.application.interfaces import ReconcileMode, ResourceBackend
from hr_admin.application.services.resource_definition import ResourceDefinition
from hr_admin.domain.entities import Attachment
from hr_admin.domain.exceptions import (
    ConfirmationRequiredError,
    EntityNotFoundError,
    FetchError,
    ModalStateError,
    MutationError,
    NotFoundError,
    UnexpectedResponseError,
    ValidationError,
)
from hr_admin.infrastructure.logging.sync_logger import SyncLogger, SyncStage

logger = logging.getLogger(__name__)

slog = SyncLogger("EntityListEditor")

E = TypeVar("E")


def _same_id(left: int | str, right: int | str) -> bool:
    return str(left) == str(right)


class EntityListEditor(Generic[E]):
    """Loads, holds and mutates the entity list of one resource.

    Depends on the backend port (DI); the resource definition supplies
    endpoints, field descriptors and the wire codec.
    """

    def __init__(self, definition: ResourceDefinition[E], backend: ResourceBackend):
        self._definition = definition
        self._backend = backend
        self._entities: list[E] = []
        self._loaded = False

    @property
    def definition(self) -> ResourceDefinition[E]:
        return self._definition

    @property
    def backend(self) -> ResourceBackend:
        return self._backend

    @property
    def entities(self) -> list[E]:
        """A copy of the current list; callers cannot mutate the editor's state."""
        return list(self._entities)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, entity_id: int | str) -> E:
        for entity in self._entities:
            if _same_id(entity.id, entity_id):  # type: ignore[attr-defined]
                return entity
        raise EntityNotFoundError(self._definition.entity_label, entity_id)

    # ── Loader ───────────────────────────────────────────────────────

    async def load(self) -> list[E]:
        """Fetch the whole collection and replace the in-memory list.

        Raises ``FetchError`` / ``UnexpectedResponseError``; on failure the
        previous list is kept as-is.
        """
        endpoint = self._definition.endpoint
        with slog.timed_step(SyncStage.LOAD, f"Loading {self._definition.name}", path=endpoint.collection_path):
            raw_records = await self._backend.fetch_all(endpoint)

        entities = self._decode_collection(raw_records)
        self._entities = entities
        self._loaded = True
        slog.detail(f"{self._definition.name}: {len(entities)} record(s) loaded", received=len(raw_records))
        return list(entities)

    def _decode_collection(self, raw_records: list[Any]) -> list[E]:
        entities: list[E] = []
        seen: set[str] = set()
        for index, raw in enumerate(raw_records):
            try:
                entity = self._definition.codec.decode(raw)
            except PydanticValidationError as exc:
                slog.warning(
                    f"Dropping malformed {self._definition.entity_label} record",
                    index=index,
                    errors=exc.error_count(),
                )
                logger.debug("Rejected record %r: %s", raw, exc)
                continue
            key = str(entity.id)  # type: ignore[attr-defined]
            if key in seen:
                slog.warning(f"Dropping duplicate {self._definition.entity_label} id", id=key)
                continue
            seen.add(key)
            entities.append(entity)
        return entities

    # ── Mutation Gateway ─────────────────────────────────────────────

    def validate(self, values: dict[str, Any], attachment: Attachment | None = None) -> None:
        """Block submission when any required field is empty."""
        errors: dict[str, str] = {}
        for descriptor in self._definition.fields:
            if not descriptor.required:
                continue
            if descriptor.is_attachment:
                if attachment is None or not attachment.content:
                    errors[descriptor.name] = f"{descriptor.label} is required"
                continue
            value = values.get(descriptor.name)
            if value is None or (isinstance(value, str) and not value.strip()):
                errors[descriptor.name] = f"{descriptor.label} is required"
        if errors:
            raise ValidationError("Please fill in all required fields", errors=errors)

    async def create(self, values: dict[str, Any], attachment: Attachment | None = None) -> E | None:
        """Create an entity; the list changes only after the backend confirms.

        Returns the created entity, or ``None`` when the resource reconciles
        by reloading (the backend does not echo the record).
        """
        self.validate(values, attachment)
        payload = self._definition.codec.encode(values)
        endpoint = self._definition.endpoint
        stage = SyncStage.UPLOAD if attachment is not None else SyncStage.CREATE

        with slog.timed_step(stage, f"Creating {self._definition.entity_label}"):
            reply = await self._backend.create(endpoint, payload, attachment, path_params=payload)

        if endpoint.reconcile is ReconcileMode.RELOAD:
            await self._reload_after_mutation()
            return None

        created = await self._decode_reply(reply)
        if created is None:
            return None
        self._put(created)
        return created

    async def update(
        self,
        entity_id: int | str,
        values: dict[str, Any],
        attachment: Attachment | None = None,
    ) -> E | None:
        """Replace an entity by id with the complete field set."""
        if not self._definition.supports_update:
            raise ModalStateError(f"{self._definition.entity_label} records cannot be edited")
        self.get(entity_id)
        self.validate(values, attachment)
        payload = self._definition.codec.encode(values, entity_id)
        endpoint = self._definition.endpoint

        try:
            with slog.timed_step(SyncStage.UPDATE, f"Updating {self._definition.entity_label}", id=entity_id):
                reply = await self._backend.update(endpoint, entity_id, payload, attachment)
        except MutationError as exc:
            if isinstance(exc, NotFoundError):
                raise
            raise NotFoundError(exc.status_code, exc.message) from exc

        if endpoint.reconcile is ReconcileMode.RELOAD:
            await self._reload_after_mutation()
            return None

        updated = await self._decode_reply(reply)
        if updated is None:
            return None
        self._replace(entity_id, updated)
        return updated

    async def delete(self, entity_id: int | str, *, confirmed: bool = False) -> None:
        """Delete an entity after explicit confirmation; removal follows the backend's OK."""
        entity = self.get(entity_id)
        if not confirmed:
            raise ConfirmationRequiredError(self.delete_prompt(entity))
        endpoint = self._definition.endpoint

        with slog.timed_step(SyncStage.DELETE, f"Deleting {self._definition.entity_label}", id=entity_id):
            await self._backend.delete(endpoint, entity_id)

        self._entities = [e for e in self._entities if not _same_id(e.id, entity_id)]  # type: ignore[attr-defined]
        if endpoint.reconcile is ReconcileMode.RELOAD:
            await self._reload_after_mutation()

    def delete_prompt(self, entity: E) -> str:
        return self._definition.delete_prompt.format(**self._definition.codec.to_values(entity))

    # ── Reconciliation ───────────────────────────────────────────────

    async def _decode_reply(self, reply: Any) -> E | None:
        """Decode the backend's echoed entity; reload when it cannot be used."""
        try:
            return self._definition.codec.decode(reply)
        except PydanticValidationError as exc:
            slog.warning(
                f"{self._definition.entity_label} reply is not a full record; reloading",
                errors=exc.error_count(),
            )
            await self._reload_after_mutation()
            return None

    async def _reload_after_mutation(self) -> None:
        """Re-fetch after a confirmed write.

        The write already succeeded, so a failed re-fetch only leaves the list
        stale; it is logged and not reported as a failed mutation.
        """
        try:
            with slog.timed_step(SyncStage.RECONCILE, f"Re-fetching {self._definition.name}"):
                await self.load()
        except (FetchError, UnexpectedResponseError) as exc:
            slog.warning(f"{self._definition.name} list may be stale after a confirmed write", error=exc.message)

    def _put(self, entity: E) -> None:
        entity_id = entity.id  # type: ignore[attr-defined]
        for index, existing in enumerate(self._entities):
            if _same_id(existing.id, entity_id):  # type: ignore[attr-defined]
                self._entities = [*self._entities[:index], entity, *self._entities[index + 1:]]
                return
        self._entities = [*self._entities, entity]

    def _replace(self, entity_id: int | str, entity: E) -> None:
        for index, existing in enumerate(self._entities):
            if _same_id(existing.id, entity_id):  # type: ignore[attr-defined]
                self._entities = [*self._entities[:index], entity, *self._entities[index + 1:]]
                return
        # Removed by a concurrently confirmed delete; do not resurrect it.
        logger.info("%s %s vanished before its update resolved", self._definition.entity_label, entity_id)

    def __repr__(self) -> str:
        return f"EntityListEditor({self._definition.name!r}, {len(self._entities)} entities)"

