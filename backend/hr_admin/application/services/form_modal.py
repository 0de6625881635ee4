"""Form/View modal — the Add / Edit / View state machine in front of the Mutation Gateway."""

import logging
from enum import Enum
from typing import Any, Generic, TypeVar

from hr_admin.application.services.entity_list_editor import EntityListEditor
from hr_admin.application.services.notification_center import NotificationCenter
from hr_admin.domain.entities import Attachment
from hr_admin.domain.exceptions import ConsoleError, ModalStateError, ValidationError

logger = logging.getLogger(__name__)

E = TypeVar("E")

SECRET_MASK = "••••••••"


class ModalMode(str, Enum):
    ADD = "add"
    EDIT = "edit"
    VIEW = "view"


class FormModal(Generic[E]):
    """One modal per screen.

    Transitions:
        closed → ADD | EDIT | VIEW        (open_*)
        ADD | EDIT → closed               (submit succeeded, or close)
        ADD | EDIT → ADD | EDIT           (submit failed; fields kept, error shown)
        VIEW → closed                     (close only)
    """

    def __init__(self, editor: EntityListEditor[E], notifications: NotificationCenter):
        self._editor = editor
        self._notifications = notifications
        self._reset()

    def _reset(self) -> None:
        self.mode: ModalMode | None = None
        self.entity_id: int | str | None = None
        self.values: dict[str, Any] = {}
        self.attachment: Attachment | None = None
        self.error: str | None = None
        self.field_errors: dict[str, str] = {}
        self.secret_revealed = False

    @property
    def is_open(self) -> bool:
        return self.mode is not None

    @property
    def read_only(self) -> bool:
        return self.mode is ModalMode.VIEW

    @property
    def title(self) -> str:
        label = self._editor.definition.entity_label
        if self.mode is ModalMode.ADD:
            return f"Add New {label}"
        if self.mode is ModalMode.EDIT:
            return f"Edit {label}"
        if self.mode is ModalMode.VIEW:
            return f"{label} Details"
        return ""

    # ── Opening ──────────────────────────────────────────────────────

    def open_add(self) -> None:
        self._reset()
        self.mode = ModalMode.ADD
        self.values = self._editor.definition.fields.blank_values()

    def open_edit(self, entity_id: int | str) -> None:
        if not self._editor.definition.supports_update:
            raise ModalStateError(f"{self._editor.definition.entity_label} records cannot be edited")
        entity = self._editor.get(entity_id)
        self._reset()
        self.mode = ModalMode.EDIT
        self.entity_id = entity_id
        self.values = self._editor.definition.codec.to_values(entity)

    def open_view(self, entity_id: int | str) -> None:
        entity = self._editor.get(entity_id)
        self._reset()
        self.mode = ModalMode.VIEW
        self.entity_id = entity_id
        self.values = self._editor.definition.codec.to_values(entity)

    def open(self, mode: ModalMode, entity_id: int | str | None = None) -> None:
        if mode is ModalMode.ADD:
            self.open_add()
            return
        if entity_id is None:
            raise ModalStateError(f"An entity id is required to {mode.value} a record")
        if mode is ModalMode.EDIT:
            self.open_edit(entity_id)
        else:
            self.open_view(entity_id)

    def close(self) -> None:
        self._reset()

    # ── Editing ──────────────────────────────────────────────────────

    def _require_editable(self) -> None:
        if self.mode is None:
            raise ModalStateError("No form is open")
        if self.mode is ModalMode.VIEW:
            raise ModalStateError("View mode is read-only")

    def set_field(self, name: str, value: Any) -> None:
        self._require_editable()
        descriptor = self._editor.definition.fields.get(name)
        if descriptor is None or descriptor.is_attachment:
            raise ValidationError(f"Unknown field '{name}'", errors={name: "unknown field"})
        if descriptor.options and value not in descriptor.options and value != "":
            raise ValidationError(
                f"{descriptor.label} must be one of: {', '.join(descriptor.options)}",
                errors={name: "not an allowed option"},
            )
        self.values[name] = value
        self.field_errors.pop(name, None)

    def set_fields(self, values: dict[str, Any]) -> None:
        for name, value in values.items():
            self.set_field(name, value)

    def attach(self, attachment: Attachment) -> None:
        self._require_editable()
        if self._editor.definition.fields.attachment_field is None:
            raise ModalStateError(f"{self._editor.definition.entity_label} records take no attachment")
        self.attachment = attachment
        self.field_errors.pop(self._editor.definition.fields.attachment_field.name, None)

    def toggle_secret(self) -> bool:
        if self.mode is None:
            raise ModalStateError("No form is open")
        self.secret_revealed = not self.secret_revealed
        return self.secret_revealed

    def display_values(self) -> dict[str, Any]:
        """Values as rendered; secrets are masked in View mode until revealed."""
        shown = dict(self.values)
        if self.mode is ModalMode.VIEW and not self.secret_revealed:
            for descriptor in self._editor.definition.fields:
                if descriptor.secret and shown.get(descriptor.name):
                    shown[descriptor.name] = SECRET_MASK
        return shown

    # ── Submission ───────────────────────────────────────────────────

    async def submit(self) -> bool:
        """Send the form through the Mutation Gateway.

        On success the modal closes and clears. On failure it stays open
        with every field intact, records the error and raises exactly one
        error notification.
        """
        self._require_editable()
        label = self._editor.definition.entity_label
        try:
            if self.mode is ModalMode.ADD:
                await self._editor.create(self.values, self.attachment)
                done = f"{label} added successfully!"
            else:
                await self._editor.update(self.entity_id, self.values, self.attachment)  # type: ignore[arg-type]
                done = f"{label} updated successfully!"
        except ConsoleError as exc:
            self.error = exc.message
            self.field_errors = dict(getattr(exc, "errors", {}) or {})
            self._notifications.error(exc.message, source=self._editor.definition.name)
            logger.info("Submit of %s form failed: %s", label, exc.message)
            return False

        if self._editor.definition.announce_success:
            self._notifications.success(done, source=self._editor.definition.name)
        self.close()
        return True
