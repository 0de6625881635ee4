"""Screen controller — ties one editor, its modal, filter state and notifications together."""

import logging
from collections import Counter
from typing import Any, Generic, TypeVar

from hr_admin.application.interfaces import DownloadedFile, ResourceBackend
from hr_admin.application.services.csv_export import export_csv
from hr_admin.application.services.entity_list_editor import EntityListEditor, slog
from hr_admin.application.services.form_modal import FormModal
from hr_admin.application.services.notification_center import NotificationCenter
from hr_admin.application.services.record_filter import ALL, facet_options, filter_entities
from hr_admin.application.services.resource_definition import ResourceDefinition
from hr_admin.domain.entities import DocumentCategory, HrDocument
from hr_admin.domain.exceptions import (
    ConfirmationRequiredError,
    ConsoleError,
    EntityNotFoundError,
    FetchError,
    UnexpectedResponseError,
)
from hr_admin.infrastructure.logging.sync_logger import SyncStage

logger = logging.getLogger(__name__)

E = TypeVar("E")


class ResourceScreen(Generic[E]):
    """State for one management screen.

    A failed load keeps the previous list and surfaces an inline error;
    failed mutations surface a single error notification.
    """

    def __init__(
        self,
        definition: ResourceDefinition[E],
        backend: ResourceBackend,
        notifications: NotificationCenter,
        base_url: str = "",
    ):
        self.editor: EntityListEditor[E] = EntityListEditor(definition, backend)
        self.modal: FormModal[E] = FormModal(self.editor, notifications)
        self._notifications = notifications
        self._base_url = base_url.rstrip("/")
        self.query = ""
        self.facets: dict[str, str] = {facet.name: ALL for facet in definition.facets}
        self.error: str | None = None
        self.last_failure: ConsoleError | None = None
        self.loading = False

    @property
    def definition(self) -> ResourceDefinition[E]:
        return self.editor.definition

    @property
    def name(self) -> str:
        return self.editor.definition.name

    async def activate(self) -> bool:
        """Load the list when the screen becomes active. Returns ``True`` on success."""
        self.loading = True
        try:
            await self.editor.load()
        except (FetchError, UnexpectedResponseError) as exc:
            self.error = exc.message
            logger.warning("Loading %s failed: %s", self.name, exc.message)
            return False
        finally:
            self.loading = False
        self.error = None
        return True

    # ── Filtering ────────────────────────────────────────────────────

    def set_filter(self, query: str | None = None, facets: dict[str, str] | None = None) -> None:
        if query is not None:
            self.query = query
        for name, value in (facets or {}).items():
            if self.definition.facet(name) is None:
                continue
            self.facets[name] = value or ALL

    def visible(self) -> list[E]:
        """The entities that pass the current query and facet selections."""
        by_attribute: dict[str, str] = {}
        case_insensitive: list[str] = []
        for facet in self.definition.facets:
            by_attribute[facet.attribute] = self.facets.get(facet.name, ALL)
            if facet.case_insensitive:
                case_insensitive.append(facet.attribute)
        return filter_entities(
            self.editor.entities,
            self.query,
            by_attribute,
            searchable=self.definition.searchable,
            case_insensitive=case_insensitive,
        )

    def facet_choices(self) -> dict[str, list[str]]:
        choices: dict[str, list[str]] = {}
        for facet in self.definition.facets:
            if facet.options:
                choices[facet.name] = [ALL, *facet.options]
            else:
                choices[facet.name] = facet_options(self.editor.entities, facet.attribute)
        return choices

    # ── Actions ──────────────────────────────────────────────────────

    async def delete(self, entity_id: int | str, *, confirmed: bool = False) -> bool:
        """Delete through the editor.

        ``ConfirmationRequiredError`` propagates so the caller can prompt, and
        ``EntityNotFoundError`` when the id is not listed. Any other failure
        becomes one error notification, is kept as ``last_failure`` and
        yields ``False``.
        """
        try:
            await self.editor.delete(entity_id, confirmed=confirmed)
        except (ConfirmationRequiredError, EntityNotFoundError):
            raise
        except ConsoleError as exc:
            self.last_failure = exc
            self._notifications.error(exc.message, source=self.name)
            return False
        if self.definition.announce_success:
            self._notifications.success(
                f"{self.definition.entity_label} deleted successfully!", source=self.name
            )
        return True

    def export_csv(self) -> str:
        return export_csv(self.visible(), self.definition.fields)

    def attachment_url(self, path: str | None) -> str | None:
        """Absolute URL for a backend-relative attachment path."""
        if not path:
            return None
        if path.startswith(("http://", "https://")):
            return path
        return f"{self._base_url}/{path.lstrip('/')}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class DocumentScreen(ResourceScreen[HrDocument]):
    """HR document screen: per-category counts and downloads."""

    def category_counts(self) -> dict[str, int]:
        """Document count per known category, plus the total under ``"all"``."""
        documents = self.editor.entities
        counts = Counter(doc.document_type.lower() for doc in documents)
        summary = {ALL: len(documents)}
        summary.update({category.value: counts.get(category.value, 0) for category in DocumentCategory})
        return summary

    async def download(self, entity_id: int | str) -> DownloadedFile | None:
        document = self.editor.get(entity_id)
        endpoint = self.definition.endpoint
        params: dict[str, Any] = {
            "employeeId": document.employee_id,
            "documentType": document.document_type.upper(),
        }
        try:
            with slog.timed_step(SyncStage.DOWNLOAD, "Downloading document", id=entity_id):
                return await self.editor.backend.download(endpoint, params, document.file_name)
        except ConsoleError as exc:
            self.last_failure = exc
            logger.warning("Download of document %s failed: %s", entity_id, exc.message)
            self._notifications.error("Failed to download document. Please try again.", source=self.name)
            return None
