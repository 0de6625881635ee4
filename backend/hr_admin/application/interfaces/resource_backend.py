"""Abstract backend interface (port) for resource collections — implemented in the infrastructure layer."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hr_admin.domain.entities import Attachment


class PayloadStyle(str, Enum):
    """How a create/update request body is encoded."""

    JSON = "json"
    # multipart: one JSON part holding the entity plus an optional file part
    MULTIPART_ENTITY = "multipart_entity"
    # multipart: a single file part, entity fields go into the URL
    UPLOAD = "upload"


class ReconcileMode(str, Enum):
    """How the in-memory list catches up after a confirmed mutation."""

    LOCAL = "local"
    RELOAD = "reload"


@dataclass(frozen=True)
class ResourceEndpoint:
    """Endpoint configuration for one resource collection.

    Path templates use ``str.format`` placeholders. ``create_path`` and
    ``download_path`` may reference entity fields by their wire names.
    """

    collection_path: str
    payload_style: PayloadStyle = PayloadStyle.JSON
    item_path: str | None = None
    create_path: str | None = None
    download_path: str | None = None
    entity_part: str = "entity"
    attachment_part: str = "file"
    supports_update: bool = True
    reconcile: ReconcileMode = ReconcileMode.LOCAL

    def item_url(self, entity_id: int | str) -> str:
        template = self.item_path or self.collection_path + "/{id}"
        return template.format(id=entity_id)

    def create_url(self, params: dict[str, Any]) -> str:
        if self.create_path is None:
            return self.collection_path
        return self.create_path.format(**params)


@dataclass(frozen=True)
class DownloadedFile:
    """A binary blob fetched from the backend."""

    filename: str
    content: bytes
    content_type: str


class ResourceBackend(ABC):
    """Port for the remote REST collaborator that owns persistence."""

    @abstractmethod
    async def fetch_all(self, endpoint: ResourceEndpoint) -> list[Any]:
        """Return the raw, undecoded records of the collection.

        Raises ``FetchError`` on network failure or non-2xx, and
        ``UnexpectedResponseError`` when the body is not a JSON array.
        """
        ...

    @abstractmethod
    async def create(
        self,
        endpoint: ResourceEndpoint,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
        path_params: dict[str, Any] | None = None,
    ) -> Any:
        """Create an entity and return the backend's decoded JSON reply (or None)."""
        ...

    @abstractmethod
    async def update(
        self,
        endpoint: ResourceEndpoint,
        entity_id: int | str,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
    ) -> Any:
        """Replace an entity by id and return the decoded JSON reply (or None)."""
        ...

    @abstractmethod
    async def delete(self, endpoint: ResourceEndpoint, entity_id: int | str) -> None:
        """Delete an entity by id. Raises ``MutationError`` on failure."""
        ...

    @abstractmethod
    async def download(
        self, endpoint: ResourceEndpoint, path_params: dict[str, Any], filename: str
    ) -> DownloadedFile:
        """Fetch an attached binary."""
        ...
