"""Shared fixtures: in-memory fakes of the backend ports."""

from typing import Any

import pytest

from hr_admin.application.interfaces import (
    AuthGateway,
    AuthReply,
    DownloadedFile,
    ResourceBackend,
    ResourceEndpoint,
)
from hr_admin.application.services import NotificationCenter
from hr_admin.domain.entities import Attachment
from hr_admin.domain.exceptions import ConsoleError

_ECHO = object()


class FakeResourceBackend(ResourceBackend):
    """In-memory fake backend keyed by collection path.

    Set ``error`` to make every following call raise it. Set ``reply`` to
    override what create/update return (default: echo the stored record).
    """

    def __init__(self):
        self.collections: dict[str, list[Any]] = {}
        self.calls: list[tuple[Any, ...]] = []
        self.error: ConsoleError | None = None
        self.reply: Any = _ECHO
        self.next_id = 100

    def _fail_if_configured(self) -> None:
        if self.error is not None:
            raise self.error

    async def fetch_all(self, endpoint: ResourceEndpoint) -> list[Any]:
        self.calls.append(("fetch_all", endpoint.collection_path))
        self._fail_if_configured()
        return [dict(r) if isinstance(r, dict) else r for r in self.collections.get(endpoint.collection_path, [])]

    async def create(
        self,
        endpoint: ResourceEndpoint,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
        path_params: dict[str, Any] | None = None,
    ) -> Any:
        self.calls.append(("create", endpoint.create_url(path_params or payload), payload, attachment))
        self._fail_if_configured()
        if self.reply is not _ECHO:
            return self.reply
        record = {**payload, "id": self.next_id}
        self.next_id += 1
        self.collections.setdefault(endpoint.collection_path, []).append(record)
        return record

    async def update(
        self,
        endpoint: ResourceEndpoint,
        entity_id: int | str,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
    ) -> Any:
        self.calls.append(("update", endpoint.item_url(entity_id), payload, attachment))
        self._fail_if_configured()
        if self.reply is not _ECHO:
            return self.reply
        record = {**payload, "id": entity_id}
        stored = self.collections.setdefault(endpoint.collection_path, [])
        self.collections[endpoint.collection_path] = [
            record if str(r.get("id")) == str(entity_id) else r for r in stored
        ]
        return record

    async def delete(self, endpoint: ResourceEndpoint, entity_id: int | str) -> None:
        self.calls.append(("delete", endpoint.item_url(entity_id)))
        self._fail_if_configured()
        stored = self.collections.get(endpoint.collection_path, [])
        self.collections[endpoint.collection_path] = [
            r for r in stored if str(r.get("id")) != str(entity_id)
        ]

    async def download(
        self, endpoint: ResourceEndpoint, path_params: dict[str, Any], filename: str
    ) -> DownloadedFile:
        self.calls.append(("download", endpoint.download_path.format(**path_params)))
        self._fail_if_configured()
        return DownloadedFile(filename=filename, content=b"%PDF-1.4", content_type="application/pdf")

    def mutating_calls(self) -> list[tuple[Any, ...]]:
        return [c for c in self.calls if c[0] != "fetch_all"]


class FakeAuthGateway(AuthGateway):
    """Returns canned replies and records what was posted."""

    def __init__(self, reply: AuthReply | None = None):
        self.reply = reply or AuthReply(200, {"token": "tok-123", "roles": ["HR"]})
        self.error: ConsoleError | None = None
        self.calls: list[tuple[Any, ...]] = []

    async def login(self, email: str, password: str, *, as_employee: bool = False) -> AuthReply:
        self.calls.append(("login", email, as_employee))
        if self.error is not None:
            raise self.error
        return self.reply

    async def register(self, payload: dict[str, Any]) -> AuthReply:
        self.calls.append(("register", payload))
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def fake_backend() -> FakeResourceBackend:
    return FakeResourceBackend()


@pytest.fixture
def fake_auth() -> FakeAuthGateway:
    return FakeAuthGateway()


@pytest.fixture
def notifications() -> NotificationCenter:
    return NotificationCenter()
