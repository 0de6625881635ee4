"""REST backend client — implements the ResourceBackend interface.

Talks to the HR backend over httpx. Reads expect a JSON array, writes send
JSON or multipart bodies depending on the endpoint's payload style, and
downloads return raw bytes. Every failure is translated into the console's
error taxonomy; nothing is retried.
"""

import json
import logging
from typing import Any

import httpx

from hr_admin.application.interfaces import (
    DownloadedFile,
    PayloadStyle,
    ResourceBackend,
    ResourceEndpoint,
)
from hr_admin.application.services.session_service import SessionStore
from hr_admin.domain.entities import Attachment
from hr_admin.domain.exceptions import (
    FetchError,
    MutationError,
    NotFoundError,
    UnexpectedResponseError,
)

logger = logging.getLogger(__name__)


class HttpResourceBackend(ResourceBackend):
    """Infrastructure adapter — connects to the HR REST backend.

    An injected ``http_client`` is shared and left open; otherwise a client
    is created per request and closed afterwards. While the session store
    holds a token it is sent as a Bearer credential.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        session_store: SessionStore | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._session_store = session_store
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    def _get_headers(self) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        token = self._session_store.token if self._session_store is not None else None
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        if self._timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self._timeout)

    async def _send(self, method: str, path: str, error_type: type, **kwargs: Any) -> httpx.Response:
        """Issue one request; transport failures become ``error_type`` with no status."""
        client = await self._get_client()
        should_close = self._http_client is None
        url = self._url(path)
        try:
            logger.debug("%s %s", method, url)
            response = await client.request(method, url, headers=self._get_headers(), **kwargs)
            await response.aread()
            return response
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, url, exc)
            raise error_type(None, f"Network error: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

    # ── Reads ────────────────────────────────────────────────────────

    async def fetch_all(self, endpoint: ResourceEndpoint) -> list[Any]:
        response = await self._send("GET", endpoint.collection_path, FetchError)
        if not response.is_success:
            raise FetchError(
                response.status_code,
                self._error_message(response, f"HTTP error! status: {response.status_code}"),
            )
        data = self._parse_json(response)
        if not isinstance(data, list):
            raise UnexpectedResponseError(response.status_code)
        return data

    async def download(
        self, endpoint: ResourceEndpoint, path_params: dict[str, Any], filename: str
    ) -> DownloadedFile:
        if endpoint.download_path is None:
            raise FetchError(None, "This resource has no downloadable files")
        response = await self._send("GET", endpoint.download_path.format(**path_params), FetchError)
        if not response.is_success:
            raise FetchError(response.status_code, "Failed to download document")
        return DownloadedFile(
            filename=filename or self._filename_from_headers(response) or "download",
            content=response.content,
            content_type=response.headers.get("content-type", "application/octet-stream"),
        )

    # ── Writes ───────────────────────────────────────────────────────

    async def create(
        self,
        endpoint: ResourceEndpoint,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
        path_params: dict[str, Any] | None = None,
    ) -> Any:
        path = endpoint.create_url(path_params or payload)
        response = await self._send(
            "POST", path, MutationError, **self._build_body(endpoint, payload, attachment)
        )
        return self._mutation_reply(response, "Add failed")

    async def update(
        self,
        endpoint: ResourceEndpoint,
        entity_id: int | str,
        payload: dict[str, Any],
        attachment: Attachment | None = None,
    ) -> Any:
        response = await self._send(
            "PUT",
            endpoint.item_url(entity_id),
            MutationError,
            **self._build_body(endpoint, payload, attachment),
        )
        return self._mutation_reply(response, "Update failed")

    async def delete(self, endpoint: ResourceEndpoint, entity_id: int | str) -> None:
        response = await self._send("DELETE", endpoint.item_url(entity_id), MutationError)
        self._mutation_reply(response, "Delete failed")

    @staticmethod
    def _build_body(
        endpoint: ResourceEndpoint,
        payload: dict[str, Any],
        attachment: Attachment | None,
    ) -> dict[str, Any]:
        """Request keyword arguments for the endpoint's payload style."""
        if endpoint.payload_style is PayloadStyle.JSON:
            return {"json": payload}

        files: dict[str, tuple[str | None, bytes | str, str]] = {}
        if endpoint.payload_style is PayloadStyle.MULTIPART_ENTITY:
            files[endpoint.entity_part] = (None, json.dumps(payload), "application/json")
        if attachment is not None:
            files[endpoint.attachment_part] = (
                attachment.filename,
                attachment.content,
                attachment.content_type,
            )
        return {"files": files}

    def _mutation_reply(self, response: httpx.Response, fallback: str) -> Any:
        """Decoded JSON body of a successful write, or ``None`` when it has none."""
        if not response.is_success:
            message = self._error_message(response, f"{fallback} (HTTP {response.status_code})")
            if response.status_code == 404:
                raise NotFoundError(response.status_code, message)
            raise MutationError(response.status_code, message)
        if not response.content.strip():
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug("Non-JSON reply to write (status=%d)", response.status_code)
            return None

    # ── Response parsing ─────────────────────────────────────────────

    @staticmethod
    def _parse_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise UnexpectedResponseError(response.status_code) from exc

    @staticmethod
    def _error_message(response: httpx.Response, fallback: str) -> str:
        """Prefer the backend's own ``message`` field when the error body is JSON."""
        try:
            data = response.json()
        except ValueError:
            return fallback
        if isinstance(data, dict) and data.get("message"):
            return str(data["message"])
        return fallback

    @staticmethod
    def _filename_from_headers(response: httpx.Response) -> str | None:
        disposition = response.headers.get("content-disposition", "")
        for part in disposition.split(";"):
            key, _, value = part.strip().partition("=")
            if key.lower() == "filename" and value:
                return value.strip('"')
        return None
