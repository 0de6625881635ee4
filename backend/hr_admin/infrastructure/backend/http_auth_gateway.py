"""Auth backend client — implements the AuthGateway interface over httpx."""

import logging
from typing import Any

import httpx

from hr_admin.application.interfaces import AuthGateway, AuthReply
from hr_admin.domain.exceptions import FetchError

logger = logging.getLogger(__name__)

STAFF_LOGIN_PATH = "/api/auth/login"
EMPLOYEE_LOGIN_PATH = "/api/employees/login"
REGISTER_PATH = "/api/auth/register"


class HttpAuthGateway(AuthGateway):
    """Posts credentials and returns the raw status plus the JSON body, if any.

    Interpreting the reply is left to the session service.
    """

    def __init__(
        self,
        base_url: str,
        http_client: httpx.AsyncClient | None = None,
        timeout: float | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._http_client = http_client
        self._timeout = timeout

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        if self._timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self._timeout)

    async def login(self, email: str, password: str, *, as_employee: bool = False) -> AuthReply:
        path = EMPLOYEE_LOGIN_PATH if as_employee else STAFF_LOGIN_PATH
        return await self._post(path, {"email": email, "password": password})

    async def register(self, payload: dict[str, Any]) -> AuthReply:
        return await self._post(REGISTER_PATH, payload)

    async def _post(self, path: str, payload: dict[str, Any]) -> AuthReply:
        client = await self._get_client()
        should_close = self._http_client is None
        url = f"{self._base_url}{path}"

        try:
            response = await client.post(url, json=payload, headers={"Accept": "application/json"})
        except httpx.HTTPError as exc:
            logger.warning("POST %s failed: %s", url, exc)
            raise FetchError(None, f"Network error: {exc}") from exc
        finally:
            if should_close:
                await client.aclose()

        return AuthReply(status_code=response.status_code, data=self._json_body(response))

    @staticmethod
    def _json_body(response: httpx.Response) -> dict[str, Any] | None:
        """The body as a JSON object, or ``None`` when it is not one."""
        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            return None
        try:
            data = response.json()
        except ValueError:
            return None
        return data if isinstance(data, dict) else None
