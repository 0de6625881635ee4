"""Abstract interface (port) for the backend's authentication endpoints."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AuthReply:
    """Raw outcome of an auth request.

    ``data`` is ``None`` when the response was not JSON.
    """

    status_code: int
    data: dict[str, Any] | None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def is_json(self) -> bool:
        return self.data is not None


class AuthGateway(ABC):
    """Port for login and registration — implemented in the infrastructure layer."""

    @abstractmethod
    async def login(self, email: str, password: str, *, as_employee: bool = False) -> AuthReply:
        """POST credentials to the staff or employee login endpoint."""
        ...

    @abstractmethod
    async def register(self, payload: dict[str, Any]) -> AuthReply:
        """POST a new account (name, email, password, roles)."""
        ...
