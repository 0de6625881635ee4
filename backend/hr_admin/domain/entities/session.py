"""Domain entities for the authenticated operator session."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class Role(str, Enum):
    ADMIN = "ADMIN"
    STORE = "STORE"
    FINANCE = "FINANCE"
    HR = "HR"
    DATA_MANAGER = "DATA_MANAGER"
    EMPLOYEE = "EMPLOYEE"


# Checked in order; the first granted role decides the landing page.
_LANDING_PAGES: tuple[tuple[Role, str], ...] = (
    (Role.ADMIN, "/admin"),
    (Role.STORE, "/store"),
    (Role.FINANCE, "/finance-manager/dashboard"),
    (Role.HR, "/hr"),
    (Role.DATA_MANAGER, "/data-manager"),
    (Role.EMPLOYEE, "/employee"),
)
DEFAULT_LANDING_PAGE = "/dashboard"

REGISTRABLE_ROLES = (Role.ADMIN, Role.HR, Role.FINANCE, Role.STORE, Role.DATA_MANAGER)


def landing_page_for(roles: list[str]) -> str:
    """Pick the role-specific landing page for a set of granted roles."""
    granted = set(roles)
    for role, page in _LANDING_PAGES:
        if role.value in granted:
            return page
    return DEFAULT_LANDING_PAGE


@dataclass(frozen=True)
class AuthSession:
    """State stored after a successful login. Immutable once created."""

    email: str
    roles: tuple[str, ...]
    token: str | None = None
    employee_id: str | None = None
    employee_profile: dict[str, Any] = field(default_factory=dict)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def landing_page(self) -> str:
        return landing_page_for(list(self.roles))
