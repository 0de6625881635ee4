"""Pydantic DTOs for the session endpoints."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from hr_admin.domain.entities import AuthSession, Notification, NotificationLevel


class LoginRequest(BaseModel):
    """Credentials for staff login, or employee login when ``as_employee`` is set."""

    email: str = Field(..., examples=["hr@example.com"])
    password: str
    as_employee: bool = False


class RegisterRequest(BaseModel):
    name: str
    email: str
    password: str
    roles: list[str] = Field(default_factory=list, examples=[["HR"]])


class RegisterResponse(BaseModel):
    message: str


class SessionResponse(BaseModel):
    """The authenticated session as exposed to the front end; the token stays server-side."""

    email: str
    roles: list[str]
    landing_page: str
    employee_id: str | None
    employee_profile: dict[str, Any]
    created_at: datetime

    @classmethod
    def from_session(cls, session: AuthSession) -> "SessionResponse":
        return cls(
            email=session.email,
            roles=list(session.roles),
            landing_page=session.landing_page,
            employee_id=session.employee_id,
            employee_profile=session.employee_profile,
            created_at=session.created_at,
        )


class NotificationResponse(BaseModel):
    level: NotificationLevel
    message: str
    source: str
    created_at: datetime

    model_config = {"from_attributes": True}

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls.model_validate(notification, from_attributes=True)
