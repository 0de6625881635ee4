"""Session service — login, registration and the process-wide operator session."""

import logging
import re
from typing import Any

from hr_admin.application.interfaces import AuthGateway
from hr_admin.application.services.notification_center import NotificationCenter
from hr_admin.domain.entities import REGISTRABLE_ROLES, AuthSession, Role
from hr_admin.domain.exceptions import (
    AuthenticationError,
    FetchError,
    UnexpectedResponseError,
    ValidationError,
)
from hr_admin.infrastructure.logging.sync_logger import SyncLogger, SyncStage

logger = logging.getLogger(__name__)

slog = SyncLogger("SessionService")

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)
MIN_PASSWORD_LENGTH = 8

_PASSWORD_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"[A-Z]"), "an uppercase letter"),
    (re.compile(r"[a-z]"), "a lowercase letter"),
    (re.compile(r"[0-9]"), "a number"),
    (re.compile(r"[!@#$%^&*]"), "a special character"),
)


def password_strength_errors(password: str) -> list[str]:
    """List every unmet password requirement, in display order."""
    missing: list[str] = []
    if len(password) < MIN_PASSWORD_LENGTH:
        missing.append(f"at least {MIN_PASSWORD_LENGTH} characters")
    for pattern, requirement in _PASSWORD_RULES:
        if not pattern.search(password):
            missing.append(requirement)
    return missing


def validate_login_form(email: str, password: str) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not email:
        errors["email"] = "Email is required"
    elif not EMAIL_PATTERN.match(email):
        errors["email"] = "Invalid email address"
    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
    return errors


def _non_json_login_message(status_code: int) -> str:
    if status_code == 401:
        return "Invalid email or password."
    if status_code == 404:
        return "Login service not found."
    if status_code >= 500:
        return "Server error. Try again later."
    return "Login failed. Please check your credentials."


class SessionStore:
    """Holds at most one authenticated session for the running console.

    Only :class:`SessionService` writes to it; everything else reads.
    """

    def __init__(self) -> None:
        self._current: AuthSession | None = None

    @property
    def current(self) -> AuthSession | None:
        return self._current

    @property
    def token(self) -> str | None:
        return self._current.token if self._current else None

    @property
    def is_authenticated(self) -> bool:
        return self._current is not None

    def establish(self, session: AuthSession) -> None:
        self._current = session

    def clear(self) -> None:
        self._current = None


class SessionService:
    """Orchestrates authentication. Depends on the auth gateway port (DI)."""

    def __init__(
        self,
        gateway: AuthGateway,
        store: SessionStore,
        notifications: NotificationCenter,
    ):
        self._gateway = gateway
        self._store = store
        self._notifications = notifications

    @property
    def store(self) -> SessionStore:
        return self._store

    async def login(self, email: str, password: str, *, as_employee: bool = False) -> AuthSession:
        """Authenticate and populate the session; any failure clears it."""
        errors = validate_login_form(email, password)
        if errors:
            raise ValidationError("Please correct the login form", errors=errors)

        try:
            with slog.timed_step(SyncStage.AUTH, "Logging in", employee=as_employee):
                reply = await self._gateway.login(email, password, as_employee=as_employee)
        except FetchError as exc:
            self._fail(exc.message)

        if not reply.is_json:
            message = _non_json_login_message(reply.status_code)
            self._store.clear()
            self._notifications.error(message, source="session")
            raise UnexpectedResponseError(reply.status_code, message)

        data: dict[str, Any] = reply.data or {}
        if not reply.ok:
            self._fail(data.get("message") or "Login failed.", reply.status_code)

        if as_employee:
            if "employeeId" not in data:
                self._fail("Invalid employee login response.")
            session = AuthSession(
                email=email,
                roles=(Role.EMPLOYEE.value,),
                employee_id=str(data["employeeId"]),
                employee_profile=data,
            )
            welcome = "Employee login successful!"
        else:
            if "token" not in data or "roles" not in data:
                self._fail("Invalid login response. Please try again.")
            session = AuthSession(
                email=email,
                roles=tuple(str(role) for role in data["roles"]),
                token=str(data["token"]),
            )
            welcome = "Login successful!"

        self._store.establish(session)
        self._notifications.success(welcome, source="session")
        logger.info("Session established for %s (roles=%s)", email, ",".join(session.roles))
        return session

    def _fail(self, message: str, status_code: int | None = None) -> None:
        self._store.clear()
        self._notifications.error(message, source="session")
        raise AuthenticationError(message, status_code)

    def logout(self) -> None:
        self._store.clear()
        self._notifications.info("Logged out", source="session")

    async def register(self, name: str, email: str, password: str, roles: list[str]) -> str:
        """Create an account. Returns the success message; the session is not touched."""
        errors: dict[str, str] = {}
        if not name.strip():
            errors["name"] = "Name is required"
        if not EMAIL_PATTERN.match(email or ""):
            errors["email"] = "Invalid email address"
        missing = password_strength_errors(password)
        if missing:
            errors["password"] = "Password needs " + ", ".join(missing)
        allowed = {role.value for role in REGISTRABLE_ROLES}
        if not roles:
            errors["roles"] = "Please select at least one role"
        elif any(role not in allowed for role in roles):
            errors["roles"] = "Unknown role selected"
        if errors:
            message = "Please fix password requirements" if "password" in errors else next(iter(errors.values()))
            self._notifications.error(message, source="session")
            raise ValidationError(message, errors=errors)

        payload = {"name": name, "email": email, "password": password, "roles": list(roles)}
        try:
            with slog.timed_step(SyncStage.AUTH, "Registering account"):
                reply = await self._gateway.register(payload)
        except FetchError as exc:
            message = "Network or server error. Please try again."
            self._notifications.error(message, source="session")
            raise AuthenticationError(message) from exc

        if not reply.is_json:
            message = "Invalid response from server."
            self._notifications.error(message, source="session")
            raise UnexpectedResponseError(reply.status_code, message)
        if not reply.ok:
            message = (reply.data or {}).get("message") or "Registration failed. Please try again."
            self._notifications.error(message, source="session")
            raise AuthenticationError(message, reply.status_code)

        message = "Account created successfully! Please log in."
        self._notifications.success(message, source="session")
        return message
