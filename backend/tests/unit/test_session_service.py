"""Unit tests for the SessionService and SessionStore."""

import pytest

from hr_admin.application.interfaces import AuthReply
from hr_admin.application.services import SessionService, SessionStore
from hr_admin.application.services.session_service import password_strength_errors, validate_login_form
from hr_admin.domain.entities import AuthSession, NotificationLevel, landing_page_for
from hr_admin.domain.exceptions import (
    AuthenticationError,
    FetchError,
    UnexpectedResponseError,
    ValidationError,
)


@pytest.fixture
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def service(fake_auth, store, notifications) -> SessionService:
    return SessionService(fake_auth, store, notifications)


# ── Form validation ──


def test_login_form_validation():
    assert validate_login_form("hr@example.com", "longenough") == {}
    assert set(validate_login_form("", "")) == {"email", "password"}
    assert validate_login_form("not-an-email", "longenough") == {"email": "Invalid email address"}
    assert "password" in validate_login_form("hr@example.com", "short")


def test_email_check_is_case_insensitive():
    assert validate_login_form("HR.Lead@Example.COM", "longenough") == {}


def test_password_strength_reports_every_violation():
    assert password_strength_errors("Str0ng!pass") == []
    assert password_strength_errors("abc") == [
        "at least 8 characters",
        "an uppercase letter",
        "a number",
        "a special character",
    ]


@pytest.mark.parametrize(
    "roles, page",
    [
        (["HR", "ADMIN"], "/admin"),
        (["FINANCE", "STORE"], "/store"),
        (["FINANCE"], "/finance-manager/dashboard"),
        (["HR"], "/hr"),
        (["DATA_MANAGER"], "/data-manager"),
        (["EMPLOYEE"], "/employee"),
        (["AUDITOR"], "/dashboard"),
        ([], "/dashboard"),
    ],
)
def test_landing_page_by_role(roles, page):
    assert landing_page_for(roles) == page


# ── Login ──


@pytest.mark.asyncio
async def test_login_populates_session(service: SessionService, store: SessionStore, notifications):
    session = await service.login("hr@example.com", "password123")

    assert store.current is session
    assert store.token == "tok-123"
    assert session.roles == ("HR",)
    assert session.landing_page == "/hr"
    [notice] = notifications.drain()
    assert notice.message == "Login successful!"


@pytest.mark.asyncio
async def test_invalid_form_makes_no_call(service: SessionService, fake_auth):
    with pytest.raises(ValidationError) as exc_info:
        await service.login("nope", "x")
    assert set(exc_info.value.errors) == {"email", "password"}
    assert fake_auth.calls == []


@pytest.mark.asyncio
async def test_employee_login(service: SessionService, fake_auth, store: SessionStore):
    fake_auth.reply = AuthReply(200, {"employeeId": "E007", "employeeName": "Alice"})

    session = await service.login("alice@example.com", "password123", as_employee=True)

    assert fake_auth.calls == [("login", "alice@example.com", True)]
    assert session.roles == ("EMPLOYEE",)
    assert session.employee_id == "E007"
    assert session.employee_profile["employeeName"] == "Alice"
    assert session.landing_page == "/employee"
    assert store.token is None


@pytest.mark.parametrize(
    "status_code, message",
    [
        (401, "Invalid email or password."),
        (404, "Login service not found."),
        (503, "Server error. Try again later."),
        (400, "Login failed. Please check your credentials."),
    ],
)
@pytest.mark.asyncio
async def test_non_json_login_reply(service, fake_auth, store, notifications, status_code, message):
    store.establish(AuthSession(email="old@example.com", roles=("HR",), token="old"))
    fake_auth.reply = AuthReply(status_code, None)

    with pytest.raises(UnexpectedResponseError) as exc_info:
        await service.login("hr@example.com", "password123")

    assert exc_info.value.message == message
    assert store.current is None
    assert [n.message for n in notifications.drain()] == [message]


@pytest.mark.asyncio
async def test_rejected_login_uses_server_message(service, fake_auth, store):
    fake_auth.reply = AuthReply(401, {"message": "Account locked"})
    with pytest.raises(AuthenticationError) as exc_info:
        await service.login("hr@example.com", "password123")
    assert exc_info.value.message == "Account locked"
    assert exc_info.value.status_code == 401
    assert store.current is None


@pytest.mark.asyncio
async def test_rejected_login_without_message(service, fake_auth):
    fake_auth.reply = AuthReply(403, {})
    with pytest.raises(AuthenticationError, match="Login failed."):
        await service.login("hr@example.com", "password123")


@pytest.mark.asyncio
async def test_malformed_success_reply(service, fake_auth, store):
    fake_auth.reply = AuthReply(200, {"token": "t"})
    with pytest.raises(AuthenticationError, match="Invalid login response. Please try again."):
        await service.login("hr@example.com", "password123")
    assert store.current is None


@pytest.mark.asyncio
async def test_malformed_employee_reply(service, fake_auth):
    fake_auth.reply = AuthReply(200, {"name": "no id"})
    with pytest.raises(AuthenticationError, match="Invalid employee login response."):
        await service.login("alice@example.com", "password123", as_employee=True)


@pytest.mark.asyncio
async def test_network_failure_clears_session(service, fake_auth, store, notifications):
    store.establish(AuthSession(email="old@example.com", roles=("HR",), token="old"))
    fake_auth.error = FetchError(None, "Network error: connection refused")
    with pytest.raises(AuthenticationError):
        await service.login("hr@example.com", "password123")
    assert store.current is None
    assert notifications.pending_count == 1


def test_logout_clears_session(service, store):
    store.establish(AuthSession(email="hr@example.com", roles=("HR",), token="t"))
    service.logout()
    assert store.current is None
    assert not store.is_authenticated


# ── Registration ──


@pytest.mark.asyncio
async def test_register_success(service, fake_auth, store, notifications):
    fake_auth.reply = AuthReply(201, {"id": 5})
    message = await service.register("Dana", "dana@example.com", "Str0ng!pass", ["HR", "FINANCE"])

    assert message == "Account created successfully! Please log in."
    assert fake_auth.calls == [(
        "register",
        {"name": "Dana", "email": "dana@example.com", "password": "Str0ng!pass", "roles": ["HR", "FINANCE"]},
    )]
    assert store.current is None
    assert notifications.drain()[0].level is NotificationLevel.SUCCESS


@pytest.mark.asyncio
async def test_register_weak_password_makes_no_call(service, fake_auth, notifications):
    with pytest.raises(ValidationError) as exc_info:
        await service.register("Dana", "dana@example.com", "weak", ["HR"])
    assert exc_info.value.message == "Please fix password requirements"
    assert "password" in exc_info.value.errors
    assert fake_auth.calls == []
    assert notifications.pending_count == 1


@pytest.mark.asyncio
async def test_register_requires_a_role(service, fake_auth):
    with pytest.raises(ValidationError, match="Please select at least one role"):
        await service.register("Dana", "dana@example.com", "Str0ng!pass", [])
    assert fake_auth.calls == []


@pytest.mark.asyncio
async def test_register_rejects_employee_role(service):
    with pytest.raises(ValidationError):
        await service.register("Dana", "dana@example.com", "Str0ng!pass", ["EMPLOYEE"])


@pytest.mark.asyncio
async def test_register_non_json_reply(service, fake_auth):
    fake_auth.reply = AuthReply(500, None)
    with pytest.raises(UnexpectedResponseError, match="Invalid response from server."):
        await service.register("Dana", "dana@example.com", "Str0ng!pass", ["HR"])


@pytest.mark.asyncio
async def test_register_rejected(service, fake_auth):
    fake_auth.reply = AuthReply(409, {})
    with pytest.raises(AuthenticationError, match="Registration failed. Please try again."):
        await service.register("Dana", "dana@example.com", "Str0ng!pass", ["HR"])
