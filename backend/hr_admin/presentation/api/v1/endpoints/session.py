"""Session endpoints — login, registration, logout and the current session."""

from fastapi import APIRouter, Depends, status

from hr_admin.application.schemas.auth import (
    LoginRequest,
    RegisterRequest,
    RegisterResponse,
    SessionResponse,
)
from hr_admin.application.services import SessionService
from hr_admin.domain.exceptions import ConsoleError
from hr_admin.infrastructure.dependencies import get_session_service
from hr_admin.presentation.api.v1.errors import http_error

router = APIRouter(prefix="/session", tags=["Session"])


@router.get("", response_model=SessionResponse | None)
async def get_session(
    service: SessionService = Depends(get_session_service),
) -> SessionResponse | None:
    """The authenticated session, or null when nobody is logged in."""
    session = service.store.current
    return SessionResponse.from_session(session) if session else None


@router.post("/login", response_model=SessionResponse)
async def login(
    data: LoginRequest,
    service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """Authenticate; the response carries the role-specific landing page."""
    try:
        session = await service.login(data.email, data.password, as_employee=data.as_employee)
    except ConsoleError as e:
        raise http_error(e)
    return SessionResponse.from_session(session)


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    service: SessionService = Depends(get_session_service),
) -> RegisterResponse:
    """Create a backend account. Does not log in."""
    try:
        message = await service.register(data.name, data.email, data.password, data.roles)
    except ConsoleError as e:
        raise http_error(e)
    return RegisterResponse(message=message)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    service: SessionService = Depends(get_session_service),
) -> None:
    """Clear the current session."""
    service.logout()
