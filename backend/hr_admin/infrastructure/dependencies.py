"""FastAPI dependency injection — wires infrastructure to the application layer."""

import httpx
from fastapi import Depends, HTTPException, Request, status

from hr_admin.application.services import (
    ConsoleWorkspace,
    NotificationCenter,
    ResourceScreen,
    SessionService,
    SessionStore,
)
from hr_admin.config import Settings, get_settings
from hr_admin.domain.exceptions import UnknownResourceError
from hr_admin.infrastructure.backend import HttpAuthGateway, HttpResourceBackend


def build_workspace(
    settings: Settings,
    http_client: httpx.AsyncClient | None = None,
) -> ConsoleWorkspace:
    """Assemble the console with httpx adapters pointed at the configured backend."""
    session_store = SessionStore()
    return ConsoleWorkspace(
        backend=HttpResourceBackend(
            base_url=settings.api_base_url,
            http_client=http_client,
            session_store=session_store,
            timeout=settings.http_timeout_seconds,
        ),
        auth_gateway=HttpAuthGateway(
            base_url=settings.api_base_url,
            http_client=http_client,
            timeout=settings.http_timeout_seconds,
        ),
        base_url=settings.api_base_url,
        session_store=session_store,
    )


def get_workspace(request: Request) -> ConsoleWorkspace:
    """The single operator workspace held on the application state."""
    workspace: ConsoleWorkspace | None = getattr(request.app.state, "workspace", None)
    if workspace is None:
        workspace = build_workspace(get_settings())
        request.app.state.workspace = workspace
    return workspace


def get_session_service(
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> SessionService:
    return workspace.session


def get_notification_center(
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> NotificationCenter:
    return workspace.notifications


def get_screen(
    resource: str,
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> ResourceScreen:
    """The screen named by the ``{resource}`` path parameter."""
    try:
        return workspace.screen(resource)
    except UnknownResourceError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
