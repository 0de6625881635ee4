"""Screen endpoints — list view, form/view modal, delete, export and document extras."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Request, UploadFile, status
from fastapi.responses import JSONResponse, Response

from hr_admin.application.schemas.screen import (
    CategoryCountsResponse,
    DeleteResponse,
    ModalStateResponse,
    OpenModalRequest,
    ScreenStateResponse,
    ScreenSummary,
    SetFieldsRequest,
    SubmitResponse,
)
from hr_admin.application.services import ConsoleWorkspace, DocumentScreen, ResourceScreen
from hr_admin.application.services.resource_catalog import DOCUMENTS
from hr_admin.config import get_settings
from hr_admin.domain.entities import Attachment
from hr_admin.domain.exceptions import ConsoleError
from hr_admin.infrastructure.dependencies import get_screen, get_workspace
from hr_admin.presentation.api.v1.errors import http_error

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/screens", tags=["Screens"])


# ── Catalog ──────────────────────────────────────────────────────────


@router.get("", response_model=list[ScreenSummary])
async def list_screens(
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> list[ScreenSummary]:
    """Every resource screen with its field descriptors and facets."""
    return [ScreenSummary.from_definition(d) for d in workspace.catalog.values()]


# ── HR documents ─────────────────────────────────────────────────────


def _document_screen(workspace: ConsoleWorkspace) -> DocumentScreen:
    screen = workspace.screen(DOCUMENTS)
    if not isinstance(screen, DocumentScreen):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Document screen not available")
    return screen


@router.get("/documents/categories", response_model=CategoryCountsResponse)
async def document_categories(
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> CategoryCountsResponse:
    """Document count per category, plus the total."""
    return CategoryCountsResponse(counts=_document_screen(workspace).category_counts())


@router.get("/documents/entities/{entity_id}/download")
async def download_document(
    entity_id: str,
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> Response:
    """Stream a stored document back from the backend."""
    screen = _document_screen(workspace)
    try:
        downloaded = await screen.download(entity_id)
    except ConsoleError as e:
        raise http_error(e)
    if downloaded is None:
        raise http_error(screen.last_failure or ConsoleError("Failed to download document"))
    return Response(
        content=downloaded.content,
        media_type=downloaded.content_type,
        headers={"Content-Disposition": f'attachment; filename="{downloaded.filename}"'},
    )


# ── List view ────────────────────────────────────────────────────────


@router.post("/{resource}/activate", response_model=ScreenStateResponse)
async def activate_screen(
    resource: str,
    workspace: ConsoleWorkspace = Depends(get_workspace),
) -> ScreenStateResponse:
    """Open the screen afresh and run the loader.

    A failed load is reported in the ``error`` field, not as an HTTP error.
    """
    try:
        screen = await workspace.activate(resource)
    except ConsoleError as e:
        raise http_error(e)
    return ScreenStateResponse.from_screen(screen)


@router.get("/{resource}", response_model=ScreenStateResponse)
async def view_screen(
    request: Request,
    q: str | None = Query(None, description="Free-text search"),
    screen: ResourceScreen = Depends(get_screen),
) -> ScreenStateResponse:
    """Filter/Search view. Facets are passed as query params named after the facet."""
    facets = {
        facet.name: request.query_params[facet.name]
        for facet in screen.definition.facets
        if facet.name in request.query_params
    }
    screen.set_filter(query=q, facets=facets)
    return ScreenStateResponse.from_screen(screen)


@router.get("/{resource}/export.csv")
async def export_screen(
    resource: str,
    screen: ResourceScreen = Depends(get_screen),
) -> Response:
    """CSV of the currently visible rows."""
    return Response(
        content=screen.export_csv(),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{resource}.csv"'},
    )


@router.delete("/{resource}/entities/{entity_id}", response_model=DeleteResponse)
async def delete_entity(
    entity_id: str,
    confirm: bool = Query(False, description="Explicit confirmation of the delete"),
    screen: ResourceScreen = Depends(get_screen),
) -> DeleteResponse:
    """Delete after confirmation; without ``confirm=true`` answers 409 with the prompt."""
    try:
        deleted = await screen.delete(entity_id, confirmed=confirm)
    except ConsoleError as e:
        raise http_error(e)
    if not deleted:
        raise http_error(screen.last_failure or ConsoleError("Delete failed"))
    return DeleteResponse(deleted=True)


# ── Modal ────────────────────────────────────────────────────────────


@router.get("/{resource}/modal", response_model=ModalStateResponse)
async def get_modal(
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    return ModalStateResponse.from_modal(screen.modal)


@router.post("/{resource}/modal", response_model=ModalStateResponse)
async def open_modal(
    data: OpenModalRequest,
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    """Open the modal in Add, Edit or View mode."""
    try:
        screen.modal.open(data.mode, data.entity_id)
    except ConsoleError as e:
        raise http_error(e)
    return ModalStateResponse.from_modal(screen.modal)


@router.delete("/{resource}/modal", response_model=ModalStateResponse)
async def close_modal(
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    screen.modal.close()
    return ModalStateResponse.from_modal(screen.modal)


@router.patch("/{resource}/modal/fields", response_model=ModalStateResponse)
async def set_modal_fields(
    data: SetFieldsRequest,
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    try:
        screen.modal.set_fields(data.values)
    except ConsoleError as e:
        raise http_error(e)
    return ModalStateResponse.from_modal(screen.modal)


@router.put("/{resource}/modal/attachment", response_model=ModalStateResponse)
async def attach_file(
    file: UploadFile,
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    """Attach a file to the open form; it is read fully into memory."""
    settings = get_settings()
    content = await file.read()
    if len(content) > settings.max_upload_size_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"File exceeds the {settings.max_upload_size_mb} MB limit",
        )
    attachment = Attachment(
        filename=file.filename or "upload",
        content=content,
        content_type=file.content_type or "application/octet-stream",
    )
    try:
        screen.modal.attach(attachment)
    except ConsoleError as e:
        raise http_error(e)
    return ModalStateResponse.from_modal(screen.modal)


@router.post("/{resource}/modal/secret", response_model=ModalStateResponse)
async def toggle_secret(
    screen: ResourceScreen = Depends(get_screen),
) -> ModalStateResponse:
    """Reveal or re-mask secret fields."""
    try:
        screen.modal.toggle_secret()
    except ConsoleError as e:
        raise http_error(e)
    return ModalStateResponse.from_modal(screen.modal)


@router.post("/{resource}/modal/submit", response_model=SubmitResponse)
async def submit_modal(
    screen: ResourceScreen = Depends(get_screen),
):
    """Submit the Add/Edit form.

    A rejected submit keeps the modal open; the body still describes it and
    the status tells validation (422) from backend failure (502) apart.
    """
    try:
        ok = await screen.modal.submit()
    except ConsoleError as e:
        raise http_error(e)
    body = SubmitResponse(ok=ok, modal=ModalStateResponse.from_modal(screen.modal))
    if ok:
        return body
    code = status.HTTP_422_UNPROCESSABLE_ENTITY if screen.modal.field_errors else status.HTTP_502_BAD_GATEWAY
    return JSONResponse(status_code=code, content=body.model_dump(mode="json"))
