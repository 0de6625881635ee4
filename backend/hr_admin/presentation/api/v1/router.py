"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from hr_admin.presentation.api.v1.endpoints.health import router as health_router
from hr_admin.presentation.api.v1.endpoints.notifications import router as notifications_router
from hr_admin.presentation.api.v1.endpoints.screens import router as screens_router
from hr_admin.presentation.api.v1.endpoints.session import router as session_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(session_router)
router.include_router(notifications_router)
router.include_router(screens_router)
