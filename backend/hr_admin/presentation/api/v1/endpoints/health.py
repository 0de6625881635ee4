"""Console liveness: which HR backend it talks to and which screens it serves."""

from fastapi import APIRouter

from hr_admin.application.services.resource_catalog import build_catalog
from hr_admin.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    settings = get_settings()
    return {
        "status": "ok",
        "backend": settings.api_base_url,
        "screens": sorted(build_catalog()),
        "environment": settings.app_env,
    }
