"""Health check endpoint."""

from fastapi import APIRouter, Depends

from app.application.services import UmkmStore
from app.config import get_settings
from app.infrastructure.dependencies import get_umkm_store

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(store: UmkmStore = Depends(get_umkm_store)) -> dict:
    """Returns the current application health status and the store's backend."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "storage_backend": store.backend.value,
    }
