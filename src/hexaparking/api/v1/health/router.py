"""Health route registration, mounted at the application root."""

from fastapi import APIRouter

from hexaparking.api.v1.health.api import router as health_api_router

router = APIRouter(tags=["Health"])
router.include_router(health_api_router)
