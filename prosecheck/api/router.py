"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from prosecheck.api.documents import router as documents_router
from prosecheck.api.health import router as health_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Document validation
api_router.include_router(documents_router, tags=["Documents"])
