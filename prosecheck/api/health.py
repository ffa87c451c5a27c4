"""Health check endpoint."""

import time

from fastapi import APIRouter

from prosecheck.models.responses import HealthResponse
from prosecheck.services.engine_cache import engine_cache
from prosecheck.validators import VALIDATOR_CATALOG
from prosecheck.validators.messages import get_all_locales

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Report uptime and which language engines have been built so far."""
    return HealthResponse(
        status="healthy" if VALIDATOR_CATALOG else "degraded",
        uptime_seconds=round(time.time() - _start_time, 2),
        languages_loaded=sorted(engine_cache.keys()),
        locales_available=sorted(get_all_locales()),
        validators_available=len(VALIDATOR_CATALOG),
    )
