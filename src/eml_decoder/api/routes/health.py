"""
Health check endpoint - liveness plus the decoder build being served.
"""

import time
from fastapi import APIRouter

from ...models.api_models import HealthResponse
from ...version import API_VERSION, get_current_decoder_version

router = APIRouter()

_started_at = time.monotonic()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Report liveness, uptime and the decoder version answering requests.

    Returns:
        HealthResponse
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        decoder_version=get_current_decoder_version().decoder_version,
        uptime_seconds=time.monotonic() - _started_at,
    )
