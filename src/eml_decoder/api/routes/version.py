"""
Version information endpoint.
"""

from fastapi import APIRouter

from ...decoding.charsets import supported_charsets
from ...models.api_models import VersionResponse
from ...version import API_VERSION, get_current_decoder_version

router = APIRouter()


@router.get("/version", response_model=VersionResponse)
async def get_version() -> VersionResponse:
    """
    Get current API and decoder version information.

    Returns:
        Version information and the charsets the decoder transcodes
    """
    return VersionResponse(
        api_version=API_VERSION,
        decoder_version=get_current_decoder_version(),
        supported_charsets=supported_charsets(),
    )
