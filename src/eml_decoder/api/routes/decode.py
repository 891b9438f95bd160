"""
Decode endpoint - runs an uploaded message through the decoder.
"""

import hashlib
import io
from typing import List

from fastapi import APIRouter, File, HTTPException, UploadFile
from starlette.concurrency import run_in_threadpool
import structlog

from ...config import settings
from ...decoder import Decoder
from ...errors import ContentDecodeError, EmlDecodeError
from ...models.api_models import AttachmentSummary, DecodedEmail, DecodeResponse
from ...models.email_content import Attachment

logger = structlog.get_logger(__name__)
router = APIRouter()


class AttachmentCollector:
    """Attachment callback that hashes and sizes content up to a count limit."""

    def __init__(self, limit: int):
        self.limit = limit
        self.attachments: List[AttachmentSummary] = []
        self.truncated = False

    def __call__(self, attachment: Attachment) -> None:
        if len(self.attachments) >= self.limit:
            self.truncated = True
            return

        digest = hashlib.sha256()
        size = 0
        error = None
        try:
            for chunk in iter(lambda: attachment.content.read(64 * 1024), b""):
                digest.update(chunk)
                size += len(chunk)
        except ContentDecodeError as e:
            logger.warning(
                "Attachment content could not be decoded",
                filename=attachment.filename,
                error=str(e),
            )
            error = str(e)

        self.attachments.append(
            AttachmentSummary(
                filename=attachment.filename,
                content_type=attachment.content_type,
                size_bytes=size,
                sha256=digest.hexdigest(),
                error=error,
            )
        )


def decode_message(eml_bytes: bytes, max_attachments: int) -> DecodedEmail:
    """
    Decode a message and summarize it for the API response.

    Args:
        eml_bytes: Raw message bytes
        max_attachments: Maximum number of attachments to report

    Returns:
        DecodedEmail summary
    """
    collector = AttachmentCollector(max_attachments)
    email = Decoder(io.BytesIO(eml_bytes), collector).decode()

    if collector.truncated:
        logger.warning("Too many attachments", limit=max_attachments)

    return DecodedEmail(
        subject=email.header("Subject"),
        from_address=email.header("From"),
        plain_text=email.plain_text,
        html=email.html,
        attachments=collector.attachments,
        attachments_truncated=collector.truncated,
    )


@router.post("/eml", response_model=DecodeResponse)
async def decode_eml_file(
    file: UploadFile = File(..., description=".eml file to decode"),
) -> DecodeResponse:
    """
    Decode an uploaded .eml file.

    Args:
        file: Uploaded .eml file

    Returns:
        DecodeResponse with the decoded bodies and attachment summaries, or error
    """
    if not file.filename or not file.filename.endswith(".eml"):
        raise HTTPException(status_code=400, detail="File must be .eml format")

    eml_bytes = await file.read()

    size_mb = len(eml_bytes) / (1024 * 1024)
    if size_mb > settings.max_email_size_mb:
        raise HTTPException(
            status_code=413,
            detail=f"File size ({size_mb:.1f}MB) exceeds maximum ({settings.max_email_size_mb}MB)"
        )

    logger.info("Decoding email", filename=file.filename, size_bytes=len(eml_bytes))

    try:
        result = await run_in_threadpool(decode_message, eml_bytes, settings.max_attachments)
    except EmlDecodeError as e:
        logger.warning("Email decoding failed", filename=file.filename, error=str(e))
        return DecodeResponse(success=False, error=f"Decoding failed: {e}")

    logger.info(
        "Email decoded",
        filename=file.filename,
        attachments_count=len(result.attachments),
        has_html=bool(result.html),
    )
    return DecodeResponse(success=True, result=result)
