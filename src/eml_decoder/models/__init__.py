# Data models for decoder output and the API

from .email_content import Attachment, EmailContent
from .api_models import (
    AttachmentSummary,
    DecodedEmail,
    DecodeResponse,
    DecoderVersion,
    HealthResponse,
    VersionResponse,
)

__all__ = [
    "Attachment",
    "EmailContent",
    "AttachmentSummary",
    "DecodedEmail",
    "DecodeResponse",
    "DecoderVersion",
    "HealthResponse",
    "VersionResponse",
]
