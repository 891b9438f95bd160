"""
API request and response models for FastAPI endpoints.

This module defines the Pydantic models used for API response validation.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class DecoderVersion(BaseModel):
    """Versions of the decoding components that produced a result."""

    decoder_version: str = Field(description="Decoder version", examples=["eml-decoder-1.0.0"])
    charset_registry_version: str = Field(description="Charset registry version")
    naming_policy_version: str = Field(description="Attachment naming policy version")

    model_config = {"frozen": True}


class AttachmentSummary(BaseModel):
    """Attachment details returned by the decode endpoint (content not returned)."""

    filename: str = Field(description="Resolved filename")
    content_type: str = Field(description="Declared MIME type")
    size_bytes: int = Field(description="Decoded size in bytes")
    sha256: str = Field(description="SHA-256 of the decoded content")
    error: Optional[str] = Field(None, description="Read error if the content could not be decoded")


class DecodedEmail(BaseModel):
    """Decoded message as returned by the API."""

    subject: str = Field(default="", description="Subject header")
    from_address: str = Field(default="", description="From header")
    plain_text: str = Field(default="", description="Plain text body")
    html: str = Field(default="", description="HTML body")
    attachments: List[AttachmentSummary] = Field(
        default_factory=list, description="Extracted attachments"
    )
    attachments_truncated: bool = Field(
        default=False, description="Whether attachments beyond the limit were omitted"
    )


class DecodeResponse(BaseModel):
    """Response model for the decode endpoint."""

    success: bool = Field(description="Whether decoding succeeded")
    result: Optional[DecodedEmail] = Field(None, description="Decoded message")
    error: Optional[str] = Field(None, description="Error message if failed")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status", examples=["healthy"])
    version: str = Field(description="API version", examples=["1.0.0"])
    decoder_version: str = Field(description="Decoder version", examples=["eml-decoder-1.0.0"])
    uptime_seconds: float = Field(description="Service uptime")


class VersionResponse(BaseModel):
    """Version information response."""

    api_version: str = Field(description="API version")
    decoder_version: DecoderVersion = Field(description="Current decoder component versions")
    supported_charsets: List[str] = Field(
        default_factory=list, description="Charsets transcoded to UTF-8"
    )
