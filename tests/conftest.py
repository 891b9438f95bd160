"""
Global pytest fixtures and configuration for test suite.

This module provides reusable fixtures for:
- HTTP clients
- Mock settings/configuration
- Sample email data
- Attachment collection
- Temporary files
"""

import os
from typing import AsyncGenerator, Generator, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from eml_decoder.api.app import app
from eml_decoder.config import Settings
from eml_decoder.models.email_content import Attachment
from .fixtures.emails import SAMPLE_EMAILS


class CollectedAttachment:
    """Snapshot of an attachment taken while its stream was still open."""

    def __init__(self, attachment: Attachment):
        self.filename = attachment.filename
        self.content_type = attachment.content_type
        self.data = attachment.content.read()
        self.stream = attachment.content


class AttachmentRecorder:
    """Attachment callback that drains and records every attachment."""

    def __init__(self):
        self.attachments: List[CollectedAttachment] = []

    def __call__(self, attachment: Attachment) -> None:
        self.attachments.append(CollectedAttachment(attachment))

    @property
    def filenames(self) -> List[str]:
        return [a.filename for a in self.attachments]


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """
    Create async HTTP client for testing FastAPI endpoints.

    Yields:
        AsyncClient instance
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def mock_settings() -> Settings:
    """
    Create mock settings for testing with safe defaults.

    Returns:
        Settings instance with test configuration
    """
    return Settings(
        max_email_size_mb=25,
        max_attachments=50,
        max_nesting_depth=32,
        log_level="INFO",
        log_json=False,  # Easier to read in tests
    )


@pytest.fixture
def recorder() -> AttachmentRecorder:
    """Attachment callback recording every attachment it receives."""
    return AttachmentRecorder()


@pytest.fixture
def sample_eml_bytes() -> bytes:
    """
    Get simple plain text email bytes for basic tests.

    Returns:
        bytes of a simple .eml file
    """
    return SAMPLE_EMAILS["simple_plain_text"]


@pytest.fixture
def mixed_attachments_eml() -> bytes:
    """
    Get multipart email with text/plain, attachment, text/html, inline image.

    Returns:
        bytes of multipart/mixed email
    """
    return SAMPLE_EMAILS["mixed_attachments"]


@pytest.fixture
def malformed_eml() -> bytes:
    """
    Get email whose header block cannot be parsed.

    Returns:
        bytes of invalid RFC5322 data
    """
    return SAMPLE_EMAILS["malformed_envelope"]


@pytest.fixture
def tmp_eml_file(tmp_path) -> Generator[str, None, None]:
    """
    Create temporary .eml file for file-based tests.

    Args:
        tmp_path: pytest's temporary directory fixture

    Yields:
        Path to temporary .eml file
    """
    eml_path = tmp_path / "test_email.eml"
    eml_path.write_bytes(SAMPLE_EMAILS["mixed_attachments"])
    yield str(eml_path)
    # Cleanup is automatic with tmp_path


@pytest.fixture(autouse=True)
def reset_env_vars():
    """
    Reset environment variables before each test.

    This prevents test pollution from env var changes.
    """
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
