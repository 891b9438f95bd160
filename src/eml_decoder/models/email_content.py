"""
Decoder output models.

EmailContent is returned once per decode. Attachment values are pushed to the
caller's callback while the walker is positioned on the originating part.
"""

from email.message import Message
from io import IOBase

from pydantic import BaseModel, Field

from ..decoding.text import bytes_to_text


class Attachment(BaseModel):
    """
    One extracted attachment.

    ``content`` is a lazily decoded stream over the originating part. It is
    only valid while the attachment callback runs: the decoder closes it as
    soon as the callback returns, before moving on to the next part.
    """

    filename: str = Field(min_length=1, description="Resolved, filesystem-safe filename")
    content_type: str = Field(default="", description="Declared MIME type (empty if undeclared)")
    content: IOBase = Field(description="Decoded content stream")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }


class EmailContent(BaseModel):
    """Decoded message bodies and the top-level headers."""

    html_body: bytes = Field(default=b"", description="Last text/html part, decoded")
    plain_text_body: bytes = Field(default=b"", description="Last text/plain part, decoded")
    headers: Message = Field(description="Top-level message headers")

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    @property
    def plain_text(self) -> str:
        """Plain text body as a string."""
        return bytes_to_text(self.plain_text_body)

    @property
    def html(self) -> str:
        """HTML body as a string."""
        return bytes_to_text(self.html_body)

    def header(self, name: str) -> str:
        """Return the first value of a header, or an empty string."""
        value = self.headers.get(name)
        return str(value) if value is not None else ""
