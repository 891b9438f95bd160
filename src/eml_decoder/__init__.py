"""
eml-decoder: decode raw RFC5322/MIME messages into plain text, HTML and
attachment streams.
"""

from .decoder import Decoder, decode, decode_bytes, decode_file
from .errors import (
    ContentDecodeError,
    EmlDecodeError,
    MalformedEnvelopeError,
    MediaTypeError,
    NoMediaTypeError,
)
from .models.email_content import Attachment, EmailContent

__all__ = [
    "Decoder",
    "decode",
    "decode_bytes",
    "decode_file",
    "Attachment",
    "EmailContent",
    "EmlDecodeError",
    "MalformedEnvelopeError",
    "MediaTypeError",
    "NoMediaTypeError",
    "ContentDecodeError",
]
