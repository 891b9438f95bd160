"""
Top-level message decoding.

A Decoder reads one message from a binary stream and returns its plain text
and HTML bodies. Attachments are passed to a callback as they are found; each
attachment stream must be consumed inside the callback.

Example:
    def save(attachment):
        with open(attachment.filename, "wb") as f:
            shutil.copyfileobj(attachment.content, f)

    with open("message.eml", "rb") as f:
        email = Decoder(f, save).decode()
"""

import io
from pathlib import Path
from typing import BinaryIO, Optional, Union

import structlog

from .config import settings
from .errors import NoMediaTypeError
from .extraction.classifier import text_kind_for
from .extraction.state import DecoderState
from .extraction.walker import AttachmentCallback, TreeWalker
from .models.email_content import EmailContent
from .parsing.envelope import read_envelope
from .parsing.media_type import parse_media_type

logger = structlog.get_logger(__name__)


class Decoder:
    """
    Single-use decoder for one message.

    Args:
        source: Binary stream holding the whole message (headers and body)
        attachment_callback: Called synchronously for every attachment, in
            document order. Optional; without it attachments are skipped.
        max_nesting_depth: Deepest multipart nesting to walk (defaults to
            settings.max_nesting_depth)
    """

    def __init__(
        self,
        source: BinaryIO,
        attachment_callback: Optional[AttachmentCallback] = None,
        max_nesting_depth: Optional[int] = None,
    ):
        self._source = source
        self._callback = attachment_callback
        self._max_depth = (
            max_nesting_depth if max_nesting_depth is not None else settings.max_nesting_depth
        )
        self._state = DecoderState()
        self._used = False

    def decode(self) -> EmailContent:
        """
        Decode the message.

        Returns:
            EmailContent with the decoded bodies and top-level headers

        Raises:
            MalformedEnvelopeError: If the header block cannot be parsed
            MediaTypeError: If the top-level Content-Type is malformed
            RuntimeError: If called more than once
        """
        if self._used:
            raise RuntimeError("Decoder.decode() can only be called once")
        self._used = True

        headers, body = read_envelope(self._source)
        walker = TreeWalker(self._state, self._callback, self._max_depth)

        try:
            media_type, params = parse_media_type(headers.get("Content-Type"))
        except NoMediaTypeError:
            # No type declared: no encoding metadata to act on either
            logger.debug("no_media_type_declared")
            self._state.plain_text_body = body.read()
        else:
            if media_type.startswith("multipart/"):
                boundary = params.get("boundary")
                if boundary:
                    walker.walk(body, boundary)
                else:
                    logger.warning("multipart_without_boundary", media_type=media_type)
            elif media_type.startswith("text/"):
                walker.store_text(
                    body,
                    text_kind_for(media_type),
                    str(headers.get("Content-Transfer-Encoding", "")),
                    params,
                )
            else:
                logger.debug("body_not_decoded", media_type=media_type)

        logger.info(
            "email_decoded",
            subject=str(headers.get("Subject", "")),
            plain_text_bytes=len(self._state.plain_text_body),
            html_bytes=len(self._state.html_body),
            attachments=self._state.attachment_count,
        )

        return EmailContent(
            html_body=self._state.html_body,
            plain_text_body=self._state.plain_text_body,
            headers=headers,
        )


def decode(
    source: BinaryIO, attachment_callback: Optional[AttachmentCallback] = None
) -> EmailContent:
    """
    Decode a message from a binary stream.

    Args:
        source: Binary stream positioned at the start of the message
        attachment_callback: Optional callback receiving each Attachment

    Returns:
        EmailContent with the decoded bodies
    """
    return Decoder(source, attachment_callback).decode()


def decode_bytes(
    data: bytes, attachment_callback: Optional[AttachmentCallback] = None
) -> EmailContent:
    """Decode a message held in memory."""
    return decode(io.BytesIO(data), attachment_callback)


def decode_file(
    path: Union[str, Path], attachment_callback: Optional[AttachmentCallback] = None
) -> EmailContent:
    """
    Decode a message stored in a file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    with open(path, "rb") as f:
        return decode(f, attachment_callback)
