"""
Recursive walker over a multipart MIME tree.

Parts are visited depth-first in document order. Body text parts are decoded
into the state accumulators (last part wins); attachments are handed to the
callback one at a time while the underlying stream is positioned on them.
"""

import io
from typing import BinaryIO, Callable, Mapping, Optional

import structlog

from ..decoding.pipeline import build_reader
from ..errors import ContentDecodeError
from ..models.email_content import Attachment
from ..parsing.multipart import MultipartReader, Part
from .classifier import PartKind, TextKind, classify
from .naming import resolve_name
from .state import DecoderState, PartDescriptor

logger = structlog.get_logger(__name__)

AttachmentCallback = Callable[[Attachment], None]


def read_all(reader: BinaryIO, chunk_size: int = 64 * 1024) -> bytes:
    """
    Drain a decoded body.

    Content errors stop the read and keep what was decoded so far; I/O errors
    from the source propagate.
    """
    data = bytearray()
    try:
        while True:
            chunk = reader.read(chunk_size)
            if not chunk:
                break
            data += chunk
    except ContentDecodeError as e:
        logger.warning("body_decode_failed", error=str(e), decoded_bytes=len(data))
    return bytes(data)


class TreeWalker:
    """
    Walks a multipart body and fills a DecoderState.

    Nesting deeper than ``max_depth`` is skipped with a warning instead of
    recursing further.
    """

    def __init__(
        self,
        state: DecoderState,
        attachment_callback: Optional[AttachmentCallback],
        max_depth: int,
    ):
        self.state = state
        self.max_depth = max_depth
        self._callback = attachment_callback

    def walk(self, body: BinaryIO, boundary: str) -> None:
        """
        Visit every part of a multipart body.

        Args:
            body: Multipart body stream (must support readline)
            boundary: Boundary declared for this body
        """
        if self.state.depth >= self.max_depth:
            logger.warning(
                "multipart_depth_exceeded",
                max_depth=self.max_depth,
                boundary=boundary,
            )
            return

        self.state.depth += 1
        try:
            for part in MultipartReader(body, boundary):
                self._visit(part)
        finally:
            self.state.depth -= 1

    def store_text(
        self,
        body: BinaryIO,
        text_kind: Optional[TextKind],
        transfer_encoding: str,
        params: Mapping[str, str],
    ) -> None:
        """
        Decode a body text part into its accumulator, replacing any earlier value.

        Text subtypes other than plain and html are not stored.
        """
        if text_kind is None:
            return

        data = read_all(build_reader(body, transfer_encoding, params))
        if text_kind is TextKind.PLAIN:
            self.state.plain_text_body = data
        else:
            self.state.html_body = data

    def _visit(self, part: Part) -> None:
        descriptor = PartDescriptor.from_headers(part.headers)
        result = classify(descriptor.content_type, descriptor.params, descriptor.disposition)

        if result.kind is PartKind.MULTIPART:
            self.walk(io.BufferedReader(part), result.boundary)
        elif result.kind is PartKind.INLINE_TEXT:
            self.store_text(
                io.BufferedReader(part),
                result.text_kind,
                descriptor.transfer_encoding,
                descriptor.params,
            )
        elif result.kind is PartKind.ATTACHMENT:
            self._emit_attachment(part, descriptor)
        else:
            logger.debug(
                "part_ignored",
                content_type=descriptor.content_type,
                disposition=descriptor.disposition,
            )

    def _emit_attachment(self, part: Part, descriptor: PartDescriptor) -> None:
        if self._callback is None:
            return

        content = build_reader(
            io.BufferedReader(part), descriptor.transfer_encoding, descriptor.params
        )
        attachment = Attachment(
            filename=resolve_name(descriptor.disposition_params.get("filename"), self.state),
            content_type=descriptor.content_type,
            content=content,
        )
        self.state.attachment_count += 1
        logger.debug(
            "attachment_found",
            filename=attachment.filename,
            content_type=attachment.content_type,
        )

        # The stream is only valid until the walker moves on
        try:
            self._callback(attachment)
        finally:
            content.close()
