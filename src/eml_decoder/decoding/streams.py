"""
Streaming codecs used by the decode pipeline.

Each reader wraps a binary source and transforms it chunk by chunk, so a
chain of readers decodes a part without ever holding the whole body in
memory. Readers are raw streams; use the ``open`` classmethod to get a
buffered, file-like object.
"""

import base64
import binascii
import codecs
import io
import re
from typing import BinaryIO, Optional

from ..config import settings
from ..errors import ContentDecodeError

_WHITESPACE = re.compile(rb"\s+")
_TRUNCATED_ESCAPE = re.compile(rb"=[0-9A-Fa-f]\Z")


class TransformReader(io.RawIOBase):
    """
    Base class for lazy stream transforms.

    Subclasses implement ``_transform`` for each chunk read from the source
    and ``_finish`` to flush state once the source is exhausted. Closing the
    reader closes its source.
    """

    def __init__(self, source: BinaryIO, chunk_size: Optional[int] = None):
        super().__init__()
        self._source = source
        self._chunk_size = chunk_size or settings.read_chunk_size
        self._pending = bytearray()
        self._eof = False

    @classmethod
    def open(cls, source: BinaryIO, **kwargs) -> BinaryIO:
        """Wrap ``source`` and return a buffered reader over the result."""
        return io.BufferedReader(cls(source, **kwargs))

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed stream")

        while not self._pending and not self._eof:
            chunk = self._source.read(self._chunk_size)
            if not chunk:
                self._eof = True
                self._pending += self._finish()
            else:
                self._pending += self._transform(chunk)

        size = min(len(buffer), len(self._pending))
        buffer[:size] = self._pending[:size]
        del self._pending[:size]
        return size

    def close(self) -> None:
        if not self.closed:
            try:
                self._source.close()
            finally:
                super().close()

    def _transform(self, chunk: bytes) -> bytes:
        raise NotImplementedError

    def _finish(self) -> bytes:
        return b""


class Base64Reader(TransformReader):
    """
    Decode base64 (standard alphabet) content.

    Whitespace and line breaks are ignored. Any other byte outside the
    alphabet, or input that ends mid-quantum, raises ContentDecodeError on
    read.
    """

    def __init__(self, source: BinaryIO, chunk_size: Optional[int] = None):
        super().__init__(source, chunk_size)
        self._carry = b""

    def _transform(self, chunk: bytes) -> bytes:
        data = self._carry + _WHITESPACE.sub(b"", chunk)
        usable = len(data) - len(data) % 4
        self._carry = data[usable:]
        return self._decode(data[:usable])

    def _finish(self) -> bytes:
        if self._carry:
            raise ContentDecodeError(
                f"truncated base64 content ({len(self._carry)} trailing characters)"
            )
        return b""

    @staticmethod
    def _decode(data: bytes) -> bytes:
        try:
            return base64.b64decode(data, validate=True)
        except binascii.Error as e:
            raise ContentDecodeError(f"invalid base64 content: {e}") from e


class QuotedPrintableReader(TransformReader):
    """
    Decode quoted-printable content line by line.

    Only complete lines are decoded so that soft line breaks and escapes
    split across chunk boundaries are handled correctly. Content that ends
    in the middle of an ``=XX`` escape raises ContentDecodeError on read; a
    bare trailing ``=`` is a soft line break.
    """

    def __init__(self, source: BinaryIO, chunk_size: Optional[int] = None):
        super().__init__(source, chunk_size)
        self._carry = b""

    def _transform(self, chunk: bytes) -> bytes:
        data = self._carry + chunk
        cut = data.rfind(b"\n") + 1
        self._carry = data[cut:]
        return binascii.a2b_qp(data[:cut]) if cut else b""

    def _finish(self) -> bytes:
        tail, self._carry = self._carry, b""
        if not tail:
            return b""
        if _TRUNCATED_ESCAPE.search(tail):
            raise ContentDecodeError("truncated quoted-printable escape at end of content")
        return binascii.a2b_qp(tail)


class TranscodingReader(TransformReader):
    """Transcode content from a legacy charset to UTF-8."""

    def __init__(
        self,
        source: BinaryIO,
        encoding: str,
        chunk_size: Optional[int] = None,
        errors: str = "replace",
    ):
        super().__init__(source, chunk_size)
        self._decoder = codecs.getincrementaldecoder(encoding)(errors=errors)

    def _transform(self, chunk: bytes) -> bytes:
        return self._decoder.decode(chunk).encode("utf-8")

    def _finish(self) -> bytes:
        return self._decoder.decode(b"", final=True).encode("utf-8")
