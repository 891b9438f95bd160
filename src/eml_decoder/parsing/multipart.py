"""
Pull-based reader for boundary-delimited multipart bodies (RFC2046).

The reader walks a single underlying stream. Each part is exposed as a
readable stream scoped to that part's body, so parts must be consumed in
order: asking for the next part drains whatever is left of the current one.
"""

import io
from email.message import Message
from typing import BinaryIO, Optional, Tuple

import structlog

from .envelope import MAX_LINE_LENGTH, parse_header_block

logger = structlog.get_logger(__name__)


# Delimiter kinds
_PART = "part"
_CLOSE = "close"


def _strip_line_break(line: bytes) -> bytes:
    if line.endswith(b"\r\n"):
        return line[:-2]
    if line.endswith(b"\n"):
        return line[:-1]
    return line


class Part(io.RawIOBase):
    """
    Body of one part of a multipart body.

    ``headers`` holds the part headers. The line break immediately before the
    next delimiter belongs to the delimiter and is not part of the body.
    """

    def __init__(self, reader: "MultipartReader", headers: Message):
        super().__init__()
        self.headers = headers
        self._reader = reader
        self._held = b""
        self._out = bytearray()
        self._done = False

    def readable(self) -> bool:
        return True

    def readinto(self, buffer) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed part")

        while not self._out and not self._done:
            self._advance()

        size = min(len(buffer), len(self._out))
        buffer[:size] = self._out[:size]
        del self._out[:size]
        return size

    def drain(self) -> None:
        """Discard the rest of the body, even if the part has been closed."""
        self._out.clear()
        while not self._done:
            self._advance()
            self._out.clear()

    def _advance(self) -> None:
        line, at_line_start = self._reader._next_line()
        if line is None:
            self._out += self._held
            self._held = b""
            self._done = True
            return

        kind = self._reader._delimiter_kind(line) if at_line_start else None
        if kind is not None:
            self._out += _strip_line_break(self._held)
            self._held = b""
            self._done = True
            self._reader._pending_delimiter = kind
            return

        self._out += self._held
        self._held = line


class MultipartReader:
    """
    Iterate over the parts of a multipart body.

    Preamble and epilogue are discarded. A body that ends without its close
    delimiter, or a part whose header block is cut short, ends the iteration
    normally.
    """

    def __init__(self, stream: BinaryIO, boundary: str):
        self.boundary = boundary
        self._stream = stream
        self._dash_boundary = b"--" + boundary.encode("utf-8", "surrogateescape")
        self._at_line_start = True
        self._pending_delimiter: Optional[str] = None
        self._current: Optional[Part] = None
        self._finished = False

    def __iter__(self):
        while True:
            part = self.next_part()
            if part is None:
                return
            yield part

    def next_part(self) -> Optional[Part]:
        """
        Advance to the next part.

        Returns:
            The next Part, or None when there are no more parts
        """
        if self._current is not None:
            self._current.drain()
            self._current = None

        if self._finished:
            return None

        if self._pending_delimiter is not None:
            kind, self._pending_delimiter = self._pending_delimiter, None
        else:
            kind = self._skip_to_delimiter()

        if kind != _PART:
            self._finished = True
            if kind is None:
                logger.debug("multipart_unterminated", boundary=self.boundary)
            return None

        headers = self._read_headers()
        if headers is None:
            self._finished = True
            logger.debug("multipart_truncated_headers", boundary=self.boundary)
            return None

        self._current = Part(self, headers)
        return self._current

    def _next_line(self) -> Tuple[Optional[bytes], bool]:
        at_line_start = self._at_line_start
        line = self._stream.readline(MAX_LINE_LENGTH)
        if not line:
            return None, at_line_start
        self._at_line_start = line.endswith(b"\n")
        return line, at_line_start

    def _delimiter_kind(self, line: bytes) -> Optional[str]:
        if not line.startswith(self._dash_boundary):
            return None
        rest = line[len(self._dash_boundary):]
        kind = _PART
        if rest.startswith(b"--"):
            rest = rest[2:]
            kind = _CLOSE
        # Only transport padding may follow the boundary
        if rest.strip(b" \t\r\n"):
            return None
        return kind

    def _skip_to_delimiter(self) -> Optional[str]:
        while True:
            line, at_line_start = self._next_line()
            if line is None:
                return None
            if at_line_start:
                kind = self._delimiter_kind(line)
                if kind is not None:
                    return kind

    def _read_headers(self) -> Optional[Message]:
        lines = []
        while True:
            line, at_line_start = self._next_line()
            if line is None:
                return None
            if at_line_start and line in (b"\r\n", b"\n"):
                return parse_header_block(lines)
            lines.append(line)
