"""
Envelope reader for RFC5322 messages.

Reads the header block of a message from a binary stream, leaving the stream
positioned at the first byte of the body. Header parsing is delegated to the
standard library email package.
"""

from email import policy
from email.message import Message
from email.parser import BytesHeaderParser
from typing import BinaryIO, Iterable, Tuple

from ..errors import MalformedEnvelopeError

_HEADER_PARSER = BytesHeaderParser(policy=policy.default)

_LINE_BREAKS = (b"\r\n", b"\n")

# Longest header or boundary line read in one piece
MAX_LINE_LENGTH = 64 * 1024


def parse_header_block(lines: Iterable[bytes]) -> Message:
    """
    Parse raw header lines into a Message.

    Args:
        lines: Header lines including their line breaks, without the
            terminating empty line

    Returns:
        Message holding the headers (case-insensitive lookup)
    """
    return _HEADER_PARSER.parsebytes(b"".join(lines))


def read_envelope(stream: BinaryIO) -> Tuple[Message, BinaryIO]:
    """
    Read and validate the top-level header block of a message.

    Args:
        stream: Binary stream positioned at the start of the message

    Returns:
        Tuple of (headers, body stream). The body stream is ``stream`` itself,
        positioned after the empty line that ends the headers.

    Raises:
        MalformedEnvelopeError: If the input is empty, starts with a
            continuation line, contains a line that is not a header field, or
            a header line longer than MAX_LINE_LENGTH
    """
    lines = []
    while True:
        line = stream.readline(MAX_LINE_LENGTH)
        if not line:
            if not lines:
                raise MalformedEnvelopeError("empty message")
            break
        if line in _LINE_BREAKS:
            break
        if len(line) == MAX_LINE_LENGTH and not line.endswith(b"\n"):
            raise MalformedEnvelopeError(
                f"header line longer than {MAX_LINE_LENGTH} bytes"
            )

        if line[:1] in (b" ", b"\t"):
            if not lines:
                raise MalformedEnvelopeError(
                    "message starts with a header continuation line"
                )
        elif line.find(b":") < 1:
            raise MalformedEnvelopeError(
                f"malformed header line: {line[:60]!r}"
            )
        lines.append(line)

    return parse_header_block(lines), stream
