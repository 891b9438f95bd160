"""
Decode pipeline: transfer-encoding removal followed by charset transcoding.
"""

from typing import BinaryIO, Mapping

import structlog

from . import charsets
from .streams import Base64Reader, QuotedPrintableReader

logger = structlog.get_logger(__name__)


def build_reader(
    raw: BinaryIO, transfer_encoding: str, params: Mapping[str, str]
) -> BinaryIO:
    """
    Compose the decoding stages for one body.

    Stages are applied in a fixed order: base64, then quoted-printable (both
    selected by substring match on the transfer encoding, independently of
    each other), then transcoding from the declared charset to UTF-8. Nothing
    is read here; errors surface when the returned stream is read.

    Args:
        raw: Encoded body stream
        transfer_encoding: Content-Transfer-Encoding header value (may be empty)
        params: Content-Type parameters; only ``charset`` is used

    Returns:
        Stream yielding the decoded bytes
    """
    reader = raw
    transfer_encoding = transfer_encoding or ""

    if "base64" in transfer_encoding:
        reader = Base64Reader.open(reader)
    if "quoted-printable" in transfer_encoding:
        reader = QuotedPrintableReader.open(reader)

    charset = params.get("charset")
    if charset:
        transcoder = charsets.resolve(charset.lower())
        if transcoder is not None:
            reader = transcoder(reader)
        else:
            logger.debug("charset_passthrough", charset=charset)

    return reader
