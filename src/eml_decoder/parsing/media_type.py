"""
Content-Type and Content-Disposition parameter parsing.

Values are parsed with the standard library header registry. Media types and
parameter names come back lower-cased; RFC2231 parameter values are decoded.
"""

import re
from email import policy
from email.headerregistry import ContentDispositionHeader, ContentTypeHeader
from typing import Dict, Optional, Tuple

from ..errors import MediaTypeError, NoMediaTypeError

_HEADER_FACTORY = policy.default.header_factory

_TOKEN = r"[!#$%&'*+.^_`|~0-9A-Za-z-]+"
_TYPE_SUBTYPE = re.compile(rf"{_TOKEN}/{_TOKEN}")


def _content_type_header(value) -> ContentTypeHeader:
    if isinstance(value, ContentTypeHeader):
        return value
    return _HEADER_FACTORY("content-type", str(value))


def parse_media_type(value: Optional[str]) -> Tuple[str, Dict[str, str]]:
    """
    Parse a Content-Type header value.

    Args:
        value: Header value, or None when the header is missing

    Returns:
        Tuple of (media type, parameters)

    Raises:
        NoMediaTypeError: If no media type is declared
        MediaTypeError: If the value is malformed
    """
    if value is None or not str(value).strip():
        raise NoMediaTypeError("no media type")

    header = _content_type_header(value)
    if header.defects:
        raise MediaTypeError(f"malformed media type {str(value)!r}: {header.defects[0]}")

    return header.content_type, dict(header.params)


def parse_part_media_type(value: Optional[str]) -> Tuple[str, Dict[str, str]]:
    """
    Parse a part's Content-Type header value, tolerating bad parameters.

    Broken parameters keep the media type and whichever parameters did parse.
    A missing value, or one whose type/subtype is unreadable, gives an empty
    media type.

    Args:
        value: Header value, or None when the header is missing

    Returns:
        Tuple of (media type or "", parameters)
    """
    if value is None or not str(value).strip():
        return "", {}

    header = _content_type_header(value)
    if header.defects:
        declared = str(value).split(";", 1)[0].strip()
        if not _TYPE_SUBTYPE.fullmatch(declared):
            return "", {}

    return header.content_type, dict(header.params)


def parse_disposition(value: Optional[str]) -> Tuple[Optional[str], Dict[str, str]]:
    """
    Parse a Content-Disposition header value.

    A missing, empty or malformed value is reported as no disposition.

    Args:
        value: Header value, or None when the header is missing

    Returns:
        Tuple of (disposition token or None, parameters)
    """
    if value is None or not str(value).strip():
        return None, {}

    if isinstance(value, ContentDispositionHeader):
        header = value
    else:
        header = _HEADER_FACTORY("content-disposition", str(value))

    if header.content_disposition is None:
        return None, {}

    return header.content_disposition, dict(header.params)
