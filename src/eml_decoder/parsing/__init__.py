# Message parsing: envelope, media types and multipart framing

from .envelope import parse_header_block, read_envelope
from .media_type import parse_disposition, parse_media_type, parse_part_media_type
from .multipart import MultipartReader, Part

__all__ = [
    "read_envelope",
    "parse_header_block",
    "parse_media_type",
    "parse_part_media_type",
    "parse_disposition",
    "MultipartReader",
    "Part",
]
