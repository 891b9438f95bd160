# Body decoders - charset registry, streaming codecs and the decode pipeline

from .charsets import resolve, supported_charsets
from .pipeline import build_reader
from .text import bytes_to_text, detect_encoding

__all__ = [
    "build_reader",
    "resolve",
    "supported_charsets",
    "bytes_to_text",
    "detect_encoding",
]
