"""
Charset registry mapping declared charset names to UTF-8 transcoders.

The registry is a fixed lookup table. Callers lower-case the declared name
before lookup; unknown names resolve to None and the content is passed
through unchanged.
"""

from functools import partial
from typing import BinaryIO, Callable, Dict, List, Optional

from .streams import TranscodingReader

TranscoderFactory = Callable[[BinaryIO], BinaryIO]

# Declared charset name -> Python codec name
_CHARSET_CODECS: Dict[str, str] = {
    "iso-8859-1": "iso8859_1",
    "iso-8859-2": "iso8859_2",
    "iso-8859-3": "iso8859_3",
    "iso-8859-4": "iso8859_4",
    "iso-8859-5": "iso8859_5",
    "iso-8859-6": "iso8859_6",
    "iso-8859-7": "iso8859_7",
    "iso-8859-8": "iso8859_8",
    "iso-8859-9": "iso8859_9",
    "iso-8859-10": "iso8859_10",
    "iso-8859-13": "iso8859_13",
    "iso-8859-14": "iso8859_14",
    "iso-8859-15": "iso8859_15",
    "iso-8859-16": "iso8859_16",

    # DOS and EBCDIC code pages
    "cp037": "cp037",
    "cp437": "cp437",
    "cp850": "cp850",
    "cp852": "cp852",
    "cp855": "cp855",
    "cp858": "cp858",
    "cp860": "cp860",
    "cp862": "cp862",
    "cp863": "cp863",
    "cp865": "cp865",
    "cp866": "cp866",
    "cp1140": "cp1140",

    "koi8r": "koi8_r",
    "koi8u": "koi8_u",
    "koi8-r": "koi8_r",
    "koi8-u": "koi8_u",

    "macintosh": "mac_roman",
    "macintosh-cyrillic": "mac_cyrillic",

    "windows-874": "cp874",
    "windows-1250": "cp1250",
    "windows-1251": "cp1251",
    "windows-1252": "cp1252",
    "windows-1253": "cp1253",
    "windows-1254": "cp1254",
    "windows-1255": "cp1255",
    "windows-1256": "cp1256",
    "windows-1257": "cp1257",
    "windows-1258": "cp1258",
}


def resolve(name: str) -> Optional[TranscoderFactory]:
    """
    Look up a transcoder for a lower-cased charset name.

    Args:
        name: Declared charset, already lower-cased by the caller

    Returns:
        Factory wrapping a byte stream into a UTF-8 stream, or None if the
        charset is not supported
    """
    codec = _CHARSET_CODECS.get(name)
    if codec is None:
        return None
    return partial(TranscodingReader.open, encoding=codec)


def supported_charsets() -> List[str]:
    """Return the charset names the registry can transcode."""
    return sorted(_CHARSET_CODECS)
