"""
Rendering of decoded body bytes as text.

Bodies with a recognized charset come out of the pipeline as UTF-8. Bodies
whose charset was undeclared or unsupported are passed through unchanged, so
their encoding is guessed with charset-normalizer.
"""

import charset_normalizer


def detect_encoding(data: bytes) -> str:
    """
    Detect the character encoding of decoded body bytes.

    Args:
        data: Body bytes

    Returns:
        "utf-8" when the bytes are valid UTF-8, otherwise the encoding
        detected by charset-normalizer (falls back to "utf-8")
    """
    try:
        data.decode("utf-8")
        return "utf-8"
    except UnicodeDecodeError:
        pass

    detected = charset_normalizer.from_bytes(data).best()
    if detected:
        return detected.encoding

    return "utf-8"


def bytes_to_text(data: bytes) -> str:
    """
    Convert decoded body bytes to a string.

    Args:
        data: Body bytes (possibly empty)

    Returns:
        Decoded string content
    """
    if not data:
        return ""

    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        pass

    # Try charset detection
    detected = charset_normalizer.from_bytes(data).best()
    if detected:
        return str(detected)

    # Final fallback
    return data.decode("utf-8", errors="replace")
