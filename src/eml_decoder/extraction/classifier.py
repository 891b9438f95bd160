"""
Part classification: nested multipart, inline body text, attachment or ignored.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class PartKind(str, Enum):
    """How the walker handles a part."""

    MULTIPART = "multipart"
    INLINE_TEXT = "inline_text"
    ATTACHMENT = "attachment"
    IGNORED = "ignored"


class TextKind(str, Enum):
    """Which body accumulator an inline text part feeds."""

    PLAIN = "plain"
    HTML = "html"


@dataclass(frozen=True)
class Classification:
    """Result of classifying one part."""

    kind: PartKind
    boundary: Optional[str] = None
    text_kind: Optional[TextKind] = None  # None for text subtypes that are not stored


def text_kind_for(content_type: str) -> Optional[TextKind]:
    """
    Map a text media type to its body accumulator.

    Args:
        content_type: Lower-cased media type

    Returns:
        TextKind.PLAIN, TextKind.HTML, or None for other types
    """
    if content_type.startswith("text/plain"):
        return TextKind.PLAIN
    if content_type.startswith("text/html"):
        return TextKind.HTML
    return None


def classify(
    content_type: str,
    params: Mapping[str, str],
    disposition: Optional[str],
) -> Classification:
    """
    Classify a part from its content type and disposition.

    Rules are evaluated in order:
    1. multipart/* is a nested container (ignored if it has no boundary)
    2. text/* without a disposition, or with "inline", is body text
    3. a disposition of "attachment" or "inline" is an attachment
       (this covers inline images and other binary inline content)
    4. anything else is ignored

    Args:
        content_type: Lower-cased media type ("" if undeclared or malformed)
        params: Content-Type parameters
        disposition: Lower-cased disposition token, or None

    Returns:
        Classification for the part
    """
    if content_type.startswith("multipart/"):
        boundary = params.get("boundary")
        if not boundary:
            return Classification(PartKind.IGNORED)
        return Classification(PartKind.MULTIPART, boundary=boundary)

    if content_type.startswith("text/") and disposition in (None, "inline"):
        return Classification(PartKind.INLINE_TEXT, text_kind=text_kind_for(content_type))

    if disposition in ("attachment", "inline"):
        return Classification(PartKind.ATTACHMENT)

    return Classification(PartKind.IGNORED)
