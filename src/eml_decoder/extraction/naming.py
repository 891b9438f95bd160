"""
Attachment filename resolution.

Declared filenames are reduced to their last path segment so that a
downstream writer cannot be steered outside its target directory. Parts
without a usable name get a synthetic, sequentially numbered one.
"""

import re
from typing import Optional

from .state import DecoderState

SYNTHETIC_NAME_TEMPLATE = "attachment-{index}.file"

_SEPARATORS = re.compile(r"[\\/]")
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


def safe_basename(filename: str) -> Optional[str]:
    """
    Return the last path segment of a declared filename.

    Both "/" and "\\" are treated as separators.

    Returns:
        The basename, or None if nothing usable remains
    """
    segments = _SEPARATORS.split(_CONTROL_CHARS.sub("", filename).rstrip("\\/"))
    basename = segments[-1].strip()
    if basename in ("", ".", ".."):
        return None
    return basename


def resolve_name(declared: Optional[str], state: DecoderState) -> str:
    """
    Resolve the filename for an attachment.

    Args:
        declared: Filename parameter from Content-Disposition, if any
        state: Decode state holding the attachment index

    Returns:
        The declared basename, or ``attachment-<n>.file`` with the index
        incremented
    """
    basename = safe_basename(declared) if declared else None
    if basename is None:
        state.attachment_index += 1
        return SYNTHETIC_NAME_TEMPLATE.format(index=state.attachment_index)
    return basename
