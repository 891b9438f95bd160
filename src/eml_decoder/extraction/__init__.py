# MIME tree walking: part classification, attachment naming and the walker

from .classifier import Classification, PartKind, TextKind, classify, text_kind_for
from .naming import SYNTHETIC_NAME_TEMPLATE, resolve_name, safe_basename
from .state import DecoderState, PartDescriptor
from .walker import AttachmentCallback, TreeWalker, read_all

__all__ = [
    "classify",
    "text_kind_for",
    "Classification",
    "PartKind",
    "TextKind",
    "resolve_name",
    "safe_basename",
    "SYNTHETIC_NAME_TEMPLATE",
    "DecoderState",
    "PartDescriptor",
    "TreeWalker",
    "AttachmentCallback",
    "read_all",
]
