"""
Per-decode working state.
"""

from dataclasses import dataclass, field
from email.message import Message
from typing import Dict, Optional

from ..parsing.media_type import parse_disposition, parse_part_media_type


@dataclass
class DecoderState:
    """
    Counters and accumulators for one decode call.

    The attachment index only grows, across every nesting level, so synthetic
    attachment names are unique within a message.
    """

    attachment_index: int = 0
    attachment_count: int = 0
    plain_text_body: bytes = b""
    html_body: bytes = b""
    depth: int = 0


@dataclass
class PartDescriptor:
    """Header-derived facts about one part, used while the part is processed."""

    content_type: str = ""
    params: Dict[str, str] = field(default_factory=dict)
    disposition: Optional[str] = None
    disposition_params: Dict[str, str] = field(default_factory=dict)
    transfer_encoding: str = ""

    @classmethod
    def from_headers(cls, headers: Message) -> "PartDescriptor":
        """
        Build a descriptor from part headers.

        A Content-Type with broken parameters keeps its media type; one with
        an unreadable type/subtype yields an empty content type. An
        unparseable Content-Disposition is treated as absent.
        """
        content_type, params = parse_part_media_type(headers.get("Content-Type"))
        disposition, disposition_params = parse_disposition(
            headers.get("Content-Disposition")
        )

        return cls(
            content_type=content_type,
            params=params,
            disposition=disposition,
            disposition_params=disposition_params,
            transfer_encoding=str(headers.get("Content-Transfer-Encoding", "")),
        )
