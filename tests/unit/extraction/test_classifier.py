"""
Unit tests for part classification (classifier.py).
"""

import pytest

from eml_decoder.extraction.classifier import PartKind, TextKind, classify, text_kind_for


class TestClassify:
    """Tests for classify()."""

    @pytest.mark.unit
    def test_multipart_with_boundary(self):
        """Test nested containers carry their boundary."""
        result = classify("multipart/alternative", {"boundary": "b1"}, None)
        assert result.kind is PartKind.MULTIPART
        assert result.boundary == "b1"

    @pytest.mark.unit
    def test_multipart_without_boundary_is_ignored(self):
        """Test a container without boundary cannot be walked."""
        assert classify("multipart/mixed", {}, None).kind is PartKind.IGNORED

    @pytest.mark.unit
    def test_multipart_wins_over_disposition(self):
        """Test containers are recursed into even when marked as attachment."""
        result = classify("multipart/mixed", {"boundary": "b"}, "attachment")
        assert result.kind is PartKind.MULTIPART

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content_type,disposition,text_kind",
        [
            ("text/plain", None, TextKind.PLAIN),
            ("text/plain", "inline", TextKind.PLAIN),
            ("text/html", None, TextKind.HTML),
            ("text/html", "inline", TextKind.HTML),
            ("text/calendar", None, None),
        ],
    )
    def test_inline_text(self, content_type, disposition, text_kind):
        """Test text parts without attachment disposition are body text."""
        result = classify(content_type, {}, disposition)
        assert result.kind is PartKind.INLINE_TEXT
        assert result.text_kind is text_kind

    @pytest.mark.unit
    def test_text_attachment(self):
        """Test text parts marked as attachment are attachments."""
        assert classify("text/plain", {}, "attachment").kind is PartKind.ATTACHMENT

    @pytest.mark.unit
    @pytest.mark.parametrize("disposition", ["attachment", "inline"])
    def test_binary_with_disposition(self, disposition):
        """Test binary parts with a disposition are attachments (incl. inline images)."""
        assert classify("image/png", {}, disposition).kind is PartKind.ATTACHMENT

    @pytest.mark.unit
    def test_untyped_attachment(self):
        """Test a part with no content type but attachment disposition."""
        assert classify("", {}, "attachment").kind is PartKind.ATTACHMENT

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content_type,disposition",
        [
            ("application/json", None),
            ("image/png", "form-data"),
            ("text/plain", "form-data"),
            ("", None),
        ],
    )
    def test_ignored(self, content_type, disposition):
        """Test everything else is ignored."""
        assert classify(content_type, {}, disposition).kind is PartKind.IGNORED


class TestTextKindFor:
    """Tests for text_kind_for()."""

    @pytest.mark.unit
    def test_mapping(self):
        """Test text subtype mapping."""
        assert text_kind_for("text/plain") is TextKind.PLAIN
        assert text_kind_for("text/html") is TextKind.HTML
        assert text_kind_for("text/enriched") is None
