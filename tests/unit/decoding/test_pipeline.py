"""
Unit tests for the decode pipeline (pipeline.py).
"""

import base64
import io
import quopri

import pytest

from eml_decoder.decoding.pipeline import build_reader
from eml_decoder.errors import ContentDecodeError


class TestBuildReader:
    """Tests for build_reader()."""

    @pytest.mark.unit
    def test_no_encoding_passes_through(self):
        """Test that content without encoding metadata is untouched."""
        raw = io.BytesIO(b"plain =41 text")
        assert build_reader(raw, "", {}).read() == b"plain =41 text"

    @pytest.mark.unit
    def test_base64(self):
        """Test base64 removal."""
        raw = io.BytesIO(base64.encodebytes(b"payload"))
        assert build_reader(raw, "base64", {}).read() == b"payload"

    @pytest.mark.unit
    def test_quoted_printable(self):
        """Test quoted-printable removal."""
        raw = io.BytesIO(b"a=3Db")
        assert build_reader(raw, "quoted-printable", {}).read() == b"a=b"

    @pytest.mark.unit
    def test_transfer_encoding_match_is_case_sensitive(self):
        """Test that an upper-case token is not recognized."""
        raw = io.BytesIO(b"SGVsbG8=")
        assert build_reader(raw, "BASE64", {}).read() == b"SGVsbG8="

    @pytest.mark.unit
    def test_transfer_encoding_match_is_substring(self):
        """Test that any value containing the token selects the decoder."""
        raw = io.BytesIO(b"SGVsbG8=")
        assert build_reader(raw, "x-base64-ish", {}).read() == b"Hello"

    @pytest.mark.unit
    def test_base64_then_quoted_printable(self):
        """Test both decoders apply, base64 first, when both tokens appear."""
        inner = quopri.encodestring("héllo".encode("utf-8"))
        raw = io.BytesIO(base64.b64encode(inner))
        reader = build_reader(raw, "base64 quoted-printable", {})
        assert reader.read() == "héllo".encode("utf-8")

    @pytest.mark.unit
    def test_charset_transcoding_after_transfer_decoding(self):
        """Test charset conversion runs on the transfer-decoded bytes."""
        raw = io.BytesIO(b"Caf=E9")
        reader = build_reader(raw, "quoted-printable", {"charset": "ISO-8859-1"})
        assert reader.read() == "Café".encode("utf-8")

    @pytest.mark.unit
    def test_unknown_charset_passes_through(self):
        """Test unsupported charsets leave bytes as they are."""
        raw = io.BytesIO(b"\xe9")
        assert build_reader(raw, "", {"charset": "x-mystery"}).read() == b"\xe9"

    @pytest.mark.unit
    def test_utf8_charset_passes_through(self):
        """Test UTF-8 content is not transcoded."""
        raw = io.BytesIO("ü".encode("utf-8"))
        assert build_reader(raw, "8bit", {"charset": "UTF-8"}).read() == "ü".encode("utf-8")

    @pytest.mark.unit
    def test_errors_are_deferred_to_read(self):
        """Test that building the reader never fails on bad content."""
        reader = build_reader(io.BytesIO(b"!!!!"), "base64", {})
        with pytest.raises(ContentDecodeError):
            reader.read()

    @pytest.mark.unit
    def test_unknown_transfer_encoding_passes_through(self):
        """Test unrecognized transfer encodings are ignored."""
        raw = io.BytesIO(b"begin 644 file")
        assert build_reader(raw, "x-uuencode", {}).read() == b"begin 644 file"
