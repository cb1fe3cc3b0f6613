"""Tests for reading and parsing descriptor sources."""

import io
from pathlib import Path

import pytest

from webxml_params.config.models import ParserConfig
from webxml_params.exceptions import ParseError, SourceUnavailableError
from webxml_params.extraction.reader import (
    describe_source,
    parse_content,
    parse_document,
    read_source,
)


class _FailingStream:
    name = "failing.xml"

    def read(self):
        raise OSError("device not ready")


class TestReadSource:
    """Tests for read_source."""

    def test_read_path(self, sample_web_xml_path: Path):
        """Test reading a path returns the raw bytes."""
        assert read_source(sample_web_xml_path) == sample_web_xml_path.read_bytes()
        assert read_source(str(sample_web_xml_path)) == sample_web_xml_path.read_bytes()

    def test_read_bytes(self):
        """Test bytes-like sources are returned as bytes."""
        assert read_source(bytearray(b"<a/>")) == b"<a/>"
        assert read_source(memoryview(b"<a/>")) == b"<a/>"

    def test_read_text_stream(self):
        """Test a text stream returns text."""
        assert read_source(io.StringIO("<a/>")) == "<a/>"

    def test_missing_path(self, tmp_path: Path):
        """Test a missing file raises SourceUnavailableError."""
        missing = tmp_path / "nope.xml"

        with pytest.raises(SourceUnavailableError) as exc_info:
            read_source(missing)

        assert exc_info.value.source == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_directory(self, tmp_path: Path):
        """Test a directory cannot be read as a source."""
        with pytest.raises(SourceUnavailableError):
            read_source(tmp_path)

    def test_failing_stream(self):
        """Test a read error on a file object raises SourceUnavailableError."""
        with pytest.raises(SourceUnavailableError) as exc_info:
            read_source(_FailingStream())

        assert "failing.xml" in str(exc_info.value)

    def test_closed_stream(self):
        """Test a closed file object raises SourceUnavailableError."""
        stream = io.BytesIO(b"<a/>")
        stream.close()

        with pytest.raises(SourceUnavailableError):
            read_source(stream)

    def test_undecodable_text_stream(self):
        """Test a decoding failure is reported as a parse error."""
        stream = io.TextIOWrapper(io.BytesIO(b"<a>\xff\xfe</a>"), encoding="utf-8")

        with pytest.raises(ParseError):
            read_source(stream)

    def test_unsupported_type(self):
        """Test unsupported source types are rejected."""
        with pytest.raises(TypeError):
            read_source(42)


class TestParse:
    """Tests for parse_content and parse_document."""

    def test_parse_document(self, sample_web_xml_path: Path):
        """Test parsing a file returns the root element."""
        root = parse_document(sample_web_xml_path)

        assert root.tag == "{https://jakarta.ee/xml/ns/jakartaee}web-app"

    def test_text_with_encoding_declaration(self):
        """Test decoded text is accepted even when it declares an encoding."""
        root = parse_content('<?xml version="1.0" encoding="ISO-8859-1"?><web-app>é</web-app>')

        assert root.text == "é"

    def test_unclosed_tag(self):
        """Test an unclosed tag raises ParseError with a position."""
        with pytest.raises(ParseError) as exc_info:
            parse_content(b"<web-app><context-param></web-app>", source="web.xml")

        assert exc_info.value.source == "web.xml"
        assert exc_info.value.line == 1
        assert "web.xml" in str(exc_info.value)

    def test_invalid_bytes_for_encoding(self):
        """Test bytes that do not match the declared encoding raise ParseError."""
        with pytest.raises(ParseError):
            parse_content(b'<?xml version="1.0" encoding="UTF-8"?><a>\xff\xfe</a>')

    @pytest.mark.parametrize("content", [b"", b"   \n", ""])
    def test_empty_document(self, content):
        """Test an empty document raises ParseError."""
        with pytest.raises(ParseError, match="empty"):
            parse_content(content)

    def test_external_entities_not_resolved(self, tmp_path: Path):
        """Test that external entities are not expanded by default."""
        secret = tmp_path / "secret.txt"
        secret.write_text("top secret")
        xml = (
            f'<!DOCTYPE web-app [<!ENTITY ext SYSTEM "{secret.as_uri()}">]>'
            "<web-app><x>&ext;</x></web-app>"
        ).encode()

        root = parse_content(xml, config=ParserConfig())

        assert "top secret" not in (root.findtext("x") or "")


class TestDescribeSource:
    """Tests for describe_source."""

    def test_labels(self, sample_web_xml_path: Path):
        """Test display labels for each kind of source."""
        assert describe_source(sample_web_xml_path) == str(sample_web_xml_path)
        assert describe_source(b"<a/>") == "<bytes>"
        assert describe_source(io.BytesIO(b"<a/>")) == "<stream>"
        with open(sample_web_xml_path, "rb") as f:
            assert describe_source(f) == str(sample_web_xml_path)
