"""Pytest configuration and fixtures."""

from pathlib import Path

import pytest


@pytest.fixture
def fixtures_dir() -> Path:
    """Get the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def sample_web_xml_path(fixtures_dir: Path) -> Path:
    """Namespaced descriptor with valid, reordered, duplicate and malformed blocks."""
    return fixtures_dir / "sample_web.xml"


@pytest.fixture
def legacy_web_xml_path(fixtures_dir: Path) -> Path:
    """Servlet 2.3 descriptor with a DOCTYPE and ISO-8859-1 encoding."""
    return fixtures_dir / "legacy_web.xml"


@pytest.fixture
def broken_web_xml_path(fixtures_dir: Path) -> Path:
    """Descriptor that is not well-formed XML."""
    return fixtures_dir / "broken_web.xml"


@pytest.fixture
def make_web_xml():
    """Build a web.xml document from context-param block bodies."""

    def _make(*blocks: str) -> str:
        body = "\n".join(f"  <context-param>{block}</context-param>" for block in blocks)
        return f'<?xml version="1.0" encoding="UTF-8"?>\n<web-app>\n{body}\n</web-app>\n'

    return _make


@pytest.fixture
def app_folder(tmp_path: Path, sample_web_xml_path: Path) -> Path:
    """A Maven-style web application with the sample descriptor in place."""
    web_inf = tmp_path / "src" / "main" / "webapp" / "WEB-INF"
    web_inf.mkdir(parents=True)
    (web_inf / "web.xml").write_bytes(sample_web_xml_path.read_bytes())
    return tmp_path
