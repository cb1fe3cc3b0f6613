"""Read and parse deployment descriptor sources.

A source is one of:

- a filesystem path (``str`` or ``os.PathLike``)
- raw document bytes (``bytes``, ``bytearray`` or ``memoryview``)
- an open file object, binary or text

XML text held in a ``str`` goes through :func:`parse_content` directly, since a
plain string is always taken to be a path.
"""

import os
from pathlib import Path
from typing import IO, Optional, Union

from lxml import etree

from webxml_params.config.models import ParserConfig
from webxml_params.exceptions import ParseError, SourceUnavailableError
from webxml_params.utils.file_utils import read_bytes_async
from webxml_params.utils.logging import get_logger

logger = get_logger("extraction.reader")

Source = Union[str, os.PathLike, bytes, bytearray, memoryview, IO[bytes], IO[str]]


def describe_source(source: Source) -> str:
    """Return a display label for a source."""
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if isinstance(source, (bytes, bytearray, memoryview)):
        return "<bytes>"
    name = getattr(source, "name", None)
    if isinstance(name, str):
        return name
    return "<stream>"


def read_source(source: Source) -> bytes | str:
    """Read the full content of a source.

    Binary sources are returned as bytes so the parser can honour the
    document's own encoding declaration. Text file objects return str.

    Raises:
        SourceUnavailableError: If the source cannot be opened or read.
        ParseError: If a text file object cannot be decoded.
        TypeError: If the source is of an unsupported type.
    """
    label = describe_source(source)

    if isinstance(source, (bytes, bytearray, memoryview)):
        return bytes(source)

    if isinstance(source, (str, os.PathLike)):
        path = Path(source)
        try:
            return path.read_bytes()
        except OSError as e:
            reason = e.strerror or str(e)
            raise SourceUnavailableError(f"Cannot read {label}: {reason}", source=label) from e

    if hasattr(source, "read"):
        try:
            data = source.read()
        except UnicodeDecodeError as e:
            raise ParseError(f"Cannot decode {label}: {e}", source=label) from e
        except (OSError, ValueError) as e:
            raise SourceUnavailableError(f"Cannot read {label}: {e}", source=label) from e
        if not isinstance(data, (bytes, str)):
            raise SourceUnavailableError(
                f"Cannot read {label}: read() returned {type(data).__name__}",
                source=label,
            )
        return data

    raise TypeError(f"Unsupported source type: {type(source).__name__}")


async def read_source_async(path: Path) -> bytes:
    """Read a descriptor file without blocking the event loop.

    Raises:
        SourceUnavailableError: If the file cannot be opened or read.
    """
    try:
        return await read_bytes_async(path)
    except OSError as e:
        reason = e.strerror or str(e)
        raise SourceUnavailableError(f"Cannot read {path}: {reason}", source=str(path)) from e


def build_parser(
    config: Optional[ParserConfig] = None,
    encoding: Optional[str] = None,
) -> etree.XMLParser:
    """Create an lxml parser from configuration.

    Args:
        config: Parser settings (defaults when omitted).
        encoding: Overrides the document's declared encoding.

    Returns:
        A non-validating, non-recovering XMLParser.
    """
    config = config or ParserConfig()
    return etree.XMLParser(
        encoding=encoding,
        resolve_entities=config.resolve_entities,
        no_network=config.no_network,
        huge_tree=config.huge_tree,
        remove_comments=config.remove_comments,
        load_dtd=False,
        dtd_validation=False,
        recover=False,
    )


def parse_content(
    content: bytes | str,
    source: str = "<string>",
    config: Optional[ParserConfig] = None,
) -> etree._Element:
    """Parse document content into an element tree.

    Args:
        content: Raw bytes, or already decoded text.
        source: Label used in error messages.
        config: Parser settings.

    Returns:
        The document's root element.

    Raises:
        ParseError: If the content is empty or not well-formed XML.
    """
    if isinstance(content, str):
        # Text is already decoded; re-encode and ignore any declared encoding
        data = content.encode("utf-8")
        parser = build_parser(config, encoding="utf-8")
    else:
        data = content
        parser = build_parser(config)

    if not data.strip():
        raise ParseError(f"{source}: document is empty", source=source)

    try:
        root = etree.fromstring(data, parser=parser)
    except etree.XMLSyntaxError as e:
        raise ParseError(
            f"{source}: not well-formed XML: {e}",
            source=source,
            line=e.lineno,
            column=e.offset,
        ) from e
    except (ValueError, LookupError) as e:
        raise ParseError(f"{source}: cannot parse document: {e}", source=source) from e

    logger.debug(f"Parsed {source} (root element <{etree.QName(root).localname}>)")
    return root


def parse_document(
    source: Source,
    config: Optional[ParserConfig] = None,
) -> etree._Element:
    """Read and parse a source.

    Raises:
        SourceUnavailableError: If the source cannot be read.
        ParseError: If the source is not well-formed XML.
    """
    content = read_source(source)
    return parse_content(content, describe_source(source), config)
