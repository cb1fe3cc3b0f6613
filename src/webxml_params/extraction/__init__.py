"""Reading, parsing and context parameter extraction."""

from webxml_params.extraction.extractor import ContextParamExtractor, extract_context_params
from webxml_params.extraction.reader import (
    describe_source,
    parse_content,
    parse_document,
    read_source,
)

__all__ = [
    "ContextParamExtractor",
    "describe_source",
    "extract_context_params",
    "parse_content",
    "parse_document",
    "read_source",
]
