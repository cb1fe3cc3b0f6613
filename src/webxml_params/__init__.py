"""webxml-params.

Extracts context parameters (context-param name/value pairs) from Java web
application deployment descriptors (web.xml), tolerating malformed blocks.
"""

__version__ = "0.1.0"

from webxml_params.exceptions import (
    ParseError,
    SourceUnavailableError,
    WebXmlParamsError,
)
from webxml_params.extraction import ContextParamExtractor, extract_context_params
from webxml_params.models import ExtractionResult

__all__ = [
    "__version__",
    "ContextParamExtractor",
    "ExtractionResult",
    "ParseError",
    "SourceUnavailableError",
    "WebXmlParamsError",
    "extract_context_params",
]
