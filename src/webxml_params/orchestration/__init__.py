"""Orchestration around the extractor: application utility and batch scanning."""

from webxml_params.orchestration.scanner import DescriptorScanner
from webxml_params.orchestration.utility import WebXmlContextParams

__all__ = [
    "DescriptorScanner",
    "WebXmlContextParams",
]
