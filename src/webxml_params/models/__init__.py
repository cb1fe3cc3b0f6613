"""Domain models for the web.xml context parameter tools."""

from webxml_params.models.enums import OutputFormat, ResultType
from webxml_params.models.execution import ExecutionResult
from webxml_params.models.params import ContextParam, ExtractionResult, MalformedBlock
from webxml_params.models.scan import DescriptorFailure, ScanReport

__all__ = [
    "ContextParam",
    "DescriptorFailure",
    "ExecutionResult",
    "ExtractionResult",
    "MalformedBlock",
    "OutputFormat",
    "ResultType",
    "ScanReport",
]
