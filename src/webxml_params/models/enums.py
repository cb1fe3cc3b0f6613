"""Enumerations for the web.xml context parameter tools."""

from enum import Enum


class OutputFormat(str, Enum):
    """How the CLI renders extraction results."""

    TABLE = "table"
    JSON = "json"


class ResultType(str, Enum):
    """Outcome of a descriptor utility execution."""

    VALUE = "value"
    WARNING = "warning"
    ERROR = "error"
