"""Configuration management for the web.xml context parameter tools."""

from webxml_params.config.loader import load_config
from webxml_params.config.models import (
    OutputConfig,
    ParserConfig,
    ScanConfig,
    WebXmlParamsConfig,
)

__all__ = [
    "OutputConfig",
    "ParserConfig",
    "ScanConfig",
    "WebXmlParamsConfig",
    "load_config",
]
