"""Pydantic configuration models for the web.xml context parameter tools."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from webxml_params.config.defaults import (
    DEFAULT_SCAN_CONCURRENCY,
    DEFAULT_SCAN_EXCLUDES,
    DEFAULT_SCAN_PATTERN,
)
from webxml_params.models.enums import OutputFormat


class ParserConfig(BaseModel):
    """lxml parser settings."""

    resolve_entities: bool = False
    no_network: bool = True
    huge_tree: bool = False
    remove_comments: bool = False


class ScanConfig(BaseModel):
    """Settings for scanning a directory tree for descriptors."""

    include_pattern: str = DEFAULT_SCAN_PATTERN
    exclude_patterns: list[str] = Field(default_factory=lambda: list(DEFAULT_SCAN_EXCLUDES))
    max_concurrency: int = Field(default=DEFAULT_SCAN_CONCURRENCY, ge=1, le=64)


class OutputConfig(BaseModel):
    """Output configuration."""

    format: OutputFormat = OutputFormat.TABLE
    verbosity: int = Field(default=0, ge=0, le=3)
    strict: bool = False  # Treat malformed context-param blocks as failures
    log_file: Optional[Path] = None


class WebXmlParamsConfig(BaseModel):
    """Root configuration model."""

    parser: ParserConfig = Field(default_factory=ParserConfig)
    scan: ScanConfig = Field(default_factory=ScanConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    model_config = ConfigDict(extra="ignore")  # Ignore unknown fields in config file
