"""Shared utilities for the web.xml context parameter tools."""

from webxml_params.utils.file_utils import (
    find_files,
    read_bytes_async,
    resolve_path,
)
from webxml_params.utils.logging import get_logger, setup_logging

__all__ = [
    "find_files",
    "get_logger",
    "read_bytes_async",
    "resolve_path",
    "setup_logging",
]
