"""Exception types raised by the context parameter extractor.

- WebXmlParamsError: base class for everything raised by this package
- SourceUnavailableError: the descriptor could not be opened or read
- ParseError: the descriptor is not well-formed XML
- ConfigError: the configuration file is missing or invalid
- UtilityExecutionError: wraps a fatal error inside an ExecutionResult

Malformed context-param blocks are not errors. They are reported on the
ExtractionResult and extraction carries on.
"""

from typing import Optional


class WebXmlParamsError(Exception):
    """Base error for the package."""

    def __init__(self, message: str, source: Optional[str] = None):
        super().__init__(message)
        self.source = source


class SourceUnavailableError(WebXmlParamsError):
    """The input source cannot be opened or read."""


class ParseError(WebXmlParamsError):
    """The input is not well-formed XML."""

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ):
        super().__init__(message, source=source)
        self.line = line
        self.column = column


class ConfigError(WebXmlParamsError):
    """Configuration loading or validation error."""


class UtilityExecutionError(WebXmlParamsError):
    """A descriptor utility failed; the underlying error is in __cause__."""
