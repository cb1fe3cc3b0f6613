"""Descriptor utility: resolve a web.xml in an application and extract it."""

from pathlib import Path
from typing import Optional

from webxml_params.config.defaults import DEFAULT_DESCRIPTOR_PATH
from webxml_params.exceptions import UtilityExecutionError, WebXmlParamsError
from webxml_params.extraction.extractor import ContextParamExtractor
from webxml_params.models.enums import ResultType
from webxml_params.models.execution import ExecutionResult
from webxml_params.utils.file_utils import resolve_path
from webxml_params.utils.logging import get_logger

logger = get_logger("orchestration.utility")

DESCRIPTION = (
    "Parses Java web deployment descriptor file ({path}), "
    "identifies all context parameters, and saves them into a map"
)
MALFORMED_WARNING = "This web.xml file has one or more not well formed context-param elements"
ERROR_MESSAGE = "Exception happened when searching context parameters in web.xml file"


class WebXmlContextParams:
    """Reads the context parameters of the web.xml inside an application folder.

    The descriptor path is relative to the application folder passed to
    :meth:`execute`, so one instance can be run against several applications.
    """

    def __init__(
        self,
        relative_path: str | Path = DEFAULT_DESCRIPTOR_PATH,
        extractor: Optional[ContextParamExtractor] = None,
    ):
        self.relative_path = Path(relative_path)
        self._extractor = extractor or ContextParamExtractor()

    @property
    def description(self) -> str:
        return DESCRIPTION.format(path=self.relative_path.as_posix())

    def resolve(self, app_folder: Path) -> Path:
        """Absolute descriptor path for an application folder."""
        return resolve_path(self.relative_path, base=Path(app_folder))

    def execute(self, app_folder: Path) -> ExecutionResult:
        """Extract the descriptor's context parameters.

        Fatal errors are returned as an ERROR result rather than raised.

        Args:
            app_folder: Root folder of the web application.

        Returns:
            VALUE result, WARNING result when blocks were skipped, or ERROR
            result when the descriptor could not be read or parsed.
        """
        descriptor = self.resolve(app_folder)
        logger.debug(f"Executing: {self.description} in {app_folder}")

        try:
            extraction = self._extractor.extract(descriptor)
        except WebXmlParamsError as e:
            error = UtilityExecutionError(ERROR_MESSAGE, source=str(descriptor))
            error.__cause__ = e
            logger.error(f"{ERROR_MESSAGE}: {e}")
            return ExecutionResult(
                type=ResultType.ERROR,
                description=self.description,
                error_message=f"{ERROR_MESSAGE}: {e}",
                exception=error,
            )

        if extraction.had_malformed_entries:
            return ExecutionResult(
                type=ResultType.WARNING,
                description=self.description,
                value=extraction,
                warnings=[MALFORMED_WARNING, *extraction.warnings],
            )

        return ExecutionResult(
            type=ResultType.VALUE,
            description=self.description,
            value=extraction,
        )
