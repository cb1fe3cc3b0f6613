"""Execution result returned by the descriptor utility."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from webxml_params.models.enums import ResultType
from webxml_params.models.params import ExtractionResult


class ExecutionResult(BaseModel):
    """Outcome of running a descriptor utility against an application folder.

    A VALUE result carries the extracted parameters. A WARNING result carries
    them too, along with the warning text. An ERROR result carries the
    exception instead of a value.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    type: ResultType
    description: str
    value: Optional[ExtractionResult] = None
    warnings: list[str] = Field(default_factory=list)
    error_message: Optional[str] = None
    exception: Optional[BaseException] = Field(default=None, exclude=True)

    @property
    def is_successful(self) -> bool:
        """Whether a value was produced (with or without warnings)."""
        return self.type in (ResultType.VALUE, ResultType.WARNING)
