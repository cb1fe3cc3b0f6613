"""Models for scanning a directory tree for deployment descriptors."""

from typing import Optional

from pydantic import BaseModel, Field, computed_field

from webxml_params.models.params import ExtractionResult


class DescriptorFailure(BaseModel):
    """A descriptor that could not be read or parsed."""

    path: str
    error_type: str
    message: str


class ScanReport(BaseModel):
    """Results of extracting context parameters from every descriptor found."""

    root_path: str
    pattern: str
    results: list[ExtractionResult] = Field(default_factory=list)
    failures: list[DescriptorFailure] = Field(default_factory=list)
    duration_seconds: Optional[float] = None

    @computed_field
    @property
    def total_descriptors(self) -> int:
        """Number of descriptors found, including failed ones."""
        return len(self.results) + len(self.failures)

    @computed_field
    @property
    def had_malformed_entries(self) -> bool:
        """Whether any descriptor had a skipped context-param block."""
        return any(result.had_malformed_entries for result in self.results)

    @property
    def has_failures(self) -> bool:
        """Whether any descriptor failed outright."""
        return len(self.failures) > 0
