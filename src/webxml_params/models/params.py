"""Context parameter extraction models."""

from collections import Counter
from typing import Optional

from pydantic import BaseModel, Field, computed_field


class ContextParam(BaseModel):
    """A name/value pair taken from one well-formed context-param block."""

    name: str
    value: str
    line: Optional[int] = None  # Source line of the context-param element


class MalformedBlock(BaseModel):
    """A context-param block that was skipped."""

    position: int  # 1-based index among all context-param elements
    line: Optional[int] = None
    child_tags: list[str] = Field(default_factory=list)
    reason: str

    def describe(self) -> str:
        """Human readable one-liner for logs and CLI output."""
        where = f"line {self.line}" if self.line is not None else "unknown line"
        return f"context-param #{self.position} ({where}): {self.reason}"


class ExtractionResult(BaseModel):
    """Context parameters found in one deployment descriptor."""

    source: Optional[str] = None

    # Last occurrence wins on duplicate names
    params: dict[str, str] = Field(default_factory=dict)

    # Every valid entry in document order, duplicates included
    entries: list[ContextParam] = Field(default_factory=list)

    malformed: list[MalformedBlock] = Field(default_factory=list)

    @computed_field
    @property
    def had_malformed_entries(self) -> bool:
        """Whether one or more context-param blocks were skipped."""
        return len(self.malformed) > 0

    @property
    def warnings(self) -> list[str]:
        """Warning messages, one per skipped block."""
        return [block.describe() for block in self.malformed]

    @property
    def duplicate_names(self) -> list[str]:
        """Names declared more than once, in order of first appearance."""
        counts = Counter(entry.name for entry in self.entries)
        seen: list[str] = []
        for entry in self.entries:
            if counts[entry.name] > 1 and entry.name not in seen:
                seen.append(entry.name)
        return seen

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Look up a parameter value by name."""
        return self.params.get(name, default)
