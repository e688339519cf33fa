"""Structured output reconstructed from a block graph."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ResolvedTable(CamelModel):
    """A table grid; every row holds ``column_count`` strings."""

    row_count: int
    column_count: int
    rows: list[list[str]] = Field(default_factory=list)

    def cell(self, row: int, column: int) -> str:
        """Text at a 1-based (row, column) position, "" when outside the grid."""
        if 1 <= row <= len(self.rows) and 1 <= column <= len(self.rows[row - 1]):
            return self.rows[row - 1][column - 1]
        return ""


class ResolvedDocument(CamelModel):
    """Form fields and tables resolved from one analysis result."""

    form_fields: dict[str, str] = Field(default_factory=dict)
    tables: list[ResolvedTable] = Field(default_factory=list)

    @property
    def num_tables(self) -> int:
        return len(self.tables)


class AnalysisResult(ResolvedDocument):
    """Resolved document plus the raw blocks it was built from, passed through untouched."""

    source: str  # file path or upload name
    analyzer: str  # which analyzer produced the blocks
    blocks: list[dict] = Field(default_factory=list)
    metadata: dict = Field(default_factory=dict)
