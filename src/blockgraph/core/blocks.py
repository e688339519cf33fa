"""Block graph model as returned by a document-analysis service.

Blocks are parsed from the Textract ``AnalyzeDocument`` wire format
(``Id``, ``BlockType``, ``Relationships`` ...) or from snake_case field
names. Types, roles and relationship kinds are kept as plain strings so
that kinds we do not know about survive parsing and are simply ignored
downstream.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from blockgraph.core.errors import InvalidInputError


class BlockType(StrEnum):
    PAGE = "PAGE"
    LINE = "LINE"
    WORD = "WORD"
    KEY_VALUE_SET = "KEY_VALUE_SET"
    TABLE = "TABLE"
    CELL = "CELL"


class EntityRole(StrEnum):
    KEY = "KEY"
    VALUE = "VALUE"


class RelationshipType(StrEnum):
    CHILD = "CHILD"
    VALUE = "VALUE"


class Relationship(BaseModel):
    """A typed edge from a block to an ordered list of target block ids."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    type: str = Field(alias="Type")
    ids: list[str] = Field(default_factory=list, alias="Ids")

    @field_validator("ids", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value


class Block(BaseModel):
    """A single node of the analysis result (page, line, word, cell ...)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    id: str = Field(alias="Id")
    block_type: str = Field(alias="BlockType")  # see BlockType
    entity_types: list[str] = Field(default_factory=list, alias="EntityTypes")
    text: str | None = Field(default=None, alias="Text")
    confidence: float | None = Field(default=None, alias="Confidence")
    relationships: list[Relationship] = Field(default_factory=list, alias="Relationships")
    row_index: int | None = Field(default=None, alias="RowIndex")  # CELL only, 1-based
    column_index: int | None = Field(default=None, alias="ColumnIndex")
    row_count: int | None = Field(default=None, alias="RowCount")  # TABLE only
    column_count: int | None = Field(default=None, alias="ColumnCount")

    @field_validator("entity_types", "relationships", mode="before")
    @classmethod
    def none_as_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def related_ids(self, kind: str) -> list[str]:
        """All target ids of relationships of ``kind``, in relationship order."""
        ids: list[str] = []
        for rel in self.relationships:
            if rel.type == kind:
                ids.extend(rel.ids)
        return ids

    def has_role(self, role: str) -> bool:
        return role in self.entity_types

    @property
    def is_key(self) -> bool:
        return self.block_type == BlockType.KEY_VALUE_SET and self.has_role(EntityRole.KEY)

    @property
    def is_value(self) -> bool:
        return self.block_type == BlockType.KEY_VALUE_SET and self.has_role(EntityRole.VALUE)


def extract_raw_blocks(payload: Any) -> list[dict]:
    """Return the raw block dicts of a block list or an AnalyzeDocument response."""
    if payload is None:
        raise InvalidInputError("A block list is required")
    if isinstance(payload, dict):
        payload = payload.get("Blocks", payload.get("blocks"))
        if payload is None:
            raise InvalidInputError("Analysis payload has no 'Blocks' list")
    if not isinstance(payload, list):
        raise InvalidInputError(
            f"Expected a list of blocks, got {type(payload).__name__}"
        )
    return payload


def parse_blocks(payload: Any) -> list[Block]:
    """Parse raw blocks (or an AnalyzeDocument response) into Block models."""
    raw_blocks = extract_raw_blocks(payload)
    try:
        return [
            block if isinstance(block, Block) else Block.model_validate(block)
            for block in raw_blocks
        ]
    except ValidationError as exc:
        raise InvalidInputError(f"Malformed block in analysis payload: {exc}") from exc
