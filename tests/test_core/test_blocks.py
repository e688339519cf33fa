"""Tests for the block model and payload parsing."""

import pytest

from blockgraph.core.blocks import Block, BlockType, EntityRole, parse_blocks
from blockgraph.core.errors import InvalidInputError


def test_block_from_textract_wire_format():
    block = Block.model_validate({
        "BlockType": "KEY_VALUE_SET",
        "Id": "k1",
        "EntityTypes": ["KEY"],
        "Confidence": 87.5,
        "Geometry": {"BoundingBox": {"Top": 0.1}},
        "Relationships": [
            {"Type": "CHILD", "Ids": ["w1", "w2"]},
            {"Type": "VALUE", "Ids": ["v1"]},
        ],
    })
    assert block.block_type == BlockType.KEY_VALUE_SET
    assert block.is_key
    assert not block.is_value
    assert block.has_role(EntityRole.KEY)
    assert block.related_ids("CHILD") == ["w1", "w2"]
    assert block.related_ids("VALUE") == ["v1"]
    assert block.confidence == 87.5


def test_block_from_field_names():
    block = Block(id="c1", block_type="CELL", row_index=2, column_index=3)
    assert block.row_index == 2
    assert block.column_index == 3
    assert block.relationships == []
    assert block.related_ids("CHILD") == []


def test_related_ids_merges_repeated_relationships():
    block = Block.model_validate({
        "Id": "x",
        "BlockType": "CELL",
        "Relationships": [
            {"Type": "CHILD", "Ids": ["a"]},
            {"Type": "MERGED_CELL", "Ids": ["m"]},
            {"Type": "CHILD", "Ids": ["b"]},
        ],
    })
    assert block.related_ids("CHILD") == ["a", "b"]


def test_unknown_block_type_is_accepted():
    block = Block.model_validate({"Id": "s1", "BlockType": "SELECTION_ELEMENT"})
    assert block.block_type == "SELECTION_ELEMENT"
    assert not block.is_key


def test_null_lists_become_empty():
    block = Block.model_validate({"Id": "w", "BlockType": "WORD", "EntityTypes": None,
                                  "Relationships": None})
    assert block.entity_types == []
    assert block.relationships == []


def test_parse_blocks_accepts_response_and_list(id_card_response):
    from_response = parse_blocks(id_card_response)
    from_list = parse_blocks(id_card_response["Blocks"])
    assert len(from_response) == len(id_card_response["Blocks"])
    assert [b.id for b in from_response] == [b.id for b in from_list]


def test_parse_blocks_rejects_missing_input():
    with pytest.raises(InvalidInputError):
        parse_blocks(None)
    with pytest.raises(InvalidInputError, match="Blocks"):
        parse_blocks({"DocumentMetadata": {}})
    with pytest.raises(InvalidInputError):
        parse_blocks("not blocks")


def test_parse_blocks_rejects_block_without_id():
    with pytest.raises(InvalidInputError, match="Malformed block"):
        parse_blocks([{"BlockType": "WORD", "Text": "orphan"}])
