"""Tests for the block index."""

from blockgraph.core.blocks import Block, Relationship
from blockgraph.resolve.index import BlockIndex


def _word(block_id, text=None):
    return Block(id=block_id, block_type="WORD", text=text)


def _parent(block_id, child_ids):
    return Block(id=block_id, block_type="LINE",
                 relationships=[Relationship(type="CHILD", ids=child_ids)])


def test_empty_index():
    index = BlockIndex([])
    assert len(index) == 0
    assert index.get("missing") is None


def test_later_duplicate_wins():
    index = BlockIndex([_word("w1", "first"), _word("w1", "second")])
    assert len(index) == 1
    assert index.get("w1").text == "second"


def test_resolve_skips_unknown_ids():
    index = BlockIndex([_word("a", "A"), _word("b", "B")])
    assert [b.id for b in index.resolve(["a", "zzz", "b"])] == ["a", "b"]
    assert "a" in index
    assert "zzz" not in index


def test_child_text_joins_in_relationship_order():
    blocks = [_word("w2", "Doe"), _word("w1", "John"), _parent("line", ["w1", "w2"])]
    index = BlockIndex(blocks)
    assert index.child_text(blocks[2]) == "John Doe"


def test_child_text_skips_textless_and_unresolved_children():
    blocks = [_word("w1", "John"), _word("w2"), _word("w3", ""),
              _parent("line", ["w1", "w2", "ghost", "w3"])]
    index = BlockIndex(blocks)
    assert index.child_text(blocks[-1]) == "John"


def test_child_text_trims_and_handles_no_children():
    blocks = [_word("w1", " padded "), _parent("line", ["w1"]), _parent("empty", [])]
    index = BlockIndex(blocks)
    assert index.child_text(blocks[1]) == "padded"
    assert index.child_text(blocks[2]) == ""
