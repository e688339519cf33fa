"""Form field (key/value pair) resolution."""

from __future__ import annotations

from collections.abc import Sequence

from blockgraph.core.blocks import Block, RelationshipType
from blockgraph.resolve.index import BlockIndex


def _value_block(key: Block, index: BlockIndex) -> Block | None:
    """The VALUE-role block paired with ``key``, if it resolves."""
    for candidate in index.resolve(key.related_ids(RelationshipType.VALUE)):
        if candidate.is_value:
            return candidate
    return None


def resolve_fields(blocks: Sequence[Block], index: BlockIndex | None = None) -> dict[str, str]:
    """Build the ordered label -> value mapping from KEY/VALUE block pairs.

    Keys without a resolvable value, and pairs where either side resolves
    to empty text, are left out. A repeated label keeps its first position
    and takes the later value.
    """
    if index is None:
        index = BlockIndex(blocks)

    fields: dict[str, str] = {}
    for block in blocks:
        if not block.is_key:
            continue
        value_block = _value_block(block, index)
        if value_block is None:
            continue
        label = index.child_text(block)
        value = index.child_text(value_block)
        if label and value:
            fields[label] = value
    return fields
