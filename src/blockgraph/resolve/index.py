"""Identifier index over a block list."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from blockgraph.core.blocks import Block, RelationshipType

logger = logging.getLogger(__name__)


class BlockIndex:
    """Lookup from block id to block, used to follow relationship edges.

    If an id occurs more than once the later block wins. References to ids
    that are not in the index resolve to nothing.
    """

    def __init__(self, blocks: Iterable[Block]) -> None:
        self._blocks: dict[str, Block] = {}
        for block in blocks:
            self._blocks[block.id] = block

    def get(self, block_id: str) -> Block | None:
        return self._blocks.get(block_id)

    def resolve(self, ids: Iterable[str]) -> Iterator[Block]:
        """Yield the blocks for ``ids`` in order, skipping unknown ids."""
        for block_id in ids:
            block = self._blocks.get(block_id)
            if block is None:
                logger.debug("Skipping unresolved block reference %s", block_id)
                continue
            yield block

    def child_text(self, block: Block) -> str:
        """Space-joined text of the block's CHILD blocks, trimmed."""
        children = self.resolve(block.related_ids(RelationshipType.CHILD))
        return " ".join(child.text for child in children if child.text).strip()

    def __contains__(self, block_id: str) -> bool:
        return block_id in self._blocks

    def __len__(self) -> int:
        return len(self._blocks)
