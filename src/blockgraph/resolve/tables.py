"""Table grid resolution.

Cells are attributed to the nearest preceding TABLE block in list order.
The scan keeps an explicit cursor that is either ``NoCurrentTable`` or
``HasCurrentTable``; cells seen while there is no current table are
dropped.

Cells positioned beyond a table's declared size grow the grid: rows are
appended and all rows are widened so the grid stays rectangular, and the
emitted ``row_count``/``column_count`` reflect the grown size.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from blockgraph.core.blocks import Block, BlockType
from blockgraph.core.document import ResolvedTable
from blockgraph.resolve.index import BlockIndex

logger = logging.getLogger(__name__)


class _GridBuilder:
    """Mutable grid for one table, owned by a single resolver pass."""

    def __init__(self, row_count: int, column_count: int) -> None:
        self.column_count = max(column_count, 0)
        self.rows: list[list[str]] = [
            [""] * self.column_count for _ in range(max(row_count, 0))
        ]

    def place(self, row: int, column: int, text: str) -> None:
        if column >= self.column_count:
            extra = column + 1 - self.column_count
            for cells in self.rows:
                cells.extend([""] * extra)
            self.column_count = column + 1
        while len(self.rows) <= row:
            self.rows.append([""] * self.column_count)
        self.rows[row][column] = text

    def build(self) -> ResolvedTable:
        return ResolvedTable(
            row_count=len(self.rows),
            column_count=self.column_count,
            rows=[list(cells) for cells in self.rows],
        )


@dataclass(frozen=True)
class NoCurrentTable:
    pass


@dataclass(frozen=True)
class HasCurrentTable:
    grid: _GridBuilder


TableCursor = NoCurrentTable | HasCurrentTable


def _place_cell(grid: _GridBuilder, cell: Block, index: BlockIndex) -> None:
    if cell.row_index is None or cell.column_index is None:
        logger.debug("Dropping cell %s without a row/column index", cell.id)
        return
    row, column = cell.row_index - 1, cell.column_index - 1
    if row < 0 or column < 0:
        logger.debug("Dropping cell %s at invalid position (%d, %d)",
                     cell.id, cell.row_index, cell.column_index)
        return
    grid.place(row, column, index.child_text(cell))


def _step(cursor: TableCursor, block: Block, index: BlockIndex,
          grids: list[_GridBuilder]) -> TableCursor:
    if block.block_type == BlockType.TABLE:
        grid = _GridBuilder(block.row_count or 0, block.column_count or 0)
        grids.append(grid)
        return HasCurrentTable(grid)

    if block.block_type == BlockType.CELL:
        match cursor:
            case HasCurrentTable(grid=grid):
                _place_cell(grid, block, index)
            case NoCurrentTable():
                logger.debug("Dropping cell %s that precedes any table", block.id)

    return cursor


def resolve_tables(blocks: Sequence[Block], index: BlockIndex | None = None) -> list[ResolvedTable]:
    """Rebuild the tables of a block list, in the order their TABLE blocks appear."""
    if index is None:
        index = BlockIndex(blocks)

    grids: list[_GridBuilder] = []
    cursor: TableCursor = NoCurrentTable()
    for block in blocks:
        cursor = _step(cursor, block, index, grids)
    return [grid.build() for grid in grids]
