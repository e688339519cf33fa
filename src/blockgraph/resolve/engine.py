"""Entry points that run the index builder and both resolvers."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable
from typing import Any

from blockgraph.core.blocks import Block, parse_blocks
from blockgraph.core.document import ResolvedDocument
from blockgraph.core.errors import InvalidInputError
from blockgraph.resolve.fields import resolve_fields
from blockgraph.resolve.index import BlockIndex
from blockgraph.resolve.tables import resolve_tables

logger = logging.getLogger(__name__)


def _prepare(blocks: Iterable[Block] | None) -> tuple[list[Block], BlockIndex]:
    if blocks is None:
        raise InvalidInputError("A block list is required")
    blocks = list(blocks)
    return blocks, BlockIndex(blocks)


def resolve_blocks(blocks: Iterable[Block] | None) -> ResolvedDocument:
    """Resolve form fields and tables from a block list.

    The input is only read. Unresolvable references, keys without values
    and cells outside any table never raise; a missing block list raises
    ``InvalidInputError``.
    """
    blocks, index = _prepare(blocks)
    document = ResolvedDocument(
        form_fields=resolve_fields(blocks, index),
        tables=resolve_tables(blocks, index),
    )
    logger.debug(
        "Resolved %d blocks into %d fields and %d tables",
        len(blocks), len(document.form_fields), document.num_tables,
    )
    return document


async def aresolve_blocks(blocks: Iterable[Block] | None) -> ResolvedDocument:
    """Async variant. Runs the field and table passes concurrently in threads."""
    blocks, index = _prepare(blocks)
    form_fields, tables = await asyncio.gather(
        asyncio.to_thread(resolve_fields, blocks, index),
        asyncio.to_thread(resolve_tables, blocks, index),
    )
    return ResolvedDocument(form_fields=form_fields, tables=tables)


def resolve_payload(payload: Any) -> ResolvedDocument:
    """Parse a raw block list or AnalyzeDocument response and resolve it."""
    return resolve_blocks(parse_blocks(payload))
