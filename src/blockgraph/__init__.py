"""Reconstruct form fields and tables from document-analysis block graphs."""

from blockgraph.core.blocks import Block, BlockType, parse_blocks
from blockgraph.core.document import AnalysisResult, ResolvedDocument, ResolvedTable
from blockgraph.core.errors import AnalysisError, InvalidInputError
from blockgraph.core.registry import AnalyzerRegistry, FaceMatcherRegistry
from blockgraph.resolve.engine import aresolve_blocks, resolve_blocks, resolve_payload

__all__ = [
    "AnalysisError",
    "AnalysisResult",
    "AnalyzerRegistry",
    "Block",
    "BlockType",
    "FaceMatcherRegistry",
    "InvalidInputError",
    "ResolvedDocument",
    "ResolvedTable",
    "aresolve_blocks",
    "parse_blocks",
    "resolve_blocks",
    "resolve_payload",
]
