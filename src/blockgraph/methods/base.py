"""Base class for document-analysis collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from blockgraph.core.blocks import parse_blocks
from blockgraph.core.document import AnalysisResult
from blockgraph.resolve.engine import aresolve_blocks, resolve_blocks
from blockgraph.utils.io import resolve_path


class BaseAnalyzer(ABC):
    """Abstract base for document analyzers.

    An analyzer turns document bytes into the raw block list of an
    AnalyzeDocument-style response. Resolving those blocks into fields and
    tables is shared and lives here.
    """

    name: str  # unique identifier for this analyzer

    @abstractmethod
    def analyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        """Analyze a document and return its raw blocks."""
        ...

    async def aanalyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        """Async variant. Defaults to sync implementation."""
        return self.analyze_bytes(data, **kwargs)

    def analyze(self, file_path: str | Path, **kwargs) -> AnalysisResult:
        """Analyze a file and resolve its block graph."""
        path = resolve_path(file_path)
        raw_blocks = self.analyze_bytes(path.read_bytes(), **kwargs)
        return self.build_result(str(path), raw_blocks)

    async def aanalyze(self, file_path: str | Path, **kwargs) -> AnalysisResult:
        path = resolve_path(file_path)
        raw_blocks = await self.aanalyze_bytes(path.read_bytes(), **kwargs)
        document = await aresolve_blocks(parse_blocks(raw_blocks))
        return self._wrap(str(path), raw_blocks, document)

    def build_result(self, source: str, raw_blocks: list[dict], **metadata) -> AnalysisResult:
        """Resolve ``raw_blocks`` and wrap them with the untouched originals."""
        document = resolve_blocks(parse_blocks(raw_blocks))
        return self._wrap(source, raw_blocks, document, metadata)

    def _wrap(self, source, raw_blocks, document, metadata=None) -> AnalysisResult:
        return AnalysisResult(
            source=source,
            analyzer=self.name,
            form_fields=document.form_fields,
            tables=document.tables,
            blocks=raw_blocks,
            metadata=metadata or {},
        )

    def supports(self, file_path: str | Path) -> bool:
        """Check if this analyzer supports the given file type."""
        suffix = Path(file_path).suffix.lower()
        return suffix in self.supported_extensions

    @property
    def supported_extensions(self) -> set[str]:
        """File extensions this analyzer can handle."""
        return {".pdf", ".png", ".jpg", ".jpeg", ".tiff"}
