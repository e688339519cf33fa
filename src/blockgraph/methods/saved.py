"""Analyzer that replays a saved AnalyzeDocument JSON response."""

from __future__ import annotations

import json

from blockgraph.core.blocks import extract_raw_blocks
from blockgraph.core.errors import InvalidInputError
from blockgraph.core.registry import AnalyzerRegistry
from blockgraph.methods.base import BaseAnalyzer


class SavedResponseAnalyzer(BaseAnalyzer):
    """Reads blocks from a response captured earlier, e.g. with the AWS CLI.

    Useful for offline runs and fixtures: no service is called.
    """

    name = "saved"

    def __init__(self, **kwargs) -> None:
        self.kwargs = kwargs

    def analyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        try:
            payload = json.loads(data)
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise InvalidInputError(f"Saved response is not valid JSON: {exc}") from exc
        return extract_raw_blocks(payload)

    @property
    def supported_extensions(self) -> set[str]:
        return {".json"}


AnalyzerRegistry.register("saved", SavedResponseAnalyzer)
