"""Amazon Textract analyzer (AnalyzeDocument with FORMS and TABLES)."""

from __future__ import annotations

import logging

from blockgraph.core.blocks import extract_raw_blocks
from blockgraph.core.errors import AnalysisError
from blockgraph.core.registry import AnalyzerRegistry
from blockgraph.methods.base import BaseAnalyzer

logger = logging.getLogger(__name__)

FEATURE_TYPES = ("FORMS", "TABLES")


class TextractAnalyzer(BaseAnalyzer):
    """Analyzer backed by the Textract synchronous AnalyzeDocument API.

    Usage:
        analyzer = TextractAnalyzer(region_name="eu-west-1")
        result = analyzer.analyze("id_card.jpg")
        result.form_fields["Name"]

    A preconfigured boto3 client can be passed as ``client``; otherwise one
    is created on first use with the default credential chain.
    """

    name = "textract"

    def __init__(
        self,
        region_name: str = "us-east-1",
        client=None,
        feature_types: tuple[str, ...] = FEATURE_TYPES,
        **kwargs,
    ) -> None:
        self.region_name = region_name
        self.feature_types = feature_types
        self.kwargs = kwargs
        self._client = client

    @property
    def client(self):
        if self._client is None:
            import boto3

            self._client = boto3.client("textract", region_name=self.region_name, **self.kwargs)
        return self._client

    def analyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            response = self.client.analyze_document(
                Document={"Bytes": data},
                FeatureTypes=list(self.feature_types),
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Textract AnalyzeDocument failed: %s", exc)
            raise AnalysisError("Document analysis failed") from exc

        blocks = extract_raw_blocks(response)
        logger.info("Textract returned %d blocks", len(blocks))
        return blocks


AnalyzerRegistry.register("textract", TextractAnalyzer)
