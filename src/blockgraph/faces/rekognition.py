"""Amazon Rekognition face matcher."""

from __future__ import annotations

import logging

from blockgraph.core.errors import AnalysisError
from blockgraph.core.registry import FaceMatcherRegistry
from blockgraph.faces.base import BaseFaceMatcher, FaceComparison

logger = logging.getLogger(__name__)


class RekognitionFaceMatcher(BaseFaceMatcher):
    """Face matcher using Rekognition DetectFaces and CompareFaces."""

    name = "rekognition"

    def __init__(self, region_name: str = "us-east-1", client=None, **kwargs) -> None:
        self.region_name = region_name
        self.kwargs = kwargs
        self._client = client

    @property
    def client(self):
        if self._client is None:
            import boto3

            self._client = boto3.client("rekognition", region_name=self.region_name, **self.kwargs)
        return self._client

    def detect_faces(self, image: bytes) -> list[dict]:
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            response = self.client.detect_faces(Image={"Bytes": image}, Attributes=["ALL"])
        except (BotoCoreError, ClientError) as exc:
            logger.error("Face detection failed: %s", exc)
            raise AnalysisError("Face detection failed") from exc
        return response.get("FaceDetails", [])

    def compare_faces(self, source: bytes, target: bytes, threshold: float = 90.0) -> FaceComparison:
        from botocore.exceptions import BotoCoreError, ClientError

        try:
            response = self.client.compare_faces(
                SourceImage={"Bytes": source},
                TargetImage={"Bytes": target},
                SimilarityThreshold=threshold,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Face comparison failed: %s", exc)
            raise AnalysisError("Face comparison failed") from exc

        matches = response.get("FaceMatches", [])
        similarity = matches[0].get("Similarity", 0.0) if matches else 0.0
        return FaceComparison(similarity=similarity, matches=matches)


FaceMatcherRegistry.register("rekognition", RekognitionFaceMatcher)
