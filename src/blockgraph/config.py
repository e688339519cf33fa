"""Service configuration, read from the environment (and a ``.env`` file)."""

from __future__ import annotations

import os

from dotenv import load_dotenv
from pydantic import BaseModel

from blockgraph.utils.images import MAX_UPLOAD_BYTES


class ServiceConfig(BaseModel):
    """Settings for the analysis service and its collaborators."""

    aws_region: str = "us-east-1"
    analyzer: str = "textract"  # name in AnalyzerRegistry
    face_matcher: str = "rekognition"  # name in FaceMatcherRegistry
    remote_url: str | None = None  # base URL for the "remote" analyzer
    similarity_threshold: float = 90.0
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    log_level: str = "INFO"
    log_file: str | None = None

    @classmethod
    def from_env(cls, dotenv: bool = True) -> ServiceConfig:
        if dotenv:
            load_dotenv()
        env = os.environ
        values = {
            "aws_region": env.get("AWS_REGION"),
            "analyzer": env.get("BLOCKGRAPH_ANALYZER"),
            "face_matcher": env.get("BLOCKGRAPH_FACE_MATCHER"),
            "remote_url": env.get("BLOCKGRAPH_REMOTE_URL"),
            "similarity_threshold": env.get("BLOCKGRAPH_SIMILARITY_THRESHOLD"),
            "max_upload_bytes": env.get("BLOCKGRAPH_MAX_UPLOAD_BYTES"),
            "log_level": env.get("BLOCKGRAPH_LOG_LEVEL"),
            "log_file": env.get("BLOCKGRAPH_LOG_FILE"),
        }
        return cls(**{k: v for k, v in values.items() if v})

    def analyzer_kwargs(self) -> dict:
        """Constructor arguments for the configured analyzer."""
        if self.analyzer == "textract":
            return {"region_name": self.aws_region}
        if self.analyzer == "remote":
            return {"base_url": self.remote_url}
        return {}

    def face_matcher_kwargs(self) -> dict:
        if self.face_matcher == "rekognition":
            return {"region_name": self.aws_region}
        return {}
