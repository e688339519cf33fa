"""Tests for environment-driven configuration."""

from blockgraph.config import ServiceConfig


def test_defaults(monkeypatch):
    for name in ("AWS_REGION", "BLOCKGRAPH_ANALYZER", "BLOCKGRAPH_SIMILARITY_THRESHOLD"):
        monkeypatch.delenv(name, raising=False)
    config = ServiceConfig.from_env(dotenv=False)
    assert config.aws_region == "us-east-1"
    assert config.analyzer == "textract"
    assert config.similarity_threshold == 90.0
    assert config.max_upload_bytes == 5 * 1024 * 1024


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("AWS_REGION", "eu-central-1")
    monkeypatch.setenv("BLOCKGRAPH_ANALYZER", "remote")
    monkeypatch.setenv("BLOCKGRAPH_REMOTE_URL", "http://gateway/v1")
    monkeypatch.setenv("BLOCKGRAPH_SIMILARITY_THRESHOLD", "85.5")
    config = ServiceConfig.from_env(dotenv=False)
    assert config.aws_region == "eu-central-1"
    assert config.similarity_threshold == 85.5
    assert config.analyzer_kwargs() == {"base_url": "http://gateway/v1"}


def test_collaborator_kwargs():
    config = ServiceConfig(aws_region="ap-south-1")
    assert config.analyzer_kwargs() == {"region_name": "ap-south-1"}
    assert config.face_matcher_kwargs() == {"region_name": "ap-south-1"}
    assert ServiceConfig(analyzer="saved").analyzer_kwargs() == {}
