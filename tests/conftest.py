"""Shared fixtures: an AnalyzeDocument response for an ID card and fake collaborators."""

import pytest

from blockgraph.faces.base import BaseFaceMatcher, FaceComparison
from blockgraph.methods.base import BaseAnalyzer


def _word(block_id, text):
    return {"BlockType": "WORD", "Id": block_id, "Text": text, "Confidence": 99.1}


def _kv(block_id, role, child_ids, value_ids=None):
    rels = [{"Type": "CHILD", "Ids": child_ids}]
    if value_ids:
        rels.append({"Type": "VALUE", "Ids": value_ids})
    return {
        "BlockType": "KEY_VALUE_SET",
        "Id": block_id,
        "EntityTypes": [role],
        "Confidence": 95.0,
        "Relationships": rels,
    }


def _cell(block_id, row, col, child_ids):
    return {
        "BlockType": "CELL",
        "Id": block_id,
        "RowIndex": row,
        "ColumnIndex": col,
        "RowSpan": 1,
        "ColumnSpan": 1,
        "Relationships": [{"Type": "CHILD", "Ids": child_ids}] if child_ids else [],
    }


@pytest.fixture
def id_card_response():
    blocks = [
        {"BlockType": "PAGE", "Id": "page-1", "Geometry": {},
         "Relationships": [{"Type": "CHILD", "Ids": ["line-1"]}]},
        {"BlockType": "LINE", "Id": "line-1", "Text": "Name John Doe",
         "Relationships": [{"Type": "CHILD", "Ids": ["w-name", "w-john", "w-doe"]}]},
        _word("w-name", "Name"),
        _word("w-john", "John"),
        _word("w-doe", "Doe"),
        _word("w-date", "Date"),
        _word("w-of", "of"),
        _word("w-birth", "Birth"),
        _word("w-dob", "1990-01-01"),
        _word("w-a", "Class"),
        _word("w-b", "B"),
        _word("w-c", "Expires"),
        _word("w-d", "2030"),
        {"BlockType": "TABLE", "Id": "table-1", "RowCount": 2, "ColumnCount": 2,
         "Relationships": [{"Type": "CHILD", "Ids": ["c-11", "c-12", "c-21", "c-22"]}]},
        _cell("c-11", 1, 1, ["w-a"]),
        _cell("c-12", 1, 2, ["w-b"]),
        _cell("c-21", 2, 1, ["w-c"]),
        _cell("c-22", 2, 2, ["w-d"]),
        _kv("kv-k1", "KEY", ["w-name"], ["kv-v1"]),
        _kv("kv-v1", "VALUE", ["w-john", "w-doe"]),
        _kv("kv-k2", "KEY", ["w-date", "w-of", "w-birth"], ["kv-v2"]),
        _kv("kv-v2", "VALUE", ["w-dob"]),
    ]
    return {"DocumentMetadata": {"Pages": 1}, "Blocks": blocks}


class FakeAnalyzer(BaseAnalyzer):
    """Stands in for a document-analysis service; returns canned blocks."""

    name = "fake"

    def __init__(self, blocks):
        self.blocks = blocks
        self.calls = []

    def analyze_bytes(self, data, **kwargs):
        self.calls.append(data)
        return self.blocks


class FakeMatcher(BaseFaceMatcher):
    """Face matcher with fixed detections and similarity."""

    name = "fake"

    def __init__(self, similarity=97.5, faces=1):
        self.similarity = similarity
        self.faces = faces

    def detect_faces(self, image):
        return [{"Confidence": 99.9}] * self.faces

    def compare_faces(self, source, target, threshold=90.0):
        matches = [{"Similarity": self.similarity}] if self.similarity else []
        return FaceComparison(similarity=self.similarity, matches=matches)


@pytest.fixture
def fake_analyzer(id_card_response):
    return FakeAnalyzer(id_card_response["Blocks"])


@pytest.fixture
def fake_matcher():
    return FakeMatcher()


@pytest.fixture
def png_bytes():
    import io

    from PIL import Image

    out = io.BytesIO()
    Image.new("RGB", (2400, 1200), "white").save(out, format="PNG")
    return out.getvalue()


@pytest.fixture
def make_matcher():
    return FakeMatcher
