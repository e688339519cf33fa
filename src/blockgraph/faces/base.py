"""Base class for face detection/comparison collaborators."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, Field


class FaceComparison(BaseModel):
    """Outcome of comparing the face in a source image against a target."""

    similarity: float = 0.0  # similarity of the best match, 0 when none
    matches: list[dict] = Field(default_factory=list)


class BaseFaceMatcher(ABC):
    """Abstract base for face matchers."""

    name: str

    @abstractmethod
    def detect_faces(self, image: bytes) -> list[dict]:
        """Return the faces detected in ``image`` (empty when none)."""
        ...

    @abstractmethod
    def compare_faces(self, source: bytes, target: bytes, threshold: float) -> FaceComparison:
        """Compare the face in ``source`` with the faces in ``target``."""
        ...
