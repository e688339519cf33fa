"""Identity verification: ID card analysis plus selfie face comparison."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from pydantic import Field

from blockgraph.core.document import ResolvedDocument, CamelModel
from blockgraph.core.errors import AnalysisError
from blockgraph.faces.base import BaseFaceMatcher
from blockgraph.methods.base import BaseAnalyzer
from blockgraph.utils.images import preprocess_image

logger = logging.getLogger(__name__)

DEFAULT_SIMILARITY_THRESHOLD = 90.0


class VerificationResult(CamelModel):
    success: bool
    similarity: float
    verification_id: str
    timestamp: str
    document: ResolvedDocument = Field(default_factory=ResolvedDocument)


def verify_identity(
    id_card: bytes,
    selfie: bytes,
    user_id: str,
    analyzer: BaseAnalyzer,
    matcher: BaseFaceMatcher,
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> VerificationResult:
    """Resolve the ID card's fields and tables and match its face against the selfie.

    The card is not checked for authenticity; ``success`` only reflects the
    face similarity reaching ``threshold``.
    """
    id_card = preprocess_image(id_card)
    selfie = preprocess_image(selfie)

    analysis = analyzer.build_result("idCard", analyzer.analyze_bytes(id_card))

    if not matcher.detect_faces(id_card) or not matcher.detect_faces(selfie):
        raise AnalysisError("No face detected in one or both images")

    comparison = matcher.compare_faces(id_card, selfie, threshold)
    logger.info("Verification for %s: similarity %.2f", user_id, comparison.similarity)

    return VerificationResult(
        success=comparison.similarity >= threshold,
        similarity=comparison.similarity,
        verification_id=user_id,
        timestamp=datetime.now(timezone.utc).isoformat(),
        document=ResolvedDocument(form_fields=analysis.form_fields, tables=analysis.tables),
    )
