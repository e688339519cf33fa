"""
HTTP service exposing block graph resolution and identity verification.

Endpoints:
    POST /v1/analyze   multipart ``file``: analyze an image, return fields, tables and raw blocks
    POST /v1/resolve   JSON AnalyzeDocument response (or bare block list): resolve it
    POST /v1/verify    multipart ``idCard``, ``selfie`` and form field ``userId``
    GET  /health       Health check

Start:
    blockgraph-server                          # defaults (port 8000)
    blockgraph-server --port 9000 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
from typing import Any

import uvicorn
from fastapi import Body, FastAPI, File, Form, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

import blockgraph.faces.rekognition  # noqa: F401
import blockgraph.methods.remote  # noqa: F401
import blockgraph.methods.saved  # noqa: F401
import blockgraph.methods.textract  # noqa: F401
from blockgraph.config import ServiceConfig
from blockgraph.core.document import AnalysisResult, ResolvedDocument
from blockgraph.core.errors import AnalysisError, InvalidInputError
from blockgraph.core.registry import AnalyzerRegistry, FaceMatcherRegistry
from blockgraph.faces.base import BaseFaceMatcher
from blockgraph.methods.base import BaseAnalyzer
from blockgraph.resolve.engine import resolve_payload
from blockgraph.utils.images import preprocess_image, validate_upload
from blockgraph.utils.log import setup_logging
from blockgraph.verification import VerificationResult, verify_identity

logger = logging.getLogger(__name__)


# ── CLI args ────────────────────────────────────────────────────────────
def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Block graph resolution service")
    p.add_argument("--host", default="0.0.0.0", help="Bind host")
    p.add_argument("--port", type=int, default=8000, help="Bind port")
    p.add_argument("--analyzer", default=None, help="Analyzer name (overrides BLOCKGRAPH_ANALYZER)")
    p.add_argument("--log-level", default=None,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


# ── Helpers ─────────────────────────────────────────────────────────────
def _read_upload(upload: UploadFile, max_bytes: int) -> bytes:
    data = upload.file.read()
    validate_upload(upload.content_type, len(data), max_bytes)
    return data


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


# ── FastAPI app ─────────────────────────────────────────────────────────
def create_app(
    config: ServiceConfig | None = None,
    analyzer: BaseAnalyzer | None = None,
    matcher: BaseFaceMatcher | None = None,
) -> FastAPI:
    """Build the app. Collaborators default to the ones named in ``config``."""
    config = config or ServiceConfig.from_env()
    if analyzer is None:
        analyzer = AnalyzerRegistry.create(config.analyzer, **config.analyzer_kwargs())
    if matcher is None:
        matcher = FaceMatcherRegistry.create(config.face_matcher, **config.face_matcher_kwargs())

    app = FastAPI(title="blockgraph")
    app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])
    app.state.config = config
    app.state.analyzer = analyzer
    app.state.matcher = matcher

    @app.exception_handler(InvalidInputError)
    async def _invalid_input(request: Request, exc: InvalidInputError):
        return _error(400, str(exc))

    @app.exception_handler(AnalysisError)
    async def _analysis_failed(request: Request, exc: AnalysisError):
        logger.error("Route handler error: %s", exc)
        return _error(502, str(exc))

    # ── Endpoints ───────────────────────────────────────────────────────
    @app.post("/v1/analyze", response_model=AnalysisResult)
    def analyze(file: UploadFile | None = File(None)):
        if file is None:
            raise InvalidInputError("A 'file' upload is required")
        data = preprocess_image(_read_upload(file, config.max_upload_bytes))
        raw_blocks = analyzer.analyze_bytes(data)
        return analyzer.build_result(file.filename or "upload", raw_blocks)

    @app.post("/v1/resolve", response_model=ResolvedDocument)
    def resolve(payload: Any = Body(None)):
        return resolve_payload(payload)

    @app.post("/v1/verify", response_model=VerificationResult)
    def verify(
        id_card: UploadFile | None = File(None, alias="idCard"),
        selfie: UploadFile | None = File(None),
        user_id: str | None = Form(None, alias="userId"),
    ):
        if id_card is None or selfie is None:
            raise InvalidInputError("Both idCard and selfie files are required")
        if not user_id:
            raise InvalidInputError('"userId" is required')
        return verify_identity(
            _read_upload(id_card, config.max_upload_bytes),
            _read_upload(selfie, config.max_upload_bytes),
            user_id,
            analyzer,
            matcher,
            threshold=config.similarity_threshold,
        )

    @app.get("/health")
    async def health():
        return {"status": "ok", "analyzer": analyzer.name, "faceMatcher": matcher.name}

    return app


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = ServiceConfig.from_env()
    if args.analyzer:
        config.analyzer = args.analyzer
    if args.log_level:
        config.log_level = args.log_level
    setup_logging(config.log_level, config.log_file)

    app = create_app(config)
    logger.info("Serving on %s:%d with analyzer %s", args.host, args.port, config.analyzer)
    uvicorn.run(app, host=args.host, port=args.port)


if __name__ == "__main__":
    main()
