"""Client analyzer for an HTTP gateway in front of a document-analysis service."""

from __future__ import annotations

import asyncio
import logging
import time

import httpx

from blockgraph.core.blocks import extract_raw_blocks
from blockgraph.core.errors import AnalysisError
from blockgraph.core.registry import AnalyzerRegistry
from blockgraph.methods.base import BaseAnalyzer

logger = logging.getLogger(__name__)

_TRANSIENT_ERRORS = (httpx.ReadError, httpx.ConnectError, httpx.TimeoutException)


class RemoteAnalyzer(BaseAnalyzer):
    """Posts the raw document to ``{base_url}/analyze``.

    The gateway answers with an AnalyzeDocument-shaped JSON body
    (``{"Blocks": [...]}``). Transient transport errors are retried with a
    linearly growing delay.

    Usage:
        analyzer = RemoteAnalyzer(base_url="http://analysis.internal:8080/v1")
        result = analyzer.analyze("id_card.png")
    """

    name = "remote"

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = 60.0,
        retries: int = 3,
        retry_delay: float = 2.0,
        **kwargs,
    ) -> None:
        if not base_url:
            raise ValueError("RemoteAnalyzer requires a base_url")
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self.kwargs = kwargs

    @property
    def _headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/octet-stream"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        return headers

    def _blocks_from(self, resp: httpx.Response) -> list[dict]:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Analysis gateway returned %s", exc.response.status_code)
            raise AnalysisError("Document analysis failed") from exc
        return extract_raw_blocks(resp.json())

    def analyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        last_exc: Exception | None = None
        for attempt in range(1, self.retries + 1):
            try:
                resp = httpx.post(
                    f"{self.base_url}/analyze",
                    content=data,
                    headers=self._headers,
                    timeout=self.timeout,
                )
                return self._blocks_from(resp)
            except _TRANSIENT_ERRORS as exc:
                last_exc = exc
                logger.warning("Analysis request failed (attempt %d/%d): %s",
                               attempt, self.retries, exc)
                if attempt < self.retries:
                    time.sleep(self.retry_delay * attempt)
        raise AnalysisError("Document analysis failed") from last_exc

    async def aanalyze_bytes(self, data: bytes, **kwargs) -> list[dict]:
        last_exc: Exception | None = None
        for attempt in range(1, self.retries + 1):
            try:
                async with httpx.AsyncClient(timeout=self.timeout) as client:
                    resp = await client.post(
                        f"{self.base_url}/analyze",
                        content=data,
                        headers=self._headers,
                    )
                    return self._blocks_from(resp)
            except _TRANSIENT_ERRORS as exc:
                last_exc = exc
                logger.warning("Analysis request failed (attempt %d/%d): %s",
                               attempt, self.retries, exc)
                if attempt < self.retries:
                    await asyncio.sleep(self.retry_delay * attempt)
        raise AnalysisError("Document analysis failed") from last_exc


AnalyzerRegistry.register("remote", RemoteAnalyzer)
