"""
Remote release fetcher.

Performs a single GET against the release API and classifies the outcome.
There is no retry: a failed fetch yields no data and the caller tries again
on its next call.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = httpx.Timeout(10.0, connect=5.0)


class FetchError(Enum):
    """Reasons a fetch produced no usable data."""

    TRANSPORT = "transport"
    BAD_STATUS = "bad_status"
    EMPTY_BODY = "empty_body"
    INVALID_JSON = "invalid_json"


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one fetch: either decoded data or an error."""

    data: dict[str, Any] | None = None
    error: FetchError | None = None
    status_code: int | None = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None and self.data is not None

    @classmethod
    def failure(cls, error: FetchError, status_code: int | None = None, detail: str = "") -> "FetchResult":
        return cls(data=None, error=error, status_code=status_code, detail=detail)


class ReleaseFetcher:
    """Fetches and decodes release JSON over HTTP."""

    def __init__(self, client: httpx.Client | None = None):
        self.client = client or httpx.Client(timeout=DEFAULT_TIMEOUT, follow_redirects=True)

    def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and decode a JSON object from the body."""
        try:
            resp = self.client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.debug(f"[FETCH] Transport error for {url}: {type(e).__name__}: {e}")
            return FetchResult.failure(FetchError.TRANSPORT, detail=str(e))

        if resp.status_code != 200:
            return FetchResult.failure(
                FetchError.BAD_STATUS, status_code=resp.status_code, detail=f"HTTP {resp.status_code}"
            )

        body = resp.text
        if not body.strip():
            return FetchResult.failure(FetchError.EMPTY_BODY, status_code=resp.status_code)

        try:
            data = json.loads(body)
        except (ValueError, RecursionError) as e:
            # ValueError also covers integer literals over the digit limit
            return FetchResult.failure(FetchError.INVALID_JSON, status_code=resp.status_code, detail=str(e))

        if not isinstance(data, dict):
            return FetchResult.failure(
                FetchError.INVALID_JSON,
                status_code=resp.status_code,
                detail=f"Expected a JSON object, got {type(data).__name__}",
            )

        logger.debug(f"[FETCH] {url} -> {len(resp.content)} bytes")
        return FetchResult(data=data, status_code=resp.status_code)

    def close(self) -> None:
        self.client.close()
