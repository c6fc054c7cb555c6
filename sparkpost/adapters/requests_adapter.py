"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Synchronous-only transport adapter built on requests.
"""

from __future__ import annotations

import time
from typing import Optional

import requests
from requests.adapters import HTTPAdapter

from sparkpost.adapters.base import HttpClient, HttpResponse, OutgoingRequest
from sparkpost.exceptions import HttpStatusError, TransportError
from sparkpost.logging_config import get_logger, log_api_response

logger = get_logger(__name__)


class RequestsAdapter(HttpClient):
    """Blocking transport using a pooled ``requests.Session``.

    This adapter has no non-blocking send, so a :class:`SparkPost` client
    using it must be configured with ``async=False``.

    Args:
        timeout: Request timeout in seconds.
        http_errors: Raise :class:`HttpStatusError` for status codes >= 400.
        session: Optional pre-configured session.
    """

    def __init__(
        self,
        timeout: float = 30,
        http_errors: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.timeout = timeout
        self.http_errors = http_errors

        if session is None:
            session = requests.Session()
            adapter = HTTPAdapter(pool_connections=10, pool_maxsize=20)
            session.mount("http://", adapter)
            session.mount("https://", adapter)
        self.session = session

    def send_request(self, request: OutgoingRequest) -> HttpResponse:
        start = time.monotonic()
        try:
            resp = self.session.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                data=request.body.encode("utf-8"),
                timeout=self.timeout,
            )
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timeout: {e}") from e
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {e}") from e

        elapsed = (time.monotonic() - start) * 1000
        response = HttpResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            reason=resp.reason or "",
        )
        log_api_response(
            logger, request.method, request.url, response.status_code, round(elapsed, 2)
        )

        if self.http_errors and response.status_code >= 400:
            raise HttpStatusError(response)
        return response

    def close(self) -> None:
        self.session.close()
