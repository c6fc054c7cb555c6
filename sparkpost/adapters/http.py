"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

HTTP transport adapter built on httpx (default, sync and async).
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

import httpx

from sparkpost.adapters.base import HttpAsyncClient, HttpResponse, OutgoingRequest
from sparkpost.exceptions import HttpStatusError, TransportError
from sparkpost.logging_config import get_logger, log_api_response

logger = get_logger(__name__)


class HttpxAdapter(HttpAsyncClient):
    """Default transport using ``httpx.Client`` and ``httpx.AsyncClient``.

    Both underlying clients are created on first use, so a purely
    synchronous caller never opens an async connection pool and vice versa.

    Args:
        timeout: Request timeout in seconds.
        http_errors: Raise :class:`HttpStatusError` for status codes >= 400.
        client: Optional pre-configured ``httpx.Client``.
        async_client: Optional pre-configured ``httpx.AsyncClient``.
    """

    def __init__(
        self,
        timeout: float = 30,
        http_errors: bool = True,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._timeout = timeout
        self._http_errors = http_errors
        self._client = client
        self._async_client = async_client

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            self._client = httpx.Client(timeout=self._timeout)
        return self._client

    def _ensure_async_client(self) -> httpx.AsyncClient:
        if self._async_client is None:
            self._async_client = httpx.AsyncClient(timeout=self._timeout)
        return self._async_client

    @staticmethod
    def _to_httpx(client: httpx.Client | httpx.AsyncClient, request: OutgoingRequest) -> httpx.Request:
        return client.build_request(
            method=request.method,
            url=request.url,
            headers=request.headers,
            content=request.body.encode("utf-8"),
        )

    def _to_response(self, request: OutgoingRequest, resp: httpx.Response, start: float) -> HttpResponse:
        elapsed = (time.monotonic() - start) * 1000
        response = HttpResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            reason=resp.reason_phrase,
        )
        log_api_response(
            logger, request.method, request.url, response.status_code, round(elapsed, 2)
        )
        if self._http_errors and response.status_code >= 400:
            raise HttpStatusError(response)
        return response

    def send_request(self, request: OutgoingRequest) -> HttpResponse:
        client = self._ensure_client()
        start = time.monotonic()
        try:
            resp = client.send(self._to_httpx(client, request))
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Connection error: {e}") from e
        return self._to_response(request, resp, start)

    async def _send_async(self, request: OutgoingRequest) -> HttpResponse:
        client = self._ensure_async_client()
        start = time.monotonic()
        try:
            resp = await client.send(self._to_httpx(client, request))
        except httpx.TimeoutException as e:
            raise TransportError(f"Request timeout: {e}") from e
        except httpx.HTTPError as e:
            raise TransportError(f"Connection error: {e}") from e
        return self._to_response(request, resp, start)

    def send_async_request(self, request: OutgoingRequest) -> asyncio.Future[HttpResponse]:
        # Requires a running event loop; the task starts on the next loop iteration.
        loop = asyncio.get_running_loop()
        return loop.create_task(self._send_async(request))

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
        if self._async_client is not None:
            # httpx.AsyncClient.aclose() is async; sync teardown drops the
            # reference and leaves socket cleanup to the GC.
            self._async_client = None

    async def aclose(self) -> None:
        """Close both underlying clients from async code."""
        if self._async_client is not None:
            await self._async_client.aclose()
            self._async_client = None
        self.close()
