"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Mock transport adapters for local testing.
"""

from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple

from sparkpost.adapters.base import (
    HttpAsyncClient,
    HttpClient,
    HttpResponse,
    OutgoingRequest,
)


class MockAdapter(HttpClient):
    """In-memory synchronous adapter for unit tests.

    Args:
        responses: Mapping from ``(method, url)`` tuples to
            ``HttpResponse`` instances.
        default: Response for requests not in ``responses``. Defaults to
            an empty ``200``.
        error: Exception raised for every send instead of responding.

    Example::

        adapter = MockAdapter({
            ("GET", "https://api.sparkpost.com:443/api/v1/transmissions"):
                HttpResponse(status_code=200, content=b'{"results": []}'),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], HttpResponse]] = None,
        default: Optional[HttpResponse] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self._responses: Dict[Tuple[str, str], HttpResponse] = responses or {}
        self._default = default or HttpResponse(status_code=200, content=b"{}", reason="OK")
        self._error = error
        self._sent: list[OutgoingRequest] = []

    def _respond(self, request: OutgoingRequest) -> HttpResponse:
        self._sent.append(request)
        if self._error is not None:
            raise self._error
        return self._responses.get((request.method.upper(), request.url), self._default)

    def send_request(self, request: OutgoingRequest) -> HttpResponse:
        return self._respond(request)

    def close(self) -> None:
        self._responses.clear()
        self._sent.clear()

    @property
    def sent_requests(self) -> list[OutgoingRequest]:
        """All requests that have been sent through this adapter."""
        return list(self._sent)


class MockAsyncAdapter(MockAdapter, HttpAsyncClient):
    """In-memory adapter supporting both blocking and non-blocking sends."""

    async def _respond_async(self, request: OutgoingRequest) -> HttpResponse:
        return self._respond(request)

    def send_async_request(self, request: OutgoingRequest) -> asyncio.Future[HttpResponse]:
        loop = asyncio.get_running_loop()
        return loop.create_task(self._respond_async(request))
