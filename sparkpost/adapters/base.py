"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

HTTP client capability interfaces and wire data structures.

Two capabilities exist:

- :class:`HttpClient` can send a request and block for the response.
- :class:`HttpAsyncClient` can additionally send without blocking and hand
  back an :class:`asyncio.Future` resolved by the client itself.

The dispatcher decides between them with ``isinstance``.
"""

from __future__ import annotations

import asyncio
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class OutgoingRequest:
    """Transport-ready request built by :meth:`SparkPost.build_request`."""
    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: str = "{}"


@dataclass
class HttpResponse:
    """Transport-neutral response returned by every HTTP client."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    reason: str = ""

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")

    def json(self) -> Any:
        return json.loads(self.content)


class HttpClient(ABC):
    """Abstract base for clients that can send a request synchronously."""

    @abstractmethod
    def send_request(self, request: OutgoingRequest) -> HttpResponse:
        """Send a request and block until the response arrives."""
        ...

    def close(self) -> None:
        """Release client resources."""

    async def aclose(self) -> None:
        """Release client resources from async code."""
        self.close()


class HttpAsyncClient(HttpClient):
    """Abstract base for clients that can also send without blocking."""

    @abstractmethod
    def send_async_request(
        self, request: OutgoingRequest
    ) -> asyncio.Future[HttpResponse]:
        """Start sending a request and return a future for its response.

        Must return immediately. The future resolves with an
        :class:`HttpResponse` or fails with the client's own exception.
        """
        ...
