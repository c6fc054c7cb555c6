"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Promise wrapper returned by asynchronous requests.
"""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Generator, Optional

from sparkpost.adapters.base import HttpResponse
from sparkpost.response import SparkPostResponse

PENDING = "pending"
FULFILLED = "fulfilled"
REJECTED = "rejected"

FulfilledCallback = Callable[[SparkPostResponse], Any]
RejectedCallback = Callable[[BaseException], Any]


class SparkPostPromise:
    """Deferred result of an asynchronous request.

    Wraps the future handed back by the HTTP client. Awaiting the promise
    yields a :class:`SparkPostResponse`; if the client's future fails, its
    exception propagates unchanged.

    Example::

        promise = sparkpost.request("GET", "templates")
        response = await promise
        print(response.body)
    """

    def __init__(self, deferred: Awaitable[HttpResponse]) -> None:
        self._deferred: asyncio.Future[HttpResponse] = asyncio.ensure_future(deferred)

    @property
    def deferred(self) -> asyncio.Future[HttpResponse]:
        """The underlying future resolved by the HTTP client."""
        return self._deferred

    @property
    def state(self) -> str:
        if not self._deferred.done():
            return PENDING
        if self._deferred.cancelled() or self._deferred.exception() is not None:
            return REJECTED
        return FULFILLED

    async def _resolve(self) -> SparkPostResponse:
        response = await self._deferred
        return SparkPostResponse(response)

    def __await__(self) -> Generator[Any, None, SparkPostResponse]:
        return self._resolve().__await__()

    def then(
        self,
        on_fulfilled: Optional[FulfilledCallback] = None,
        on_rejected: Optional[RejectedCallback] = None,
    ) -> asyncio.Task:
        """Chain callbacks onto the eventual outcome.

        Returns a task resolving to ``on_fulfilled(response)`` or
        ``on_rejected(error)``. Without a matching callback the response is
        passed through or the error re-raised.
        """

        async def _chain() -> Any:
            try:
                response = await self._resolve()
            except Exception as exc:
                if on_rejected is None:
                    raise
                return on_rejected(exc)
            if on_fulfilled is None:
                return response
            return on_fulfilled(response)

        return asyncio.ensure_future(_chain())

    def cancel(self) -> bool:
        """Cancel the underlying future. Returns ``False`` if already done."""
        return self._deferred.cancel()

    def __repr__(self) -> str:
        return f"<SparkPostPromise [{self.state}]>"
