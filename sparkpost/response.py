"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Uniform response wrapper returned by synchronous requests and by
resolved promises.
"""

from __future__ import annotations

from typing import Any, Dict

from sparkpost.adapters.base import HttpResponse
from sparkpost.logging_config import get_logger

logger = get_logger(__name__)


class SparkPostResponse:
    """Read-only view over an :class:`HttpResponse`.

    ``body`` is the decoded JSON document, or ``None`` when the API sent
    no content or something that is not JSON (the raw text stays available
    through ``text``).
    """

    def __init__(self, response: HttpResponse) -> None:
        self._response = response

    @property
    def raw(self) -> HttpResponse:
        return self._response

    @property
    def status_code(self) -> int:
        return self._response.status_code

    @property
    def reason(self) -> str:
        return self._response.reason

    @property
    def headers(self) -> Dict[str, str]:
        return dict(self._response.headers)

    @property
    def text(self) -> str:
        return self._response.text

    @property
    def body(self) -> Any:
        if not self._response.content:
            return None
        try:
            return self._response.json()
        except ValueError:
            logger.debug("Response content is not JSON", status_code=self.status_code)
            return None

    def __repr__(self) -> str:
        return f"<SparkPostResponse [{self.status_code}]>"
