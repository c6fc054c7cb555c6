"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Base class for endpoint-specific resources.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Union

if TYPE_CHECKING:
    from sparkpost.client import SparkPost
    from sparkpost.promise import SparkPostPromise
    from sparkpost.response import SparkPostResponse

Result = Union["SparkPostResponse", "SparkPostPromise"]


class ResourceBase:
    """Sends requests below a fixed endpoint through a :class:`SparkPost` client.

    Args:
        sparkpost: Client that builds and dispatches the requests.
        endpoint: Path segment after ``/api/<version>/`` (e.g. ``"templates"``).
    """

    def __init__(self, sparkpost: SparkPost, endpoint: str) -> None:
        self.sparkpost = sparkpost
        self.endpoint = endpoint

    def get(
        self,
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return self.request("GET", uri, payload, headers)

    def put(
        self,
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return self.request("PUT", uri, payload, headers)

    def post(
        self,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return self.request("POST", "", payload, headers)

    def delete(
        self,
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        return self.request("DELETE", uri, payload, headers)

    def request(
        self,
        method: str = "GET",
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Result:
        """Send a request to ``<endpoint>`` or ``<endpoint>/<uri>``."""
        path = f"{self.endpoint}/{uri}" if uri else self.endpoint
        return self.sparkpost.request(method, path, payload, headers)
