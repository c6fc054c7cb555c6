"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

SparkPost API client.

Builds authenticated requests against the SparkPost REST API and dispatches
them through an injected HTTP client, either blocking for a
:class:`SparkPostResponse` or returning a :class:`SparkPostPromise`.

Quick start::

    from sparkpost import SparkPost
    from sparkpost.adapters import HttpxAdapter

    sparkpost = SparkPost(HttpxAdapter(), {"key": "YOUR_API_KEY", "async": False})
    response = sparkpost.request("GET", "templates")

Asynchronous (the default)::

    sparkpost = SparkPost(HttpxAdapter(), "YOUR_API_KEY")
    response = await sparkpost.request("GET", "templates")
"""

from __future__ import annotations

import json
from typing import Any, Dict, Mapping, Optional, Union

from sparkpost._version import __version__
from sparkpost.adapters.base import HttpAsyncClient, HttpClient, OutgoingRequest
from sparkpost.config.settings import OptionsInput, load_config, merge_options
from sparkpost.exceptions import CapabilityError, RequestError
from sparkpost.logging_config import (
    correlation_scope,
    get_logger,
    log_api_failure,
    log_api_request,
    setup_logging,
)
from sparkpost.promise import SparkPostPromise
from sparkpost.resources.transmissions import Transmission
from sparkpost.response import SparkPostResponse

logger = get_logger(__name__)

USER_AGENT = f"python-sparkpost/{__version__}"


def _format_param(value: Any) -> str:
    if isinstance(value, (list, tuple)):
        return ",".join(_format_param(item) for item in value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


class SparkPost:
    """Client for the SparkPost API.

    Args:
        http_client: Transport used to send requests. Must be an
            :class:`HttpAsyncClient` unless ``async`` is disabled.
        options: An API key string, or a mapping over ``host``,
            ``protocol``, ``port``, ``key``, ``version`` and ``async``.

    Raises:
        ConfigurationError: If no usable API key is supplied.
        TypeError: If ``http_client`` is not an :class:`HttpClient`.
    """

    def __init__(self, http_client: HttpClient, options: OptionsInput) -> None:
        self.options: Optional[Dict[str, Any]] = None
        self.set_options(options)
        self.set_http_client(http_client)
        self._setup_endpoints()

    @classmethod
    def from_config(
        cls,
        http_client: HttpClient,
        config_path: Optional[str] = None,
        configure_logging: bool = False,
    ) -> SparkPost:
        """Create a client from a YAML configuration file.

        Args:
            http_client: Transport used to send requests.
            config_path: Path to the file. Defaults to ``~/.sparkpost/config.yaml``.
            configure_logging: Also apply the file's ``logging`` section.
        """
        config = load_config(config_path)
        if configure_logging:
            setup_logging(
                level=config.logging.level,
                log_file=config.logging.file or None,
                json_format=config.logging.json_format,
            )
        return cls(http_client, config.options)

    # -- Dispatch -----------------------------------------------------------

    def request(
        self,
        method: str = "GET",
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Union[SparkPostResponse, SparkPostPromise]:
        """Send a request, synchronously or not depending on the ``async`` option.

        Args:
            method: HTTP method.
            uri: Path below ``/api/<version>/``.
            payload: Query parameters for GET, JSON body for other methods.
            headers: Extra request headers.

        Returns:
            A :class:`SparkPostPromise` when ``async`` is ``True``, otherwise
            a :class:`SparkPostResponse`.
        """
        if self.options["async"] is True:
            return self.async_request(method, uri, payload, headers)
        return self.sync_request(method, uri, payload, headers)

    def sync_request(
        self,
        method: str = "GET",
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> SparkPostResponse:
        """Send a request and block for the response.

        Raises:
            RequestError: Wrapping whatever the HTTP client raised.
        """
        request = self.build_request(method, uri, payload, headers)
        with correlation_scope():
            log_api_request(logger, request.method, request.url, mode="sync")
            try:
                return SparkPostResponse(self.http_client.send_request(request))
            except Exception as exc:
                error = RequestError(exc)
                log_api_failure(logger, request.method, request.url, exc, status_code=error.status_code)
                raise error from exc

    def async_request(
        self,
        method: str = "GET",
        uri: str = "",
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> SparkPostPromise:
        """Send a request without blocking.

        The HTTP client's own failure is surfaced unchanged when the
        promise is awaited.

        Raises:
            CapabilityError: If the HTTP client cannot send asynchronously.
        """
        if not isinstance(self.http_client, HttpAsyncClient):
            raise CapabilityError(
                "Your http client does not support asynchronous requests. "
                "Please use a different client or use synchronous requests."
            )
        request = self.build_request(method, uri, payload, headers)
        # The adapter's task copies the current context, correlation id included.
        with correlation_scope():
            log_api_request(logger, request.method, request.url, mode="async")
            return SparkPostPromise(self.http_client.send_async_request(request))

    # -- Request construction -----------------------------------------------

    def build_request(
        self,
        method: str,
        uri: str,
        payload: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> OutgoingRequest:
        """Build the request for the given params.

        For GET the payload becomes the query string and the body is an
        empty JSON object; for every other method the payload is the body.
        """
        method = method.strip().upper()
        payload = payload or {}

        if method == "GET":
            params: Mapping[str, Any] = payload
            body: Mapping[str, Any] = {}
        else:
            params = {}
            body = payload

        return OutgoingRequest(
            method=method,
            url=self.get_url(uri, params),
            headers=self.get_http_headers(headers),
            body=json.dumps(body),
        )

    def get_http_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Return the request headers: caller headers plus the constant ones.

        ``Authorization``, ``Content-Type`` and ``User-Agent`` always take
        the library's values.
        """
        constant_headers = {
            "Authorization": self.options["key"],
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }
        constant_names = {name.lower() for name in constant_headers}

        merged = {
            name: value
            for name, value in (headers or {}).items()
            if name.lower() not in constant_names
        }
        merged.update(constant_headers)
        return merged

    def get_url(self, path: str, params: Optional[Mapping[str, Any]] = None) -> str:
        """Build the request URL from the options and query params.

        List values are joined with commas. Values are not percent-encoded.
        """
        options = self.options

        params_string = "&".join(
            f"{key}={_format_param(value)}" for key, value in (params or {}).items()
        )

        port = f":{options['port']}" if options["port"] else ""
        query = f"?{params_string}" if params_string else ""
        return f"{options['protocol']}://{options['host']}{port}/api/{options['version']}/{path}{query}"

    # -- Configuration --------------------------------------------------------

    def set_http_client(self, http_client: HttpClient) -> None:
        """Set the HTTP client used for requests."""
        if not isinstance(http_client, HttpClient):
            raise TypeError(
                f"http_client must be an HttpClient, got {type(http_client).__name__}"
            )
        self.http_client = http_client

    def set_options(self, options: OptionsInput) -> None:
        """Merge options into the current ones.

        Accepts an API key string or a mapping of options. The first call
        starts from the defaults and requires a key; later calls only
        override the options they name.

        Raises:
            ConfigurationError: On first configuration without a usable key.
        """
        self.options = merge_options(self.options, options)

    def _setup_endpoints(self) -> None:
        self.transmissions = Transmission(self)

    # -- Lifecycle -------------------------------------------------------------

    def close(self) -> None:
        """Release the HTTP client's resources."""
        self.http_client.close()

    def __enter__(self) -> SparkPost:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def aclose(self) -> None:
        """Release the HTTP client's resources, including async connection pools."""
        await self.http_client.aclose()

    async def __aenter__(self) -> SparkPost:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
