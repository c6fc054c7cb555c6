"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

SparkPost Python client - sends authenticated requests to the SparkPost
email API, synchronously or as awaitable promises.

Quick start::

    from sparkpost import SparkPost
    from sparkpost.adapters import HttpxAdapter

    sparkpost = SparkPost(HttpxAdapter(), {"key": "YOUR_API_KEY", "async": False})
    response = sparkpost.transmissions.get()
"""

from sparkpost._version import __version__
from sparkpost.client import SparkPost
from sparkpost.exceptions import (
    CapabilityError,
    ConfigurationError,
    HttpStatusError,
    InvalidAddressError,
    RequestError,
    SparkPostError,
    TransportError,
)
from sparkpost.promise import SparkPostPromise
from sparkpost.response import SparkPostResponse

__all__ = [
    "__version__",
    "SparkPost",
    "SparkPostPromise",
    "SparkPostResponse",
    "SparkPostError",
    "ConfigurationError",
    "CapabilityError",
    "RequestError",
    "TransportError",
    "HttpStatusError",
    "InvalidAddressError",
]
