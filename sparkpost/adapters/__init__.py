"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

HTTP transport adapters.
"""

from sparkpost.adapters.base import (
    HttpAsyncClient,
    HttpClient,
    HttpResponse,
    OutgoingRequest,
)
from sparkpost.adapters.http import HttpxAdapter
from sparkpost.adapters.mock import MockAdapter, MockAsyncAdapter
from sparkpost.adapters.requests_adapter import RequestsAdapter

__all__ = [
    "HttpClient",
    "HttpAsyncClient",
    "HttpResponse",
    "OutgoingRequest",
    "HttpxAdapter",
    "MockAdapter",
    "MockAsyncAdapter",
    "RequestsAdapter",
]
