"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Endpoint-specific resources.
"""

from sparkpost.resources.base import ResourceBase
from sparkpost.resources.transmissions import Transmission

__all__ = [
    "ResourceBase",
    "Transmission",
]
