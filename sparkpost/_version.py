"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Version of the SparkPost client. Packaging reads it from here.
"""

__version__ = "2.0.1"
