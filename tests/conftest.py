"""
Pytest configuration and shared fixtures for SparkPost client tests.
"""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from sparkpost.adapters.mock import MockAdapter, MockAsyncAdapter
from sparkpost.client import SparkPost


TEST_API_KEY = "abc123-test-key"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.

    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def sync_adapter() -> MockAdapter:
    """Synchronous-only in-memory HTTP client."""
    return MockAdapter()


@pytest.fixture
def async_adapter() -> MockAsyncAdapter:
    """In-memory HTTP client supporting non-blocking sends."""
    return MockAsyncAdapter()


@pytest.fixture
def sync_client(sync_adapter: MockAdapter) -> SparkPost:
    """SparkPost client dispatching synchronously."""
    return SparkPost(sync_adapter, {"key": TEST_API_KEY, "async": False})


@pytest.fixture
def async_client(async_adapter: MockAsyncAdapter) -> SparkPost:
    """SparkPost client with default (asynchronous) dispatch."""
    return SparkPost(async_adapter, TEST_API_KEY)
