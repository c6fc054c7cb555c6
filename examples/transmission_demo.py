#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Demonstration of SparkPost client usage against an in-memory transport.

This script shows how to:
1. Load client options from a YAML file
2. Send a transmission synchronously
3. Switch to asynchronous dispatch and await a promise
4. Handle a failed request
"""

import asyncio
import tempfile
from pathlib import Path

from sparkpost import RequestError, SparkPost
from sparkpost.adapters import HttpResponse, MockAsyncAdapter
from sparkpost.exceptions import HttpStatusError

BASE_URL = "https://api.sparkpost.com:443/api/v1"


def build_adapter() -> MockAsyncAdapter:
    return MockAsyncAdapter({
        ("POST", f"{BASE_URL}/transmissions"): HttpResponse(
            status_code=200,
            content=b'{"results": {"total_accepted_recipients": 2, "id": "11668787484950529"}}',
            reason="OK",
        ),
    })


async def send_async(sparkpost: SparkPost) -> None:
    promise = sparkpost.request("GET", "templates", {"draft": False})
    print(f"   Promise state before await: {promise.state}")
    response = await promise
    print(f"   ✓ {response!r}, promise state: {promise.state}")


def main():
    """Run SparkPost client demonstration."""
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_path = Path(temp_dir)

        config_path = temp_path / "config.yaml"
        config_path.write_text(f"""
sparkpost:
  key: ${{SPARKPOST_API_KEY:demo-api-key}}
  async: false

logging:
  level: INFO
  file: {temp_path}/sparkpost.log
  json_format: true
""")

        print("=" * 60)
        print("SparkPost Client Demonstration")
        print("=" * 60)

        # 1. Initialize client
        print("\n1. Initializing client from configuration...")
        adapter = build_adapter()
        sparkpost = SparkPost.from_config(adapter, str(config_path), configure_logging=True)
        print(f"   ✓ Client targets {sparkpost.get_url('')}")

        # 2. Synchronous transmission
        print("\n2. Sending a transmission synchronously...")
        response = sparkpost.transmissions.post({
            "content": {
                "from": "Sandbox <sandbox@sparkpostbox.com>",
                "subject": "Hello from Python",
                "html": "<p>Hello</p>",
            },
            "recipients": [{"address": "Jane Doe <jane@example.com>"}],
            "cc": [{"address": "john@example.com"}],
        })
        print(f"   ✓ Accepted recipients: {response.body['results']['total_accepted_recipients']}")
        print(f"   Sent headers: {sorted(adapter.sent_requests[-1].headers)}")

        # 3. Asynchronous dispatch
        print("\n3. Switching to asynchronous dispatch...")
        sparkpost.set_options({"async": True})
        asyncio.run(send_async(sparkpost))

        # 4. Failed request
        print("\n4. Handling a failed request...")
        sparkpost.set_options({"async": False})
        sparkpost.set_http_client(MockAsyncAdapter(error=HttpStatusError(HttpResponse(
            status_code=401,
            content=b'{"errors": [{"message": "Unauthorized."}]}',
            reason="Unauthorized",
        ))))
        try:
            sparkpost.request("GET", "templates")
        except RequestError as e:
            print(f"   ✓ RequestError: status={e.status_code} body={e.body}")

        sparkpost.close()
        print("\n" + "=" * 60)
        print("Demonstration complete")
        print("=" * 60)


if __name__ == "__main__":
    main()
