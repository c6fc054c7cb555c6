"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
SparkPost Python client, a product of Garudex Labs

Tests for HTTP transport adapters.
"""

from unittest.mock import Mock

import httpx
import pytest
import requests

from sparkpost.adapters.base import HttpAsyncClient, HttpClient, HttpResponse, OutgoingRequest
from sparkpost.adapters.http import HttpxAdapter
from sparkpost.adapters.mock import MockAdapter, MockAsyncAdapter
from sparkpost.adapters.requests_adapter import RequestsAdapter
from sparkpost.client import SparkPost
from sparkpost.exceptions import HttpStatusError, TransportError

URL = "https://api.sparkpost.com:443/api/v1/transmissions"


def make_request(method="POST", body='{"x": 1}'):
    return OutgoingRequest(
        method=method,
        url=URL,
        headers={"Authorization": "abc123", "Content-Type": "application/json"},
        body=body,
    )


class TestCapabilities:
    def test_sync_only_adapters(self):
        assert isinstance(RequestsAdapter(), HttpClient)
        assert not isinstance(RequestsAdapter(), HttpAsyncClient)
        assert not isinstance(MockAdapter(), HttpAsyncClient)

    def test_async_capable_adapters(self):
        assert isinstance(HttpxAdapter(), HttpAsyncClient)
        assert isinstance(MockAsyncAdapter(), HttpAsyncClient)


class TestMockAdapter:
    def test_returns_mocked_response(self):
        expected = HttpResponse(status_code=200, content=b'{"ok": true}')
        adapter = MockAdapter(responses={("POST", URL): expected})
        assert adapter.send_request(make_request()) is expected

    def test_default_response_for_unmocked(self):
        result = MockAdapter().send_request(make_request("GET", "{}"))
        assert result.status_code == 200

    def test_tracks_sent_requests(self):
        adapter = MockAdapter()
        adapter.send_request(make_request("DELETE"))
        assert len(adapter.sent_requests) == 1
        assert adapter.sent_requests[0].method == "DELETE"

    def test_raises_configured_error(self):
        adapter = MockAdapter(error=TransportError("down"))
        with pytest.raises(TransportError):
            adapter.send_request(make_request())
        assert len(adapter.sent_requests) == 1

    def test_close_clears_state(self):
        adapter = MockAdapter()
        adapter.send_request(make_request())
        adapter.close()
        assert adapter.sent_requests == []

    @pytest.mark.asyncio
    async def test_async_send(self):
        adapter = MockAsyncAdapter(default=HttpResponse(status_code=202))
        result = await adapter.send_async_request(make_request())
        assert result.status_code == 202
        assert len(adapter.sent_requests) == 1


class TestHttpxAdapter:
    @staticmethod
    def _handler(request: httpx.Request) -> httpx.Response:
        if request.url.path.endswith("/missing"):
            return httpx.Response(404, json={"errors": [{"message": "not found"}]})
        return httpx.Response(
            200,
            json={"method": request.method, "body": request.content.decode(), "auth": request.headers["Authorization"]},
        )

    def _adapter(self, **kwargs):
        transport = httpx.MockTransport(self._handler)
        return HttpxAdapter(
            client=httpx.Client(transport=transport),
            async_client=httpx.AsyncClient(transport=transport),
            **kwargs,
        )

    def test_send_request(self):
        result = self._adapter().send_request(make_request())
        assert result.status_code == 200
        assert result.json() == {"method": "POST", "body": '{"x": 1}', "auth": "abc123"}

    def test_get_sends_json_body(self):
        result = self._adapter().send_request(make_request("GET", "{}"))
        assert result.json()["body"] == "{}"

    def test_status_error_raised(self):
        request = OutgoingRequest(method="GET", url=URL + "/missing")
        with pytest.raises(HttpStatusError) as exc_info:
            self._adapter().send_request(request)
        assert exc_info.value.status_code == 404
        assert exc_info.value.response.json() == {"errors": [{"message": "not found"}]}

    def test_status_error_disabled(self):
        request = OutgoingRequest(method="GET", url=URL + "/missing")
        result = self._adapter(http_errors=False).send_request(request)
        assert result.status_code == 404

    def test_connection_error_translated(self):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        adapter = HttpxAdapter(client=httpx.Client(transport=httpx.MockTransport(refuse)))
        with pytest.raises(TransportError) as exc_info:
            adapter.send_request(make_request())
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_send_async_request_returns_future(self):
        adapter = self._adapter()
        future = adapter.send_async_request(make_request())
        assert not future.done()
        result = await future
        assert result.status_code == 200
        await adapter.aclose()

    @pytest.mark.asyncio
    async def test_async_status_error(self):
        adapter = self._adapter()
        request = OutgoingRequest(method="GET", url=URL + "/missing")
        with pytest.raises(HttpStatusError):
            await adapter.send_async_request(request)
        await adapter.aclose()

    def test_send_async_request_requires_running_loop(self):
        adapter = self._adapter()
        with pytest.raises(RuntimeError):
            adapter.send_async_request(make_request())

    def test_close(self):
        adapter = self._adapter()
        adapter.send_request(make_request())
        adapter.close()
        assert adapter._client is None

    @pytest.mark.asyncio
    async def test_async_context_manager_closes_async_client(self):
        async_client = httpx.AsyncClient(transport=httpx.MockTransport(self._handler))
        async with SparkPost(HttpxAdapter(async_client=async_client), "abc123") as sparkpost:
            response = await sparkpost.request("GET", "templates")
            assert response.status_code == 200
        assert async_client.is_closed


class TestRequestsAdapter:
    @staticmethod
    def _session(status_code=200, content=b'{"ok": true}', error=None):
        session = Mock(spec=requests.Session)
        if error is not None:
            session.request.side_effect = error
        else:
            session.request.return_value = Mock(
                status_code=status_code,
                headers={"Content-Type": "application/json"},
                content=content,
                reason="OK" if status_code < 400 else "Bad Request",
            )
        return session

    def test_send_request(self):
        session = self._session()
        adapter = RequestsAdapter(session=session, timeout=5)

        result = adapter.send_request(make_request())

        assert result.status_code == 200
        assert result.json() == {"ok": True}
        session.request.assert_called_once_with(
            method="POST",
            url=URL,
            headers={"Authorization": "abc123", "Content-Type": "application/json"},
            data=b'{"x": 1}',
            timeout=5,
        )

    def test_status_error_raised(self):
        adapter = RequestsAdapter(session=self._session(status_code=400, content=b'{"errors": []}'))
        with pytest.raises(HttpStatusError) as exc_info:
            adapter.send_request(make_request())
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize(
        "error",
        [
            requests.exceptions.Timeout("slow"),
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.RequestException("other"),
        ],
    )
    def test_library_errors_translated(self, error):
        adapter = RequestsAdapter(session=self._session(error=error))
        with pytest.raises(TransportError) as exc_info:
            adapter.send_request(make_request())
        assert exc_info.value.__cause__ is error

    def test_close_closes_session(self):
        session = self._session()
        RequestsAdapter(session=session).close()
        session.close.assert_called_once()
