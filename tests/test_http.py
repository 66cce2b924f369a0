"""Tests for the HTTP client."""

import httpx
import pytest

from tweetkit.errors import DecodingError, MalformedRouteError, TwitterAPIError
from tweetkit.http import HTTPClient
from tweetkit.models.envelopes import DataEnvelope
from tweetkit.models.users import BlockResponse
from tweetkit.routes import Route


@pytest.mark.asyncio
async def test_get_adds_auth_header(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(200, json={"ok": True})

    response = await client.request("GET", "/2/users/1/blocking")
    assert response.status_code == 200
    assert len(calls) == 1
    assert calls[0]["headers"]["authorization"] == "Bearer test-token"


@pytest.mark.asyncio
async def test_body_sent_as_json(http_client):
    client, transport, calls = http_client
    await client.request("POST", "/2/users/1/blocking", content=b'{"target_user_id":"2"}')
    assert calls[0]["headers"]["content-type"] == "application/json"
    assert calls[0]["body"] == {"target_user_id": "2"}


@pytest.mark.asyncio
async def test_no_content_type_without_body(http_client):
    client, transport, calls = http_client
    await client.request("GET", "/2/users/1/blocking")
    assert "content-type" not in calls[0]["headers"]


@pytest.mark.asyncio
async def test_error_status_does_not_raise(http_client):
    """The transport returns error responses as-is; decoding classifies them."""
    client, transport, calls = http_client
    transport.response = httpx.Response(404, json={"errors": [{"message": "nope"}]})
    response = await client.request("GET", "/2/users/1/blocking")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_no_auth_header_when_no_token():
    client = HTTPClient("https://api.test", token=None)
    headers = client._headers()
    assert "Authorization" not in headers
    await client.close()


@pytest.mark.asyncio
async def test_token_setter():
    client = HTTPClient("https://api.test")
    assert client.token is None
    client.token = "new-token"
    assert client.token == "new-token"
    assert client._headers()["Authorization"] == "Bearer new-token"
    await client.close()


@pytest.mark.asyncio
async def test_custom_headers_merged(http_client):
    client, transport, calls = http_client
    await client.request("GET", "/2/users/1/blocking", headers={"x-custom": "val"})
    assert calls[0]["headers"]["x-custom"] == "val"
    assert calls[0]["headers"]["authorization"] == "Bearer test-token"


@pytest.mark.asyncio
async def test_params_keep_order(http_client):
    client, transport, calls = http_client
    await client.request(
        "GET", "/2/users/1/blocking",
        params=[("max_results", "10"), ("pagination_token", "abc")],
    )
    assert calls[0]["params"] == [("max_results", "10"), ("pagination_token", "abc")]


@pytest.mark.asyncio
async def test_close_closes_inner_client(http_client):
    client, transport, calls = http_client
    assert not client._client.is_closed
    await client.close()
    assert client._client.is_closed


@pytest.mark.asyncio
async def test_default_base_url():
    client = HTTPClient()
    assert client.base_url == "https://api.twitter.com"
    await client.close()


# --- call() pipeline ---


@pytest.mark.asyncio
async def test_call_decodes_envelope(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(200, json={"data": {"blocking": False}})
    result = await client.call(
        Route.delete_block("1", "2"), DataEnvelope[BlockResponse], method="DELETE"
    )
    assert calls[0]["method"] == "DELETE"
    assert calls[0]["path"] == "/2/users/1/blocking/2"
    assert result.data.blocking is False


@pytest.mark.asyncio
async def test_call_attaches_response_to_api_error(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(
        403, json={"errors": [{"message": "Forbidden", "code": 200}]}
    )
    with pytest.raises(TwitterAPIError) as exc_info:
        await client.call(Route.blocking("1"), DataEnvelope[BlockResponse], method="POST")
    assert exc_info.value.status == 403
    assert exc_info.value.response is transport.response


@pytest.mark.asyncio
async def test_call_malformed_json_raises_decoding_error(http_client):
    client, transport, calls = http_client
    transport.response = httpx.Response(200, content=b"<html>oops</html>")
    with pytest.raises(DecodingError) as exc_info:
        await client.call(Route.blocking("1"), DataEnvelope[BlockResponse])
    assert exc_info.value.content == b"<html>oops</html>"
    assert exc_info.value.status == 200


@pytest.mark.asyncio
async def test_call_bad_route_never_hits_network(http_client):
    client, transport, calls = http_client
    with pytest.raises(MalformedRouteError):
        await client.call(Route.blocking(""), DataEnvelope[BlockResponse])
    assert calls == []


# --- Transport errors pass through ---


@pytest.mark.asyncio
async def test_transport_error_passes_through():
    """Transport errors (connect timeout, etc.) reach the caller unchanged."""

    class FailingTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            raise httpx.ConnectTimeout("Connection timed out")

    client = HTTPClient("https://api.test", token="test-token")
    client._client = httpx.AsyncClient(base_url="https://api.test", transport=FailingTransport())

    with pytest.raises(httpx.ConnectTimeout) as exc_info:
        await client.call(Route.blocking("1"), DataEnvelope[BlockResponse])
    assert "Connection timed out" in str(exc_info.value)
    await client.close()


@pytest.mark.asyncio
async def test_connect_error_passes_through():
    class RefusingTransport(httpx.AsyncBaseTransport):
        async def handle_async_request(self, request):
            raise httpx.ConnectError("Connection refused")

    client = HTTPClient("https://api.test", token="test-token")
    client._client = httpx.AsyncClient(base_url="https://api.test", transport=RefusingTransport())

    with pytest.raises(httpx.ConnectError):
        await client.request("GET", "/2/users/1/blocking")
    await client.close()


@pytest.mark.asyncio
async def test_context_manager_closes():
    async with HTTPClient("https://api.test") as client:
        assert not client._client.is_closed
    assert client._client.is_closed
