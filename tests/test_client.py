import asyncio

import httpx
import pytest

from figma_rest import FigmaAPIError, build_params, encode_query, figma_get_me, pagination_params

from conftest import USER, RecordingTransport, make_client


ME = dict(USER, email="ada@example.com")


def fetch_me(transport, **options):
    async def run():
        async with make_client(transport, **options) as client:
            return await figma_get_me(client)

    return asyncio.run(run())


def test_bearer_header_is_sent_without_personal_token():
    transport = RecordingTransport(ME)

    fetch_me(transport, access_token="oauth-token", personal_access_token=None)

    assert transport.last.headers["Authorization"] == "Bearer oauth-token"
    assert "X-Figma-Token" not in transport.last.headers


def test_personal_token_header_is_sent_without_bearer():
    transport = RecordingTransport(ME)

    fetch_me(transport, personal_access_token="figd_pat")

    assert transport.last.headers["X-Figma-Token"] == "figd_pat"
    assert "Authorization" not in transport.last.headers


def test_bearer_header_wins_when_both_tokens_are_given():
    transport = RecordingTransport(ME)

    fetch_me(transport, access_token="oauth-token", personal_access_token="figd_pat")

    assert transport.last.headers["Authorization"] == "Bearer oauth-token"
    assert "X-Figma-Token" not in transport.last.headers


def test_api_root_override():
    transport = RecordingTransport(ME)

    me = fetch_me(transport, api_root="figma.internal")

    assert transport.last.url.host == "figma.internal"
    assert transport.last.url.path == "/v1/me"
    assert me.email == "ada@example.com"
    assert me.handle == "Ada"


def test_one_http_client_is_shared_across_calls():
    transport = RecordingTransport(ME)

    async def run():
        async with make_client(transport) as client:
            http = client.http
            await figma_get_me(client)
            await figma_get_me(client)
            return http is client.http

    assert asyncio.run(run())
    assert len(transport.requests) == 2


def test_http_error_raises_figma_api_error():
    transport = RecordingTransport({"status": 404, "err": "Not found"}, status_code=404)

    with pytest.raises(FigmaAPIError) as exc:
        fetch_me(transport)

    assert exc.value.status_code == 404
    assert exc.value.message == "Not found"
    assert exc.value.body == {"status": 404, "err": "Not found"}
    assert exc.value.response.status_code == 404
    assert len(transport.requests) == 1


def test_http_error_with_plain_text_body():
    def responder(request):
        return httpx.Response(500, text="Internal Server Error")

    with pytest.raises(FigmaAPIError) as exc:
        fetch_me(httpx.MockTransport(responder))

    assert exc.value.status_code == 500
    assert exc.value.body is None
    assert exc.value.message == "Internal Server Error"


def test_transport_errors_propagate_unchanged():
    calls = {"count": 0}

    def responder(request):
        calls["count"] += 1
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(httpx.ConnectError):
        fetch_me(httpx.MockTransport(responder))

    assert calls["count"] == 1


def test_build_params_drops_none_and_joins_sequences():
    params = build_params(ids=["1:2", "3:4"], depth=None, scale=2, format="png")

    assert params == {"ids": "1:2,3:4", "scale": 2, "format": "png"}
    assert list(params) == ["ids", "scale", "format"]


def test_pagination_params_flatten_cursor():
    assert pagination_params(10, {"after": 42}) == {"page_size": 10, "after": 42}
    assert pagination_params(cursor={"before": 7}) == {"before": 7}
    assert pagination_params() == {}


def test_encode_query_keeps_id_separators():
    params = build_params(ids=["1:2", "3:4"], scale=2, format="png", svg_include_id=True)

    assert encode_query(params) == "ids=1:2,3:4&scale=2&format=png&svg_include_id=true"
    assert encode_query({"emoji": ":+1:"}) == "emoji=:%2B1:"
    assert encode_query({}) == ""
