"""
Tests for StreamProxyClient - stream resolution and cricket proxy client.

Verifies:
- /v2/stream query parameters and their order
- Envelopes are decoded into Ok / Failure
- Incomplete requests fail before any network call
"""

import httpx
import pytest
import respx

from cinestream.adapters.api.stream_client import (
    PROXY_UNREACHABLE_MESSAGE,
    STREAM_UNAVAILABLE_MESSAGE,
    StreamProxyClient,
)
from cinestream.core.exceptions import InvalidStreamRequestError
from cinestream.core.value_objects import (
    CricketCategory,
    Failure,
    Ok,
    StreamProvider,
    StreamRequest,
)
from tests.fixtures.stream_responses import (
    CRICKET_CATEGORIES_RESPONSE,
    CRICKET_ERROR_RESPONSE,
    CRICKET_MATCHES_RESPONSE,
    CRICKET_STREAMS_RESPONSE,
    STREAM_ERROR_RESPONSE,
    STREAM_FILMEX_RESPONSE,
    STREAM_OK_RESPONSE,
)

BASE = "http://proxy.test"


@pytest.fixture
def client() -> StreamProxyClient:
    return StreamProxyClient(base_url=BASE)


class TestResolve:
    """Tests for StreamProxyClient.resolve()."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_movie_resolution(self, client: StreamProxyClient):
        route = respx.get(f"{BASE}/v2/stream").mock(
            return_value=httpx.Response(200, json=STREAM_OK_RESPONSE)
        )

        result = await client.resolve(StreamRequest(type="movie", tmdb_id=603))

        assert isinstance(result, Ok)
        assert result.value.url == STREAM_OK_RESPONSE["url"]
        assert result.value.from_cache is True
        assert result.value.expires_at == 1760000000
        assert str(route.calls.last.request.url) == (
            f"{BASE}/v2/stream?type=movie&provider=vidlink&tmdbId=603"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_tv_query_order(self, client: StreamProxyClient):
        route = respx.get(f"{BASE}/v2/stream").mock(
            return_value=httpx.Response(200, json=STREAM_FILMEX_RESPONSE)
        )

        await client.resolve(
            StreamRequest(
                type="tv",
                tmdb_id=1399,
                season=1,
                episode=1,
                provider=StreamProvider.FILMEX,
            )
        )

        assert str(route.calls.last.request.url).endswith(
            "?type=tv&provider=filmex&tmdbId=1399&season=1&episode=1"
        )

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_envelope_becomes_failure(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v2/stream").mock(
            return_value=httpx.Response(404, json=STREAM_ERROR_RESPONSE)
        )

        result = await client.resolve(StreamRequest(type="movie", tmdb_id=603))

        assert isinstance(result, Failure)
        assert result.message == "No stream found for this title."
        assert result.error == "not_found"
        assert result.details == {"tmdbId": "603"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_ok_without_url_uses_default_message(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v2/stream").mock(
            return_value=httpx.Response(200, json={"ok": True})
        )

        result = await client.resolve(StreamRequest(type="movie", tmdb_id=603))

        assert isinstance(result, Failure)
        assert result.message == STREAM_UNAVAILABLE_MESSAGE

    @pytest.mark.asyncio
    @respx.mock
    async def test_unreachable_proxy(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v2/stream").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        result = await client.resolve(StreamRequest(type="movie", tmdb_id=603))

        assert isinstance(result, Failure)
        assert result.message == PROXY_UNREACHABLE_MESSAGE

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_incomplete_request_makes_no_network_call(
        self, client: StreamProxyClient
    ):
        route = respx.get(f"{BASE}/v2/stream")

        with pytest.raises(InvalidStreamRequestError):
            await client.resolve(StreamRequest(type="tv", tmdb_id=1399, season=1))

        assert not route.called


class TestCricket:
    """Tests for the cricket endpoints."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_categories(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v3/cricket/categories").mock(
            return_value=httpx.Response(200, json=CRICKET_CATEGORIES_RESPONSE)
        )

        result = await client.categories()

        assert isinstance(result, Ok)
        assert result.value[0] == CricketCategory(name="IPL", slug="ipl")

    @pytest.mark.asyncio
    @respx.mock
    async def test_matches_slug_is_encoded(self, client: StreamProxyClient):
        route = respx.get(f"{BASE}/v3/cricket/category/world%20cup/matches").mock(
            return_value=httpx.Response(200, json=CRICKET_MATCHES_RESPONSE)
        )

        result = await client.matches("world cup")

        assert route.called
        assert isinstance(result, Ok)
        assert result.value[0].stream_link_names == ("Link 1", "Link 2")

    @pytest.mark.asyncio
    @respx.mock
    async def test_streams_sends_match_url(self, client: StreamProxyClient):
        route = respx.get(f"{BASE}/v3/cricket/match/streams").mock(
            return_value=httpx.Response(200, json=CRICKET_STREAMS_RESPONSE)
        )

        result = await client.streams("https://cricket.example.com/match/ind-aus")

        params = route.calls.last.request.url.params
        assert params["matchUrl"] == "https://cricket.example.com/match/ind-aus"
        assert [s.label for s in result.value] == ["HLS — 720p", "HLS"]

    @pytest.mark.asyncio
    @respx.mock
    async def test_cricket_error_envelope(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v3/cricket/categories").mock(
            return_value=httpx.Response(502, json=CRICKET_ERROR_RESPONSE)
        )

        result = await client.categories()

        assert isinstance(result, Failure)
        assert result.message == "Cricket source is down."

    @pytest.mark.asyncio
    @respx.mock
    async def test_all_data(self, client: StreamProxyClient):
        respx.get(f"{BASE}/v3/cricket/all").mock(
            return_value=httpx.Response(200, json={"ok": True, "data": {"ipl": []}})
        )

        result = await client.all_data()

        assert isinstance(result, Ok)
        assert result.value == {"ipl": []}
