"""
Tests for the TMDB proxy routes (/api/*).

The TMDB client is a real TMDBClient whose HTTP calls are mocked with respx.
"""

import httpx
import pytest
import respx
from fastapi import FastAPI
from fastapi.testclient import TestClient

from cinestream.adapters.api.tmdb_client import TMDBClient
from cinestream.web.deps import get_tmdb_client
from cinestream.web.routes.api import router
from tests.fixtures.tmdb_responses import (
    TMDB_EPISODE_DETAILS_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_POPULAR_MOVIES_RESPONSE,
    TMDB_SEARCH_MULTI_RESPONSE,
    TMDB_SEASON_DETAILS_RESPONSE,
)

TMDB = "https://api.themoviedb.org/3"


@pytest.fixture
def client():
    """App FastAPI minimale avec le router du proxy et un client TMDB de test."""
    app = FastAPI()
    app.include_router(router)
    tmdb = TMDBClient(api_key="test_api_key", read_token="test_read_token")
    app.dependency_overrides[get_tmdb_client] = lambda: tmdb
    with TestClient(app) as test_client:
        yield test_client


class TestListRoutes:
    def test_popular_movies_relays_json(self, client: TestClient):
        with respx.mock:
            respx.get(f"{TMDB}/movie/popular").mock(
                return_value=httpx.Response(200, json=TMDB_POPULAR_MOVIES_RESPONSE)
            )

            response = client.get("/api/movies/popular")

        assert response.status_code == 200
        assert response.json() == TMDB_POPULAR_MOVIES_RESPONSE

    @pytest.mark.parametrize(
        "path,upstream",
        [
            ("/api/tv/popular", "/tv/popular"),
            ("/api/movies/featured", "/movie/top_rated"),
            ("/api/tv/featured", "/tv/top_rated"),
        ],
    )
    def test_list_endpoints(self, client: TestClient, path: str, upstream: str):
        with respx.mock:
            route = respx.get(f"{TMDB}{upstream}").mock(
                return_value=httpx.Response(200, json={"results": []})
            )

            response = client.get(path)

            assert route.called
        assert response.json() == {"results": []}


class TestSearchRoute:
    def test_empty_query_makes_no_upstream_call(self, client: TestClient):
        with respx.mock:
            response = client.get("/api/search/multi", params={"query": "   "})

        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_missing_query(self, client: TestClient):
        with respx.mock:
            response = client.get("/api/search/multi")

        assert response.json() == {"results": []}

    def test_query_is_forwarded(self, client: TestClient):
        with respx.mock:
            route = respx.get(f"{TMDB}/search/multi").mock(
                return_value=httpx.Response(200, json=TMDB_SEARCH_MULTI_RESPONSE)
            )

            response = client.get("/api/search/multi", params={"query": "matrix"})

            assert route.calls.last.request.url.params["query"] == "matrix"
        assert len(response.json()["results"]) == 3


class TestDetailRoutes:
    def test_movie_detail(self, client: TestClient):
        with respx.mock:
            respx.get(f"{TMDB}/movie/603").mock(
                return_value=httpx.Response(200, json=TMDB_MOVIE_DETAILS_RESPONSE)
            )

            response = client.get("/api/movie/603")

        assert response.json()["title"] == "The Matrix"

    def test_season_and_episode(self, client: TestClient):
        with respx.mock:
            respx.get(f"{TMDB}/tv/1399/season/1").mock(
                return_value=httpx.Response(200, json=TMDB_SEASON_DETAILS_RESPONSE)
            )
            respx.get(f"{TMDB}/tv/1399/season/1/episode/1").mock(
                return_value=httpx.Response(200, json=TMDB_EPISODE_DETAILS_RESPONSE)
            )

            season = client.get("/api/tv/1399/season/1")
            episode = client.get("/api/tv/1399/season/1/episode/1")

        assert season.json()["season_number"] == 1
        assert episode.json()["name"] == "Winter Is Coming"


class TestErrors:
    def test_upstream_status_is_relayed(self, client: TestClient):
        with respx.mock:
            respx.get(f"{TMDB}/movie/0").mock(
                return_value=httpx.Response(404, json={"status_message": "Not found"})
            )

            response = client.get("/api/movie/0")

        assert response.status_code == 404
        assert response.json() == {"error": "Failed to fetch data from TMDB"}

    def test_network_error_is_500(self, client: TestClient):
        with respx.mock:
            respx.get(f"{TMDB}/tv/1399").mock(
                side_effect=httpx.ConnectError("Connection refused")
            )

            response = client.get("/api/tv/1399")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to fetch data from TMDB"}
