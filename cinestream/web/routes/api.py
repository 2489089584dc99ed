"""
Routes du proxy TMDB.

Chaque route relaie une ressource TMDB : le JSON amont est retourné tel quel
en cas de succès, sinon {"error": ...} avec le statut amont (500 par défaut).
"""

from typing import Any, Awaitable

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...adapters.api.tmdb_client import TMDBClient
from ...core.exceptions import TMDBError
from ..deps import get_tmdb_client

router = APIRouter(prefix="/api")

TMDB_ERROR_MESSAGE = "Failed to fetch data from TMDB"


async def _relay(call: Awaitable[dict[str, Any]]) -> JSONResponse:
    """Attend l'appel TMDB et convertit un échec en réponse d'erreur générique."""
    try:
        data = await call
    except TMDBError as e:
        return JSONResponse(
            {"error": TMDB_ERROR_MESSAGE},
            status_code=e.status_code or 500,
        )
    return JSONResponse(data)


@router.get("/search/multi")
async def search_multi(query: str = "", tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Recherche films/séries/personnes ; requête vide -> aucun appel amont."""
    if not query.strip():
        return {"results": []}
    return await _relay(tmdb.search_multi(query))


@router.get("/movies/popular")
async def popular_movies(tmdb: TMDBClient = Depends(get_tmdb_client)):
    return await _relay(tmdb.popular_movies())


@router.get("/tv/popular")
async def popular_tv(tmdb: TMDBClient = Depends(get_tmdb_client)):
    return await _relay(tmdb.popular_tv())


@router.get("/movies/featured")
async def featured_movies(tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Films les mieux notés."""
    return await _relay(tmdb.top_rated_movies())


@router.get("/tv/featured")
async def featured_tv(tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Séries les mieux notées."""
    return await _relay(tmdb.top_rated_tv())


@router.get("/movie/{movie_id}")
async def movie_detail(movie_id: str, tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Détail d'un film, avec crédits et recommandations."""
    return await _relay(tmdb.movie_details(movie_id))


@router.get("/tv/{tv_id}")
async def tv_detail(tv_id: str, tmdb: TMDBClient = Depends(get_tmdb_client)):
    """Détail d'une série (sélecteur de saisons)."""
    return await _relay(tmdb.tv_details(tv_id))


@router.get("/tv/{tv_id}/season/{season_number}")
async def season_detail(
    tv_id: str, season_number: str, tmdb: TMDBClient = Depends(get_tmdb_client)
):
    """Détail d'une saison (sélecteur d'épisodes)."""
    return await _relay(tmdb.season_details(tv_id, season_number))


@router.get("/tv/{tv_id}/season/{season_number}/episode/{episode_number}")
async def episode_detail(
    tv_id: str,
    season_number: str,
    episode_number: str,
    tmdb: TMDBClient = Depends(get_tmdb_client),
):
    return await _relay(tmdb.episode_details(tv_id, season_number, episode_number))
