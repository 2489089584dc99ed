"""
Client TMDB utilisé par le proxy catalogue.

Relaie les ressources TMDB (listes, recherche multi, details film/serie/
saison/episode) en ajoutant les identifiants. Le JSON amont est retourne
tel quel : aucune transformation, aucun cache, aucun retry.

Usage:
    client = TMDBClient(api_key="xxx", read_token="eyJ...")
    movie = await client.movie_details("603")
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from cinestream.core.exceptions import TMDBError

JSON = dict[str, Any]


class TMDBClient:
    """
    Client API TMDB v3 pour le proxy.

    Authentification :
    - Read Access Token (v4) : header Authorization Bearer
    - API Key (v3) : parametre de requete api_key

    Les deux sont envoyes quand ils sont configures.

    Attributes:
        TMDB_BASE_URL: URL de base de l'API TMDB v3
    """

    TMDB_BASE_URL = "https://api.themoviedb.org/3"

    def __init__(
        self,
        api_key: Optional[str] = None,
        read_token: Optional[str] = None,
        language: str = "en-US",
        timeout: float = 30.0,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            api_key: Cle API TMDB v3
            read_token: Read Access Token TMDB v4
            language: Langue des metadonnees (parametre language)
            timeout: Timeout des requetes en secondes
        """
        self._api_key = api_key
        self._read_token = read_token
        self._language = language
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            headers = {"Accept": "application/json"}
            if self._read_token:
                headers["Authorization"] = f"Bearer {self._read_token}"
                headers["Content-Type"] = "application/json;charset=utf-8"

            params = {"language": self._language}
            if self._api_key:
                params["api_key"] = self._api_key

            self._client = httpx.AsyncClient(
                base_url=self.TMDB_BASE_URL,
                headers=headers,
                params=params,
                timeout=self._timeout,
            )
        return self._client

    async def _get(self, path: str, params: Optional[dict[str, str]] = None) -> JSON:
        """
        Execute un GET sur TMDB et retourne le JSON amont.

        Raises:
            TMDBError: Statut non-2xx (status_code amont) ou erreur reseau (status_code None)
        """
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Erreur API TMDB: {e.response.status_code} {path} - {e.response.text[:200]}"
            )
            raise TMDBError(e.response.status_code, e.response.text) from e
        except httpx.RequestError as e:
            logger.error(f"Erreur reseau TMDB: {path} - {e}")
            raise TMDBError(None, str(e)) from e

        logger.debug(f"TMDB {path} -> {response.status_code}")
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Reponse TMDB non JSON: {path}")
            raise TMDBError(None, response.text[:200]) from e

    async def popular_movies(self) -> JSON:
        return await self._get("/movie/popular")

    async def popular_tv(self) -> JSON:
        return await self._get("/tv/popular")

    async def top_rated_movies(self) -> JSON:
        return await self._get("/movie/top_rated")

    async def top_rated_tv(self) -> JSON:
        return await self._get("/tv/top_rated")

    async def search_multi(self, query: str) -> JSON:
        """Recherche films, series et personnes (contenu adulte exclu)."""
        return await self._get(
            "/search/multi",
            params={"query": query, "include_adult": "false"},
        )

    async def movie_details(self, movie_id: str) -> JSON:
        """Details d'un film avec credits et recommandations."""
        return await self._get(
            f"/movie/{movie_id}",
            params={"append_to_response": "credits,recommendations"},
        )

    async def tv_details(self, tv_id: str) -> JSON:
        """Details d'une serie (liste des saisons) avec credits et recommandations."""
        return await self._get(
            f"/tv/{tv_id}",
            params={"append_to_response": "credits,recommendations"},
        )

    async def season_details(self, tv_id: str, season_number: str) -> JSON:
        """Details d'une saison (liste des episodes)."""
        return await self._get(f"/tv/{tv_id}/season/{season_number}")

    async def episode_details(
        self, tv_id: str, season_number: str, episode_number: str
    ) -> JSON:
        """Details d'un episode avec son casting."""
        return await self._get(
            f"/tv/{tv_id}/season/{season_number}/episode/{episode_number}",
            params={"append_to_response": "credits"},
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a l'arret du serveur pour liberer les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
