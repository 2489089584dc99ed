"""
Client des endpoints /api du proxy catalogue.

Utilise par la couche client (vues, recherche, rangees d'accueil) comme
le navigateur le ferait : un GET JSON par ressource, une erreur si le
statut n'est pas 2xx.

Usage:
    client = CatalogClient(base_url="http://localhost:3000")
    movie = await client.movie(603)
    await client.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.ports.api_clients import ICatalogAPI

JSON = dict[str, Any]


class CatalogClient(ICatalogAPI):
    """Implementation httpx de ICatalogAPI."""

    def __init__(
        self,
        base_url: str = "http://localhost:3000",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """
        Initialise le client.

        Args:
            base_url: URL du proxy catalogue
            timeout: Timeout des requetes en secondes
            transport: Transport httpx alternatif (ex: ASGITransport)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._client

    async def fetch_json(self, path: str, params: Optional[dict[str, str]] = None) -> JSON:
        """
        GET JSON sur le proxy.

        Raises:
            CatalogRequestError: Statut non-2xx ou erreur reseau
        """
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
        except httpx.RequestError as e:
            logger.warning(f"Proxy catalogue injoignable: {path} - {e}")
            raise CatalogRequestError(None) from e

        if not response.is_success:
            logger.warning(f"Requete catalogue en echec: {path} -> {response.status_code}")
            raise CatalogRequestError(response.status_code)
        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Reponse catalogue non JSON: {path}")
            raise CatalogRequestError(response.status_code) from e

    async def popular_movies(self) -> JSON:
        return await self.fetch_json("/api/movies/popular")

    async def popular_tv(self) -> JSON:
        return await self.fetch_json("/api/tv/popular")

    async def featured_movies(self) -> JSON:
        return await self.fetch_json("/api/movies/featured")

    async def featured_tv(self) -> JSON:
        return await self.fetch_json("/api/tv/featured")

    async def search_multi(self, query: str) -> JSON:
        return await self.fetch_json("/api/search/multi", params={"query": query})

    async def movie(self, movie_id: int | str) -> JSON:
        return await self.fetch_json(f"/api/movie/{movie_id}")

    async def tv(self, tv_id: int | str) -> JSON:
        return await self.fetch_json(f"/api/tv/{tv_id}")

    async def season(self, tv_id: int | str, season_number: int) -> JSON:
        return await self.fetch_json(f"/api/tv/{tv_id}/season/{season_number}")

    async def episode(
        self, tv_id: int | str, season_number: int, episode_number: int
    ) -> JSON:
        return await self.fetch_json(
            f"/api/tv/{tv_id}/season/{season_number}/episode/{episode_number}"
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
