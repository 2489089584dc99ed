"""
Interfaces ports pour les clients API.

Contrats des services HTTP consommés par la couche client :
- ICatalogAPI : endpoints /api du proxy catalogue (données TMDB)
- IStreamResolver : résolution de flux via /v2/stream
- ICricketAPI : proxy cricket /v3/cricket
"""

from abc import ABC, abstractmethod
from typing import Any

from cinestream.core.value_objects.content import StreamRequest
from cinestream.core.value_objects.result import Result
from cinestream.core.value_objects.stream import (
    CricketCategory,
    CricketMatch,
    CricketStream,
    ResolvedStream,
)

JSON = dict[str, Any]


class ICatalogAPI(ABC):
    """
    Endpoints JSON du proxy catalogue.

    Toutes les méthodes lèvent CatalogRequestError en cas d'échec.
    """

    @abstractmethod
    async def popular_movies(self) -> JSON:
        ...

    @abstractmethod
    async def popular_tv(self) -> JSON:
        ...

    @abstractmethod
    async def featured_movies(self) -> JSON:
        ...

    @abstractmethod
    async def featured_tv(self) -> JSON:
        ...

    @abstractmethod
    async def search_multi(self, query: str) -> JSON:
        ...

    @abstractmethod
    async def movie(self, movie_id: int | str) -> JSON:
        ...

    @abstractmethod
    async def tv(self, tv_id: int | str) -> JSON:
        ...

    @abstractmethod
    async def season(self, tv_id: int | str, season_number: int) -> JSON:
        ...

    @abstractmethod
    async def episode(
        self, tv_id: int | str, season_number: int, episode_number: int
    ) -> JSON:
        ...


class IStreamResolver(ABC):
    """Résolution d'une URL de flux lisible pour un contenu."""

    @abstractmethod
    async def resolve(self, request: StreamRequest) -> Result[ResolvedStream]:
        """
        Résout un flux.

        Raises:
            InvalidStreamRequestError: Requête incomplète (avant tout appel réseau)

        Returns:
            Ok(ResolvedStream) ou Failure (erreur proxy ou réseau)
        """
        ...


class ICricketAPI(ABC):
    """Proxy cricket externe."""

    @abstractmethod
    async def categories(self) -> Result[list[CricketCategory]]:
        ...

    @abstractmethod
    async def matches(self, slug: str) -> Result[list[CricketMatch]]:
        ...

    @abstractmethod
    async def streams(self, match_url: str) -> Result[list[CricketStream]]:
        ...

    @abstractmethod
    async def all_data(self) -> Result[Any]:
        ...
