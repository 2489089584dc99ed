"""
Rangées de la page d'accueil.

Les quatre rangées sont chargées en parallèle, sans ordre garanti ; chacune
échoue indépendamment et affiche son propre message.
"""

import asyncio
from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.ports.api_clients import ICatalogAPI
from cinestream.services.presenters import Card, build_card

EMPTY_ROW_MESSAGE = "No titles available."
FAILED_ROW_MESSAGE = "Failed to load content."


@dataclass(frozen=True)
class RowConfig:
    """
    Définition d'une rangée.

    Attributs :
        id : Identifiant de la rangée (data-row)
        endpoint : Nom de la méthode ICatalogAPI à appeler
        media_type : Type des éléments (les listes TMDB ne le précisent pas)
    """

    id: str
    endpoint: str
    media_type: str


ROWS = (
    RowConfig("popular-movies", "popular_movies", "movie"),
    RowConfig("popular-tv", "popular_tv", "tv"),
    RowConfig("featured-movies", "featured_movies", "movie"),
    RowConfig("featured-tv", "featured_tv", "tv"),
)


@dataclass
class RowView:
    id: str
    cards: list[Card] = field(default_factory=list)
    message: Optional[str] = None


class HomeRowsService:
    """Chargement des rangées d'accueil."""

    def __init__(self, catalog: ICatalogAPI, limit: int = 14) -> None:
        self._catalog = catalog
        self._limit = limit

    async def load_row(self, config: RowConfig) -> RowView:
        try:
            data = await getattr(self._catalog, config.endpoint)()
        except CatalogRequestError as e:
            logger.warning(f"Rangée {config.id} en echec: {e}")
            return RowView(id=config.id, message=FAILED_ROW_MESSAGE)

        items = (data.get("results") or [])[: self._limit]
        if not items:
            return RowView(id=config.id, message=EMPTY_ROW_MESSAGE)
        return RowView(
            id=config.id,
            cards=[build_card(item, config.media_type) for item in items],
        )

    async def load_rows(self, rows: tuple[RowConfig, ...] = ROWS) -> dict[str, RowView]:
        """Charge toutes les rangées en parallèle, indexées par identifiant."""
        views = await asyncio.gather(*(self.load_row(config) for config in rows))
        return {view.id: view for view in views}
