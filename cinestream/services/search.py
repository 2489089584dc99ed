"""
Recherche libre avec anti-rebond.

Chaque frappe annule la recherche programmée précédente. Une saisie vide
(ou faite d'espaces) vide les résultats sans appel réseau. Une réponse
arrivée après une saisie plus récente est ignorée.
"""

import asyncio
from typing import TYPE_CHECKING, Optional

from loguru import logger

from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.ports.api_clients import ICatalogAPI
from cinestream.services.presenters import Card, build_search_card

if TYPE_CHECKING:
    from cinestream.services.navigation import DetailNavigator
    from cinestream.services.presenters import DetailView


class SearchService:
    """
    Etat de la liste déroulante de recherche.

    Attributes:
        query: Texte courant du champ de recherche
        results: Résultats affichés (au plus `limit`)
        visible: True si la liste déroulante est affichée
    """

    def __init__(
        self,
        catalog: ICatalogAPI,
        navigator: Optional["DetailNavigator"] = None,
        debounce_seconds: float = 0.35,
        limit: int = 10,
    ) -> None:
        self._catalog = catalog
        self._navigator = navigator
        self._debounce_seconds = debounce_seconds
        self._limit = limit
        self._pending: Optional[asyncio.Task] = None
        self._generation = 0
        self.query = ""
        self.results: list[Card] = []
        self.visible = False

    def clear(self) -> None:
        self.results = []
        self.visible = False

    def _cancel_pending(self) -> None:
        if self._pending is not None and not self._pending.done():
            self._pending.cancel()
        self._pending = None

    def on_input(self, value: str) -> Optional[asyncio.Task]:
        """
        Réagit à une frappe dans le champ de recherche.

        Doit être appelé depuis la boucle d'événements.

        Returns:
            La tâche de recherche programmée, ou None si la saisie est vide
        """
        self.query = value
        self._cancel_pending()

        if not value.strip():
            self._generation += 1
            self.clear()
            return None

        self._pending = asyncio.create_task(self._debounced(value))
        return self._pending

    async def _debounced(self, value: str) -> None:
        await asyncio.sleep(self._debounce_seconds)
        await self.search(value)

    async def search(self, query: Optional[str]) -> list[Card]:
        """Interroge la recherche multi et met à jour la liste déroulante."""
        if not query or not query.strip():
            self.clear()
            return []

        self._generation += 1
        token = self._generation

        try:
            data = await self._catalog.search_multi(query.strip())
        except CatalogRequestError as e:
            if token == self._generation:
                logger.warning(f"Recherche en echec ({query!r}): {e}")
                self.clear()
            return []

        if token != self._generation:
            logger.debug(f"Resultats de recherche perimes ignores: {query!r}")
            return []

        items = (data.get("results") or [])[: self._limit]
        self.results = [build_search_card(item) for item in items]
        self.visible = bool(self.results)
        return self.results

    def dismiss(self) -> None:
        """Ferme la liste déroulante (clic en dehors)."""
        self.clear()

    async def select(self, card: Card) -> Optional["DetailView"]:
        """Choisit un résultat : vide la liste et ouvre la page correspondante."""
        self.query = card.title
        self._cancel_pending()
        self._generation += 1
        self.clear()
        if self._navigator is None:
            return None
        return await self._navigator.navigate_to_item(card.item, card.media_type)
