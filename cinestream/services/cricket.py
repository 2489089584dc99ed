"""
Panneau cricket en direct : catégories -> matchs -> flux.

Consomme le proxy cricket externe. Les flux d'un match sont attachés au
lecteur via le PlaybackService, de sorte que l'invariant « une seule
instance HLS » vaut aussi pour le cricket.
"""

from dataclasses import dataclass, field
from typing import Optional

from loguru import logger

from cinestream.core.exceptions import CineStreamError
from cinestream.core.ports.api_clients import ICricketAPI
from cinestream.core.ports.media import IVideoElement
from cinestream.core.ports.notifier import INotifier, NullNotifier, ToastKind
from cinestream.core.value_objects.result import Failure
from cinestream.core.value_objects.stream import (
    CricketCategory,
    CricketMatch,
    CricketStream,
)
from cinestream.services.playback import DEFAULT_ERROR_MESSAGE, PlaybackService

IDLE_STATUS = "Select a match to start streaming."
NO_STREAMS_STATUS = "No streams are currently available for this match."


@dataclass
class CricketState:
    """Etat affiché par le panneau cricket."""

    initialized: bool = False
    loading: bool = False
    error: Optional[str] = None
    categories: list[CricketCategory] = field(default_factory=list)
    selected_category_slug: Optional[str] = None
    matches: list[CricketMatch] = field(default_factory=list)
    selected_match_url: Optional[str] = None
    streams: list[CricketStream] = field(default_factory=list)
    status: str = IDLE_STATUS


class CricketService:
    """Navigation dans le proxy cricket et lecture des flux de match."""

    def __init__(
        self,
        api: ICricketAPI,
        playback: PlaybackService,
        video: IVideoElement,
        notifier: Optional[INotifier] = None,
    ) -> None:
        self._api = api
        self._playback = playback
        self._video = video
        self._notifier = notifier or NullNotifier()
        self.state = CricketState()

    @property
    def video(self) -> IVideoElement:
        return self._video

    def _category_name(self, slug: str) -> str:
        for category in self.state.categories:
            if category.slug == slug:
                return category.name
        return "category"

    async def ensure_initialized(self) -> None:
        """Charge les catégories au premier affichage uniquement."""
        if self.state.initialized:
            return
        self.state.initialized = True
        await self.load_categories()

    async def load_categories(self) -> None:
        """Charge les catégories puis les matchs de la première."""
        self.state.loading = True
        self.state.error = None
        self._notifier.loading("Loading cricket categories...")

        result = await self._api.categories()
        if isinstance(result, Failure):
            logger.warning(f"Catégories cricket indisponibles: {result.message}")
            self.state.error = "Failed to load cricket categories."
            self.state.loading = False
            self._notifier.error("Failed to load cricket categories")
            return

        self.state.categories = result.value
        if self.state.categories and not self.state.selected_category_slug:
            self.state.selected_category_slug = self.state.categories[0].slug
            await self.load_matches(self.state.selected_category_slug)
        else:
            self.state.loading = False
            self._notifier.success("Cricket categories loaded")

    async def load_matches(self, slug: Optional[str]) -> None:
        if not slug:
            return
        self.state.loading = True
        self.state.error = None
        name = self._category_name(slug)
        self._notifier.loading(f"Loading matches for {name}...")

        result = await self._api.matches(slug)
        if isinstance(result, Failure):
            logger.warning(f"Matchs cricket indisponibles ({slug}): {result.message}")
            self.state.error = "Failed to load matches for this category."
            self.state.loading = False
            self._notifier.error("Failed to load cricket matches")
            return

        self.state.matches = result.value
        self.state.selected_match_url = None
        self.state.streams = []
        self.state.loading = False
        self._notifier.success(f"Loaded matches for {name}")

    async def select_category(self, category: Optional[CricketCategory]) -> None:
        """Sélectionne une catégorie ; sans effet si elle l'est déjà."""
        if category is None or category.slug == self.state.selected_category_slug:
            return
        self.state.selected_category_slug = category.slug
        self.state.matches = []
        self.state.selected_match_url = None
        self.state.streams = []
        await self.load_matches(category.slug)

    async def select_match(self, match: Optional[CricketMatch]) -> None:
        if match is None or not match.url:
            return
        await self.load_streams(match)

    async def load_streams(self, match: CricketMatch) -> None:
        """Résout les flux du match puis lance le premier."""
        self.state.loading = True
        self.state.error = None
        self._notifier.loading(f"Resolving streams for {match.title}...")

        result = await self._api.streams(match.url)
        if isinstance(result, Failure):
            logger.warning(f"Flux cricket indisponibles ({match.title}): {result.message}")
            self.state.error = "Failed to load streams for this match."
            self.state.loading = False
            self._notifier.error("Failed to resolve cricket streams")
            return

        self.state.streams = result.value
        self.state.selected_match_url = match.url
        self.state.loading = False
        self._notifier.hide_all(ToastKind.LOADING)

        if self.state.streams:
            await self.play_stream(self.state.streams[0])
        else:
            self.state.status = NO_STREAMS_STATUS

    async def play_stream(self, stream: Optional[CricketStream]) -> None:
        """Attache un flux de match au lecteur du panneau."""
        if stream is None or not stream.url:
            return

        self.state.status = f"Loading {stream.label}…"
        self._notifier.loading("Loading cricket stream... This may take a few seconds.")

        try:
            self._playback.attach_url(stream.url, self._video)
        except CineStreamError as e:
            logger.warning(f"Echec de lecture du flux cricket {stream.label}: {e}")
            self.state.status = str(e) or DEFAULT_ERROR_MESSAGE
            self._notifier.error("Failed to load cricket stream")
            return

        self.state.status = ""
        self._notifier.success("Successfully loaded cricket stream", 3000)
