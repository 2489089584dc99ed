"""
Routage entre les vues et navigation dans les pages de détail.

Trois vues exclusives : accueil, détail, cricket. Toute transition arrête
la lecture en cours (instance HLS libérée, session oubliée) avant
d'afficher la nouvelle vue.

Le DetailNavigator charge les pages film / série / saison / épisode. Chaque
navigation prend un jeton de génération : une réponse arrivée après une
navigation plus récente est ignorée au lieu d'écraser la vue affichée.
"""

from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Optional

from loguru import logger

from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.ports.api_clients import ICatalogAPI
from cinestream.core.ports.media import IVideoElement
from cinestream.core.ports.notifier import INotifier, NullNotifier
from cinestream.services.playback import PlaybackService
from cinestream.services.presenters import (
    DetailView,
    EpisodeDetailView,
    EpisodeListView,
    MovieDetailView,
    SeasonListView,
    build_episode_detail,
    build_episode_list,
    build_movie_detail,
    build_season_list,
)

if TYPE_CHECKING:
    from cinestream.services.cricket import CricketService


class ViewState(str, Enum):
    """Vue de premier niveau affichée."""

    HOME = "home"
    DETAIL = "detail"
    CRICKET = "cricket"


class ViewRouter:
    """
    Machine à états des vues.

    Attributes:
        state: Vue affichée (une seule à la fois)
        detail: Contenu de la vue de détail, None hors de la vue détail
    """

    def __init__(
        self,
        playback: PlaybackService,
        notifier: Optional[INotifier] = None,
        cricket: Optional["CricketService"] = None,
    ) -> None:
        self._playback = playback
        self._notifier = notifier or NullNotifier()
        self._cricket = cricket
        self.state = ViewState.HOME
        self.detail: Optional[DetailView] = None

    @property
    def visible_views(self) -> frozenset[ViewState]:
        return frozenset({self.state})

    def is_visible(self, view: ViewState) -> bool:
        return self.state is view

    def _transition(self, state: ViewState) -> None:
        self._playback.stop()
        logger.debug(f"Vue {self.state.value} -> {state.value}")
        self.state = state

    def show_home(self) -> None:
        self._transition(ViewState.HOME)
        self.detail = None

    def show_detail(self, view: DetailView) -> None:
        self._transition(ViewState.DETAIL)
        self.detail = view

    async def show_cricket(self) -> None:
        """Affiche la vue cricket et initialise le panneau au premier affichage."""
        self._transition(ViewState.CRICKET)
        self.detail = None
        if self._cricket is not None:
            self._notifier.loading("Loading cricket streams...")
            await self._cricket.ensure_initialized()


class DetailNavigator:
    """
    Chargement et rendu des pages de détail.

    Les méthodes open_* interrogent le proxy catalogue ; les méthodes
    render_* / back_to_* réaffichent à partir de données déjà en mémoire.
    """

    def __init__(
        self,
        catalog: ICatalogAPI,
        router: ViewRouter,
        playback: PlaybackService,
        video_factory: Callable[[], IVideoElement],
        notifier: Optional[INotifier] = None,
    ) -> None:
        """
        Initialise le navigateur.

        Args:
            catalog: Client du proxy catalogue
            router: Routeur de vues
            playback: Service de lecture
            video_factory: Crée l'élément vidéo de chaque page lisible
            notifier: Notifications optionnelles
        """
        self._catalog = catalog
        self._router = router
        self._playback = playback
        self._video_factory = video_factory
        self._notifier = notifier or NullNotifier()
        self._generation = 0

    def _begin(self) -> int:
        self._generation += 1
        return self._generation

    def _is_stale(self, token: int) -> bool:
        return token != self._generation

    async def _fetch(
        self,
        token: int,
        fetch: Callable[[], Any],
        error_message: str,
    ) -> Optional[dict]:
        """
        Exécute un appel catalogue pour une navigation.

        Returns:
            Le JSON, ou None si l'appel a échoué ou a été supplanté
        """
        try:
            data = await fetch()
        except CatalogRequestError as e:
            if self._is_stale(token):
                return None
            logger.warning(f"{error_message}: {e}")
            self._notifier.error(error_message)
            return None

        if self._is_stale(token):
            logger.debug("Réponse de navigation supplantée ignorée")
            return None
        return data

    async def navigate_to_item(
        self, item: dict, type_hint: Optional[str] = None
    ) -> Optional[DetailView]:
        """Ouvre la page correspondant au type de l'élément (film ou série)."""
        media_type = item.get("media_type") or type_hint
        item_id = item.get("id")
        if not item_id or not media_type:
            return None

        if media_type == "movie":
            return await self.open_movie(item_id)
        if media_type == "tv":
            return await self.open_tv(item_id)
        return None

    async def open_movie(self, movie_id: int | str) -> Optional[MovieDetailView]:
        token = self._begin()
        self._notifier.loading("Loading movie details...")
        movie = await self._fetch(
            token, lambda: self._catalog.movie(movie_id), "Failed to load movie details"
        )
        if movie is None:
            return None

        view = await self.render_movie(movie)
        self._notifier.success(f'Loaded "{movie.get("title")}"')
        return view

    async def render_movie(self, movie: dict) -> MovieDetailView:
        """Affiche la page film et lance sa lecture."""
        view = build_movie_detail(movie)
        self._router.show_detail(view)
        await self._playback.start_movie(movie, self._video_factory())
        return view

    async def open_tv(self, tv_id: int | str) -> Optional[SeasonListView]:
        token = self._begin()
        self._notifier.loading("Loading series details...")
        tv = await self._fetch(
            token, lambda: self._catalog.tv(tv_id), "Failed to load series details"
        )
        if tv is None:
            return None

        view = self.render_seasons(tv)
        self._notifier.success(f'Loaded "{tv.get("name")}"')
        return view

    def render_seasons(self, tv: dict) -> SeasonListView:
        view = build_season_list(tv)
        self._router.show_detail(view)
        return view

    def back_to_seasons(self, tv: dict) -> SeasonListView:
        """Retour à la liste des saisons, sans nouvel appel."""
        self._begin()
        return self.render_seasons(tv)

    async def open_season(
        self, tv_id: int | str, season_number: int, tv: dict
    ) -> Optional[EpisodeListView]:
        token = self._begin()
        self._notifier.loading(f"Loading Season {season_number}...")
        season = await self._fetch(
            token,
            lambda: self._catalog.season(tv_id, season_number),
            "Failed to load season details",
        )
        if season is None:
            return None

        view = self.render_episodes(tv, season)
        self._notifier.success(f"Loaded Season {season_number}")
        return view

    def render_episodes(self, tv: dict, season: dict) -> EpisodeListView:
        view = build_episode_list(tv, season)
        self._router.show_detail(view)
        return view

    def back_to_episodes(self, tv: dict, season: dict) -> EpisodeListView:
        """Retour à la liste des épisodes de la saison, sans nouvel appel."""
        self._begin()
        return self.render_episodes(tv, season)

    async def open_episode(
        self,
        tv_id: int | str,
        season_number: int,
        episode_number: int,
        tv: dict,
        season: dict,
    ) -> Optional[EpisodeDetailView]:
        token = self._begin()
        self._notifier.loading("Loading episode details...")
        episode = await self._fetch(
            token,
            lambda: self._catalog.episode(tv_id, season_number, episode_number),
            "Failed to load episode details",
        )
        if episode is None:
            return None

        view = await self.render_episode(tv, season, episode)
        self._notifier.success("Loaded episode details")
        return view

    async def render_episode(
        self, tv: dict, season: dict, episode: dict
    ) -> EpisodeDetailView:
        """Affiche la page épisode et lance sa lecture."""
        view = build_episode_detail(tv, season, episode)
        self._router.show_detail(view)
        await self._playback.start_episode(tv, season, episode, self._video_factory())
        return view
