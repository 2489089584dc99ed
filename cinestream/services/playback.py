"""
Gestion des sessions de lecture.

Le PlaybackContext regroupe l'état de lecture partagé par les vues :
fournisseur courant, instance HLS active, session courante. Le
PlaybackService résout un flux pour une cible et l'attache à un élément
vidéo en respectant un invariant unique : l'instance HLS précédente est
toujours libérée avant qu'une nouvelle source soit attachée.

Chaque démarrage incrémente un compteur de génération. Une résolution
terminée après avoir été supplantée (nouveau démarrage ou changement de
vue) est abandonnée sans toucher au lecteur.
"""

from dataclasses import dataclass
from typing import Any, Optional

from loguru import logger

from cinestream.core.exceptions import (
    CineStreamError,
    PlaybackNotSupportedError,
    StreamResolutionError,
)
from cinestream.core.ports.api_clients import IStreamResolver
from cinestream.core.ports.media import (
    HLS_MIME_TYPE,
    IHlsInstance,
    IHlsLibrary,
    IVideoElement,
)
from cinestream.core.ports.storage import IPreferenceStore
from cinestream.core.value_objects.content import PlaybackTarget
from cinestream.core.value_objects.provider import (
    PROVIDER_STORAGE_KEY,
    StreamProvider,
)
from cinestream.core.value_objects.result import Failure
from cinestream.core.value_objects.stream import ResolvedStream

DEFAULT_ERROR_MESSAGE = "Failed to start playback."


@dataclass
class PlaybackSession:
    """
    Contenu actuellement chargé dans le lecteur.

    Attributs :
        target : Référence du contenu (film ou épisode), inchangée au changement de fournisseur
        video : Elément vidéo de la vue de détail
        provider : Fournisseur utilisé pour cette session
        status : Texte de statut affiché sous le lecteur ("" une fois la lecture lancée)
        stream : Flux résolu, None tant que la résolution n'a pas abouti
    """

    target: PlaybackTarget
    video: IVideoElement
    provider: StreamProvider
    status: str = ""
    stream: Optional[ResolvedStream] = None


class PlaybackContext:
    """
    Etat de lecture partagé entre les vues.

    Attributes:
        provider: Fournisseur sélectionné (lu depuis les préférences au démarrage)
        hls_instance: Instance HLS active, None si aucune
        video: Elément vidéo portant la lecture en cours, None si aucun
        session: Session de lecture courante, None si aucune
        generation: Compteur invalidant les résolutions en cours
    """

    def __init__(self, preferences: IPreferenceStore) -> None:
        self._preferences = preferences
        self.provider = StreamProvider.parse(preferences.get(PROVIDER_STORAGE_KEY))
        self.hls_instance: Optional[IHlsInstance] = None
        self.video: Optional[IVideoElement] = None
        self.session: Optional[PlaybackSession] = None
        self.generation = 0

    def set_provider(self, provider: StreamProvider | str) -> StreamProvider:
        """Change et persiste le fournisseur (valeur inconnue -> VidLink)."""
        self.provider = StreamProvider.parse(provider)
        self._preferences.set(PROVIDER_STORAGE_KEY, self.provider.value)
        return self.provider

    def next_generation(self) -> int:
        self.generation += 1
        return self.generation

    def is_current(self, token: int) -> bool:
        return token == self.generation

    def release_player(self) -> None:
        """Détruit l'instance HLS active, s'il y en a une."""
        instance, self.hls_instance = self.hls_instance, None
        if instance is None:
            return
        try:
            instance.destroy()
        except Exception as e:  # l'instance est abandonnée dans tous les cas
            logger.error(f"Echec de destruction de l'instance HLS: {e}")

    def release_video(self) -> None:
        """Arrête et vide l'élément vidéo de la lecture en cours, s'il y en a un."""
        video, self.video = self.video, None
        if video is None:
            return
        video.pause()
        video.clear_source()

    def teardown(self) -> None:
        """Libère le lecteur, oublie la session et invalide les résolutions en cours."""
        self.release_video()
        self.release_player()
        self.session = None
        self.next_generation()


class PlaybackService:
    """
    Démarrage, relance et arrêt des sessions de lecture.

    La bibliothèque HLS est optionnelle : en son absence (ou si elle n'est pas
    supportée), la lecture native de l'élément vidéo est utilisée.
    """

    def __init__(
        self,
        context: PlaybackContext,
        resolver: IStreamResolver,
        hls: Optional[IHlsLibrary] = None,
    ) -> None:
        """
        Initialise le service.

        Args:
            context: Etat de lecture partagé
            resolver: Client de résolution de flux
            hls: Bibliothèque HLS, None si indisponible dans l'environnement
        """
        self._context = context
        self._resolver = resolver
        self._hls = hls

    @property
    def context(self) -> PlaybackContext:
        return self._context

    @property
    def provider(self) -> StreamProvider:
        return self._context.provider

    def status_for(self, provider: StreamProvider) -> str:
        return f"Resolving stream via {provider.label}…"

    async def start(self, target: PlaybackTarget, video: IVideoElement) -> PlaybackSession:
        """
        Crée une session pour la cible et lance la résolution du flux.

        Les erreurs ne sont pas propagées : elles sont affichées dans le
        statut de la session et le lecteur reste vide. Aucun nouvel essai.
        """
        provider = self._context.provider
        token = self._context.next_generation()
        self._context.release_video()
        self._context.video = video
        session = PlaybackSession(
            target=target,
            video=video,
            provider=provider,
            status=self.status_for(provider),
        )
        self._context.session = session

        try:
            stream = await self._load_stream(session, token)
        except CineStreamError as e:
            logger.warning(f"Echec de lecture {target}: {e}")
            session.status = str(e) or DEFAULT_ERROR_MESSAGE
            return session

        if stream is not None:
            session.stream = stream
            session.status = ""
            logger.info(f"Lecture lancée: {target.kind.value} {target.tmdb_id} via {provider.label}")
        return session

    async def start_movie(
        self, movie: Optional[dict[str, Any]], video: IVideoElement
    ) -> Optional[PlaybackSession]:
        """Lecture d'un film TMDB ; sans identifiant, ne fait rien."""
        if not movie or not movie.get("id"):
            return None
        return await self.start(PlaybackTarget.for_movie(movie), video)

    async def start_episode(
        self,
        tv: Optional[dict[str, Any]],
        season: Optional[dict[str, Any]],
        episode: Optional[dict[str, Any]],
        video: IVideoElement,
    ) -> Optional[PlaybackSession]:
        """Lecture d'un épisode ; sans série, saison ou épisode, ne fait rien."""
        if not tv or not tv.get("id") or not season or not episode:
            return None
        return await self.start(PlaybackTarget.for_episode(tv, season, episode), video)

    async def replay(self) -> Optional[PlaybackSession]:
        """Relance la résolution de la session courante avec le fournisseur courant."""
        session = self._context.session
        if session is None:
            return None
        return await self.start(session.target, session.video)

    async def switch_provider(
        self, provider: StreamProvider | str
    ) -> Optional[PlaybackSession]:
        """
        Change de fournisseur et rejoue la session courante s'il y en a une.

        La nouvelle session porte la même cible que la précédente.
        """
        selected = self._context.set_provider(provider)
        logger.info(f"Fournisseur sélectionné: {selected.label}")
        return await self.replay()

    def stop(self) -> None:
        """Arrête toute lecture (appelé à chaque changement de vue)."""
        self._context.teardown()

    def attach_url(self, url: str, video: IVideoElement) -> None:
        """
        Attache une URL déjà résolue à l'élément vidéo.

        Raises:
            PlaybackNotSupportedError: Ni HLS ni lecture native disponibles
        """
        if self._context.video is not video:
            self._context.release_video()
        video.pause()
        video.clear_source()
        self._context.release_player()
        self._context.video = video

        if self._hls is not None and self._hls.is_supported():
            instance = self._hls.create()
            self._context.hls_instance = instance
            instance.load_source(url)
            instance.attach_media(video)
            instance.on_manifest_parsed(video.play)
        elif video.can_play_type(HLS_MIME_TYPE):
            video.set_source(url)
            video.play()
        else:
            raise PlaybackNotSupportedError("HLS playback is not supported in this browser.")

    async def _load_stream(
        self, session: PlaybackSession, token: int
    ) -> Optional[ResolvedStream]:
        """
        Réinitialise le lecteur, résout le flux et l'attache.

        Returns:
            Le flux attaché, ou None si la résolution a été supplantée
        """
        video = session.video
        video.pause()
        video.clear_source()
        self._context.release_player()

        result = await self._resolver.resolve(session.target.stream_request(session.provider))

        if not self._context.is_current(token):
            logger.debug(f"Résolution supplantée ignorée: {session.target}")
            return None

        if isinstance(result, Failure):
            raise StreamResolutionError(result.message, result.error, result.details)

        stream = result.value
        self.attach_url(stream.url, video)
        video.provider = session.provider.value
        return stream
