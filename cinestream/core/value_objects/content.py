"""
Références de contenu lisible et requêtes de résolution de flux.

Une PlaybackTarget identifie ce qui est chargé dans le lecteur (film ou
épisode). Elle est immuable : changer de fournisseur rejoue la résolution
pour la même cible sans la modifier.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Union

from cinestream.core.exceptions import InvalidStreamRequestError
from cinestream.core.value_objects.provider import StreamProvider

TmdbId = Union[int, str]


class MediaKind(str, Enum):
    """Type de contenu lisible (valeur du paramètre "type" du proxy)."""

    MOVIE = "movie"
    TV = "tv"


@dataclass(frozen=True)
class StreamRequest:
    """
    Paramètres d'un appel GET {proxy}/v2/stream.

    Attributs :
        type : "movie", "tv" (tout autre type est refusé)
        tmdb_id : Identifiant TMDB du film ou de la série
        season : Numéro de saison (séries uniquement)
        episode : Numéro d'épisode (séries uniquement)
        provider : Fournisseur chargé de la résolution
    """

    type: str
    tmdb_id: Optional[TmdbId] = None
    season: Optional[int] = None
    episode: Optional[int] = None
    provider: StreamProvider = StreamProvider.VIDLINK

    def to_query_params(self) -> dict[str, str]:
        """
        Construit les paramètres de requête dans l'ordre attendu par le proxy.

        Raises:
            InvalidStreamRequestError: Identifiants manquants ou type non supporté
        """
        kind = self.type.value if isinstance(self.type, MediaKind) else self.type
        params = {"type": kind, "provider": StreamProvider.parse(self.provider).value}

        if kind == MediaKind.MOVIE.value:
            if not self.tmdb_id:
                raise InvalidStreamRequestError("tmdbId is required for movie playback.")
            params["tmdbId"] = str(self.tmdb_id)
        elif kind == MediaKind.TV.value:
            if not self.tmdb_id or not self.season or not self.episode:
                raise InvalidStreamRequestError(
                    "tmdbId, season and episode are required for TV playback."
                )
            params["tmdbId"] = str(self.tmdb_id)
            params["season"] = str(self.season)
            params["episode"] = str(self.episode)
        else:
            raise InvalidStreamRequestError(
                f"{kind.capitalize()} playback is not wired up in this UI yet."
            )

        return params


@dataclass(frozen=True)
class PlaybackTarget:
    """Contenu chargé dans une session de lecture."""

    kind: MediaKind
    tmdb_id: TmdbId
    season: Optional[int] = None
    episode: Optional[int] = None

    @classmethod
    def for_movie(cls, movie: dict[str, Any]) -> "PlaybackTarget":
        """Cible de lecture pour un film TMDB."""
        return cls(kind=MediaKind.MOVIE, tmdb_id=movie["id"])

    @classmethod
    def for_episode(
        cls,
        tv: dict[str, Any],
        season: dict[str, Any],
        episode: dict[str, Any],
    ) -> "PlaybackTarget":
        """Cible de lecture pour un épisode (série, saison, épisode TMDB)."""
        return cls(
            kind=MediaKind.TV,
            tmdb_id=tv["id"],
            season=season.get("season_number"),
            episode=episode.get("episode_number"),
        )

    def stream_request(self, provider: StreamProvider) -> StreamRequest:
        """Requête de résolution de cette cible pour un fournisseur donné."""
        return StreamRequest(
            type=self.kind.value,
            tmdb_id=self.tmdb_id,
            season=self.season,
            episode=self.episode,
            provider=provider,
        )
