"""
Exceptions du domaine CineStream.

Toutes les erreurs remontent jusqu'à la frontière d'interface la plus proche
(route, vue de détail, lecteur) où elles sont converties en message visible.
Aucune n'est fatale et aucune n'est relancée automatiquement.
"""

from typing import Any, Optional


class CineStreamError(Exception):
    """Classe de base des erreurs de l'application."""


class TMDBError(CineStreamError):
    """
    Echec d'un appel à l'API TMDB (statut non-2xx ou erreur réseau).

    Attributes:
        status_code: Statut HTTP amont, ou None en cas d'erreur réseau
        detail: Corps de réponse ou message d'erreur, pour les logs
    """

    def __init__(self, status_code: Optional[int] = None, detail: Any = None) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"TMDB request failed (status={status_code})")


class CatalogRequestError(CineStreamError):
    """Echec d'une requête vers les endpoints /api du proxy catalogue."""

    def __init__(self, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        if status_code is None:
            super().__init__("Request failed: network error")
        else:
            super().__init__(f"Request failed: {status_code}")


class InvalidStreamRequestError(CineStreamError, ValueError):
    """Requête de flux incomplète ou type non supporté, détectée avant tout appel réseau."""


class StreamResolutionError(CineStreamError):
    """
    Le proxy de flux n'a pas pu fournir d'URL lisible.

    Attributes:
        code: Code d'erreur retourné par le proxy (champ "error"), si présent
        details: Contexte supplémentaire retourné par le proxy
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Any = None,
    ) -> None:
        self.code = code
        self.details = details
        super().__init__(message)


class PlaybackNotSupportedError(CineStreamError):
    """Ni la bibliothèque HLS ni la lecture native ne sont disponibles."""
