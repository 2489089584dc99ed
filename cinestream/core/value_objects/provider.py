"""
Fournisseurs de résolution de flux.

Deux services tiers savent transformer un identifiant TMDB en flux HLS :
VidLink (défaut) et Filmex. Le choix de l'utilisateur est persisté et
revalidé à chaque lecture.
"""

from enum import Enum
from typing import Optional

# Clé de stockage de la préférence fournisseur
PROVIDER_STORAGE_KEY = "catalog:streamProvider"


class StreamProvider(str, Enum):
    """Fournisseur de flux sélectionnable par l'utilisateur."""

    VIDLINK = "vidlink"
    FILMEX = "filmex"

    @property
    def label(self) -> str:
        """Libellé affiché dans les messages de statut."""
        return "Filmex" if self is StreamProvider.FILMEX else "VidLink"

    @classmethod
    def parse(cls, value: Optional[str]) -> "StreamProvider":
        """
        Convertit une valeur stockée en fournisseur.

        Toute valeur inconnue (ou absente) retombe sur VidLink.
        """
        if isinstance(value, StreamProvider):
            return value
        for provider in cls:
            if provider.value == value:
                return provider
        return DEFAULT_PROVIDER


DEFAULT_PROVIDER = StreamProvider.VIDLINK
