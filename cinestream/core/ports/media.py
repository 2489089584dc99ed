"""
Ports de lecture média.

Abstraient l'élément vidéo du navigateur et la bibliothèque de lecture
adaptative (HLS). Les implémentations concrètes sont fournies par
l'environnement d'exécution ; la bibliothèque HLS est optionnelle.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

HLS_MIME_TYPE = "application/vnd.apple.mpegurl"


class IVideoElement(ABC):
    """
    Elément vidéo sur lequel un flux est attaché.

    Attributes:
        provider: Fournisseur ayant servi le flux courant (None si aucun)
    """

    provider: Optional[str] = None

    @abstractmethod
    def pause(self) -> None:
        """Met la lecture en pause."""
        ...

    @abstractmethod
    def clear_source(self) -> None:
        """Retire la source courante et réinitialise l'élément."""
        ...

    @abstractmethod
    def set_source(self, url: str) -> None:
        """Affecte une source lue nativement."""
        ...

    @abstractmethod
    def play(self) -> None:
        """
        Démarre la lecture.

        Best-effort : un refus d'autoplay ne doit pas lever d'exception.
        """
        ...

    @abstractmethod
    def can_play_type(self, mime_type: str) -> bool:
        """Indique si l'élément sait lire ce type nativement."""
        ...


class IHlsInstance(ABC):
    """Instance de lecteur HLS, ressource exclusive à libérer explicitement."""

    @abstractmethod
    def load_source(self, url: str) -> None:
        ...

    @abstractmethod
    def attach_media(self, video: IVideoElement) -> None:
        ...

    @abstractmethod
    def on_manifest_parsed(self, callback: Callable[[], None]) -> None:
        """Enregistre un callback appelé quand le manifeste est analysé."""
        ...

    @abstractmethod
    def destroy(self) -> None:
        """Libère le pipeline média de l'instance."""
        ...


class IHlsLibrary(ABC):
    """Bibliothèque HLS : détection du support et fabrique d'instances."""

    @abstractmethod
    def is_supported(self) -> bool:
        ...

    @abstractmethod
    def create(self) -> IHlsInstance:
        ...
