"""
Elément vidéo adossé à un lecteur externe (mpv par défaut).

Utilisé par la CLI : la source affectée est transmise au lecteur lancé
en sous-processus. Le lecteur lit HLS nativement, aucune bibliothèque
HLS n'est donc nécessaire.
"""

import subprocess
from typing import Optional

from loguru import logger

from cinestream.core.ports.media import HLS_MIME_TYPE, IVideoElement


class ExternalPlayerVideoElement(IVideoElement):
    """
    Pilote un lecteur externe comme un élément vidéo.

    Attributes:
        command: Exécutable du lecteur
        source: URL affectée, None si aucune
        process: Processus du lecteur en cours, None si aucun
    """

    def __init__(self, command: str = "mpv") -> None:
        self.command = command
        self.source: Optional[str] = None
        self.process: Optional[subprocess.Popen] = None
        self.provider: Optional[str] = None

    @property
    def is_playing(self) -> bool:
        return self.process is not None and self.process.poll() is None

    def pause(self) -> None:
        """Arrête le lecteur en cours (un lecteur externe ne se met pas en pause)."""
        if self.process is None:
            return
        if self.process.poll() is None:
            self.process.terminate()
        self.process = None

    def clear_source(self) -> None:
        self.pause()
        self.source = None
        self.provider = None

    def set_source(self, url: str) -> None:
        self.source = url

    def play(self) -> None:
        """Lance le lecteur sur la source courante ; un échec est seulement journalisé."""
        if not self.source or self.is_playing:
            return
        try:
            self.process = subprocess.Popen(
                [self.command, self.source],
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            logger.error(f"Impossible de lancer le lecteur '{self.command}': {e}")
            return
        logger.info(f"Lecteur lancé (pid {self.process.pid}): {self.source}")

    def can_play_type(self, mime_type: str) -> bool:
        return mime_type == HLS_MIME_TYPE

    def wait(self) -> Optional[int]:
        """Attend la fermeture du lecteur et retourne son code de sortie."""
        if self.process is None:
            return None
        return self.process.wait()
