"""
Port de notification (toasts de chargement, succès, erreur).

Capacité optionnelle : l'implémentation est choisie au démarrage.
NullNotifier est utilisé quand aucune interface n'affiche de toasts.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional


class ToastKind(str, Enum):
    """Nature d'une notification."""

    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class INotifier(ABC):
    """Affichage de notifications éphémères."""

    @abstractmethod
    def show_toast(
        self,
        message: str,
        kind: ToastKind = ToastKind.LOADING,
        duration_ms: int = 3000,
        show_loader: bool = False,
    ) -> None:
        """
        Affiche une notification.

        Args:
            message: Texte affiché
            kind: Nature de la notification
            duration_ms: Durée d'affichage, 0 pour une notification persistante
            show_loader: Affiche un indicateur de chargement
        """
        ...

    @abstractmethod
    def hide_all(self, kind: Optional[ToastKind] = None) -> None:
        """Masque toutes les notifications (ou seulement celles d'une nature)."""
        ...

    def loading(self, message: str) -> None:
        """Notification de chargement persistante."""
        self.show_toast(message, ToastKind.LOADING, 0, True)

    def success(self, message: str, duration_ms: int = 2000) -> None:
        """Masque les chargements en cours et affiche un succès."""
        self.hide_all(ToastKind.LOADING)
        self.show_toast(message, ToastKind.SUCCESS, duration_ms)

    def error(self, message: str, duration_ms: int = 5000) -> None:
        """Masque les chargements en cours et affiche une erreur."""
        self.hide_all(ToastKind.LOADING)
        self.show_toast(message, ToastKind.ERROR, duration_ms)


class NullNotifier(INotifier):
    """Implémentation sans effet."""

    def show_toast(
        self,
        message: str,
        kind: ToastKind = ToastKind.LOADING,
        duration_ms: int = 3000,
        show_loader: bool = False,
    ) -> None:
        return None

    def hide_all(self, kind: Optional[ToastKind] = None) -> None:
        return None
