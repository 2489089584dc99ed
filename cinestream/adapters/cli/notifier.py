"""Notifications affichées dans le terminal via Rich."""

from typing import Optional

from rich.console import Console

from cinestream.core.ports.notifier import INotifier, ToastKind

_STYLES = {
    ToastKind.LOADING: "dim",
    ToastKind.SUCCESS: "green",
    ToastKind.ERROR: "bold red",
}


class ConsoleNotifier(INotifier):
    """
    Affiche chaque notification sur une ligne.

    Un terminal ne retire pas une ligne affichée : hide_all se contente
    d'oublier les notifications en cours.

    Attributes:
        active: Notifications en cours (message, nature)
    """

    def __init__(self, console: Console) -> None:
        self._console = console
        self.active: list[tuple[str, ToastKind]] = []

    def show_toast(
        self,
        message: str,
        kind: ToastKind = ToastKind.LOADING,
        duration_ms: int = 3000,
        show_loader: bool = False,
    ) -> None:
        prefix = "… " if show_loader else ""
        self._console.print(f"{prefix}{message}", style=_STYLES[kind], markup=False)
        self.active.append((message, kind))

    def hide_all(self, kind: Optional[ToastKind] = None) -> None:
        if kind is None:
            self.active.clear()
        else:
            self.active = [toast for toast in self.active if toast[1] is not kind]
