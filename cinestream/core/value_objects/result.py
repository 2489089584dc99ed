"""
Type résultat étiqueté pour les réponses des services externes.

Les proxys répondent avec des enveloppes {"ok": true, ...} ou
{"ok": false, "error": ..., "message": ..., "details": ...}. L'adaptateur
HTTP les convertit en Ok ou Failure ; le code appelant teste la variante
avec isinstance et n'inspecte plus jamais le JSON brut.
"""

from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Variante succès, porte la valeur décodée."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """
    Variante échec.

    Attributs :
        message : Message lisible à afficher à l'utilisateur
        error : Code d'erreur court du service, si fourni
        details : Contexte supplémentaire du service, si fourni
    """

    message: str
    error: Optional[str] = None
    details: Any = None

    @property
    def ok(self) -> bool:
        return False


Result = Union[Ok[T], Failure]


def failure_from_payload(payload: Any, fallback_message: str) -> Failure:
    """
    Construit un Failure à partir d'une enveloppe d'erreur (éventuellement absente).

    Le message privilégie "message", puis "error", puis le message par défaut.
    """
    if not isinstance(payload, dict):
        return Failure(message=fallback_message)
    message = payload.get("message") or payload.get("error") or fallback_message
    return Failure(
        message=message,
        error=payload.get("error"),
        details=payload.get("details"),
    )
