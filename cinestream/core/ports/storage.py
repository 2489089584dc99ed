"""
Port de stockage des préférences (équivalent du localStorage navigateur).
"""

from abc import ABC, abstractmethod
from typing import Optional


class IPreferenceStore(ABC):
    """Stockage clé/valeur persistant de chaînes."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Retourne la valeur stockée, ou None si absente ou illisible."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Enregistre une valeur."""
        ...
