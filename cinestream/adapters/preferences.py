"""
Stockage des préférences dans un fichier JSON.

Equivalent persistant du localStorage navigateur : un dictionnaire plat
clé -> chaîne, relu à chaque accès pour refléter les modifications faites
par un autre processus (CLI et serveur partagent le fichier).
"""

import json
from pathlib import Path
from typing import Optional

from loguru import logger

from cinestream.core.ports.storage import IPreferenceStore


class JsonPreferenceStore(IPreferenceStore):
    """Implémentation fichier de IPreferenceStore."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _load(self) -> dict:
        """Charge le fichier. Absent ou invalide -> dictionnaire vide."""
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Préférences illisibles ({self._path}): {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
        except OSError as e:
            logger.warning(f"Impossible d'enregistrer la préférence {key}: {e}")


class MemoryPreferenceStore(IPreferenceStore):
    """Préférences en mémoire, non persistées."""

    def __init__(self, initial: Optional[dict[str, str]] = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
