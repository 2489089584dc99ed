"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe CINESTREAM_,
et peut optionnellement être fournie via un fichier .env.

Les identifiants TMDB acceptent aussi les noms historiques sans préfixe
(TMDB_API_KEY, TMDB_READ_TOKEN), de même que PORT et VIDLINK_PROXY_BASE.
"""

from pathlib import Path
from typing import Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Trouver le fichier .env à la racine du projet (parent du package)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe CINESTREAM_.
    Exemple : CINESTREAM_LOG_LEVEL=DEBUG

    Les chemins sont automatiquement étendus (~ -> répertoire home).
    """

    model_config = SettingsConfigDict(
        env_prefix="CINESTREAM_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    # Identifiants TMDB (requis pour que le proxy retourne des données)
    tmdb_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("TMDB_API_KEY", "CINESTREAM_TMDB_API_KEY"),
    )
    tmdb_read_token: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("TMDB_READ_TOKEN", "CINESTREAM_TMDB_READ_TOKEN"),
    )
    tmdb_language: str = Field(default="en-US")
    tmdb_timeout: float = Field(default=30.0, gt=0)

    # Proxy de résolution des flux (VidLink / Filmex) et proxy cricket
    stream_proxy_base: str = Field(
        default="http://localhost:4000",
        validation_alias=AliasChoices(
            "CINESTREAM_STREAM_PROXY_BASE", "VIDLINK_PROXY_BASE"
        ),
    )

    # Serveur web et URL utilisée par la couche client (CLI)
    host: str = Field(default="0.0.0.0")
    port: int = Field(
        default=3000, ge=1, le=65535, validation_alias=AliasChoices("CINESTREAM_PORT", "PORT")
    )
    catalog_base_url: str = Field(default="http://localhost:3000")

    # Lecteur externe utilisé par la CLI (lit HLS nativement)
    player_command: str = Field(default="mpv")

    # Préférences persistées (équivalent du localStorage)
    preferences_file: Path = Field(default=Path("~/.config/cinestream/preferences.json"))

    # Recherche et rangées d'accueil
    search_debounce_ms: int = Field(default=350, ge=0)
    search_result_limit: int = Field(default=10, ge=1)
    home_row_limit: int = Field(default=14, ge=1)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinestream.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("preferences_file", "log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("stream_proxy_base", "catalog_base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Supprime le / final pour pouvoir concaténer les chemins d'endpoint."""
        return v.rstrip("/")

    @property
    def tmdb_enabled(self) -> bool:
        """Vérifie si les deux identifiants TMDB sont configurés."""
        return bool(self.tmdb_api_key) and bool(self.tmdb_read_token)

    @property
    def search_debounce_seconds(self) -> float:
        """Délai d'anti-rebond de la recherche, en secondes."""
        return self.search_debounce_ms / 1000
