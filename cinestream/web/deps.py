"""
Dépendances partagées de l'application web.

Fournit les templates Jinja2 et l'accès au client TMDB du Container.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from .. import __version__
from ..adapters.api.tmdb_client import TMDBClient

_WEB_DIR = Path(__file__).parent

templates = Jinja2Templates(directory=_WEB_DIR / "templates")

# Version disponible dans tous les templates
templates.env.globals["app_version"] = f"CineStream v{__version__}"


def get_tmdb_client(request: Request) -> TMDBClient:
    """Client TMDB singleton du Container attaché à l'application."""
    return request.app.state.container.tmdb_client()
