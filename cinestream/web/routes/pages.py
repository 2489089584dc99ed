"""
Page unique de l'application.

Toute URL non servie par l'API ou les fichiers statiques renvoie index.html,
la navigation se faisant côté client.
"""

from fastapi import APIRouter, Request

from ..deps import templates

router = APIRouter()


@router.get("/{full_path:path}", include_in_schema=False)
async def index(request: Request, full_path: str = ""):
    """Page d'accueil (et repli pour toutes les autres routes)."""
    container = request.app.state.container
    config = container.config()
    return templates.TemplateResponse(
        request,
        "index.html",
        {"stream_proxy_base": config.stream_proxy_base},
    )
