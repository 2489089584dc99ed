"""
Application FastAPI de CineStream.

Initialise l'application web avec le Container DI, configure les fichiers
statiques, le CORS et monte les routes. La route de repli (page unique)
est montée en dernier.
"""

from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from loguru import logger

from ..container import Container
from .routes.api import router as api_router
from .routes.pages import router as pages_router

_WEB_DIR = Path(__file__).parent


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialise le Container DI au démarrage et ferme le client TMDB à l'arrêt."""
    container = Container()
    app.state.container = container

    config = container.config()
    if not config.tmdb_enabled:
        logger.warning(
            "TMDB_API_KEY ou TMDB_READ_TOKEN non défini : "
            "créez un fichier .env avec ces deux valeurs pour activer les appels API."
        )

    yield

    await container.tmdb_client().close()


app = FastAPI(title="CineStream", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Fichiers statiques
app.mount("/static", StaticFiles(directory=_WEB_DIR / "static"), name="static")

# Routes
app.include_router(api_router)
app.include_router(pages_router)
