"""
Point d'entrée CLI de CineStream.

Initialise le container DI, configure le logging et fournit les commandes CLI.
"""

from typing import Annotated, Optional

import typer
from loguru import logger

from . import __version__
from .adapters.cli.commands import cricket, play_app, provider, rows, search
from .config import Settings
from .container import Container
from .logging_config import configure_logging, resolve_log_level

app = typer.Typer(
    name="cinestream",
    help="Catalogue TMDB et lecture en streaming",
)
container = Container()


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineStream - Catalogue TMDB et lecture en streaming."""
    settings = container.config()
    configure_logging(
        log_level=resolve_log_level(settings.log_level, verbose, quiet),
        log_file=settings.log_file,
        rotation_size=settings.log_rotation_size,
        retention_count=settings.log_retention_count,
    )
    logger.debug("Demarrage de CineStream", version=__version__)


# Monter les commandes depuis commands.py
app.command()(search)
app.command()(rows)
app.command()(provider)
app.command()(cricket)

# Monter play_app comme sous-commande
app.add_typer(play_app, name="play")


def get_config() -> Settings:
    """Récupère les paramètres de l'application depuis le container DI."""
    return container.config()


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = get_config()
    logger.info("Configuration CineStream")
    typer.echo(f"API TMDB : {'activée' if config.tmdb_enabled else 'désactivée'}")
    typer.echo(f"Langue TMDB : {config.tmdb_language}")
    typer.echo(f"Proxy catalogue : {config.catalog_base_url}")
    typer.echo(f"Proxy de flux : {config.stream_proxy_base}")
    typer.echo(f"Lecteur : {config.player_command}")
    typer.echo(f"Préférences : {config.preferences_file}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineStream v{__version__}")


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option(help="Adresse d'écoute")] = None,
    port: Annotated[Optional[int], typer.Option(help="Port d'écoute")] = None,
    reload: Annotated[bool, typer.Option(help="Rechargement automatique")] = False,
) -> None:
    """Lance le serveur proxy TMDB et la page unique."""
    import uvicorn

    config = get_config()
    host = host or config.host
    port = port or config.port

    typer.echo(f"Démarrage du serveur sur {host}:{port}")
    uvicorn.run("cinestream.web.app:app", host=host, port=port, reload=reload)


def main() -> None:
    """Point d'entrée de l'application."""
    app()


if __name__ == "__main__":
    main()
