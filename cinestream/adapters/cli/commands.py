"""
Commandes CLI du catalogue : recherche, rangées d'accueil, lecture,
choix du fournisseur de flux et cricket en direct.

Les commandes interrogent le proxy catalogue (cinestream serve) et le
proxy de flux ; la lecture est confiée au lecteur externe configuré.
"""

import asyncio
from typing import Annotated, Optional

import typer
from rich.table import Table

from cinestream.adapters.cli.helpers import console, suppress_loguru, with_container
from cinestream.adapters.player import ExternalPlayerVideoElement
from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.value_objects.provider import StreamProvider
from cinestream.core.value_objects.result import Failure
from cinestream.services.home import ROWS
from cinestream.services.playback import PlaybackSession
from cinestream.services.presenters import Card

ROW_TITLES = {
    "popular-movies": "Popular Movies",
    "popular-tv": "Popular TV Shows",
    "featured-movies": "Featured Movies",
    "featured-tv": "Featured TV Shows",
}

play_app = typer.Typer(
    name="play",
    help="Lecture d'un film ou d'un épisode",
    rich_markup_mode="rich",
)


def _cards_table(title: str, cards: list[Card]) -> Table:
    table = Table(title=title, show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Infos")
    table.add_column("TMDB", style="cyan", justify="right")
    for index, card in enumerate(cards, start=1):
        table.add_row(str(index), card.title, card.subtitle, str(card.id))
    return table


def _print_session(session: Optional[PlaybackSession]) -> bool:
    """Affiche l'état de la session ; retourne True si la lecture a démarré."""
    if session is None:
        console.print("[yellow]Aucune lecture en cours.[/yellow]")
        return False
    if session.stream is None:
        console.print(f"[red]{session.status}[/red]")
        return False
    console.print(
        f"[green]Lecture via {session.provider.label}[/green] "
        f"[dim]({session.stream.format or 'stream'})[/dim]"
    )
    console.print(f"[dim]{session.stream.url}[/dim]")
    return True


async def _wait_player(video) -> None:
    if isinstance(video, ExternalPlayerVideoElement):
        await asyncio.to_thread(video.wait)


# ---------------------------------------------------------------------------
# search
# ---------------------------------------------------------------------------


def search(
    query: Annotated[str, typer.Argument(help="Titre ou personne à rechercher")],
    open_index: Annotated[
        Optional[int],
        typer.Option("--open", "-o", help="Ouvre le résultat numéro N"),
    ] = None,
) -> None:
    """Recherche films, séries et personnes."""
    asyncio.run(_search_async(query, open_index))


@with_container()
async def _search_async(container, query: str, open_index: Optional[int]) -> None:
    service = container.search_service()

    with suppress_loguru():
        cards = await service.search(query)

    if not cards:
        console.print("[yellow]Aucun résultat.[/yellow]")
        return

    console.print(_cards_table(f"Résultats pour « {query.strip()} »", cards))

    if open_index is None:
        return
    if not 1 <= open_index <= len(cards):
        console.print(f"[red]Résultat {open_index} inexistant.[/red]")
        raise typer.Exit(code=1)

    view = await service.select(cards[open_index - 1])
    if view is None:
        console.print("[yellow]Ce résultat ne peut pas être ouvert.[/yellow]")
        return
    console.print(f"[bold]{view.title}[/bold]")
    session = container.playback_context().session
    if _print_session(session):
        await _wait_player(session.video)


# ---------------------------------------------------------------------------
# rows
# ---------------------------------------------------------------------------


def rows() -> None:
    """Affiche les rangées de la page d'accueil."""
    asyncio.run(_rows_async())


@with_container(notify=False)
async def _rows_async(container) -> None:
    service = container.home_rows_service()

    with suppress_loguru():
        views = await service.load_rows()

    for config in ROWS:
        view = views[config.id]
        title = ROW_TITLES.get(config.id, config.id)
        if view.message:
            console.print(f"\n[bold]{title}[/bold]\n[dim]{view.message}[/dim]")
        else:
            console.print(_cards_table(title, view.cards))


# ---------------------------------------------------------------------------
# play
# ---------------------------------------------------------------------------


ProviderOption = Annotated[
    Optional[str],
    typer.Option("--provider", "-p", help="Fournisseur : vidlink ou filmex"),
]


@play_app.command("movie")
def play_movie(
    movie_id: Annotated[int, typer.Argument(help="Identifiant TMDB du film")],
    provider: ProviderOption = None,
) -> None:
    """Ouvre un film et lance sa lecture."""
    asyncio.run(_play_movie_async(movie_id, provider))


@with_container()
async def _play_movie_async(container, movie_id: int, provider: Optional[str]) -> None:
    if provider:
        container.playback_context().set_provider(provider)

    view = await container.detail_navigator().open_movie(movie_id)
    if view is None:
        raise typer.Exit(code=1)

    console.print(f"[bold]{view.title}[/bold] [dim]{' • '.join(view.chips)}[/dim]")
    session = container.playback_context().session
    if not _print_session(session):
        raise typer.Exit(code=1)
    await _wait_player(session.video)


@play_app.command("episode")
def play_episode(
    tv_id: Annotated[int, typer.Argument(help="Identifiant TMDB de la série")],
    season: Annotated[int, typer.Argument(help="Numéro de saison")],
    episode: Annotated[int, typer.Argument(help="Numéro d'épisode")],
    provider: ProviderOption = None,
) -> None:
    """Ouvre un épisode et lance sa lecture."""
    asyncio.run(_play_episode_async(tv_id, season, episode, provider))


@with_container()
async def _play_episode_async(
    container, tv_id: int, season: int, episode: int, provider: Optional[str]
) -> None:
    if provider:
        container.playback_context().set_provider(provider)

    catalog = container.catalog_client()
    try:
        tv_data = await catalog.tv(tv_id)
        season_data = await catalog.season(tv_id, season)
    except CatalogRequestError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    view = await container.detail_navigator().open_episode(
        tv_id, season, episode, tv_data, season_data
    )
    if view is None:
        raise typer.Exit(code=1)

    console.print(f"[bold]{view.title}[/bold]")
    session = container.playback_context().session
    if not _print_session(session):
        raise typer.Exit(code=1)
    await _wait_player(session.video)


# ---------------------------------------------------------------------------
# provider
# ---------------------------------------------------------------------------


def provider(
    name: Annotated[
        Optional[str],
        typer.Argument(help="Nouveau fournisseur (vidlink ou filmex)"),
    ] = None,
) -> None:
    """Affiche ou change le fournisseur de flux mémorisé."""
    asyncio.run(_provider_async(name))


@with_container(notify=False)
async def _provider_async(container, name: Optional[str]) -> None:
    context = container.playback_context()

    if name is None:
        console.print(f"Fournisseur : [bold]{context.provider.label}[/bold]")
        return

    if name.strip().lower() not in {p.value for p in StreamProvider}:
        console.print(f"[yellow]Fournisseur inconnu '{name}', VidLink utilisé.[/yellow]")
    selected = context.set_provider(name)
    console.print(f"[green]Fournisseur enregistré :[/green] [bold]{selected.label}[/bold]")


# ---------------------------------------------------------------------------
# cricket
# ---------------------------------------------------------------------------


def cricket(
    category: Annotated[
        Optional[str],
        typer.Option("--category", "-c", help="Slug de la catégorie"),
    ] = None,
    match: Annotated[
        Optional[int],
        typer.Option("--match", "-m", help="Numéro du match"),
    ] = None,
    play: Annotated[
        bool,
        typer.Option("--play", help="Lance le premier flux du match"),
    ] = False,
) -> None:
    """Parcourt les matchs de cricket en direct."""
    asyncio.run(_cricket_async(category, match, play))


@with_container()
async def _cricket_async(
    container, category: Optional[str], match: Optional[int], play: bool
) -> None:
    service = container.cricket_service()
    await container.view_router().show_cricket()
    state = service.state

    if state.error:
        raise typer.Exit(code=1)

    if category:
        selected = next((c for c in state.categories if c.slug == category), None)
        if selected is None:
            console.print(f"[red]Catégorie inconnue : {category}[/red]")
            raise typer.Exit(code=1)
        await service.select_category(selected)
        if state.error:
            raise typer.Exit(code=1)

    categories = Table(title="Catégories")
    categories.add_column("Slug", style="cyan")
    categories.add_column("Nom")
    for item in state.categories:
        marker = " [green]●[/green]" if item.slug == state.selected_category_slug else ""
        categories.add_row(item.slug, f"{item.name}{marker}")
    console.print(categories)

    if not state.matches:
        console.print("[dim]No matches available for this category.[/dim]")
        return

    matches = Table(title="Matchs")
    matches.add_column("#", style="dim", justify="right")
    matches.add_column("Match", style="bold")
    matches.add_column("Sources")
    for index, item in enumerate(state.matches, start=1):
        matches.add_row(str(index), item.title, ", ".join(item.stream_link_names))
    console.print(matches)

    if match is None:
        return
    if not 1 <= match <= len(state.matches):
        console.print(f"[red]Match {match} inexistant.[/red]")
        raise typer.Exit(code=1)
    selected_match = state.matches[match - 1]

    if not play:
        result = await container.stream_client().streams(selected_match.url)
        if isinstance(result, Failure):
            console.print(f"[red]{result.message}[/red]")
            raise typer.Exit(code=1)
        for stream in result.value:
            console.print(f"  {stream.label}  [dim]{stream.url}[/dim]")
        return

    await service.select_match(selected_match)
    if state.status:
        console.print(f"[yellow]{state.status}[/yellow]")
    if state.error or state.status:
        raise typer.Exit(code=1)
    await _wait_player(service.video)
