"""
Construction des modèles de vue à partir des réponses TMDB.

Fonctions pures : aucune requête, aucun état. Les vues de détail gardent
le JSON TMDB d'origine (movie, tv, season, episode) pour permettre les
retours « saisons » / « épisodes » sans nouvel appel réseau.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

IMAGE_BASE = "https://image.tmdb.org/t/p/w300"
BACKDROP_BASE = "https://image.tmdb.org/t/p/w780"
FALLBACK_POSTER = "https://via.placeholder.com/300x450/020617/6b7280?text=No+Image"

MOVIE_CAST_LIMIT = 8
EPISODE_CAST_LIMIT = 6
RECOMMENDATION_LIMIT = 10

_MEDIA_TYPE_LABELS = {"movie": "Movie", "tv": "Series", "person": "Person"}


@dataclass
class Card:
    """Carte d'une rangée, d'une recommandation ou d'un résultat de recherche."""

    id: Any
    media_type: str
    title: str
    subtitle: str
    poster_url: str
    item: dict = field(default_factory=dict, repr=False)


@dataclass
class CastMember:
    name: str
    role: str


@dataclass
class SeasonOption:
    """Bouton de sélection de saison."""

    season_number: int
    label: str


@dataclass
class EpisodeRow:
    episode_number: int
    label: str
    meta: str


@dataclass
class MovieDetailView:
    movie: dict
    title: str
    breadcrumb: list[str]
    chips: list[str]
    overview: str
    poster_url: str
    cast: list[CastMember]
    recommendations: list[Card]


@dataclass
class SeasonListView:
    tv: dict
    title: str
    breadcrumb: list[str]
    chips: list[str]
    overview: str
    poster_url: str
    seasons: list[SeasonOption]


@dataclass
class EpisodeListView:
    tv: dict
    season: dict
    title: str
    breadcrumb: list[str]
    episodes: list[EpisodeRow]
    empty_message: Optional[str] = None


@dataclass
class EpisodeDetailView:
    tv: dict
    season: dict
    episode: dict
    title: str
    breadcrumb: list[str]
    chips: list[str]
    overview: str
    still_url: str
    cast: list[CastMember]


DetailView = MovieDetailView | SeasonListView | EpisodeListView | EpisodeDetailView


def build_image_url(path: Optional[str], base: str = IMAGE_BASE) -> str:
    """URL complète d'une image TMDB, ou l'affiche par défaut."""
    if not path:
        return FALLBACK_POSTER
    return base + path


def year_of(date_str: Optional[str]) -> Optional[int]:
    """Année d'une date TMDB (YYYY-MM-DD), None si absente ou mal formée."""
    if not date_str or len(date_str) < 4 or not date_str[:4].isdigit():
        return None
    return int(date_str[:4])


def display_title(item: dict) -> str:
    return item.get("title") or item.get("name") or "Untitled"


def media_type_label(media_type: Optional[str]) -> str:
    return _MEDIA_TYPE_LABELS.get(media_type or "", "")


def _rating_chip(vote_average: Any) -> Optional[str]:
    if not vote_average:
        return None
    return f"★ {float(vote_average):.1f}"


def _cast(credits: Any, limit: int) -> list[CastMember]:
    if not isinstance(credits, dict) or not isinstance(credits.get("cast"), list):
        return []
    return [
        CastMember(name=person.get("name", ""), role=person.get("character") or "Cast")
        for person in credits["cast"][:limit]
    ]


def build_card(item: dict, type_hint: Optional[str] = None) -> Card:
    """Carte pour un élément de liste TMDB (type déduit de media_type ou de l'indice)."""
    media_type = item.get("media_type") or type_hint or "movie"
    year = year_of(item.get("release_date") or item.get("first_air_date"))

    parts = []
    if media_type in ("movie", "tv"):
        parts.append(media_type_label(media_type))
    if year:
        parts.append(str(year))

    return Card(
        id=item.get("id"),
        media_type=media_type,
        title=display_title(item),
        subtitle=" • ".join(parts),
        poster_url=build_image_url(item.get("poster_path")),
        item=item,
    )


def build_search_card(item: dict) -> Card:
    """Entrée de la liste déroulante de recherche (films, séries, personnes)."""
    media_type = item.get("media_type") or ""
    year = year_of(item.get("release_date") or item.get("first_air_date"))

    parts = []
    label = media_type_label(media_type)
    if label:
        parts.append(label)
    if year:
        parts.append(str(year))

    return Card(
        id=item.get("id"),
        media_type=media_type,
        title=display_title(item),
        subtitle=" • ".join(parts),
        poster_url=build_image_url(item.get("poster_path") or item.get("profile_path")),
        item=item,
    )


def build_movie_detail(movie: dict) -> MovieDetailView:
    chips = []
    year = year_of(movie.get("release_date"))
    if year:
        chips.append(str(year))
    if movie.get("runtime"):
        chips.append(f"{movie['runtime']} min")
    rating = _rating_chip(movie.get("vote_average"))
    if rating:
        chips.append(rating)
    genres = movie.get("genres")
    if isinstance(genres, list) and genres:
        chips.append(", ".join(g.get("name", "") for g in genres))

    recommendations = movie.get("recommendations")
    rec_items = (
        recommendations.get("results", [])
        if isinstance(recommendations, dict)
        else []
    )

    title = movie.get("title") or "Movie"
    return MovieDetailView(
        movie=movie,
        title=title,
        breadcrumb=["Home", "Movie", title],
        chips=chips,
        overview=movie.get("overview") or "No overview available.",
        poster_url=build_image_url(movie.get("poster_path")),
        cast=_cast(movie.get("credits"), MOVIE_CAST_LIMIT),
        recommendations=[
            build_card(item, "movie") for item in rec_items[:RECOMMENDATION_LIMIT]
        ],
    )


def build_season_list(tv: dict) -> SeasonListView:
    """Vue « choisir une saison » : les saisons spéciales (0) et vides sont exclues."""
    chips = []
    year = year_of(tv.get("first_air_date"))
    if year:
        chips.append(str(year))
    if isinstance(tv.get("number_of_seasons"), int):
        chips.append(f"{tv['number_of_seasons']} season(s)")
    rating = _rating_chip(tv.get("vote_average"))
    if rating:
        chips.append(rating)

    seasons = [
        SeasonOption(
            season_number=s["season_number"],
            label=f"Season {s['season_number']} ({s['episode_count']} eps)",
        )
        for s in tv.get("seasons") or []
        if (s.get("season_number") or 0) > 0 and (s.get("episode_count") or 0) > 0
    ]

    name = tv.get("name") or "Series"
    return SeasonListView(
        tv=tv,
        title=name,
        breadcrumb=["Home", "Series", name],
        chips=chips,
        overview=tv.get("overview") or "No overview available.",
        poster_url=build_image_url(tv.get("poster_path")),
        seasons=seasons,
    )


def build_episode_list(tv: dict, season: dict) -> EpisodeListView:
    name = tv.get("name") or "Series"
    number = season.get("season_number")

    rows = []
    for ep in season.get("episodes") or []:
        bits = []
        if ep.get("runtime"):
            bits.append(f"{ep['runtime']} min")
        if ep.get("air_date"):
            bits.append(ep["air_date"])
        rows.append(
            EpisodeRow(
                episode_number=ep.get("episode_number"),
                label=f"E{ep.get('episode_number')}: {ep.get('name', '')}",
                meta=" • ".join(bits),
            )
        )

    return EpisodeListView(
        tv=tv,
        season=season,
        title=f"{name} — Season {number}",
        breadcrumb=["Home", "Series", name, f"Season {number}"],
        episodes=rows,
        empty_message=(
            None if rows else "No episode information available for this season."
        ),
    )


def build_episode_detail(tv: dict, season: dict, episode: dict) -> EpisodeDetailView:
    name = tv.get("name") or "Series"
    season_number = season.get("season_number")
    episode_number = episode.get("episode_number")

    chips = []
    if episode.get("runtime"):
        chips.append(f"{episode['runtime']} min")
    if episode.get("air_date"):
        chips.append(episode["air_date"])
    rating = _rating_chip(episode.get("vote_average"))
    if rating:
        chips.append(rating)

    # L'image de l'épisode est plus large que l'affiche de la série
    still_path = episode.get("still_path")
    still_url = (
        build_image_url(still_path, BACKDROP_BASE)
        if still_path
        else build_image_url(tv.get("poster_path"))
    )

    return EpisodeDetailView(
        tv=tv,
        season=season,
        episode=episode,
        title=f"S{season_number} • E{episode_number} — {episode.get('name', '')}",
        breadcrumb=[
            "Home",
            "Series",
            name,
            f"Season {season_number}",
            f"Episode {episode_number}",
        ],
        chips=chips,
        overview=episode.get("overview") or "No overview available.",
        still_url=still_url,
        cast=_cast(episode.get("credits"), EPISODE_CAST_LIMIT),
    )
