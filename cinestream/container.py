"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour les interfaces CLI et Web :
client TMDB du serveur proxy, clients HTTP de la couche client et services
d'orchestration (lecture, navigation, recherche, cricket).
"""

from dependency_injector import containers, providers

from .adapters.api.catalog_client import CatalogClient
from .adapters.api.stream_client import StreamProxyClient
from .adapters.api.tmdb_client import TMDBClient
from .adapters.player import ExternalPlayerVideoElement
from .adapters.preferences import JsonPreferenceStore
from .config import Settings
from .core.ports.notifier import NullNotifier
from .services.cricket import CricketService
from .services.home import HomeRowsService
from .services.navigation import DetailNavigator, ViewRouter
from .services.playback import PlaybackContext, PlaybackService
from .services.search import SearchService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        tmdb = container.tmdb_client()
        playback = container.playback_service()

    Les capacites optionnelles (notifications, bibliothèque HLS) se
    surchargent au demarrage :
        container.notifier.override(providers.Object(ConsoleNotifier()))
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Serveur proxy : client TMDB partage par toutes les requetes
    tmdb_client = providers.Singleton(
        TMDBClient,
        api_key=config.provided.tmdb_api_key,
        read_token=config.provided.tmdb_read_token,
        language=config.provided.tmdb_language,
        timeout=config.provided.tmdb_timeout,
    )

    # Capacites optionnelles
    notifier = providers.Singleton(NullNotifier)
    hls_library = providers.Object(None)

    # Preferences persistees (fournisseur de flux)
    preference_store = providers.Singleton(
        JsonPreferenceStore,
        path=config.provided.preferences_file,
    )

    # Element video - nouvelle instance pour chaque page lisible
    video_factory = providers.Factory(
        ExternalPlayerVideoElement,
        command=config.provided.player_command,
    )

    # Clients HTTP de la couche client
    catalog_client = providers.Singleton(
        CatalogClient,
        base_url=config.provided.catalog_base_url,
        timeout=config.provided.tmdb_timeout,
    )
    stream_client = providers.Singleton(
        StreamProxyClient,
        base_url=config.provided.stream_proxy_base,
    )

    # Lecture : contexte partage par toutes les vues
    playback_context = providers.Singleton(
        PlaybackContext,
        preferences=preference_store,
    )
    playback_service = providers.Singleton(
        PlaybackService,
        context=playback_context,
        resolver=stream_client,
        hls=hls_library,
    )

    cricket_service = providers.Singleton(
        CricketService,
        api=stream_client,
        playback=playback_service,
        video=video_factory,
        notifier=notifier,
    )

    view_router = providers.Singleton(
        ViewRouter,
        playback=playback_service,
        notifier=notifier,
        cricket=cricket_service,
    )

    detail_navigator = providers.Singleton(
        DetailNavigator,
        catalog=catalog_client,
        router=view_router,
        playback=playback_service,
        video_factory=video_factory.provider,
        notifier=notifier,
    )

    search_service = providers.Singleton(
        SearchService,
        catalog=catalog_client,
        navigator=detail_navigator,
        debounce_seconds=config.provided.search_debounce_seconds,
        limit=config.provided.search_result_limit,
    )

    home_rows_service = providers.Singleton(
        HomeRowsService,
        catalog=catalog_client,
        limit=config.provided.home_row_limit,
    )
