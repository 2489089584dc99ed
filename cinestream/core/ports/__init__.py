"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Ports client API :
- ICatalogAPI : Endpoints /api du proxy catalogue
- IStreamResolver : Résolution de flux
- ICricketAPI : Proxy cricket

Ports d'interface :
- IVideoElement, IHlsInstance, IHlsLibrary : Lecture média
- INotifier, NullNotifier, ToastKind : Notifications optionnelles
- IPreferenceStore : Préférences persistées
"""

from cinestream.core.ports.api_clients import (
    ICatalogAPI,
    ICricketAPI,
    IStreamResolver,
)
from cinestream.core.ports.media import (
    HLS_MIME_TYPE,
    IHlsInstance,
    IHlsLibrary,
    IVideoElement,
)
from cinestream.core.ports.notifier import INotifier, NullNotifier, ToastKind
from cinestream.core.ports.storage import IPreferenceStore

__all__ = [
    # Clients API
    "ICatalogAPI",
    "ICricketAPI",
    "IStreamResolver",
    # Lecture
    "HLS_MIME_TYPE",
    "IHlsInstance",
    "IHlsLibrary",
    "IVideoElement",
    # Notifications
    "INotifier",
    "NullNotifier",
    "ToastKind",
    # Stockage
    "IPreferenceStore",
]
