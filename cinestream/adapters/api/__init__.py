"""
Clients HTTP des services externes.

- TMDBClient : API TMDB, utilise cote serveur par le proxy catalogue
- CatalogClient : endpoints /api du proxy catalogue, utilise cote client
- StreamProxyClient : resolution de flux (/v2/stream) et proxy cricket (/v3/cricket)
"""

from cinestream.adapters.api.catalog_client import CatalogClient
from cinestream.adapters.api.stream_client import StreamProxyClient
from cinestream.adapters.api.tmdb_client import TMDBClient

__all__ = [
    "CatalogClient",
    "StreamProxyClient",
    "TMDBClient",
]
