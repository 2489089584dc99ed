"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- StreamProvider : Fournisseur de flux (VIDLINK, FILMEX)
- MediaKind : Type de contenu lisible (MOVIE, TV)
- PlaybackTarget : Contenu charge dans une session de lecture
- StreamRequest : Parametres de resolution d'un flux
- ResolvedStream : Flux resolu par le proxy
- CricketCategory, CricketMatch, CricketStream : Donnees du proxy cricket
- Ok, Failure, Result : Resultat etiquete des appels externes
"""

from cinestream.core.value_objects.content import (
    MediaKind,
    PlaybackTarget,
    StreamRequest,
)
from cinestream.core.value_objects.provider import (
    DEFAULT_PROVIDER,
    PROVIDER_STORAGE_KEY,
    StreamProvider,
)
from cinestream.core.value_objects.result import (
    Failure,
    Ok,
    Result,
    failure_from_payload,
)
from cinestream.core.value_objects.stream import (
    CricketCategory,
    CricketMatch,
    CricketStream,
    ResolvedStream,
)

__all__ = [
    "MediaKind",
    "PlaybackTarget",
    "StreamRequest",
    "DEFAULT_PROVIDER",
    "PROVIDER_STORAGE_KEY",
    "StreamProvider",
    "Failure",
    "Ok",
    "Result",
    "failure_from_payload",
    "CricketCategory",
    "CricketMatch",
    "CricketStream",
    "ResolvedStream",
]
