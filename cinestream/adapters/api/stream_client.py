"""
Client du proxy de flux externe (resolution VidLink/Filmex et cricket).

Les enveloppes JSON du proxy sont converties ici en Ok/Failure :
- /v2/stream : {ok, url, format, expiresAt, fromCache, provider}
- /v3/cricket/* : {ok, data}
- erreurs : {ok: false, error, message, details}

Les erreurs reseau et les reponses illisibles deviennent aussi des Failure ;
seule une requete de flux incomplete leve une exception (avant l'appel).

Usage:
    client = StreamProxyClient(base_url="http://localhost:4000")
    result = await client.resolve(StreamRequest(type="movie", tmdb_id=603))
    if isinstance(result, Ok):
        print(result.value.url)
"""

from typing import Any, Callable, Optional, TypeVar
from urllib.parse import quote

import httpx
from loguru import logger

from cinestream.core.ports.api_clients import ICricketAPI, IStreamResolver
from cinestream.core.value_objects.content import StreamRequest
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

T = TypeVar("T")

PROXY_UNREACHABLE_MESSAGE = "Failed to contact streaming proxy."
STREAM_UNAVAILABLE_MESSAGE = "Streaming is not available for this title right now."


class StreamProxyClient(IStreamResolver, ICricketAPI):
    """
    Client httpx du proxy de flux.

    Attributes:
        base_url: URL de base du proxy (surchargeable par configuration)
    """

    def __init__(
        self,
        base_url: str = "http://localhost:4000",
        timeout: float = 30.0,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self._timeout,
            )
        return self._client

    async def _get_payload(
        self, path: str, params: Optional[dict[str, str]] = None
    ) -> Result[Any]:
        """
        GET sur le proxy et decodage JSON, quel que soit le statut HTTP.

        Le proxy signale ses erreurs dans le corps ; seul un echec reseau
        ou un corps non JSON produit directement un Failure.
        """
        client = self._get_client()
        try:
            response = await client.get(path, params=params)
            payload = response.json()
        except (httpx.RequestError, ValueError) as e:
            logger.warning(f"Proxy de flux injoignable: {path} - {e}")
            return Failure(message=PROXY_UNREACHABLE_MESSAGE, error="proxy_unreachable")
        return Ok(payload)

    async def resolve(self, request: StreamRequest) -> Result[ResolvedStream]:
        """
        Resout une URL de flux via /v2/stream.

        Raises:
            InvalidStreamRequestError: Requete incomplete, levee avant l'appel reseau
        """
        params = request.to_query_params()
        fetched = await self._get_payload("/v2/stream", params=params)
        if isinstance(fetched, Failure):
            return fetched

        payload = fetched.value
        if not isinstance(payload, dict) or not payload.get("ok") or not payload.get("url"):
            logger.warning(f"Reponse proxy inattendue pour {params}: {payload}")
            return failure_from_payload(payload, STREAM_UNAVAILABLE_MESSAGE)

        stream = ResolvedStream.from_payload(payload)
        logger.debug(
            f"Flux resolu via {stream.provider or params['provider']} "
            f"(cache={stream.from_cache})"
        )
        return Ok(stream)

    async def _get_data(
        self,
        path: str,
        fallback_message: str,
        parse: Callable[[Any], T],
        params: Optional[dict[str, str]] = None,
    ) -> Result[T]:
        """Decode une enveloppe {ok, data} et applique le parseur a data."""
        fetched = await self._get_payload(path, params=params)
        if isinstance(fetched, Failure):
            return fetched

        payload = fetched.value
        if not isinstance(payload, dict) or not payload.get("ok"):
            logger.warning(f"Reponse cricket en echec: {path}")
            return failure_from_payload(payload, fallback_message)

        try:
            return Ok(parse(payload.get("data")))
        except (KeyError, TypeError, AttributeError) as e:
            logger.warning(f"Donnees cricket illisibles: {path} - {e}")
            return Failure(message=fallback_message, error="invalid_payload")

    async def categories(self) -> Result[list[CricketCategory]]:
        return await self._get_data(
            "/v3/cricket/categories",
            "Failed to load categories.",
            lambda data: [CricketCategory.from_payload(c) for c in data or []],
        )

    async def matches(self, slug: str) -> Result[list[CricketMatch]]:
        return await self._get_data(
            f"/v3/cricket/category/{quote(slug, safe='')}/matches",
            "Failed to load matches.",
            lambda data: [CricketMatch.from_payload(m) for m in data or []],
        )

    async def streams(self, match_url: str) -> Result[list[CricketStream]]:
        return await self._get_data(
            "/v3/cricket/match/streams",
            "Failed to load streams.",
            lambda data: [CricketStream.from_payload(s) for s in data or []],
            params={"matchUrl": match_url},
        )

    async def all_data(self) -> Result[Any]:
        return await self._get_data(
            "/v3/cricket/all",
            "Failed to load cricket data.",
            lambda data: data,
        )

    async def close(self) -> None:
        """Ferme le client HTTP."""
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
