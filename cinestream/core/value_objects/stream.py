"""
Objets valeur retournés par le proxy de flux et le proxy cricket.

Ils sont construits à la frontière (adaptateur HTTP) à partir des
enveloppes JSON, de sorte que le reste du code ne revérifie jamais leur forme.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class ResolvedStream:
    """
    Flux résolu par /v2/stream.

    Attributs :
        url : URL directe du manifeste HLS
        format : Format annoncé (ex: "hls")
        expires_at : Horodatage d'expiration de l'URL, si fourni
        from_cache : True si le proxy a servi l'URL depuis son cache
        provider : Fournisseur ayant effectué la résolution
    """

    url: str
    format: Optional[str] = None
    expires_at: Optional[int] = None
    from_cache: bool = False
    provider: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "ResolvedStream":
        return cls(
            url=payload["url"],
            format=payload.get("format"),
            expires_at=payload.get("expiresAt"),
            from_cache=bool(payload.get("fromCache", False)),
            provider=payload.get("provider"),
        )


@dataclass(frozen=True)
class CricketCategory:
    """Catégorie de matchs (ligue, tournoi)."""

    name: str
    slug: str

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CricketCategory":
        return cls(name=payload.get("name") or payload["slug"], slug=payload["slug"])


@dataclass(frozen=True)
class CricketMatch:
    """Match listé dans une catégorie ; ses flux sont résolus à la sélection."""

    title: str
    url: str
    stream_link_names: tuple[str, ...] = ()

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CricketMatch":
        links = payload.get("streamLinks") or []
        return cls(
            title=payload.get("title", ""),
            url=payload["url"],
            stream_link_names=tuple(link.get("name", "") for link in links),
        )


@dataclass(frozen=True)
class CricketStream:
    """Flux direct d'un match."""

    url: str
    format: Optional[str] = None
    quality: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "CricketStream":
        return cls(
            url=payload["url"],
            format=payload.get("format"),
            quality=payload.get("quality"),
        )

    @property
    def label(self) -> str:
        """Libellé du flux : format et qualité si connue."""
        base = self.format or "Stream"
        if self.quality and self.quality != "unknown":
            return f"{base} — {self.quality}"
        return base
