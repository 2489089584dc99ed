"""
Fixtures pytest partagees pour les tests CineStream.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test avec chemins temporaires
- Mocks des ports (catalogue, resolution de flux, cricket, notifications)
- Doubles du lecteur (element video, bibliotheque HLS)
"""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from cinestream.adapters.preferences import MemoryPreferenceStore
from cinestream.config import Settings
from cinestream.core.ports.api_clients import ICatalogAPI, ICricketAPI, IStreamResolver
from cinestream.core.ports.notifier import INotifier
from cinestream.services.playback import PlaybackContext, PlaybackService
from tests.fixtures.media import FakeHlsLibrary, FakeVideoElement


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test isoles de l'environnement (fichier .env ignore)."""
    return Settings(
        _env_file=None,
        tmdb_api_key="test_api_key",
        tmdb_read_token="test_read_token",
        preferences_file=tmp_path / "preferences.json",
        log_file=tmp_path / "logs" / "cinestream.log",
    )


@pytest.fixture
def preferences() -> MemoryPreferenceStore:
    return MemoryPreferenceStore()


@pytest.fixture
def mock_notifier() -> MagicMock:
    """Mock de INotifier : verifier les appels loading/success/error."""
    return MagicMock(spec=INotifier)


@pytest.fixture
def mock_catalog() -> AsyncMock:
    """
    Mock de ICatalogAPI.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=ICatalogAPI)


@pytest.fixture
def mock_resolver() -> AsyncMock:
    return AsyncMock(spec=IStreamResolver)


@pytest.fixture
def mock_cricket_api() -> AsyncMock:
    return AsyncMock(spec=ICricketAPI)


@pytest.fixture
def video() -> FakeVideoElement:
    return FakeVideoElement()


@pytest.fixture
def hls() -> FakeHlsLibrary:
    return FakeHlsLibrary()


@pytest.fixture
def playback_context(preferences: MemoryPreferenceStore) -> PlaybackContext:
    return PlaybackContext(preferences)


@pytest.fixture
def playback(
    playback_context: PlaybackContext,
    mock_resolver: AsyncMock,
    hls: FakeHlsLibrary,
) -> PlaybackService:
    """PlaybackService avec resolveur mocke et bibliotheque HLS en memoire."""
    return PlaybackService(playback_context, mock_resolver, hls)
