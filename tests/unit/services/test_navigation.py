"""
Tests for ViewRouter and DetailNavigator.

Verifies:
- Exactly one view is visible and every transition tears playback down
- Detail pages start playback for movies and episodes
- Back buttons re-render from retained data without any request
- A slow response superseded by a newer navigation is ignored
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from cinestream.core.exceptions import CatalogRequestError
from cinestream.core.value_objects import Ok, ResolvedStream
from cinestream.services.navigation import DetailNavigator, ViewRouter, ViewState
from cinestream.services.playback import PlaybackService
from cinestream.services.presenters import (
    EpisodeDetailView,
    EpisodeListView,
    MovieDetailView,
    SeasonListView,
)
from tests.fixtures.media import FakeHlsLibrary, FakeVideoElement
from tests.fixtures.tmdb_responses import (
    TMDB_EPISODE_DETAILS_RESPONSE,
    TMDB_MOVIE_DETAILS_RESPONSE,
    TMDB_SEASON_DETAILS_RESPONSE,
    TMDB_TV_DETAILS_RESPONSE,
)


@pytest.fixture
def router(playback: PlaybackService, mock_notifier: MagicMock) -> ViewRouter:
    return ViewRouter(playback, mock_notifier)


@pytest.fixture
def navigator(
    mock_catalog: AsyncMock,
    router: ViewRouter,
    playback: PlaybackService,
    mock_notifier: MagicMock,
) -> DetailNavigator:
    return DetailNavigator(mock_catalog, router, playback, FakeVideoElement, mock_notifier)


@pytest.fixture(autouse=True)
def resolvable(mock_resolver: AsyncMock) -> None:
    mock_resolver.resolve.return_value = Ok(
        ResolvedStream(url="https://cdn.example.com/master.m3u8", format="hls")
    )


class TestViewRouter:
    def test_starts_on_home(self, router: ViewRouter):
        assert router.state is ViewState.HOME
        assert router.visible_views == {ViewState.HOME}

    @pytest.mark.asyncio
    async def test_one_view_visible_after_each_transition(self, router: ViewRouter):
        router.show_detail(MagicMock())
        assert router.visible_views == {ViewState.DETAIL}

        await router.show_cricket()
        assert router.visible_views == {ViewState.CRICKET}
        assert router.detail is None

        router.show_home()
        assert router.visible_views == {ViewState.HOME}
        assert router.is_visible(ViewState.HOME)
        assert not router.is_visible(ViewState.CRICKET)

    @pytest.mark.asyncio
    async def test_transition_clears_playback(
        self, router: ViewRouter, playback: PlaybackService, hls: FakeHlsLibrary,
        video: FakeVideoElement,
    ):
        await playback.start_movie({"id": 603}, video)
        assert playback.context.session is not None

        router.show_home()

        assert playback.context.session is None
        assert hls.live == []

    @pytest.mark.asyncio
    async def test_transition_stops_detail_video(
        self, router: ViewRouter, navigator: DetailNavigator, mock_catalog, playback
    ):
        """Leaving the detail page pauses and empties its video element."""
        mock_catalog.movie.return_value = TMDB_MOVIE_DETAILS_RESPONSE
        await navigator.open_movie(603)
        video = playback.context.session.video
        video.calls.clear()

        router.show_home()

        assert video.calls == ["pause", "clear_source"]
        assert playback.context.video is None

    @pytest.mark.asyncio
    async def test_show_cricket_initializes_panel(self, playback, mock_notifier):
        cricket = AsyncMock()
        router = ViewRouter(playback, mock_notifier, cricket)

        await router.show_cricket()

        mock_notifier.loading.assert_called_once_with("Loading cricket streams...")
        cricket.ensure_initialized.assert_awaited_once()


class TestOpenMovie:
    @pytest.mark.asyncio
    async def test_renders_and_plays(
        self, navigator: DetailNavigator, mock_catalog, router, playback, mock_notifier
    ):
        mock_catalog.movie.return_value = TMDB_MOVIE_DETAILS_RESPONSE

        view = await navigator.open_movie(603)

        assert isinstance(view, MovieDetailView)
        assert router.state is ViewState.DETAIL
        assert router.detail is view
        assert playback.context.session.target.tmdb_id == 603
        mock_notifier.loading.assert_called_once_with("Loading movie details...")
        mock_notifier.success.assert_called_once_with('Loaded "The Matrix"')

    @pytest.mark.asyncio
    async def test_second_title_stops_first_video(
        self, navigator: DetailNavigator, mock_catalog, playback
    ):
        """Only the latest detail page keeps a playing video element."""
        mock_catalog.movie.return_value = TMDB_MOVIE_DETAILS_RESPONSE
        await navigator.open_movie(603)
        first = playback.context.session.video
        first.calls.clear()

        await navigator.open_movie(604)

        second = playback.context.session.video
        assert second is not first
        assert first.calls == ["pause", "clear_source"]
        assert playback.context.video is second

    @pytest.mark.asyncio
    async def test_failure_shows_error_toast(
        self, navigator: DetailNavigator, mock_catalog, router, mock_notifier
    ):
        mock_catalog.movie.side_effect = CatalogRequestError(500)

        view = await navigator.open_movie(603)

        assert view is None
        assert router.state is ViewState.HOME
        mock_notifier.error.assert_called_once_with("Failed to load movie details")

    @pytest.mark.asyncio
    async def test_navigate_to_item_dispatches_on_type(
        self, navigator: DetailNavigator, mock_catalog
    ):
        mock_catalog.tv.return_value = TMDB_TV_DETAILS_RESPONSE

        view = await navigator.navigate_to_item({"id": 1399}, "tv")

        assert isinstance(view, SeasonListView)
        mock_catalog.movie.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_navigate_to_person_does_nothing(
        self, navigator: DetailNavigator, mock_catalog
    ):
        view = await navigator.navigate_to_item({"id": 6384, "media_type": "person"})

        assert view is None
        mock_catalog.movie.assert_not_awaited()
        mock_catalog.tv.assert_not_awaited()


class TestSeriesNavigation:
    @pytest.mark.asyncio
    async def test_series_flow_to_episode(
        self, navigator: DetailNavigator, mock_catalog, router, playback
    ):
        mock_catalog.tv.return_value = TMDB_TV_DETAILS_RESPONSE
        mock_catalog.season.return_value = TMDB_SEASON_DETAILS_RESPONSE
        mock_catalog.episode.return_value = TMDB_EPISODE_DETAILS_RESPONSE

        seasons = await navigator.open_tv(1399)
        episodes = await navigator.open_season(1399, 1, seasons.tv)
        detail = await navigator.open_episode(1399, 1, 1, episodes.tv, episodes.season)

        assert [s.season_number for s in seasons.seasons] == [1, 2]
        assert isinstance(episodes, EpisodeListView)
        assert isinstance(detail, EpisodeDetailView)
        assert router.detail is detail
        assert playback.context.session.target.episode == 1
        mock_catalog.episode.assert_awaited_once_with(1399, 1, 1)

    @pytest.mark.asyncio
    async def test_season_list_does_not_start_playback(
        self, navigator: DetailNavigator, mock_catalog, playback
    ):
        mock_catalog.tv.return_value = TMDB_TV_DETAILS_RESPONSE

        await navigator.open_tv(1399)

        assert playback.context.session is None

    def test_back_buttons_make_no_request(
        self, navigator: DetailNavigator, mock_catalog, router
    ):
        seasons = navigator.back_to_seasons(TMDB_TV_DETAILS_RESPONSE)
        episodes = navigator.back_to_episodes(
            TMDB_TV_DETAILS_RESPONSE, TMDB_SEASON_DETAILS_RESPONSE
        )

        assert isinstance(seasons, SeasonListView)
        assert isinstance(episodes, EpisodeListView)
        assert router.detail is episodes
        mock_catalog.tv.assert_not_awaited()
        mock_catalog.season.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_back_to_episodes_stops_episode_playback(
        self, navigator: DetailNavigator, mock_catalog, playback, hls
    ):
        mock_catalog.episode.return_value = TMDB_EPISODE_DETAILS_RESPONSE
        await navigator.open_episode(
            1399, 1, 1, TMDB_TV_DETAILS_RESPONSE, TMDB_SEASON_DETAILS_RESPONSE
        )

        navigator.back_to_episodes(TMDB_TV_DETAILS_RESPONSE, TMDB_SEASON_DETAILS_RESPONSE)

        assert playback.context.session is None
        assert hls.live == []


class TestStaleNavigation:
    @pytest.mark.asyncio
    async def test_superseded_response_is_ignored(
        self, navigator: DetailNavigator, mock_catalog, router
    ):
        release = asyncio.Event()

        async def slow_movie(movie_id):
            await release.wait()
            return TMDB_MOVIE_DETAILS_RESPONSE

        mock_catalog.movie.side_effect = slow_movie
        mock_catalog.tv.return_value = TMDB_TV_DETAILS_RESPONSE

        slow = asyncio.create_task(navigator.open_movie(603))
        await asyncio.sleep(0)
        tv_view = await navigator.open_tv(1399)
        release.set()
        movie_view = await slow

        assert movie_view is None
        assert router.detail is tv_view
