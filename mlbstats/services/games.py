"""Games fetcher: recent (final) and upcoming games.

Ladder:
1. Stats API schedule for yesterday..tomorrow
2. mlb.com scores + schedule pages, bounded by an overall deadline.
   Halves cached separately ('recent-games', 'upcoming-games') are reused
   instead of scraping them again.
3. Mock games. A scrape that found only one half gets the other half from
   mock data and is reported as mock.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import date

from mlbstats.cache import CacheBackend
from mlbstats.cache.keys import RECENT_GAMES_KEY, UPCOMING_GAMES_KEY
from mlbstats.cache.policy import TTL_RECENT_GAMES, TTL_UPCOMING_GAMES
from mlbstats.cache.serialization import games_to_list, list_to_games
from mlbstats.core import (
    DataTier,
    FetchResult,
    Game,
    GameData,
    ScrapeTimeoutError,
    attempt,
    degrade_to,
    first_successful,
)
from mlbstats.core.result import RECOVERABLE_ERRORS
from mlbstats.providers.mlb.constants import GAMES_SCRAPE_TIMEOUT
from mlbstats.providers.mlb.mock_data import mock_games
from mlbstats.providers.mlb.provider import MLBStatsProvider
from mlbstats.providers.mlb.scraper import MLBWebScraper
from mlbstats.utilities.tz import format_date_iso, today_mlb

logger = logging.getLogger(__name__)


class GamesFetcher:
    def __init__(
        self,
        provider: MLBStatsProvider,
        scraper: MLBWebScraper,
        cache: CacheBackend,
        today: Callable[[], date] = today_mlb,
        scrape_timeout: float = GAMES_SCRAPE_TIMEOUT,
    ):
        self._provider = provider
        self._scraper = scraper
        self._cache = cache
        self._today = today
        self._scrape_timeout = scrape_timeout

    def fetch(self) -> FetchResult[GameData]:
        today = self._today()

        result = first_successful(
            lambda: attempt(DataTier.LIVE, lambda: self._fetch_live(today)),
            lambda: attempt(DataTier.SCRAPED, lambda: self._scrape_with_deadline(today)),
        )
        if result.ok and result.tier == DataTier.SCRAPED:
            result = self._fill_missing_half(result, today)

        return degrade_to(result, lambda: mock_games(format_date_iso(today)))

    def _fetch_live(self, today: date) -> GameData:
        games = self._provider.get_games(today)
        self._cache_halves(games)
        return games

    def _cache_halves(self, games: GameData) -> None:
        if games.recent:
            self._cache.set(RECENT_GAMES_KEY, games_to_list(games.recent), TTL_RECENT_GAMES)
        if games.upcoming:
            self._cache.set(UPCOMING_GAMES_KEY, games_to_list(games.upcoming), TTL_UPCOMING_GAMES)

    def _scrape_with_deadline(self, today: date) -> GameData:
        """Scrape both halves, giving up after scrape_timeout seconds.

        The worker thread is abandoned on timeout; it finishes (or times out
        on its own HTTP deadline) in the background.
        """
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="games-scrape")
        try:
            future = executor.submit(self._scrape, today)
            try:
                return future.result(timeout=self._scrape_timeout)
            except FutureTimeoutError as e:
                raise ScrapeTimeoutError(
                    f"Web scraping timed out after {self._scrape_timeout:g} seconds"
                ) from e
        finally:
            executor.shutdown(wait=False)

    def _scrape(self, today: date) -> GameData:
        recent = self._cached_half(RECENT_GAMES_KEY)
        if recent is None:
            recent = self._scrape_half("recent", self._scraper.scrape_recent_games, today)
            if recent:
                self._cache.set(RECENT_GAMES_KEY, games_to_list(recent), TTL_RECENT_GAMES)

        upcoming = self._cached_half(UPCOMING_GAMES_KEY)
        if upcoming is None:
            upcoming = self._scrape_half("upcoming", self._scraper.scrape_upcoming_games, today)
            if upcoming:
                self._cache.set(UPCOMING_GAMES_KEY, games_to_list(upcoming), TTL_UPCOMING_GAMES)

        return GameData(recent=recent, upcoming=upcoming)

    def _cached_half(self, key: str) -> list[Game] | None:
        cached = self._cache.get(key)
        if not cached:
            return None
        try:
            return list_to_games(cached)
        except (KeyError, TypeError, ValueError) as e:
            logger.warning("[CACHE] Discarding malformed %s entry: %s", key, e)
            self._cache.clear(key)
            return None

    def _scrape_half(self, label: str, scrape: Callable[[date], list[Game]], today: date) -> list[Game]:
        # One page failing must not lose the other half
        try:
            return scrape(today)
        except RECOVERABLE_ERRORS as e:
            logger.warning("[SCRAPE] %s games failed: %s", label, e)
            return []

    def _fill_missing_half(self, result: FetchResult[GameData], today: date) -> FetchResult[GameData]:
        games = result.data
        if games.recent and games.upcoming:
            return result

        mock = mock_games(format_date_iso(today))
        logger.info(
            "[SCRAPE] Using mock %s games",
            "recent" if not games.recent else "upcoming",
        )
        filled = GameData(
            recent=games.recent or mock.recent,
            upcoming=games.upcoming or mock.upcoming,
        )
        return FetchResult(data=filled, tier=DataTier.MOCK, errors=list(result.errors))
