"""Service layer: fallback-ladder fetchers and the cached data service."""

from collections.abc import Callable
from datetime import date

from mlbstats.cache import CacheBackend
from mlbstats.providers.mlb import MLBStatsClient, MLBStatsProvider, MLBWebScraper
from mlbstats.services.data_service import StatsDataService
from mlbstats.services.games import GamesFetcher
from mlbstats.services.roster import RosterFetcher, RosterQuery
from mlbstats.services.standings import StandingsFetcher
from mlbstats.services.teams import TeamsFetcher
from mlbstats.services.trends import TrendService
from mlbstats.utilities.tz import today_mlb

__all__ = [
    "GamesFetcher",
    "RosterFetcher",
    "RosterQuery",
    "StandingsFetcher",
    "StatsDataService",
    "TeamsFetcher",
    "TrendService",
    "create_data_service",
]


def create_data_service(
    cache: CacheBackend,
    client: MLBStatsClient,
    today: Callable[[], date] = today_mlb,
) -> StatsDataService:
    """Wire the fetchers for every category around one client and cache."""
    provider = MLBStatsProvider(client)
    scraper = MLBWebScraper(client)
    return StatsDataService(
        cache=cache,
        provider=provider,
        games=GamesFetcher(provider, scraper, cache, today=today),
        standings=StandingsFetcher(provider, scraper),
        roster=RosterFetcher(provider, scraper, today=today),
        trends=TrendService(cache, today=today),
        teams=TeamsFetcher(provider),
    )
