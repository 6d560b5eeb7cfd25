"""Stats data service.

Single entry point used by the API routes and the pre-warm scheduler. Owns
the fetchers for each category and runs them through the cache-aside
helpers, so routes never talk to providers or the cache directly.
"""

import logging

from mlbstats.cache import CacheBackend
from mlbstats.cache.keys import (
    GAMES_KEY,
    STANDINGS_KEY,
    TEAMS_REGISTRY_KEY,
    roster_key,
    trends_key,
)
from mlbstats.cache.policy import (
    TTL_GAMES,
    TTL_REGISTRY,
    TTL_STANDINGS,
    TTL_TRENDS,
    roster_ttl_for_period,
)
from mlbstats.cache.serialization import (
    game_data_to_dict,
    roster_to_dict,
    standings_to_list,
    team_to_dict,
)
from mlbstats.core import FetchResult
from mlbstats.core.result import RECOVERABLE_ERRORS
from mlbstats.providers.mlb.provider import MLBStatsProvider
from mlbstats.services.aggregation import get_or_fetch, refresh_cached
from mlbstats.services.games import GamesFetcher
from mlbstats.services.roster import RosterFetcher, RosterQuery
from mlbstats.services.standings import StandingsFetcher
from mlbstats.services.teams import TeamsFetcher
from mlbstats.services.trends import TrendService, canonical_category

logger = logging.getLogger(__name__)


def _teams_to_list(teams) -> list[dict]:
    return [team_to_dict(t) for t in teams]


class StatsDataService:
    """Cached access to games, standings, rosters, trends and teams.

    Every get_* method returns a FetchResult whose data is the JSON payload
    served to clients and whose tier says where it came from.
    """

    def __init__(
        self,
        cache: CacheBackend,
        provider: MLBStatsProvider,
        games: GamesFetcher,
        standings: StandingsFetcher,
        roster: RosterFetcher,
        trends: TrendService,
        teams: TeamsFetcher,
    ):
        self._cache = cache
        self._provider = provider
        self._games = games
        self._standings = standings
        self._roster = roster
        self._trends = trends
        self._teams = teams

    @property
    def cache(self) -> CacheBackend:
        return self._cache

    def get_games(self) -> FetchResult[dict]:
        return get_or_fetch(self._cache, GAMES_KEY, TTL_GAMES, self._games.fetch, game_data_to_dict)

    def get_standings(self) -> FetchResult[list]:
        return get_or_fetch(self._cache, STANDINGS_KEY, TTL_STANDINGS, self._standings.fetch, standings_to_list)

    def get_roster(self, query: RosterQuery) -> FetchResult[list]:
        return get_or_fetch(
            self._cache,
            roster_key(query.team_code, query.stat_type, query.period, query.season),
            roster_ttl_for_period(query.period),
            lambda: self._roster.fetch(query),
            lambda roster: [roster_to_dict(roster)],
        )

    def get_trends(self, category: str) -> FetchResult[dict]:
        category = canonical_category(category)
        return get_or_fetch(
            self._cache,
            trends_key(category),
            TTL_TRENDS,
            lambda: self._trends.fetch(category),
            lambda series: series,
        )

    def get_teams(self) -> FetchResult[list]:
        return get_or_fetch(
            self._cache,
            TEAMS_REGISTRY_KEY,
            TTL_REGISTRY,
            self._teams.fetch,
            _teams_to_list,
        )

    def record_trends(self) -> dict[str, float]:
        """Record today's league averages from live league-wide stats."""
        season = self._trends.today().year
        players = []
        for stat_type in ("hitting", "pitching"):
            try:
                players.extend(self._provider.get_league_stats(stat_type, season).players)
            except RECOVERABLE_ERRORS as e:
                logger.warning("[TRENDS] Could not fetch league %s stats: %s", stat_type, e)
        return self._trends.record_daily(players)

    def refresh_games(self) -> FetchResult[dict]:
        return refresh_cached(self._cache, GAMES_KEY, TTL_GAMES, self._games.fetch, game_data_to_dict)

    def refresh_standings(self) -> FetchResult[list]:
        return refresh_cached(self._cache, STANDINGS_KEY, TTL_STANDINGS, self._standings.fetch, standings_to_list)

    def refresh_teams(self) -> FetchResult[list]:
        return refresh_cached(self._cache, TEAMS_REGISTRY_KEY, TTL_REGISTRY, self._teams.fetch, _teams_to_list)
