"""Roster fetcher: players of one team (or the whole league) for a stat type.

Ladder:
1. Stats API: team roster + per-player stats for the period, or league-wide
   season stats for team 'all'
2. mlb.com batting/pitching leaderboards, narrowed to the team
3. Mock roster for the team

Every tier is filtered by stat type, so pitching rosters hold only pitchers
(position 'P') and hitting rosters only non-pitchers.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from mlbstats.core import (
    DataTier,
    FetchResult,
    StatType,
    TeamRoster,
    attempt,
    degrade_to,
    first_successful,
)
from mlbstats.core.teams import (
    ALL_TEAMS_CODE,
    ALL_TEAMS_NAME,
    MLBTeam,
    get_team_by_code,
    get_team_by_name,
    resolve_team_code,
)
from mlbstats.providers.mlb.mock_data import mock_roster
from mlbstats.providers.mlb.provider import MLBStatsProvider
from mlbstats.providers.mlb.scraper import MLBWebScraper
from mlbstats.utilities.tz import today_mlb

logger = logging.getLogger(__name__)

VALID_STAT_TYPES = ("hitting", "pitching")
STAT_TYPE_ALIASES = {"batting": "hitting"}
VALID_PERIODS = ("season", "30day", "7day", "1day")
MIN_SEASON = 1876


def normalize_stat_type(value: str | None) -> str:
    """Lower-case and resolve aliases ('batting' -> 'hitting'). Default hitting."""
    value = (value or "hitting").strip().lower()
    return STAT_TYPE_ALIASES.get(value, value)


@dataclass(frozen=True)
class RosterQuery:
    """A validated roster request. team is None for the league-wide roster."""

    team: MLBTeam | None
    stat_type: StatType
    period: str = "season"
    season: int | None = None

    @property
    def team_code(self) -> str:
        return self.team.code if self.team else ALL_TEAMS_CODE

    @classmethod
    def from_params(
        cls,
        team: str,
        stat_type: str | None = None,
        period: str | None = None,
        season: int | None = None,
    ) -> "RosterQuery":
        """Validate raw query parameters.

        Raises:
            InvalidTeamError: Malformed or unknown team code
            ValueError: Unsupported stat type, period or season
        """
        resolved = resolve_team_code(team)

        normalized_type = normalize_stat_type(stat_type)
        if normalized_type not in VALID_STAT_TYPES:
            raise ValueError(f"Invalid statType: {stat_type}. Use hitting or pitching")

        normalized_period = (period or "season").strip().lower()
        if normalized_period not in VALID_PERIODS:
            raise ValueError(f"Invalid period: {period}. Use one of {', '.join(VALID_PERIODS)}")

        if season is not None and not MIN_SEASON <= season <= 2100:
            raise ValueError(f"Invalid season: {season}")

        return cls(team=resolved, stat_type=normalized_type, period=normalized_period, season=season)


class RosterFetcher:
    def __init__(
        self,
        provider: MLBStatsProvider,
        scraper: MLBWebScraper,
        today: Callable[[], date] = today_mlb,
    ):
        self._provider = provider
        self._scraper = scraper
        self._today = today

    def fetch(self, query: RosterQuery) -> FetchResult[TeamRoster]:
        today = self._today()
        season = query.season or today.year

        result = first_successful(
            lambda: attempt(DataTier.LIVE, lambda: self._fetch_live(query, season, today)),
            lambda: attempt(DataTier.SCRAPED, lambda: self._scrape(query)),
        )
        return degrade_to(result, lambda: mock_roster(query.team).filtered(query.stat_type))

    def _fetch_live(self, query: RosterQuery, season: int, today: date) -> TeamRoster:
        if query.team is None:
            roster = self._provider.get_league_stats(query.stat_type, season)
        else:
            roster = self._provider.get_team_roster(query.team, query.stat_type, query.period, season, today)
        return roster.filtered(query.stat_type)

    def _scrape(self, query: RosterQuery) -> TeamRoster:
        players = self._scraper.scrape_players(query.stat_type)
        if query.team is None:
            roster = TeamRoster(team_name=ALL_TEAMS_NAME, team_code=ALL_TEAMS_CODE, players=players)
        else:
            team = query.team
            # Leaderboards show either the club name or its abbreviation
            own = [p for p in players if (get_team_by_name(p.team) or get_team_by_code(p.team)) == team]
            for player in own:
                player.team = team.name
            logger.debug("[SCRAPE] %d of %d leaderboard players belong to %s", len(own), len(players), team.code)
            roster = TeamRoster(team_name=team.name, team_code=team.code, players=own)
        return roster.filtered(query.stat_type)
