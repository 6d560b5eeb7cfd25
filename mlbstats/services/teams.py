"""Team registry fetcher: Stats API team list, falling back to the canonical table."""

from mlbstats.core import DataTier, FetchResult, attempt, degrade_to, first_successful
from mlbstats.core.teams import TEAMS, MLBTeam
from mlbstats.providers.mlb.provider import MLBStatsProvider


class TeamsFetcher:
    def __init__(self, provider: MLBStatsProvider):
        self._provider = provider

    def fetch(self) -> FetchResult[list[MLBTeam]]:
        result = first_successful(lambda: attempt(DataTier.LIVE, self._provider.get_teams))
        return degrade_to(result, lambda: sorted(TEAMS, key=lambda t: t.name))
