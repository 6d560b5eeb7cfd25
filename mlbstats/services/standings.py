"""Standings fetcher: Stats API -> mlb.com standings page -> mock."""

from mlbstats.core import DataTier, DivisionStanding, FetchResult, attempt, degrade_to, first_successful
from mlbstats.providers.mlb.mock_data import mock_standings
from mlbstats.providers.mlb.provider import MLBStatsProvider
from mlbstats.providers.mlb.scraper import MLBWebScraper


class StandingsFetcher:
    def __init__(self, provider: MLBStatsProvider, scraper: MLBWebScraper):
        self._provider = provider
        self._scraper = scraper

    def fetch(self) -> FetchResult[list[DivisionStanding]]:
        result = first_successful(
            lambda: attempt(DataTier.LIVE, self._provider.get_standings),
            lambda: attempt(DataTier.SCRAPED, self._scraper.scrape_standings),
        )
        return degrade_to(result, mock_standings)
