"""MLB data sources: Stats API, mlb.com scraper and embedded mock data."""

from mlbstats.providers.mlb.client import MLBStatsClient
from mlbstats.providers.mlb.provider import MLBStatsProvider
from mlbstats.providers.mlb.scraper import MLBWebScraper

__all__ = ["MLBStatsClient", "MLBStatsProvider", "MLBWebScraper"]
