"""Shared fixtures.

Upstream HTTP is faked with httpx.MockTransport; nothing here touches the
network. Paths without a canned response answer 503, i.e. "upstream down".
"""

from datetime import date

import httpx
import pytest
from fastapi.testclient import TestClient

from mlbstats.api import create_app
from mlbstats.cache import MemoryCacheBackend
from mlbstats.config import Settings
from mlbstats.providers.mlb import MLBStatsClient, MLBStatsProvider, MLBWebScraper
from mlbstats.services import create_data_service

from .fakes import UpstreamStub

TODAY = date(2025, 6, 15)


# ---------- Canned Stats API payloads ----------


@pytest.fixture
def schedule_payload() -> dict:
    return {
        "dates": [
            {
                "date": "2025-06-14",
                "games": [
                    {
                        "gamePk": 1,
                        "gameDate": "2025-06-14T23:05:00Z",
                        "officialDate": "2025-06-14",
                        "status": {"abstractGameState": "Final"},
                        "teams": {
                            "home": {"team": {"id": 147, "name": "New York Yankees"}, "score": 6},
                            "away": {"team": {"id": 111, "name": "Boston Red Sox"}, "score": 2},
                        },
                    },
                    {
                        "gamePk": 2,
                        "gameDate": "2025-06-14T20:10:00Z",
                        "officialDate": "2025-06-14",
                        "status": {"abstractGameState": "Final"},
                        "teams": {
                            "home": {"team": {"id": 112, "name": "Chicago Cubs"}, "score": 0},
                            "away": {"team": {"id": 138, "name": "St. Louis Cardinals"}},
                        },
                    },
                ],
            },
            {
                "date": "2025-06-15",
                "games": [
                    {
                        "gamePk": 3,
                        "gameDate": "2025-06-15T23:10:00Z",
                        "officialDate": "2025-06-15",
                        "status": {"abstractGameState": "Preview"},
                        "teams": {
                            "home": {"team": {"id": 119, "name": "Los Angeles Dodgers"}},
                            "away": {"team": {"id": 137, "name": "San Francisco Giants"}},
                        },
                    },
                    {
                        "gamePk": 4,
                        "gameDate": "2025-06-15T17:35:00Z",
                        "officialDate": "2025-06-15",
                        "status": {"abstractGameState": "Live"},
                        "teams": {
                            "home": {"team": {"id": 144, "name": "Atlanta Braves"}, "score": 1},
                            "away": {"team": {"id": 121, "name": "New York Mets"}, "score": 0},
                        },
                    },
                ],
            },
        ]
    }


@pytest.fixture
def standings_payload() -> dict:
    def team(name, wins, losses, pct, gb, streak, last_ten):
        return {
            "team": {"name": name},
            "wins": wins,
            "losses": losses,
            "winningPercentage": pct,
            "gamesBack": gb,
            "streak": {"streakCode": streak},
            "records": {
                "splitRecords": [
                    {"type": "home", "wins": 20, "losses": 10},
                    {"type": "lastTen", "wins": last_ten[0], "losses": last_ten[1]},
                ]
            },
        }

    return {
        "records": [
            {
                "division": {"id": 201},
                "teamRecords": [
                    team("Boston Red Sox", 38, 32, ".543", "4.0", "L1", (5, 5)),
                    team("New York Yankees", 42, 28, ".600", "-", "W3", (7, 3)),
                    team("Baltimore Orioles", 40, 30, ".571", "2.0", "W1", (6, 4)),
                ],
            },
            {
                "division": {"id": 203},
                "teamRecords": [
                    team("Los Angeles Dodgers", 45, 25, ".643", "-", "W5", (8, 2)),
                    team("San Diego Padres", 39, 31, ".557", "6.0", "L2", (4, 6)),
                ],
            },
        ]
    }


@pytest.fixture
def yankees_roster_payload() -> dict:
    return {
        "roster": [
            {"person": {"id": 592450, "fullName": "Aaron Judge"}, "position": {"abbreviation": "RF"}},
            {"person": {"id": 543037, "fullName": "Gerrit Cole"}, "position": {"abbreviation": "P"}},
            {"person": {"id": 650402, "fullName": "Gleyber Torres"}, "position": {"abbreviation": "2B"}},
            {"person": {"id": 607074, "fullName": "Carlos Rodón"}, "position": {"abbreviation": "P"}},
        ]
    }


def person_stats(stat: dict) -> dict:
    return {"stats": [{"splits": [{"stat": stat}]}]}


@pytest.fixture
def add_yankees_roster(upstream, yankees_roster_payload):
    """Register the Yankees roster plus per-player stats (Torres has none)."""

    def _add():
        upstream.add_json("/api/v1/teams/147/roster", yankees_roster_payload)
        upstream.add_json(
            "/api/v1/people/592450/stats",
            person_stats({"avg": ".322", "homeRuns": 30, "rbi": 70, "runs": 65, "stolenBases": 5, "ops": "1.101"}),
        )
        upstream.add_json(
            "/api/v1/people/543037/stats",
            person_stats({"era": "2.95", "whip": "1.05", "wins": 9, "losses": 3, "strikeOuts": 120, "inningsPitched": "95.1"}),
        )
        upstream.add_json(
            "/api/v1/people/607074/stats",
            person_stats({"era": "3.80", "whip": "1.20", "wins": 7, "losses": 5, "strikeOuts": 98, "inningsPitched": "88.0"}),
        )
        upstream.add_status("/api/v1/people/650402/stats", 404)

    return _add


# ---------- Wiring ----------


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()


@pytest.fixture
def client(upstream) -> MLBStatsClient:
    mlb_client = MLBStatsClient(
        retry_count=2,
        retry_delay=0.0,
        transport=httpx.MockTransport(upstream.handler),
        sleep=lambda seconds: None,
    )
    yield mlb_client
    mlb_client.close()


@pytest.fixture
def provider(client) -> MLBStatsProvider:
    return MLBStatsProvider(client)


@pytest.fixture
def scraper(client) -> MLBWebScraper:
    return MLBWebScraper(client)


@pytest.fixture
def cache() -> MemoryCacheBackend:
    return MemoryCacheBackend()


@pytest.fixture
def today() -> date:
    return TODAY


@pytest.fixture
def data_service(cache, client, today):
    return create_data_service(cache, client, today=lambda: today)


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def app(settings, cache, client):
    return create_app(settings, cache_backend=cache, client=client, today=lambda: TODAY, start_scheduler=False)


@pytest.fixture
def api(app) -> TestClient:
    return TestClient(app)
