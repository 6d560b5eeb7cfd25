"""Tests for trend history recording and the /trends data."""

from datetime import date, timedelta

import pytest

from mlbstats.cache.keys import trend_history_key
from mlbstats.core import BattingStats, DataTier, PitchingStats, PlayerStats
from mlbstats.providers.mlb.mock_data import MOCK_TRENDS
from mlbstats.services import TrendService
from mlbstats.services.trends import HISTORY_DAYS, canonical_category, league_averages


def hitter(avg: str) -> PlayerStats:
    return PlayerStats(name="H", team="T", position="1B", batting=BattingStats(avg=avg))


def pitcher(era: str) -> PlayerStats:
    return PlayerStats(name="P", team="T", position="P", pitching=PitchingStats(era=era))


class TestLeagueAverages:
    def test_means_are_rounded(self):
        players = [hitter(".300"), hitter(".250"), hitter(".261"), pitcher("3.00"), pitcher("4.20")]
        assert league_averages(players) == {"batting-avg": 0.27, "era": 3.6}

    def test_placeholder_values_are_ignored(self):
        players = [hitter(".300"), hitter("-.--"), pitcher("-"), pitcher("")]
        assert league_averages(players) == {"batting-avg": 0.3}

    def test_no_players(self):
        assert league_averages([]) == {}


class TestCanonicalCategory:
    @pytest.mark.parametrize("stat", ["ERA", "era", " Era "])
    def test_known_categories_ignore_case(self, stat):
        assert canonical_category(stat) == "ERA"

    def test_embedded_only_category(self):
        assert canonical_category("exit velocity") == "Exit Velocity"

    def test_unknown_category_kept_as_given(self):
        assert canonical_category("Pickoffs") == "Pickoffs"


class TestTrendService:
    @pytest.fixture
    def clock(self):
        return {"today": date(2025, 6, 15)}

    @pytest.fixture
    def service(self, cache, clock):
        return TrendService(cache, today=lambda: clock["today"])

    def test_history_is_chronological_and_limited(self, service):
        for day in range(1, 11):
            service.store_point("era", f"2025-06-{day:02d}", float(day))
        assert service.get_history("era") == [4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
        assert service.get_history("era", limit=2) == [9.0, 10.0]

    def test_same_day_overwrites(self, service):
        service.store_point("era", "2025-06-15", 4.0)
        service.store_point("era", "2025-06-15", 3.9)
        assert service.get_history("era") == [3.9]

    def test_history_is_pruned_to_recent_days(self, service, cache):
        start = date(2025, 5, 1)
        for offset in range(40):
            service.store_point("era", (start + timedelta(days=offset)).isoformat(), float(offset))

        history = cache.get(trend_history_key("era"))
        assert len(history) == HISTORY_DAYS
        assert min(history) == "2025-05-11"
        assert max(history) == "2025-06-09"

    def test_record_daily(self, service, clock):
        service.record_daily([hitter(".280")])
        clock["today"] = date(2025, 6, 16)
        service.record_daily([hitter(".260"), pitcher("4.00")])

        assert service.get_history("batting-avg") == [0.28, 0.26]
        assert service.get_history("era") == [4.0]

    def test_fetch_uses_history_when_recorded(self, service):
        service.record_daily([hitter(".280")])
        result = service.fetch("Batting Average")
        assert result.tier == DataTier.LIVE
        assert result.data == {"Batting Average": [0.28]}

    def test_fetch_falls_back_to_embedded_table(self, service):
        result = service.fetch("ERA")
        assert result.tier == DataTier.MOCK
        assert result.data == {"ERA": MOCK_TRENDS["ERA"]}

    def test_fetch_uses_canonical_case(self, service):
        service.store_point("era", "2025-06-15", 4.01)
        assert service.fetch("era").data == {"ERA": [4.01]}

    def test_unknown_category_gets_zeros(self, service):
        result = service.fetch("Pickoffs")
        assert result.data == {"Pickoffs": [0.0] * 7}


class TestRecordTrends:
    def test_records_from_live_league_stats(self, data_service, upstream):
        upstream.add_json(
            "/api/v1/stats",
            {
                "stats": [
                    {
                        "splits": [
                            {"player": {"fullName": "A"}, "team": {"name": "X"}, "stat": {"avg": ".300", "era": "3.50"}},
                            {"player": {"fullName": "B"}, "team": {"name": "Y"}, "stat": {"avg": ".200", "era": "4.50"}},
                        ]
                    }
                ]
            },
        )
        recorded = data_service.record_trends()

        assert recorded == {"batting-avg": 0.25, "era": 4.0}
        assert [r.url.params["group"] for r in upstream.requests] == ["hitting", "pitching"]
        assert data_service.get_trends("ERA").data == {"ERA": [4.0]}

    def test_api_outage_records_nothing(self, data_service):
        assert data_service.record_trends() == {}
        assert data_service.get_trends("ERA").tier == DataTier.MOCK

    def test_category_case_shares_one_cache_entry(self, data_service, cache):
        history = TrendService(cache)
        history.store_point("era", "2025-06-14", 4.01)
        history.store_point("era", "2025-06-15", 3.99)

        upper = data_service.get_trends("ERA")
        lower = data_service.get_trends("era")

        assert upper.data == {"ERA": [4.01, 3.99]}
        assert lower.tier == DataTier.CACHE
        assert lower.data == upper.data

    def test_unknown_categories_are_keyed_as_asked(self, data_service):
        assert data_service.get_trends("Pickoffs").data == {"Pickoffs": [0.0] * 7}
        assert data_service.get_trends("pickoffs").data == {"pickoffs": [0.0] * 7}
