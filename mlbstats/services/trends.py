"""League-wide trend series.

Daily league averages are recorded by the pre-warm scheduler into a
per-category history ({date: value}) kept in the cache backend. Requests
read the most recent points from that history and fall back to the
embedded trend table.
"""

import logging
from collections.abc import Callable, Iterable
from datetime import date

from mlbstats.cache import CacheBackend
from mlbstats.cache.keys import trend_history_key
from mlbstats.cache.policy import TTL_TREND_HISTORY
from mlbstats.core import DataTier, FetchResult, PlayerStats
from mlbstats.providers.mlb.mock_data import MOCK_TRENDS, TREND_POINTS, mock_trend
from mlbstats.utilities.tz import format_date_iso, today_mlb

logger = logging.getLogger(__name__)

# Display category -> history key
TREND_CATEGORY_KEYS = {
    "Batting Average": "batting-avg",
    "ERA": "era",
}

# Days of daily points kept per category
HISTORY_DAYS = 30


def canonical_category(stat: str) -> str:
    """Known categories match case-insensitively ('era' -> 'ERA')."""
    wanted = stat.strip().lower()
    for name in (*TREND_CATEGORY_KEYS, *MOCK_TRENDS):
        if name.lower() == wanted:
            return name
    return stat.strip()


def _mean(values: list[float]) -> float | None:
    return sum(values) / len(values) if values else None


def _parse_float(value: str | None) -> float | None:
    try:
        return float(value) if value not in (None, "", "-", "-.--") else None
    except ValueError:
        return None


def league_averages(players: Iterable[PlayerStats]) -> dict[str, float]:
    """Mean batting average and ERA across players, keyed by history key."""
    averages: list[float] = []
    eras: list[float] = []
    for player in players:
        if player.batting is not None:
            avg = _parse_float(player.batting.avg)
            if avg is not None:
                averages.append(avg)
        if player.pitching is not None:
            era = _parse_float(player.pitching.era)
            if era is not None:
                eras.append(era)

    results = {}
    mean_avg = _mean(averages)
    if mean_avg is not None:
        results["batting-avg"] = round(mean_avg, 3)
    mean_era = _mean(eras)
    if mean_era is not None:
        results["era"] = round(mean_era, 2)
    return results


class TrendService:
    """Reads and records trend history through the cache backend."""

    def __init__(self, cache: CacheBackend, today: Callable[[], date] = today_mlb):
        self._cache = cache
        self._today = today

    def today(self) -> date:
        return self._today()

    def store_point(self, history_key: str, day: str, value: float) -> None:
        """Add or overwrite the value for one day, keeping the latest HISTORY_DAYS."""
        key = trend_history_key(history_key)
        history = self._cache.get(key) or {}
        history[day] = value
        history = {d: history[d] for d in sorted(history)[-HISTORY_DAYS:]}
        self._cache.set(key, history, TTL_TREND_HISTORY)

    def get_history(self, history_key: str, limit: int = TREND_POINTS) -> list[float]:
        """Most recent `limit` values in chronological order."""
        history = self._cache.get(trend_history_key(history_key)) or {}
        return [history[day] for day in sorted(history)[-limit:]]

    def record_daily(self, players: Iterable[PlayerStats]) -> dict[str, float]:
        """Store today's league averages. Returns what was stored."""
        day = format_date_iso(self._today())
        averages = league_averages(players)
        for history_key, value in averages.items():
            self.store_point(history_key, day, value)
        if averages:
            logger.info("[TRENDS] Recorded %s for %s", ", ".join(sorted(averages)), day)
        return averages

    def fetch(self, category: str) -> FetchResult[dict[str, list[float]]]:
        """Series for one display category ({category: [values]})."""
        category = canonical_category(category)
        history_key = TREND_CATEGORY_KEYS.get(category)
        if history_key:
            values = self.get_history(history_key)
            if values:
                return FetchResult.success({category: values}, DataTier.LIVE)
        return FetchResult.success({category: mock_trend(category)}, DataTier.MOCK)
