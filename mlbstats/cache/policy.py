"""Cache TTL policy (minutes) per data category."""

TTL_GAMES = 120  # 2 hours
TTL_RECENT_GAMES = 240  # 4 hours, completed games do not change
TTL_UPCOMING_GAMES = 60  # 1 hour, start times and status move
TTL_STANDINGS = 120  # 2 hours
TTL_ROSTERS = 60  # 1 hour
TTL_TRENDS = 120  # 2 hours
TTL_REGISTRY = 1440  # 24 hours, team/player registries
TTL_TREND_HISTORY = 60 * 24 * 30  # daily trend points kept for 30 days
TTL_FALLBACK = 5  # mock payloads served during an upstream outage

# Shorter windows move faster, so they expire sooner
ROSTER_PERIOD_TTLS: dict[str, int] = {
    "season": 120,
    "30day": 60,
    "7day": 30,
    "1day": 15,
}


def roster_ttl_for_period(period: str) -> int:
    """TTL in minutes for a roster request covering the given stats period."""
    return ROSTER_PERIOD_TTLS.get(period, TTL_ROSTERS)
