"""Deterministic cache keys.

Keys are derived from the route and its (normalized) query parameters, so
the same request always maps to the same cached payload. Backends store
every key under KEY_PREFIX.
"""

KEY_PREFIX = "cache:"

GAMES_KEY = "games"
RECENT_GAMES_KEY = "recent-games"
UPCOMING_GAMES_KEY = "upcoming-games"
STANDINGS_KEY = "standings"
TEAMS_REGISTRY_KEY = "registry:teams"


def make_cache_key(endpoint: str, params: dict[str, str | int | None] | None = None) -> str:
    """Build a key like 'roster:period=season:statType=hitting:team=nyy'.

    Parameters are sorted by name; None values are dropped and values are
    lower-cased.
    """
    if not params:
        return endpoint
    parts = [f"{name}={str(value).lower()}" for name, value in sorted(params.items()) if value is not None]
    if not parts:
        return endpoint
    return ":".join([endpoint, *parts])


def roster_key(team: str, stat_type: str, period: str, season: int | None = None) -> str:
    return make_cache_key(
        "roster", {"team": team, "statType": stat_type, "period": period, "season": season}
    )


def trends_key(stat: str) -> str:
    # Category case is kept; it is echoed back as the payload key
    return f"trends:stat={stat}"


def trend_history_key(category: str) -> str:
    return f"trend-history:{category}"
