"""Timezone utilities.

MLB publishes game times in UTC and displays them in US Eastern time.
All game date/time formatting goes through these functions.
"""

from datetime import UTC, date, datetime, timedelta
from zoneinfo import ZoneInfo

__all__ = [
    "MLB_TZ",
    "now_utc",
    "now_mlb",
    "today_mlb",
    "date_range_around",
    "parse_api_datetime",
    "format_game_time",
    "format_date_iso",
]

MLB_TZ = ZoneInfo("America/New_York")


def now_utc() -> datetime:
    """Get current time in UTC."""
    return datetime.now(UTC)


def now_mlb() -> datetime:
    """Get current time in MLB (Eastern) time."""
    return datetime.now(MLB_TZ)


def today_mlb() -> date:
    return now_mlb().date()


def date_range_around(day: date, days: int = 1) -> tuple[str, str]:
    """Return (start, end) as YYYY-MM-DD, `days` either side of day."""
    start = day - timedelta(days=days)
    end = day + timedelta(days=days)
    return format_date_iso(start), format_date_iso(end)


def parse_api_datetime(value: str) -> datetime:
    """Parse a Stats API timestamp (e.g. '2025-06-01T23:05:00Z').

    Raises:
        ValueError: If the value is not an ISO 8601 timestamp
    """
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    dt = datetime.fromisoformat(value)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def format_game_time(dt: datetime) -> str:
    """Format a first-pitch time for display (e.g., '7:05 PM')."""
    if dt.tzinfo is None:
        raise ValueError("Cannot convert naive datetime - must be timezone-aware")
    local_dt = dt.astimezone(MLB_TZ)
    return local_dt.strftime("%-I:%M %p")


def format_date_iso(value: date | datetime) -> str:
    """Format as YYYY-MM-DD. Aware datetimes are converted to MLB time first."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(MLB_TZ)
    return value.strftime("%Y-%m-%d")
