"""Core types and interfaces."""

from mlbstats.core.errors import (
    FetchError,
    InvalidTeamError,
    MLBStatsError,
    ScrapeTimeoutError,
    UpstreamUnavailableError,
)
from mlbstats.core.result import DataTier, FetchResult, attempt, degrade_to, first_successful
from mlbstats.core.types import (
    BattingStats,
    DivisionStanding,
    Game,
    GameData,
    GameStatus,
    PitchingStats,
    PlayerStats,
    StatType,
    TeamRoster,
    TeamStanding,
)

__all__ = [
    "BattingStats",
    "DataTier",
    "DivisionStanding",
    "FetchError",
    "FetchResult",
    "Game",
    "GameData",
    "GameStatus",
    "InvalidTeamError",
    "MLBStatsError",
    "PitchingStats",
    "PlayerStats",
    "ScrapeTimeoutError",
    "StatType",
    "TeamRoster",
    "TeamStanding",
    "UpstreamUnavailableError",
    "attempt",
    "degrade_to",
    "first_successful",
]
