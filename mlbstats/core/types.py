"""Core data types.

Transient DTOs built per request from the cache or an upstream source.
"""

from dataclasses import dataclass, field
from typing import Literal

GameStatus = Literal["scheduled", "live", "completed"]
StatType = Literal["hitting", "pitching"]

PITCHER_POSITION = "P"


@dataclass
class Game:
    """A single MLB game.

    Completed games always carry both scores. Scheduled games carry none;
    live games may carry provisional scores.
    """

    home_team: str
    home_team_code: str
    away_team: str
    away_team_code: str
    date: str  # YYYY-MM-DD
    status: GameStatus
    home_score: int | None = None
    away_score: int | None = None
    time: str | None = None

    def __post_init__(self) -> None:
        if self.status == "completed":
            if self.home_score is None or self.away_score is None:
                raise ValueError("Completed game requires both scores")
        elif self.status == "scheduled":
            self.home_score = None
            self.away_score = None


@dataclass
class GameData:
    """Recent (completed) and upcoming (scheduled or live) games."""

    recent: list[Game] = field(default_factory=list)
    upcoming: list[Game] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.recent and not self.upcoming


@dataclass
class TeamStanding:
    team: str
    wins: int
    losses: int
    pct: str
    gb: str
    last10: str | None = None
    streak: str | None = None


def games_behind_value(gb: str | None) -> float:
    """Numeric games behind. The leader's '-' sorts first, junk sorts last."""
    gb = (gb or "").strip()
    if gb == "-":
        return 0.0
    try:
        return float(gb.lstrip("+"))
    except ValueError:
        return float("inf")


@dataclass
class DivisionStanding:
    """One division's standings, ordered by games behind."""

    division: str
    teams: list[TeamStanding] = field(default_factory=list)

    def sort_teams(self) -> "DivisionStanding":
        """Order teams by games behind, ascending (stable for ties)."""
        self.teams.sort(key=lambda t: games_behind_value(t.gb))
        return self


@dataclass
class BattingStats:
    avg: str = ".000"
    hr: str = "0"
    rbi: str = "0"
    runs: str = "0"
    sb: str = "0"
    obp: str = ".000"
    slg: str = ".000"
    ops: str = ".000"


@dataclass
class PitchingStats:
    era: str = "0.00"
    whip: str = "0.00"
    wins: str = "0"
    losses: str = "0"
    saves: str = "0"
    strikeouts: str = "0"
    innings_pitched: str = "0.0"


@dataclass
class PlayerStats:
    """A player with either batting or pitching stats.

    Pitchers (position 'P') carry pitching stats, everyone else batting stats.
    """

    name: str
    team: str
    position: str
    batting: BattingStats | None = None
    pitching: PitchingStats | None = None

    @property
    def is_pitcher(self) -> bool:
        return self.position == PITCHER_POSITION

    @property
    def stat_type(self) -> StatType:
        return "pitching" if self.is_pitcher else "hitting"

    def matches(self, stat_type: StatType) -> bool:
        return self.stat_type == stat_type


@dataclass
class TeamRoster:
    team_name: str
    team_code: str
    players: list[PlayerStats] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.players

    def filtered(self, stat_type: StatType) -> "TeamRoster":
        """Copy of this roster holding only players of the given stat type."""
        return TeamRoster(
            team_name=self.team_name,
            team_code=self.team_code,
            players=[p for p in self.players if p.matches(stat_type)],
        )
