"""Serialization helpers for cached and served payloads.

Converts the core dataclasses to/from the camelCase JSON shapes the
front-ends consume. The same dicts are stored in the cache, so a cache hit
can be returned verbatim.
"""

from mlbstats.core import (
    BattingStats,
    DivisionStanding,
    Game,
    GameData,
    PitchingStats,
    PlayerStats,
    TeamRoster,
    TeamStanding,
)
from mlbstats.core.teams import MLBTeam


def game_to_dict(game: Game) -> dict:
    """Serialize Game. Scores are always present (null when not played)."""
    data = {
        "homeTeam": game.home_team,
        "homeTeamCode": game.home_team_code,
        "awayTeam": game.away_team,
        "awayTeamCode": game.away_team_code,
        "homeScore": game.home_score,
        "awayScore": game.away_score,
        "date": game.date,
        "status": game.status,
    }
    if game.time:
        data["time"] = game.time
    return data


def dict_to_game(data: dict) -> Game:
    return Game(
        home_team=data["homeTeam"],
        home_team_code=data["homeTeamCode"],
        away_team=data["awayTeam"],
        away_team_code=data["awayTeamCode"],
        date=data["date"],
        status=data["status"],
        home_score=data.get("homeScore"),
        away_score=data.get("awayScore"),
        time=data.get("time"),
    )


def games_to_list(games: list[Game]) -> list[dict]:
    return [game_to_dict(g) for g in games]


def list_to_games(data: list[dict]) -> list[Game]:
    return [dict_to_game(g) for g in data]


def game_data_to_dict(game_data: GameData) -> dict:
    return {
        "recent": games_to_list(game_data.recent),
        "upcoming": games_to_list(game_data.upcoming),
    }


def standing_to_dict(standing: TeamStanding) -> dict:
    data = {
        "team": standing.team,
        "wins": standing.wins,
        "losses": standing.losses,
        "pct": standing.pct,
        "gb": standing.gb,
    }
    # Optional fields are omitted rather than null
    if standing.last10 is not None:
        data["last10"] = standing.last10
    if standing.streak is not None:
        data["streak"] = standing.streak
    return data


def division_to_dict(division: DivisionStanding) -> dict:
    return {
        "division": division.division,
        "teams": [standing_to_dict(t) for t in division.teams],
    }


def standings_to_list(divisions: list[DivisionStanding]) -> list[dict]:
    return [division_to_dict(d) for d in divisions]


def player_to_dict(player: PlayerStats) -> dict:
    """Serialize PlayerStats with its batting or pitching fields flattened."""
    data = {
        "name": player.name,
        "team": player.team,
        "position": player.position,
        "statType": player.stat_type,
    }
    if player.is_pitcher:
        pitching = player.pitching or PitchingStats()
        data.update(
            {
                "era": pitching.era,
                "whip": pitching.whip,
                "wins": pitching.wins,
                "losses": pitching.losses,
                "saves": pitching.saves,
                "strikeouts": pitching.strikeouts,
                "inningsPitched": pitching.innings_pitched,
            }
        )
    else:
        batting = player.batting or BattingStats()
        data.update(
            {
                "avg": batting.avg,
                "hr": batting.hr,
                "rbi": batting.rbi,
                "runs": batting.runs,
                "sb": batting.sb,
                "obp": batting.obp,
                "slg": batting.slg,
                "ops": batting.ops,
            }
        )
    return data


def roster_to_dict(roster: TeamRoster) -> dict:
    return {
        "teamName": roster.team_name,
        "teamCode": roster.team_code,
        "players": [player_to_dict(p) for p in roster.players],
    }


def team_to_dict(team: MLBTeam) -> dict:
    return {
        "id": team.team_id,
        "code": team.code,
        "name": team.name,
        "shortName": team.short_name,
        "location": team.location,
        "league": team.league,
        "division": team.division,
    }
