"""MLB Stats API provider.

Fetches raw JSON through MLBStatsClient and normalizes it into core types.
Parsing is done by module-level functions so it can be tested against
canned payloads without HTTP.

Raises FetchError (or subclasses) when the API cannot be reached; callers
decide whether to fall back.
"""

import logging
from datetime import date, timedelta

from mlbstats.core import (
    BattingStats,
    DivisionStanding,
    FetchError,
    Game,
    GameData,
    PitchingStats,
    PlayerStats,
    StatType,
    TeamRoster,
    TeamStanding,
)
from mlbstats.core.teams import (
    ALL_TEAMS_CODE,
    ALL_TEAMS_NAME,
    MLBTeam,
    get_team_by_id,
    team_code_from_id,
    team_code_from_name,
)
from mlbstats.providers.mlb.client import MLBStatsClient
from mlbstats.providers.mlb.constants import (
    DIVISION_NAMES,
    LEAGUE_STATS_LIMIT,
    MLB_LEAGUE_IDS,
    MLB_SPORT_ID,
)
from mlbstats.utilities.tz import (
    date_range_around,
    format_date_iso,
    format_game_time,
    parse_api_datetime,
)

logger = logging.getLogger(__name__)

# Days covered by each non-season stats period
PERIOD_DAYS = {
    "30day": 30,
    "7day": 7,
    "1day": 1,
}

LEAGUE_NAMES = {103: "AL", 104: "NL"}


def _str_stat(stats: dict, key: str, default: str) -> str:
    value = stats.get(key)
    if value is None or value == "":
        return default
    return str(value)


def parse_batting_stats(stats: dict) -> BattingStats:
    return BattingStats(
        avg=_str_stat(stats, "avg", ".000"),
        hr=_str_stat(stats, "homeRuns", "0"),
        rbi=_str_stat(stats, "rbi", "0"),
        runs=_str_stat(stats, "runs", "0"),
        sb=_str_stat(stats, "stolenBases", "0"),
        obp=_str_stat(stats, "obp", ".000"),
        slg=_str_stat(stats, "slg", ".000"),
        ops=_str_stat(stats, "ops", ".000"),
    )


def parse_pitching_stats(stats: dict) -> PitchingStats:
    return PitchingStats(
        era=_str_stat(stats, "era", "0.00"),
        whip=_str_stat(stats, "whip", "0.00"),
        wins=_str_stat(stats, "wins", "0"),
        losses=_str_stat(stats, "losses", "0"),
        saves=_str_stat(stats, "saves", "0"),
        strikeouts=_str_stat(stats, "strikeOuts", "0"),
        innings_pitched=_str_stat(stats, "inningsPitched", "0.0"),
    )


def _team_code(team: dict) -> str:
    fallback = team_code_from_name(team.get("name", ""))
    return team_code_from_id(team.get("id"), fallback=fallback or "unk")


def parse_schedule_game(game: dict, fallback_date: str | None = None) -> Game | None:
    """Convert one schedule entry. Returns None for games we don't report.

    Final games become 'completed' (missing scores count as 0), Preview games
    'scheduled' and Live games 'live', both with a first-pitch time.
    """
    teams = game.get("teams") or {}
    home = teams.get("home") or {}
    away = teams.get("away") or {}
    home_team = home.get("team") or {}
    away_team = away.get("team") or {}
    state = (game.get("status") or {}).get("abstractGameState")

    if not home_team.get("name") or not away_team.get("name") or not state:
        logger.warning("[MLB] Skipping game %s with missing team or status data", game.get("gamePk"))
        return None

    start = None
    if game.get("gameDate"):
        start = parse_api_datetime(game["gameDate"])
    game_date = game.get("officialDate") or fallback_date or (format_date_iso(start) if start else "")

    common = {
        "home_team": home_team["name"],
        "home_team_code": _team_code(home_team),
        "away_team": away_team["name"],
        "away_team_code": _team_code(away_team),
        "date": game_date,
    }

    if state == "Final":
        return Game(
            **common,
            status="completed",
            home_score=home.get("score") or 0,
            away_score=away.get("score") or 0,
        )
    if state == "Live":
        return Game(
            **common,
            status="live",
            home_score=home.get("score"),
            away_score=away.get("score"),
            time=format_game_time(start) if start else None,
        )
    if state == "Preview":
        return Game(**common, status="scheduled", time=format_game_time(start) if start else None)

    logger.debug("[MLB] Ignoring game %s in state %s", game.get("gamePk"), state)
    return None


def parse_schedule(data: dict) -> GameData:
    """Split a /schedule response into recent (final) and upcoming games."""
    result = GameData()
    for date_entry in data.get("dates") or []:
        for raw_game in date_entry.get("games") or []:
            game = parse_schedule_game(raw_game, fallback_date=date_entry.get("date"))
            if game is None:
                continue
            if game.status == "completed":
                result.recent.append(game)
            else:
                result.upcoming.append(game)
    return result


def parse_standings(data: dict) -> list[DivisionStanding]:
    """Convert a /standings response into divisions ordered by games behind."""
    divisions: list[DivisionStanding] = []
    for record in data.get("records") or []:
        division_info = record.get("division") or {}
        division_id = division_info.get("id")
        division_name = DIVISION_NAMES.get(division_id) or division_info.get("name") or f"Division {division_id}"

        teams = []
        for team_record in record.get("teamRecords") or []:
            split_records = (team_record.get("records") or {}).get("splitRecords") or []
            last_ten = next((r for r in split_records if r.get("type") == "lastTen"), None)
            teams.append(
                TeamStanding(
                    team=team_record["team"]["name"],
                    wins=int(team_record.get("wins", 0)),
                    losses=int(team_record.get("losses", 0)),
                    pct=str(team_record.get("winningPercentage", ".000")),
                    gb=str(team_record.get("gamesBack", "-")),
                    last10=f"{last_ten['wins']}-{last_ten['losses']}" if last_ten else None,
                    streak=(team_record.get("streak") or {}).get("streakCode"),
                )
            )

        if teams:
            divisions.append(DivisionStanding(division=division_name, teams=teams).sort_teams())
    return divisions


def parse_league_stats(data: dict, stat_type: StatType) -> list[PlayerStats]:
    """Convert a league-wide /stats response into players of one stat type."""
    splits = ((data.get("stats") or [{}])[0] or {}).get("splits") or []
    players = []
    for split in splits:
        person = split.get("player") or {}
        team = split.get("team") or {}
        stats = split.get("stat")
        if not person.get("fullName") or not team.get("name") or not stats:
            continue
        default_position = "P" if stat_type == "pitching" else ""
        position = (person.get("primaryPosition") or {}).get("abbreviation") or default_position
        player = PlayerStats(name=person["fullName"], team=team["name"], position=position)
        if player.is_pitcher:
            player.pitching = parse_pitching_stats(stats)
        else:
            player.batting = parse_batting_stats(stats)
        players.append(player)
    return players


def parse_teams(data: dict) -> list[MLBTeam]:
    """Convert a /teams response, preferring canonical codes for known ids."""
    teams = []
    for raw in data.get("teams") or []:
        if not raw.get("id") or not raw.get("name"):
            continue
        known = get_team_by_id(raw["id"])
        teams.append(
            MLBTeam(
                code=known.code if known else (raw.get("abbreviation") or "").lower(),
                team_id=int(raw["id"]),
                name=raw["name"],
                short_name=raw.get("teamName") or raw["name"],
                location=raw.get("locationName") or "",
                league=LEAGUE_NAMES.get((raw.get("league") or {}).get("id"), ""),
                division=DIVISION_NAMES.get((raw.get("division") or {}).get("id"), ""),
            )
        )
    return sorted(teams, key=lambda t: t.name)


def stats_params(stat_type: StatType, period: str, season: int, today: date) -> dict:
    """Query params for a stats request covering `period`."""
    params = {"group": stat_type, "season": season}
    days = PERIOD_DAYS.get(period)
    if days is None:
        params["stats"] = "season"
    else:
        params["stats"] = "byDateRange"
        params["startDate"] = format_date_iso(today - timedelta(days=days))
        params["endDate"] = format_date_iso(today)
    return params


class MLBStatsProvider:
    """Typed access to the MLB Stats API."""

    def __init__(self, client: MLBStatsClient):
        self._client = client

    @property
    def name(self) -> str:
        return "mlb_stats_api"

    def get_games(self, today: date) -> GameData:
        """Games from yesterday through tomorrow."""
        start_date, end_date = date_range_around(today)
        data = self._client.get_json(
            "/schedule",
            params={"startDate": start_date, "endDate": end_date, "sportId": MLB_SPORT_ID},
        )
        games = parse_schedule(data)
        logger.info("[MLB] Fetched %d recent and %d upcoming games", len(games.recent), len(games.upcoming))
        return games

    def get_standings(self) -> list[DivisionStanding]:
        data = self._client.get_json("/standings", params={"leagueId": MLB_LEAGUE_IDS})
        if not data.get("records"):
            raise FetchError("No standings data received from API")
        divisions = parse_standings(data)
        logger.info("[MLB] Fetched standings for %d divisions", len(divisions))
        return divisions

    def get_league_stats(self, stat_type: StatType, season: int) -> TeamRoster:
        """League-wide season leaders as a single 'all teams' roster."""
        data = self._client.get_json(
            "/stats",
            params={
                "stats": "season",
                "group": stat_type,
                "season": season,
                "sportId": MLB_SPORT_ID,
                "limit": LEAGUE_STATS_LIMIT,
            },
        )
        players = parse_league_stats(data, stat_type)
        logger.info("[MLB] Fetched %d league-wide %s players", len(players), stat_type)
        return TeamRoster(team_name=ALL_TEAMS_NAME, team_code=ALL_TEAMS_CODE, players=players)

    def get_team_roster(
        self,
        team: MLBTeam,
        stat_type: StatType,
        period: str,
        season: int,
        today: date,
    ) -> TeamRoster:
        """Roster of one team with per-player stats for the requested period.

        Only players matching stat_type are looked up. A player whose stats
        request fails, or who has no split for the period, is skipped.
        """
        data = self._client.get_json(f"/teams/{team.team_id}/roster", params={"season": season})
        params = stats_params(stat_type, period, season, today)

        players = []
        for entry in data.get("roster") or []:
            person = entry.get("person") or {}
            position = (entry.get("position") or {}).get("abbreviation", "")
            player = PlayerStats(name=person.get("fullName", "Unknown"), team=team.name, position=position)
            if not person.get("id") or not player.matches(stat_type):
                continue

            try:
                stats_data = self._client.get_json(f"/people/{person['id']}/stats", params=params, retry=False)
            except FetchError as e:
                logger.debug("[MLB] No stats for player %s: %s", person["id"], e)
                continue

            splits = ((stats_data.get("stats") or [{}])[0] or {}).get("splits") or []
            if not splits or not splits[0].get("stat"):
                continue
            stats = splits[0]["stat"]
            if player.is_pitcher:
                player.pitching = parse_pitching_stats(stats)
            else:
                player.batting = parse_batting_stats(stats)
            players.append(player)

        logger.info("[MLB] Fetched %d %s players for %s (%s)", len(players), stat_type, team.code, period)
        return TeamRoster(team_name=team.name, team_code=team.code, players=players)

    def get_teams(self) -> list[MLBTeam]:
        data = self._client.get_json("/teams", params={"sportId": MLB_SPORT_ID})
        return parse_teams(data)
