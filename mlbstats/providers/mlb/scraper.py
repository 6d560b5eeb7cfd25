"""mlb.com HTML scraper.

Fallback source when the Stats API is unavailable. mlb.com renders most
content client-side, so these parsers often find nothing; an empty result
is normal and callers move on to mock data.

Parsing is split from fetching: the parse_* functions take raw HTML and are
tested against canned pages.
"""

import logging
import re
from datetime import date, timedelta

from bs4 import BeautifulSoup, Tag

from mlbstats.core import (
    BattingStats,
    DivisionStanding,
    Game,
    GameStatus,
    PitchingStats,
    PlayerStats,
    StatType,
    TeamStanding,
)
from mlbstats.core.teams import team_code_from_name
from mlbstats.providers.mlb.client import MLBStatsClient
from mlbstats.providers.mlb.constants import (
    BATTING_STATS_PAGE,
    PITCHING_STATS_PAGE,
    SCHEDULE_PAGE,
    SCORES_PAGE,
    SCRAPE_ROW_LIMIT,
    STANDINGS_PAGE,
)
from mlbstats.utilities.tz import format_date_iso

logger = logging.getLogger(__name__)

# mlb.com has shipped several layouts; match any of them
GAME_CARD_SELECTOR = ".EventCard, .schedule-item, .p-schedule__game"
STATUS_SELECTOR = ".EventCard-statusText, .schedule-status, .p-schedule__status"
TEAM_NAME_SELECTOR = ".EventCard-matchupTeamName, .schedule-team__name, .p-schedule__team-name"
SCORE_SELECTOR = ".EventCard-score, .schedule-score, .p-schedule__score"
TIME_SELECTOR = ".schedule-time, .p-schedule__time, .EventCard-statusText"

LIVE_STATUS_PATTERN = re.compile(r"top|bottom|\d+(st|nd|rd|th)", re.IGNORECASE)

# Leaderboard column positions (after the name and team cells)
BATTING_COLUMNS = {"avg": 3, "runs": 5, "hr": 6, "rbi": 7, "sb": 9}
PITCHING_COLUMNS = {"era": 3, "wins": 4, "strikeouts": 8, "whip": 9}
MIN_LEADERBOARD_CELLS = 10


def _text(node: Tag | None) -> str:
    return node.get_text(strip=True) if node is not None else ""


def _parse_int(value: str) -> int | None:
    try:
        return int(value)
    except ValueError:
        return None


def _card_status(card: Tag) -> tuple[GameStatus, str]:
    status_text = _text(card.select_one(STATUS_SELECTOR)).lower()
    if "final" in status_text:
        return "completed", status_text
    if LIVE_STATUS_PATTERN.search(status_text):
        return "live", status_text
    return "scheduled", status_text


def _card_teams(card: Tag) -> tuple[str, str] | None:
    """(away, home) team names, or None when the card isn't a matchup."""
    names = card.select(TEAM_NAME_SELECTOR)
    if len(names) == 2:
        away, home = _text(names[0]), _text(names[1])
        if away and home:
            return away, home
    return None


def parse_recent_games(html: str, today: date) -> list[Game]:
    """Completed games from the scores page.

    Cards without two numeric scores are skipped. The date is today unless
    the status mentions 'yesterday'.
    """
    soup = BeautifulSoup(html, "html.parser")
    games = []
    for card in soup.select(GAME_CARD_SELECTOR):
        status, status_text = _card_status(card)
        if status != "completed":
            continue
        teams = _card_teams(card)
        if teams is None:
            continue
        away, home = teams

        scores = card.select(SCORE_SELECTOR)
        if len(scores) != 2:
            continue
        away_score = _parse_int(_text(scores[0]))
        home_score = _parse_int(_text(scores[1]))
        if away_score is None or home_score is None:
            continue

        game_day = today - timedelta(days=1) if "yesterday" in status_text else today
        games.append(
            Game(
                home_team=home,
                home_team_code=team_code_from_name(home),
                away_team=away,
                away_team_code=team_code_from_name(away),
                date=format_date_iso(game_day),
                status="completed",
                home_score=home_score,
                away_score=away_score,
            )
        )
    return games


def parse_upcoming_games(html: str, today: date) -> list[Game]:
    """Scheduled and in-progress games from the schedule page, dated today.

    Live cards keep their status and provisional scores when both are shown.
    """
    soup = BeautifulSoup(html, "html.parser")
    games = []
    for entry in soup.select(GAME_CARD_SELECTOR):
        status = _card_status(entry)[0]
        if status == "completed":
            continue
        teams = _card_teams(entry)
        if teams is None:
            # Alternate markup: "Away Team at Home Team"
            parts = entry.get_text(" ", strip=True).split(" at ")
            if len(parts) != 2 or not parts[0].strip() or not parts[1].strip():
                continue
            teams = (parts[0].strip(), parts[1].strip())
        away, home = teams

        away_score = home_score = None
        if status == "live":
            scores = entry.select(SCORE_SELECTOR)
            if len(scores) == 2:
                away_score = _parse_int(_text(scores[0]))
                home_score = _parse_int(_text(scores[1]))

        games.append(
            Game(
                home_team=home,
                home_team_code=team_code_from_name(home),
                away_team=away,
                away_team_code=team_code_from_name(away),
                date=format_date_iso(today),
                status=status,
                home_score=home_score,
                away_score=away_score,
                time=_text(entry.select_one(TIME_SELECTOR)) or None,
            )
        )
    return games


def parse_standings_page(html: str) -> list[DivisionStanding]:
    """Division tables from the standings page, ordered by games behind."""
    soup = BeautifulSoup(html, "html.parser")
    divisions = []
    for table in soup.select(".standings-table"):
        division_name = _text(table.select_one(".standings-table-wrapper__headline"))
        if not division_name:
            continue

        teams = []
        for row in table.select("tbody tr"):
            cells = row.find_all("td")
            if len(cells) < 5:
                continue
            team_name = _text(cells[0].select_one(".standings-table-team__name a")) or _text(cells[0])
            if not team_name:
                continue
            wins = _parse_int(_text(cells[1]))
            losses = _parse_int(_text(cells[2]))
            if wins is None or losses is None:
                continue

            # Wider tables carry L10 and streak columns
            last10 = streak = None
            if len(cells) > 7:
                last10 = _text(cells[6]) or None
                streak = _text(cells[7]) or None

            teams.append(
                TeamStanding(
                    team=team_name,
                    wins=wins,
                    losses=losses,
                    pct=_text(cells[3]),
                    gb=_text(cells[4]),
                    last10=last10,
                    streak=streak,
                )
            )

        if teams:
            divisions.append(DivisionStanding(division=division_name, teams=teams).sort_teams())
    return divisions


def parse_leaderboard(html: str, stat_type: StatType) -> list[PlayerStats]:
    """Players from a stats leaderboard table (top SCRAPE_ROW_LIMIT rows)."""
    soup = BeautifulSoup(html, "html.parser")
    players = []
    for row in soup.select("table tbody tr")[:SCRAPE_ROW_LIMIT]:
        cells = row.find_all("td")
        if len(cells) < MIN_LEADERBOARD_CELLS:
            continue
        name = _text(cells[0].find("a")) or _text(cells[0])
        team = _text(cells[1].find("span")) or _text(cells[1])
        if not name or not team:
            continue
        team = re.sub(r"\s+", " ", team)

        if stat_type == "pitching":
            values = {field: _text(cells[i]) for field, i in PITCHING_COLUMNS.items()}
            pitching = PitchingStats(
                era=values["era"] or "0.00",
                wins=values["wins"] or "0",
                strikeouts=values["strikeouts"] or "0",
                whip=values["whip"] or "0.00",
            )
            players.append(PlayerStats(name=name, team=team, position="P", pitching=pitching))
        else:
            values = {field: _text(cells[i]) for field, i in BATTING_COLUMNS.items()}
            batting = BattingStats(
                avg=values["avg"] or ".000",
                runs=values["runs"] or "0",
                hr=values["hr"] or "0",
                rbi=values["rbi"] or "0",
                sb=values["sb"] or "0",
            )
            # Leaderboards don't list positions
            players.append(PlayerStats(name=name, team=team, position="", batting=batting))
    return players


class MLBWebScraper:
    """Fetches mlb.com pages and parses them with BeautifulSoup."""

    def __init__(self, client: MLBStatsClient):
        self._client = client

    @property
    def name(self) -> str:
        return "mlb_website"

    def scrape_recent_games(self, today: date) -> list[Game]:
        games = parse_recent_games(self._client.get_html(SCORES_PAGE), today)
        logger.info("[SCRAPE] Found %d recent games", len(games))
        return games

    def scrape_upcoming_games(self, today: date) -> list[Game]:
        games = parse_upcoming_games(self._client.get_html(SCHEDULE_PAGE), today)
        logger.info("[SCRAPE] Found %d upcoming games", len(games))
        return games

    def scrape_standings(self) -> list[DivisionStanding]:
        divisions = parse_standings_page(self._client.get_html(STANDINGS_PAGE))
        logger.info("[SCRAPE] Found %d division tables", len(divisions))
        return divisions

    def scrape_players(self, stat_type: StatType) -> list[PlayerStats]:
        page = PITCHING_STATS_PAGE if stat_type == "pitching" else BATTING_STATS_PAGE
        players = parse_leaderboard(self._client.get_html(page), stat_type)
        logger.info("[SCRAPE] Found %d %s leaders", len(players), stat_type)
        return players
