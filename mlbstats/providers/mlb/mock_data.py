"""Embedded fallback data.

Served only when both the Stats API and the website scrape come back empty,
so every endpoint keeps returning non-empty, correctly shaped payloads.
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
from mlbstats.core.teams import ALL_TEAMS_CODE, ALL_TEAMS_NAME, MLBTeam, get_team_by_name


def mock_games(today: str) -> GameData:
    """Three finished and three scheduled games dated `today`."""
    return GameData(
        recent=[
            Game("New York Yankees", "nyy", "Boston Red Sox", "bos", today, "completed", 5, 3),
            Game("Los Angeles Dodgers", "lad", "San Francisco Giants", "sf", today, "completed", 2, 1),
            Game("Chicago Cubs", "chc", "St. Louis Cardinals", "stl", today, "completed", 7, 4),
        ],
        upcoming=[
            Game("New York Yankees", "nyy", "Boston Red Sox", "bos", today, "scheduled", time="7:05 PM"),
            Game("Los Angeles Dodgers", "lad", "San Francisco Giants", "sf", today, "scheduled", time="10:10 PM"),
            Game("Chicago Cubs", "chc", "St. Louis Cardinals", "stl", today, "scheduled", time="8:15 PM"),
        ],
    )


def _division(name: str, rows: list[tuple]) -> DivisionStanding:
    return DivisionStanding(division=name, teams=[TeamStanding(*row) for row in rows])


def mock_standings() -> list[DivisionStanding]:
    """All six divisions, ordered by games behind."""
    return [
        _division(
            "American League East",
            [
                ("New York Yankees", 92, 70, ".568", "-", "7-3", "W4"),
                ("Baltimore Orioles", 89, 73, ".549", "3.0", "5-5", "W1"),
                ("Boston Red Sox", 87, 75, ".537", "5.0", "6-4", "L1"),
                ("Toronto Blue Jays", 85, 77, ".525", "7.0", "4-6", "L2"),
                ("Tampa Bay Rays", 80, 82, ".494", "12.0", "5-5", "W2"),
            ],
        ),
        _division(
            "American League Central",
            [
                ("Cleveland Guardians", 95, 67, ".586", "-", "6-4", "W2"),
                ("Minnesota Twins", 87, 75, ".537", "8.0", "5-5", "L1"),
                ("Kansas City Royals", 76, 86, ".469", "19.0", "4-6", "W1"),
                ("Detroit Tigers", 75, 87, ".463", "20.0", "5-5", "L3"),
                ("Chicago White Sox", 65, 97, ".401", "30.0", "3-7", "L5"),
            ],
        ),
        _division(
            "American League West",
            [
                ("Houston Astros", 90, 72, ".556", "-", "7-3", "W3"),
                ("Seattle Mariners", 88, 74, ".543", "2.0", "6-4", "W2"),
                ("Texas Rangers", 86, 76, ".531", "4.0", "5-5", "L1"),
                ("Los Angeles Angels", 73, 89, ".451", "17.0", "3-7", "L4"),
                ("Oakland Athletics", 66, 96, ".407", "24.0", "4-6", "L2"),
            ],
        ),
        _division(
            "National League East",
            [
                ("Atlanta Braves", 96, 66, ".593", "-", "8-2", "W4"),
                ("Philadelphia Phillies", 90, 72, ".556", "6.0", "6-4", "W2"),
                ("New York Mets", 84, 78, ".519", "12.0", "5-5", "L1"),
                ("Miami Marlins", 71, 91, ".438", "25.0", "4-6", "W1"),
                ("Washington Nationals", 65, 97, ".401", "31.0", "3-7", "L6"),
            ],
        ),
        _division(
            "National League Central",
            [
                ("Milwaukee Brewers", 93, 69, ".574", "-", "6-4", "W2"),
                ("Chicago Cubs", 83, 79, ".512", "10.0", "5-5", "L2"),
                ("St. Louis Cardinals", 81, 81, ".500", "12.0", "4-6", "L1"),
                ("Cincinnati Reds", 78, 84, ".481", "15.0", "5-5", "W2"),
                ("Pittsburgh Pirates", 74, 88, ".457", "19.0", "3-7", "L3"),
            ],
        ),
        _division(
            "National League West",
            [
                ("Los Angeles Dodgers", 98, 64, ".605", "-", "7-3", "W5"),
                ("San Diego Padres", 89, 73, ".549", "9.0", "6-4", "W1"),
                ("Arizona Diamondbacks", 84, 78, ".519", "14.0", "5-5", "L2"),
                ("San Francisco Giants", 79, 83, ".488", "19.0", "4-6", "W1"),
                ("Colorado Rockies", 65, 97, ".401", "33.0", "2-8", "L7"),
            ],
        ),
    ]


def _hitter(name: str, team: str, position: str, avg: str, hr: str, rbi: str, runs: str, sb: str) -> PlayerStats:
    return PlayerStats(
        name=name,
        team=team,
        position=position,
        batting=BattingStats(avg=avg, hr=hr, rbi=rbi, runs=runs, sb=sb),
    )


def _pitcher(name: str, team: str, era: str, wins: str, strikeouts: str, whip: str) -> PlayerStats:
    return PlayerStats(
        name=name,
        team=team,
        position="P",
        pitching=PitchingStats(era=era, wins=wins, strikeouts=strikeouts, whip=whip),
    )


def mock_players() -> list[PlayerStats]:
    return [
        _hitter("Aaron Judge", "New York Yankees", "RF", ".310", "32", "74", "65", "8"),
        _pitcher("Gerrit Cole", "New York Yankees", "2.78", "8", "112", "1.02"),
        _hitter("Shohei Ohtani", "Los Angeles Dodgers", "DH", ".321", "28", "68", "71", "12"),
        _hitter("Mookie Betts", "Los Angeles Dodgers", "RF", ".302", "18", "56", "61", "7"),
        _hitter("Ronald Acuña Jr.", "Atlanta Braves", "OF", ".337", "24", "52", "89", "43"),
        _hitter("Freddie Freeman", "Los Angeles Dodgers", "1B", ".318", "15", "67", "72", "4"),
        _pitcher("Spencer Strider", "Atlanta Braves", "2.85", "11", "198", "0.98"),
        _hitter("Yordan Alvarez", "Houston Astros", "DH", ".293", "31", "88", "64", "2"),
    ]


def _placeholder_players(team_name: str, short_name: str) -> list[PlayerStats]:
    """Generic roster for teams without named mock players."""
    return [
        _hitter(f"{short_name} Leadoff Hitter", team_name, "CF", ".275", "12", "45", "60", "18"),
        _hitter(f"{short_name} Cleanup Hitter", team_name, "1B", ".268", "25", "80", "58", "2"),
        _hitter(f"{short_name} Catcher", team_name, "C", ".241", "10", "42", "35", "1"),
        _pitcher(f"{short_name} Ace", team_name, "3.12", "10", "150", "1.10"),
        _pitcher(f"{short_name} Closer", team_name, "2.95", "3", "70", "1.05"),
    ]


def mock_roster(team: MLBTeam | None) -> TeamRoster:
    """Unfiltered mock roster for one team, or league-wide when team is None.

    Always holds both hitters and pitchers, so any stat-type filter leaves
    at least one player.
    """
    players = mock_players()
    if team is None:
        return TeamRoster(team_name=ALL_TEAMS_NAME, team_code=ALL_TEAMS_CODE, players=players)

    own = [p for p in players if get_team_by_name(p.team) == team]
    has_both = any(p.is_pitcher for p in own) and any(not p.is_pitcher for p in own)
    if not has_both:
        # Named players missing one side of the roster: fill with placeholders
        placeholders = _placeholder_players(team.name, team.short_name)
        if any(p.is_pitcher for p in own):
            own += [p for p in placeholders if not p.is_pitcher]
        elif own:
            own += [p for p in placeholders if p.is_pitcher]
        else:
            own = placeholders
    return TeamRoster(team_name=team.name, team_code=team.code, players=own)


# Seven most recent league-wide data points per trend category
MOCK_TRENDS: dict[str, list[float]] = {
    "Batting Average": [0.268, 0.265, 0.271, 0.275, 0.269, 0.263, 0.267],
    "Home Runs": [1.15, 1.23, 1.27, 1.34, 1.29, 1.21, 1.18],
    "RBIs": [4.05, 4.18, 4.32, 4.48, 4.37, 4.25, 4.12],
    "OPS": [0.725, 0.736, 0.745, 0.758, 0.751, 0.733, 0.726],
    "ERA": [3.95, 4.02, 3.98, 3.92, 4.05, 4.14, 4.10],
    "Strikeouts": [8.8, 8.9, 9.1, 9.3, 9.2, 9.0, 8.9],
    "WHIP": [1.27, 1.25, 1.22, 1.21, 1.23, 1.26, 1.28],
    "Exit Velocity": [88.6, 88.9, 89.2, 89.4, 89.1, 88.8, 88.7],
    "Launch Angle": [12.2, 12.4, 12.7, 12.9, 12.6, 12.3, 12.2],
    "Sprint Speed": [27.0, 26.9, 26.8, 26.7, 26.8, 26.9, 27.1],
}

TREND_POINTS = 7


def mock_trend(category: str) -> list[float]:
    """Embedded series for a category; unknown categories get zeros."""
    return list(MOCK_TRENDS.get(category, [0.0] * TREND_POINTS))
