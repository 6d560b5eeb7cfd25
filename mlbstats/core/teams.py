"""Canonical MLB team table.

Single source of truth for team codes, MLB Stats API ids and names.
Every team-name or team-code lookup in the code base goes through here.
"""

import re
from dataclasses import dataclass

from mlbstats.core.errors import InvalidTeamError


@dataclass(frozen=True)
class MLBTeam:
    code: str  # lowercase abbreviation, e.g. 'nyy'
    team_id: int  # MLB Stats API id
    name: str  # full name, e.g. 'New York Yankees'
    short_name: str  # club name, e.g. 'Yankees'
    location: str  # e.g. 'New York'
    league: str  # 'AL' or 'NL'
    division: str  # e.g. 'American League East'
    aliases: tuple[str, ...] = ()


TEAMS: tuple[MLBTeam, ...] = (
    MLBTeam("bal", 110, "Baltimore Orioles", "Orioles", "Baltimore", "AL", "American League East"),
    MLBTeam("bos", 111, "Boston Red Sox", "Red Sox", "Boston", "AL", "American League East"),
    MLBTeam("nyy", 147, "New York Yankees", "Yankees", "New York", "AL", "American League East"),
    MLBTeam("tb", 139, "Tampa Bay Rays", "Rays", "Tampa Bay", "AL", "American League East"),
    MLBTeam("tor", 141, "Toronto Blue Jays", "Blue Jays", "Toronto", "AL", "American League East"),
    MLBTeam(
        "cws", 145, "Chicago White Sox", "White Sox", "Chicago", "AL", "American League Central",
        aliases=("chw",),
    ),
    MLBTeam(
        "cle", 114, "Cleveland Guardians", "Guardians", "Cleveland", "AL",
        "American League Central", aliases=("Cleveland Indians",),
    ),
    MLBTeam("det", 116, "Detroit Tigers", "Tigers", "Detroit", "AL", "American League Central"),
    MLBTeam("kc", 118, "Kansas City Royals", "Royals", "Kansas City", "AL", "American League Central"),
    MLBTeam("min", 142, "Minnesota Twins", "Twins", "Minnesota", "AL", "American League Central"),
    MLBTeam("hou", 117, "Houston Astros", "Astros", "Houston", "AL", "American League West"),
    MLBTeam("laa", 108, "Los Angeles Angels", "Angels", "Los Angeles", "AL", "American League West"),
    MLBTeam(
        "oak", 133, "Oakland Athletics", "Athletics", "Oakland", "AL", "American League West",
        aliases=("ath", "Athletics", "Sacramento Athletics"),
    ),
    MLBTeam("sea", 136, "Seattle Mariners", "Mariners", "Seattle", "AL", "American League West"),
    MLBTeam("tex", 140, "Texas Rangers", "Rangers", "Texas", "AL", "American League West"),
    MLBTeam("atl", 144, "Atlanta Braves", "Braves", "Atlanta", "NL", "National League East"),
    MLBTeam("mia", 146, "Miami Marlins", "Marlins", "Miami", "NL", "National League East"),
    MLBTeam("nym", 121, "New York Mets", "Mets", "New York", "NL", "National League East"),
    MLBTeam("phi", 143, "Philadelphia Phillies", "Phillies", "Philadelphia", "NL", "National League East"),
    MLBTeam(
        "wsh", 120, "Washington Nationals", "Nationals", "Washington", "NL", "National League East",
        aliases=("was",),
    ),
    MLBTeam("chc", 112, "Chicago Cubs", "Cubs", "Chicago", "NL", "National League Central"),
    MLBTeam("cin", 113, "Cincinnati Reds", "Reds", "Cincinnati", "NL", "National League Central"),
    MLBTeam("mil", 158, "Milwaukee Brewers", "Brewers", "Milwaukee", "NL", "National League Central"),
    MLBTeam("pit", 134, "Pittsburgh Pirates", "Pirates", "Pittsburgh", "NL", "National League Central"),
    MLBTeam("stl", 138, "St. Louis Cardinals", "Cardinals", "St. Louis", "NL", "National League Central"),
    MLBTeam(
        "ari", 109, "Arizona Diamondbacks", "Diamondbacks", "Arizona", "NL", "National League West",
        aliases=("az", "D-backs", "Arizona D-backs"),
    ),
    MLBTeam("col", 115, "Colorado Rockies", "Rockies", "Colorado", "NL", "National League West"),
    MLBTeam("lad", 119, "Los Angeles Dodgers", "Dodgers", "Los Angeles", "NL", "National League West"),
    MLBTeam("sd", 135, "San Diego Padres", "Padres", "San Diego", "NL", "National League West"),
    MLBTeam("sf", 137, "San Francisco Giants", "Giants", "San Francisco", "NL", "National League West"),
)

ALL_TEAMS_CODE = "all"
ALL_TEAMS_NAME = "All Teams"

_TEAM_CODE_PATTERN = re.compile(r"^[a-z]{2,3}$")

# Lookup tables built once from TEAMS
TEAMS_BY_CODE: dict[str, MLBTeam] = {t.code: t for t in TEAMS}
TEAMS_BY_ID: dict[int, MLBTeam] = {t.team_id: t for t in TEAMS}


def _build_indexes() -> tuple[dict[str, MLBTeam], dict[str, MLBTeam]]:
    """Split aliases into code aliases ('chw') and name aliases ('Athletics')."""
    code_aliases: dict[str, MLBTeam] = {}
    names: dict[str, MLBTeam] = {}
    for team in TEAMS:
        names[team.name.lower()] = team
        names[team.short_name.lower()] = team
        for alias in team.aliases:
            if _TEAM_CODE_PATTERN.match(alias):
                code_aliases[alias] = team
            else:
                names[alias.lower()] = team
    return code_aliases, names


_CODE_ALIASES, _NAME_INDEX = _build_indexes()


def is_valid_team_code_format(code: str) -> bool:
    """Check that a code looks like a team abbreviation (2-3 letters) or 'all'."""
    code = (code or "").strip().lower()
    return code == ALL_TEAMS_CODE or bool(_TEAM_CODE_PATTERN.match(code))


def get_team_by_code(code: str) -> MLBTeam | None:
    """Resolve a team abbreviation (case-insensitive, aliases accepted)."""
    code = (code or "").strip().lower()
    return TEAMS_BY_CODE.get(code) or _CODE_ALIASES.get(code)


def get_team_by_id(team_id: int | str | None) -> MLBTeam | None:
    try:
        return TEAMS_BY_ID.get(int(team_id))  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None


def get_team_by_name(name: str) -> MLBTeam | None:
    """Match a full name, club name or alias (case-insensitive)."""
    normalized = re.sub(r"\s+", " ", (name or "").strip()).lower()
    if not normalized:
        return None
    return _NAME_INDEX.get(normalized)


def team_code_from_name(name: str) -> str:
    """Convert a team name to its abbreviation.

    Unknown names fall back to the lower-cased name with whitespace removed,
    truncated to three characters. That fallback is a heuristic only.
    """
    team = get_team_by_name(name)
    if team:
        return team.code
    return re.sub(r"\s+", "", (name or "").lower())[:3]


def team_code_from_id(team_id: int | str | None, fallback: str = "unk") -> str:
    team = get_team_by_id(team_id)
    return team.code if team else fallback


def resolve_team_code(code: str) -> MLBTeam | None:
    """Resolve a client-supplied team code. None means the whole league.

    Raises:
        InvalidTeamError: Malformed or unknown code
    """
    normalized = (code or "").strip().lower()
    if not is_valid_team_code_format(normalized):
        raise InvalidTeamError(code, "Invalid team abbreviation")
    if normalized == ALL_TEAMS_CODE:
        return None
    team = get_team_by_code(normalized)
    if team is None:
        raise InvalidTeamError(code)
    return team
