"""Roster API endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from mlbstats.api.dependencies import get_data_service
from mlbstats.api.routes import with_data_source
from mlbstats.services import RosterQuery, StatsDataService

router = APIRouter()


@router.get("/roster")
def get_roster(
    response: Response,
    team: str = Query("nyy", description="Team abbreviation, or 'all' for league-wide stats"),
    stat_type: str = Query("hitting", alias="statType", description="hitting, pitching or batting"),
    period: str = Query("season", description="season, 30day, 7day or 1day"),
    season: int | None = Query(None, description="Season year (default: current)"),
    service: StatsDataService = Depends(get_data_service),
) -> list:
    """Players of one team with hitting or pitching stats.

    Pitching rosters contain only pitchers; hitting rosters only position
    players.

    Returns:
        [{teamName, teamCode, players}]
    """
    try:
        query = RosterQuery.from_params(team, stat_type, period, season)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from None

    return with_data_source(response, service.get_roster(query))
