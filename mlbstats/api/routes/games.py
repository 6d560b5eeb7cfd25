"""Games API endpoint."""

from fastapi import APIRouter, Depends, Response

from mlbstats.api.dependencies import get_data_service
from mlbstats.api.routes import with_data_source
from mlbstats.services import StatsDataService

router = APIRouter()


@router.get("/games")
def get_games(response: Response, service: StatsDataService = Depends(get_data_service)) -> dict:
    """Recent (yesterday) and upcoming (today/tomorrow) games.

    Returns:
        {recent: Game[], upcoming: Game[]}
    """
    return with_data_source(response, service.get_games())
