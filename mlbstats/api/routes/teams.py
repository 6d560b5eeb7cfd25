"""Teams API endpoint."""

from fastapi import APIRouter, Depends, Response

from mlbstats.api.dependencies import get_data_service
from mlbstats.api.routes import with_data_source
from mlbstats.services import StatsDataService

router = APIRouter()


@router.get("/teams")
def list_teams(response: Response, service: StatsDataService = Depends(get_data_service)) -> list:
    """All 30 clubs with their codes, ids, leagues and divisions."""
    return with_data_source(response, service.get_teams())
