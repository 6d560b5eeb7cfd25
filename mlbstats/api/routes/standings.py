"""Standings API endpoint."""

from fastapi import APIRouter, Depends, Response

from mlbstats.api.dependencies import get_data_service
from mlbstats.api.routes import with_data_source
from mlbstats.services import StatsDataService

router = APIRouter()


@router.get("/standings")
def get_standings(response: Response, service: StatsDataService = Depends(get_data_service)) -> list:
    """Division standings, teams ordered by games behind."""
    return with_data_source(response, service.get_standings())
