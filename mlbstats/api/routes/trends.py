"""Trends API endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from mlbstats.api.dependencies import get_data_service
from mlbstats.api.routes import with_data_source
from mlbstats.services import StatsDataService

router = APIRouter()


@router.get("/trends")
def get_trends(
    response: Response,
    stat: str | None = Query(None, description="Stat category, e.g. 'Batting Average' or 'ERA'"),
    service: StatsDataService = Depends(get_data_service),
) -> dict:
    """Recent league-wide values for one stat category.

    Returns:
        {category: number[]}
    """
    if not stat or not stat.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Query parameter 'stat' is required",
        )
    return with_data_source(response, service.get_trends(stat.strip()))
