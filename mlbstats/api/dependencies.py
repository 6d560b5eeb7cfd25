"""FastAPI dependencies.

Everything is created once by create_app() and stored on app.state; routes
pull it from there with Depends().
"""

from fastapi import Request

from mlbstats.cache import CacheBackend
from mlbstats.config import Settings
from mlbstats.consumers import CacheWarmScheduler
from mlbstats.services import StatsDataService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_cache(request: Request) -> CacheBackend:
    return request.app.state.cache


def get_data_service(request: Request) -> StatsDataService:
    return request.app.state.data_service


def get_scheduler(request: Request) -> CacheWarmScheduler:
    return request.app.state.scheduler
