"""HTTP API (FastAPI)."""

from mlbstats.api.app import create_app

__all__ = ["create_app"]
