"""Background consumers of the data service."""

from mlbstats.consumers.scheduler import CacheWarmScheduler

__all__ = ["CacheWarmScheduler"]
