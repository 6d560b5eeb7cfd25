"""Fetch results and the fallback ladder.

Every fetcher walks a fixed ladder of sources: official API, website scrape,
embedded mock data. Each rung produces a FetchResult recording which tier
served the data and the errors collected on the way down, so callers can tell
a live response from a degraded one without parsing logs.

Usage:
    result = first_successful(
        lambda: attempt(DataTier.LIVE, fetch_from_api),
        lambda: attempt(DataTier.SCRAPED, scrape_website),
    )
    result = degrade_to(result, lambda: MOCK_DATA)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

import httpx

from mlbstats.core.errors import FetchError, MLBStatsError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

# Failures a rung may absorb. Malformed upstream payloads surface as
# KeyError/TypeError/ValueError while parsing.
RECOVERABLE_ERRORS = (MLBStatsError, httpx.HTTPError, KeyError, TypeError, ValueError)


class DataTier(str, Enum):
    """Where a response came from."""

    CACHE = "cache"
    LIVE = "live"
    SCRAPED = "scraped"
    MOCK = "mock"


@dataclass
class FetchResult(Generic[T]):
    """Outcome of one or more fetch attempts."""

    data: T | None
    tier: DataTier | None
    errors: list[Exception] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.data is not None

    @property
    def is_degraded(self) -> bool:
        return self.tier in (DataTier.SCRAPED, DataTier.MOCK)

    @classmethod
    def success(cls, data: T, tier: DataTier) -> "FetchResult[T]":
        return cls(data=data, tier=tier)

    @classmethod
    def failure(cls, error: Exception, tier: DataTier | None = None) -> "FetchResult[T]":
        return cls(data=None, tier=tier, errors=[error])

    def map(self, fn: Callable[[T], U]) -> "FetchResult[U]":
        """Transform the data, keeping tier and errors."""
        if self.data is None:
            return FetchResult(data=None, tier=self.tier, errors=list(self.errors))
        return FetchResult(data=fn(self.data), tier=self.tier, errors=list(self.errors))


def _is_empty(data: Any) -> bool:
    if data is None:
        return True
    if hasattr(data, "is_empty"):
        return bool(data.is_empty)
    try:
        return len(data) == 0
    except TypeError:
        return False


def attempt(
    tier: DataTier,
    fn: Callable[[], T],
    is_empty: Callable[[T], bool] = _is_empty,
) -> FetchResult[T]:
    """Run one rung of the ladder.

    Recoverable errors and empty datasets become a failed result instead of
    propagating.
    """
    try:
        data = fn()
    except RECOVERABLE_ERRORS as e:
        logger.warning("[FETCH] %s tier failed: %s", tier.value, e)
        return FetchResult.failure(e, tier)

    if is_empty(data):
        logger.info("[FETCH] %s tier returned no records", tier.value)
        return FetchResult.failure(FetchError(f"{tier.value} tier returned no records"), tier)

    return FetchResult.success(data, tier)


def first_successful(*steps: Callable[[], FetchResult[T]]) -> FetchResult[T]:
    """Run steps in order and return the first successful result.

    Errors from earlier failed steps are carried on the returned result.
    """
    errors: list[Exception] = []
    last_tier: DataTier | None = None
    for step in steps:
        result = step()
        if result.ok:
            result.errors = errors + result.errors
            return result
        errors.extend(result.errors)
        last_tier = result.tier
    return FetchResult(data=None, tier=last_tier, errors=errors)


def degrade_to(result: FetchResult[T], fallback: Callable[[], T]) -> FetchResult[T]:
    """Substitute mock data when every upstream tier failed."""
    if result.ok:
        return result
    logger.info("[FETCH] All upstream tiers failed (%d errors), serving mock data", len(result.errors))
    return FetchResult(data=fallback(), tier=DataTier.MOCK, errors=list(result.errors))
