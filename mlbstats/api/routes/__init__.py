"""API route modules."""

from fastapi import Response

from mlbstats.core import DataTier, FetchResult

DATA_SOURCE_HEADER = "X-Data-Source"


def with_data_source(response: Response, result: FetchResult):
    """Expose the serving tier on the response and return its payload."""
    tier = result.tier or DataTier.MOCK
    response.headers[DATA_SOURCE_HEADER] = tier.value
    return result.data
