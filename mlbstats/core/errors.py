"""Exception hierarchy."""


class MLBStatsError(Exception):
    """Base exception for the statistics backend."""


class FetchError(MLBStatsError):
    """An upstream source (API or website) did not produce usable data."""

    def __init__(
        self,
        message: str,
        url: str | None = None,
        status_code: int | None = None,
    ):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class UpstreamUnavailableError(FetchError):
    """Transient upstream failure (network error, timeout, 5xx, 429). Retryable."""


class ScrapeTimeoutError(FetchError):
    """Scraping did not finish inside its deadline."""


class InvalidTeamError(MLBStatsError, ValueError):
    """Client supplied a malformed or unknown team abbreviation."""

    def __init__(self, code: str, reason: str = "Unknown team abbreviation"):
        self.code = code
        super().__init__(f"{reason}: {code}")
