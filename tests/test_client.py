"""Tests for MLBStatsClient error mapping and retries."""

import httpx
import pytest

from mlbstats.core import FetchError, UpstreamUnavailableError
from mlbstats.providers.mlb import MLBStatsClient
from mlbstats.providers.mlb.constants import API_USER_AGENT, BROWSER_USER_AGENT, SCORES_PAGE


def respond_in_order(*responses: httpx.Response):
    """Route handler returning the given responses one after another."""
    queue = list(responses)
    return lambda: queue.pop(0)


class TestHeaders:
    def test_api_requests_use_fixed_user_agent(self, client, upstream):
        upstream.add_json("/api/v1/standings", {"records": []})
        client.get_json("/standings")
        assert upstream.requests[0].headers["User-Agent"] == API_USER_AGENT

    def test_page_requests_use_browser_user_agent(self, client, upstream):
        upstream.add_html("/scores/", "<html></html>")
        assert client.get_html(SCORES_PAGE) == "<html></html>"
        assert upstream.requests[0].headers["User-Agent"] == BROWSER_USER_AGENT


class TestRetries:
    def test_transient_status_is_retried(self, client, upstream):
        upstream.routes["/api/v1/teams"] = respond_in_order(
            httpx.Response(503),
            httpx.Response(429),
            httpx.Response(200, json={"teams": []}),
        )
        assert client.get_json("/teams") == {"teams": []}
        assert upstream.count("/api/v1/teams") == 3

    def test_gives_up_after_retry_count(self, client, upstream):
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            client.get_json("/standings")
        assert exc_info.value.status_code == 503
        # first attempt + 2 retries
        assert upstream.count("/api/v1/standings") == 3

    def test_network_errors_are_retried(self, client, upstream):
        upstream.add_error("/api/v1/schedule", httpx.ConnectError("Connection refused"))
        with pytest.raises(UpstreamUnavailableError):
            client.get_json("/schedule")
        assert upstream.count("/api/v1/schedule") == 3

    def test_timeouts_are_retried(self, client, upstream):
        upstream.add_error("/api/v1/schedule", httpx.ReadTimeout("timed out"))
        with pytest.raises(UpstreamUnavailableError, match="Timeout"):
            client.get_json("/schedule")
        assert upstream.count("/api/v1/schedule") == 3

    def test_client_errors_are_not_retried(self, client, upstream):
        upstream.add_status("/api/v1/teams/1/roster", 404)
        with pytest.raises(FetchError) as exc_info:
            client.get_json("/teams/1/roster")
        assert not isinstance(exc_info.value, UpstreamUnavailableError)
        assert exc_info.value.status_code == 404
        assert upstream.count("/api/v1/teams/1/roster") == 1

    def test_retry_can_be_disabled(self, client, upstream):
        with pytest.raises(UpstreamUnavailableError):
            client.get_json("/people/1/stats", retry=False)
        assert upstream.count("/api/v1/people/1/stats") == 1

    def test_backoff_delays(self, upstream):
        sleeps = []
        client = MLBStatsClient(
            retry_count=3,
            retry_delay=1.0,
            transport=httpx.MockTransport(upstream.handler),
            sleep=sleeps.append,
        )
        with pytest.raises(UpstreamUnavailableError):
            client.get_json("/standings")
        client.close()
        assert sleeps == pytest.approx([1.0, 1.5, 2.25])


class TestPayloads:
    def test_invalid_json_is_a_fetch_error(self, client, upstream):
        upstream.add_html("/api/v1/standings", "<html>maintenance</html>")
        with pytest.raises(FetchError, match="Invalid JSON"):
            client.get_json("/standings")

    def test_non_object_json_is_a_fetch_error(self, client, upstream):
        upstream.add_json("/api/v1/standings", [1, 2, 3])
        with pytest.raises(FetchError, match="Unexpected payload"):
            client.get_json("/standings")

    def test_close_allows_reuse(self, client, upstream):
        upstream.add_json("/api/v1/teams", {"teams": []})
        client.get_json("/teams")
        client.close()
        assert client.get_json("/teams") == {"teams": []}
