"""Tests for the mlb.com HTML parsers."""

from datetime import date

import pytest

from mlbstats.core import UpstreamUnavailableError
from mlbstats.providers.mlb.scraper import (
    parse_leaderboard,
    parse_recent_games,
    parse_standings_page,
    parse_upcoming_games,
)

TODAY = date(2025, 6, 15)

SCORES_HTML = """
<html><body>
<div class="EventCard">
  <span class="EventCard-statusText">Final</span>
  <span class="EventCard-matchupTeamName">Boston Red Sox</span>
  <span class="EventCard-matchupTeamName">New York Yankees</span>
  <span class="EventCard-score">2</span><span class="EventCard-score">6</span>
</div>
<div class="EventCard">
  <span class="EventCard-statusText">Final - Yesterday</span>
  <span class="EventCard-matchupTeamName">St. Louis Cardinals</span>
  <span class="EventCard-matchupTeamName">Chicago Cubs</span>
  <span class="EventCard-score">4</span><span class="EventCard-score">7</span>
</div>
<div class="EventCard">
  <span class="EventCard-statusText">7:05 PM</span>
  <span class="EventCard-matchupTeamName">Houston Astros</span>
  <span class="EventCard-matchupTeamName">Texas Rangers</span>
</div>
<div class="EventCard">
  <span class="EventCard-statusText">Final</span>
  <span class="EventCard-matchupTeamName">Miami Marlins</span>
  <span class="EventCard-matchupTeamName">Atlanta Braves</span>
  <span class="EventCard-score">-</span><span class="EventCard-score">3</span>
</div>
</body></html>
"""

SCHEDULE_HTML = """
<html><body>
<div class="schedule-item">
  <span class="schedule-team__name">San Francisco Giants</span>
  <span class="schedule-team__name">Los Angeles Dodgers</span>
  <span class="schedule-time">10:10 PM</span>
</div>
<div class="p-schedule__game">Houston Astros at Texas Rangers</div>
<div class="schedule-item">
  <span class="schedule-status">Final</span>
  <span class="schedule-team__name">Boston Red Sox</span>
  <span class="schedule-team__name">New York Yankees</span>
</div>
<div class="p-schedule__game">Off day</div>
</body></html>
"""

STANDINGS_HTML = """
<html><body>
<div class="standings-table">
  <h2 class="standings-table-wrapper__headline">American League East</h2>
  <table><tbody>
    <tr><td>Team</td><td>W</td><td>L</td><td>PCT</td><td>GB</td></tr>
    <tr>
      <td><span class="standings-table-team__name"><a href="#">Baltimore Orioles</a></span></td>
      <td>40</td><td>30</td><td>.571</td><td>2.0</td><td>9-6</td><td>6-4</td><td>W1</td>
    </tr>
    <tr>
      <td><span class="standings-table-team__name"><a href="#">New York Yankees</a></span></td>
      <td>42</td><td>28</td><td>.600</td><td>-</td><td>10-5</td><td>7-3</td><td>W3</td>
    </tr>
  </tbody></table>
</div>
<div class="standings-table">
  <h2 class="standings-table-wrapper__headline">National League West</h2>
  <table><tbody>
    <tr><td>Los Angeles Dodgers</td><td>45</td><td>25</td><td>.643</td><td>-</td></tr>
  </tbody></table>
</div>
<div class="standings-table"><table><tbody></tbody></table></div>
</body></html>
"""


def leaderboard_row(name: str, team: str, values: list[str]) -> str:
    cells = "".join(f"<td>{v}</td>" for v in values)
    return f'<tr><td><a href="#">{name}</a></td><td><span>{team}</span></td>{cells}</tr>'


class TestRecentGames:
    def test_only_final_games_with_two_scores(self):
        games = parse_recent_games(SCORES_HTML, TODAY)
        assert [(g.away_team_code, g.home_team_code) for g in games] == [("bos", "nyy"), ("stl", "chc")]
        assert all(g.status == "completed" for g in games)

    def test_scores_are_integers(self):
        game = parse_recent_games(SCORES_HTML, TODAY)[0]
        assert (game.away_score, game.home_score) == (2, 6)

    def test_yesterday_games_are_dated_yesterday(self):
        today_game, yesterday_game = parse_recent_games(SCORES_HTML, TODAY)
        assert today_game.date == "2025-06-15"
        assert yesterday_game.date == "2025-06-14"

    def test_client_rendered_page_yields_nothing(self):
        assert parse_recent_games("<html><div id='root'></div></html>", TODAY) == []


class TestUpcomingGames:
    def test_scheduled_games_and_text_fallback(self):
        games = parse_upcoming_games(SCHEDULE_HTML, TODAY)
        assert [(g.away_team, g.home_team) for g in games] == [
            ("San Francisco Giants", "Los Angeles Dodgers"),
            ("Houston Astros", "Texas Rangers"),
        ]
        assert games[0].time == "10:10 PM"
        assert games[1].time is None
        assert games[1].home_team_code == "tex"
        assert all(g.status == "scheduled" and g.date == "2025-06-15" for g in games)
        assert all(g.home_score is None for g in games)

    def test_live_card_keeps_status_and_scores(self):
        html = """
        <div class="schedule-item">
          <span class="schedule-status">Top 5th</span>
          <span class="schedule-team__name">New York Mets</span>
          <span class="schedule-team__name">Atlanta Braves</span>
          <span class="schedule-score">0</span><span class="schedule-score">1</span>
        </div>
        """
        (game,) = parse_upcoming_games(html, TODAY)
        assert game.status == "live"
        assert (game.away_team_code, game.home_team_code) == ("nym", "atl")
        assert (game.away_score, game.home_score) == (0, 1)


class TestStandingsPage:
    def test_divisions_sorted_by_games_behind(self):
        divisions = parse_standings_page(STANDINGS_HTML)
        assert [d.division for d in divisions] == ["American League East", "National League West"]
        assert [t.team for t in divisions[0].teams] == ["New York Yankees", "Baltimore Orioles"]

    def test_wide_rows_carry_last_ten_and_streak(self):
        leader = parse_standings_page(STANDINGS_HTML)[0].teams[0]
        assert (leader.wins, leader.losses, leader.pct, leader.gb) == (42, 28, ".600", "-")
        assert (leader.last10, leader.streak) == ("7-3", "W3")

    def test_narrow_rows_have_no_last_ten(self):
        dodgers = parse_standings_page(STANDINGS_HTML)[1].teams[0]
        assert dodgers.team == "Los Angeles Dodgers"
        assert dodgers.last10 is None and dodgers.streak is None


class TestLeaderboard:
    def test_batting_columns(self):
        html = "<table><tbody>{}{}</tbody></table>".format(
            leaderboard_row("Aaron Judge", "NYY", ["70", ".322", "250", "65", "30", "70", "80", "5"]),
            leaderboard_row("Short Row", "BOS", [".300"]),
        )
        (player,) = parse_leaderboard(html, "hitting")
        assert (player.name, player.team, player.position) == ("Aaron Judge", "NYY", "")
        assert player.batting.avg == ".322"
        assert (player.batting.runs, player.batting.hr, player.batting.rbi, player.batting.sb) == ("65", "30", "70", "5")

    def test_pitching_columns(self):
        html = "<table><tbody>{}</tbody></table>".format(
            leaderboard_row("Gerrit Cole", "New York Yankees", ["15", "2.95", "9", "3", "15", "90.1", "120", "1.05"]),
        )
        (player,) = parse_leaderboard(html, "pitching")
        assert player.position == "P"
        assert player.pitching.era == "2.95"
        assert player.pitching.wins == "9"
        assert player.pitching.strikeouts == "120"
        assert player.pitching.whip == "1.05"


class TestMLBWebScraper:
    def test_fetches_and_parses_scores_page(self, scraper, upstream, today):
        upstream.add_html("/scores/", SCORES_HTML)
        assert len(scraper.scrape_recent_games(today)) == 2

    def test_standings_page(self, scraper, upstream):
        upstream.add_html("/standings", STANDINGS_HTML)
        assert len(scraper.scrape_standings()) == 2

    def test_pitching_leaderboard_url(self, scraper, upstream):
        upstream.add_html("/stats/pitching", "<table><tbody></tbody></table>")
        assert scraper.scrape_players("pitching") == []
        assert upstream.calls == ["/stats/pitching"]

    def test_unreachable_site_raises(self, scraper):
        with pytest.raises(UpstreamUnavailableError):
            scraper.scrape_upcoming_games(TODAY)
