"""Tests for the canonical team table and cache key derivation."""

import pytest

from mlbstats.cache.keys import make_cache_key, roster_key, trends_key
from mlbstats.cache.policy import TTL_ROSTERS, roster_ttl_for_period
from mlbstats.core import InvalidTeamError
from mlbstats.core.teams import (
    TEAMS,
    get_team_by_code,
    get_team_by_id,
    is_valid_team_code_format,
    resolve_team_code,
    team_code_from_id,
    team_code_from_name,
)


class TestTeamTable:
    def test_thirty_unique_teams(self):
        assert len(TEAMS) == 30
        assert len({t.code for t in TEAMS}) == 30
        assert len({t.team_id for t in TEAMS}) == 30

    def test_codes_are_lowercase(self):
        assert all(t.code == t.code.lower() for t in TEAMS)

    def test_lookup_by_id(self):
        assert get_team_by_id(147).code == "nyy"
        assert get_team_by_id("119").code == "lad"
        assert get_team_by_id(None) is None
        assert get_team_by_id(99999) is None

    def test_team_code_from_id_fallback(self):
        assert team_code_from_id(111) == "bos"
        assert team_code_from_id(99999, fallback="xyz") == "xyz"


class TestTeamCodeFromName:
    @pytest.mark.parametrize(
        "name,code",
        [
            ("New York Yankees", "nyy"),
            ("new york yankees", "nyy"),
            ("  Boston   Red Sox ", "bos"),
            ("Yankees", "nyy"),
            ("D-backs", "ari"),
            ("Cleveland Indians", "cle"),
            ("Athletics", "oak"),
        ],
    )
    def test_known_names(self, name, code):
        assert team_code_from_name(name) == code

    def test_unknown_name_falls_back_to_truncation(self):
        assert team_code_from_name("Brooklyn Cyclones") == "bro"
        assert team_code_from_name("  Las  Vegas ") == "las"


class TestResolveTeamCode:
    def test_known_code_case_insensitive(self):
        assert resolve_team_code("NYY").name == "New York Yankees"
        assert resolve_team_code(" lad ").code == "lad"

    def test_alias_code(self):
        assert get_team_by_code("chw").code == "cws"
        assert resolve_team_code("az").code == "ari"

    def test_all_means_league_wide(self):
        assert resolve_team_code("all") is None

    def test_unknown_code(self):
        with pytest.raises(InvalidTeamError, match="Unknown team abbreviation: zzz"):
            resolve_team_code("zzz")

    @pytest.mark.parametrize("code", ["", "y", "yank", "ny1", "n-y"])
    def test_malformed_code(self, code):
        assert not is_valid_team_code_format(code)
        with pytest.raises(InvalidTeamError, match="Invalid team abbreviation"):
            resolve_team_code(code)

    def test_invalid_team_error_is_a_value_error(self):
        assert issubclass(InvalidTeamError, ValueError)


class TestCacheKeys:
    def test_params_are_sorted_and_lowercased(self):
        key = make_cache_key("roster", {"team": "NYY", "statType": "Hitting", "period": "season"})
        assert key == "roster:period=season:statType=hitting:team=nyy"

    def test_same_params_same_key_in_any_order(self):
        a = make_cache_key("roster", {"team": "nyy", "period": "7day"})
        b = make_cache_key("roster", {"period": "7day", "team": "nyy"})
        assert a == b

    def test_none_values_are_dropped(self):
        assert make_cache_key("roster", {"team": "nyy", "season": None}) == "roster:team=nyy"
        assert make_cache_key("games", {"day": None}) == "games"
        assert make_cache_key("games") == "games"

    def test_roster_key_includes_season_only_when_given(self):
        assert roster_key("nyy", "pitching", "season") == "roster:period=season:statType=pitching:team=nyy"
        assert roster_key("nyy", "pitching", "season", 2024).endswith(":season=2024:statType=pitching:team=nyy")

    def test_trends_key(self):
        assert trends_key("ERA") == "trends:stat=ERA"
        assert trends_key("Pickoffs") != trends_key("pickoffs")


class TestRosterTtl:
    def test_shorter_periods_expire_sooner(self):
        assert roster_ttl_for_period("season") == 120
        assert roster_ttl_for_period("30day") == 60
        assert roster_ttl_for_period("7day") == 30
        assert roster_ttl_for_period("1day") == 15

    def test_unknown_period_uses_default(self):
        assert roster_ttl_for_period("career") == TTL_ROSTERS
