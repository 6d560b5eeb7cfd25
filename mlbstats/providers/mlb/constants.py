"""MLB Stats API and mlb.com constants."""

MLB_API_BASE_URL = "https://statsapi.mlb.com/api/v1"
MLB_WEB_BASE_URL = "https://www.mlb.com"

MLB_SPORT_ID = 1
# American League (103) and National League (104)
MLB_LEAGUE_IDS = "103,104"

# Identifies us to the Stats API
API_USER_AGENT = "MLBStatCast/1.0.0"

# mlb.com serves a stripped page to unknown agents
BROWSER_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

API_HEADERS = {
    "User-Agent": API_USER_AGENT,
    "Accept": "application/json",
}

BROWSER_HEADERS = {
    "User-Agent": BROWSER_USER_AGENT,
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Stats API division ids -> display names
DIVISION_NAMES: dict[int, str] = {
    201: "American League East",
    202: "American League Central",
    200: "American League West",
    204: "National League East",
    205: "National League Central",
    203: "National League West",
}

# Scraped pages
SCORES_PAGE = f"{MLB_WEB_BASE_URL}/scores/"
SCHEDULE_PAGE = f"{MLB_WEB_BASE_URL}/schedule/"
STANDINGS_PAGE = f"{MLB_WEB_BASE_URL}/standings"
BATTING_STATS_PAGE = f"{MLB_WEB_BASE_URL}/stats/"
PITCHING_STATS_PAGE = f"{MLB_WEB_BASE_URL}/stats/pitching"

# Overall deadline for the games scrape tier (seconds)
GAMES_SCRAPE_TIMEOUT = 10.0

# Max rows taken from a scraped leaderboard table
SCRAPE_ROW_LIMIT = 50

# Rows requested from the league-wide stats endpoint
LEAGUE_STATS_LIMIT = 500
