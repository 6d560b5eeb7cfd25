"""MLB statistics backend.

Serves games, standings, rosters and trend data as JSON. Every category is
read through a TTL cache (Redis, or an in-memory/file fallback) and fetched
from the MLB Stats API, the public MLB website, or embedded mock data.
"""

__version__ = "1.0.0"
