"""Server entry point.

    mlbstats            # console script
    python -m mlbstats.main
"""

import logging

import uvicorn

from mlbstats.api import create_app
from mlbstats.config import Settings


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger once."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def run() -> None:
    settings = Settings.from_env()
    setup_logging(settings.log_level)

    app = create_app(settings)
    logging.getLogger(__name__).info(
        "Server running on port %d (%s, cache: %s)",
        settings.port,
        settings.environment,
        settings.cache_type,
    )
    uvicorn.run(app, host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
