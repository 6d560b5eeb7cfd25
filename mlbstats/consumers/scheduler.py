"""Background scheduler that pre-warms the cache.

Runs periodic tasks:
- Refresh games, standings and the team registry
- Record today's league-wide trend averages

Pushes into the same cache backend the request handlers read from; there
is no other shared state. Integrates with FastAPI lifespan for clean
startup/shutdown.
"""

import logging
import threading
from datetime import datetime

from mlbstats.services import StatsDataService

logger = logging.getLogger(__name__)


class CacheWarmScheduler:
    """Background cache pre-warm in a daemon thread.

    Usage:
        scheduler = CacheWarmScheduler(data_service, interval_minutes=60)
        scheduler.start()
        # ... application runs ...
        scheduler.stop()
    """

    def __init__(
        self,
        data_service: StatsDataService,
        interval_minutes: int = 60,
        run_on_start: bool = True,
    ):
        """Initialize the scheduler.

        Args:
            data_service: Service whose refresh methods populate the cache
            interval_minutes: Minutes between runs
            run_on_start: Run once immediately when the thread starts
        """
        self._data_service = data_service
        self._interval_minutes = interval_minutes
        self._run_on_start = run_on_start

        self._thread: threading.Thread | None = None
        self._stop_event = threading.Event()
        self._run_lock = threading.Lock()
        self._running = False
        self._last_run: datetime | None = None
        self._last_results: dict | None = None

    @property
    def is_running(self) -> bool:
        return self._running and self._thread is not None and self._thread.is_alive()

    @property
    def last_run(self) -> datetime | None:
        return self._last_run

    @property
    def last_results(self) -> dict | None:
        return self._last_results

    @property
    def interval_minutes(self) -> int:
        return self._interval_minutes

    def start(self) -> bool:
        """Start the scheduler.

        Returns:
            True if started, False if already running
        """
        if self.is_running:
            logger.warning("[SCHEDULER] Already running")
            return False

        self._stop_event.clear()
        self._running = True
        self._thread = threading.Thread(
            target=self._run_loop,
            name="cache-warm-scheduler",
            daemon=True,
        )
        self._thread.start()
        logger.info("[SCHEDULER] Started (interval: %d minutes)", self._interval_minutes)
        return True

    def stop(self, timeout: float = 30.0) -> bool:
        """Stop the scheduler gracefully.

        Returns:
            True if stopped, False if the thread did not exit within timeout
        """
        if not self.is_running:
            return True

        logger.info("[SCHEDULER] Stopping...")
        self._stop_event.set()
        self._running = False

        if self._thread:
            self._thread.join(timeout=timeout)
            if self._thread.is_alive():
                logger.warning("[SCHEDULER] Thread did not stop in time")
                return False

        logger.info("[SCHEDULER] Stopped")
        return True

    def run_once(self) -> dict:
        """Run all tasks once (manual refresh and tests)."""
        return self._run_tasks()

    def _run_loop(self) -> None:
        """Main loop - runs in the background thread."""
        if self._run_on_start:
            self._safe_run()

        # wait() returns True as soon as stop() is called
        while not self._stop_event.wait(self._interval_minutes * 60):
            self._safe_run()

    def _safe_run(self) -> None:
        try:
            self._run_tasks()
        except Exception as e:
            logger.exception("[SCHEDULER] Run failed: %s", e)

    def _run_tasks(self) -> dict:
        """Run every pre-warm task. One failing task does not stop the others.

        Returns:
            Dict with per-task results
        """
        # Manual refreshes and the timer never overlap
        with self._run_lock:
            self._last_run = datetime.now()
            results: dict = {"started_at": self._last_run.isoformat()}

            tasks = {
                "games": lambda: self._data_service.refresh_games().tier.value,
                "standings": lambda: self._data_service.refresh_standings().tier.value,
                "teams": lambda: self._data_service.refresh_teams().tier.value,
                "trends": lambda: sorted(self._data_service.record_trends()),
            }
            for name, task in tasks.items():
                try:
                    results[name] = task()
                except Exception as e:
                    logger.warning("[SCHEDULER] %s task failed: %s", name, e)
                    results[name] = {"error": str(e)}

            results["completed_at"] = datetime.now().isoformat()
            self._last_results = results

        logger.info(
            "[SCHEDULER] Pre-warm complete: games=%s standings=%s teams=%s trends=%s",
            results["games"],
            results["standings"],
            results["teams"],
            results["trends"],
        )
        return results
