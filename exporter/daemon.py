"""Poll daemon: runs the forecast fetcher on a fixed interval.

The loop runs on a background thread next to the metrics server. Every
attempt, successful or not, is followed by the same wait; there is no
backoff. ``stop()`` wakes the wait and ends the loop.
"""

import logging
import threading
import time

from exporter.ingest.forecast_fetcher import ForecastFetcher

logger = logging.getLogger(__name__)

DEFAULT_INTERVAL = 3600  # 1 hour
THREAD_NAME = "ForecastPoller"


class PollDaemon:
    """Runs poll cycles until stopped, never letting one failure end the loop."""

    def __init__(self, fetcher: ForecastFetcher, interval: float = DEFAULT_INTERVAL):
        self.fetcher = fetcher
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._consecutive_failures = 0
        self._total_polls = 0
        self._total_successes = 0
        self._total_failures = 0

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Start the poll loop on a daemon thread."""
        if self.running:
            raise RuntimeError("Poll daemon already running")
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self.run_forever, name=THREAD_NAME, daemon=True
        )
        self._thread.start()
        logger.info("Poll daemon started, interval=%ss", self.interval)

    def stop(self, timeout: float | None = None) -> None:
        """Signal the loop to exit and wait for the thread to finish."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout)
            if self._thread.is_alive():
                logger.warning("Poll daemon did not stop within %ss", timeout)
            else:
                self._thread = None
        logger.info(
            "Poll daemon stopped: %d polls (%d ok, %d failed)",
            self._total_polls, self._total_successes, self._total_failures,
        )

    def run_forever(self) -> None:
        """Poll, then wait ``interval`` seconds, until stop() is called."""
        while not self._stop_event.is_set():
            started = time.monotonic()
            self._run_one_poll()
            logger.debug(
                "Poll #%d took %.2fs, next in %ss",
                self._total_polls, time.monotonic() - started, self.interval,
            )
            if self._stop_event.wait(self.interval):
                break

    def _run_one_poll(self) -> bool:
        """Execute a single poll cycle. Returns True on success."""
        self._total_polls += 1
        try:
            success = self.fetcher.poll_once()
        except Exception:
            logger.exception("Poll #%d crashed", self._total_polls)
            success = False

        if success:
            self._total_successes += 1
            self._consecutive_failures = 0
        else:
            self._total_failures += 1
            self._consecutive_failures += 1
            logger.warning(
                "Poll #%d failed (%d consecutive), retrying in %ss",
                self._total_polls, self._consecutive_failures, self.interval,
            )
        return success

    def stats(self) -> dict[str, int]:
        return {
            "total_polls": self._total_polls,
            "total_successes": self._total_successes,
            "total_failures": self._total_failures,
            "consecutive_failures": self._consecutive_failures,
        }
