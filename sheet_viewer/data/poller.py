"""Fixed-interval poller with a single in-flight fetch"""
import logging
import threading
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class Poller:
    """Run ``fetch`` once immediately, then every ``interval_seconds``.

    Rules:
    - A tick while a fetch is in flight is skipped, not queued
    - Once stopped, the poller never ticks again (start() becomes a no-op)

    The timer thread only schedules; fetches run on ``executor``
    (a single worker thread unless one is supplied).
    """

    def __init__(
        self,
        fetch: Callable[[], None],
        interval_seconds: float = 60,
        executor: Optional[Executor] = None,
    ):
        self._fetch = fetch
        self._interval = interval_seconds
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="sheet-fetch")
        self._lock = threading.Lock()
        self._stop_event = threading.Event()
        self._in_flight = False
        self._thread: Optional[threading.Thread] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    @property
    def in_flight(self) -> bool:
        with self._lock:
            return self._in_flight

    def start(self) -> None:
        """Start the timer thread; the first tick happens immediately."""
        with self._lock:
            if self._stop_event.is_set() or self._thread is not None:
                return
            self._thread = threading.Thread(target=self._run, name="sheet-poller", daemon=True)
        self._thread.start()
        logger.info("Polling every %ss", self._interval)

    def stop(self) -> None:
        """Cancel the timer. Safe to call from inside a fetch."""
        if self._stop_event.is_set():
            return
        self._stop_event.set()
        if self._owns_executor:
            self._executor.shutdown(wait=False)
        logger.info("Polling stopped")

    def tick(self) -> bool:
        """Start a fetch unless one is in flight or the poller is stopped.

        Returns:
            True if a fetch was submitted, False if the tick was skipped
        """
        with self._lock:
            if self._stop_event.is_set():
                return False
            if self._in_flight:
                logger.debug("Fetch still in flight, skipping tick")
                return False
            self._in_flight = True

        try:
            self._executor.submit(self._run_fetch)
        except RuntimeError:
            # Executor shut down between the stop check and submit
            with self._lock:
                self._in_flight = False
            return False
        return True

    def _run(self) -> None:
        self.tick()
        while not self._stop_event.wait(self._interval):
            self.tick()

    def _run_fetch(self) -> None:
        try:
            self._fetch()
        except Exception:
            logger.exception("Unexpected error during fetch, stopping poller")
            self.stop()
        finally:
            with self._lock:
                self._in_flight = False
