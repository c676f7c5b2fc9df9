"""Top-level controller: initializes the client and owns the poller"""
import logging
from concurrent.futures import Executor
from datetime import datetime
from typing import Callable, Optional

from sheet_viewer.config import ViewerConfig
from sheet_viewer.data.poller import Poller
from sheet_viewer.data.sheets_client import Result, SheetsClient
from sheet_viewer.data.status import DisplayState, StatusSnapshot
from sheet_viewer.errors import ConfigurationError, FetchError

logger = logging.getLogger(__name__)


class ViewerController:
    """Drives one viewer session.

    Phases: Uninitialized -> Initializing -> Polling -> Stopped, with
    Config Error and Init Failed reachable as terminal failures.
    """

    def __init__(
        self,
        config: ViewerConfig,
        client: Optional[SheetsClient] = None,
        executor: Optional[Executor] = None,
        clock: Callable[[], datetime] = datetime.now,
        is_alive: Callable[[], bool] = lambda: True,
    ):
        """
        Args:
            config: Session configuration
            client: Sheets client (defaults to a real SheetsClient)
            executor: Executor for fetches (defaults to the poller's own worker)
            clock: Source of "now" for the last-update timestamp
            is_alive: Returns False once the owning page session has ended
        """
        self.config = config
        self.client = client or SheetsClient(timeout=config.request_timeout_seconds)
        self.state = DisplayState()
        self.poller: Optional[Poller] = None
        self._executor = executor
        self._clock = clock
        self._is_alive = is_alive

    def start(self) -> StatusSnapshot:
        """Validate config, initialize the client and start polling.

        Only the first call does anything; later calls return the current snapshot.

        Returns:
            Snapshot of the display state after startup
        """
        if self.state.phase != "Uninitialized":
            return self.state.snapshot()

        try:
            self.config.validate()
        except ConfigurationError as e:
            logger.error("Configuration error: %s", e.message)
            self.state.fail_config(e.message)
            return self.state.snapshot()

        self.state.begin_init()

        loaded = self.client.load_client(self.config.discovery_doc)
        if not loaded.ok:
            self.state.fail_init(loaded.error.message)
            return self.state.snapshot()

        initialized = self.client.init_client(self.config)
        if not initialized.ok:
            self.state.fail_init(initialized.error.message)
            return self.state.snapshot()

        self.state.mark_ready()
        self.poller = Poller(
            self.fetch_once,
            interval_seconds=self.config.poll_interval_seconds,
            executor=self._executor,
        )
        self.poller.start()
        return self.state.snapshot()

    def fetch_once(self) -> None:
        """Fetch the configured range and publish the result.

        The first failure stops polling for the rest of the session.
        """
        if not self._is_alive():
            logger.info("Page session ended, shutting down")
            self.shutdown()
            return

        self.state.begin_fetch()
        try:
            result = self.client.fetch_range(self.config.spreadsheet_id, self.config.range)
        except Exception:
            # Loading state must always resolve, even for errors the client missed
            logger.exception("Unexpected error fetching sheet data")
            result = Result.failure(FetchError())

        if result.ok:
            self.state.finish_fetch(result.value, self._clock())
            return

        if self.poller is not None:
            self.poller.stop()
        self.state.fail_fetch(result.error.message)

    def snapshot(self) -> StatusSnapshot:
        return self.state.snapshot()

    def shutdown(self) -> None:
        """Stop polling and release the client. In-flight fetches are not cancelled."""
        if self.poller is not None:
            self.poller.stop()
        self.client.close()
        logger.info("Viewer shut down")
