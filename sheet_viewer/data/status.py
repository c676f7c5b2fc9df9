"""Shared display state and viewer phase tracking"""
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Optional

from sheet_viewer.data.table import Table


ViewerPhase = Literal["Uninitialized", "Initializing", "Polling", "Stopped", "Config Error", "Init Failed"]


@dataclass(frozen=True)
class StatusSnapshot:
    """Immutable view of the display state, handed to the renderers."""

    phase: ViewerPhase
    table: Optional[Table]
    is_loading: bool
    error: Optional[str]
    last_update: Optional[datetime]
    client_ready: bool


class DisplayState:
    """Single container for everything the page displays.

    Writers are the controller's init and fetch paths; every write goes
    through a method here and holds the lock. Renderers only read snapshots.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._phase: ViewerPhase = "Uninitialized"
        self._table: Optional[Table] = None
        self._is_loading = False
        self._error: Optional[str] = None
        self._last_update: Optional[datetime] = None
        self._client_ready = False

    @property
    def phase(self) -> ViewerPhase:
        with self._lock:
            return self._phase

    def snapshot(self) -> StatusSnapshot:
        with self._lock:
            return StatusSnapshot(
                phase=self._phase,
                table=self._table,
                is_loading=self._is_loading,
                error=self._error,
                last_update=self._last_update,
                client_ready=self._client_ready,
            )

    def begin_init(self) -> None:
        with self._lock:
            self._phase = "Initializing"

    def fail_config(self, message: str) -> None:
        with self._lock:
            self._phase = "Config Error"
            self._error = message

    def fail_init(self, message: str) -> None:
        with self._lock:
            self._phase = "Init Failed"
            self._error = message
            self._client_ready = False

    def mark_ready(self) -> None:
        with self._lock:
            self._phase = "Polling"
            self._client_ready = True

    def begin_fetch(self) -> None:
        """Enter the loading state and clear any previous error."""
        with self._lock:
            self._is_loading = True
            self._error = None

    def finish_fetch(self, table: Table, fetched_at: datetime) -> None:
        """Replace the table wholesale and stamp the update time."""
        with self._lock:
            self._table = table
            self._last_update = fetched_at
            self._is_loading = False

    def fail_fetch(self, message: str) -> None:
        with self._lock:
            self._phase = "Stopped"
            self._error = message
            self._is_loading = False
