"""Status surface: errors, polling notice and last update time"""
from typing import List, Tuple

from sheet_viewer.data.status import StatusSnapshot
from sheet_viewer.ui.renderer import render_caption, render_error
from sheet_viewer.util.time import describe_interval, format_last_update


def status_lines(snapshot: StatusSnapshot, poll_interval_seconds: float = 60) -> List[Tuple[str, str]]:
    """List the status messages to show, in display order.

    Args:
        snapshot: Current display state
        poll_interval_seconds: Polling period, for the auto-update notice

    Returns:
        List of (kind, text) where kind is "error", "notice" or "timestamp"
    """
    lines = []
    if snapshot.client_ready:
        lines.append(("notice", f"Updates automatically {describe_interval(poll_interval_seconds)}"))
    if snapshot.last_update is not None:
        lines.append(("timestamp", f"Last updated: {format_last_update(snapshot.last_update)}"))
    # Fetch errors belong to the table area; only startup errors show here
    if snapshot.error and not snapshot.client_ready:
        lines.append(("error", snapshot.error))
    return lines


def render_status(snapshot: StatusSnapshot, poll_interval_seconds: float = 60):
    """Render the status surface above the table.

    Args:
        snapshot: Current display state
        poll_interval_seconds: Polling period, for the auto-update notice
    """
    for kind, text in status_lines(snapshot, poll_interval_seconds):
        if kind == "error":
            render_error(text)
        else:
            render_caption(text)


def startup_failed(snapshot: StatusSnapshot) -> bool:
    """True when the viewer never got a working client (config or init failure)."""
    return snapshot.phase in ("Config Error", "Init Failed")
