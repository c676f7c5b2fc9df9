"""Time formatting utilities"""
from datetime import datetime
from typing import Optional


def format_last_update(last_update: Optional[datetime]) -> str:
    """Format the last successful fetch time for display.

    Args:
        last_update: Time of the last successful fetch, or None

    Returns:
        "Never" before any fetch, otherwise the locale's time representation
    """
    if last_update is None:
        return "Never"
    return last_update.strftime("%X")


def describe_interval(seconds: float) -> str:
    """Human-readable polling cadence, e.g. "every minute"."""
    if seconds == 60:
        return "every minute"
    if seconds % 60 == 0:
        return f"every {int(seconds // 60)} minutes"
    return f"every {seconds:g} seconds"
