"""Logging setup"""
import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging once per process.

    Args:
        level: Level name; defaults to SHEET_VIEWER_LOG_LEVEL or INFO
    """
    level = (level or os.getenv("SHEET_VIEWER_LOG_LEVEL") or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)
    # googleapiclient logs every discovery fetch at INFO
    logging.getLogger("googleapiclient.discovery_cache").setLevel(logging.ERROR)
