"""Shared fixtures for viewer tests.

These fixtures provide:
- A valid ViewerConfig with a short poll interval
- A mocked SheetsClient whose calls succeed by default
- An executor that runs fetches inline on the calling thread
- A mocked requests session serving a discovery document
"""

import time
from concurrent.futures import Executor, Future
from unittest.mock import Mock

import pytest
import requests

from sheet_viewer.config import ViewerConfig
from sheet_viewer.data.sheets_client import Result, SheetsClient
from sheet_viewer.data.table import normalize_response

SAMPLE_RESPONSE = {"range": "Sheet1!A1:B2", "values": [["A", "B"], ["1", "2"]]}


class ImmediateExecutor(Executor):
    """Executor that runs each task synchronously in submit()."""

    def submit(self, fn, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as e:
            future.set_exception(e)
        return future


def wait_for(predicate, timeout: float = 2.0, interval: float = 0.005) -> bool:
    """Poll ``predicate`` until it is true or ``timeout`` elapses."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def config() -> ViewerConfig:
    return ViewerConfig(api_key="test-key", spreadsheet_id="sheet-123", poll_interval_seconds=3600)


@pytest.fixture
def session() -> Mock:
    """Create a mocked requests session that serves a minimal discovery document."""
    session = Mock(spec=requests.Session)
    session.get.return_value.json.return_value = {"id": "sheets:v4", "rootUrl": "https://sheets.googleapis.com/"}
    return session


@pytest.fixture
def mock_client() -> Mock:
    """Create a mocked SheetsClient whose load, init and fetch all succeed."""
    client = Mock(spec=SheetsClient)
    client.load_client.return_value = Result.success({"id": "sheets:v4"})
    client.init_client.return_value = Result.success(object())
    client.fetch_range.return_value = Result.success(normalize_response(SAMPLE_RESPONSE))
    return client


@pytest.fixture
def immediate_executor() -> ImmediateExecutor:
    return ImmediateExecutor()
