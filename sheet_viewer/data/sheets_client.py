"""
Google Sheets Client

Read-only client for the Sheets v4 API using a static API key.
Every call returns a Result instead of raising, so the controller can
move the viewer between phases without exception plumbing.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

import httplib2
import requests
from googleapiclient.discovery import build_from_document
from googleapiclient.errors import Error as GoogleApiError
from googleapiclient.errors import HttpError

from sheet_viewer.config import DISCOVERY_DOC, ViewerConfig
from sheet_viewer.data.table import Table, normalize_response
from sheet_viewer.errors import ClientInitError, FetchError, SheetViewerError

logger = logging.getLogger(__name__)

T = TypeVar("T")

LOAD_FAILED_MESSAGE = "Error loading Google API. Please check your internet connection and try again."
INIT_FAILED_MESSAGE = "Failed to initialize Google API client. Please check your API key."


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a client call: either ``value`` or ``error`` is set."""

    value: Optional[T] = None
    error: Optional[SheetViewerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: SheetViewerError) -> "Result[T]":
        return cls(error=error)


class SheetsClient:
    """
    Narrow wrapper around the discovery-built Sheets resource.

    Lifecycle:
    - load_client(): download the discovery document
    - init_client(config): build the typed resource with the API key
    - fetch_range(spreadsheet_id, range): read one range as a Table
    - close(): release the HTTP transport
    """

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = 10):
        """
        Args:
            session: HTTP session used for the discovery download
            timeout: Socket timeout in seconds for all requests
        """
        self.session = session or requests.Session()
        self.timeout = timeout
        self._discovery: Optional[Dict[str, Any]] = None
        self._service = None

    @property
    def is_loaded(self) -> bool:
        return self._discovery is not None

    @property
    def is_ready(self) -> bool:
        return self._service is not None

    def load_client(self, discovery_url: str = DISCOVERY_DOC) -> Result[Dict[str, Any]]:
        """Download the Sheets discovery document."""
        try:
            resp = self.session.get(discovery_url, timeout=self.timeout)
            resp.raise_for_status()
            self._discovery = resp.json()
        except (requests.RequestException, ValueError):
            logger.exception("Error loading Google API discovery document from %s", discovery_url)
            return Result.failure(ClientInitError(LOAD_FAILED_MESSAGE))

        logger.info("Loaded discovery document %s", self._discovery.get("id", discovery_url))
        return Result.success(self._discovery)

    def init_client(self, config: ViewerConfig) -> Result[Any]:
        """Build the Sheets resource against the loaded discovery document."""
        if self._discovery is None:
            logger.error("init_client called before the discovery document was loaded")
            return Result.failure(ClientInitError(INIT_FAILED_MESSAGE))

        try:
            self._service = build_from_document(
                self._discovery,
                developerKey=config.api_key,
                http=httplib2.Http(timeout=self.timeout),
            )
        except (GoogleApiError, KeyError, TypeError, ValueError):
            logger.exception("Error initializing Google API client")
            return Result.failure(ClientInitError(INIT_FAILED_MESSAGE))

        logger.info("Google Sheets client initialized")
        return Result.success(self._service)

    def fetch_range(self, spreadsheet_id: str, range_: str) -> Result[Table]:
        """Read ``range_`` from the spreadsheet.

        Args:
            spreadsheet_id: Google Sheets spreadsheet ID
            range_: A1 range, e.g. "Sheet1!A1:Z1000"

        Returns:
            Result holding the normalized Table, or a FetchError
        """
        if self._service is None:
            logger.error("fetch_range called before the client was initialized")
            return Result.failure(FetchError())

        try:
            raw = (
                self._service.spreadsheets()
                .values()
                .get(spreadsheetId=spreadsheet_id, range=range_)
                .execute()
            )
            table = normalize_response(raw)
        except HttpError as e:
            logger.exception("Error fetching sheet data (HTTP %s)", e.resp.status)
            return Result.failure(FetchError(status_code=e.resp.status))
        except (GoogleApiError, httplib2.HttpLib2Error, OSError):
            logger.exception("Error fetching sheet data")
            return Result.failure(FetchError())
        except (ValueError, TypeError, AttributeError):
            # Non-JSON body (e.g. a captive portal page) or an unexpected payload shape
            logger.exception("Unreadable sheet data response")
            return Result.failure(FetchError())

        logger.info("Fetched %d rows from %s", len(table.values), table.range or range_)
        return Result.success(table)

    def close(self) -> None:
        """Release the transport and forget the loaded client."""
        if self._service is not None:
            self._service.close()
        self._service = None
        self._discovery = None
