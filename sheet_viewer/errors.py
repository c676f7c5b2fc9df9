"""Error types surfaced by the viewer"""
from typing import Optional


class SheetViewerError(Exception):
    """Base class for viewer errors.

    ``message`` is the static text shown to the user. Details of the underlying
    failure are logged where the error is raised, never displayed.
    """

    default_message = "An unexpected error occurred."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ConfigurationError(SheetViewerError):
    """Required startup configuration is missing."""

    default_message = "Missing configuration. Please check your environment variables."


class ClientInitError(SheetViewerError):
    """The Sheets client could not be loaded or initialized."""

    default_message = "Failed to initialize Google API client. Please check your API key."


class FetchError(SheetViewerError):
    """A read of the sheet range failed."""

    default_message = (
        "Error loading sheet data. Please check your sheet permissions and make sure "
        "the sheet is shared publicly or with the service account."
    )

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
