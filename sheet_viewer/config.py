"""Configuration for the Google Sheets Viewer"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from sheet_viewer.errors import ConfigurationError

try:
    from streamlit.errors import StreamlitSecretNotFoundError
except ImportError:
    # Fallback for older Streamlit versions
    StreamlitSecretNotFoundError = Exception


DISCOVERY_DOC = "https://sheets.googleapis.com/$discovery/rest?version=v4"
DEFAULT_RANGE = "Sheet1!A1:Z1000"

# Environment keys, checked in order. The VITE_ names are accepted
# for .env files written for the older web build.
API_KEY_VARS = ("GOOGLE_API_KEY", "VITE_GOOGLE_API_KEY")
SHEET_ID_VARS = ("GOOGLE_SHEET_ID", "VITE_GOOGLE_SHEET_ID")

MISSING_API_KEY_MESSAGE = "Missing API key. Please check your environment variables."
MISSING_SHEET_ID_MESSAGE = "Missing Sheet ID. Please check your environment variables."


@dataclass(frozen=True)
class ViewerConfig:
    """Centralized configuration for the viewer.

    Built once per session and passed to the controller; never mutated.
    """

    api_key: str = ""
    spreadsheet_id: str = ""
    range: str = DEFAULT_RANGE
    discovery_doc: str = DISCOVERY_DOC

    # Polling
    poll_interval_seconds: float = 60

    # How often the page re-reads the shared display state
    display_refresh_seconds: float = 2

    # Network
    request_timeout_seconds: float = 10

    def validate(self) -> None:
        """Check the required settings.

        Raises:
            ConfigurationError: If the API key or spreadsheet ID is missing
        """
        if not self.api_key:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)
        if not self.spreadsheet_id:
            raise ConfigurationError(MISSING_SHEET_ID_MESSAGE)


def _first_present(source: Mapping[str, str], names) -> Optional[str]:
    for name in names:
        value = source.get(name)
        if value:
            return str(value).strip()
    return None


def _secrets() -> Mapping[str, str]:
    """Read Streamlit secrets, returning an empty mapping when none exist."""
    try:
        import streamlit as st
        return dict(st.secrets)
    except StreamlitSecretNotFoundError:
        # No secrets.toml file exists locally
        return {}
    except (FileNotFoundError, KeyError, AttributeError):
        return {}


def load_config(
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[Mapping[str, str]] = None,
    **overrides,
) -> ViewerConfig:
    """Build the viewer configuration.

    Lookup order per value: environment (after loading .env), then Streamlit
    secrets. Missing values are left empty; ``ViewerConfig.validate`` reports them.

    Args:
        environ: Environment mapping (defaults to os.environ with .env loaded)
        secrets: Secrets mapping (defaults to st.secrets)
        **overrides: Explicit field values, e.g. poll_interval_seconds

    Returns:
        ViewerConfig instance
    """
    if environ is None:
        load_dotenv()
        environ = os.environ
    if secrets is None:
        secrets = _secrets()

    api_key = _first_present(environ, API_KEY_VARS) or _first_present(secrets, API_KEY_VARS) or ""
    sheet_id = _first_present(environ, SHEET_ID_VARS) or _first_present(secrets, SHEET_ID_VARS) or ""

    return ViewerConfig(api_key=api_key, spreadsheet_id=sheet_id, **overrides)
