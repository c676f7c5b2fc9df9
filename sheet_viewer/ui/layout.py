"""Layout utilities"""
import streamlit as st

from sheet_viewer.data.status import StatusSnapshot
from sheet_viewer.data.table import Table
from sheet_viewer.util.style import get_color

PAGE_TITLE = "Google Sheets Viewer"
PAGE_SUBTITLE = "View your Google Sheet data"


def render_header():
    """Render the page title block."""
    st.markdown(
        f'<div style="text-align: center;"><div style="font-size: 3em;">📊</div>'
        f'<h1 style="margin-bottom: 0;">{PAGE_TITLE}</h1>'
        f'<p style="color: {get_color("header_text")};">{PAGE_SUBTITLE}</p></div>',
        unsafe_allow_html=True,
    )


def table_csv(table: Table) -> bytes:
    """Encode a table as CSV bytes (header row first).

    Args:
        table: Table to encode

    Returns:
        UTF-8 encoded CSV
    """
    return table.to_dataframe().to_csv(index=False).encode("utf-8")


def render_download(snapshot: StatusSnapshot):
    """Offer the currently displayed table as a CSV download.

    Args:
        snapshot: Current display state
    """
    if snapshot.table is None or snapshot.table.is_empty:
        return
    st.download_button(
        "Download CSV",
        data=table_csv(snapshot.table),
        file_name="sheet.csv",
        mime="text/csv",
    )
