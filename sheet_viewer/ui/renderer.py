"""UI rendering components"""
import html
from dataclasses import dataclass, field
from typing import Any, Literal, Optional, Tuple

import streamlit as st

from sheet_viewer.data.table import Table
from sheet_viewer.util.style import get_color, get_table_style


ViewKind = Literal["loading", "error", "empty", "table"]

NO_DATA_MESSAGE = "No data available"


@dataclass(frozen=True)
class TableView:
    """What the table area should show.

    Built by ``build_table_view``; ``render_table`` turns it into widgets.
    """

    kind: ViewKind
    message: Optional[str] = None
    headers: Tuple[str, ...] = ()
    rows: Tuple[Tuple[str, ...], ...] = field(default_factory=tuple)

    @property
    def column_width(self) -> float:
        """Equal share of the table width per header column, in percent."""
        return 100 / len(self.headers) if self.headers else 100.0


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def build_table_view(table: Optional[Table], is_loading: bool, error: Optional[str]) -> TableView:
    """Decide what the table area shows.

    Precedence: loading > error > no data > table.

    Args:
        table: Most recent table, if any
        is_loading: Whether a fetch is in flight
        error: Current error message, if any

    Returns:
        TableView
    """
    if is_loading:
        return TableView(kind="loading")
    if error:
        return TableView(kind="error", message=error)
    if table is None or table.is_empty:
        return TableView(kind="empty", message=NO_DATA_MESSAGE)

    return TableView(
        kind="table",
        headers=tuple(_cell_text(c) for c in table.header),
        rows=tuple(tuple(_cell_text(c) for c in row) for row in table.rows),
    )


def table_html(view: TableView) -> str:
    """Render a "table" view as fixed-layout HTML with escaped cell text.

    Args:
        view: TableView of kind "table"

    Returns:
        HTML string
    """
    style = get_table_style()
    border = f"1px solid {get_color('border')}"
    width = f"{view.column_width:g}%"

    th = (
        f'<th style="width: {width}; padding: {style["cell_padding"]}; text-align: left; '
        f'font-size: {style["header_font_size"]}; color: {get_color("header_text")}; '
        f'text-transform: uppercase; border-bottom: {border};">{{}}</th>'
    )
    td = (
        f'<td style="padding: {style["cell_padding"]}; font-size: {style["cell_font_size"]}; '
        f'color: {get_color("cell_text")}; border-bottom: {border}; overflow: hidden; '
        f'text-overflow: ellipsis; white-space: nowrap;">{{}}</td>'
    )

    header_cells = "".join(th.format(html.escape(h)) for h in view.headers)
    body_rows = "".join(
        "<tr>" + "".join(td.format(html.escape(c)) for c in row) + "</tr>"
        for row in view.rows
    )

    return (
        '<div style="width: 100%; overflow-x: auto;">'
        '<table style="width: 100%; table-layout: fixed; border-collapse: collapse;">'
        f'<thead style="background-color: {get_color("header_bg")};"><tr>{header_cells}</tr></thead>'
        f"<tbody>{body_rows}</tbody>"
        "</table></div>"
    )


def render_table(view: TableView):
    """Render the table area.

    Args:
        view: TableView from build_table_view
    """
    if view.kind == "loading":
        render_caption("⏳ Loading sheet data...", color="primary")
    elif view.kind == "error":
        render_error(view.message)
    elif view.kind == "empty":
        render_info(view.message)
    else:
        st.markdown(table_html(view), unsafe_allow_html=True)


def render_error(message: str):
    """Render an error message.

    Args:
        message: Error message
    """
    st.error(message)


def render_info(message: str):
    """Render an info message.

    Args:
        message: Info message
    """
    st.info(message)


def render_caption(text: str, color: str = "muted"):
    """Render a small centered caption.

    Args:
        text: Caption text
        color: Color name from the style palette
    """
    st.markdown(
        f'<p style="text-align: center; color: {get_color(color)}; font-size: 0.8em; margin: 0;">'
        f"{html.escape(text)}</p>",
        unsafe_allow_html=True,
    )
