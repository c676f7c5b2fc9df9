"""Normalized table model for fetched sheet ranges"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd


Row = Tuple[Any, ...]


@dataclass(frozen=True)
class Table:
    """One fetched range.

    ``values[0]``, when present, is the header row; later entries are data rows.
    Rows may have different lengths.
    """

    range: str
    values: Tuple[Row, ...] = ()

    @property
    def header(self) -> Row:
        return self.values[0] if self.values else ()

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self.values[1:]

    @property
    def is_empty(self) -> bool:
        return len(self.values) == 0

    def to_dataframe(self) -> pd.DataFrame:
        """Convert to a DataFrame of strings.

        Short rows are padded with "". Rows wider than the header get
        generated column names ("Column N").

        Returns:
            DataFrame with one column per header cell
        """
        if self.is_empty:
            return pd.DataFrame()

        width = max(len(row) for row in self.values)
        columns: List[str] = [_cell_text(c) for c in self.header]
        columns += [f"Column {i + 1}" for i in range(len(columns), width)]

        body = [
            [_cell_text(c) for c in row] + [""] * (width - len(row))
            for row in self.rows
        ]
        return pd.DataFrame(body, columns=columns)


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def normalize_response(raw: Optional[Dict[str, Any]]) -> Table:
    """Map a values.get response to a Table.

    Args:
        raw: Response body, shaped ``{"range": str, "values": [[...], ...]}``;
            ``values`` is omitted by the API when the range is blank

    Returns:
        Table with ``range`` passed through and ``values`` defaulting to empty
    """
    raw = raw or {}
    values = raw.get("values") or []
    return Table(
        range=raw.get("range", ""),
        values=tuple(tuple(row) for row in values),
    )
