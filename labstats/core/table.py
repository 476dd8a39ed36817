"""
Tabular output shared by every analysis.

A ResultTable is an ordered list of columns and an ordered list of rows,
each row a mapping from column name to a display value (str, int or
float). Tables are meant for display, clipboard copy or CSV export; the
engine itself never writes files.

Section headers, notes and blank spacer rows are ordinary rows whose
first column carries the text and whose other cells are empty strings.
Warnings are kept out of `rows`, but every exported form (records, CSV,
text, DataFrame) ends with them so a degraded result is never exported
unflagged.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Any, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import pandas as pd


Cell = str | int | float


@dataclass(frozen=True)
class ResultTable:
    """
    Immutable result table.

    Attributes:
        title: Human-readable analysis title
        columns: Column names, in display order
        rows: Rows, each a {column: value} mapping with every column present
        warnings: Non-fatal issues (skipped series, degraded inputs, ...)
    """
    title: str
    columns: tuple[str, ...]
    rows: tuple[dict[str, Cell], ...]
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> list[Cell]:
        """All values of one column, in row order."""
        if name not in self.columns:
            raise KeyError(f"Unknown column {name!r}. Available: {list(self.columns)}")
        return [row[name] for row in self.rows]

    def find(self, first_cell: str) -> dict[str, Cell] | None:
        """First row whose leading cell (stripped) equals first_cell."""
        lead = self.columns[0]
        for row in self.rows:
            if str(row[lead]).strip() == first_cell:
                return row
        return None

    def warning_rows(self) -> list[dict[str, Cell]]:
        """One "Warning: ..." note row per warning, for exported forms."""
        lead = self.columns[0]
        return [
            {c: (f"Warning: {w}" if c == lead else "") for c in self.columns}
            for w in self.warnings
        ]

    def to_records(self) -> list[dict[str, Cell]]:
        """Rows as plain dicts, followed by the warning rows."""
        return [dict(row) for row in self.rows] + self.warning_rows()

    def to_csv(self, delimiter: str = ',') -> str:
        """Render as CSV text (header row first, warning rows last)."""
        buf = io.StringIO()
        writer = csv.DictWriter(
            buf, fieldnames=list(self.columns), delimiter=delimiter,
            lineterminator='\n',
        )
        writer.writeheader()
        writer.writerows(self.to_records())
        return buf.getvalue()

    def to_text(self) -> str:
        """Render as a fixed-width plain-text table."""
        widths = [len(c) for c in self.columns]
        for row in self.rows:
            for i, c in enumerate(self.columns):
                widths[i] = max(widths[i], len(str(row[c])))

        lines = [self.title, "=" * max(len(self.title), sum(widths) + 2 * len(widths))]
        lines.append("  ".join(c.ljust(w) for c, w in zip(self.columns, widths)))
        lines.append("-" * (sum(widths) + 2 * (len(widths) - 1)))
        for row in self.rows:
            lines.append(
                "  ".join(str(row[c]).ljust(w) for c, w in zip(self.columns, widths)).rstrip()
            )
        for w in self.warnings:
            lines.append(f"Warning: {w}")
        return "\n".join(lines)

    def to_dataframe(self) -> 'pd.DataFrame':
        """Convert to a pandas DataFrame (requires pandas)."""
        import pandas as pd
        return pd.DataFrame(self.to_records(), columns=list(self.columns))


class TableBuilder:
    """
    Accumulates rows for a ResultTable.

    Missing cells are filled with "" so every row carries every column.
    """

    def __init__(self, title: str, columns: list[str] | tuple[str, ...]):
        self._title = title
        self._columns = tuple(columns)
        self._rows: list[dict[str, Cell]] = []
        self._warnings: list[str] = []

    def add(self, *values: Cell, **named: Cell) -> None:
        """Append a row from positional values and/or column keywords."""
        if len(values) > len(self._columns):
            raise ValueError(
                f"Row has {len(values)} values but table has {len(self._columns)} columns"
            )
        row: dict[str, Cell] = {c: "" for c in self._columns}
        for col, val in zip(self._columns, values):
            row[col] = val
        for col, val in named.items():
            if col not in row:
                raise KeyError(f"Unknown column {col!r}")
            row[col] = val
        self._rows.append(row)

    def note(self, text: str) -> None:
        """Append a header/note row (text in the first column)."""
        self.add(text)

    def blank(self) -> None:
        self.add()

    def warn(self, message: str) -> None:
        if message not in self._warnings:
            self._warnings.append(message)

    def extend_warnings(self, messages) -> None:
        for m in messages:
            self.warn(m)

    def build(self) -> ResultTable:
        return ResultTable(
            title=self._title,
            columns=self._columns,
            rows=tuple(self._rows),
            warnings=tuple(self._warnings),
        )


# =====================================================================
# Formatting helpers
# =====================================================================


def format_p_value(p: float | None) -> str:
    """'< 0.0001' below 1e-4, 'N/A' for NaN/None, else four decimals."""
    if p is None or np.isnan(p):
        return "N/A"
    if p < 0.0001:
        return "< 0.0001"
    return f"{p:.4f}"


def significance_stars(p: float | None) -> str:
    """Return significance code for a p-value."""
    if p is None or np.isnan(p):
        return "-"
    if p < 0.001:
        return "***"
    if p < 0.01:
        return "**"
    if p < 0.05:
        return "*"
    return "ns"


def fmt(x: Any, digits: int = 4) -> str:
    """Fixed-point formatting that tolerates inf/NaN."""
    if x is None:
        return "-"
    x = float(x)
    if np.isnan(x):
        return "N/A"
    if np.isinf(x):
        return "Inf" if x > 0 else "-Inf"
    return f"{x:.{digits}f}"
