"""
Tests for ResultTable, TableBuilder and the formatting helpers.
"""

import pytest

from labstats.core.table import (
    ResultTable,
    TableBuilder,
    fmt,
    format_p_value,
    significance_stars,
)


class TestFormatting:

    @pytest.mark.parametrize("p, expected", [
        (0.00001, "< 0.0001"),
        (0.0001, "0.0001"),
        (0.04321, "0.0432"),
        (1.0, "1.0000"),
        (float('nan'), "N/A"),
        (None, "N/A"),
    ])
    def test_format_p_value(self, p, expected):
        assert format_p_value(p) == expected

    @pytest.mark.parametrize("p, expected", [
        (0.0005, "***"),
        (0.005, "**"),
        (0.03, "*"),
        (0.05, "ns"),
        (0.5, "ns"),
        (float('nan'), "-"),
    ])
    def test_significance_stars(self, p, expected):
        assert significance_stars(p) == expected

    def test_fmt(self):
        assert fmt(1.23456) == "1.2346"
        assert fmt(2.0, 1) == "2.0"
        assert fmt(None) == "-"
        assert fmt(float('nan')) == "N/A"
        assert fmt(float('inf')) == "Inf"
        assert fmt(float('-inf')) == "-Inf"


class TestTableBuilder:

    def _table(self) -> ResultTable:
        builder = TableBuilder("Demo", ["Source", "SS", "df"])
        builder.note("Header")
        builder.add("Between", "1.0000", "2")
        builder.blank()
        builder.add("Within", df="6")
        builder.warn("careful")
        builder.warn("careful")
        return builder.build()

    def test_every_row_has_every_column(self):
        table = self._table()
        assert len(table) == 4
        for row in table.rows:
            assert set(row) == {"Source", "SS", "df"}
        assert table.rows[0] == {"Source": "Header", "SS": "", "df": ""}
        assert table.rows[3]["SS"] == ""

    def test_warnings_deduplicated(self):
        assert self._table().warnings == ("careful",)

    def test_too_many_values(self):
        builder = TableBuilder("Demo", ["a"])
        with pytest.raises(ValueError):
            builder.add(1, 2)

    def test_unknown_keyword_column(self):
        builder = TableBuilder("Demo", ["a"])
        with pytest.raises(KeyError):
            builder.add(b=1)


class TestResultTable:

    def _table(self) -> ResultTable:
        builder = TableBuilder("Demo", ["Source", "F"])
        builder.add("  Between", "4.5000")
        builder.add("Within", "")
        return builder.build()

    def test_column(self):
        assert self._table().column("F") == ["4.5000", ""]
        with pytest.raises(KeyError):
            self._table().column("p")

    def test_find_strips_indent(self):
        row = self._table().find("Between")
        assert row["F"] == "4.5000"
        assert self._table().find("Total") is None

    def test_to_csv(self):
        lines = self._table().to_csv().splitlines()
        assert lines[0] == "Source,F"
        assert lines[1] == "  Between,4.5000"

    def test_to_text_contains_title_and_cells(self):
        text = self._table().to_text()
        assert text.splitlines()[0] == "Demo"
        assert "4.5000" in text

    def test_to_records_are_copies(self):
        table = self._table()
        records = table.to_records()
        records[0]["F"] = "changed"
        assert table.rows[0]["F"] == "4.5000"

    def test_warnings_exported(self):
        builder = TableBuilder("Demo", ["Source", "F"])
        builder.add("Between", "4.5000")
        builder.warn("no raw replicates for 'x'")
        table = builder.build()
        assert len(table) == 1
        records = table.to_records()
        assert records[-1] == {"Source": "Warning: no raw replicates for 'x'", "F": ""}
        lines = table.to_csv().splitlines()
        assert lines[-1] == "Warning: no raw replicates for 'x',"

    def test_to_dataframe(self):
        pd = pytest.importorskip("pandas")
        df = self._table().to_dataframe()
        assert isinstance(df, pd.DataFrame)
        assert list(df.columns) == ["Source", "F"]
        assert df.shape == (2, 2)
