"""Tests for the table model and response normalizer."""

from sheet_viewer.data.table import Table, normalize_response


class TestNormalizeResponse:
    def test_header_and_rows_split(self):
        table = normalize_response({"range": "Sheet1!A1:B2", "values": [["A", "B"], ["1", "2"]]})

        assert table.range == "Sheet1!A1:B2"
        assert table.header == ("A", "B")
        assert table.rows == (("1", "2"),)
        assert not table.is_empty

    def test_missing_values_defaults_to_empty(self):
        table = normalize_response({"range": "Sheet1!A1:Z1000"})

        assert table.values == ()
        assert table.is_empty
        assert table.header == ()
        assert table.rows == ()

    def test_none_response(self):
        table = normalize_response(None)

        assert table.range == ""
        assert table.is_empty

    def test_ragged_rows_kept_as_is(self):
        table = normalize_response({"range": "r", "values": [["A", "B", "C"], ["1"], ["1", "2", "3", "4"]]})

        assert table.rows == (("1",), ("1", "2", "3", "4"))

    def test_cell_types_pass_through(self):
        table = normalize_response({"range": "r", "values": [["n", "flag"], [3, True]]})

        assert table.rows[0] == (3, True)


class TestToDataFrame:
    def test_pads_short_rows_and_names_extra_columns(self):
        table = Table(range="r", values=(("A", "B"), ("1",), ("1", "2", "3")))

        df = table.to_dataframe()

        assert list(df.columns) == ["A", "B", "Column 3"]
        assert df.iloc[0].tolist() == ["1", "", ""]
        assert df.iloc[1].tolist() == ["1", "2", "3"]

    def test_empty_table(self):
        assert Table(range="r").to_dataframe().empty

    def test_header_only(self):
        df = Table(range="r", values=(("A", "B"),)).to_dataframe()

        assert list(df.columns) == ["A", "B"]
        assert len(df) == 0
