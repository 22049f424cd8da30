"""Unit tests for the batch CSV writer."""

import pandas as pd
import pytest

from rainwise.reports import CSVResultWriter
from rainwise.reports.csv import OutputColumns


class TestCSVResultWriter:
    """Tests for CSVResultWriter."""

    def test_write(self, mumbai_input, mumbai_result, tmp_path):
        """Test one row per assessment with fixed column order."""
        output_path = tmp_path / "out" / "results.csv"

        written = CSVResultWriter().write([(mumbai_input, mumbai_result)], output_path)

        assert written == output_path
        df = pd.read_csv(output_path, keep_default_na=False)
        assert list(df.columns) == OutputColumns.final_output_order()
        assert len(df) == 1

        row = df.iloc[0]
        assert row["location"] == "Mumbai, Maharashtra"
        assert row["building_type"] == "residential"
        assert row["harvested_water_l_yr"] == 306000
        assert row["structure_type"] == "Pit"
        assert row["length_m"] == 14.0
        assert row["estimated_cost"] == 7500
        assert row["payback_period_years"] == 0.5

    def test_rows_keep_order(self, mumbai_input, mumbai_result, tmp_path):
        """Test rows are written in input order."""
        delhi_input = mumbai_input.model_copy(update={"location": "Delhi"})

        df = CSVResultWriter().to_dataframe(
            [(mumbai_input, mumbai_result), (delhi_input, mumbai_result)]
        )

        assert df["location"].tolist() == ["Mumbai, Maharashtra", "Delhi"]

    def test_empty_rows(self, tmp_path):
        """Test empty input is rejected."""
        with pytest.raises(ValueError, match="results list is empty"):
            CSVResultWriter().write([], tmp_path / "results.csv")
