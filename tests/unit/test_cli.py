"""Unit tests for the command line interface."""

import json

import pandas as pd
import pytest
from typer.testing import CliRunner

from rainwise.cli import app, load_forms
from rainwise.config import ReportConfig

runner = CliRunner()

MUMBAI_ARGS = [
    "assess",
    "--location",
    "Mumbai, Maharashtra",
    "--roof-area",
    "150",
    "--dwellers",
    "4",
    "--open-space",
    "50",
    "--building-type",
    "residential",
]


@pytest.fixture(autouse=True)
def no_logging_setup(mocker):
    """Leave the root logger to pytest."""
    mocker.patch("rainwise.cli.configure_logging")


class TestAssessCommand:
    """Tests for `rainwise assess`."""

    def test_text_report(self):
        """Test the plain text report is printed."""
        result = runner.invoke(app, MUMBAI_ARGS)

        assert result.exit_code == 0
        assert "Rainwater Harvesting Assessment Report" in result.stdout
        assert "Annual Harvesting Potential: 306,000 liters" in result.stdout
        assert "Recommended Structure: Pit" in result.stdout

    def test_json_output(self):
        """Test JSON output with camelCase fields."""
        result = runner.invoke(app, [*MUMBAI_ARGS, "--json"])

        assert result.exit_code == 0
        payload = json.loads(result.stdout)
        assert payload["input"]["location"] == "Mumbai, Maharashtra"
        assert payload["result"]["harvestedWater"] == 306000
        assert payload["result"]["paybackPeriod"] == 0.5

    def test_pdf_written(self, tmp_path):
        """Test --pdf writes the report to the given file."""
        output_path = tmp_path / "report.pdf"

        result = runner.invoke(app, [*MUMBAI_ARGS, "--pdf", str(output_path)])

        assert result.exit_code == 0
        assert output_path.read_bytes().startswith(b"%PDF")

    def test_pdf_into_directory(self, tmp_path):
        """Test --pdf with a directory uses the default report filename."""
        result = runner.invoke(app, [*MUMBAI_ARGS, "--pdf", str(tmp_path)])

        assert result.exit_code == 0
        written = list(tmp_path.glob("RainWise_Assessment_Mumbai__Maharashtra_*.pdf"))
        assert len(written) == 1

    def test_invalid_roof_area(self):
        """Test validation messages and exit code 1."""
        args = [*MUMBAI_ARGS]
        args[args.index("--roof-area") + 1] = "5"

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Invalid Roof Area" in result.output

    def test_non_finite_roof_area(self):
        """Test a NaN roof area is reported instead of crashing."""
        args = [*MUMBAI_ARGS]
        args[args.index("--roof-area") + 1] = "nan"

        result = runner.invoke(app, args)

        assert result.exit_code == 1
        assert "Invalid Value" in result.output

    def test_save_pdf_uses_output_dir(self, tmp_path, monkeypatch):
        """Test --save-pdf writes under the configured report directory."""
        output_dir = tmp_path / "reports"
        monkeypatch.setattr(
            "rainwise.cli.DEFAULT_REPORT_CONFIG", ReportConfig(output_dir=output_dir)
        )

        result = runner.invoke(app, [*MUMBAI_ARGS, "--save-pdf"])

        assert result.exit_code == 0
        written = list(output_dir.glob("RainWise_Assessment_Mumbai__Maharashtra_*.pdf"))
        assert len(written) == 1
        assert written[0].read_bytes().startswith(b"%PDF")


class TestBatchCommand:
    """Tests for `rainwise batch`."""

    def test_batch(self, tmp_path):
        """Test valid rows are assessed and invalid rows skipped."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text(
            "location,roofArea,dwellers,openSpace,buildingType,waterUsage\n"
            "\"Mumbai, Maharashtra\",150,4,50,residential,150\n"
            "Pune,5,2,10,residential,150\n"
            "Delhi,200,many,150,commercial,150\n"
        )
        output_csv = tmp_path / "results.csv"

        result = runner.invoke(app, ["batch", str(input_csv), str(output_csv)])

        assert result.exit_code == 0
        df = pd.read_csv(output_csv)
        assert df["location"].tolist() == ["Mumbai, Maharashtra"]
        assert df["harvested_water_l_yr"].tolist() == [306000]

    def test_non_finite_and_oversized_rows_skipped(self, tmp_path):
        """Test bad numbers skip their row without losing the valid ones."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text(
            "location,roof_area,building_type\n"
            "Mumbai,150,residential\n"
            "Delhi,nan,residential\n"
            "Pune,inf,residential\n"
            "Chennai,1e306,residential\n"
        )
        output_csv = tmp_path / "results.csv"

        result = runner.invoke(app, ["batch", str(input_csv), str(output_csv)])

        assert result.exit_code == 0
        df = pd.read_csv(output_csv)
        assert df["location"].tolist() == ["Mumbai"]

    def test_no_valid_rows(self, tmp_path):
        """Test exit code 1 when every row is invalid."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text("location,roof_area,building_type\nPune,5,residential\n")

        result = runner.invoke(app, ["batch", str(input_csv), str(tmp_path / "results.csv")])

        assert result.exit_code == 1
        assert not (tmp_path / "results.csv").exists()

    def test_missing_columns(self, tmp_path):
        """Test exit code 1 when required columns are absent."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text("location,roof_area\nPune,50\n")

        result = runner.invoke(app, ["batch", str(input_csv), str(tmp_path / "results.csv")])

        assert result.exit_code == 1


class TestLoadForms:
    """Tests for load_forms()."""

    def test_snake_case_columns_and_defaults(self, tmp_path):
        """Test snake_case headers and empty cells taking form defaults."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text(
            "location,roof_area,building_type,dwellers,water_usage\nPune,50,residential,,\n"
        )

        forms = load_forms(input_csv)

        assert len(forms) == 1
        row_number, form = forms[0]
        assert row_number == 1
        assert form.roof_area == 50.0
        assert form.dwellers == 1
        assert form.water_usage == 150.0

    def test_missing_columns_named(self, tmp_path):
        """Test the error names every missing required column."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text("location\nPune\n")

        with pytest.raises(ValueError, match="roof_area, building_type"):
            load_forms(input_csv)

    def test_unparseable_row(self, tmp_path):
        """Test rows with bad values are returned as None."""
        input_csv = tmp_path / "properties.csv"
        input_csv.write_text("location,roofArea,buildingType\nPune,lots,residential\n")

        assert load_forms(input_csv) == [(1, None)]


def test_locations_command():
    """Test the lookup table listing."""
    result = runner.invoke(app, ["locations"])

    assert result.exit_code == 0
    assert "mumbai" in result.stdout
    assert "2400 mm" in result.stdout
    assert len(result.stdout.strip().splitlines()) == 20
