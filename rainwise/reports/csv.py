"""CSV output for batches of assessments.

Flattens each (input, result) pair into one row with a fixed column order so
that batch runs can be compared and loaded into spreadsheets.
"""

from pathlib import Path

import pandas as pd

from rainwise.models.domain import AssessmentInput, AssessmentResult


class OutputColumns:
    """Column names in the batch results CSV."""

    LOCATION = "location"
    BUILDING_TYPE = "building_type"
    ROOF_AREA = "roof_area_m2"
    DWELLERS = "dwellers"
    OPEN_SPACE = "open_space_m2"
    WATER_USAGE = "water_usage_l_person_day"
    RAINFALL = "rainfall_mm"
    AQUIFER_DEPTH = "aquifer_depth_m"
    HARVESTED_WATER = "harvested_water_l_yr"
    STRUCTURE_TYPE = "structure_type"
    LENGTH = "length_m"
    WIDTH = "width_m"
    DEPTH = "depth_m"
    ESTIMATED_COST = "estimated_cost"
    WATER_SAVED = "water_saved_l_month"
    MONTHLY_SAVINGS = "monthly_savings"
    PAYBACK_PERIOD = "payback_period_years"
    NOTES = "notes"

    @classmethod
    def final_output_order(cls) -> list[str]:
        """Get the ordered list of columns for CSV output."""
        return [
            # Submitted attributes
            cls.LOCATION,
            cls.BUILDING_TYPE,
            cls.ROOF_AREA,
            cls.DWELLERS,
            cls.OPEN_SPACE,
            cls.WATER_USAGE,
            # Local conditions
            cls.RAINFALL,
            cls.AQUIFER_DEPTH,
            # Estimate
            cls.HARVESTED_WATER,
            cls.STRUCTURE_TYPE,
            cls.LENGTH,
            cls.WIDTH,
            cls.DEPTH,
            cls.ESTIMATED_COST,
            cls.WATER_SAVED,
            cls.MONTHLY_SAVINGS,
            cls.PAYBACK_PERIOD,
            cls.NOTES,
        ]


class CSVResultWriter:
    """Writes assessment inputs and results to CSV, one row per property."""

    media_type = "text/csv"

    def write(
        self, rows: list[tuple[AssessmentInput, AssessmentResult]], output_path: Path
    ) -> Path:
        """Write assessments to a CSV file.

        Args:
            rows: (input, result) pairs in output order
            output_path: Path where the CSV file should be written

        Returns:
            Path to the written CSV file

        Raises:
            ValueError: If rows is empty
        """
        if not rows:
            raise ValueError("Cannot write CSV: results list is empty")

        df = self.to_dataframe(rows)

        output_path.parent.mkdir(parents=True, exist_ok=True)
        df.to_csv(output_path, index=False)

        return output_path

    def to_dataframe(self, rows: list[tuple[AssessmentInput, AssessmentResult]]) -> pd.DataFrame:
        df = pd.DataFrame([self._to_row(data, result) for data, result in rows])
        return df[OutputColumns.final_output_order()]

    def _to_row(self, data: AssessmentInput, result: AssessmentResult) -> dict:
        return {
            OutputColumns.LOCATION: data.location,
            OutputColumns.BUILDING_TYPE: data.building_type.value,
            OutputColumns.ROOF_AREA: data.roof_area,
            OutputColumns.DWELLERS: data.dwellers,
            OutputColumns.OPEN_SPACE: data.open_space,
            OutputColumns.WATER_USAGE: data.water_usage,
            OutputColumns.RAINFALL: result.rainfall,
            OutputColumns.AQUIFER_DEPTH: result.aquifer_depth,
            OutputColumns.HARVESTED_WATER: result.harvested_water,
            OutputColumns.STRUCTURE_TYPE: result.structure_type.value,
            OutputColumns.LENGTH: result.dimensions.length,
            OutputColumns.WIDTH: result.dimensions.width,
            OutputColumns.DEPTH: result.dimensions.depth,
            OutputColumns.ESTIMATED_COST: result.estimated_cost,
            OutputColumns.WATER_SAVED: result.water_saved,
            OutputColumns.MONTHLY_SAVINGS: result.monthly_savings,
            OutputColumns.PAYBACK_PERIOD: result.payback_period,
            OutputColumns.NOTES: data.notes,
        }
